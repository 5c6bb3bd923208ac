"""Base models shared by the HypershiftDeployment and ManifestWork models."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

ConditionStatus = Literal["True", "False", "Unknown"]


class K8sEntityBase(BaseModel):
    """Object metadata common to all custom resources handled here."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(description="Resource name")
    namespace: str | None = Field(default=None, description="Resource namespace")
    uid: str | None = Field(default=None, description="Kubernetes UID")
    resource_version: str | None = Field(default=None, description="Resource version")
    creation_timestamp: str | None = Field(default=None, description="Creation time")
    deletion_timestamp: str | None = Field(default=None, description="Deletion time")
    labels: dict[str, str] | None = Field(default=None, description="Resource labels")
    annotations: dict[str, str] | None = Field(default=None, description="Resource annotations")

    _entity_name: ClassVar[str] = "entity"

    @property
    def being_deleted(self) -> bool:
        """Whether the API server has already marked this object for deletion."""
        return bool(self.deletion_timestamp)

    @classmethod
    def _metadata_kwargs(cls, obj: dict[str, Any]) -> dict[str, Any]:
        metadata: dict[str, Any] = obj.get("metadata") or {}
        return {
            "name": metadata.get("name", ""),
            "namespace": metadata.get("namespace"),
            "uid": metadata.get("uid"),
            "resource_version": metadata.get("resourceVersion"),
            "creation_timestamp": _get_timestamp(metadata.get("creationTimestamp")),
            "deletion_timestamp": _get_timestamp(metadata.get("deletionTimestamp")),
            "labels": metadata.get("labels") or None,
            "annotations": metadata.get("annotations") or None,
        }

    def _metadata_dict(self) -> dict[str, Any]:
        metadata: dict[str, Any] = {"name": self.name}
        if self.namespace:
            metadata["namespace"] = self.namespace
        if self.labels:
            metadata["labels"] = dict(self.labels)
        if self.annotations:
            metadata["annotations"] = dict(self.annotations)
        if self.resource_version:
            metadata["resourceVersion"] = self.resource_version
        return metadata


class Condition(BaseModel):
    """A typed status entry, as found in ``status.conditions``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str = Field(description="Condition type")
    status: ConditionStatus = Field(default="Unknown", description="True, False or Unknown")
    reason: str = Field(default="", description="Machine-readable reason")
    message: str = Field(default="", description="Human-readable message")
    last_transition_time: str | None = Field(
        default=None,
        alias="lastTransitionTime",
        description="When the status last changed",
    )

    @classmethod
    def from_k8s_object(cls, obj: dict[str, Any]) -> Condition:
        """Create from a ``status.conditions`` entry dict."""
        return cls(
            type=obj.get("type", ""),
            status=obj.get("status", "Unknown"),
            reason=obj.get("reason") or "",
            message=obj.get("message") or "",
            last_transition_time=_get_timestamp(obj.get("lastTransitionTime")),
        )

    def to_k8s_object(self) -> dict[str, Any]:
        """Render as a ``status.conditions`` entry dict."""
        out: dict[str, Any] = {
            "type": self.type,
            "status": self.status,
            "reason": self.reason,
            "message": self.message,
        }
        if self.last_transition_time:
            out["lastTransitionTime"] = self.last_transition_time
        return out


def now_timestamp() -> str:
    """Current time in the RFC 3339 form the API server uses."""
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def _get_timestamp(obj: Any) -> str | None:
    """Extract ISO timestamp string from a datetime or string."""
    if obj is None:
        return None
    if isinstance(obj, str):
        return obj
    if isinstance(obj, datetime):
        return obj.isoformat()
    return str(obj)


def _parse_conditions(status: dict[str, Any]) -> list[Condition]:
    return [Condition.from_k8s_object(c) for c in status.get("conditions") or []]
