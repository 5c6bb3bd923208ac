"""ManifestWork custom resource model."""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

from hypershift_deployment_manager.integrations.kubernetes.constants import (
    MANIFESTWORK_API_VERSION,
    MANIFESTWORK_KIND,
)
from hypershift_deployment_manager.integrations.kubernetes.models.base import (
    Condition,
    K8sEntityBase,
    _parse_conditions,
)

DeletePropagationPolicy = Literal["Foreground", "Orphan", "SelectivelyOrphan"]


class Manifest(BaseModel):
    """One serialized resource inside ``spec.workload.manifests``."""

    model_config = ConfigDict(extra="forbid")

    object: dict[str, Any] = Field(description="Full resource body with apiVersion and kind")

    @property
    def kind(self) -> str:
        return str(self.object.get("kind", ""))

    @property
    def api_version(self) -> str:
        return str(self.object.get("apiVersion", ""))

    @property
    def name(self) -> str:
        return str((self.object.get("metadata") or {}).get("name", ""))

    @property
    def namespace(self) -> str | None:
        return (self.object.get("metadata") or {}).get("namespace")


class DeleteOption(BaseModel):
    """``spec.deleteOption`` of a ManifestWork."""

    model_config = ConfigDict(extra="ignore")

    propagation_policy: DeletePropagationPolicy = Field(
        default="Foreground",
        description="How deleting the ManifestWork treats the applied resources",
    )


class ManifestWork(K8sEntityBase):
    """Manifests to apply on a managed cluster, plus their reported status."""

    _entity_name: ClassVar[str] = "manifestwork"

    manifests: list[Manifest] = Field(default_factory=list, description="Workload manifests")
    delete_option: DeleteOption | None = Field(default=None, description="Delete option")
    conditions: list[Condition] = Field(default_factory=list, description="Status conditions")

    @classmethod
    def from_k8s_object(cls, obj: dict[str, Any]) -> ManifestWork:
        """Create from a ManifestWork CRD dict."""
        spec: dict[str, Any] = obj.get("spec") or {}
        status: dict[str, Any] = obj.get("status") or {}
        workload: dict[str, Any] = spec.get("workload") or {}
        delete_option: dict[str, Any] | None = spec.get("deleteOption")

        return cls(
            **cls._metadata_kwargs(obj),
            manifests=[Manifest(object=m) for m in workload.get("manifests") or []],
            delete_option=(
                DeleteOption(
                    propagation_policy=delete_option.get("propagationPolicy", "Foreground")
                )
                if delete_option
                else None
            ),
            conditions=_parse_conditions(status),
        )

    def to_k8s_object(self) -> dict[str, Any]:
        """Render the desired state as a request body (status is never sent)."""
        spec: dict[str, Any] = {
            "workload": {"manifests": [m.object for m in self.manifests]},
        }
        if self.delete_option is not None:
            spec["deleteOption"] = {"propagationPolicy": self.delete_option.propagation_policy}

        return {
            "apiVersion": MANIFESTWORK_API_VERSION,
            "kind": MANIFESTWORK_KIND,
            "metadata": self._metadata_dict(),
            "spec": spec,
        }
