"""HypershiftDeployment custom resource model.

HypershiftDeployments are read through ``CustomObjectsApi``, which returns
raw ``dict`` objects, so ``from_k8s_object`` walks dicts with ``.get()``.
The hosted-cluster and node-pool specs are kept as opaque dicts; only the
fields the reconciler needs are lifted into attributes.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from hypershift_deployment_manager.integrations.kubernetes.models.base import (
    Condition,
    K8sEntityBase,
    _parse_conditions,
)

INFRA_OVERRIDE_DESTROY = "DESTROY"


class NodePoolSpec(BaseModel):
    """One entry of ``spec.nodePools``."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(description="NodePool name")
    spec: dict[str, Any] = Field(default_factory=dict, description="NodePool spec")

    @classmethod
    def from_k8s_object(cls, obj: dict[str, Any]) -> NodePoolSpec:
        """Create from a ``spec.nodePools`` entry dict."""
        return cls(name=obj.get("name", ""), spec=obj.get("spec") or {})


class HypershiftDeployment(K8sEntityBase):
    """The deployment intent that owns a ManifestWork."""

    _entity_name: ClassVar[str] = "hypershift_deployment"

    infra_id: str = Field(default="", description="Infrastructure identifier")
    target_managed_cluster: str = Field(
        default="",
        description="Managed cluster receiving the ManifestWork (defaults to own namespace)",
    )
    override: str = Field(default="", description="Infrastructure override mode")
    hosted_cluster_spec: dict[str, Any] = Field(
        default_factory=dict,
        description="HostedCluster spec",
    )
    node_pools: list[NodePoolSpec] = Field(default_factory=list, description="NodePool specs")
    conditions: list[Condition] = Field(default_factory=list, description="Status conditions")
    raw_status: dict[str, Any] = Field(
        default_factory=dict,
        description="Status fields not managed by this model",
    )

    @property
    def pull_secret_name(self) -> str:
        """Name of the pull secret referenced by the hosted-cluster spec."""
        pull_secret = self.hosted_cluster_spec.get("pullSecret") or {}
        return str(pull_secret.get("name", ""))

    @property
    def is_destroy_override(self) -> bool:
        """Whether deleting the ManifestWork must orphan what it applied."""
        return self.override.upper() == INFRA_OVERRIDE_DESTROY

    def get_condition(self, condition_type: str) -> Condition | None:
        """Return the condition of the given type, if present."""
        for cond in self.conditions:
            if cond.type == condition_type:
                return cond
        return None

    @classmethod
    def from_k8s_object(cls, obj: dict[str, Any]) -> HypershiftDeployment:
        """Create from a HypershiftDeployment CRD dict."""
        spec: dict[str, Any] = obj.get("spec") or {}
        status: dict[str, Any] = obj.get("status") or {}

        return cls(
            **cls._metadata_kwargs(obj),
            infra_id=spec.get("infraID") or "",
            target_managed_cluster=spec.get("targetManagedCluster") or "",
            override=spec.get("override") or "",
            hosted_cluster_spec=spec.get("hostedClusterSpec") or {},
            node_pools=[NodePoolSpec.from_k8s_object(np) for np in spec.get("nodePools") or []],
            conditions=_parse_conditions(status),
            raw_status={k: v for k, v in status.items() if k != "conditions"},
        )

    def status_dict(self) -> dict[str, Any]:
        """Render the status sub-resource as a dict."""
        status = dict(self.raw_status)
        status["conditions"] = [c.to_k8s_object() for c in self.conditions]
        return status
