"""HypershiftDeployment and ManifestWork resource models."""

from hypershift_deployment_manager.integrations.kubernetes.models.base import (
    Condition,
    K8sEntityBase,
)
from hypershift_deployment_manager.integrations.kubernetes.models.hypershift_deployment import (
    HypershiftDeployment,
    NodePoolSpec,
)
from hypershift_deployment_manager.integrations.kubernetes.models.manifestwork import (
    DeleteOption,
    Manifest,
    ManifestWork,
)

__all__ = [
    "Condition",
    "DeleteOption",
    "HypershiftDeployment",
    "K8sEntityBase",
    "Manifest",
    "ManifestWork",
    "NodePoolSpec",
]
