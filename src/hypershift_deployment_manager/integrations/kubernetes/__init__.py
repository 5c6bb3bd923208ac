"""Kubernetes integration - API client, configuration and resource models."""

from hypershift_deployment_manager.integrations.kubernetes.client import KubernetesClient
from hypershift_deployment_manager.integrations.kubernetes.config import (
    ClusterConfig,
    KubernetesDefaultsConfig,
    KubernetesPluginConfig,
    ReconcileConfig,
)
from hypershift_deployment_manager.integrations.kubernetes.exceptions import (
    CredentialFetchError,
    InvalidSpecError,
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesTimeoutError,
    KubernetesValidationError,
    StatusPatchError,
)

__all__ = [
    "ClusterConfig",
    "CredentialFetchError",
    "InvalidSpecError",
    "KubernetesAuthError",
    "KubernetesClient",
    "KubernetesConflictError",
    "KubernetesConnectionError",
    "KubernetesDefaultsConfig",
    "KubernetesError",
    "KubernetesNotFoundError",
    "KubernetesPluginConfig",
    "KubernetesTimeoutError",
    "KubernetesValidationError",
    "ReconcileConfig",
    "StatusPatchError",
]
