"""Kubernetes service managers for HypershiftDeployment reconciliation."""

from hypershift_deployment_manager.services.kubernetes.base import K8sBaseManager
from hypershift_deployment_manager.services.kubernetes.credentials import (
    CredentialProjector,
    SecretSource,
)
from hypershift_deployment_manager.services.kubernetes.manifests import (
    HostedClusterSource,
    ManifestAssembler,
    NodePoolSource,
)
from hypershift_deployment_manager.services.kubernetes.manifestwork_manager import (
    ManifestWorkReconciler,
    MutateStrategy,
    NoOpMutateStrategy,
    ReconcileResult,
)
from hypershift_deployment_manager.services.kubernetes.naming import (
    ManifestWorkKey,
    resolve_manifestwork_key,
    resolve_target_cluster,
    scaffold_manifestwork,
)
from hypershift_deployment_manager.services.kubernetes.status import (
    set_status_condition,
    sync_manifestwork_status,
)

__all__ = [
    "CredentialProjector",
    "HostedClusterSource",
    "K8sBaseManager",
    "ManifestAssembler",
    "ManifestWorkKey",
    "ManifestWorkReconciler",
    "MutateStrategy",
    "NoOpMutateStrategy",
    "NodePoolSource",
    "ReconcileResult",
    "SecretSource",
    "resolve_manifestwork_key",
    "resolve_target_cluster",
    "scaffold_manifestwork",
    "set_status_condition",
    "sync_manifestwork_status",
]
