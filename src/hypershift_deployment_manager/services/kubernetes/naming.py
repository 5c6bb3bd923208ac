"""ManifestWork naming and targeting.

The ManifestWork identity is a pure function of HypershiftDeployment fields,
so every reconcile pass re-derives the same object.
"""

from __future__ import annotations

from typing import NamedTuple

from hypershift_deployment_manager.integrations.kubernetes.constants import (
    CREATED_BY_ANNOTATION,
    NAMESPACE_NAME_SEPARATOR,
)
from hypershift_deployment_manager.integrations.kubernetes.exceptions import InvalidSpecError
from hypershift_deployment_manager.integrations.kubernetes.models import (
    DeleteOption,
    HypershiftDeployment,
    ManifestWork,
)


class ManifestWorkKey(NamedTuple):
    """Namespaced name of a ManifestWork."""

    name: str
    namespace: str

    def __str__(self) -> str:
        return f"{self.namespace}{NAMESPACE_NAME_SEPARATOR}{self.name}"


def resolve_target_cluster(hyd: HypershiftDeployment) -> str:
    """Managed cluster (and ManifestWork namespace) targeted by a HypershiftDeployment.

    Falls back to the HypershiftDeployment's own namespace when
    ``spec.targetManagedCluster`` is unset.
    """
    # TODO: resolve through ManagedClusterSet placement once cluster sets are supported
    if not hyd.target_managed_cluster:
        return hyd.namespace or ""
    return hyd.target_managed_cluster


def resolve_manifestwork_key(hyd: HypershiftDeployment) -> ManifestWorkKey:
    """Derive the ManifestWork name and namespace for a HypershiftDeployment.

    The infra ID is part of the name so that two HypershiftDeployments with
    the same name in different namespaces never share a ManifestWork.

    Raises:
        InvalidSpecError: If ``spec.infraID`` is empty or no target namespace resolves.
    """
    if not hyd.infra_id:
        raise InvalidSpecError(
            "hypershiftDeployment.Spec.InfraID is not set or rendered",
            resource_name=hyd.name,
            namespace=hyd.namespace,
        )
    target = resolve_target_cluster(hyd)
    if not target:
        raise InvalidSpecError(
            "hypershiftDeployment has neither a namespace nor Spec.TargetManagedCluster",
            resource_name=hyd.name,
            namespace=hyd.namespace,
        )
    return ManifestWorkKey(name=f"{hyd.name}-{hyd.infra_id}", namespace=target)


def created_by_value(hyd: HypershiftDeployment) -> str:
    """Value of the created-by annotation: ``<namespace>/<name>``."""
    return f"{hyd.namespace}{NAMESPACE_NAME_SEPARATOR}{hyd.name}"


def scaffold_manifestwork(hyd: HypershiftDeployment) -> ManifestWork:
    """Build an empty ManifestWork addressed to the HypershiftDeployment's target.

    In destroy-override mode the ManifestWork orphans what it applied, so
    deleting it leaves the hosted cluster resources in place.

    Raises:
        InvalidSpecError: If ``spec.infraID`` is empty or no target namespace resolves.
    """
    key = resolve_manifestwork_key(hyd)
    work = ManifestWork(
        name=key.name,
        namespace=key.namespace,
        annotations={CREATED_BY_ANNOTATION: created_by_value(hyd)},
    )
    if hyd.is_destroy_override:
        work.delete_option = DeleteOption(propagation_policy="Orphan")
    return work
