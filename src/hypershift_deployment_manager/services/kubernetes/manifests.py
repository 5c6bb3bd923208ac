"""ManifestWork payload assembly.

A payload is built from three manifest sources, always invoked in the same
order: the HostedCluster, one NodePool per ``spec.nodePools`` entry (in spec
order), then the credential secrets. Sources only append; nothing is
re-ordered or de-duplicated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from hypershift_deployment_manager.integrations.kubernetes.constants import (
    HOSTED_CLUSTER_KIND,
    HYPERSHIFT_API_VERSION,
    NODE_POOL_KIND,
)
from hypershift_deployment_manager.integrations.kubernetes.models import Manifest

if TYPE_CHECKING:
    from hypershift_deployment_manager.integrations.kubernetes.models import HypershiftDeployment
    from hypershift_deployment_manager.services.kubernetes.scaffold import Scaffolder


class ManifestSource(Protocol):
    """Appends zero or more manifests for a HypershiftDeployment to a payload."""

    def produce(self, hyd: HypershiftDeployment, payload: list[Manifest]) -> None: ...


def _typed(obj: dict[str, Any], kind: str, api_version: str) -> Manifest:
    body = {"apiVersion": api_version, "kind": kind}
    body.update({k: v for k, v in obj.items() if k not in ("apiVersion", "kind")})
    return Manifest(object=body)


class HostedClusterSource:
    """Appends the HostedCluster manifest."""

    def __init__(self, scaffolder: Scaffolder) -> None:
        self._scaffolder = scaffolder

    def produce(self, hyd: HypershiftDeployment, payload: list[Manifest]) -> None:
        hosted_cluster = self._scaffolder.hosted_cluster(hyd)
        payload.append(_typed(hosted_cluster, HOSTED_CLUSTER_KIND, HYPERSHIFT_API_VERSION))


class NodePoolSource:
    """Appends one NodePool manifest per ``spec.nodePools`` entry, in order."""

    def __init__(self, scaffolder: Scaffolder) -> None:
        self._scaffolder = scaffolder

    def produce(self, hyd: HypershiftDeployment, payload: list[Manifest]) -> None:
        for pool in hyd.node_pools:
            node_pool = self._scaffolder.node_pool(hyd, pool)
            payload.append(_typed(node_pool, NODE_POOL_KIND, HYPERSHIFT_API_VERSION))


class ManifestAssembler:
    """Composes the ManifestWork payload from its three sources.

    The credential source must already hold fetched secrets: it is the only
    source that depends on the API server, and assembly itself cannot fail.

    Example:
        >>> assembler = ManifestAssembler(
        ...     HostedClusterSource(scaffolder),
        ...     NodePoolSource(scaffolder),
        ...     projector.project(hyd),
        ... )
        >>> payload = assembler.assemble(hyd)
    """

    def __init__(
        self,
        hosted_cluster: ManifestSource,
        node_pools: ManifestSource,
        credentials: ManifestSource,
    ) -> None:
        self._hosted_cluster = hosted_cluster
        self._node_pools = node_pools
        self._credentials = credentials

    def assemble(self, hyd: HypershiftDeployment) -> list[Manifest]:
        """Build the ordered manifest payload."""
        payload: list[Manifest] = []
        self._hosted_cluster.produce(hyd, payload)
        self._node_pools.produce(hyd, payload)
        self._credentials.produce(hyd, payload)
        return payload
