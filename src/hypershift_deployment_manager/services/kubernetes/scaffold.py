"""Payload scaffolders for the HyperShift resources carried by a ManifestWork.

Scaffolders are pure: given a valid HypershiftDeployment they return plain
resource dicts and never raise. The manifest sources stamp ``apiVersion``
and ``kind`` onto whatever a scaffolder returns.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Protocol

from hypershift_deployment_manager.services.kubernetes.naming import resolve_target_cluster

if TYPE_CHECKING:
    from hypershift_deployment_manager.integrations.kubernetes.models import (
        HypershiftDeployment,
        NodePoolSpec,
    )


class Scaffolder(Protocol):
    """Builds the individual payload objects for a HypershiftDeployment."""

    def hosted_cluster(self, hyd: HypershiftDeployment) -> dict[str, Any]: ...

    def node_pool(self, hyd: HypershiftDeployment, pool: NodePoolSpec) -> dict[str, Any]: ...

    def secrets(self, hyd: HypershiftDeployment) -> list[dict[str, Any]]: ...


def scaffold_hosted_cluster(hyd: HypershiftDeployment) -> dict[str, Any]:
    """HostedCluster named after the HypershiftDeployment."""
    spec = copy.deepcopy(hyd.hosted_cluster_spec)
    spec["infraID"] = hyd.infra_id
    return {
        "metadata": {
            "name": hyd.name,
            "namespace": resolve_target_cluster(hyd),
        },
        "spec": spec,
    }


def scaffold_node_pool(hyd: HypershiftDeployment, pool: NodePoolSpec) -> dict[str, Any]:
    """NodePool attached to the HypershiftDeployment's HostedCluster."""
    spec = copy.deepcopy(pool.spec)
    spec["clusterName"] = hyd.name
    return {
        "metadata": {
            "name": pool.name,
            "namespace": resolve_target_cluster(hyd),
        },
        "spec": spec,
    }


def scaffold_secrets(hyd: HypershiftDeployment) -> list[dict[str, Any]]:
    """Credential secrets derived from the HypershiftDeployment alone.

    Nothing is derived today: the pull secret is always read from the hub by
    the credential projector.
    """
    return []


class DefaultScaffolder:
    """Scaffolder backed by the module-level scaffold functions."""

    def hosted_cluster(self, hyd: HypershiftDeployment) -> dict[str, Any]:
        return scaffold_hosted_cluster(hyd)

    def node_pool(self, hyd: HypershiftDeployment, pool: NodePoolSpec) -> dict[str, Any]:
        return scaffold_node_pool(hyd, pool)

    def secrets(self, hyd: HypershiftDeployment) -> list[dict[str, Any]]:
        return scaffold_secrets(hyd)
