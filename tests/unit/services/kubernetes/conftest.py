"""Shared fixtures for Kubernetes service tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from kubernetes.client import ApiException

from hypershift_deployment_manager.integrations.kubernetes.client import KubernetesClient
from hypershift_deployment_manager.integrations.kubernetes.models import HypershiftDeployment


def api_error(status: int, reason: str = "") -> ApiException:
    """Build an ApiException as raised by the kubernetes client."""
    return ApiException(status=status, reason=reason or f"HTTP {status}")


def make_hyd_dict(
    name: str = "hd-1",
    namespace: str = "clusters",
    *,
    infra_id: str = "abc123",
    target_managed_cluster: str | None = None,
    override: str | None = None,
    node_pools: list[str] | None = None,
    conditions: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build a HypershiftDeployment object as returned by CustomObjectsApi."""
    spec: dict[str, Any] = {
        "infraID": infra_id,
        "hostedClusterSpec": {
            "pullSecret": {"name": "pull-secret"},
            "release": {"image": "quay.io/openshift-release-dev/ocp-release:4.10.15-x86_64"},
        },
        "nodePools": [
            {"name": pool, "spec": {"replicas": 2, "platform": {"type": "AWS"}}}
            for pool in (node_pools if node_pools is not None else ["np-1"])
        ],
    }
    if target_managed_cluster is not None:
        spec["targetManagedCluster"] = target_managed_cluster
    if override is not None:
        spec["override"] = override

    return {
        "apiVersion": "cluster.open-cluster-management.io/v1alpha1",
        "kind": "HypershiftDeployment",
        "metadata": {"name": name, "namespace": namespace, "resourceVersion": "100"},
        "spec": spec,
        "status": {"conditions": conditions or []},
    }


def make_hyd(**kwargs: Any) -> HypershiftDeployment:
    """Build a HypershiftDeployment model."""
    return HypershiftDeployment.from_k8s_object(make_hyd_dict(**kwargs))


def make_work_dict(
    name: str = "hd-1-abc123",
    namespace: str = "clusters",
    *,
    conditions: list[dict[str, Any]] | None = None,
    deletion_timestamp: str | None = None,
) -> dict[str, Any]:
    """Build a ManifestWork object as returned by CustomObjectsApi."""
    metadata: dict[str, Any] = {"name": name, "namespace": namespace, "resourceVersion": "7"}
    if deletion_timestamp:
        metadata["deletionTimestamp"] = deletion_timestamp
    return {
        "apiVersion": "work.open-cluster-management.io/v1",
        "kind": "ManifestWork",
        "metadata": metadata,
        "spec": {"workload": {"manifests": [{"apiVersion": "v1", "kind": "ConfigMap"}]}},
        "status": {"conditions": conditions or []},
    }


@pytest.fixture
def mock_k8s_client() -> MagicMock:
    """Create a mock Kubernetes client.

    API groups (``core_v1``, ``custom_objects``) are auto-created MagicMocks;
    exception translation is the real one so 404s become not-found errors.
    """
    mock_client = MagicMock()
    mock_client.default_namespace = "default"
    mock_client.timeout = 30
    mock_client.requeue_after = 20.0
    mock_client.translate_api_exception.side_effect = KubernetesClient.translate_api_exception
    return mock_client


@pytest.fixture
def pull_secret() -> MagicMock:
    """A V1Secret-like object for the pull secret."""
    secret = MagicMock()
    secret.metadata.name = "pull-secret"
    secret.metadata.namespace = "clusters"
    secret.metadata.labels = {"app": "hypershift"}
    secret.data = {".dockerconfigjson": "e30="}
    return secret
