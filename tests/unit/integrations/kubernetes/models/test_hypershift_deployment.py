"""Unit tests for the HypershiftDeployment model."""

from __future__ import annotations

from typing import Any

import pytest

from hypershift_deployment_manager.integrations.kubernetes.models import (
    HypershiftDeployment,
)


def _hyd_object(**spec: Any) -> dict[str, Any]:
    return {
        "apiVersion": "cluster.open-cluster-management.io/v1alpha1",
        "kind": "HypershiftDeployment",
        "metadata": {
            "name": "hd-1",
            "namespace": "clusters",
            "uid": "u-1",
            "resourceVersion": "100",
            "labels": {"team": "a"},
        },
        "spec": spec,
        "status": {
            "phase": "Provisioning",
            "conditions": [{"type": "PlatformConfigured", "status": "True"}],
        },
    }


@pytest.mark.unit
@pytest.mark.kubernetes
class TestHypershiftDeployment:
    """Test HypershiftDeployment model."""

    def test_from_k8s_object(self) -> None:
        hyd = HypershiftDeployment.from_k8s_object(
            _hyd_object(
                infraID="abc123",
                targetManagedCluster="mc-1",
                override="DESTROY",
                hostedClusterSpec={"pullSecret": {"name": "ps"}},
                nodePools=[{"name": "np-1", "spec": {"replicas": 2}}, {"name": "np-2"}],
            )
        )

        assert hyd.name == "hd-1"
        assert hyd.namespace == "clusters"
        assert hyd.uid == "u-1"
        assert hyd.resource_version == "100"
        assert hyd.labels == {"team": "a"}
        assert hyd.infra_id == "abc123"
        assert hyd.target_managed_cluster == "mc-1"
        assert [p.name for p in hyd.node_pools] == ["np-1", "np-2"]
        assert hyd.node_pools[0].spec == {"replicas": 2}
        assert hyd.node_pools[1].spec == {}
        assert hyd.pull_secret_name == "ps"

    def test_empty_spec(self) -> None:
        hyd = HypershiftDeployment.from_k8s_object({"metadata": {"name": "hd-1"}})

        assert hyd.infra_id == ""
        assert hyd.target_managed_cluster == ""
        assert hyd.node_pools == []
        assert hyd.conditions == []
        assert hyd.pull_secret_name == ""
        assert not hyd.being_deleted

    @pytest.mark.parametrize(
        ("override", "expected"),
        [("DESTROY", True), ("destroy", True), ("", False), ("KEEP", False)],
    )
    def test_is_destroy_override(self, override: str, expected: bool) -> None:
        hyd = HypershiftDeployment.from_k8s_object(_hyd_object(override=override))
        assert hyd.is_destroy_override is expected

    def test_get_condition(self) -> None:
        hyd = HypershiftDeployment.from_k8s_object(_hyd_object())

        assert hyd.get_condition("PlatformConfigured").status == "True"
        assert hyd.get_condition("Missing") is None

    def test_status_dict_keeps_unmanaged_fields(self) -> None:
        hyd = HypershiftDeployment.from_k8s_object(_hyd_object())

        assert hyd.status_dict() == {
            "phase": "Provisioning",
            "conditions": [
                {"type": "PlatformConfigured", "status": "True", "reason": "", "message": ""}
            ],
        }

    def test_being_deleted(self) -> None:
        obj = _hyd_object()
        obj["metadata"]["deletionTimestamp"] = "2026-01-01T00:00:00Z"

        assert HypershiftDeployment.from_k8s_object(obj).being_deleted
