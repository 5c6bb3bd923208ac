"""Unit tests for the ManifestWork model."""

from __future__ import annotations

import pytest

from hypershift_deployment_manager.integrations.kubernetes.models import (
    DeleteOption,
    Manifest,
    ManifestWork,
)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestManifest:
    """Test Manifest accessors."""

    def test_accessors(self) -> None:
        manifest = Manifest(
            object={
                "apiVersion": "v1",
                "kind": "Secret",
                "metadata": {"name": "pull-secret", "namespace": "mc-1"},
            }
        )

        assert manifest.kind == "Secret"
        assert manifest.api_version == "v1"
        assert manifest.name == "pull-secret"
        assert manifest.namespace == "mc-1"

    def test_missing_metadata(self) -> None:
        manifest = Manifest(object={})

        assert manifest.kind == ""
        assert manifest.name == ""
        assert manifest.namespace is None


@pytest.mark.unit
@pytest.mark.kubernetes
class TestManifestWork:
    """Test ManifestWork model."""

    def test_from_k8s_object(self) -> None:
        work = ManifestWork.from_k8s_object(
            {
                "metadata": {
                    "name": "hd-1-abc123",
                    "namespace": "mc-1",
                    "deletionTimestamp": "2026-01-01T00:00:00Z",
                },
                "spec": {
                    "workload": {"manifests": [{"kind": "HostedCluster"}]},
                    "deleteOption": {"propagationPolicy": "Orphan"},
                },
                "status": {"conditions": [{"type": "Applied", "status": "True"}]},
            }
        )

        assert work.name == "hd-1-abc123"
        assert work.being_deleted
        assert [m.kind for m in work.manifests] == ["HostedCluster"]
        assert work.delete_option == DeleteOption(propagation_policy="Orphan")
        assert [c.type for c in work.conditions] == ["Applied"]

    def test_from_k8s_object_without_status(self) -> None:
        work = ManifestWork.from_k8s_object({"metadata": {"name": "w"}})

        assert work.manifests == []
        assert work.delete_option is None
        assert work.conditions == []

    def test_to_k8s_object(self) -> None:
        work = ManifestWork(
            name="hd-1-abc123",
            namespace="mc-1",
            annotations={"a": "b"},
            manifests=[Manifest(object={"kind": "NodePool"})],
        )

        assert work.to_k8s_object() == {
            "apiVersion": "work.open-cluster-management.io/v1",
            "kind": "ManifestWork",
            "metadata": {"name": "hd-1-abc123", "namespace": "mc-1", "annotations": {"a": "b"}},
            "spec": {"workload": {"manifests": [{"kind": "NodePool"}]}},
        }

    def test_to_k8s_object_with_delete_option(self) -> None:
        work = ManifestWork(
            name="w", namespace="mc-1", delete_option=DeleteOption(propagation_policy="Orphan")
        )

        assert work.to_k8s_object()["spec"]["deleteOption"] == {"propagationPolicy": "Orphan"}

    def test_status_never_rendered(self) -> None:
        work = ManifestWork.from_k8s_object(
            {"metadata": {"name": "w"}, "status": {"conditions": [{"type": "Applied"}]}}
        )

        assert "status" not in work.to_k8s_object()
