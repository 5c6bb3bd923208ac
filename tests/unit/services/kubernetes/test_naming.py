"""Unit tests for ManifestWork naming and targeting."""

from __future__ import annotations

import pytest

from hypershift_deployment_manager.integrations.kubernetes.constants import (
    CREATED_BY_ANNOTATION,
)
from hypershift_deployment_manager.integrations.kubernetes.exceptions import InvalidSpecError
from hypershift_deployment_manager.integrations.kubernetes.models import HypershiftDeployment
from hypershift_deployment_manager.services.kubernetes.naming import (
    ManifestWorkKey,
    resolve_manifestwork_key,
    resolve_target_cluster,
    scaffold_manifestwork,
)
from tests.unit.services.kubernetes.conftest import make_hyd


@pytest.mark.unit
@pytest.mark.kubernetes
class TestResolveTargetCluster:
    """Tests for resolve_target_cluster."""

    def test_defaults_to_own_namespace(self) -> None:
        """Without an override the HypershiftDeployment namespace is the target."""
        hyd = make_hyd(namespace="clusters")

        assert resolve_target_cluster(hyd) == "clusters"

    def test_uses_target_managed_cluster_override(self) -> None:
        """spec.targetManagedCluster wins over the namespace."""
        hyd = make_hyd(namespace="clusters", target_managed_cluster="local-cluster")

        assert resolve_target_cluster(hyd) == "local-cluster"

    def test_empty_override_falls_back(self) -> None:
        """An empty override string is treated as unset."""
        hyd = make_hyd(namespace="clusters", target_managed_cluster="")

        assert resolve_target_cluster(hyd) == "clusters"


@pytest.mark.unit
@pytest.mark.kubernetes
class TestResolveManifestWorkKey:
    """Tests for resolve_manifestwork_key."""

    def test_name_combines_name_and_infra_id(self) -> None:
        """Name is <name>-<infraID>, namespace is the target cluster."""
        hyd = make_hyd(name="hd-1", infra_id="abc123", target_managed_cluster="mc-1")

        key = resolve_manifestwork_key(hyd)

        assert key == ManifestWorkKey(name="hd-1-abc123", namespace="mc-1")
        assert str(key) == "mc-1/hd-1-abc123"

    def test_is_deterministic(self) -> None:
        """The same fields always give the same key."""
        first = resolve_manifestwork_key(make_hyd())
        second = resolve_manifestwork_key(make_hyd())

        assert first == second

    def test_same_name_different_namespace_is_unique(self) -> None:
        """Same-named deployments in different namespaces get different names."""
        a = make_hyd(name="hd", namespace="team-a", infra_id="hd-a1", target_managed_cluster="mc")
        b = make_hyd(name="hd", namespace="team-b", infra_id="hd-b2", target_managed_cluster="mc")

        assert resolve_manifestwork_key(a).name != resolve_manifestwork_key(b).name

    def test_empty_infra_id_raises(self) -> None:
        """A missing infraID is an invalid spec."""
        hyd = make_hyd(infra_id="")

        with pytest.raises(InvalidSpecError, match="InfraID is not set"):
            resolve_manifestwork_key(hyd)

    def test_no_namespace_and_no_target_raises(self) -> None:
        """Without a namespace or targetManagedCluster there is nowhere to put the ManifestWork."""
        hyd = HypershiftDeployment(name="hd-1", infra_id="abc123")

        with pytest.raises(InvalidSpecError, match="neither a namespace nor"):
            resolve_manifestwork_key(hyd)

    def test_target_without_namespace(self) -> None:
        """targetManagedCluster alone is enough to place the ManifestWork."""
        hyd = HypershiftDeployment(name="hd-1", infra_id="abc123", target_managed_cluster="mc-1")

        assert resolve_manifestwork_key(hyd) == ManifestWorkKey(
            name="hd-1-abc123", namespace="mc-1"
        )


@pytest.mark.unit
@pytest.mark.kubernetes
class TestScaffoldManifestWork:
    """Tests for scaffold_manifestwork."""

    def test_sets_identity_and_created_by(self) -> None:
        """The scaffold carries the key and the created-by annotation."""
        hyd = make_hyd(name="hd-1", namespace="clusters", infra_id="abc123")

        work = scaffold_manifestwork(hyd)

        assert work.name == "hd-1-abc123"
        assert work.namespace == "clusters"
        assert work.annotations == {CREATED_BY_ANNOTATION: "clusters/hd-1"}
        assert work.manifests == []
        assert work.delete_option is None

    @pytest.mark.parametrize("override", ["DESTROY", "destroy"])
    def test_destroy_override_orphans(self, override: str) -> None:
        """Destroy override produces an Orphan delete option."""
        work = scaffold_manifestwork(make_hyd(override=override))

        assert work.delete_option is not None
        assert work.delete_option.propagation_policy == "Orphan"

    def test_other_override_has_no_delete_option(self) -> None:
        """Only the destroy override changes delete propagation."""
        work = scaffold_manifestwork(make_hyd(override="INFRA-ONLY"))

        assert work.delete_option is None

    def test_empty_infra_id_raises(self) -> None:
        """Scaffolding fails fast without an infraID."""
        with pytest.raises(InvalidSpecError):
            scaffold_manifestwork(make_hyd(infra_id=""))
