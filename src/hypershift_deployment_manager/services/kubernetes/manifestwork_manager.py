"""ManifestWork lifecycle reconciler.

Synthesizes the ManifestWork that carries a HypershiftDeployment's
HostedCluster, NodePools and credentials to the target managed cluster, and
mirrors the ManifestWork's reported conditions back onto the
HypershiftDeployment status.

Each call is a single pass with no internal retry loop. Failures propagate
as exceptions for the external driver to retry; the delete path asks to be
called again after a fixed delay until the ManifestWork is gone.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from hypershift_deployment_manager.integrations.kubernetes.constants import (
    HYPERSHIFT_DEPLOYMENT_GROUP,
    HYPERSHIFT_DEPLOYMENT_KIND,
    HYPERSHIFT_DEPLOYMENT_PLURAL,
    HYPERSHIFT_DEPLOYMENT_VERSION,
    MANIFESTWORK_GROUP,
    MANIFESTWORK_KIND,
    MANIFESTWORK_PLURAL,
    MANIFESTWORK_VERSION,
    PLATFORM_CONFIGURED,
    REMOVING_MESSAGE,
    REMOVING_REASON,
)
from hypershift_deployment_manager.integrations.kubernetes.exceptions import (
    KubernetesError,
    KubernetesNotFoundError,
    StatusPatchError,
)
from hypershift_deployment_manager.integrations.kubernetes.models import (
    HypershiftDeployment,
    ManifestWork,
)
from hypershift_deployment_manager.services.kubernetes.base import K8sBaseManager
from hypershift_deployment_manager.services.kubernetes.credentials import CredentialProjector
from hypershift_deployment_manager.services.kubernetes.manifests import (
    HostedClusterSource,
    ManifestAssembler,
    NodePoolSource,
)
from hypershift_deployment_manager.services.kubernetes.naming import (
    ManifestWorkKey,
    resolve_manifestwork_key,
    resolve_target_cluster,
    scaffold_manifestwork,
)
from hypershift_deployment_manager.services.kubernetes.scaffold import DefaultScaffolder
from hypershift_deployment_manager.services.kubernetes.status import (
    set_status_condition,
    sync_manifestwork_status,
)

if TYPE_CHECKING:
    from hypershift_deployment_manager.integrations.kubernetes.client import KubernetesClient
    from hypershift_deployment_manager.services.kubernetes.scaffold import Scaffolder


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of a reconcile pass, telling the driver when to call again."""

    requeue: bool = False
    requeue_after: float | None = None

    @classmethod
    def done(cls) -> ReconcileResult:
        return cls()

    @classmethod
    def after(cls, seconds: float) -> ReconcileResult:
        return cls(requeue=True, requeue_after=seconds)


class MutateStrategy(Protocol):
    """Brings an existing ManifestWork in line with the desired one.

    Called by create-or-update only when the ManifestWork already exists.
    ``existing`` is the live object dict and is modified in place; the
    object is written back only if it changed.
    """

    def mutate(self, existing: dict[str, Any], desired: ManifestWork) -> None: ...


class NoOpMutateStrategy:
    """Leaves an existing ManifestWork exactly as it is.

    Whoever created it is trusted to have written the correct spec; spec
    drift after creation is not reconciled.
    """

    def mutate(self, existing: dict[str, Any], desired: ManifestWork) -> None:
        return None


class ManifestWorkReconciler(K8sBaseManager):
    """Creates, adopts and deletes the ManifestWork of a HypershiftDeployment."""

    _entity_name = "manifestwork"

    def __init__(
        self,
        client: KubernetesClient,
        *,
        scaffolder: Scaffolder | None = None,
        mutate_strategy: MutateStrategy | None = None,
        projector: CredentialProjector | None = None,
    ) -> None:
        super().__init__(client)
        self._scaffolder = scaffolder or DefaultScaffolder()
        self._mutate_strategy = mutate_strategy or NoOpMutateStrategy()
        self._projector = projector or CredentialProjector(client, self._scaffolder)

    # =========================================================================
    # Reads
    # =========================================================================

    def get_hypershift_deployment(
        self, name: str, namespace: str | None = None
    ) -> HypershiftDeployment:
        """Read a HypershiftDeployment.

        Raises:
            KubernetesNotFoundError: If it does not exist.
        """
        ns = self._resolve_namespace(namespace)
        obj = self._get_custom_object(
            HYPERSHIFT_DEPLOYMENT_GROUP,
            HYPERSHIFT_DEPLOYMENT_VERSION,
            HYPERSHIFT_DEPLOYMENT_PLURAL,
            HYPERSHIFT_DEPLOYMENT_KIND,
            name,
            ns,
        )
        return HypershiftDeployment.from_k8s_object(obj)

    def get_manifestwork(self, key: ManifestWorkKey) -> ManifestWork | None:
        """Read the ManifestWork at ``key``.

        Returns:
            The ManifestWork, or None if it does not exist.

        Raises:
            KubernetesError: For any failure other than not-found.
        """
        try:
            obj = self._get_custom_object(
                MANIFESTWORK_GROUP,
                MANIFESTWORK_VERSION,
                MANIFESTWORK_PLURAL,
                MANIFESTWORK_KIND,
                key.name,
                key.namespace,
            )
        except KubernetesNotFoundError:
            return None
        return ManifestWork.from_k8s_object(obj)

    # =========================================================================
    # Create / Adopt
    # =========================================================================

    def build_manifestwork(self, hyd: HypershiftDeployment) -> ManifestWork:
        """Scaffold the ManifestWork and fill its payload.

        Credentials are fetched before any manifest is assembled.

        Raises:
            InvalidSpecError: If ``spec.infraID`` is empty.
            CredentialFetchError: If the pull secret cannot be read.
        """
        work = scaffold_manifestwork(hyd)
        credentials = self._projector.project(hyd)
        assembler = ManifestAssembler(
            HostedClusterSource(self._scaffolder),
            NodePoolSource(self._scaffolder),
            credentials,
        )
        work.manifests = assembler.assemble(hyd)
        return work

    def create_manifestwork(self, hyd: HypershiftDeployment) -> ReconcileResult:
        """Create the ManifestWork, or adopt the status of an existing one.

        An existing ManifestWork is never modified: its conditions are
        copied onto the HypershiftDeployment status and the pass ends.

        Raises:
            InvalidSpecError: If ``spec.infraID`` is empty (no remote call made).
            CredentialFetchError: If the pull secret cannot be read.
            StatusPatchError: If the status patch fails.
            KubernetesError: For transient store failures.
        """
        key = resolve_manifestwork_key(hyd)

        existing = self.get_manifestwork(key)
        if existing is not None:
            self._log.debug("manifestwork_exists", manifestwork=str(key))
            before = hyd.status_dict()
            sync_manifestwork_status(hyd, existing)
            self._patch_hypershift_deployment_status(hyd, before)
            return ReconcileResult.done()

        work = self.build_manifestwork(hyd)

        def mutate(live: dict[str, Any]) -> None:
            self._mutate_strategy.mutate(live, work)

        try:
            operation = self._create_or_update(
                MANIFESTWORK_GROUP,
                MANIFESTWORK_VERSION,
                MANIFESTWORK_PLURAL,
                MANIFESTWORK_KIND,
                work.to_k8s_object(),
                mutate,
            )
        except KubernetesError as e:
            self._log.error(
                "failed_to_create_or_update_manifestwork", manifestwork=str(key), error=str(e)
            )
            raise

        self._log.info(
            "create_or_update_manifestwork",
            hypershift_deployment=f"{hyd.namespace}/{hyd.name}",
            target_namespace=resolve_target_cluster(hyd),
            manifests=len(work.manifests),
            operation=operation,
        )
        return ReconcileResult.done()

    # =========================================================================
    # Delete / Cleanup
    # =========================================================================

    def delete_manifestwork_wait_cleanup(self, hyd: HypershiftDeployment) -> ReconcileResult:
        """Delete the ManifestWork and poll until it is gone.

        While the ManifestWork still exists, its conditions are mirrored, the
        PlatformConfigured condition is set to False/Removing, and the pass
        asks to be called again after the configured delay.

        Raises:
            InvalidSpecError: If ``spec.infraID`` is empty.
            StatusPatchError: If the status patch fails.
            KubernetesError: If the lookup or delete request fails.
        """
        key = resolve_manifestwork_key(hyd)

        work = self.get_manifestwork(key)
        if work is None:
            self._log.info("manifestwork_removed", manifestwork=str(key))
            return ReconcileResult.done()

        if not work.being_deleted:
            try:
                issued = self._delete_custom_object(
                    MANIFESTWORK_GROUP,
                    MANIFESTWORK_VERSION,
                    MANIFESTWORK_PLURAL,
                    MANIFESTWORK_KIND,
                    key.name,
                    key.namespace,
                )
            except KubernetesError as e:
                self._log.error(
                    "failed_to_delete_manifestwork", manifestwork=str(key), error=str(e)
                )
                raise
            if issued:
                self._log.info("deleting_manifestwork", manifestwork=str(key))

        before = hyd.status_dict()
        sync_manifestwork_status(hyd, work)
        set_status_condition(
            hyd,
            PLATFORM_CONFIGURED,
            "False",
            REMOVING_MESSAGE,
            REMOVING_REASON,
        )
        self._patch_hypershift_deployment_status(hyd, before)

        return ReconcileResult.after(self._client.requeue_after)

    # =========================================================================
    # Status
    # =========================================================================

    def _patch_hypershift_deployment_status(
        self, hyd: HypershiftDeployment, before: dict[str, Any]
    ) -> bool:
        """Send the status delta accumulated on ``hyd`` during this pass."""
        namespace = self._resolve_namespace(hyd.namespace)
        try:
            return self._patch_status(
                HYPERSHIFT_DEPLOYMENT_GROUP,
                HYPERSHIFT_DEPLOYMENT_VERSION,
                HYPERSHIFT_DEPLOYMENT_PLURAL,
                HYPERSHIFT_DEPLOYMENT_KIND,
                hyd.name,
                namespace,
                before,
                hyd.status_dict(),
            )
        except KubernetesError as e:
            raise StatusPatchError(resource_name=hyd.name, namespace=namespace, cause=e) from e
