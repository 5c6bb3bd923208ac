"""Base manager for Kubernetes service managers.

Provides shared infrastructure for the reconcile managers: client access,
namespace resolution, error translation, and the custom-object store
operations (get, create-or-update, delete, status merge-patch).
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Literal, NoReturn

import structlog

from hypershift_deployment_manager.integrations.kubernetes.exceptions import (
    KubernetesConflictError,
    KubernetesNotFoundError,
)
from hypershift_deployment_manager.utils.merge import compute_merge_patch

if TYPE_CHECKING:
    from hypershift_deployment_manager.integrations.kubernetes.client import KubernetesClient

logger = structlog.get_logger()

OperationResult = Literal["created", "updated", "unchanged"]

# Mutates an existing object dict in place before it is written back
MutateFn = Callable[[dict[str, Any]], None]


class K8sBaseManager:
    """Base class for Kubernetes service managers.

    Subclasses set ``_entity_name`` for structured log context.

    Example:
        >>> class ManifestWorkReconciler(K8sBaseManager):
        ...     _entity_name = "manifestwork"
    """

    _entity_name: str = ""

    def __init__(self, client: KubernetesClient) -> None:
        """Initialize the manager.

        Args:
            client: Kubernetes API client instance.
        """
        self._client = client
        self._log = logger.bind(entity=self._entity_name)

    def _resolve_namespace(self, namespace: str | None) -> str:
        """Resolve namespace, falling back to the client default."""
        return namespace or self._client.default_namespace

    def _handle_api_error(
        self,
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> NoReturn:
        """Translate a Kubernetes API exception and re-raise.

        Raises:
            KubernetesError: Always raises an appropriate subclass.
        """
        raise self._client.translate_api_exception(
            e,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )

    @property
    def _request_kwargs(self) -> dict[str, Any]:
        """Keyword arguments bounding every request by the pass deadline."""
        return {"_request_timeout": self._client.timeout}

    # =========================================================================
    # Custom Object Store Operations
    # =========================================================================

    def _get_custom_object(
        self,
        group: str,
        version: str,
        plural: str,
        kind: str,
        name: str,
        namespace: str,
    ) -> dict[str, Any]:
        """Read a namespaced custom object.

        Raises:
            KubernetesNotFoundError: If the object does not exist.
            KubernetesError: For any other API failure.
        """
        try:
            result: dict[str, Any] = self._client.custom_objects.get_namespaced_custom_object(
                group,
                version,
                namespace,
                plural,
                name,
                **self._request_kwargs,
            )
            return result
        except Exception as e:
            self._handle_api_error(e, kind, name, namespace)

    def _create_or_update(
        self,
        group: str,
        version: str,
        plural: str,
        kind: str,
        desired: dict[str, Any],
        mutate: MutateFn,
    ) -> OperationResult:
        """Create ``desired`` if absent, otherwise apply ``mutate`` to the live copy.

        The live object is only written back when ``mutate`` changed it. A
        409 on create means a concurrent creator won the race; that creator
        is trusted to have written the same desired state.

        Returns:
            "created", "updated" or "unchanged".
        """
        metadata = desired.get("metadata") or {}
        name = metadata["name"]
        namespace = metadata["namespace"]

        try:
            existing = self._get_custom_object(group, version, plural, kind, name, namespace)
        except KubernetesNotFoundError:
            existing = None

        if existing is None:
            try:
                self._client.custom_objects.create_namespaced_custom_object(
                    group,
                    version,
                    namespace,
                    plural,
                    desired,
                    **self._request_kwargs,
                )
            except Exception as e:
                error = self._client.translate_api_exception(e, kind, name, namespace)
                if isinstance(error, KubernetesConflictError):
                    self._log.debug(
                        "create_conflict_already_exists", name=name, namespace=namespace
                    )
                    return "unchanged"
                raise error
            self._log.info("created_custom_object", kind=kind, name=name, namespace=namespace)
            return "created"

        mutated = copy.deepcopy(existing)
        mutate(mutated)
        if mutated == existing:
            return "unchanged"

        try:
            self._client.custom_objects.replace_namespaced_custom_object(
                group,
                version,
                namespace,
                plural,
                name,
                mutated,
                **self._request_kwargs,
            )
        except Exception as e:
            self._handle_api_error(e, kind, name, namespace)
        self._log.info("updated_custom_object", kind=kind, name=name, namespace=namespace)
        return "updated"

    def _delete_custom_object(
        self,
        group: str,
        version: str,
        plural: str,
        kind: str,
        name: str,
        namespace: str,
    ) -> bool:
        """Delete a namespaced custom object.

        Returns:
            True if a delete was issued, False if the object was already gone.
        """
        try:
            self._client.custom_objects.delete_namespaced_custom_object(
                group,
                version,
                namespace,
                plural,
                name,
                **self._request_kwargs,
            )
        except Exception as e:
            error = self._client.translate_api_exception(e, kind, name, namespace)
            if isinstance(error, KubernetesNotFoundError):
                return False
            raise error
        self._log.info("deleted_custom_object", kind=kind, name=name, namespace=namespace)
        return True

    def _patch_status(
        self,
        group: str,
        version: str,
        plural: str,
        kind: str,
        name: str,
        namespace: str,
        before: dict[str, Any],
        after: dict[str, Any],
    ) -> bool:
        """Merge-patch the status sub-resource with the delta between two statuses.

        Args:
            before: Status as read at the start of the pass.
            after: Status computed during the pass.

        Returns:
            True if a patch was sent, False if nothing changed.

        Raises:
            KubernetesError: If the patch request fails.
        """
        delta = compute_merge_patch(before, after)
        if not delta:
            self._log.debug("status_unchanged", kind=kind, name=name, namespace=namespace)
            return False

        try:
            self._client.custom_objects.patch_namespaced_custom_object_status(
                group,
                version,
                namespace,
                plural,
                name,
                {"status": delta},
                **self._request_kwargs,
            )
        except Exception as e:
            self._handle_api_error(e, kind, name, namespace)
        self._log.debug("status_patched", kind=kind, name=name, fields=sorted(delta))
        return True

