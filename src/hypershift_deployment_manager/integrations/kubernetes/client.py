"""Kubernetes API client wrapper.

Wraps the official kubernetes Python client with lazy API group
initialization, retry logic for connection failures, and consistent error
translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from hypershift_deployment_manager.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesTimeoutError,
    KubernetesValidationError,
)

if TYPE_CHECKING:
    from kubernetes.client import CoreV1Api, CustomObjectsApi

    from hypershift_deployment_manager.integrations.kubernetes.config import (
        KubernetesPluginConfig,
    )

logger = structlog.get_logger()


class KubernetesClient:
    """Kubernetes API client for the hub cluster.

    Wraps the official kubernetes Python client with:
    - kubeconfig or in-cluster configuration
    - Lazy API group initialization
    - Automatic retry with tenacity for connection errors
    - Consistent error translation to custom exceptions
    - Context manager support

    Example:
        ```python
        config = KubernetesPluginConfig.from_env()
        with KubernetesClient(config) as client:
            works = client.custom_objects.list_namespaced_custom_object(
                "work.open-cluster-management.io", "v1", "local-cluster", "manifestworks"
            )
        ```
    """

    def __init__(self, plugin_config: KubernetesPluginConfig) -> None:
        self._config = plugin_config
        self._retries = plugin_config.defaults.retry_attempts
        self._current_context: str | None = None

        self._core_v1: CoreV1Api | None = None
        self._custom_objects: CustomObjectsApi | None = None

        self._load_config()

        logger.info(
            "Kubernetes client initialized",
            context=self._current_context,
            default_namespace=plugin_config.get_active_namespace(),
        )

    def _load_config(self) -> None:
        """Load Kubernetes configuration from kubeconfig or in-cluster."""
        from kubernetes import config
        from kubernetes.config import ConfigException

        active_context = self._config.get_active_context()
        kubeconfig_path = self._config.get_active_kubeconfig()

        try:
            config.load_kube_config(
                config_file=kubeconfig_path,
                context=active_context,
            )
            self._current_context = active_context
            logger.debug("loaded_kubeconfig", context=active_context, kubeconfig=kubeconfig_path)
        except ConfigException:
            try:
                config.load_incluster_config()
                self._current_context = "in-cluster"
                logger.debug("loaded_incluster_config")
            except ConfigException as e:
                raise KubernetesConnectionError(
                    message="Cannot load Kubernetes configuration. "
                    "Ensure kubeconfig exists or running inside a cluster.",
                    original_error=e,
                ) from e

        self._invalidate_api_cache()

    def _invalidate_api_cache(self) -> None:
        """Clear cached API group instances."""
        self._core_v1 = None
        self._custom_objects = None

    # =========================================================================
    # Lazy API Group Accessors
    # =========================================================================

    @property
    def core_v1(self) -> CoreV1Api:
        """Get CoreV1Api instance (secrets, namespaces)."""
        if self._core_v1 is None:
            from kubernetes.client import CoreV1Api

            self._core_v1 = CoreV1Api()
        return self._core_v1

    @property
    def custom_objects(self) -> CustomObjectsApi:
        """Get CustomObjectsApi instance (HypershiftDeployments, ManifestWorks)."""
        if self._custom_objects is None:
            from kubernetes.client import CustomObjectsApi

            self._custom_objects = CustomObjectsApi()
        return self._custom_objects

    def get_current_context(self) -> str:
        """Get the current active context name."""
        return self._current_context or "unknown"

    # =========================================================================
    # Error Translation
    # =========================================================================

    @staticmethod
    def translate_api_exception(
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> KubernetesError:
        """Translate a kubernetes ApiException to a custom exception.

        Non-API failures (socket errors, urllib3 timeouts) become
        connection or timeout errors so callers can treat them as transient.

        Args:
            e: The original exception.
            resource_type: Type of resource being operated on.
            resource_name: Name of the resource.
            namespace: Namespace of the resource.

        Returns:
            An appropriate KubernetesError subclass.
        """
        from kubernetes.client import ApiException
        from urllib3.exceptions import HTTPError, TimeoutError

        if isinstance(e, KubernetesError):
            return e

        if isinstance(e, TimeoutError):
            return KubernetesTimeoutError(message=f"Request timed out: {e}")

        if isinstance(e, (HTTPError, ConnectionError)):
            return KubernetesConnectionError(message=str(e), original_error=e)

        if not isinstance(e, ApiException):
            return KubernetesError(
                message=str(e),
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        status = e.status

        if status in (401, 403):
            return KubernetesAuthError(
                message=e.reason or "Authentication/authorization failed",
                status_code=status,
                reason=e.reason,
            )

        if status == 404:
            return KubernetesNotFoundError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if status == 409:
            return KubernetesConflictError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if status in (400, 422):
            return KubernetesValidationError(
                message=e.reason or "Validation failed",
                status_code=status,
            )

        return KubernetesError(
            message=e.reason or f"Kubernetes API error: {status}",
            status_code=status,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )

    # =========================================================================
    # Retry Decorator
    # =========================================================================

    def make_retry_decorator(self) -> Any:
        """Create a retry decorator for transient connection errors.

        Returns:
            A tenacity retry decorator configured with exponential backoff.
        """
        return retry(
            retry=retry_if_exception_type(KubernetesConnectionError),
            stop=stop_after_attempt(max(self._retries, 1)),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            reraise=True,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def default_namespace(self) -> str:
        """Get the default namespace from config."""
        return self._config.get_active_namespace()

    @property
    def timeout(self) -> int:
        """Get the per-request timeout (the reconcile pass deadline)."""
        return self._config.get_active_timeout()

    @property
    def requeue_after(self) -> float:
        """Get the delete-cleanup polling interval in seconds."""
        return self._config.reconcile.requeue_after_seconds

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the client and release resources."""
        self._invalidate_api_cache()
        logger.debug("Kubernetes client closed")

    def __enter__(self) -> KubernetesClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
