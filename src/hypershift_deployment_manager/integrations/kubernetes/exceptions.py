"""Kubernetes integration custom exceptions."""

from __future__ import annotations

from typing import Any


class KubernetesError(Exception):
    """Base exception for Kubernetes operations.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from Kubernetes API (if applicable).
        resource_type: Type of resource involved (e.g., "ManifestWork", "Secret").
        resource_name: Name of the resource involved.
        namespace: Namespace of the resource (if applicable).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.resource_type = resource_type
        self.resource_name = resource_name
        self.namespace = namespace

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        if self.resource_type and self.resource_name:
            loc = f"[{self.resource_type}/{self.resource_name}"
            if self.namespace:
                loc += f" in {self.namespace}"
            loc += "]"
            parts.append(loc)
        return " ".join(parts)

    @property
    def is_not_found(self) -> bool:
        """Whether this error reports a missing resource."""
        return self.status_code == 404


class KubernetesConnectionError(KubernetesError):
    """Connection to the API server failed (network, kubeconfig, deadline)."""

    def __init__(
        self,
        message: str = "Failed to connect to Kubernetes cluster",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message=message)
        self.original_error = original_error


class KubernetesAuthError(KubernetesError):
    """Authentication or authorization failed (401/403)."""

    def __init__(
        self,
        message: str = "Kubernetes authentication/authorization failed",
        status_code: int | None = 401,
        reason: str | None = None,
    ) -> None:
        super().__init__(message=message, status_code=status_code)
        self.reason = reason


class KubernetesNotFoundError(KubernetesError):
    """A requested resource does not exist (404).

    Lookups and deletes treat this as a branch signal rather than a failure.
    """

    def __init__(
        self,
        message: str = "Kubernetes resource not found",
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        if resource_type and resource_name:
            message = f"{resource_type} '{resource_name}' not found"
            if namespace:
                message += f" in namespace '{namespace}'"
        super().__init__(
            message=message,
            status_code=404,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )


class KubernetesValidationError(KubernetesError):
    """The API server rejected a resource spec (400/422)."""

    def __init__(
        self,
        message: str = "Invalid resource specification",
        validation_errors: dict[str, Any] | None = None,
        status_code: int | None = 422,
    ) -> None:
        super().__init__(message=message, status_code=status_code)
        self.validation_errors = validation_errors or {}


class KubernetesConflictError(KubernetesError):
    """The resource already exists or was modified concurrently (409)."""

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        if resource_type and resource_name:
            message = f"{resource_type} '{resource_name}' already exists"
            if namespace:
                message += f" in namespace '{namespace}'"
        super().__init__(
            message=message,
            status_code=409,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )


class KubernetesTimeoutError(KubernetesError):
    """A request exceeded the reconcile pass deadline."""

    def __init__(
        self,
        message: str = "Kubernetes operation timed out",
        timeout_seconds: int | None = None,
    ) -> None:
        if timeout_seconds:
            message = f"{message} (after {timeout_seconds}s)"
        super().__init__(message=message)
        self.timeout_seconds = timeout_seconds


class InvalidSpecError(KubernetesError):
    """The HypershiftDeployment spec cannot produce a ManifestWork.

    Raised before any remote call is made. Retrying will not help until the
    spec is fixed.
    """

    def __init__(
        self,
        message: str,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            resource_type="HypershiftDeployment",
            resource_name=resource_name,
            namespace=namespace,
        )


class CredentialFetchError(KubernetesError):
    """A referenced credential secret could not be read.

    Attributes:
        cause: The translated API error (``cause.is_not_found`` tells a missing
            secret apart from a transient failure).
    """

    def __init__(
        self,
        secret_name: str,
        namespace: str,
        cause: KubernetesError,
    ) -> None:
        super().__init__(
            message=f"failed to get the pull secret, err: {cause}",
            status_code=cause.status_code,
            resource_type="Secret",
            resource_name=secret_name,
            namespace=namespace,
        )
        self.cause = cause


class StatusPatchError(KubernetesError):
    """Patching the HypershiftDeployment status sub-resource failed."""

    def __init__(
        self,
        resource_name: str,
        namespace: str,
        cause: KubernetesError,
    ) -> None:
        super().__init__(
            message=f"failed to patch status, err: {cause.message}",
            status_code=cause.status_code,
            resource_type="HypershiftDeployment",
            resource_name=resource_name,
            namespace=namespace,
        )
        self.cause = cause
