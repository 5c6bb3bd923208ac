"""Credential projection into the ManifestWork payload.

Secrets referenced by a HypershiftDeployment live on the hub next to it.
They are read once per reconcile pass, before assembly, and re-emitted as
Secret manifests addressed to the target namespace.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from hypershift_deployment_manager.integrations.kubernetes.constants import (
    SECRET_API_VERSION,
    SECRET_KIND,
)
from hypershift_deployment_manager.integrations.kubernetes.exceptions import (
    CredentialFetchError,
    KubernetesNotFoundError,
)
from hypershift_deployment_manager.integrations.kubernetes.models import Manifest
from hypershift_deployment_manager.services.kubernetes.base import K8sBaseManager
from hypershift_deployment_manager.services.kubernetes.naming import resolve_target_cluster
from hypershift_deployment_manager.services.kubernetes.scaffold import DefaultScaffolder

if TYPE_CHECKING:
    from hypershift_deployment_manager.integrations.kubernetes.client import KubernetesClient
    from hypershift_deployment_manager.integrations.kubernetes.models import HypershiftDeployment
    from hypershift_deployment_manager.services.kubernetes.scaffold import Scaffolder


def project_secret(secret: dict[str, Any], target_namespace: str) -> dict[str, Any]:
    """Copy a secret for the target namespace.

    Only name, labels and data survive; type metadata is reset to a plain
    ``v1/Secret`` and the namespace is always ``target_namespace``.
    """
    metadata: dict[str, Any] = secret.get("metadata") or {}
    out_metadata: dict[str, Any] = {
        "name": metadata.get("name", ""),
        "namespace": target_namespace,
    }
    if labels := metadata.get("labels"):
        out_metadata["labels"] = dict(labels)

    out: dict[str, Any] = {
        "apiVersion": SECRET_API_VERSION,
        "kind": SECRET_KIND,
        "metadata": out_metadata,
    }
    if (data := secret.get("data")) is not None:
        out["data"] = dict(data)
    return out


def _secret_to_dict(secret: Any) -> dict[str, Any]:
    """Reduce a ``V1Secret`` to the fields projection keeps."""
    metadata = getattr(secret, "metadata", None)
    return {
        "metadata": {
            "name": getattr(metadata, "name", None) or "",
            "namespace": getattr(metadata, "namespace", None),
            "labels": getattr(metadata, "labels", None),
        },
        "data": getattr(secret, "data", None),
    }


class SecretSource:
    """Manifest source emitting already-fetched secrets, rewritten for the target."""

    def __init__(self, secrets: list[dict[str, Any]]) -> None:
        self._secrets = secrets

    @property
    def secrets(self) -> list[dict[str, Any]]:
        return list(self._secrets)

    def produce(self, hyd: HypershiftDeployment, payload: list[Manifest]) -> None:
        target_namespace = resolve_target_cluster(hyd)
        for secret in self._secrets:
            payload.append(Manifest(object=project_secret(secret, target_namespace)))


class CredentialProjector(K8sBaseManager):
    """Fetches the secrets a HypershiftDeployment references."""

    _entity_name = "credentials"

    def __init__(self, client: KubernetesClient, scaffolder: Scaffolder | None = None) -> None:
        super().__init__(client)
        self._scaffolder = scaffolder or DefaultScaffolder()

    def get_pull_secret(self, hyd: HypershiftDeployment) -> dict[str, Any]:
        """Read the pull secret from the HypershiftDeployment's namespace.

        Raises:
            CredentialFetchError: If the secret is missing or cannot be read.
        """
        name = hyd.pull_secret_name
        namespace = self._resolve_namespace(hyd.namespace)
        if not name:
            raise CredentialFetchError(
                secret_name=name,
                namespace=namespace,
                cause=KubernetesNotFoundError("hostedClusterSpec.pullSecret.name is not set"),
            )

        self._log.debug("getting_pull_secret", name=name, namespace=namespace)
        try:
            secret = self._client.core_v1.read_namespaced_secret(
                name, namespace, **self._request_kwargs
            )
        except Exception as e:
            cause = self._client.translate_api_exception(e, "Secret", name, namespace)
            self._log.warning(
                "pull_secret_unavailable", name=name, namespace=namespace, error=str(cause)
            )
            raise CredentialFetchError(secret_name=name, namespace=namespace, cause=cause) from e
        return _secret_to_dict(secret)

    def project(self, hyd: HypershiftDeployment) -> SecretSource:
        """Fetch every referenced secret and return the manifest source for them.

        Scaffolded secrets come first, the pull secret last.

        Raises:
            CredentialFetchError: If the pull secret cannot be read.
        """
        pull_secret = self.get_pull_secret(hyd)
        secrets = [*self._scaffolder.secrets(hyd), pull_secret]
        self._log.debug("projected_credentials", count=len(secrets))
        return SecretSource(secrets)

