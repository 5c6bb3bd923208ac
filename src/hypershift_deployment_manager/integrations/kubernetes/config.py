"""Kubernetes integration configuration models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from hypershift_deployment_manager.integrations.kubernetes.constants import (
    DEFAULT_REQUEUE_AFTER_SECONDS,
)

# XDG-compliant config location
CONFIG_DIR = Path.home() / ".config" / "hdm"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class ClusterConfig(BaseModel):
    """Connection settings for the hub cluster holding HypershiftDeployments."""

    model_config = ConfigDict(extra="forbid")

    context: str = ""
    kubeconfig: str = "~/.kube/config"
    namespace: str = "default"
    timeout: int = 30

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("kubeconfig")
    @classmethod
    def validate_kubeconfig(cls, v: str) -> str:
        """Expand ~ in kubeconfig path."""
        return str(Path(v).expanduser())


class KubernetesDefaultsConfig(BaseModel):
    """Default settings for API requests."""

    model_config = ConfigDict(extra="forbid")

    timeout: int = 30
    retry_attempts: int = 3

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("retry_attempts")
    @classmethod
    def validate_retry_attempts(cls, v: int) -> int:
        """Validate retry_attempts is non-negative."""
        if v < 0:
            raise ValueError("retry_attempts must be non-negative")
        return v


class ReconcileConfig(BaseModel):
    """Settings for the ManifestWork reconcile passes."""

    model_config = ConfigDict(extra="forbid")

    requeue_after_seconds: float = DEFAULT_REQUEUE_AFTER_SECONDS

    @field_validator("requeue_after_seconds")
    @classmethod
    def validate_requeue_after(cls, v: float) -> float:
        """Validate the delete-cleanup polling interval is positive."""
        if v <= 0:
            raise ValueError("requeue_after_seconds must be positive")
        return v


class KubernetesPluginConfig(BaseModel):
    """Complete configuration for the reconciler."""

    model_config = ConfigDict(extra="forbid")

    clusters: dict[str, ClusterConfig] = {}
    active_cluster: str | None = None
    defaults: KubernetesDefaultsConfig = KubernetesDefaultsConfig()
    reconcile: ReconcileConfig = ReconcileConfig()

    # Environment overrides, kept for when no cluster entry matches
    _namespace_override: str | None = PrivateAttr(default=None)
    _kubeconfig_override: str | None = PrivateAttr(default=None)

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> KubernetesPluginConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            HDM_K8S_CONTEXT: Override active Kubernetes context
            HDM_K8S_NAMESPACE: Override default namespace
            HDM_K8S_KUBECONFIG: Override kubeconfig path
            HDM_K8S_TIMEOUT: Request timeout in seconds
            HDM_REQUEUE_AFTER: Delete-cleanup polling interval in seconds
        """
        config_dict = base_config.copy() if base_config else {}
        config_dict["defaults"] = dict(config_dict.get("defaults") or {})
        config_dict["reconcile"] = dict(config_dict.get("reconcile") or {})
        config_dict.setdefault("clusters", {})

        if context := os.environ.get("HDM_K8S_CONTEXT"):
            config_dict["active_cluster"] = context

        if timeout := os.environ.get("HDM_K8S_TIMEOUT"):
            config_dict["defaults"]["timeout"] = int(timeout)

        if requeue_after := os.environ.get("HDM_REQUEUE_AFTER"):
            config_dict["reconcile"]["requeue_after_seconds"] = float(requeue_after)

        instance = cls.model_validate(config_dict)

        # Path and namespace overrides apply to every configured cluster and
        # stand in for the cluster settings when no cluster entry is active
        if kubeconfig := os.environ.get("HDM_K8S_KUBECONFIG"):
            instance._kubeconfig_override = str(Path(kubeconfig).expanduser())
            for cluster_cfg in instance.clusters.values():
                cluster_cfg.kubeconfig = instance._kubeconfig_override

        if namespace := os.environ.get("HDM_K8S_NAMESPACE"):
            instance._namespace_override = namespace
            for cluster_cfg in instance.clusters.values():
                cluster_cfg.namespace = namespace

        return instance

    @classmethod
    def load(cls, path: Path | None = None) -> KubernetesPluginConfig:
        """Load configuration from a YAML file, then apply environment overrides.

        The file is ``path``, else ``$HDM_CONFIG``, else
        ``~/.config/hdm/config.yaml``. A missing file means defaults.

        Raises:
            ValueError: If the file is not a YAML mapping.
        """
        if path is None:
            path = Path(os.environ["HDM_CONFIG"]) if "HDM_CONFIG" in os.environ else CONFIG_FILE

        base_config: dict[str, Any] = {}
        if path.exists():
            loaded = yaml.safe_load(path.read_text()) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"Configuration file {path} must contain a mapping")
            base_config = loaded

        return cls.from_env(base_config)

    def get_active_context(self) -> str | None:
        """Get the active cluster context name.

        Returns the active_cluster if set, or the context from the first
        configured cluster, or None if no clusters are configured.
        """
        if self.active_cluster:
            if cluster := self.clusters.get(self.active_cluster):
                return cluster.context
            return self.active_cluster
        if self.clusters:
            return next(iter(self.clusters.values())).context
        return None

    def get_active_kubeconfig(self) -> str | None:
        """Get the kubeconfig path for the active cluster, or the HDM_K8S_KUBECONFIG override."""
        if self.active_cluster and self.active_cluster in self.clusters:
            return self.clusters[self.active_cluster].kubeconfig
        return self._kubeconfig_override

    def get_active_namespace(self) -> str:
        """Get the default namespace for the active cluster."""
        if self.active_cluster and self.active_cluster in self.clusters:
            return self.clusters[self.active_cluster].namespace
        if self.clusters:
            return next(iter(self.clusters.values())).namespace
        return self._namespace_override or "default"

    def get_active_timeout(self) -> int:
        """Get the request timeout for the active cluster."""
        if self.active_cluster and self.active_cluster in self.clusters:
            return self.clusters[self.active_cluster].timeout
        return self.defaults.timeout
