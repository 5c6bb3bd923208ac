"""CRD coordinates, annotation keys and condition names."""

from __future__ import annotations

# HypershiftDeployment CRD coordinates
HYPERSHIFT_DEPLOYMENT_GROUP = "cluster.open-cluster-management.io"
HYPERSHIFT_DEPLOYMENT_VERSION = "v1alpha1"
HYPERSHIFT_DEPLOYMENT_PLURAL = "hypershiftdeployments"
HYPERSHIFT_DEPLOYMENT_KIND = "HypershiftDeployment"

# ManifestWork CRD coordinates
MANIFESTWORK_GROUP = "work.open-cluster-management.io"
MANIFESTWORK_VERSION = "v1"
MANIFESTWORK_PLURAL = "manifestworks"
MANIFESTWORK_KIND = "ManifestWork"
MANIFESTWORK_API_VERSION = f"{MANIFESTWORK_GROUP}/{MANIFESTWORK_VERSION}"

# HyperShift payload kinds
HYPERSHIFT_API_VERSION = "hypershift.openshift.io/v1alpha1"
HOSTED_CLUSTER_KIND = "HostedCluster"
NODE_POOL_KIND = "NodePool"
SECRET_KIND = "Secret"
SECRET_API_VERSION = "v1"

# Records which HypershiftDeployment created a ManifestWork, as "<namespace>/<name>"
CREATED_BY_ANNOTATION = "hypershift-deployment.open-cluster-management.io/created-by"
NAMESPACE_NAME_SEPARATOR = "/"

# Conditions set by the reconciler
PLATFORM_CONFIGURED = "PlatformConfigured"
REMOVING_REASON = "Removing"
REMOVING_MESSAGE = "Removing HypershiftDeployment's manifestwork and related resources"

DEFAULT_REQUEUE_AFTER_SECONDS = 20.0
