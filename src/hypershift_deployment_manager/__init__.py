"""HypershiftDeployment to ManifestWork reconciliation."""

from hypershift_deployment_manager.__version__ import __version__

__all__ = ["__version__"]
