"""Version information for hypershift_deployment_manager."""

__version__ = "0.1.0"
