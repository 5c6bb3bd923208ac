"""Logging configuration for hypershift_deployment_manager."""

from hypershift_deployment_manager.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
