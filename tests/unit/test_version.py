"""Tests for version module."""

from __future__ import annotations

import pytest

from hypershift_deployment_manager import __version__
from hypershift_deployment_manager.__version__ import __version__ as version_string


class TestVersion:
    """Test version information."""

    @pytest.mark.unit
    def test_version_format(self) -> None:
        """Version follows major.minor.patch."""
        parts = __version__.split(".")
        assert len(parts) >= 2, "Version should have at least major.minor"
        assert all(part.isdigit() for part in parts[:2]), "Major and minor should be numeric"

    @pytest.mark.unit
    def test_version_importable(self) -> None:
        """Version is re-exported from the package root."""
        assert __version__ == version_string
