"""Shared pytest fixtures for hypershift_deployment_manager tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary YAML config file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
clusters:
  hub:
    context: hub-admin
    namespace: clusters
    timeout: 15
active_cluster: hub
reconcile:
  requeue_after_seconds: 5
"""
    )
    return config_path


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Clear HDM_ environment variables and bound log context for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("HDM_"):
            monkeypatch.delenv(key, raising=False)
    yield
    structlog.contextvars.clear_contextvars()
