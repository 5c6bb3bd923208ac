"""Unit tests for shared Kubernetes model helpers."""

from __future__ import annotations

import re
from datetime import UTC, datetime

import pytest

from hypershift_deployment_manager.integrations.kubernetes.models.base import (
    Condition,
    _get_timestamp,
    now_timestamp,
)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestCondition:
    """Test Condition model."""

    def test_from_k8s_object(self) -> None:
        cond = Condition.from_k8s_object(
            {
                "type": "Applied",
                "status": "True",
                "reason": "AppliedManifestWork",
                "message": "Apply manifest work complete",
                "lastTransitionTime": "2026-01-01T00:00:00Z",
                "observedGeneration": 3,
            }
        )

        assert cond.type == "Applied"
        assert cond.status == "True"
        assert cond.reason == "AppliedManifestWork"
        assert cond.last_transition_time == "2026-01-01T00:00:00Z"

    def test_missing_fields_default(self) -> None:
        cond = Condition.from_k8s_object({"type": "Available"})

        assert cond.status == "Unknown"
        assert cond.reason == ""
        assert cond.message == ""
        assert cond.last_transition_time is None

    def test_to_k8s_object(self) -> None:
        cond = Condition(
            type="PlatformConfigured",
            status="False",
            reason="Removing",
            message="removing",
            last_transition_time="2026-01-01T00:00:00Z",
        )

        assert cond.to_k8s_object() == {
            "type": "PlatformConfigured",
            "status": "False",
            "reason": "Removing",
            "message": "removing",
            "lastTransitionTime": "2026-01-01T00:00:00Z",
        }

    def test_to_k8s_object_without_time(self) -> None:
        assert "lastTransitionTime" not in Condition(type="A").to_k8s_object()

    def test_populate_by_alias(self) -> None:
        cond = Condition.model_validate({"type": "A", "lastTransitionTime": "t"})
        assert cond.last_transition_time == "t"


@pytest.mark.unit
@pytest.mark.kubernetes
class TestTimestamps:
    """Test timestamp helpers."""

    def test_now_timestamp_format(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", now_timestamp())

    def test_get_timestamp(self) -> None:
        moment = datetime(2026, 1, 1, tzinfo=UTC)

        assert _get_timestamp(None) is None
        assert _get_timestamp("2026-01-01T00:00:00Z") == "2026-01-01T00:00:00Z"
        assert _get_timestamp(moment) == moment.isoformat()
