"""Condition bookkeeping for HypershiftDeployment status."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypershift_deployment_manager.integrations.kubernetes.models import Condition
from hypershift_deployment_manager.integrations.kubernetes.models.base import (
    ConditionStatus,
    now_timestamp,
)

if TYPE_CHECKING:
    from hypershift_deployment_manager.integrations.kubernetes.models import (
        HypershiftDeployment,
        ManifestWork,
    )


def set_status_condition(
    hyd: HypershiftDeployment,
    condition_type: str,
    status: ConditionStatus,
    message: str,
    reason: str,
) -> Condition:
    """Upsert a condition on the HypershiftDeployment by type.

    A new type is appended. For an existing type, reason and message are
    overwritten and ``lastTransitionTime`` only moves when the status flips.

    Returns:
        The condition now present on ``hyd``.
    """
    existing = hyd.get_condition(condition_type)
    if existing is None:
        cond = Condition(
            type=condition_type,
            status=status,
            reason=reason,
            message=message,
            last_transition_time=now_timestamp(),
        )
        hyd.conditions.append(cond)
        return cond

    if existing.status != status:
        existing.status = status
        existing.last_transition_time = now_timestamp()
    existing.reason = reason
    existing.message = message
    return existing


def sync_manifestwork_status(hyd: HypershiftDeployment, work: ManifestWork) -> None:
    """Mirror every ManifestWork condition onto the HypershiftDeployment.

    The mirror is additive: conditions the ManifestWork no longer reports are
    left on the HypershiftDeployment as they were.
    """
    for cond in work.conditions:
        set_status_condition(
            hyd,
            cond.type,
            cond.status,
            cond.message,
            cond.reason,
        )
