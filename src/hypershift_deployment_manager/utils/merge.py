"""JSON merge-patch computation (RFC 7386).

Used to send only the fields that changed between a freshly read copy of
an object and the locally computed desired copy.
"""

from __future__ import annotations

from typing import Any


def compute_merge_patch(before: dict[str, Any], after: dict[str, Any]) -> dict[str, Any]:
    """Compute the merge patch that turns ``before`` into ``after``.

    Nested dicts are diffed recursively. Lists and scalars are replaced
    wholesale, as merge-patch has no notion of list element identity. Keys
    present in ``before`` but absent from ``after`` map to ``None``.

    Args:
        before: The object as last read from the API server.
        after: The desired object.

    Returns:
        The patch document; empty when the two are equal.

    Example:
        >>> compute_merge_patch({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 3}})
        {'b': {'c': 3}}
    """
    patch: dict[str, Any] = {}

    for key, new_value in after.items():
        if key not in before:
            patch[key] = new_value
            continue
        old_value = before[key]
        if isinstance(old_value, dict) and isinstance(new_value, dict):
            nested = compute_merge_patch(old_value, new_value)
            if nested:
                patch[key] = nested
        elif old_value != new_value:
            patch[key] = new_value

    for key in before:
        if key not in after:
            patch[key] = None

    return patch
