"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime


def now_iso() -> str:
    """Current UTC time as ISO 8601 (card created/modified stamps)."""
    return datetime.now(UTC).isoformat()


def clamp(value: int, low: int, high: int) -> int:
    """Clamp *value* into ``[low, high]``.

    Examples:
        >>> clamp(500, 1, 200)
        200
        >>> clamp(0, 1, 200)
        1
    """
    return max(low, min(value, high))
