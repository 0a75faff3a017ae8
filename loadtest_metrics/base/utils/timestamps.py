"""ISO-8601 rendering for report and sample timestamps.

Timestamps are rendered with millisecond precision and a ``Z`` suffix
(``2024-05-01T12:00:00.250Z``), which is what the backend accepts and what
load-test reports carry when they are already formatted.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def iso_from_millis(millis: float) -> str:
    """Render epoch milliseconds as an ISO-8601 UTC string.

    Raises:
        ValueError: when ``millis`` is not finite or falls outside the range
            the platform calendar can represent.
    """
    try:
        whole = int(millis)
        moment = datetime.fromtimestamp(whole // 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"timestamp out of range: {millis!r}") from exc
    return f"{moment.strftime('%Y-%m-%dT%H:%M:%S')}.{whole % 1000:03d}Z"


def iso_now() -> str:
    now = datetime.now(timezone.utc)
    return f"{now.strftime('%Y-%m-%dT%H:%M:%S')}.{now.microsecond // 1000:03d}Z"


def render_timestamp(value: Any) -> str:
    """Normalize a report timestamp into an ISO-8601 string.

    Numbers are treated as epoch milliseconds, strings are passed through
    unchanged, and anything else falls back to the current time.

    Raises:
        ValueError: for numbers :func:`iso_from_millis` cannot render.
    """
    if isinstance(value, bool):
        return iso_now()
    if isinstance(value, (int, float)):
        return iso_from_millis(value)
    if isinstance(value, str) and value:
        return value
    return iso_now()


__all__ = ["iso_from_millis", "iso_now", "render_timestamp"]
