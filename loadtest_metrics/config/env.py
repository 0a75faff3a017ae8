"""loadtest_metrics.config.env
===========================

Environment overrides for publishing knobs.

Helpers never raise on unset or invalid variables; they fall back to the
defaults in :mod:`loadtest_metrics.config.defaults`.
"""

from __future__ import annotations

import os
from typing import Optional

from .defaults import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_SINK_TIMEOUT_SECONDS,
    ENV_MAX_WORKERS,
    ENV_SINK_ENDPOINT,
    ENV_SINK_TIMEOUT,
)


def _parse_positive(raw: Optional[str], cast, default):
    if not raw:
        return default
    try:
        val = cast(raw.strip())
    except ValueError:
        return default
    return val if val > 0 else default


def get_sink_timeout() -> float:
    """Return the HTTP sink timeout in seconds."""
    return _parse_positive(os.getenv(ENV_SINK_TIMEOUT), float, DEFAULT_SINK_TIMEOUT_SECONDS)


def get_max_workers() -> int:
    """Return the number of publisher worker threads."""
    return _parse_positive(os.getenv(ENV_MAX_WORKERS), int, DEFAULT_MAX_WORKERS)


def get_sink_endpoint() -> Optional[str]:
    val = os.getenv(ENV_SINK_ENDPOINT)
    return val.strip() if val and val.strip() else None


__all__ = ["get_sink_timeout", "get_max_workers", "get_sink_endpoint"]
