"""Configuration defaults and environment helpers."""

from .defaults import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_SINK_TIMEOUT_SECONDS,
    PLUGIN_NAME,
    PLUGIN_PARAM_DIMENSIONS,
    PLUGIN_PARAM_NAMESPACE,
)
from .env import get_max_workers, get_sink_timeout

__all__ = [
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_SINK_TIMEOUT_SECONDS",
    "PLUGIN_NAME",
    "PLUGIN_PARAM_DIMENSIONS",
    "PLUGIN_PARAM_NAMESPACE",
    "get_max_workers",
    "get_sink_timeout",
]
