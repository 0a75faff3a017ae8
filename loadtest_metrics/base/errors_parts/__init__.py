"""Errors parts package public surface.

Prefer importing from ``loadtest_metrics.base.errors`` for the stable surface.
"""

from .error_code import ErrorCode
from .metrics_error import MetricsError
from .config_error import ConfigError
from .classification import classify_exception

__all__ = ["ErrorCode", "MetricsError", "ConfigError", "classify_exception"]
