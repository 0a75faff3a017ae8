"""Error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``loadtest_metrics.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.metrics_error import MetricsError
from .errors_parts.config_error import ConfigError
from .errors_parts.classification import classify_exception

__all__ = ["ErrorCode", "MetricsError", "ConfigError", "classify_exception"]
