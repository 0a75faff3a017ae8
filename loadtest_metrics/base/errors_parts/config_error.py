"""Configuration precondition failure raised at reporter construction."""
from __future__ import annotations

from dataclasses import dataclass, field

from .error_code import ErrorCode
from .metrics_error import MetricsError


@dataclass
class ConfigError(MetricsError):
    """Invalid or missing plugin configuration. Always fatal."""

    code: ErrorCode = field(default=ErrorCode.CONFIG)
    message: str = "invalid configuration"

    def __str__(self) -> str:
        return self.message


__all__ = ["ConfigError"]
