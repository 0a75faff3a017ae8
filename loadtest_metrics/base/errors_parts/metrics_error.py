"""
Structured exception type for the metrics package.

Wraps failures with a normalized `ErrorCode` for consistent handling and
structured logging.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class MetricsError(Exception):
    """Structured error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        namespace: Metric namespace involved, when known.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    namespace: Optional[str] = None
    raw: Optional[Exception] = None

    def __str__(self) -> str:
        if self.namespace:
            return f"{self.namespace} {self.code.value}: {self.message}"
        return f"{self.code.value}: {self.message}"


__all__ = ["MetricsError"]
