"""
Normalized error codes (taxonomy).

Values are lowercase snake_case and are a stable contract for log events.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    CONFIG = "config"
    MALFORMED_REPORT = "malformed_report"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    CONNECTION = "connection"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
