"""Response-class aggregation of status code counts."""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from ..base.constants import RESPONSE_CLASS_DIGITS, RESPONSE_CLASS_METRIC_TEMPLATE
from ..base.errors import ErrorCode
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import MetricRecord
from ..base.units import StandardUnit

logger = get_logger(__name__)


def leading_digit(code: Any) -> Optional[int]:
    """Return the first digit of a status code, or ``None`` if it is not numeric."""
    text = str(code).strip()
    if not text or not text[0].isdigit():
        return None
    return int(text[0])


def _is_count(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 0
    return isinstance(value, float) and value.is_integer() and value >= 0


def aggregate_codes(
    status_counts: Optional[Mapping[Any, Any]],
    timestamp: str,
    ctx: LogContext | None = None,
) -> List[MetricRecord]:
    """Sum counts per response class (2xx..5xx).

    Every class is emitted, with an explicit zero when no code matched.
    Entries whose count is not a non-negative whole number are skipped and
    logged. Returns an empty list when ``status_counts`` is ``None``.
    """
    if status_counts is None:
        return []
    totals = dict.fromkeys(RESPONSE_CLASS_DIGITS, 0)
    ignored: List[str] = []
    for code, count in status_counts.items():
        digit = leading_digit(code)
        if digit not in totals:
            continue
        if not _is_count(count):
            ignored.append(str(code))
            continue
        totals[digit] += int(count)
    if ignored:
        log_event(
            logger,
            "report.malformed",
            ctx,
            level=logging.WARNING,
            error_code=ErrorCode.MALFORMED_REPORT.value,
            ignored_codes=ignored,
        )
    return [
        MetricRecord(
            name=RESPONSE_CLASS_METRIC_TEMPLATE.format(digit=digit),
            timestamp=timestamp,
            unit=StandardUnit.COUNT,
            value=totals[digit],
        )
        for digit in RESPONSE_CLASS_DIGITS
    ]


__all__ = ["aggregate_codes", "leading_digit"]
