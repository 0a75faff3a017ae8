"""Report normalization.

Turns a run report of unknown shape into one canonical, immutable
:class:`NormalizedReport`. Missing or malformed parts degrade to empty
defaults and are logged; normalization never raises.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from ..base.dto import ReportDTO
from ..base.errors import ErrorCode
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import LatencySample
from ..base.utils import iso_now, render_timestamp

logger = get_logger(__name__)


@dataclass(frozen=True)
class NormalizedReport:
    """Canonical view of a run report.

    Attributes:
        samples: Latency samples, in report order.
        status_counts: Status code counts, or ``None`` when the report had none.
        mean_rps: Mean requests per second, or ``None``.
        timestamp: ISO-8601 run timestamp for records without a sample time.
    """

    samples: Tuple[LatencySample, ...]
    status_counts: Optional[Mapping[Any, Any]]
    mean_rps: Optional[float]
    timestamp: str


def _pick_latencies(dto: ReportDTO):
    if dto.aggregate is not None and dto.aggregate.latencies is not None:
        return dto.aggregate.latencies
    if dto.latencies is not None:
        return dto.latencies
    return []


def _malformed(ctx: LogContext | None, **fields: Any) -> None:
    log_event(
        logger,
        "report.malformed",
        ctx,
        level=logging.WARNING,
        error_code=ErrorCode.MALFORMED_REPORT.value,
        **fields,
    )


def _render_run_timestamp(value: Any, ctx: LogContext | None) -> str:
    try:
        return render_timestamp(value)
    except ValueError:
        _malformed(ctx, dropped_fields=["timestamp"], timestamp=repr(value))
        return iso_now()


def normalize_report(raw: Any, ctx: LogContext | None = None) -> NormalizedReport:
    """Extract ``(samples, status_counts, mean_rps, timestamp)`` from ``raw``."""
    dto, dropped = ReportDTO.salvage(raw)
    if raw is None or dropped:
        _malformed(ctx, missing=raw is None, dropped_fields=dropped or None)

    samples = []
    skipped = 0
    for entry in _pick_latencies(dto):
        try:
            samples.append(LatencySample.from_raw(entry))
        except (TypeError, ValueError):
            skipped += 1
    if skipped:
        _malformed(ctx, skipped_samples=skipped)

    counts = MappingProxyType(dict(dto.codes)) if dto.codes is not None else None
    mean_rps = dto.rps.mean if dto.rps is not None else None
    normalized = NormalizedReport(
        samples=tuple(samples),
        status_counts=counts,
        mean_rps=mean_rps,
        timestamp=_render_run_timestamp(dto.timestamp, ctx),
    )
    log_event(
        logger,
        "report.normalized",
        ctx,
        level=logging.DEBUG,
        samples=len(normalized.samples),
        has_codes=counts is not None,
        has_rps=mean_rps is not None,
    )
    return normalized


__all__ = ["NormalizedReport", "normalize_report"]
