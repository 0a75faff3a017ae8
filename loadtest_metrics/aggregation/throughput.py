"""Request-rate record built from the report's mean throughput."""
from __future__ import annotations

from typing import List, Optional

from ..base.constants import REQUEST_RATE_METRIC_NAME
from ..base.models import MetricRecord
from ..base.units import StandardUnit


def aggregate_throughput(mean_rps: Optional[float], timestamp: str) -> List[MetricRecord]:
    if mean_rps is None:
        return []
    return [
        MetricRecord(
            name=REQUEST_RATE_METRIC_NAME,
            timestamp=timestamp,
            unit=StandardUnit.COUNT_PER_SECOND,
            value=mean_rps,
        )
    ]


__all__ = ["aggregate_throughput"]
