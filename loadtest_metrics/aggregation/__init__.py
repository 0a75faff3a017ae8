"""Aggregation-and-batching engine.

Pipeline per run: :func:`normalize_report` → throughput / response-class /
latency records → :class:`BatchBuilder` → :class:`Publisher`, orchestrated
by :class:`AggregationRun`.
"""

from .batching import BatchBuilder
from .codes import aggregate_codes
from .latency import aggregate_latencies, by_latency, by_timestamp
from .normalizer import NormalizedReport, normalize_report
from .publisher import PublishFailure, PublishResult, Publisher
from .run import AggregationRun
from .throughput import aggregate_throughput

__all__ = [
    "AggregationRun",
    "BatchBuilder",
    "NormalizedReport",
    "PublishFailure",
    "PublishResult",
    "Publisher",
    "aggregate_codes",
    "aggregate_latencies",
    "aggregate_throughput",
    "by_latency",
    "by_timestamp",
    "normalize_report",
]
