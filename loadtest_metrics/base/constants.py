"""Base shared constants for the aggregation engine.

Central location to avoid scattering magic strings and default numbers.
"""
from __future__ import annotations

from enum import IntEnum

# Backend limit on records per PutMetricData call
MAX_BATCH_SIZE = 20

NANOS_PER_MILLISECOND = 1_000_000

# Metric names emitted by the engine
LATENCY_METRIC_NAME = "ResponseLatency"
REQUEST_RATE_METRIC_NAME = "RequestRate"
RESPONSE_CLASS_METRIC_TEMPLATE = "{digit}xx Responses"

# Leading status digits bucketed into response classes (2xx..5xx)
RESPONSE_CLASS_DIGITS = (2, 3, 4, 5)

# Run lifecycle notification consumed by the reporter
DONE_EVENT = "done"


class SampleField(IntEnum):
    """Positions inside a raw latency sample array."""

    TIMESTAMP = 0
    REQUEST_ID = 1
    LATENCY = 2
    STATUS_CODE = 3


__all__ = [
    "MAX_BATCH_SIZE",
    "NANOS_PER_MILLISECOND",
    "LATENCY_METRIC_NAME",
    "REQUEST_RATE_METRIC_NAME",
    "RESPONSE_CLASS_METRIC_TEMPLATE",
    "RESPONSE_CLASS_DIGITS",
    "DONE_EVENT",
    "SampleField",
]
