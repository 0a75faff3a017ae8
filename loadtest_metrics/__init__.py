"""loadtest_metrics package

Aggregate load-test run reports into size-capped metric batches for a
time-series monitoring backend.

Public API (re-exported):
    - Version: ``__version__``
    - Plugin: :class:`MetricsReporter`, :class:`RunEvents`
    - Engine: :class:`AggregationRun`, :class:`BatchBuilder`,
      :func:`normalize_report`, :func:`aggregate_codes`,
      :func:`aggregate_latencies`
    - Config: :class:`MetricsConfig`, :func:`validate_config`
    - Sinks: :class:`MetricSink`, :class:`HttpMetricSink`, :class:`RecordingSink`
    - Errors: :class:`MetricsError`, :class:`ConfigError`, :class:`ErrorCode`
"""

from .aggregation import (
    AggregationRun,
    BatchBuilder,
    PublishResult,
    aggregate_codes,
    aggregate_latencies,
    normalize_report,
)
from .base.constants import MAX_BATCH_SIZE
from .base.dto import MetricsConfig, validate_config
from .base.errors import ConfigError, ErrorCode, MetricsError
from .base.models import Dimension, LatencySample, MetricRecord, StatisticSet
from .base.units import StandardUnit
from .events import RunEvents
from .reporter import MetricsReporter
from .sinks import HttpMetricSink, MetricSink, RecordingSink

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AggregationRun",
    "BatchBuilder",
    "ConfigError",
    "Dimension",
    "ErrorCode",
    "HttpMetricSink",
    "LatencySample",
    "MAX_BATCH_SIZE",
    "MetricRecord",
    "MetricSink",
    "MetricsConfig",
    "MetricsError",
    "MetricsReporter",
    "PublishResult",
    "RecordingSink",
    "RunEvents",
    "StandardUnit",
    "StatisticSet",
    "aggregate_codes",
    "aggregate_latencies",
    "normalize_report",
    "validate_config",
]
