"""Core value types for the aggregation engine.

Re-exports the one-class-per-file implementations under
``loadtest_metrics.base.models_parts``.
"""

from .models_parts import (
    Batch,
    Dimension,
    LatencySample,
    MetricRecord,
    StatisticSet,
    coerce_dimensions,
)

__all__ = [
    "Batch",
    "Dimension",
    "LatencySample",
    "MetricRecord",
    "StatisticSet",
    "coerce_dimensions",
]
