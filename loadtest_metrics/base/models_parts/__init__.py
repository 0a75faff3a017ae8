"""One-class-per-file parts for the engine value types."""

from .dimension import Dimension, coerce_dimensions
from .latency_sample import LatencySample
from .statistic_set import StatisticSet
from .metric_record import Batch, MetricRecord

__all__ = [
    "Batch",
    "Dimension",
    "LatencySample",
    "MetricRecord",
    "StatisticSet",
    "coerce_dimensions",
]
