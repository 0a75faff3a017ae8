"""
Metric record destined for the monitoring backend.

A record is either a single observation (``value``) or a statistical
summary (``statistics``); exactly one of the two is set.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..units import StandardUnit
from .dimension import Dimension
from .statistic_set import StatisticSet


@dataclass(frozen=True)
class MetricRecord:
    """One named, timestamped, unit-tagged observation or summary.

    Attributes:
        name: Metric name (``MetricName`` on the wire).
        timestamp: ISO-8601 timestamp string.
        unit: Backend unit.
        value: Observation value; mutually exclusive with ``statistics``.
        statistics: Subgroup summary; mutually exclusive with ``value``.
        dimensions: Run dimensions, attached when the record is batched.
    """

    name: str
    timestamp: str
    unit: StandardUnit
    value: Optional[float] = None
    statistics: Optional[StatisticSet] = None
    dimensions: Tuple[Dimension, ...] = field(default=())

    def __post_init__(self) -> None:
        if (self.value is None) == (self.statistics is None):
            raise ValueError(f"metric record {self.name!r} needs exactly one of value or statistics")

    def to_wire(self) -> Dict[str, Any]:
        """Return the backend ``MetricData`` entry for this record."""
        data: Dict[str, Any] = {
            "MetricName": self.name,
            "Dimensions": [d.to_wire() for d in self.dimensions],
            "Timestamp": self.timestamp,
            "Unit": self.unit.value,
        }
        if self.statistics is not None:
            data["StatisticValues"] = self.statistics.to_wire()
        else:
            data["Value"] = self.value
        return data


Batch = Tuple[MetricRecord, ...]


__all__ = ["MetricRecord", "Batch"]
