"""
Statistical summary attached to a latency record.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class StatisticSet:
    """Summary of one subgroup of samples.

    Attributes:
        minimum: Smallest value in the subgroup.
        maximum: Largest value in the subgroup.
        sample_count: Number of samples summarized.
        sum: Sum of all values.
    """

    minimum: float
    maximum: float
    sample_count: int
    sum: float

    def to_wire(self) -> Dict[str, float]:
        return {
            "SampleCount": self.sample_count,
            "Sum": self.sum,
            "Minimum": self.minimum,
            "Maximum": self.maximum,
        }


__all__ = ["StatisticSet"]
