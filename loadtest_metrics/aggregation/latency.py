"""Latency statistics over time-grouped sample subgroups.

Samples are first ordered by timestamp and cut into consecutive subgroups
so that each record summarizes a short time window; each subgroup is then
ordered by latency so min/max are its first and last members. The subgroup
size is chosen so the records fit in the batch slots left by other record
producers.
"""
from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from ..base.constants import LATENCY_METRIC_NAME, MAX_BATCH_SIZE, NANOS_PER_MILLISECOND
from ..base.models import LatencySample, MetricRecord, StatisticSet
from ..base.units import StandardUnit
from ..base.utils import iso_from_millis


def by_timestamp(sample: LatencySample) -> int:
    """Sort key ordering samples chronologically."""
    return sample.timestamp_ms


def by_latency(sample: LatencySample) -> int:
    """Sort key ordering samples from fastest to slowest."""
    return sample.latency_ns


def nanos_to_millis(latency_ns: float) -> float:
    return latency_ns / NANOS_PER_MILLISECOND


def subgroup_size(sample_count: int, used_slots: int = 0) -> int:
    """Samples per subgroup so that at most the remaining slots are used.

    When no slot is left, capacity is treated as one and a single subgroup
    holds every sample.
    """
    capacity = max(1, MAX_BATCH_SIZE - used_slots)
    return max(1, math.ceil(sample_count / capacity))


def split_subgroups(samples: Iterable[LatencySample], used_slots: int = 0) -> List[List[LatencySample]]:
    """Partition samples into latency-ordered subgroups of chronological windows.

    ``samples`` is copied; the caller's sequence is left untouched.
    """
    ordered = sorted(samples, key=by_timestamp)
    if not ordered:
        return []
    size = subgroup_size(len(ordered), used_slots)
    return [sorted(ordered[i:i + size], key=by_latency) for i in range(0, len(ordered), size)]


def summarize_subgroup(group: Sequence[LatencySample]) -> MetricRecord:
    """Build the statistic record for one latency-ordered subgroup."""
    latencies = [nanos_to_millis(s.latency_ns) for s in group]
    slowest = group[-1]
    return MetricRecord(
        name=LATENCY_METRIC_NAME,
        timestamp=iso_from_millis(slowest.timestamp_ms),
        unit=StandardUnit.MILLISECONDS,
        statistics=StatisticSet(
            minimum=latencies[0],
            maximum=latencies[-1],
            sample_count=len(group),
            sum=sum(latencies),
        ),
    )


def aggregate_latencies(samples: Iterable[LatencySample], used_slots: int = 0) -> List[MetricRecord]:
    """Summarize every sample exactly once in at most the remaining slots."""
    return [summarize_subgroup(group) for group in split_subgroups(samples, used_slots)]


__all__ = [
    "aggregate_latencies",
    "by_latency",
    "by_timestamp",
    "nanos_to_millis",
    "split_subgroups",
    "subgroup_size",
    "summarize_subgroup",
]
