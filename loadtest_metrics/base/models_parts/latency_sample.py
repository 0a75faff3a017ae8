"""
Single latency observation produced by the load-test run collector.

Raw reports carry samples as 4-element arrays indexed by
:class:`~loadtest_metrics.base.constants.SampleField`.
"""
from __future__ import annotations

import math
from typing import Any, NamedTuple, Sequence

from ..constants import SampleField
from ..utils import iso_from_millis


class LatencySample(NamedTuple):
    """Immutable ``(timestamp_ms, request_id, latency_ns, status_code)`` tuple."""

    timestamp_ms: int
    request_id: Any
    latency_ns: int
    status_code: int

    @classmethod
    def from_raw(cls, raw: Sequence[Any]) -> "LatencySample":
        """Build a sample from a raw report array.

        Raises:
            ValueError: when the entry is too short, its numeric fields are
                not finite numbers, or its timestamp cannot be rendered.
            TypeError: when the entry is not indexable.
        """
        if isinstance(raw, LatencySample):
            return raw
        if not isinstance(raw, Sequence):
            raise TypeError(f"latency sample must be a sequence: {raw!r}")
        if isinstance(raw, (str, bytes)) or len(raw) <= SampleField.STATUS_CODE:
            raise ValueError(f"latency sample needs {SampleField.STATUS_CODE + 1} fields: {raw!r}")
        numeric = (raw[SampleField.TIMESTAMP], raw[SampleField.LATENCY], raw[SampleField.STATUS_CODE])
        if any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in numeric):
            raise ValueError(f"latency sample has non-numeric fields: {raw!r}")
        try:
            finite = all(math.isfinite(float(v)) for v in numeric)
        except OverflowError:
            finite = False
        if not finite:
            raise ValueError(f"latency sample has non-finite fields: {raw!r}")
        # latency records are stamped with sample timestamps
        iso_from_millis(raw[SampleField.TIMESTAMP])
        return cls(
            timestamp_ms=raw[SampleField.TIMESTAMP],
            request_id=raw[SampleField.REQUEST_ID],
            latency_ns=raw[SampleField.LATENCY],
            status_code=int(raw[SampleField.STATUS_CODE]),
        )


__all__ = ["LatencySample"]
