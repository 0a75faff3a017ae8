"""
Protocol for the monitoring backend write API.

The engine only needs ``put(namespace, batch)``. Implementations may block
(the publisher runs them on an executor) and report failure by raising.
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable

from ..base.models import Batch


@runtime_checkable
class MetricSink(Protocol):
    """Structural contract for metric backends."""

    def put(self, namespace: str, batch: Batch) -> Any:  # pragma: no cover - interface
        """Submit one batch of records under ``namespace``."""
        ...


def batch_to_wire(namespace: str, batch: Batch) -> Dict[str, Any]:
    """Render a batch as a ``PutMetricData`` request body."""
    return {"Namespace": namespace, "MetricData": [record.to_wire() for record in batch]}


__all__ = ["MetricSink", "batch_to_wire"]
