"""Fixed-capacity batching of metric records."""
from __future__ import annotations

import dataclasses
from typing import Iterable, List, Tuple

from ..base.constants import MAX_BATCH_SIZE
from ..base.models import Batch, Dimension, MetricRecord


class BatchBuilder:
    """Accumulate records into batches of at most ``capacity`` records.

    Every pushed record is stamped with the builder's dimensions. A batch is
    sealed as soon as it is full; ``seal_all`` seals the trailing partial
    batch. Push order is preserved across and within batches.

    A builder belongs to exactly one aggregation run and is not thread-safe.
    """

    __slots__ = ("_dimensions", "_capacity", "_open", "_sealed", "_pushed")

    def __init__(self, dimensions: Iterable[Dimension] = (), capacity: int = MAX_BATCH_SIZE):
        if capacity < 1:
            raise ValueError("batch capacity must be at least 1")
        self._dimensions: Tuple[Dimension, ...] = tuple(dimensions)
        self._capacity = capacity
        self._open: List[MetricRecord] = []
        self._sealed: List[Batch] = []
        self._pushed = 0

    @property
    def used_slots(self) -> int:
        """Number of records pushed so far."""
        return self._pushed

    @property
    def dimensions(self) -> Tuple[Dimension, ...]:
        return self._dimensions

    def push(self, record: MetricRecord) -> None:
        self._open.append(dataclasses.replace(record, dimensions=self._dimensions))
        self._pushed += 1
        if len(self._open) >= self._capacity:
            self._seal_open()

    def extend(self, records: Iterable[MetricRecord]) -> None:
        for record in records:
            self.push(record)

    def seal_all(self) -> List[Batch]:
        """Seal the open batch if it holds records; return all sealed batches."""
        if self._open:
            self._seal_open()
        return list(self._sealed)

    def _seal_open(self) -> None:
        self._sealed.append(tuple(self._open))
        self._open = []


__all__ = ["BatchBuilder"]
