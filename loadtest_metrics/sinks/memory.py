"""In-memory sink that records every submitted batch."""

from __future__ import annotations

import threading
from typing import Callable, List, Optional, Tuple

from ..base.models import Batch


class RecordingSink:
    """Thread-safe sink capturing ``(namespace, batch)`` calls.

    ``fail_with`` optionally decides per call whether to raise, which lets
    tests simulate transport errors on selected batches.
    """

    def __init__(self, fail_with: Optional[Callable[[str, Batch], Optional[BaseException]]] = None) -> None:
        self._lock = threading.Lock()
        self._fail_with = fail_with
        self.calls: List[Tuple[str, Batch]] = []

    def put(self, namespace: str, batch: Batch) -> None:
        with self._lock:
            self.calls.append((namespace, batch))
        if self._fail_with is not None:
            exc = self._fail_with(namespace, batch)
            if exc is not None:
                raise exc

    @property
    def batches(self) -> List[Batch]:
        with self._lock:
            return [batch for _, batch in self.calls]


__all__ = ["RecordingSink"]
