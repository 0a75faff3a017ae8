"""Fire-and-forget publishing of sealed batches.

Each batch is handed to the sink on an executor so the run never blocks on
the backend. Failures are classified, logged per batch, collected on the
returned :class:`PublishResult` and forwarded to an optional callback; they
never propagate to the caller and never affect sibling batches.
"""
from __future__ import annotations

import concurrent.futures as cf
import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from ..base.errors import ErrorCode, classify_exception
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import Batch
from ..sinks.base import MetricSink

logger = get_logger(__name__)


@dataclass(frozen=True)
class PublishFailure:
    """One batch the sink rejected."""

    batch_index: int
    error_code: ErrorCode
    error: BaseException


ErrorCallback = Callable[[PublishFailure], None]


@dataclass
class PublishResult:
    """Handle on the sink calls dispatched by one ``publish``.

    Attributes:
        futures: One future per dispatched batch, in batch order.
        failures: Failures recorded as sink calls complete.
    """

    futures: List[cf.Future] = field(default_factory=list)
    failures: List[PublishFailure] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _pending: int = field(default=0, repr=False)
    _settled: threading.Event = field(default_factory=threading.Event, repr=False)

    def __post_init__(self) -> None:
        if self._pending == 0:
            self._settled.set()

    @property
    def dispatched(self) -> int:
        return len(self.futures)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until every sink call finished and was accounted for.

        Returns ``False`` when ``timeout`` elapsed first.
        """
        return self._settled.wait(timeout)

    def _expect(self, count: int) -> None:
        with self._lock:
            self._pending = count
            if count:
                self._settled.clear()

    def _settle(self, failure: Optional[PublishFailure]) -> None:
        with self._lock:
            if failure is not None:
                self.failures.append(failure)
            self._pending -= 1
            if self._pending <= 0:
                self._settled.set()


class Publisher:
    """Emit a run's batches to a sink at most once."""

    def __init__(
        self,
        sink: MetricSink,
        namespace: str,
        executor: cf.Executor,
        *,
        on_error: Optional[ErrorCallback] = None,
        ctx: LogContext | None = None,
    ):
        self._sink = sink
        self._namespace = namespace
        self._executor = executor
        self._on_error = on_error
        self._ctx = ctx
        self._published = False
        self._lock = threading.Lock()

    @property
    def published(self) -> bool:
        return self._published

    def publish(self, batches: Sequence[Batch]) -> PublishResult:
        """Dispatch every batch once and return without waiting.

        Later calls are logged no-ops returning an empty result.
        """
        with self._lock:
            if self._published:
                log_event(logger, "publish.duplicate", self._ctx, level=logging.WARNING)
                return PublishResult()
            self._published = True

        result = PublishResult()
        result._expect(len(batches))
        for index, batch in enumerate(batches):
            future = self._executor.submit(self._sink.put, self._namespace, batch)
            result.futures.append(future)
            future.add_done_callback(self._make_callback(index, result))
        log_event(logger, "publish.dispatched", self._ctx, batches=result.dispatched)
        return result

    def _make_callback(self, index: int, result: PublishResult) -> Callable[[cf.Future], None]:
        def _done(future: cf.Future) -> None:
            if future.cancelled():
                exc: Optional[BaseException] = cf.CancelledError()
            else:
                exc = future.exception()
            if exc is None:
                result._settle(None)
                return
            failure = PublishFailure(batch_index=index, error_code=classify_exception(exc), error=exc)
            log_event(
                logger,
                "publish.batch.error",
                self._ctx,
                level=logging.ERROR,
                batch_index=index,
                error_code=failure.error_code.value,
                failure_class=type(exc).__name__,
                error=str(exc),
            )
            if self._on_error is not None:
                try:
                    self._on_error(failure)
                except Exception:  # noqa: BLE001 - error callbacks must not break dispatch
                    logger.exception("publish error callback failed")
            result._settle(failure)

        return _done


__all__ = ["ErrorCallback", "PublishFailure", "PublishResult", "Publisher"]
