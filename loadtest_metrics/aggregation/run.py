"""One aggregation run: normalize a report, batch its records, publish once.

A run is created per ``done`` notification and discarded afterwards. It
owns its batch builder, its sealed batches and its publisher, so concurrent
runs never share mutable state.
"""
from __future__ import annotations

import concurrent.futures as cf
import uuid
from typing import Any, List, Optional

from ..base.dto import MetricsConfig
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import Batch
from ..sinks.base import MetricSink
from .batching import BatchBuilder
from .codes import aggregate_codes
from .latency import aggregate_latencies
from .normalizer import NormalizedReport, normalize_report
from .publisher import ErrorCallback, PublishResult, Publisher
from .throughput import aggregate_throughput

logger = get_logger(__name__)


class AggregationRun:
    """Transient pipeline for a single run report."""

    def __init__(
        self,
        config: MetricsConfig,
        sink: MetricSink,
        executor: cf.Executor,
        *,
        on_error: Optional[ErrorCallback] = None,
        run_id: Optional[str] = None,
    ) -> None:
        self.run_id = run_id or uuid.uuid4().hex[:12]
        self.ctx = LogContext(namespace=config.namespace, run_id=self.run_id)
        self._builder = BatchBuilder(config.dimensions)
        self._publisher = Publisher(sink, config.namespace, executor, on_error=on_error, ctx=self.ctx)
        self._report: Optional[NormalizedReport] = None
        self._batches: Optional[List[Batch]] = None

    @property
    def published(self) -> bool:
        return self._publisher.published

    @property
    def report(self) -> Optional[NormalizedReport]:
        return self._report

    def aggregate(self, raw_report: Any) -> List[Batch]:
        """Normalize ``raw_report`` and return the sealed batches.

        Throughput, then response classes, then latency statistics are pushed
        in that order. The report is normalized once; repeated calls return
        the batches of the first call.
        """
        if self._batches is not None:
            return list(self._batches)
        report = normalize_report(raw_report, self.ctx)
        self._report = report
        self._builder.extend(aggregate_throughput(report.mean_rps, report.timestamp))
        self._builder.extend(aggregate_codes(report.status_counts, report.timestamp, self.ctx))
        self._builder.extend(aggregate_latencies(report.samples, self._builder.used_slots))
        self._batches = self._builder.seal_all()
        log_event(
            logger,
            "run.aggregated",
            self.ctx,
            records=self._builder.used_slots,
            batches=len(self._batches),
            samples=len(report.samples),
        )
        return list(self._batches)

    def publish(self) -> PublishResult:
        """Publish the sealed batches; a second call sends nothing."""
        if self._batches is None:
            raise RuntimeError("aggregate() must be called before publish()")
        return self._publisher.publish(self._batches)

    def execute(self, raw_report: Any) -> PublishResult:
        self.aggregate(raw_report)
        return self.publish()


__all__ = ["AggregationRun"]
