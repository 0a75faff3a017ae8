"""Metrics reporter plugin.

Purpose
-------
Bridge between the load-test runner and the monitoring backend: for every
completed run it builds a fresh :class:`AggregationRun` and publishes the
resulting batches to the configured sink.

Construction and subscription are separate steps::

    reporter = MetricsReporter.from_script_config(script_config, sink)
    reporter.attach(events)

Failure Modes
-------------
- Invalid configuration raises :class:`ConfigError` at construction.
- ``report_metrics`` never raises: unexpected failures are logged as
  ``report.error`` and absorbed so the notification source is unaffected.
- Sink failures are reported per batch by the publisher.
"""
from __future__ import annotations

import concurrent.futures as cf
import logging
from typing import Any, Mapping, Optional, Union

from .aggregation import AggregationRun, PublishResult
from .aggregation.publisher import ErrorCallback
from .base.constants import DONE_EVENT
from .base.dto import MetricsConfig, load_plugin_config, validate_config
from .base.logging import LogContext, get_logger, log_event
from .config.env import get_max_workers
from .events import RunEvents
from .sinks.base import MetricSink

logger = get_logger(__name__)


class MetricsReporter:
    """Turn run reports into metric batches for one namespace.

    Args:
        config: Validated config, or a raw plugin block validated here.
        sink: Backend write API.
        executor: Executor running sink calls. When omitted, the reporter owns
            a thread pool sized by :func:`get_max_workers`.
        on_error: Optional callback receiving each per-batch failure.
    """

    def __init__(
        self,
        config: Union[MetricsConfig, Mapping[str, Any]],
        sink: MetricSink,
        *,
        executor: Optional[cf.Executor] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        self.config = config if isinstance(config, MetricsConfig) else load_plugin_config(config)
        self._sink = sink
        self._on_error = on_error
        self._owns_executor = executor is None
        self._executor = executor or cf.ThreadPoolExecutor(
            max_workers=get_max_workers(), thread_name_prefix="metrics-publish"
        )

    @classmethod
    def from_script_config(cls, script_config: Any, sink: MetricSink, **kwargs: Any) -> "MetricsReporter":
        """Build a reporter from a script's ``config`` section."""
        return cls(validate_config(script_config), sink, **kwargs)

    def attach(self, events: RunEvents) -> None:
        """Subscribe :meth:`report_metrics` to the runner's ``done`` event."""
        events.on(DONE_EVENT, self.report_metrics)
        log_event(logger, "reporter.attached", LogContext(namespace=self.config.namespace), event_name=DONE_EVENT)

    def new_run(self) -> AggregationRun:
        return AggregationRun(self.config, self._sink, self._executor, on_error=self._on_error)

    def report_metrics(self, report: Any) -> Optional[PublishResult]:
        """Aggregate and publish one run report. Never raises."""
        run = self.new_run()
        try:
            result = run.execute(report)
        except Exception as exc:  # noqa: BLE001 - nothing may reach the notification source
            log_event(
                logger,
                "report.error",
                run.ctx,
                level=logging.ERROR,
                failure_class=type(exc).__name__,
                error=str(exc),
            )
            return None
        log_event(logger, "report.completed", run.ctx, batches=result.dispatched)
        return result

    def close(self, wait: bool = True) -> None:
        """Shut down the owned executor, waiting for in-flight sink calls."""
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "MetricsReporter":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["MetricsReporter"]
