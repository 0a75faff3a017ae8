"""Pytest configuration for the metrics test suite.

Provides an inline executor so publishing is deterministic, plus recording
sinks and a reusable sample report.
"""

from __future__ import annotations

import concurrent.futures as cf
from typing import Any, Callable, Iterator

import pytest

from loadtest_metrics.base.dto import MetricsConfig
from loadtest_metrics.base.http import close_all_clients
from loadtest_metrics.base.logging import get_logger
from loadtest_metrics.sinks import RecordingSink


class InlineExecutor(cf.Executor):
    """Executor running each call synchronously inside ``submit``."""

    def __init__(self) -> None:
        self.submitted = 0

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> cf.Future:
        self.submitted += 1
        future: cf.Future = cf.Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:  # noqa: BLE001 - surfaced through the future
            future.set_exception(exc)
        return future


@pytest.fixture()
def inline_executor() -> InlineExecutor:
    return InlineExecutor()


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def config() -> MetricsConfig:
    return MetricsConfig(namespace="svc/load", dimensions=[{"Name": "Env", "Value": "staging"}])


@pytest.fixture()
def sample_report() -> dict:
    return {
        "timestamp": 1_700_000_000_000,
        "rps": {"mean": 42.5},
        "codes": {"200": 5, "404": 2, "500": 1},
        "aggregate": {
            "latencies": [
                [1_700_000_000_100, "r1", 3_000_000, 200],
                [1_700_000_000_300, "r2", 1_000_000, 404],
                [1_700_000_000_200, "r3", 2_000_000, 500],
            ]
        },
    }


@pytest.fixture(autouse=True)
def close_http_clients() -> Iterator[None]:
    """Drop pooled httpx clients between tests."""
    yield
    close_all_clients()


@pytest.fixture(autouse=True)
def bind_log_stream() -> None:
    """Point the shared console handler at the current ``sys.stderr``."""
    get_logger()
