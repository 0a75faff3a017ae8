"""Unit coverage for structured logging utilities."""
from __future__ import annotations

import json
import logging

from loadtest_metrics.base.log_support import JsonFormatter
from loadtest_metrics.base.logging import LogContext, configure_logger, get_logger, log_event


def test_get_logger_env_overrides_level(monkeypatch, capsys):
    monkeypatch.setenv("LOADTEST_METRICS_LOG_LEVEL", "ERROR")
    logger = get_logger(name="loadtest_metrics.test", json_mode=True, level=logging.DEBUG)
    logger.info("hello")
    assert capsys.readouterr().err == ""
    logger.error("fail")
    data = json.loads(capsys.readouterr().err.strip())
    assert data["level"] == "ERROR"
    monkeypatch.delenv("LOADTEST_METRICS_LOG_LEVEL")
    get_logger()


def test_log_event_merges_context_and_drops_none(capsys):
    logger = get_logger(name="loadtest_metrics.test2")
    ctx = LogContext(namespace="ns", run_id="r1", extra={"host": "ci"})
    log_event(logger, "publish.dispatched", ctx, batches=2, skipped=None)
    data = json.loads(capsys.readouterr().err.strip())
    assert data["event"] == "publish.dispatched"
    assert data["namespace"] == "ns" and data["run_id"] == "r1" and data["host"] == "ci"
    assert data["batches"] == 2
    assert "skipped" not in data


def test_log_event_keep_none(capsys):
    logger = get_logger(name="loadtest_metrics.test3")
    log_event(logger, "x", keep_none=True, value=None)
    data = json.loads(capsys.readouterr().err.strip())
    assert "value" in data and data["value"] is None


def test_child_loggers_are_namespaced():
    assert get_logger("sinks").name == "loadtest_metrics.sinks"
    assert get_logger("loadtest_metrics.aggregation").name == "loadtest_metrics.aggregation"


def test_json_formatter_hoists_json_message():
    record = logging.LogRecord(
        name="loadtest_metrics.test.json",
        level=logging.INFO,
        pathname=__file__,
        lineno=0,
        msg=json.dumps({"event": "run.aggregated", "records": 8}),
        args=(),
        exc_info=None,
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["event"] == "run.aggregated"
    assert payload["records"] == 8


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "metrics.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        log_event(get_logger("loadtest_metrics.file"), "file.event", answer=42)
        for h in logger.handlers:
            h.flush()
        line = path.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["answer"] == 42
    finally:
        configure_logger(level="INFO", file_path=None)
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
