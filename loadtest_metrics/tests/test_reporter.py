"""MetricsReporter wiring, config preconditions and error absorption."""
from __future__ import annotations

import pytest

from loadtest_metrics.base.errors import ConfigError
from loadtest_metrics.events import RunEvents
from loadtest_metrics.reporter import MetricsReporter
from loadtest_metrics.sinks import RecordingSink


def _script_config(**block):
    return {"plugins": {"cloudwatch": block}}


def test_construction_does_not_subscribe(sink, inline_executor):
    events = RunEvents()
    MetricsReporter({"namespace": "ns"}, sink, executor=inline_executor)
    assert events.handlers("done") == []


def test_attach_reacts_once_per_done_notification(sink, inline_executor, sample_report):
    events = RunEvents()
    reporter = MetricsReporter.from_script_config(
        _script_config(namespace="ns", dimensions=[["Env", "ci"]]), sink, executor=inline_executor
    )
    reporter.attach(events)
    events.emit("done", sample_report)
    assert len(sink.calls) == 1
    events.emit("done", sample_report)
    assert len(sink.calls) == 2
    namespace, batch = sink.calls[0]
    assert namespace == "ns"
    assert batch[0].dimensions[0].name == "Env"


def test_invalid_config_fails_before_subscription(sink):
    with pytest.raises(ConfigError):
        MetricsReporter.from_script_config({"plugins": {}}, sink)
    with pytest.raises(ConfigError):
        MetricsReporter({"namespace": ""}, sink)


def test_report_metrics_never_raises(monkeypatch, sink, inline_executor, sample_report):
    reporter = MetricsReporter({"namespace": "ns"}, sink, executor=inline_executor)

    def broken(*_args, **_kwargs):
        raise RuntimeError("aggregation exploded")

    monkeypatch.setattr("loadtest_metrics.aggregation.run.aggregate_codes", broken)
    assert reporter.report_metrics(sample_report) is None
    assert sink.calls == []


def test_sink_errors_reach_the_error_callback(inline_executor, sample_report):
    failures = []
    sink = RecordingSink(fail_with=lambda _ns, _b: ConnectionError("connection refused"))
    reporter = MetricsReporter({"namespace": "ns"}, sink, executor=inline_executor, on_error=failures.append)
    result = reporter.report_metrics(sample_report)
    assert result is not None and len(result.failures) == 1
    assert failures == result.failures
    assert failures[0].error_code.value == "connection"


def test_owned_executor_is_shut_down(sample_report):
    sink = RecordingSink()
    with MetricsReporter({"namespace": "ns"}, sink) as reporter:
        result = reporter.report_metrics(sample_report)
    assert result is not None and result.wait(timeout=5)
    assert len(sink.calls) == 1


def test_empty_report_makes_no_sink_calls(sink, inline_executor):
    reporter = MetricsReporter({"namespace": "ns"}, sink, executor=inline_executor)
    result = reporter.report_metrics(None)
    assert result is not None and result.dispatched == 0
    assert sink.calls == []


def test_one_unrenderable_sample_does_not_abort_the_run(sink, inline_executor):
    reporter = MetricsReporter({"namespace": "ns"}, sink, executor=inline_executor)
    report = {"codes": {"200": 3}, "latencies": [[1, "a", 1_000_000, 200], [10**20, "b", 2_000_000, 200]]}
    result = reporter.report_metrics(report)
    assert result is not None and result.failures == []
    assert len(sink.calls) == 1
    _namespace, batch = sink.calls[0]
    latency = [r for r in batch if r.name == "ResponseLatency"]
    assert sum(r.statistics.sample_count for r in latency) == 1
    assert [r.value for r in batch if r.name.endswith("Responses")] == [3, 0, 0, 0]
