"""Report normalization across report shapes."""
from __future__ import annotations

import json
from types import SimpleNamespace

from loadtest_metrics.aggregation.normalizer import normalize_report
from loadtest_metrics.base.logging import get_logger


def test_prefers_aggregate_latencies(sample_report):
    sample_report["latencies"] = [[1, "other", 1, 200]]
    report = normalize_report(sample_report)
    assert [s.request_id for s in report.samples] == ["r1", "r2", "r3"]
    assert report.status_counts == {"200": 5, "404": 2, "500": 1}
    assert report.mean_rps == 42.5
    assert report.timestamp == "2023-11-14T22:13:20.000Z"


def test_falls_back_to_top_level_latencies():
    report = normalize_report({"latencies": [[5, "a", 1_000_000, 200]]})
    assert len(report.samples) == 1
    assert report.status_counts is None
    assert report.mean_rps is None


def test_non_sequence_aggregate_latencies_fall_back():
    report = normalize_report({"aggregate": {"latencies": "nope"}, "latencies": [[5, "a", 1, 200]]})
    assert len(report.samples) == 1


def test_missing_report_degrades_to_empty_defaults():
    report = normalize_report(None)
    assert report.samples == ()
    assert report.status_counts is None
    assert report.mean_rps is None
    assert report.timestamp.endswith("Z")


def test_attribute_shaped_report_is_accepted():
    raw = SimpleNamespace(
        timestamp="2024-02-02T10:00:00.000Z",
        rps=SimpleNamespace(mean=3.0),
        codes=None,
        aggregate=None,
        latencies=[[1, "a", 1, 200]],
    )
    report = normalize_report(raw)
    assert report.timestamp == "2024-02-02T10:00:00.000Z"
    assert report.mean_rps == 3.0
    assert len(report.samples) == 1


def test_malformed_fields_are_dropped_and_logged(capsys):
    get_logger()  # bind the console handler to the captured stderr
    report = normalize_report({"codes": "garbage", "rps": {"mean": 7}, "latencies": [[1, "a", 1, 200], "bad"]})
    assert report.status_counts is None
    assert report.mean_rps == 7.0
    assert len(report.samples) == 1
    lines = [json.loads(ln) for ln in capsys.readouterr().err.splitlines() if ln.strip()]
    events = [ln for ln in lines if ln.get("event") == "report.malformed"]
    assert any(ev.get("dropped_fields") == ["codes"] for ev in events)
    assert any(ev.get("skipped_samples") == 1 for ev in events)


def test_caller_samples_are_not_modified(sample_report):
    before = json.dumps(sample_report)
    normalize_report(sample_report)
    assert json.dumps(sample_report) == before


def test_out_of_range_report_timestamp_falls_back_to_now(capsys):
    get_logger()
    report = normalize_report({"timestamp": 1e20, "codes": {"200": 1}})
    assert report.timestamp.endswith("Z")
    assert report.status_counts == {"200": 1}
    lines = [json.loads(ln) for ln in capsys.readouterr().err.splitlines() if ln.strip()]
    events = [ln for ln in lines if ln.get("event") == "report.malformed"]
    assert any(ev.get("dropped_fields") == ["timestamp"] for ev in events)
    assert all(ev.get("error_code") == "malformed_report" for ev in events)


def test_unrenderable_sample_timestamps_are_skipped():
    report = normalize_report({"latencies": [[1, "a", 1_000_000, 200], [10**20, "b", 2_000_000, 200]]})
    assert [s.request_id for s in report.samples] == ["a"]


def test_bad_count_keeps_the_rest_of_the_codes():
    report = normalize_report({"codes": {"200": 5, "404": 2.5, "500": None}})
    assert report.status_counts is not None
    assert report.status_counts["200"] == 5
