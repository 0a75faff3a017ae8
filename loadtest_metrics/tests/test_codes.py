"""Response-class bucketing."""
from __future__ import annotations

import json

from loadtest_metrics.aggregation.codes import aggregate_codes, leading_digit
from loadtest_metrics.base.logging import get_logger
from loadtest_metrics.base.units import StandardUnit

TS = "2024-01-01T00:00:00.000Z"


def test_four_classes_with_explicit_zero():
    records = aggregate_codes({"200": 5, "404": 2, "500": 1}, TS)
    assert [r.name for r in records] == ["2xx Responses", "3xx Responses", "4xx Responses", "5xx Responses"]
    assert [r.value for r in records] == [5, 0, 2, 1]
    assert all(r.unit is StandardUnit.COUNT and r.timestamp == TS for r in records)


def test_codes_in_same_class_are_summed():
    records = aggregate_codes({"200": 1, "201": 2, 204: 3, "503": 4, "502": 1}, TS)
    assert [r.value for r in records] == [6, 0, 0, 5]


def test_absent_counts_emit_nothing():
    assert aggregate_codes(None, TS) == []


def test_empty_counts_emit_four_zeros():
    assert [r.value for r in aggregate_codes({}, TS)] == [0, 0, 0, 0]


def test_out_of_range_and_non_numeric_codes_are_ignored():
    records = aggregate_codes({"101": 9, "ETIMEDOUT": 3, "302": 2}, TS)
    assert [r.value for r in records] == [0, 2, 0, 0]


def test_leading_digit():
    assert leading_digit("404") == 4
    assert leading_digit(503) == 5
    assert leading_digit("ECONNRESET") is None
    assert leading_digit("") is None


def test_non_integer_counts_are_skipped_and_logged(capsys):
    get_logger()
    records = aggregate_codes({"200": 5, "404": 2.5, "500": None, "302": "n/a"}, TS)
    assert [r.value for r in records] == [5, 0, 0, 0]
    lines = [json.loads(ln) for ln in capsys.readouterr().err.splitlines() if ln.strip()]
    events = [ln for ln in lines if ln.get("event") == "report.malformed"]
    assert events and sorted(events[0]["ignored_codes"]) == ["302", "404", "500"]
    assert events[0]["error_code"] == "malformed_report"


def test_whole_float_counts_are_accepted():
    assert [r.value for r in aggregate_codes({"200": 3.0}, TS)] == [3, 0, 0, 0]
