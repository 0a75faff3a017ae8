"""Value types: records, samples and dimensions."""
from __future__ import annotations

import pytest

from loadtest_metrics.base.constants import SampleField
from loadtest_metrics.base.models import (
    Dimension,
    LatencySample,
    MetricRecord,
    StatisticSet,
    coerce_dimensions,
)
from loadtest_metrics.base.units import StandardUnit


def test_record_requires_exactly_one_of_value_or_statistics():
    with pytest.raises(ValueError):
        MetricRecord(name="x", timestamp="t", unit=StandardUnit.COUNT)
    with pytest.raises(ValueError):
        MetricRecord(
            name="x",
            timestamp="t",
            unit=StandardUnit.COUNT,
            value=1,
            statistics=StatisticSet(minimum=1, maximum=1, sample_count=1, sum=1),
        )


def test_value_record_wire_shape():
    record = MetricRecord(
        name="2xx Responses",
        timestamp="2024-01-01T00:00:00.000Z",
        unit=StandardUnit.COUNT,
        value=0,
        dimensions=(Dimension("Env", "prod"),),
    )
    assert record.to_wire() == {
        "MetricName": "2xx Responses",
        "Dimensions": [{"Name": "Env", "Value": "prod"}],
        "Timestamp": "2024-01-01T00:00:00.000Z",
        "Unit": "Count",
        "Value": 0,
    }


def test_statistic_record_wire_shape():
    record = MetricRecord(
        name="ResponseLatency",
        timestamp="t",
        unit=StandardUnit.MILLISECONDS,
        statistics=StatisticSet(minimum=1.0, maximum=3.0, sample_count=3, sum=6.0),
    )
    wire = record.to_wire()
    assert "Value" not in wire
    assert wire["Unit"] == "Milliseconds"
    assert wire["StatisticValues"] == {"SampleCount": 3, "Sum": 6.0, "Minimum": 1.0, "Maximum": 3.0}


def test_latency_sample_from_raw_uses_field_positions():
    raw = [100, "req-1", 2_500_000, 201]
    sample = LatencySample.from_raw(raw)
    assert sample.timestamp_ms == raw[SampleField.TIMESTAMP]
    assert sample.request_id == "req-1"
    assert sample.latency_ns == 2_500_000
    assert sample.status_code == 201


@pytest.mark.parametrize(
    "raw",
    [
        [1, "a", 2],
        "abcd",
        [1, "a", "slow", 200],
        [None, "a", 1, 200],
        [10**20, "a", 1, 200],
        [float("nan"), "a", 1, 200],
        [1, "a", float("inf"), 200],
        [1, "a", 10**400, 200],
    ],
)
def test_latency_sample_rejects_malformed_entries(raw):
    with pytest.raises(ValueError):
        LatencySample.from_raw(raw)


def test_coerce_dimensions_accepts_supported_shapes():
    dims = coerce_dimensions([
        {"Name": "Env", "Value": "prod"},
        {"name": "Region", "value": "eu-west-1"},
        ("Team", "perf"),
        Dimension("Build", "42"),
    ])
    assert [d.name for d in dims] == ["Env", "Region", "Team", "Build"]
    assert coerce_dimensions(None) == ()


def test_coerce_dimensions_rejects_unknown_shapes():
    with pytest.raises(ValueError):
        coerce_dimensions([{"Name": "Env"}])
    with pytest.raises(ValueError):
        coerce_dimensions(["Env"])


def test_unit_set_covers_backend_families():
    values = {u.value for u in StandardUnit}
    for expected in ("Milliseconds", "Count", "Count/Second", "Bytes", "Percent", "Gigabits/Second", "None"):
        assert expected in values
