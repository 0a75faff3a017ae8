"""Metric sinks: the backend write API the publisher talks to."""

from .base import MetricSink, batch_to_wire
from .http import HttpMetricSink
from .memory import RecordingSink

__all__ = ["MetricSink", "HttpMetricSink", "RecordingSink", "batch_to_wire"]
