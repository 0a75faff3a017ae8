"""Pydantic DTOs validating inbound configuration and run reports."""

from .config import MetricsConfig, load_plugin_config, validate_config
from .report import AggregateDTO, ReportDTO, RpsDTO

__all__ = [
    "AggregateDTO",
    "MetricsConfig",
    "ReportDTO",
    "RpsDTO",
    "load_plugin_config",
    "validate_config",
]
