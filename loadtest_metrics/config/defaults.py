"""loadtest_metrics.config.defaults
================================

Small, stable default values used across the package. They can be
overridden via environment variables (see :mod:`loadtest_metrics.config.env`)
but provide sensible fallbacks for local runs and tests.

This module imports nothing from the rest of the package to avoid circular
dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Plugin config keys ----
# Key under <script>.config.plugins holding this plugin's block.
PLUGIN_NAME = "cloudwatch"
PLUGIN_PARAM_NAMESPACE = "namespace"
PLUGIN_PARAM_DIMENSIONS = "dimensions"

# ---- Sink / publishing ----
# Per-request timeout for the HTTP sink (seconds).
DEFAULT_SINK_TIMEOUT_SECONDS = 10.0
# Worker threads used to dispatch batches without blocking the run.
DEFAULT_MAX_WORKERS = 4

# ---- Environment variable names ----
ENV_SINK_TIMEOUT = "LOADTEST_METRICS_SINK_TIMEOUT_SECONDS"
ENV_MAX_WORKERS = "LOADTEST_METRICS_MAX_WORKERS"
ENV_SINK_ENDPOINT = "LOADTEST_METRICS_ENDPOINT"

__all__ = [
    "PLUGIN_NAME",
    "PLUGIN_PARAM_NAMESPACE",
    "PLUGIN_PARAM_DIMENSIONS",
    "DEFAULT_SINK_TIMEOUT_SECONDS",
    "DEFAULT_MAX_WORKERS",
    "ENV_SINK_TIMEOUT",
    "ENV_MAX_WORKERS",
    "ENV_SINK_ENDPOINT",
]
