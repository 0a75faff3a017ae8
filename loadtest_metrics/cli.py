"""
Replay a saved run report through the aggregation engine.

CLI Examples:
    python -m loadtest_metrics report.json --config script.json --dry-run
    python -m loadtest_metrics report.json --namespace svc/load --dimension Env=staging --endpoint http://gw/metrics
    python -m loadtest_metrics report.json --config script.json --json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from .base.dto import load_plugin_config, validate_config
from .base.dto.config import MetricsConfig
from .base.errors import ConfigError
from .base.logging import configure_logger
from .config.env import get_sink_endpoint
from .reporter import MetricsReporter
from .sinks import HttpMetricSink, RecordingSink
from .sinks.base import MetricSink


def _load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _resolve_config(args: argparse.Namespace) -> MetricsConfig:
    """Build the plugin config from ``--config`` and/or the inline flags.

    ``--config`` accepts either a whole script (``{"config": {...}}``) or its
    ``config`` section. Inline ``--namespace``/``--dimension`` override it.
    """
    block: Dict[str, Any] = {}
    if args.config:
        data = _load_json(args.config)
        if isinstance(data, dict) and "config" in data:
            data = data["config"]
        block = dict(validate_config(data).model_dump())
    if args.namespace is not None:
        block["namespace"] = args.namespace
    if args.dimension:
        dims = []
        for item in args.dimension:
            name, sep, value = item.partition("=")
            if not sep:
                raise ConfigError(message=f"dimension must look like NAME=VALUE: {item!r}")
            dims.append([name, value])
        block["dimensions"] = dims
    return load_plugin_config(block)


def _build_sink(args: argparse.Namespace) -> MetricSink:
    if args.dry_run:
        return RecordingSink()
    endpoint = args.endpoint or get_sink_endpoint()
    if not endpoint:
        raise ConfigError(message="an --endpoint (or LOADTEST_METRICS_ENDPOINT) is required unless --dry-run is set")
    return HttpMetricSink(endpoint)


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Publish a load-test run report as metric batches")
    parser.add_argument("report", help="Path to a JSON run report")
    parser.add_argument("--config", help="Script (or script config) JSON holding plugins.cloudwatch", default=None)
    parser.add_argument("--namespace", help="Metric namespace (overrides --config)", default=None)
    parser.add_argument(
        "--dimension",
        action="append",
        default=[],
        help="Dimension NAME=VALUE; repeatable (overrides --config)",
    )
    parser.add_argument("--endpoint", help="HTTP metrics gateway URL", default=None)
    parser.add_argument("--dry-run", action="store_true", help="Aggregate without sending anything")
    parser.add_argument("--json", action="store_true", help="Output a JSON summary only")
    parser.add_argument("--log-level", default=None, help="Logging level (e.g. DEBUG)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point.

    Returns 0 on success, 1 if any batch failed, 2 on bad config or an
    unreadable JSON input.
    """
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    if args.log_level:
        configure_logger(level=args.log_level)
    try:
        config = _resolve_config(args)
        sink = _build_sink(args)
        report = _load_json(args.report)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (OSError, json.JSONDecodeError) as exc:
        print(f"error: cannot load JSON input: {exc}", file=sys.stderr)
        return 2

    with MetricsReporter(config, sink) as reporter:
        run = reporter.new_run()
        batches = run.aggregate(report)
        result = run.publish()
        result.wait()

    summary = {
        "namespace": config.namespace,
        "run_id": run.run_id,
        "dry_run": bool(args.dry_run),
        "batches": [[record.to_wire() for record in batch] for batch in batches],
        "failures": [
            {"batch_index": f.batch_index, "error_code": f.error_code.value, "error": str(f.error)}
            for f in result.failures
        ],
    }
    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        print(f"Namespace {config.namespace} (run {run.run_id}):\n")
        for index, batch in enumerate(batches):
            names = sorted({record.name for record in batch})
            print(f"- batch {index:3} records={len(batch):3} metrics={', '.join(names)}")
        print(f"\nSummary: {len(batches) - len(result.failures)}/{len(batches)} batches published")
        for f in result.failures:
            print(f"  batch {f.batch_index} failed ({f.error_code.value}): {f.error}")
    return 1 if result.failures else 0


__all__ = ["main"]
