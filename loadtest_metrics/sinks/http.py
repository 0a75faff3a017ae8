"""HTTP sink posting ``PutMetricData``-shaped JSON bodies.

External dependencies:
    - ``httpx`` via the shared client pool in :mod:`loadtest_metrics.base.http`.

Timeouts come from :func:`loadtest_metrics.config.env.get_sink_timeout`
through the pooled client. Non-2xx responses raise ``httpx.HTTPStatusError``;
the publisher classifies and logs them. No retries.
"""

from __future__ import annotations

from typing import Dict, Optional

import httpx

from ..base.http import get_httpx_client
from ..base.models import Batch
from .base import batch_to_wire


class HttpMetricSink:
    """Submit batches to a metrics gateway over HTTP."""

    def __init__(
        self,
        endpoint: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if not endpoint:
            raise ValueError("endpoint is required")
        self.endpoint = endpoint
        self._headers = dict(headers or {})
        self._client = client

    def _get_client(self) -> httpx.Client:
        return self._client if self._client is not None else get_httpx_client(None, purpose="sink")

    def put(self, namespace: str, batch: Batch) -> int:
        """POST one batch; return the response status code."""
        response = self._get_client().post(
            self.endpoint,
            json=batch_to_wire(namespace, batch),
            headers=self._headers,
        )
        response.raise_for_status()
        return response.status_code


__all__ = ["HttpMetricSink"]
