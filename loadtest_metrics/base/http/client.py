"""Shared HTTP client pool for sinks.

Purpose:
    Provide a thread-safe pool of reusable ``httpx.Client`` instances so that
    publisher worker threads share connections instead of opening one client
    per batch.

Timeout strategy:
    Clients are created with :func:`get_sink_timeout` at first use and cached
    thereafter.

Lifecycle & cleanup:
    Clients are cached by ``(base_url, purpose)`` and closed at interpreter
    exit via ``atexit``. Tests may call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict, Optional, Tuple

import httpx

from ...config.env import get_sink_timeout

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional base URL set on the client. ``None`` groups clients
            under a shared key.
        purpose: Short string discriminating separate pools.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        timeout = get_sink_timeout()
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            # best-effort shutdown
            with contextlib.suppress(Exception):
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
