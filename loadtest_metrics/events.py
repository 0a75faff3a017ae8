"""Minimal run-lifecycle emitter.

Stands in for the load-test runner's event bus: handlers are registered per
event name and invoked synchronously, in registration order, by ``emit``.
"""
from __future__ import annotations

import threading
from typing import Any, Callable, Dict, List

Handler = Callable[..., Any]


class RunEvents:
    """Register and fire named lifecycle hooks."""

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Handler]] = {}
        self._lock = threading.RLock()

    def on(self, event: str, handler: Handler) -> None:
        with self._lock:
            self._handlers.setdefault(event, []).append(handler)

    def off(self, event: str, handler: Handler) -> None:
        """Remove a handler; unknown handlers are ignored."""
        with self._lock:
            handlers = self._handlers.get(event, [])
            if handler in handlers:
                handlers.remove(handler)

    def handlers(self, event: str) -> List[Handler]:
        with self._lock:
            return list(self._handlers.get(event, []))

    def emit(self, event: str, *args: Any, **kwargs: Any) -> List[Any]:
        """Call every handler for ``event`` and return their results."""
        return [handler(*args, **kwargs) for handler in self.handlers(event)]


__all__ = ["RunEvents", "Handler"]
