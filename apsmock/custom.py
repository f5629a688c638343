"""Registry of handlers that replace the generic example-based ones."""

from __future__ import annotations

import threading
from typing import Any, Callable

from apsmock.generic import MockResponse

HandlerFn = Callable[[Any], MockResponse]
"""A handler receives the request's JSON body, or None, and returns a response."""


class CustomHandlerRegistry:
    """Maps route keys to custom handler functions."""

    def __init__(self) -> None:
        self._handlers: dict[str, HandlerFn] = {}
        self._lock = threading.Lock()

    def register(self, route_key: str, handler: HandlerFn) -> None:
        """Register a handler for a route, replacing any earlier one."""
        with self._lock:
            self._handlers[route_key] = handler

    def has(self, route_key: str) -> bool:
        """Tell whether a handler is registered for the route."""
        with self._lock:
            return route_key in self._handlers

    def get(self, route_key: str) -> HandlerFn | None:
        """Return the handler for the route, or None."""
        with self._lock:
            return self._handlers.get(route_key)

    def __contains__(self, route_key: object) -> bool:
        return isinstance(route_key, str) and self.has(route_key)