"""Exceptions - Errors raised by the routing core.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

The core never catches or translates these. Turning them into protocol
responses (404, 405 with an Allow header, ...) is left to the transport.
"""

from __future__ import annotations

from typing import Iterable, List, Optional


class RouterError(Exception):
    """Base class for all routing errors."""


class HTTPException(RouterError):
    """Routing error that maps onto an HTTP status code."""

    status_code: int = 500

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        super().__init__(message)


class NotFound(HTTPException):
    """No route pattern matches the path for any method."""

    status_code = 404

    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class MethodNotAllowed(HTTPException):
    """The path matches at least one route, but none for the method."""

    status_code = 405

    def __init__(self, allowed_methods: Iterable[str]):
        self.allowed_methods: List[str] = list(allowed_methods)
        super().__init__("Method Not Allowed")

    @property
    def allow_header(self) -> str:
        """Value for an ``Allow`` response header."""
        return ", ".join(self.allowed_methods)


class InvalidHandler(RouterError, TypeError):
    """Handler is not a function, a (target, method) pair or an invokable class."""


class InvalidPattern(RouterError, ValueError):
    """Route pattern cannot be compiled."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid route pattern '{pattern}': {reason}")


class InvalidRouteName(RouterError, LookupError):
    """No route is registered under the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No route named '{name}'")


class MissingRouteParam(RouterError, LookupError):
    """A placeholder in the named route's pattern has no value."""

    def __init__(self, name: str, pattern: str):
        self.name = name
        self.pattern = pattern
        super().__init__(f"Missing parameter '{name}' for pattern '{pattern}'")


__all__ = [
    "RouterError",
    "HTTPException",
    "NotFound",
    "MethodNotAllowed",
    "InvalidHandler",
    "InvalidPattern",
    "InvalidRouteName",
    "MissingRouteParam",
]
