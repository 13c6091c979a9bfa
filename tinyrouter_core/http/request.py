"""Request/Response - Immutable HTTP request and response values.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Mapping, Optional

from tinyrouter_core.http.method import Method


def _frozen(data: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True)
class Request:
    """HTTP Request object.

    Represents an incoming request. Instances are never mutated; the
    router hands handlers a copy carrying the captured path parameters.
    """

    # Map fields are read-only proxies, which are unhashable.
    __hash__ = None

    method: Method
    path: str
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "method", Method.from_string(self.method))
        for name in ("query", "body", "headers", "params"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    def with_params(self, params: Mapping[str, str]) -> "Request":
        """Return a copy carrying ``params``."""
        return replace(self, params=params)

    def param(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a path parameter."""
        return self.params.get(name, default)

    def get_header(self, name: str, default: str = "") -> str:
        """Get header value (case-insensitive)."""
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return default


@dataclass(frozen=True)
class Response:
    """HTTP Response object."""

    __hash__ = None

    body: str = ""
    status: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)

    STATUS_MESSAGES: ClassVar[Dict[int, str]] = {
        200: "OK",
        201: "Created",
        204: "No Content",
        301: "Moved Permanently",
        302: "Found",
        304: "Not Modified",
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        500: "Internal Server Error",
    }

    def __post_init__(self):
        object.__setattr__(self, "headers", _frozen(self.headers))

    @property
    def status_message(self) -> str:
        """Get status message."""
        return self.STATUS_MESSAGES.get(self.status, "Unknown")

    @property
    def is_success(self) -> bool:
        """Check if response is successful (2xx)."""
        return 200 <= self.status < 300

    @property
    def is_redirect(self) -> bool:
        """Check if response is redirect (3xx)."""
        return 300 <= self.status < 400

    @property
    def is_error(self) -> bool:
        """Check if response is error (4xx or 5xx)."""
        return self.status >= 400

    def with_header(self, name: str, value: str) -> "Response":
        """Return a copy with header ``name`` set to ``value``."""
        headers = dict(self.headers)
        headers[name] = value
        return replace(self, headers=headers)

    @classmethod
    def text(
        cls,
        text: str,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> "Response":
        """Create text response."""
        resp_headers = dict(headers or {})
        resp_headers["Content-Type"] = "text/plain"
        return cls(body=text, status=status, headers=resp_headers)

    @classmethod
    def json(
        cls,
        data: Any,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> "Response":
        """Create JSON response."""
        resp_headers = dict(headers or {})
        resp_headers["Content-Type"] = "application/json"
        return cls(body=json.dumps(data), status=status, headers=resp_headers)

    @classmethod
    def redirect(cls, location: str, status: int = 302) -> "Response":
        """Create redirect response."""
        return cls(status=status, headers={"Location": location})

    @classmethod
    def error(cls, status: int, message: Optional[str] = None) -> "Response":
        """Create error response."""
        msg = message or cls.STATUS_MESSAGES.get(status, "Error")
        return cls.json({"error": msg}, status=status)


__all__ = [
    "Request",
    "Response",
]
