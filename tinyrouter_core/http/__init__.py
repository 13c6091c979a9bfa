"""HTTP module - Request/response values and methods."""

from tinyrouter_core.http.method import Method
from tinyrouter_core.http.request import Request, Response

__all__ = [
    "Method",
    "Request",
    "Response",
]
