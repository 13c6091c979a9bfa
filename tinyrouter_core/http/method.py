"""HTTP methods.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class Method(str, Enum):
    """HTTP request method."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"

    @classmethod
    def from_string(cls, method: Union[str, "Method"]) -> "Method":
        """Parse a method name, case-insensitively.

        Raises:
            ValueError: for methods outside the supported set
        """
        if isinstance(method, cls):
            return method
        return cls(method.strip().upper())

    def __str__(self) -> str:
        return self.value


__all__ = [
    "Method",
]
