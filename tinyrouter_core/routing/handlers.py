"""Handler resolution.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

A route handler is one of:
- a plain callable: ``handler(request)``
- a ``(target, method_name)`` pair; a class target is instantiated first
- an invokable class, instantiated with no arguments and then called
"""

from __future__ import annotations

from typing import Any

from tinyrouter_core.exceptions import InvalidHandler
from tinyrouter_core.middleware.base import Handler


def resolve_handler(handler: Any) -> Handler:
    """Turn a handler reference into a callable.

    Raises:
        InvalidHandler: when ``handler`` has none of the supported shapes
    """
    if isinstance(handler, type):
        instance = handler()
        if not callable(instance):
            raise InvalidHandler(f"Handler class {handler.__name__} is not invokable")
        return instance

    if isinstance(handler, tuple) and len(handler) == 2:
        target, method_name = handler
        if isinstance(target, type):
            target = target()
        bound = getattr(target, method_name, None) if isinstance(method_name, str) else None
        if not callable(bound):
            raise InvalidHandler(f"Handler {handler!r} does not name a callable method")
        return bound

    if callable(handler):
        return handler

    raise InvalidHandler(
        "Handler must be callable, (target, method_name), or an invokable class."
    )


__all__ = [
    "resolve_handler",
]
