"""Facade - Process-wide default router.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Module-level shortcuts that delegate to a lazily created default
:class:`Router`. Tests replace it with :func:`swap`.

Usage:
    from tinyrouter_core import facade

    facade.get("/hello", hello)
    response = facade.dispatch(request)
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from tinyrouter_core.http.method import Method
from tinyrouter_core.http.request import Request, Response
from tinyrouter_core.routing.route import RouteDefinition
from tinyrouter_core.routing.router import Router
from tinyrouter_core.utils.config import load_config

logger = logging.getLogger(__name__)

_router: Optional[Router] = None
_lock = threading.Lock()


def _default_factory() -> Router:
    return Router(config=load_config())


def get_router() -> Router:
    """Get the default router, creating it on first use."""
    global _router
    with _lock:
        if _router is None:
            _router = _default_factory()
            logger.debug("Created default router")
        return _router


def swap(router: Optional[Router]) -> Optional[Router]:
    """Replace the default router and return the previous one.

    Passing None drops the current router; the next :func:`get_router`
    creates a fresh one.
    """
    global _router
    with _lock:
        previous, _router = _router, router
    return previous


def register(method: Union[str, Method], pattern: str, handler: Any) -> RouteDefinition:
    return get_router().register(method, pattern, handler)


def get(pattern: str, handler: Any) -> RouteDefinition:
    return get_router().get(pattern, handler)


def post(pattern: str, handler: Any) -> RouteDefinition:
    return get_router().post(pattern, handler)


def put(pattern: str, handler: Any) -> RouteDefinition:
    return get_router().put(pattern, handler)


def patch(pattern: str, handler: Any) -> RouteDefinition:
    return get_router().patch(pattern, handler)


def delete(pattern: str, handler: Any) -> RouteDefinition:
    return get_router().delete(pattern, handler)


def options(pattern: str, handler: Any) -> RouteDefinition:
    return get_router().options(pattern, handler)


def head(pattern: str, handler: Any) -> RouteDefinition:
    return get_router().head(pattern, handler)


def group(
    prefix: str,
    body: Callable[[Router], Any],
    middleware: Optional[Iterable[Any]] = None,
) -> None:
    get_router().group(prefix, body, middleware)


def add_middleware(middleware: Any) -> Router:
    return get_router().add_middleware(middleware)


def dispatch(request: Request) -> Response:
    return get_router().dispatch(request)


def url(name: str, params: Optional[Mapping[str, Any]] = None) -> str:
    return get_router().url(name, params)


__all__ = [
    "get_router",
    "swap",
    "register",
    "get",
    "post",
    "put",
    "patch",
    "delete",
    "options",
    "head",
    "group",
    "add_middleware",
    "dispatch",
    "url",
]
