"""Middleware Base - Middleware contract and pipeline composition.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional

from tinyrouter_core.http.request import Request, Response

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Response]


class Middleware(ABC):
    """Abstract middleware base class.

    Each middleware receives the request and a continuation. Code before
    ``call_next`` runs on the way in, code after it on the way out.
    Returning without calling ``call_next`` short-circuits the pipeline.

    Pipeline:
    ┌────────────────────────────────────────────────────────────┐
    │                  Middleware Pipeline                        │
    │                                                             │
    │  Request ──▶ MW1 ──▶ MW2 ──▶ ... ──▶ Handler               │
    │                                          │                  │
    │  Response ◀── MW1 ◀── MW2 ◀── ... ◀──────┘                 │
    └────────────────────────────────────────────────────────────┘
    """

    @abstractmethod
    def handle(self, request: Request, call_next: Handler) -> Response:
        """Process a request.

        Args:
            request: Request object
            call_next: Continuation running the rest of the pipeline

        Returns:
            Response from downstream, or its own to short-circuit
        """
        pass


@dataclass(frozen=True)
class MiddlewareRef:
    """Reference to a middleware.

    Either a shared instance used as-is, or a deferred class reference
    constructed with no arguments each time a pipeline is built.
    """

    target: Any
    deferred: bool = False

    @classmethod
    def instance(cls, middleware: Any) -> "MiddlewareRef":
        return cls(middleware, deferred=False)

    @classmethod
    def deferred_class(cls, middleware_class: type) -> "MiddlewareRef":
        if not isinstance(middleware_class, type):
            raise TypeError(
                f"Deferred middleware must be a class, got {middleware_class!r}"
            )
        return cls(middleware_class, deferred=True)

    @classmethod
    def of(cls, middleware: Any) -> "MiddlewareRef":
        """Wrap a class (deferred) or an instance."""
        if isinstance(middleware, MiddlewareRef):
            return middleware
        if isinstance(middleware, type):
            return cls.deferred_class(middleware)
        return cls.instance(middleware)

    def resolve(self) -> Callable[[Request, Handler], Response]:
        """Get the callable ``(request, call_next) -> response``."""
        middleware = self.target() if self.deferred else self.target
        handle = getattr(middleware, "handle", None)
        if callable(handle):
            return handle
        if callable(middleware):
            return middleware
        raise TypeError(f"Middleware {middleware!r} has no handle() method")


class MiddlewareChain:
    """Ordered middleware list composed around a terminal handler."""

    def __init__(self, middleware: Optional[Iterable[Any]] = None):
        self._middleware: List[MiddlewareRef] = [
            MiddlewareRef.of(mw) for mw in (middleware or [])
        ]

    def add(self, middleware: Any) -> "MiddlewareChain":
        """Add middleware to chain."""
        self._middleware.append(MiddlewareRef.of(middleware))
        return self

    def extend(self, middleware: Iterable[Any]) -> "MiddlewareChain":
        for mw in middleware:
            self.add(mw)
        return self

    @property
    def refs(self) -> List[MiddlewareRef]:
        return list(self._middleware)

    def build(self, handler: Handler) -> Handler:
        """Compose the chain around ``handler``.

        Wraps right to left so that at call time middleware runs in list
        order, outermost first. Deferred references are constructed here,
        once per build.
        """
        core = handler
        for ref in reversed(self._middleware):
            core = _link(ref.resolve(), core)
        return core

    def __call__(self, request: Request, handler: Handler) -> Response:
        return self.build(handler)(request)

    def __len__(self) -> int:
        return len(self._middleware)


def _link(handle: Callable[[Request, Handler], Response], call_next: Handler) -> Handler:
    def step(request: Request) -> Response:
        return handle(request, call_next)

    return step


class PassthroughMiddleware(Middleware):
    """Middleware that does nothing (for testing)."""

    def handle(self, request: Request, call_next: Handler) -> Response:
        return call_next(request)


__all__ = [
    "Handler",
    "Middleware",
    "MiddlewareRef",
    "MiddlewareChain",
    "PassthroughMiddleware",
]
