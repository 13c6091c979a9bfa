"""Middleware module - Middleware contract and pipeline composition."""

from tinyrouter_core.middleware.base import (
    Handler,
    Middleware,
    MiddlewareChain,
    MiddlewareRef,
)
from tinyrouter_core.middleware.logging import LoggingConfig, LoggingMiddleware

__all__ = [
    "Handler",
    "Middleware",
    "MiddlewareChain",
    "MiddlewareRef",
    "LoggingConfig",
    "LoggingMiddleware",
]
