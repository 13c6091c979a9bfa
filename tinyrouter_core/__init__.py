"""TinyRouter - In-process HTTP routing engine.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

TinyRouter maps a method and path to a registered handler, extracts path
parameters, runs the request through a middleware pipeline, and builds
URLs back from route names.

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────────┐
│                              TinyRouter                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                              │
│  ┌───────────────────────────────────────────────────────────────────────┐  │
│  │                          Dispatch Pipeline                             │  │
│  │  Request ──▶ Match ──▶ Global MW ──▶ Group MW ──▶ Route MW ──▶ Handler │  │
│  └───────────────────────────────────────────────────────────────────────┘  │
│                                                                              │
│  ┌─────────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐ │
│  │    Routing      │  │   Middleware    │  │        HTTP                 │ │
│  │                 │  │                 │  │                             │ │
│  │ - Patterns      │  │ - Chain         │  │ - Method                    │ │
│  │ - Route table   │  │ - Deferred refs │  │ - Request                   │ │
│  │ - Groups        │  │ - Logging       │  │ - Response                  │ │
│  │ - URL builder   │  │                 │  │                             │ │
│  └─────────────────┘  └─────────────────┘  └─────────────────────────────┘ │
│                                                                              │
└─────────────────────────────────────────────────────────────────────────────┘

Usage:
    from tinyrouter_core import Router, Request, Response

    router = Router()
    router.get("/users/{id:\\d+}", lambda req: Response(req.params["id"])).name("user")

    router.dispatch(Request("GET", "/users/7")).body  # "7"
    router.url("user", {"id": 7})                      # "/users/7"
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# HTTP
from tinyrouter_core.http.method import Method
from tinyrouter_core.http.request import Request, Response

# Errors
from tinyrouter_core.exceptions import (
    HTTPException,
    InvalidHandler,
    InvalidPattern,
    InvalidRouteName,
    MethodNotAllowed,
    MissingRouteParam,
    NotFound,
    RouterError,
)

# Routing
from tinyrouter_core.routing.matcher import CompiledMatcher, compile_pattern
from tinyrouter_core.routing.collection import RouteCollection
from tinyrouter_core.routing.route import Route, RouteDefinition
from tinyrouter_core.routing.router import Router
from tinyrouter_core.routing.url import UrlGenerator

# Middleware
from tinyrouter_core.middleware.base import Middleware, MiddlewareChain, MiddlewareRef
from tinyrouter_core.middleware.logging import LoggingMiddleware

# Utils
from tinyrouter_core.utils.config import RouterConfig, configure_logging, load_config

__all__ = [
    # Version
    "__version__",
    # HTTP
    "Method",
    "Request",
    "Response",
    # Errors
    "RouterError",
    "HTTPException",
    "NotFound",
    "MethodNotAllowed",
    "InvalidHandler",
    "InvalidPattern",
    "InvalidRouteName",
    "MissingRouteParam",
    # Routing
    "CompiledMatcher",
    "compile_pattern",
    "Route",
    "RouteCollection",
    "RouteDefinition",
    "Router",
    "UrlGenerator",
    # Middleware
    "Middleware",
    "MiddlewareChain",
    "MiddlewareRef",
    "LoggingMiddleware",
    # Utils
    "RouterConfig",
    "configure_logging",
    "load_config",
]
