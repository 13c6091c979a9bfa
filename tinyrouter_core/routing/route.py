"""Route - Registered route entries and their definition handles.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tinyrouter_core.http.method import Method
from tinyrouter_core.middleware.base import MiddlewareRef
from tinyrouter_core.routing.matcher import CompiledMatcher, compile_pattern


@dataclass
class Route:
    """Route definition.

    Created once at registration. Only ``name`` and ``route_middleware``
    may change afterwards, through a :class:`RouteDefinition`.
    """

    method: Method
    pattern: str
    handler: Any
    group_middleware: List[MiddlewareRef] = field(default_factory=list)
    name: Optional[str] = None
    route_middleware: List[MiddlewareRef] = field(default_factory=list)

    # Compiled pattern
    matcher: CompiledMatcher = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.method = Method.from_string(self.method)
        self.matcher = compile_pattern(self.pattern)

    def match(self, path: str) -> Optional[Dict[str, str]]:
        """Match path against the pattern, ignoring method."""
        return self.matcher.match(path)

    @property
    def middleware(self) -> List[MiddlewareRef]:
        """Group middleware followed by route middleware."""
        return [*self.group_middleware, *self.route_middleware]


class RouteDefinition:
    """Fluent handle returned by route registration.

    Usage:
        router.get("/users/{id}", show_user).name("users.show").middleware(Auth)
    """

    def __init__(self, route: Route):
        self._route = route

    @property
    def route(self) -> Route:
        return self._route

    def name(self, name: str) -> "RouteDefinition":
        """Name the route for URL generation."""
        self._route.name = name
        return self

    def middleware(self, *classes: type) -> "RouteDefinition":
        """Add middleware classes, constructed fresh for every dispatch."""
        self._route.route_middleware.extend(
            [MiddlewareRef.deferred_class(cls) for cls in classes]
        )
        return self

    def middleware_instance(self, *instances: Any) -> "RouteDefinition":
        """Add middleware instances, shared across dispatches."""
        self._route.route_middleware.extend(
            [MiddlewareRef.instance(instance) for instance in instances]
        )
        return self


__all__ = [
    "Route",
    "RouteDefinition",
]
