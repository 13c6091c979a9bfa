"""Route Collection - Ordered route table and method/path resolution.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterator, List, Optional, Tuple, Union

from tinyrouter_core.exceptions import MethodNotAllowed, NotFound
from tinyrouter_core.http.method import Method
from tinyrouter_core.routing.route import Route

logger = logging.getLogger(__name__)


class RouteCollection:
    """Ordered collection of routes.

    Registration order is match priority: the first route whose pattern
    and method both match wins, so specific patterns must be registered
    before catch-alls.
    """

    def __init__(self):
        self._routes: List[Route] = []
        self._lock = threading.RLock()

    def add(self, route: Route) -> Route:
        """Append a route."""
        with self._lock:
            self._routes.append(route)
        return route

    def match(
        self,
        method: Union[str, Method],
        path: str,
    ) -> Tuple[Route, Dict[str, str]]:
        """Resolve a request to a route.

        Args:
            method: HTTP method
            path: Request path

        Returns:
            Tuple of (route, params)

        Raises:
            NotFound: no pattern matches the path
            MethodNotAllowed: patterns match, but none for this method
        """
        method = Method.from_string(method)
        allowed: List[str] = []

        with self._lock:
            routes = list(self._routes)

        for route in routes:
            params = route.match(path)
            if params is None:
                continue
            if route.method is method:
                return route, params
            if route.method.value not in allowed:
                allowed.append(route.method.value)

        if allowed:
            raise MethodNotAllowed(allowed)
        raise NotFound(f"No route found for {method.value} {path}")

    def find_by_name(self, name: str) -> Optional[Route]:
        """Get the first route registered under ``name``."""
        with self._lock:
            for route in self._routes:
                if route.name == name:
                    return route
        return None

    def get_routes(self) -> List[Route]:
        """Get all routes, in registration order."""
        with self._lock:
            return self._routes.copy()

    def __iter__(self) -> Iterator[Route]:
        return iter(self.get_routes())

    def __len__(self) -> int:
        return len(self._routes)


__all__ = [
    "RouteCollection",
]
