"""Router - Route registration and request dispatch.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from tinyrouter_core.exceptions import HTTPException
from tinyrouter_core.http.method import Method
from tinyrouter_core.http.request import Request, Response
from tinyrouter_core.middleware.base import MiddlewareChain, MiddlewareRef
from tinyrouter_core.routing.collection import RouteCollection
from tinyrouter_core.routing.handlers import resolve_handler
from tinyrouter_core.routing.route import Route, RouteDefinition
from tinyrouter_core.routing.url import UrlGenerator
from tinyrouter_core.utils.config import RouterConfig

logger = logging.getLogger(__name__)


class Router:
    """Request Router.

    Features:
    - Path parameters (/users/{id}), optionally constrained (/users/{id:\\d+})
    - First-match-wins priority in registration order
    - 404 vs 405 distinction with the allowed methods
    - Global, group and per-route middleware
    - Named routes and URL generation

    Usage:
        router = Router()
        router.add_middleware(LoggingMiddleware())
        router.get("/users/{id}", show_user).name("users.show")

        def admin(r):
            r.get("/stats", stats).middleware(RequireAdmin)

        router.group("/admin", admin, middleware=[AuditMiddleware])

        response = router.dispatch(Request("GET", "/users/7"))
        router.url("users.show", {"id": 7})  # "/users/7"

    Registration is expected to finish before requests are dispatched;
    dispatch itself only reads the route table and middleware lists.
    """

    def __init__(self, config: Optional[RouterConfig] = None):
        self.config = config or RouterConfig()
        self._routes = RouteCollection()
        self._url_generator = UrlGenerator(self._routes)
        self._middleware = MiddlewareChain()

        # Active group scopes
        self._prefix_stack: List[str] = []
        self._middleware_stack: List[List[MiddlewareRef]] = []

    # -------------------------------------------------------------------------
    # Registration

    def register(
        self,
        method: Union[str, Method],
        pattern: str,
        handler: Any,
    ) -> RouteDefinition:
        """Register a route.

        Args:
            method: HTTP method
            pattern: Route pattern, relative to the active group prefixes
            handler: Callable, (target, method_name) pair, or invokable class

        Returns:
            Definition handle for naming the route and adding middleware
        """
        full_pattern = "".join(self._prefix_stack) + pattern
        group_middleware = [ref for refs in self._middleware_stack for ref in refs]

        route = Route(
            method=Method.from_string(method),
            pattern=full_pattern,
            handler=handler,
            group_middleware=group_middleware,
        )
        self._routes.add(route)

        logger.debug(f"Registered route {route.method.value} {full_pattern}")
        return RouteDefinition(route)

    def get(self, pattern: str, handler: Any) -> RouteDefinition:
        """Add GET route."""
        return self.register(Method.GET, pattern, handler)

    def post(self, pattern: str, handler: Any) -> RouteDefinition:
        """Add POST route."""
        return self.register(Method.POST, pattern, handler)

    def put(self, pattern: str, handler: Any) -> RouteDefinition:
        """Add PUT route."""
        return self.register(Method.PUT, pattern, handler)

    def patch(self, pattern: str, handler: Any) -> RouteDefinition:
        """Add PATCH route."""
        return self.register(Method.PATCH, pattern, handler)

    def delete(self, pattern: str, handler: Any) -> RouteDefinition:
        """Add DELETE route."""
        return self.register(Method.DELETE, pattern, handler)

    def options(self, pattern: str, handler: Any) -> RouteDefinition:
        """Add OPTIONS route."""
        return self.register(Method.OPTIONS, pattern, handler)

    def head(self, pattern: str, handler: Any) -> RouteDefinition:
        """Add HEAD route."""
        return self.register(Method.HEAD, pattern, handler)

    def add_middleware(self, middleware: Any) -> "Router":
        """Add middleware applied to every route.

        A class is constructed fresh for every dispatch; an instance is
        shared.
        """
        self._middleware.add(middleware)
        return self

    def group(
        self,
        prefix: str,
        body: Callable[["Router"], Any],
        middleware: Optional[Iterable[Any]] = None,
    ) -> None:
        """Register routes sharing a path prefix and middleware.

        Routes registered inside ``body`` get the concatenation of all
        active prefixes (no slash normalization) and all active group
        middleware, outermost group first.
        """
        with self._group_scope(prefix, middleware or []):
            body(self)

    @contextmanager
    def _group_scope(self, prefix: str, middleware: Iterable[Any]) -> Iterator[None]:
        refs = [MiddlewareRef.of(mw) for mw in middleware]
        self._prefix_stack.append(prefix)
        self._middleware_stack.append(refs)
        logger.debug(f"Entering route group {''.join(self._prefix_stack)!r}")
        try:
            yield
        finally:
            self._prefix_stack.pop()
            self._middleware_stack.pop()

    # -------------------------------------------------------------------------
    # Dispatch

    def match(
        self,
        method: Union[str, Method],
        path: str,
    ) -> Tuple[Route, Dict[str, str]]:
        """Resolve method and path to ``(route, params)``."""
        return self._routes.match(method, path)

    def dispatch(self, request: Request) -> Response:
        """Route a request through its middleware pipeline to its handler.

        Raises:
            NotFound: no route matches the path
            MethodNotAllowed: the path matches, the method does not
            InvalidHandler: the route handler cannot be invoked
        """
        try:
            route, params = self._routes.match(request.method, request.path)
        except HTTPException as e:
            logger.debug(f"No route for {request.method.value} {request.path}: {e}")
            raise

        level = logging.INFO if self.config.log_dispatch else logging.DEBUG
        logger.log(
            level,
            f"Dispatching {request.method.value} {request.path} -> {route.pattern}",
        )

        request = request.with_params(params)
        handler = resolve_handler(route.handler)

        # global + group + route
        chain = MiddlewareChain(self._middleware.refs).extend(route.middleware)
        pipeline = chain.build(handler)

        return pipeline(request)

    # -------------------------------------------------------------------------
    # URLs

    def url(self, name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Generate the path for a named route."""
        return self._url_generator.generate(name, params)

    def routes(self) -> List[Route]:
        """Get all routes, in registration order."""
        return self._routes.get_routes()

    @property
    def middleware(self) -> List[MiddlewareRef]:
        """Global middleware, in registration order."""
        return self._middleware.refs


__all__ = [
    "Router",
]
