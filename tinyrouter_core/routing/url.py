"""URL Generator - Reverse routing from route names.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from tinyrouter_core.exceptions import InvalidRouteName, MissingRouteParam
from tinyrouter_core.routing.collection import RouteCollection
from tinyrouter_core.routing.matcher import PLACEHOLDER_RE


class UrlGenerator:
    """Builds paths for named routes.

    Substituted values are not checked against placeholder constraints:
    ``{id:\\d+}`` happily receives ``"abc"``.
    """

    def __init__(self, routes: RouteCollection):
        self._routes = routes

    def generate(self, name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Generate a path for the route named ``name``.

        Raises:
            InvalidRouteName: no route has that name
            MissingRouteParam: a placeholder has no value in ``params``
        """
        route = self._routes.find_by_name(name)
        if route is None:
            raise InvalidRouteName(name)
        return substitute_params(route.pattern, params or {})


def substitute_params(pattern: str, params: Mapping[str, Any]) -> str:
    """Replace each placeholder in ``pattern`` with ``str(params[name])``."""

    def replace(match) -> str:
        name = match.group(1)
        if name not in params:
            raise MissingRouteParam(name, pattern)
        return str(params[name])

    return PLACEHOLDER_RE.sub(replace, pattern)


__all__ = [
    "UrlGenerator",
    "substitute_params",
]
