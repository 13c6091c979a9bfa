"""Routing module - Pattern matching, route table, dispatch and URLs."""

from tinyrouter_core.routing.collection import RouteCollection
from tinyrouter_core.routing.handlers import resolve_handler
from tinyrouter_core.routing.matcher import CompiledMatcher, compile_pattern
from tinyrouter_core.routing.route import Route, RouteDefinition
from tinyrouter_core.routing.router import Router
from tinyrouter_core.routing.url import UrlGenerator

__all__ = [
    "CompiledMatcher",
    "compile_pattern",
    "Route",
    "RouteCollection",
    "RouteDefinition",
    "Router",
    "UrlGenerator",
    "resolve_handler",
]
