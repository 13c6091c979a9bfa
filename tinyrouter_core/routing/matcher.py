"""Route Matcher - Compiles route patterns into path matchers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Pattern syntax:
- Literal text matches verbatim: /users
- Placeholders capture one or more non-separator characters: /users/{id}
- Constrained placeholders capture exactly the given regex: /users/{id:\\d+}

Matching is anchored to the whole path and accepts exactly one optional
trailing slash.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from tinyrouter_core.exceptions import InvalidPattern

logger = logging.getLogger(__name__)

# Splits a pattern into literal text and {placeholder} tokens.
PLACEHOLDER_RE = re.compile(r"\{(\w+)(?::([^}]+))?\}")

DEFAULT_CONSTRAINT = "[^/]+"


@dataclass(frozen=True)
class CompiledMatcher:
    """Anchored path regex plus the placeholder names it captures."""

    pattern: str
    regex: re.Pattern
    param_names: Tuple[str, ...]

    def match(self, path: str) -> Optional[Dict[str, str]]:
        """Match a path.

        Returns:
            Dict of captured parameters if match, None otherwise
        """
        match = self.regex.fullmatch(path)
        if match is None:
            return None
        return {name: match.group(name) for name in self.param_names}


def tokenize(pattern: str) -> Iterator[Tuple[str, Optional[str], Optional[str]]]:
    """Split a pattern into (literal, name, constraint) tokens.

    Literal tokens carry ``None`` for name and constraint; placeholder
    tokens carry an empty literal.
    """
    position = 0
    for match in PLACEHOLDER_RE.finditer(pattern):
        if match.start() > position:
            yield pattern[position:match.start()], None, None
        yield "", match.group(1), match.group(2)
        position = match.end()
    if position < len(pattern):
        yield pattern[position:], None, None


def compile_pattern(pattern: str) -> CompiledMatcher:
    """Compile a route pattern.

    Raises:
        InvalidPattern: on duplicate placeholder names or a bad constraint
    """
    param_names = []
    regex_parts = []

    for literal, name, constraint in tokenize(pattern):
        if name is None:
            regex_parts.append(re.escape(literal))
            continue

        if name in param_names:
            raise InvalidPattern(pattern, f"duplicate placeholder '{name}'")
        param_names.append(name)
        regex_parts.append(f"(?P<{name}>{constraint or DEFAULT_CONSTRAINT})")

    regex_str = "".join(regex_parts) + "/?"
    try:
        regex = re.compile(regex_str)
    except re.error as e:
        raise InvalidPattern(pattern, str(e)) from e

    logger.debug(f"Compiled route pattern {pattern!r} -> {regex_str!r}")
    return CompiledMatcher(pattern=pattern, regex=regex, param_names=tuple(param_names))


__all__ = [
    "PLACEHOLDER_RE",
    "CompiledMatcher",
    "compile_pattern",
    "tokenize",
]
