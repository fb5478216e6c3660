"""Wildcard Matcher - Placeholder compilation for route patterns.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from typing import List, Optional

from routy_core.routing.errors import InvalidPattern

OPEN = "{"
CLOSE = "}"

# One path segment, at least one character.
SEGMENT = "([^/]+)"


class WildcardCompiler:
    """Translate ``{name}`` placeholders into positional capture groups.

    Supports:
    - Static text: users/list (escaped, matched literally)
    - Placeholders: users/{id} -> users/([^/]+)
    - Several placeholders per segment: files/{name}.{ext}

    Placeholder names are never looked up; captured values are returned in
    left-to-right order. Compiled patterns are not cached.

    Usage:
        compiler = WildcardCompiler()
        compiler.compile("users/{id}")           # 'users/([^/]+)'
        compiler.match("users/{id}", "users/7")  # ['7']
    """

    def compile(self, pattern: str) -> str:
        """Compile pattern to an unanchored regex source string.

        Raises:
            InvalidPattern: If a placeholder is never closed
        """
        regex_parts = []
        position = 0

        while True:
            start = pattern.find(OPEN, position)
            if start == -1:
                regex_parts.append(re.escape(pattern[position:]))
                break

            end = pattern.find(CLOSE, start + 1)
            if end == -1:
                raise InvalidPattern(
                    f"Pattern {pattern!r} has an unterminated placeholder at {start}"
                )

            regex_parts.append(re.escape(pattern[position:start]))
            regex_parts.append(SEGMENT)
            position = end + 1

        return "".join(regex_parts)

    def match(self, pattern: str, value: str) -> Optional[List[str]]:
        """Match value against the whole pattern.

        Returns:
            Captured values in pattern order, or None if no match
        """
        regex = re.compile(self.compile(pattern))
        match = regex.fullmatch(value)

        if match:
            return list(match.groups())
        return None


def make(pattern: str) -> str:
    """Compile pattern with a default compiler."""
    return WildcardCompiler().compile(pattern)


def has_wildcards(pattern: str) -> bool:
    """Check if pattern needs wildcard compilation."""
    return OPEN in pattern


__all__ = [
    "WildcardCompiler",
    "make",
    "has_wildcards",
]
