"""Key path parsing and resolution.

A key path addresses a value inside a nested message tree:

    nav.home            -> ("nav", "home")
    items[0].label      -> ("items", "0", "label")
    errors["not.found"] -> ("errors", "not.found")
    a['b'][2]           -> ("a", "b", "2")

Resolution never raises. Missing keys, out-of-range indexes, stepping into a
leaf and malformed paths all yield the NOT_FOUND sentinel, which callers must
treat as a normal outcome.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Final, Literal

from i18ncore.constants import MAX_PATH_CACHE_SIZE

__all__ = [
    "NOT_FOUND",
    "NotFound",
    "parse_path",
    "resolve_value",
]


class NotFound(Enum):
    """Sentinel type for a failed path resolution."""

    NOT_FOUND = "NOT_FOUND"

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final = NotFound.NOT_FOUND

_QUOTES = frozenset("'\"")


@functools.lru_cache(maxsize=MAX_PATH_CACHE_SIZE)
def parse_path(path: str) -> tuple[str, ...] | None:
    """Split a key path into segments.

    Dots separate segments. Brackets hold an index or a key; quoted bracket
    keys may contain dots, brackets and backslash-escaped quotes.

    Args:
        path: Key path string

    Returns:
        Tuple of segments, or None if the path is empty or malformed

    Examples:
        >>> parse_path("a.b[0].c")
        ('a', 'b', '0', 'c')
        >>> parse_path('a["x.y"]')
        ('a', 'x.y')
        >>> parse_path("a..b") is None
        True
    """
    if not path:
        return None

    segments: list[str] = []
    pos = 0
    length = len(path)
    # True when the next character must start a new segment (start or after '.')
    expect_segment = True

    while pos < length:
        char = path[pos]

        if char == "[":
            end = _scan_bracket(path, pos + 1)
            if end is None:
                return None
            segment, pos = end
            segments.append(segment)
            expect_segment = False
            if pos < length and path[pos] not in ".[":
                return None
            if pos < length and path[pos] == ".":
                pos += 1
                expect_segment = True
                if pos == length:
                    return None
            continue

        if char in ".]":
            return None

        if not expect_segment:
            return None

        start = pos
        while pos < length and path[pos] not in ".[]":
            pos += 1
        segments.append(path[start:pos])
        expect_segment = False
        if pos < length and path[pos] == ".":
            pos += 1
            expect_segment = True
            if pos == length:
                return None

    return tuple(segments) if segments else None


def _scan_bracket(path: str, pos: int) -> tuple[str, int] | None:
    """Scan a bracket body starting after '['.

    Returns:
        (segment, position after ']') or None if malformed
    """
    length = len(path)
    while pos < length and path[pos] == " ":
        pos += 1
    if pos >= length:
        return None

    if path[pos] in _QUOTES:
        quote = path[pos]
        pos += 1
        chars: list[str] = []
        while pos < length and path[pos] != quote:
            if path[pos] == "\\" and pos + 1 < length:
                pos += 1
            chars.append(path[pos])
            pos += 1
        if pos >= length:
            return None
        pos += 1
        while pos < length and path[pos] == " ":
            pos += 1
        if pos >= length or path[pos] != "]":
            return None
        return "".join(chars), pos + 1

    close = path.find("]", pos)
    if close == -1:
        return None
    segment = path[pos:close].strip()
    if not segment or "[" in segment:
        return None
    return segment, close + 1


def resolve_value(tree: object, path: str) -> object | NotFound:
    """Resolve a key path against a nested tree.

    Mapping nodes are indexed by segment; sequence nodes (lists and tuples,
    never strings) are indexed by non-negative integer segments. A ``None``
    value counts as absent.

    Args:
        tree: Root mapping (usually one locale's messages)
        path: Key path string

    Returns:
        The addressed value, or NOT_FOUND

    Examples:
        >>> resolve_value({"a": {"b": ["x", "y"]}}, "a.b[1]")
        'y'
        >>> resolve_value({"a": "leaf"}, "a.b")
        NOT_FOUND
    """
    segments = parse_path(path)
    if segments is None:
        return NOT_FOUND

    node: object = tree
    for segment in segments:
        match node:
            case Mapping():
                if segment not in node:
                    return NOT_FOUND
                node = node[segment]
            case str() | bytes():
                return NOT_FOUND
            case Sequence():
                if not (segment.isascii() and segment.isdigit()):
                    return NOT_FOUND
                index = int(segment)
                if index >= len(node):
                    return NOT_FOUND
                node = node[index]
            case _:
                return NOT_FOUND

    if node is None:
        return NOT_FOUND
    return node
