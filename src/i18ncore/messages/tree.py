"""Message tree model and pure tree operations.

A message tree is a nested mapping whose values are one of:

- Node: a nested mapping of further keys
- Leaf: a template string
- Variants: a list of template strings (plural forms or alternatives)
- Compiled: a callable producing the final string from a MessageContext

Trees handed to the store are copied on the way in, so later mutation of the
caller's dictionaries never leaks into resolution. Merging is deep and
additive: leaves are overwritten, sibling keys survive.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from enum import StrEnum

__all__ = [
    "CompiledMessage",
    "LocaleMessages",
    "MessageTree",
    "MessageValue",
    "NodeKind",
    "copy_tree",
    "merge_trees",
    "node_kind",
]

type CompiledMessage = Callable[..., str]
"""Pre-built message: called with a MessageContext, returns the final text."""

type MessageValue = str | list[str] | CompiledMessage | MessageTree | None
"""Any value that may appear in a message tree."""

type MessageTree = dict[str, MessageValue]
"""Nested messages of a single locale."""

type LocaleMessages = dict[str, MessageTree]
"""Message trees keyed by locale code."""


class NodeKind(StrEnum):
    """Shape of a value found in a message tree."""

    LEAF = "leaf"
    VARIANTS = "variants"
    COMPILED = "compiled"
    NODE = "node"
    INVALID = "invalid"


def node_kind(value: object) -> NodeKind:
    """Classify a tree value.

    Examples:
        >>> node_kind("Hello")
        <NodeKind.LEAF: 'leaf'>
        >>> node_kind(["one", "many"])
        <NodeKind.VARIANTS: 'variants'>
        >>> node_kind({"a": "b"})
        <NodeKind.NODE: 'node'>
    """
    match value:
        case str():
            return NodeKind.LEAF
        case Mapping():
            return NodeKind.NODE
        case bytes():
            return NodeKind.INVALID
        case Sequence() if all(isinstance(item, str) for item in value):
            return NodeKind.VARIANTS
        case _ if callable(value):
            return NodeKind.COMPILED
        case _:
            return NodeKind.INVALID


def copy_tree(tree: Mapping[str, object]) -> MessageTree:
    """Deep-copy the container structure of a tree.

    Mappings become dicts and sequences become lists; strings and callables
    are shared (they are immutable or opaque).
    """
    return {key: _copy_value(value) for key, value in tree.items()}


def _copy_value(value: object) -> MessageValue:
    match value:
        case Mapping():
            return copy_tree(value)
        case str() | bytes():
            return value  # type: ignore[return-value]
        case Sequence():
            return [_copy_value(item) for item in value]  # type: ignore[misc]
        case _:
            return value  # type: ignore[return-value]


def merge_trees(base: Mapping[str, object], overlay: Mapping[str, object]) -> MessageTree:
    """Deep-merge ``overlay`` onto ``base`` and return a new tree.

    Neither input is modified. When both sides hold a mapping under the same
    key the merge recurses; otherwise the overlay value replaces the base
    value. Applying the same overlay twice yields the same tree as once.

    Examples:
        >>> merge_trees({"a": {"x": "1", "y": "2"}}, {"a": {"y": "3"}, "b": "4"})
        {'a': {'x': '1', 'y': '3'}, 'b': '4'}
    """
    merged = copy_tree(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_trees(current, value)
        else:
            merged[key] = _copy_value(value)
    return merged
