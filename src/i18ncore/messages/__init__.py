"""Message storage and key path resolution.

Submodules:
    path  - Key path parsing and tree resolution (NOT_FOUND sentinel)
    tree  - Message tree type aliases, classification and deep merge
    store - MessageStore (per-locale trees)

Python 3.13+. Zero external dependencies.
"""

from .path import NOT_FOUND, NotFound, parse_path, resolve_value
from .store import MessageStore
from .tree import (
    CompiledMessage,
    LocaleMessages,
    MessageTree,
    MessageValue,
    NodeKind,
    copy_tree,
    merge_trees,
    node_kind,
)

__all__ = [
    "NOT_FOUND",
    "CompiledMessage",
    "LocaleMessages",
    "MessageStore",
    "MessageTree",
    "MessageValue",
    "NodeKind",
    "NotFound",
    "copy_tree",
    "merge_trees",
    "node_kind",
    "parse_path",
    "resolve_value",
]
