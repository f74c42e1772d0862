"""Per-locale message storage.

MessageStore owns one message tree per locale and answers path lookups
against them. It knows nothing about fallback chains; the Localizer walks
the chain and asks the store one locale at a time.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .path import NOT_FOUND, NotFound, resolve_value
from .tree import LocaleMessages, MessageTree, copy_tree, merge_trees

__all__ = ["MessageStore"]

logger = logging.getLogger(__name__)


class MessageStore:
    """Message trees keyed by locale.

    Trees are copied on every write and every read-out, so the only way to
    change stored messages is set() or merge().

    Thread Safety:
        Not synchronized. The owning Localizer guards access with its
        readers-writer lock when created with ``thread_safe=True``.

    Example:
        >>> store = MessageStore({"en": {"nav": {"home": "Home"}}})
        >>> store.resolve("en", "nav.home")
        'Home'
        >>> store.resolve("fr", "nav.home")
        NOT_FOUND
    """

    __slots__ = ("_messages",)

    def __init__(self, messages: Mapping[str, Mapping[str, object]] | None = None) -> None:
        self._messages: LocaleMessages = {}
        if messages:
            for locale, tree in messages.items():
                self.set(locale, tree)

    def __contains__(self, locale: object) -> bool:
        return locale in self._messages

    def __repr__(self) -> str:
        return f"MessageStore(locales={self.locales!r})"

    @property
    def locales(self) -> tuple[str, ...]:
        """Sorted locale codes that have a stored tree."""
        return tuple(sorted(self._messages))

    def get(self, locale: str) -> MessageTree:
        """Return a copy of the tree for ``locale`` (empty if absent)."""
        tree = self._messages.get(locale)
        return copy_tree(tree) if tree is not None else {}

    def get_all(self) -> LocaleMessages:
        """Return copies of all trees keyed by locale."""
        return {locale: copy_tree(tree) for locale, tree in self._messages.items()}

    def set(self, locale: str, tree: Mapping[str, object]) -> None:
        """Replace the tree for ``locale`` wholesale."""
        self._messages[locale] = copy_tree(tree)
        logger.debug("Set messages for locale: %s (%d top-level keys)", locale, len(tree))

    def merge(self, locale: str, tree: Mapping[str, object]) -> None:
        """Deep-merge ``tree`` into the tree for ``locale``."""
        self._messages[locale] = merge_trees(self._messages.get(locale, {}), tree)
        logger.debug("Merged messages for locale: %s (%d top-level keys)", locale, len(tree))

    def resolve(self, locale: str, path: str) -> object | NotFound:
        """Resolve ``path`` in the tree for ``locale``.

        Falls back to a literal top-level lookup of the whole path so flat
        trees with dotted keys (``{"a.b": "x"}``) resolve too.

        Returns:
            The stored value, or NOT_FOUND
        """
        tree = self._messages.get(locale)
        if tree is None:
            return NOT_FOUND
        value = resolve_value(tree, path)
        if value is NOT_FOUND and tree.get(path) is not None:
            return tree[path]
        return value
