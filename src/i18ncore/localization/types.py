"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating Localizer call sites and hooks.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

__all__ = [
    "LocaleCode",
    "MessagePath",
    "MissingHandler",
    "PostTranslationHandler",
]

type LocaleCode = str
"""BCP-47 locale code (e.g., 'en-US', 'fr', 'zh-Hans-CN')."""

type MessagePath = str
"""Dotted/bracket path into a message tree (e.g., 'nav.items[0].label')."""

type MissingHandler = Callable[[LocaleCode, MessagePath], str | None]
"""Called for keys absent everywhere; a returned string is used as the result."""

type PostTranslationHandler = Callable[[str], str]
"""Applied to every final translated string."""
