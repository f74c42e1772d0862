"""Locale fallback chains.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["locale_chain"]


def locale_chain(requested: str, fallbacks: Iterable[str] = ()) -> tuple[str, ...]:
    """Build the ordered locale search chain.

    The requested locale comes first, then each fallback in order.
    dict.fromkeys() removes duplicates while keeping first occurrence.

    Args:
        requested: Locale asked for by the caller (or the active locale)
        fallbacks: Configured fallback locales, highest priority first

    Returns:
        Tuple of distinct locale codes

    Examples:
        >>> locale_chain("fr-FR", ["en-US"])
        ('fr-FR', 'en-US')
        >>> locale_chain("en-US", ["en-US", "de", "en-US"])
        ('en-US', 'de')
        >>> locale_chain("ja")
        ('ja',)
    """
    return tuple(dict.fromkeys((requested, *fallbacks)))
