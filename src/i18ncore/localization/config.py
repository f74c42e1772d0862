"""Localizer configuration.

Provides a single frozen dataclass that encapsulates every behavioural
setting of a Localizer, plus a converter from the flat option mapping used
by applications that share configuration with JavaScript front ends.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from i18ncore.constants import DEFAULT_LOCALE, MAX_LINK_DEPTH
from i18ncore.diagnostics import Silence, WarningHandler, WarningPolicy
from i18ncore.runtime.interpolation import LinkModifier
from i18ncore.runtime.plural_rules import PluralRule

from .types import LocaleCode, MissingHandler, PostTranslationHandler

__all__ = ["MESSAGE_OPTION_NAMES", "LocalizerConfig"]

logger = logging.getLogger(__name__)

# Option names that carry data rather than behaviour; Localizer.from_options
# consumes them.
MESSAGE_OPTION_NAMES: frozenset[str] = frozenset({
    "messages",
    "shared_messages",
    "datetime_formats",
    "number_formats",
})

_BEHAVIOUR_OPTION_NAMES: frozenset[str] = frozenset({
    "locale",
    "fallback_locale",
    "fallback_locales",
    "fallback_root",
    "format_fallback_messages",
    "fallback_format",
    "silent_translation_warn",
    "silent_fallback_warn",
    "missing",
    "post_translation",
    "modifiers",
    "pluralization_rules",
    "plural_rules",
    "max_link_depth",
    "on_warning",
    "thread_safe",
})

_EMPTY: Mapping[str, object] = MappingProxyType({})


def _empty_mapping() -> Mapping[Any, Any]:
    return MappingProxyType({})


def _as_silence(value: object) -> Silence:
    match value:
        case bool() | re.Pattern():
            return value  # type: ignore[return-value]
        case _:
            return False


def _as_locales(value: object) -> tuple[LocaleCode, ...]:
    match value:
        case str() if value:
            return (value,)
        case str():
            return ()
        case Sequence():
            return tuple(item for item in value if isinstance(item, str) and item)
        case _:
            return ()


@dataclass(frozen=True, slots=True)
class LocalizerConfig:
    """Immutable Localizer configuration.

    All fields have sensible defaults; ``LocalizerConfig()`` is a usable
    English configuration with no fallbacks.

    Attributes:
        locale: Active locale (default: "en-US")
        fallback_locales: Locales searched after the active one, in order
        fallback_root: Retry misses against the root Localizer (default: True)
        fallback_format: Interpolate the path itself when a key is missing
            everywhere (default: False)
        max_link_depth: Bound on nested linked messages (default: 5)
        warnings: Per-category warning suppression
        missing: Hook for keys missing everywhere
        post_translation: Hook applied to every final translation
        modifiers: Custom link modifiers, by name
        plural_rules: Plural rules, by locale
        on_warning: Receives every warning that passes the policy
        thread_safe: Guard state with a readers-writer lock (default: False)

    Example:
        >>> config = LocalizerConfig(locale="fr-FR", fallback_locales=("en-US",))
        >>> config.fallback_locales
        ('en-US',)
    """

    locale: LocaleCode = DEFAULT_LOCALE
    fallback_locales: tuple[LocaleCode, ...] = ()
    fallback_root: bool = True
    fallback_format: bool = False
    max_link_depth: int = MAX_LINK_DEPTH
    warnings: WarningPolicy = field(default_factory=WarningPolicy)
    missing: MissingHandler | None = None
    post_translation: PostTranslationHandler | None = None
    modifiers: Mapping[str, LinkModifier] = field(default_factory=_empty_mapping)
    plural_rules: Mapping[LocaleCode, PluralRule] = field(default_factory=_empty_mapping)
    on_warning: WarningHandler | None = None
    thread_safe: bool = False

    def __post_init__(self) -> None:
        """Validate and freeze configuration values.

        Raises:
            ValueError: If locale is empty or max_link_depth is negative
            TypeError: If locale is not a string
        """
        if not isinstance(self.locale, str):
            msg = f"locale must be a string, got {type(self.locale).__name__}"
            raise TypeError(msg)
        if not self.locale:
            msg = "locale must not be empty"
            raise ValueError(msg)
        if self.max_link_depth < 0:
            msg = "max_link_depth must be non-negative"
            raise ValueError(msg)
        object.__setattr__(self, "fallback_locales", _as_locales(self.fallback_locales))
        object.__setattr__(self, "modifiers", MappingProxyType(dict(self.modifiers)))
        object.__setattr__(self, "plural_rules", MappingProxyType(dict(self.plural_rules)))

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> LocalizerConfig:
        """Build a configuration from a flat option mapping.

        Accepts both the names of this class's fields and the legacy names
        ``fallback_locale``, ``format_fallback_messages``,
        ``pluralization_rules``, ``silent_translation_warn`` and
        ``silent_fallback_warn``. Values of the wrong shape are ignored and
        the default is used. Data options (``messages`` and friends) are
        ignored here; Localizer.from_options loads them.

        The two ``silent_*`` options take True, False or a compiled pattern
        and map to the MISSING and FALLBACK warning categories.

        Example:
            >>> config = LocalizerConfig.from_options({
            ...     "locale": "ja",
            ...     "fallback_locale": "en",
            ...     "silent_translation_warn": True,
            ... })
            >>> config.fallback_locales, config.warnings.missing
            (('en',), True)
        """
        for name in options:
            if name not in _BEHAVIOUR_OPTION_NAMES and name not in MESSAGE_OPTION_NAMES:
                logger.warning("Ignoring unsupported localizer option: %s", name)

        locale = options.get("locale")
        fallback = options.get("fallback_locales", options.get("fallback_locale"))
        fallback_root = options.get("fallback_root")
        fallback_format = options.get(
            "fallback_format", options.get("format_fallback_messages")
        )
        max_link_depth = options.get("max_link_depth")
        thread_safe = options.get("thread_safe")

        warnings = WarningPolicy(
            missing=_as_silence(options.get("silent_translation_warn")),
            fallback=_as_silence(options.get("silent_fallback_warn")),
        )

        return cls(
            locale=locale if isinstance(locale, str) and locale else DEFAULT_LOCALE,
            fallback_locales=_as_locales(fallback),
            fallback_root=fallback_root if isinstance(fallback_root, bool) else True,
            fallback_format=fallback_format if isinstance(fallback_format, bool) else False,
            max_link_depth=(
                max_link_depth
                if isinstance(max_link_depth, int) and not isinstance(max_link_depth, bool)
                else MAX_LINK_DEPTH
            ),
            warnings=warnings,
            missing=_callable_or_none(options.get("missing")),  # type: ignore[arg-type]
            post_translation=_callable_or_none(  # type: ignore[arg-type]
                options.get("post_translation")
            ),
            modifiers=_mapping_or_empty(options.get("modifiers")),  # type: ignore[arg-type]
            plural_rules=_mapping_or_empty(  # type: ignore[arg-type]
                options.get("plural_rules", options.get("pluralization_rules"))
            ),
            on_warning=_callable_or_none(options.get("on_warning")),  # type: ignore[arg-type]
            thread_safe=thread_safe if isinstance(thread_safe, bool) else False,
        )


def _callable_or_none(value: object) -> object | None:
    return value if callable(value) else None


def _mapping_or_empty(value: object) -> Mapping[str, object]:
    return value if isinstance(value, Mapping) else _EMPTY
