"""Per-locale date and number format tables with formatter caching.

A format table maps a format name to formatting options, per locale:

    {
        "en-US": {
            "short": {"date_style": "short"},
            "long": {"date_style": "long", "time_style": "short"},
        }
    }

LocaleFormatCache stores one such table per kind (datetime or number) and
lazily builds a Formatter for each (locale, format name) pair on first use.
Formatters for a locale are dropped when its table is replaced; only the
merged names are dropped when a table is merged. Ad-hoc option mappings are
cached separately, keyed by their resolved options.

Unknown format names, unknown option names and Babel failures never raise:
they degrade to locale-default formatting (or the raw value) and emit a
FORMAT warning.

Python 3.13+. Uses Babel via LocaleContext.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from threading import RLock

from i18ncore.diagnostics import Diagnostic, ErrorTemplate, FormattingError, WarningReporter
from i18ncore.enums import FormatKind, WarningKind
from i18ncore.messages.tree import merge_trees

from .locale_context import LocaleContext

__all__ = [
    "DATETIME_OPTION_NAMES",
    "NUMBER_OPTION_NAMES",
    "FormatSpec",
    "Formatter",
    "LocaleFormatCache",
    "LocaleFormats",
    "resolve_options",
]

logger = logging.getLogger(__name__)

type FormatSpec = dict[str, dict[str, object]]
"""Format name -> option mapping, for one locale."""

type LocaleFormats = dict[str, FormatSpec]
"""Format specs keyed by locale code."""

type _ResolvedOptions = tuple[tuple[str, Hashable], ...]

NUMBER_OPTION_NAMES: frozenset[str] = frozenset({
    "style",
    "currency",
    "currency_display",
    "minimum_fraction_digits",
    "maximum_fraction_digits",
    "use_grouping",
    "pattern",
})

DATETIME_OPTION_NAMES: frozenset[str] = frozenset({
    "date_style",
    "time_style",
    "pattern",
    "timezone",
})

# ECMA-402 spellings accepted for format tables shared with JavaScript code.
_OPTION_ALIASES: Mapping[str, str] = {
    "currencyDisplay": "currency_display",
    "minimumFractionDigits": "minimum_fraction_digits",
    "maximumFractionDigits": "maximum_fraction_digits",
    "useGrouping": "use_grouping",
    "dateStyle": "date_style",
    "timeStyle": "time_style",
    "timeZone": "timezone",
}

_OPTION_NAMES: Mapping[FormatKind, frozenset[str]] = {
    FormatKind.NUMBER: NUMBER_OPTION_NAMES,
    FormatKind.DATETIME: DATETIME_OPTION_NAMES,
}

# Bound on cached ad-hoc formatters per cache.
_MAX_INLINE_FORMATTERS = 256


def resolve_options(
    kind: FormatKind, options: Mapping[str, object]
) -> tuple[_ResolvedOptions, tuple[str, ...]]:
    """Canonicalize an option mapping.

    Aliases are translated, options are sorted by name, unknown names are
    split off.

    Returns:
        (resolved options, unknown option names)

    Example:
        >>> resolve_options(FormatKind.NUMBER, {"style": "percent", "colour": "red"})
        ((('style', 'percent'),), ('colour',))
    """
    allowed = _OPTION_NAMES[kind]
    resolved: dict[str, Hashable] = {}
    unknown: list[str] = []
    for raw_name, value in options.items():
        name = _OPTION_ALIASES.get(raw_name, raw_name)
        if name in allowed:
            resolved[name] = value  # type: ignore[assignment]
        else:
            unknown.append(raw_name)
    return tuple(sorted(resolved.items())), tuple(unknown)


@dataclass(frozen=True, slots=True)
class Formatter:
    """Locale-bound formatter for one set of options.

    Attributes:
        kind: Datetime or number
        context: Babel-backed locale context
        options: Canonical options passed to the context on each call
    """

    kind: FormatKind
    context: LocaleContext
    options: _ResolvedOptions

    @property
    def locale(self) -> str:
        """Locale code the formatter was built for."""
        return self.context.locale_code

    def format(self, value: object) -> str:
        """Format ``value``.

        Raises:
            FormattingError: If Babel cannot format the value
        """
        kwargs = dict(self.options)
        try:
            match self.kind:
                case FormatKind.NUMBER:
                    return self.context.format_number(value, **kwargs)  # type: ignore[arg-type]
                case FormatKind.DATETIME:
                    return self.context.format_datetime(value, **kwargs)  # type: ignore[arg-type]
        except TypeError as e:
            # Option of the wrong type, e.g. minimum_fraction_digits="two"
            raise FormattingError(
                ErrorTemplate.formatting_failed(value, str(self.kind), self.locale, str(e)),
                fallback_value=str(value),
            ) from e
        msg = f"Unknown format kind: {self.kind}"
        raise ValueError(msg)


class LocaleFormatCache:
    """Format tables for one kind plus memoized formatters.

    Thread Safety:
        All operations hold an internal RLock, so lazy formatter builds are
        safe even when callers only hold a shared read lock.

    Example:
        >>> cache = LocaleFormatCache(FormatKind.NUMBER)
        >>> cache.set("en-US", {"money": {"style": "currency", "currency": "USD"}})
        >>> cache.format("en-US", 1234.5, "money")
        '$1,234.50'
    """

    __slots__ = (
        "_hits",
        "_inline",
        "_kind",
        "_lock",
        "_misses",
        "_named",
        "_reporter",
        "_specs",
    )

    def __init__(
        self,
        kind: FormatKind,
        formats: Mapping[str, Mapping[str, Mapping[str, object]]] | None = None,
        *,
        reporter: WarningReporter | None = None,
    ) -> None:
        self._kind = kind
        self._reporter = reporter
        self._lock = RLock()
        self._specs: LocaleFormats = {}
        self._named: dict[tuple[str, str], Formatter] = {}
        self._inline: OrderedDict[tuple[str, _ResolvedOptions], Formatter] = OrderedDict()
        self._hits = 0
        self._misses = 0
        if formats:
            for locale, spec in formats.items():
                self.set(locale, spec)

    @property
    def kind(self) -> FormatKind:
        """Kind of formats held by this cache."""
        return self._kind

    # Table management ----------------------------------------------------

    def get(self, locale: str) -> FormatSpec:
        """Return a copy of the format spec for ``locale`` (empty if absent)."""
        with self._lock:
            spec = self._specs.get(locale, {})
            return {name: dict(options) for name, options in spec.items()}

    def get_all(self) -> LocaleFormats:
        """Return copies of all format specs keyed by locale."""
        with self._lock:
            return {locale: self.get(locale) for locale in self._specs}

    def set(self, locale: str, spec: Mapping[str, Mapping[str, object]]) -> None:
        """Replace the spec for ``locale`` and drop all its named formatters."""
        with self._lock:
            self._specs[locale] = {name: dict(options) for name, options in spec.items()}
            stale = [key for key in self._named if key[0] == locale]
            for key in stale:
                del self._named[key]
        logger.debug(
            "Set %s formats for locale: %s (invalidated %d formatters)",
            self._kind, locale, len(stale),
        )

    def merge(self, locale: str, spec: Mapping[str, Mapping[str, object]]) -> None:
        """Deep-merge ``spec`` into the spec for ``locale``.

        Only formatters for the merged format names are dropped.
        """
        with self._lock:
            merged = merge_trees(self._specs.get(locale, {}), spec)
            self._specs[locale] = {
                name: dict(options)  # type: ignore[call-overload]
                for name, options in merged.items()
            }
            for name in spec:
                self._named.pop((locale, name), None)
        logger.debug("Merged %s formats for locale: %s (%s)", self._kind, locale, ", ".join(spec))

    def clear(self) -> None:
        """Drop every cached formatter (format specs are kept)."""
        with self._lock:
            self._named.clear()
            self._inline.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> dict[str, int]:
        """Cache statistics: cached formatter counts, hits and misses."""
        with self._lock:
            return {
                "named": len(self._named),
                "inline": len(self._inline),
                "hits": self._hits,
                "misses": self._misses,
            }

    # Formatting ----------------------------------------------------------

    def format(
        self,
        locale: str,
        value: object,
        key_or_options: str | Mapping[str, object] | None = None,
        *,
        fallbacks: Iterable[str] = (),
        overrides: Mapping[str, object] | None = None,
    ) -> str:
        """Format ``value`` for ``locale``.

        Args:
            locale: Requested locale
            value: Value to format
            key_or_options: Registered format name, ad-hoc options, or None
                for the locale default
            fallbacks: Further locales searched for a named format, in order
            overrides: Ad-hoc options layered over a named format

        Returns:
            Formatted text; never raises for data gaps
        """
        formatter = self._resolve_formatter(locale, key_or_options, fallbacks, overrides)
        try:
            return formatter.format(value)
        except FormattingError as e:
            if e.diagnostic is not None:
                self._warn(e.diagnostic)
            return e.fallback_value

    def get_formatter(
        self,
        locale: str,
        key_or_options: str | Mapping[str, object] | None = None,
        *,
        fallbacks: Iterable[str] = (),
        overrides: Mapping[str, object] | None = None,
    ) -> Formatter:
        """Return the (cached) formatter that format() would use."""
        return self._resolve_formatter(locale, key_or_options, fallbacks, overrides)

    def _resolve_formatter(
        self,
        locale: str,
        key_or_options: str | Mapping[str, object] | None,
        fallbacks: Iterable[str],
        overrides: Mapping[str, object] | None,
    ) -> Formatter:
        match key_or_options:
            case str() as format_key:
                return self._named_formatter(locale, format_key, fallbacks, overrides)
            case Mapping() as options:
                combined = {**options, **overrides} if overrides else options
                return self._inline_formatter(locale, combined)
            case _:
                return self._inline_formatter(locale, overrides or {})

    def _named_formatter(
        self,
        locale: str,
        format_key: str,
        fallbacks: Iterable[str],
        overrides: Mapping[str, object] | None,
    ) -> Formatter:
        with self._lock:
            for candidate in (locale, *fallbacks):
                spec = self._specs.get(candidate)
                if spec is None or format_key not in spec:
                    continue
                if overrides:
                    return self._inline_formatter(candidate, {**spec[format_key], **overrides})
                cached = self._named.get((candidate, format_key))
                if cached is not None:
                    self._hits += 1
                    return cached
                self._misses += 1
                formatter = self._build(candidate, spec[format_key])
                self._named[(candidate, format_key)] = formatter
                return formatter

        self._warn(ErrorTemplate.format_key_not_found(format_key, str(self._kind), locale))
        return self._inline_formatter(locale, overrides or {})

    def _inline_formatter(self, locale: str, options: Mapping[str, object]) -> Formatter:
        resolved, unknown = resolve_options(self._kind, options)
        for name in unknown:
            self._warn(ErrorTemplate.format_option_unknown(name, str(self._kind)))
        key = (locale, resolved)
        with self._lock:
            try:
                cached = self._inline.get(key)
            except TypeError:
                # Unhashable option value: build without caching
                self._misses += 1
                return Formatter(self._kind, LocaleContext.create(locale), resolved)
            if cached is not None:
                self._hits += 1
                self._inline.move_to_end(key)
                return cached
            self._misses += 1
            formatter = Formatter(self._kind, LocaleContext.create(locale), resolved)
            if len(self._inline) >= _MAX_INLINE_FORMATTERS:
                self._inline.popitem(last=False)
            self._inline[key] = formatter
            return formatter

    def _build(self, locale: str, options: Mapping[str, object]) -> Formatter:
        resolved, unknown = resolve_options(self._kind, options)
        for name in unknown:
            self._warn(ErrorTemplate.format_option_unknown(name, str(self._kind)))
        logger.debug("Built %s formatter for locale: %s %r", self._kind, locale, resolved)
        return Formatter(self._kind, LocaleContext.create(locale), resolved)

    def _warn(self, diagnostic: Diagnostic) -> None:
        if self._reporter is not None:
            self._reporter.warn(WarningKind.FORMAT, diagnostic)
        else:
            logger.warning("[%s] %s", WarningKind.FORMAT, diagnostic.message)
