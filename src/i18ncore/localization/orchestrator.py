"""Translation orchestration with fallback chains.

Localizer ties the message store, plural selector, interpolator and the two
format caches together and owns the per-instance configuration.

Translation flow for ``translate(path, values, locale=..., plural=...)``:

1. Build the locale chain: the requested (or active) locale, then the
   configured fallback locales.
2. The first locale whose tree holds a translatable leaf at ``path`` wins.
   Variant lists (and ``a | b`` templates when a plural count is given) are
   narrowed by the plural selector; the template is then interpolated.
3. On a miss, when ``fallback_root`` is enabled and a root Localizer is
   alive, the root retries with its own locale and fallbacks.
4. Still missing: the missing handler may supply a string. Otherwise the
   path itself is returned, interpolated as a template when
   ``fallback_format`` is enabled.
5. The post-translation handler, if any, is applied to the final string.

Only malformed call shapes raise (InvalidArgumentError). Everything else
degrades to text and an advisory warning.

Thread Safety:
    With ``thread_safe=True`` the message store and format caches are
    guarded by a readers-writer lock: translations and format calls run
    concurrently, mutations are exclusive. Hooks (missing handler,
    post-translation handler, on_warning) run outside the lock and may
    mutate the Localizer; warnings raised while the lock is held are logged
    at once and handed to on_warning after it is released. Compiled messages
    and link modifiers run under the read lock and must not.

Python 3.13+.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Iterable, Mapping, Sequence
from contextlib import AbstractContextManager, nullcontext
from decimal import Decimal
from functools import partial
from types import MappingProxyType

from i18ncore.constants import IMPLICIT_PLURAL_NAMES, PLURAL_SEPARATOR
from i18ncore.core.depth_guard import DepthGuard
from i18ncore.diagnostics import (
    ErrorTemplate,
    InvalidArgumentError,
    InvalidKeyError,
    Silence,
    WarningHandler,
    WarningPolicy,
    WarningReporter,
)
from i18ncore.enums import FormatKind, WarningKind
from i18ncore.messages import NOT_FOUND, MessageStore, NodeKind, merge_trees, node_kind
from i18ncore.runtime.arguments import (
    is_number,
    normalize_datetime_args,
    normalize_number_args,
    normalize_plural_args,
    normalize_translate_args,
)
from i18ncore.runtime.fallback import locale_chain
from i18ncore.runtime.formats import FormatSpec, LocaleFormatCache, LocaleFormats
from i18ncore.runtime.interpolation import Interpolator, MessageContext, format_value
from i18ncore.runtime.plural_rules import PluralRule, PluralSelector
from i18ncore.runtime.rwlock import RWLock

from .config import LocalizerConfig
from .types import LocaleCode, MessagePath, MissingHandler, PostTranslationHandler

__all__ = ["Localizer"]

logger = logging.getLogger(__name__)

type _Number = int | float | Decimal
type _ListValues = tuple[object, ...] | None
type _NamedValues = Mapping[str, object] | None

_TRANSLATABLE: frozenset[NodeKind] = frozenset({
    NodeKind.LEAF,
    NodeKind.VARIANTS,
    NodeKind.COMPILED,
})


def _split_values(values: object) -> tuple[_ListValues, _NamedValues]:
    match values:
        case None:
            return None, None
        case Mapping():
            return None, MappingProxyType(dict(values))
        case str() | bytes() | bytearray():
            pass
        case Sequence():
            return tuple(values), None
    raise InvalidArgumentError(
        ErrorTemplate.invalid_value(values, "translate", "a sequence, a mapping or None")
    )


def _with_plural_names(named: _NamedValues, count: _Number) -> Mapping[str, object]:
    merged = {name: count for name in IMPLICIT_PLURAL_NAMES}
    if named:
        merged.update(named)
    return MappingProxyType(merged)


class Localizer:
    """Message translation and locale-aware formatting.

    Example:
        >>> i18n = Localizer(
        ...     LocalizerConfig(locale="fr-FR", fallback_locales=("en-US",)),
        ...     messages={
        ...         "en-US": {"greet": "Hello {name}", "apples": "one apple | {count} apples"},
        ...         "fr-FR": {"greet": "Bonjour {name}"},
        ...     },
        ... )
        >>> i18n.t("greet", {"name": "Ada"})
        'Bonjour Ada'
        >>> i18n.tc("apples", 5)
        '5 apples'

    Args:
        config: Behavioural settings; defaults to ``LocalizerConfig()``
        messages: Message trees keyed by locale
        datetime_formats: Datetime format specs keyed by locale
        number_formats: Number format specs keyed by locale
        root: Parent Localizer consulted when a key is missing everywhere
            locally; held by weak reference
    """

    __slots__ = (
        "__weakref__",
        "_config",
        "_datetime_formats",
        "_fallback_format",
        "_fallback_locales",
        "_fallback_root",
        "_interpolator",
        "_locale",
        "_lock",
        "_missing",
        "_number_formats",
        "_on_warning",
        "_plurals",
        "_post_translation",
        "_reporter",
        "_root",
        "_store",
        "_warnings",
    )

    def __init__(
        self,
        config: LocalizerConfig | None = None,
        *,
        messages: Mapping[LocaleCode, Mapping[str, object]] | None = None,
        datetime_formats: Mapping[LocaleCode, Mapping[str, Mapping[str, object]]] | None = None,
        number_formats: Mapping[LocaleCode, Mapping[str, Mapping[str, object]]] | None = None,
        root: Localizer | None = None,
    ) -> None:
        config = config if config is not None else LocalizerConfig()
        self._config = config
        self._locale: LocaleCode = config.locale
        self._fallback_locales: tuple[LocaleCode, ...] = config.fallback_locales
        self._fallback_root = config.fallback_root
        self._fallback_format = config.fallback_format
        self._warnings: WarningPolicy = config.warnings
        self._missing: MissingHandler | None = config.missing
        self._post_translation: PostTranslationHandler | None = config.post_translation
        self._on_warning: WarningHandler | None = config.on_warning
        self._root: weakref.ref[Localizer] | None = weakref.ref(root) if root is not None else None

        self._reporter = WarningReporter(
            lambda: self._warnings, lambda: self._on_warning, log=logger
        )
        self._interpolator = Interpolator(
            modifiers=config.modifiers,
            reporter=self._reporter,
            max_link_depth=config.max_link_depth,
        )
        self._plurals = PluralSelector(config.plural_rules)
        self._store = MessageStore(messages)
        self._datetime_formats = LocaleFormatCache(
            FormatKind.DATETIME, datetime_formats, reporter=self._reporter
        )
        self._number_formats = LocaleFormatCache(
            FormatKind.NUMBER, number_formats, reporter=self._reporter
        )
        self._lock: RWLock | None = RWLock() if config.thread_safe else None

        logger.info(
            "Localizer created: locale=%s fallbacks=%s locales=%s thread_safe=%s",
            self._locale,
            self._fallback_locales,
            self._store.locales,
            config.thread_safe,
        )

    @classmethod
    def from_options(
        cls, options: Mapping[str, object], root: Localizer | None = None
    ) -> Localizer:
        """Build a Localizer from a flat option mapping.

        Behavioural options are converted by LocalizerConfig.from_options.
        ``messages``, ``datetime_formats`` and ``number_formats`` load data;
        ``shared_messages`` is merged over ``messages`` locale by locale.

        Example:
            >>> i18n = Localizer.from_options({
            ...     "locale": "en",
            ...     "messages": {"en": {"hi": "Hi"}},
            ...     "shared_messages": {"en": {"brand": "Acme"}},
            ... })
            >>> i18n.t("brand")
            'Acme'
        """
        config = LocalizerConfig.from_options(options)
        messages: dict[LocaleCode, Mapping[str, object]] = {}
        raw_messages = options.get("messages")
        if isinstance(raw_messages, Mapping):
            messages.update(raw_messages)
        shared = options.get("shared_messages")
        if isinstance(shared, Mapping):
            for locale, tree in shared.items():
                if isinstance(tree, Mapping):
                    messages[locale] = merge_trees(messages.get(locale, {}), tree)

        datetime_formats = options.get("datetime_formats")
        number_formats = options.get("number_formats")
        return cls(
            config,
            messages=messages,
            datetime_formats=datetime_formats if isinstance(datetime_formats, Mapping) else None,
            number_formats=number_formats if isinstance(number_formats, Mapping) else None,
            root=root,
        )

    def __repr__(self) -> str:
        return (
            f"Localizer(locale={self._locale!r}, fallback_locales={self._fallback_locales!r}, "
            f"available_locales={self.available_locales!r})"
        )

    # Locking -------------------------------------------------------------

    def _read(self) -> AbstractContextManager[None]:
        return self._lock.read() if self._lock is not None else nullcontext()

    def _write(self) -> AbstractContextManager[None]:
        return self._lock.write() if self._lock is not None else nullcontext()

    # Properties ----------------------------------------------------------

    @property
    def config(self) -> LocalizerConfig:
        """Configuration the Localizer was created with (read-only)."""
        return self._config

    @property
    def locale(self) -> LocaleCode:
        """Active locale."""
        return self._locale

    @locale.setter
    def locale(self, value: LocaleCode) -> None:
        if not isinstance(value, str) or not value:
            raise InvalidArgumentError(
                ErrorTemplate.invalid_value(value, "locale", "a non-empty locale code")
            )
        logger.debug("Active locale changed: %s -> %s", self._locale, value)
        self._locale = value

    @property
    def fallback_locales(self) -> tuple[LocaleCode, ...]:
        """Fallback locales in search order. Accepts a code, a sequence of codes or None."""
        return self._fallback_locales

    @fallback_locales.setter
    def fallback_locales(self, value: LocaleCode | Iterable[LocaleCode] | None) -> None:
        match value:
            case None:
                locales: tuple[object, ...] = ()
            case str():
                locales = (value,)
            case Iterable():
                locales = tuple(value)
            case _:
                locales = (value,)
        if not all(isinstance(locale, str) for locale in locales):
            raise InvalidArgumentError(
                ErrorTemplate.invalid_value(
                    value, "fallback_locales", "a locale code, a sequence of codes or None"
                )
            )
        self._fallback_locales = tuple(locale for locale in locales if locale)  # type: ignore[misc]

    @property
    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Sorted locales that have messages."""
        with self._read():
            return self._store.locales

    @property
    def messages(self) -> dict[LocaleCode, dict[str, object]]:
        """Copy of all message trees keyed by locale."""
        with self._read():
            return self._store.get_all()  # type: ignore[return-value]

    @property
    def datetime_formats(self) -> LocaleFormats:
        """Copy of all datetime format specs keyed by locale."""
        with self._read():
            return self._datetime_formats.get_all()

    @property
    def number_formats(self) -> LocaleFormats:
        """Copy of all number format specs keyed by locale."""
        with self._read():
            return self._number_formats.get_all()

    @property
    def missing(self) -> MissingHandler | None:
        """Handler for keys missing everywhere, or None."""
        return self._missing

    @missing.setter
    def missing(self, handler: MissingHandler | None) -> None:
        self.set_missing_handler(handler)

    @property
    def post_translation(self) -> PostTranslationHandler | None:
        """Handler applied to every final translation, or None."""
        return self._post_translation

    @post_translation.setter
    def post_translation(self, handler: PostTranslationHandler | None) -> None:
        self.set_post_translation_handler(handler)

    @property
    def fallback_root(self) -> bool:
        """Whether misses are retried against the root Localizer."""
        return self._fallback_root

    @fallback_root.setter
    def fallback_root(self, value: bool) -> None:
        self._fallback_root = bool(value)

    @property
    def fallback_format(self) -> bool:
        """Whether a missing key's path is interpolated as a template."""
        return self._fallback_format

    @fallback_format.setter
    def fallback_format(self, value: bool) -> None:
        self._fallback_format = bool(value)

    @property
    def warnings(self) -> WarningPolicy:
        """Warning suppression policy."""
        return self._warnings

    @warnings.setter
    def warnings(self, policy: WarningPolicy) -> None:
        self._warnings = policy

    @property
    def silent_translation_warn(self) -> Silence:
        """Suppression of missing-key warnings: True, False or a pattern."""
        return self._warnings.missing

    @silent_translation_warn.setter
    def silent_translation_warn(self, value: Silence) -> None:
        self._warnings = self._warnings.with_silence(WarningKind.MISSING, value)

    @property
    def silent_fallback_warn(self) -> Silence:
        """Suppression of fallback warnings: True, False or a pattern."""
        return self._warnings.fallback

    @silent_fallback_warn.setter
    def silent_fallback_warn(self, value: Silence) -> None:
        self._warnings = self._warnings.with_silence(WarningKind.FALLBACK, value)

    @property
    def on_warning(self) -> WarningHandler | None:
        """Host callback receiving every emitted warning, or None."""
        return self._on_warning

    @on_warning.setter
    def on_warning(self, handler: WarningHandler | None) -> None:
        self._on_warning = handler

    @property
    def root(self) -> Localizer | None:
        """Root Localizer, or None if none was given or it was collected."""
        return self._root() if self._root is not None else None

    # Hooks and rules -----------------------------------------------------

    def set_missing_handler(self, handler: MissingHandler | None) -> None:
        """Install (or with None, remove) the missing-key handler."""
        self._missing = handler

    def set_post_translation_handler(self, handler: PostTranslationHandler | None) -> None:
        """Install (or with None, remove) the post-translation handler."""
        self._post_translation = handler

    def register_plural_rule(self, locale: LocaleCode, rule: PluralRule) -> None:
        """Register (or replace) the plural rule for ``locale``."""
        with self._write():
            self._plurals.register(locale, rule)

    # Messages ------------------------------------------------------------

    def get_messages(self, locale: LocaleCode) -> dict[str, object]:
        """Copy of the message tree for ``locale`` (empty if absent)."""
        with self._read():
            return self._store.get(locale)  # type: ignore[return-value]

    def set_messages(self, locale: LocaleCode, messages: Mapping[str, object]) -> None:
        """Replace the message tree for ``locale``."""
        with self._write():
            self._store.set(locale, messages)

    def merge_messages(self, locale: LocaleCode, messages: Mapping[str, object]) -> None:
        """Deep-merge ``messages`` into the tree for ``locale``."""
        with self._write():
            self._store.merge(locale, messages)

    # Formats -------------------------------------------------------------

    def get_datetime_format(self, locale: LocaleCode) -> FormatSpec:
        """Copy of the datetime format spec for ``locale``."""
        with self._read():
            return self._datetime_formats.get(locale)

    def set_datetime_format(
        self, locale: LocaleCode, spec: Mapping[str, Mapping[str, object]]
    ) -> None:
        """Replace the datetime format spec for ``locale``."""
        with self._write():
            self._datetime_formats.set(locale, spec)

    def merge_datetime_format(
        self, locale: LocaleCode, spec: Mapping[str, Mapping[str, object]]
    ) -> None:
        """Deep-merge ``spec`` into the datetime format spec for ``locale``."""
        with self._write():
            self._datetime_formats.merge(locale, spec)

    def get_number_format(self, locale: LocaleCode) -> FormatSpec:
        """Copy of the number format spec for ``locale``."""
        with self._read():
            return self._number_formats.get(locale)

    def set_number_format(
        self, locale: LocaleCode, spec: Mapping[str, Mapping[str, object]]
    ) -> None:
        """Replace the number format spec for ``locale``."""
        with self._write():
            self._number_formats.set(locale, spec)

    def merge_number_format(
        self, locale: LocaleCode, spec: Mapping[str, Mapping[str, object]]
    ) -> None:
        """Deep-merge ``spec`` into the number format spec for ``locale``."""
        with self._write():
            self._number_formats.merge(locale, spec)

    def format_datetime(
        self,
        value: object,
        key_or_options: str | Mapping[str, object] | None = None,
        locale: LocaleCode | None = None,
        *,
        overrides: Mapping[str, object] | None = None,
    ) -> str:
        """Format a date, datetime, POSIX timestamp or ISO 8601 string.

        Args:
            value: Value to format
            key_or_options: Registered format name, ad-hoc options, or None
                for the locale's medium date
            locale: Locale override
            overrides: Ad-hoc options layered over a named format

        Returns:
            Formatted text; unknown formats and Babel failures degrade with a
            FORMAT warning
        """
        return self._format(self._datetime_formats, value, key_or_options, locale, overrides)

    def format_number(
        self,
        value: object,
        key_or_options: str | Mapping[str, object] | None = None,
        locale: LocaleCode | None = None,
        *,
        overrides: Mapping[str, object] | None = None,
    ) -> str:
        """Format a number.

        Example:
            >>> money = {"style": "currency", "currency": "USD"}
            >>> i18n = Localizer(number_formats={"en-US": {"money": money}})
            >>> i18n.format_number(1234.5, "money")
            '$1,234.50'
            >>> i18n.format_number(0.25, {"style": "percent"})
            '25%'
        """
        return self._format(self._number_formats, value, key_or_options, locale, overrides)

    def _format(
        self,
        cache: LocaleFormatCache,
        value: object,
        key_or_options: str | Mapping[str, object] | None,
        locale: LocaleCode | None,
        overrides: Mapping[str, object] | None,
    ) -> str:
        chain = locale_chain(locale or self._locale, self._fallback_locales)
        with self._reporter.deferred(), self._read():
            return cache.format(
                chain[0], value, key_or_options, fallbacks=chain[1:], overrides=overrides
            )

    # Translation ---------------------------------------------------------

    def translate(
        self,
        path: MessagePath,
        values: Sequence[object] | Mapping[str, object] | None = None,
        *,
        locale: LocaleCode | None = None,
        plural: _Number | None = None,
    ) -> str:
        """Translate ``path``.

        Args:
            path: Message path, e.g. ``"nav.items[0].label"``
            values: List values (sequence) or named values (mapping)
            locale: Locale override for this call
            plural: Plural count; selects among variants and is available as
                ``{count}`` and ``{n}`` unless named values supply those

        Returns:
            Translated text. A key missing everywhere yields the missing
            handler's string, else the path.

        Raises:
            InvalidKeyError: If path is not a string
            InvalidArgumentError: If values or plural has the wrong type
        """
        if not isinstance(path, str):
            raise InvalidKeyError(ErrorTemplate.invalid_key(path))
        if plural is not None and not is_number(plural):
            raise InvalidArgumentError(ErrorTemplate.invalid_value(plural, "translate", "a number"))
        list_values, named_values = _split_values(values)
        if plural is not None and list_values is None:
            named_values = _with_plural_names(named_values, plural)

        requested = locale or self._locale
        guard = self._interpolator.new_guard()
        text = self._resolve(
            path, requested, list_values, named_values, plural, guard, report_fallback=True
        )
        if text is None:
            text = self._handle_missing(path, requested, list_values, named_values, guard)

        handler = self._post_translation
        return handler(text) if handler is not None else text

    def translate_exists(self, path: MessagePath, locale: LocaleCode | None = None) -> bool:
        """Check whether ``path`` resolves to any value in one locale.

        Only the given (or active) locale is consulted; fallbacks and the
        root are not. Subtrees count as existing.

        Raises:
            InvalidKeyError: If path is not a string
        """
        if not isinstance(path, str):
            raise InvalidKeyError(ErrorTemplate.invalid_key(path))
        target = locale or self._locale
        with self._read():
            return self._store.resolve(target, path) is not NOT_FOUND

    def _resolve(
        self,
        path: MessagePath,
        requested: LocaleCode,
        list_values: _ListValues,
        named_values: _NamedValues,
        plural: _Number | None,
        guard: DepthGuard,
        *,
        report_fallback: bool,
    ) -> str | None:
        """Render ``path`` from the first locale (or the root) that has it.

        Returns:
            Rendered text, or None when the key is missing everywhere
        """
        chain = locale_chain(requested, self._fallback_locales)
        with self._reporter.deferred(), self._read():
            found = self._render_from_chain(
                path, chain, requested, list_values, named_values, plural, guard
            )
        if found is not None:
            text, resolved_locale = found
            if report_fallback and resolved_locale != requested:
                self._reporter.warn(
                    WarningKind.FALLBACK,
                    ErrorTemplate.message_fallback(path, requested, resolved_locale),
                )
            return text

        root = self.root
        if not self._fallback_root or root is None:
            return None
        text = root._resolve(  # noqa: SLF001 - same class
            path, root.locale, list_values, named_values, plural, guard, report_fallback=False
        )
        if text is not None and report_fallback:
            self._reporter.warn(
                WarningKind.FALLBACK, ErrorTemplate.message_root_fallback(path, requested)
            )
        return text

    def _render_from_chain(
        self,
        path: MessagePath,
        chain: tuple[LocaleCode, ...],
        requested: LocaleCode,
        list_values: _ListValues,
        named_values: _NamedValues,
        plural: _Number | None,
        guard: DepthGuard,
    ) -> tuple[str, LocaleCode] | None:
        for candidate in chain:
            value = self._store.resolve(candidate, path)
            if value is NOT_FOUND:
                continue
            kind = node_kind(value)
            if kind not in _TRANSLATABLE:
                self._reporter.warn(
                    WarningKind.MISSING, ErrorTemplate.message_not_translatable(path, candidate)
                )
                continue
            text = self._render(
                value, kind, candidate, path, requested, list_values, named_values, plural, guard
            )
            return text, candidate
        return None

    def _render(
        self,
        value: object,
        kind: NodeKind,
        found_locale: LocaleCode,
        path: MessagePath,
        requested: LocaleCode,
        list_values: _ListValues,
        named_values: _NamedValues,
        plural: _Number | None,
        guard: DepthGuard,
    ) -> str:
        resolve_link = partial(
            self._resolve_link, requested, list_values, named_values
        )
        match kind:
            case NodeKind.COMPILED:
                context = MessageContext(
                    locale=found_locale,
                    path=path,
                    list_values=list_values or (),
                    named_values=named_values or MappingProxyType({}),
                    plural=plural,
                    link=lambda target: self._interpolator.render_link(
                        f"@:{target}", target, path=path, resolve_link=resolve_link, depth=guard
                    ),
                )
                try:
                    return format_value(value(context))  # type: ignore[operator]
                except (TypeError, ValueError) as e:
                    self._reporter.warn(
                        WarningKind.INTERPOLATION, ErrorTemplate.compiled_message_failed(path, e)
                    )
                    return path
            case NodeKind.VARIANTS:
                variants: Sequence[str] = value  # type: ignore[assignment]
                if plural is None:
                    template = variants[0] if variants else ""
                else:
                    template = self._plurals.select(found_locale, plural, variants)
            case _:
                template = value  # type: ignore[assignment]
                if plural is not None and PLURAL_SEPARATOR in template:
                    choices = [part.strip() for part in template.split(PLURAL_SEPARATOR)]
                    template = self._plurals.select(found_locale, plural, choices)

        return self._interpolator.interpolate(
            template,
            list_values if list_values is not None else named_values,
            locale=found_locale,
            path=path,
            resolve_link=resolve_link,
            depth=guard,
        )

    def _resolve_link(
        self,
        requested: LocaleCode,
        list_values: _ListValues,
        named_values: _NamedValues,
        target: MessagePath,
        guard: DepthGuard,
    ) -> str | None:
        return self._resolve(
            target, requested, list_values, named_values, None, guard, report_fallback=False
        )

    def _handle_missing(
        self,
        path: MessagePath,
        requested: LocaleCode,
        list_values: _ListValues,
        named_values: _NamedValues,
        guard: DepthGuard,
    ) -> str:
        handler = self._missing
        if handler is not None:
            result = handler(requested, path)
            if isinstance(result, str):
                return result
        else:
            self._reporter.warn(
                WarningKind.MISSING,
                ErrorTemplate.message_not_found(
                    path, locale_chain(requested, self._fallback_locales)
                ),
            )

        if not self._fallback_format:
            return path
        with self._reporter.deferred(), self._read():
            return self._interpolator.interpolate(
                path,
                list_values if list_values is not None else named_values,
                locale=requested,
                path=path,
                resolve_link=partial(self._resolve_link, requested, list_values, named_values),
                depth=guard,
            )

    # Call-shape front doors ----------------------------------------------

    def t(self, *args: object) -> str:
        """Translate with a flexible call shape.

        ``t(key)``, ``t(key, locale)``, ``t(key, values)``,
        ``t(key, locale, values)``; values are a list or a mapping.

        Raises:
            InvalidKeyError: If key is not a string
            InvalidArgumentError: If more than three arguments are given
        """
        call = normalize_translate_args(*args)
        return self.translate(call.key, call.values, locale=call.locale)

    def tc(self, *args: object) -> str:
        """Translate with a plural count (default 1).

        ``tc(key, count)``, ``tc(key, count, locale)``,
        ``tc(key, count, values)``, ``tc(key, locale)``, ``tc(key, values)``.
        """
        call = normalize_plural_args(*args)
        return self.translate(call.key, call.values, locale=call.locale, plural=call.plural)

    def te(self, path: MessagePath, locale: LocaleCode | None = None) -> bool:
        """Alias of translate_exists()."""
        return self.translate_exists(path, locale)

    def d(self, *args: object) -> str:
        """Format a date with a flexible call shape.

        ``d(value)``, ``d(value, key)``, ``d(value, key, locale)``,
        ``d(value, options)``; options may carry ``key`` and ``locale``.
        """
        call = normalize_datetime_args(*args)
        if call.key is not None:
            return self.format_datetime(
                call.value, call.key, call.locale, overrides=call.options or None
            )
        return self.format_datetime(call.value, call.options or None, call.locale)

    def n(self, *args: object) -> str:
        """Format a number with a flexible call shape.

        ``n(value)``, ``n(value, key)``, ``n(value, key, locale)``,
        ``n(value, options)``; options may carry ``key`` and ``locale``.
        """
        call = normalize_number_args(*args)
        if call.key is not None:
            return self.format_number(
                call.value, call.key, call.locale, overrides=call.options or None
            )
        return self.format_number(call.value, call.options or None, call.locale)
