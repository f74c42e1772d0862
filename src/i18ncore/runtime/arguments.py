"""Positional argument normalization.

Call sites pass heterogeneous positional shapes:

    t("key")                      t("key", "fr")
    t("key", ["a"])               t("key", {"name": "Ada"})
    t("key", "fr", {"name": 1})   tc("key", 5, "fr")
    n(9.5, "currency", "de-DE")   d(now, {"date_style": "long"})

Each argument after the first is classified into one ArgumentSlot by
matching its shape against a small closed set, then the slots are folded
left to right into a frozen call description. Business logic downstream only
ever sees TranslateCall or FormatCall.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Literal

from i18ncore.diagnostics import ErrorTemplate, InvalidArgumentError, InvalidKeyError
from i18ncore.enums import ArgumentSlot

__all__ = [
    "FormatCall",
    "TranslateCall",
    "classify_format_argument",
    "classify_translate_argument",
    "is_number",
    "normalize_datetime_args",
    "normalize_number_args",
    "normalize_plural_args",
    "normalize_translate_args",
]

type Number = int | float | Decimal

# Keys inside an ad-hoc options mapping that configure the call, not Babel.
_RESERVED_OPTION_KEYS: frozenset[str] = frozenset({"key", "locale"})

_MAX_ARGS = 3

_EMPTY_OPTIONS: Mapping[str, object] = MappingProxyType({})


def is_number(value: object) -> bool:
    """Check for a real number; booleans are excluded."""
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


@dataclass(frozen=True, slots=True)
class TranslateCall:
    """Canonical description of a translate call.

    List and named values are mutually exclusive: when a call supplied both,
    the list is kept and the mapping dropped.

    Attributes:
        key: Message path
        list_values: Positional interpolation values, or None
        named_values: Named interpolation values, or None
        locale: Locale override, or None for the active locale
        plural: Plural count, or None for a plain translation
    """

    key: str
    list_values: tuple[object, ...] | None = None
    named_values: Mapping[str, object] | None = None
    locale: str | None = None
    plural: Number | None = None

    def __post_init__(self) -> None:
        if self.list_values is not None and self.named_values is not None:
            object.__setattr__(self, "named_values", None)

    @property
    def values(self) -> tuple[object, ...] | Mapping[str, object] | None:
        """Whichever value family the call supplied."""
        if self.list_values is not None:
            return self.list_values
        return self.named_values


@dataclass(frozen=True, slots=True)
class FormatCall:
    """Canonical description of a datetime or number format call.

    Attributes:
        value: Value to format
        key: Registered format name, or None
        options: Ad-hoc options overriding the named format
        locale: Locale override, or None for the active locale
    """

    value: object
    key: str | None = None
    options: Mapping[str, object] = field(default_factory=lambda: _EMPTY_OPTIONS)
    locale: str | None = None


def classify_translate_argument(
    value: object, position: int, *, plural: bool = False
) -> ArgumentSlot:
    """Classify a translate argument at ``position`` (2 or 3).

    Position 2: str -> LOCALE, sequence -> LIST, mapping -> NAMED,
    number -> PLURAL (plural calls only).
    Position 3: sequence -> LIST, mapping -> NAMED; plural calls also accept
    str -> LOCALE and number -> PLURAL.
    """
    locale_allowed = position == 2 or plural
    match value:
        case str() if locale_allowed:
            return ArgumentSlot.LOCALE
        case bool():
            return ArgumentSlot.IGNORED
        case int() | float() | Decimal() if plural:
            return ArgumentSlot.PLURAL
        case Mapping():
            return ArgumentSlot.NAMED
        case _ if _is_sequence(value):
            return ArgumentSlot.LIST
        case _:
            return ArgumentSlot.IGNORED


def classify_format_argument(value: object, position: int) -> ArgumentSlot:
    """Classify a datetime/number argument at ``position`` (2 or 3).

    Position 2: str -> FORMAT_KEY, mapping -> FORMAT_OPTIONS.
    Position 3: str -> LOCALE, mapping -> FORMAT_OPTIONS.
    """
    match value:
        case str() if position == 2:
            return ArgumentSlot.FORMAT_KEY
        case str():
            return ArgumentSlot.LOCALE
        case Mapping():
            return ArgumentSlot.FORMAT_OPTIONS
        case _:
            return ArgumentSlot.IGNORED


def _check_arity(operation: str, args: tuple[object, ...]) -> None:
    if len(args) > _MAX_ARGS:
        raise InvalidArgumentError(ErrorTemplate.too_many_arguments(operation, len(args)))


def _normalize_translate(
    operation: str, args: tuple[object, ...], *, plural: bool
) -> TranslateCall:
    _check_arity(operation, args)
    if not args or not isinstance(args[0], str):
        raise InvalidKeyError(ErrorTemplate.invalid_key(args[0] if args else None))

    key = args[0]
    list_values: tuple[object, ...] | None = None
    named_values: Mapping[str, object] | None = None
    locale: str | None = None
    count: Number | None = 1 if plural else None

    for position, arg in enumerate(args[1:], start=2):
        match classify_translate_argument(arg, position, plural=plural):
            case ArgumentSlot.LOCALE:
                locale = arg  # type: ignore[assignment]
            case ArgumentSlot.PLURAL:
                count = arg  # type: ignore[assignment]
            case ArgumentSlot.LIST:
                list_values = tuple(arg)  # type: ignore[call-overload]
            case ArgumentSlot.NAMED:
                named_values = MappingProxyType(dict(arg))  # type: ignore[call-overload]
            case _:
                pass

    return TranslateCall(
        key=key,
        list_values=list_values,
        named_values=named_values,
        locale=locale,
        plural=count,
    )


def normalize_translate_args(*args: object) -> TranslateCall:
    """Normalize ``t(key, [locale | list | named], [list | named])``.

    Raises:
        InvalidKeyError: If the first argument is not a string
        InvalidArgumentError: If more than three arguments are given

    Example:
        >>> call = normalize_translate_args("greet", "fr", {"name": "Ada"})
        >>> call.locale, dict(call.named_values)
        ('fr', {'name': 'Ada'})
    """
    return _normalize_translate("t", args, plural=False)


def normalize_plural_args(*args: object) -> TranslateCall:
    """Normalize ``tc(key, [count | locale | list | named], [locale | list | named])``.

    The plural count defaults to 1 when no numeric argument is given.

    Raises:
        InvalidKeyError: If the first argument is not a string
        InvalidArgumentError: If more than three arguments are given

    Example:
        >>> call = normalize_plural_args("apples", 5, "fr")
        >>> call.plural, call.locale
        (5, 'fr')
    """
    return _normalize_translate("tc", args, plural=True)


def _normalize_format(
    operation: Literal["d", "n"],
    args: tuple[object, ...],
    *,
    accepts_dates: bool,
) -> FormatCall:
    _check_arity(operation, args)
    value = args[0] if args else None
    valid = is_number(value) or (accepts_dates and isinstance(value, date | str))
    if not valid:
        expected = "a number, date, datetime or ISO 8601 string" if accepts_dates else "a number"
        raise InvalidArgumentError(ErrorTemplate.invalid_value(value, operation, expected))

    key: str | None = None
    locale: str | None = None
    options: dict[str, object] = {}

    for position, arg in enumerate(args[1:], start=2):
        match classify_format_argument(arg, position):
            case ArgumentSlot.FORMAT_KEY:
                key = arg  # type: ignore[assignment]
            case ArgumentSlot.LOCALE:
                locale = arg  # type: ignore[assignment]
            case ArgumentSlot.FORMAT_OPTIONS:
                for name, option in arg.items():  # type: ignore[attr-defined]
                    match name:
                        case "key" if isinstance(option, str):
                            key = option
                        case "locale" if isinstance(option, str):
                            locale = option
                        case _ if name in _RESERVED_OPTION_KEYS:
                            pass
                        case _:
                            options[name] = option
            case _:
                pass

    return FormatCall(value=value, key=key, options=MappingProxyType(options), locale=locale)


def normalize_datetime_args(*args: object) -> FormatCall:
    """Normalize ``d(value, [key | options], [locale | options])``.

    Raises:
        InvalidArgumentError: If the value is not a number, date, datetime or
            string, or if more than three arguments are given
    """
    return _normalize_format("d", args, accepts_dates=True)


def normalize_number_args(*args: object) -> FormatCall:
    """Normalize ``n(value, [key | options], [locale | options])``.

    Raises:
        InvalidArgumentError: If the value is not a number, or if more than
            three arguments are given

    Example:
        >>> call = normalize_number_args(1.5, {"key": "currency", "currency": "EUR"}, "de")
        >>> call.key, dict(call.options), call.locale
        ('currency', {'currency': 'EUR'}, 'de')
    """
    return _normalize_format("n", args, accepts_dates=False)
