"""Enumerations for i18ncore type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class WarningKind(StrEnum):
    """Category of an advisory warning.

    Each kind is suppressed independently through WarningPolicy.

    StrEnum provides automatic string conversion: str(WarningKind.MISSING) == "missing"
    """

    MISSING = "missing"
    """Key absent across the full fallback chain (and root)."""

    FALLBACK = "fallback"
    """Key resolved from a locale other than the requested one."""

    INTERPOLATION = "interpolation"
    """Placeholder without a matching list or named value."""

    LINK = "link"
    """Linked message exceeded the depth bound or used an unknown modifier."""

    FORMAT = "format"
    """Unknown format key or failed number/date formatting."""


class ArgumentSlot(StrEnum):
    """Role assigned to a positional call argument by the normalizer.

    StrEnum provides automatic string conversion: str(ArgumentSlot.LOCALE) == "locale"
    """

    LOCALE = "locale"
    """Locale override: t("key", "fr-FR")"""

    LIST = "list"
    """Positional interpolation values: t("key", ["a", "b"])"""

    NAMED = "named"
    """Named interpolation values: t("key", {"name": "Ada"})"""

    PLURAL = "plural"
    """Plural count: tc("key", 5)"""

    FORMAT_KEY = "format_key"
    """Registered format name: n(1.5, "currency")"""

    FORMAT_OPTIONS = "format_options"
    """Ad-hoc format options: n(1.5, {"style": "percent"})"""

    IGNORED = "ignored"
    """Argument shape with no meaning in its position."""


class FormatKind(StrEnum):
    """Kind of locale format table.

    StrEnum provides automatic string conversion: str(FormatKind.NUMBER) == "number"
    """

    DATETIME = "datetime"
    """Date and time formats: d(value, "short")"""

    NUMBER = "number"
    """Number formats: n(value, "currency")"""


__all__ = [
    "ArgumentSlot",
    "FormatKind",
    "WarningKind",
]
