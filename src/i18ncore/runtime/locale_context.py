"""Locale context for Babel-backed number and date formatting.

This module provides locale-aware formatting without global state mutation.
Uses Babel for CLDR-compliant number, date, and currency formatting.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)
    - Failures raise FormattingError carrying a usable fallback string

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import UTC, date, datetime, tzinfo
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import ClassVar, Literal

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from i18ncore.constants import FALLBACK_BABEL_LOCALE, MAX_LOCALE_CACHE_SIZE
from i18ncore.diagnostics import ErrorTemplate, FormattingError
from i18ncore.locale_utils import normalize_locale

__all__ = ["DateStyle", "LocaleContext", "NumberStyle"]

logger = logging.getLogger(__name__)

type DateStyle = Literal["short", "medium", "long", "full"]
type NumberStyle = Literal["decimal", "percent", "currency", "scientific"]
type CurrencyDisplay = Literal["symbol", "code", "name"]


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Use LocaleContext.create() to construct instances; it caches instances
    per normalized locale code and substitutes en_US (with a logged warning)
    for locales Babel does not know.

    Examples:
        >>> ctx = LocaleContext.create("en-US")
        >>> ctx.format_number(1234.5)
        '1,234.5'

        >>> ctx = LocaleContext.create("de-DE")
        >>> ctx.format_number(1234.5)
        '1.234,5'

        >>> ctx = LocaleContext.create("xx-UNKNOWN")
        >>> ctx.is_fallback
        True

    Thread Safety:
        Instances are immutable. Cache operations are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, LocaleContext]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, locale_code: str) -> LocaleContext:
        """Create (or fetch cached) LocaleContext with graceful fallback.

        Args:
            locale_code: Locale identifier (e.g., 'en-US', 'lv_LV', 'de')

        Returns:
            LocaleContext instance. For unknown or malformed locales, formatting
            uses en_US rules while locale_code keeps the original value.
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s",
                locale_code, e, FALLBACK_BABEL_LOCALE,
            )
            babel_locale = Locale.parse(FALLBACK_BABEL_LOCALE)
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code, e, FALLBACK_BABEL_LOCALE,
            )
            babel_locale = Locale.parse(FALLBACK_BABEL_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    # Numbers -------------------------------------------------------------

    def format_number(
        self,
        value: int | float | Decimal,
        *,
        style: NumberStyle = "decimal",
        currency: str | None = None,
        currency_display: CurrencyDisplay = "symbol",
        minimum_fraction_digits: int | None = None,
        maximum_fraction_digits: int | None = None,
        use_grouping: bool = True,
        pattern: str | None = None,
    ) -> str:
        """Format a number with locale-specific separators.

        Args:
            value: Number to format
            style: "decimal", "percent", "currency" or "scientific"
            currency: ISO 4217 code, required for style="currency"
            currency_display: "symbol", "code" or "name" (currency only)
            minimum_fraction_digits: Minimum decimal places
            maximum_fraction_digits: Maximum decimal places
            use_grouping: Use thousands separator
            pattern: Custom CLDR number pattern (overrides digit options)

        Returns:
            Formatted number string

        Raises:
            FormattingError: If Babel rejects the value or options

        Examples:
            >>> ctx = LocaleContext.create("en-US")
            >>> ctx.format_number(0.256, style="percent")
            '26%'
            >>> ctx.format_number(1234.5, style="currency", currency="EUR")
            '€1,234.50'
        """
        try:
            match style:
                case "currency":
                    if not currency:
                        msg = "style='currency' requires a currency code"
                        raise ValueError(msg)
                    return self._format_currency(
                        value, currency, currency_display, pattern,
                        minimum_fraction_digits, maximum_fraction_digits,
                    )
                case "percent":
                    return str(
                        babel_numbers.format_percent(
                            value,
                            format=pattern or self._digit_pattern(
                                minimum_fraction_digits, maximum_fraction_digits,
                                use_grouping, suffix="%", default_max=0,
                            ),
                            locale=self.babel_locale,
                        )
                    )
                case "scientific":
                    return str(
                        babel_numbers.format_scientific(
                            value, format=pattern, locale=self.babel_locale
                        )
                    )
                case "decimal":
                    return str(
                        babel_numbers.format_decimal(
                            value,
                            format=pattern or self._digit_pattern(
                                minimum_fraction_digits, maximum_fraction_digits,
                                use_grouping, default_max=3,
                            ),
                            locale=self.babel_locale,
                        )
                    )
                case _:
                    msg = f"Unknown number style '{style}'"
                    raise ValueError(msg)
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed(value, "number", self.locale_code, str(e)),
                fallback_value=str(value),
            ) from e

    @staticmethod
    def _digit_pattern(
        minimum_fraction_digits: int | None,
        maximum_fraction_digits: int | None,
        use_grouping: bool,
        *,
        suffix: str = "",
        default_max: int,
    ) -> str | None:
        """Build a CLDR pattern such as '#,##0.0##' from digit options.

        Returns None when no option deviates from the locale default, so that
        Babel applies the locale's own pattern (e.g. "#,##0 %" in German).
        """
        if minimum_fraction_digits is None and maximum_fraction_digits is None and use_grouping:
            return None
        minimum = minimum_fraction_digits or 0
        maximum = maximum_fraction_digits if maximum_fraction_digits is not None else default_max
        maximum = max(maximum, minimum)
        integer_part = "#,##0" if use_grouping else "0"
        if maximum == 0:
            return f"{integer_part}{suffix}"
        return f"{integer_part}.{'0' * minimum}{'#' * (maximum - minimum)}{suffix}"

    def _format_currency(
        self,
        value: int | float | Decimal,
        currency: str,
        currency_display: CurrencyDisplay,
        pattern: str | None,
        minimum_fraction_digits: int | None,
        maximum_fraction_digits: int | None,
    ) -> str:
        if pattern is None and currency_display == "name":
            return str(
                babel_numbers.format_currency(
                    value, currency, locale=self.babel_locale, format_type="name"
                )
            )

        if pattern is None and currency_display == "code":
            standard = self.babel_locale.currency_formats.get("standard")
            raw_pattern = getattr(standard, "pattern", None)
            # Single U+00A4 = symbol, double U+00A4 = ISO code per CLDR
            if raw_pattern and "\xa4" in raw_pattern:
                pattern = raw_pattern.replace("\xa4", "\xa4\xa4")
            else:
                logger.debug("Currency pattern for locale %s lacks placeholder", self.locale_code)

        digits_given = minimum_fraction_digits is not None or maximum_fraction_digits is not None
        if pattern is None and digits_given:
            standard = self.babel_locale.currency_formats.get("standard")
            raw_pattern = getattr(standard, "pattern", None) or "\xa4#,##0.00"
            minimum = minimum_fraction_digits or 0
            maximum = max(
                maximum_fraction_digits if maximum_fraction_digits is not None else minimum,
                minimum,
            )
            fraction = f".{'0' * minimum}{'#' * (maximum - minimum)}" if maximum else ""
            pattern = raw_pattern.split(";")[0].replace("#,##0.00", f"#,##0{fraction}")
            return str(
                babel_numbers.format_currency(
                    value, currency, format=pattern, locale=self.babel_locale,
                    currency_digits=False,
                )
            )

        return str(
            babel_numbers.format_currency(
                value,
                currency,
                format=pattern,
                locale=self.babel_locale,
                currency_digits=True,
            )
        )

    # Dates ---------------------------------------------------------------

    def format_datetime(
        self,
        value: date | datetime | int | float | Decimal | str,
        *,
        date_style: DateStyle | None = "medium",
        time_style: DateStyle | None = None,
        pattern: str | None = None,
        timezone: str | tzinfo | None = None,
    ) -> str:
        """Format a date or datetime with locale-specific formatting.

        Args:
            value: date, datetime, POSIX timestamp in seconds (UTC), or an
                ISO 8601 string accepted by datetime.fromisoformat()
            date_style: Date style, or None to omit the date part
            time_style: Time style, or None to omit the time part
            pattern: Custom CLDR date pattern (overrides styles)
            timezone: Target zone name (e.g. "Europe/Riga") or tzinfo

        Returns:
            Formatted date/time string

        Raises:
            FormattingError: If the value cannot be converted or formatted

        Examples:
            >>> from datetime import datetime, UTC
            >>> ctx = LocaleContext.create("en-US")
            >>> dt = datetime(2025, 10, 27, 14, 30, tzinfo=UTC)
            >>> ctx.format_datetime(dt, date_style="short")
            '10/27/25'
            >>> ctx.format_datetime(dt, pattern="yyyy-MM-dd")
            '2025-10-27'
        """
        dt_value = self._coerce_datetime(value)

        try:
            tz = babel_dates.get_timezone(timezone) if isinstance(timezone, str) else timezone
            if tz is not None and isinstance(dt_value, datetime):
                if dt_value.tzinfo is None:
                    dt_value = dt_value.replace(tzinfo=UTC)
                dt_value = dt_value.astimezone(tz)

            if pattern is not None:
                if isinstance(dt_value, datetime):
                    return str(
                        babel_dates.format_datetime(
                            dt_value, format=pattern, locale=self.babel_locale
                        )
                    )
                return str(
                    babel_dates.format_date(dt_value, format=pattern, locale=self.babel_locale)
                )

            time_part = None
            if time_style is not None and isinstance(dt_value, datetime):
                time_part = babel_dates.format_time(
                    dt_value, format=time_style, locale=self.babel_locale
                )
            date_part = None
            if date_style is not None or time_part is None:
                date_part = babel_dates.format_date(
                    dt_value, format=date_style or "medium", locale=self.babel_locale
                )

            if date_part is None:
                return str(time_part)
            if time_part is None:
                return str(date_part)
            # CLDR dateTimeFormat pattern: {0} is the time, {1} is the date
            combining = (
                self.babel_locale.datetime_formats.get(date_style or "medium")
                or self.babel_locale.datetime_formats.get("medium")
                or "{1} {0}"
            )
            return str(combining).format(time_part, date_part)

        except (ValueError, OverflowError, AttributeError, KeyError, LookupError) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed(value, "datetime", self.locale_code, str(e)),
                fallback_value=dt_value.isoformat(),
            ) from e

    def _coerce_datetime(self, value: object) -> date | datetime:
        """Convert timestamps and ISO strings to datetime."""
        match value:
            case datetime() | date():
                return value
            case bool():
                pass
            case int() | float() | Decimal():
                try:
                    return datetime.fromtimestamp(float(value), tz=UTC)
                except (OverflowError, OSError, ValueError) as e:
                    raise FormattingError(
                        ErrorTemplate.formatting_failed(
                            value, "datetime", self.locale_code, str(e)
                        ),
                        fallback_value=str(value),
                    ) from e
            case str():
                try:
                    return datetime.fromisoformat(value)
                except ValueError as e:
                    raise FormattingError(
                        ErrorTemplate.formatting_failed(
                            value, "datetime", self.locale_code, "not ISO 8601 format"
                        ),
                        fallback_value=value,
                    ) from e
        raise FormattingError(
            ErrorTemplate.formatting_failed(
                value, "datetime", self.locale_code, f"unsupported type {type(value).__name__}"
            ),
            fallback_value=str(value),
        )
