"""Plural variant selection.

A plural message is an ordered list of variants, e.g.
``["one item", "{count} items"]``. A plural rule maps a count and the number
of variants to a zero-based index.

The default rule is the one/other dichotomy: index 0 for a count of 1,
index 1 for everything else. Languages with more categories register their
own rule per locale, either hand-written or built from Babel's CLDR data
with cldr_plural_rule().

Python 3.13+. Depends on Babel for CLDR data (cldr_plural_rule only).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal

from i18ncore.locale_utils import get_babel_locale

__all__ = [
    "CLDR_CATEGORIES",
    "PluralRule",
    "PluralSelector",
    "cldr_plural_rule",
    "default_plural_rule",
]

logger = logging.getLogger(__name__)

type PluralRule = Callable[[int | float | Decimal, int], int]
"""(count, number of variants) -> zero-based variant index."""

# CLDR category order used when a caller does not name one explicitly.
CLDR_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")


def default_plural_rule(count: int | float | Decimal, variant_count: int) -> int:
    """One/other dichotomy.

    Examples:
        >>> default_plural_rule(1, 2)
        0
        >>> default_plural_rule(0, 2)
        1
        >>> default_plural_rule(5, 3)
        1
    """
    del variant_count  # dichotomy ignores extra variants
    return 0 if abs(count) == 1 else 1


def cldr_plural_rule(
    locale: str,
    categories: Sequence[str] | None = None,
) -> PluralRule:
    """Build a plural rule from Babel's CLDR plural categories.

    Args:
        locale: Locale code whose CLDR rules to use
        categories: Category order matching the variant list, e.g.
            ``("one", "few", "many", "other")`` for Polish. Defaults to the
            categories the locale actually uses, in CLDR order.

    Returns:
        Rule mapping a count to the index of its category. Counts whose
        category is not listed map to the "other" variant (last index).

    Raises:
        babel.core.UnknownLocaleError: If the locale has no CLDR data
        ValueError: If the locale code is malformed

    Example:
        >>> rule = cldr_plural_rule("pl", ["one", "few", "many", "other"])
        >>> rule(1, 4), rule(3, 4), rule(5, 4)
        (0, 1, 2)
    """
    plural_form = get_babel_locale(locale).plural_form
    if categories is None:
        used = set(plural_form.tags) | {"other"}
        categories = tuple(tag for tag in CLDR_CATEGORIES if tag in used)
    positions: Mapping[str, int] = {tag: index for index, tag in enumerate(categories)}

    def rule(count: int | float | Decimal, variant_count: int) -> int:
        category = plural_form(abs(count))
        return positions.get(category, variant_count - 1)

    return rule


class PluralSelector:
    """Selects a plural variant using per-locale rules.

    Registration is a keyed replacement: the last rule registered for a
    locale wins. Locales without a rule use default_plural_rule.

    Example:
        >>> selector = PluralSelector()
        >>> selector.select("en", 1, ["one item", "many items"])
        'one item'
        >>> selector.select("en", 0, ["one item", "many items"])
        'many items'
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[str, PluralRule] | None = None) -> None:
        self._rules: dict[str, PluralRule] = dict(rules) if rules else {}

    @property
    def rules(self) -> dict[str, PluralRule]:
        """Copy of the registered rules keyed by locale."""
        return dict(self._rules)

    def register(self, locale: str, rule: PluralRule) -> None:
        """Register (or replace) the rule for ``locale``."""
        self._rules[locale] = rule
        logger.debug("Registered plural rule for locale: %s", locale)

    def unregister(self, locale: str) -> None:
        """Remove the rule for ``locale``; no-op if none is registered."""
        self._rules.pop(locale, None)

    def rule_for(self, locale: str) -> PluralRule:
        """Return the rule applied to ``locale``."""
        return self._rules.get(locale, default_plural_rule)

    def select_index(self, locale: str, count: int | float | Decimal, variant_count: int) -> int:
        """Compute the clamped variant index for ``count``."""
        if variant_count <= 1:
            return 0
        index = self.rule_for(locale)(count, variant_count)
        return min(max(index, 0), variant_count - 1)

    def select(self, locale: str, count: int | float | Decimal, variants: Sequence[str]) -> str:
        """Pick the variant for ``count``.

        A single variant is always returned as is; an empty list yields "".
        """
        if not variants:
            return ""
        return variants[self.select_index(locale, count, len(variants))]

