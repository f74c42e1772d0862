"""Translation runtime package.

Provides locale fallback chains, call-shape normalization, plural
selection, template interpolation and Babel-backed date/number formatting.
Depends on the messages package for message trees.

Python 3.13+.
"""

from .arguments import (
    FormatCall,
    TranslateCall,
    normalize_datetime_args,
    normalize_number_args,
    normalize_plural_args,
    normalize_translate_args,
)
from .fallback import locale_chain
from .formats import Formatter, LocaleFormatCache
from .interpolation import Interpolator, LinkModifier, MessageContext
from .locale_context import LocaleContext
from .plural_rules import PluralRule, PluralSelector, cldr_plural_rule, default_plural_rule
from .rwlock import RWLock

__all__ = [
    "FormatCall",
    "Formatter",
    "Interpolator",
    "LinkModifier",
    "LocaleContext",
    "LocaleFormatCache",
    "MessageContext",
    "PluralRule",
    "PluralSelector",
    "RWLock",
    "TranslateCall",
    "cldr_plural_rule",
    "default_plural_rule",
    "locale_chain",
    "normalize_datetime_args",
    "normalize_number_args",
    "normalize_plural_args",
    "normalize_translate_args",
]
