"""i18ncore - message translation and locale-aware formatting.

Resolves a message path plus runtime values into a locale-correct string
across a locale fallback chain, and formats numbers and dates with Babel's
CLDR data.

Public API:
    Localizer - Translation, plurals, linked messages, date/number formatting
    LocalizerConfig - Immutable Localizer configuration
    WarningPolicy - Per-category suppression of advisory warnings
    WarningKind - Warning categories
    MessageContext - Argument passed to compiled messages
    cldr_plural_rule - Plural rule built from CLDR data for register_plural_rule()
    get_system_locale - Locale of the running process

Exceptions:
    I18nError - Base exception class
    InvalidArgumentError - Malformed call shape
    InvalidKeyError - Message path is not a string

Submodules:
    i18ncore.messages - Message trees, path resolution, MessageStore
    i18ncore.runtime - Fallback chains, plurals, interpolation, format caches
    i18ncore.diagnostics - Diagnostics, error types and warning policy
    i18ncore.localization - Localizer and its configuration
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    Diagnostic,
    I18nError,
    InvalidArgumentError,
    InvalidKeyError,
    WarningPolicy,
)
from .enums import WarningKind
from .locale_utils import get_system_locale
from .localization import Localizer, LocalizerConfig
from .runtime.interpolation import MessageContext
from .runtime.plural_rules import cldr_plural_rule

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18ncore")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Diagnostic",
    "I18nError",
    "InvalidArgumentError",
    "InvalidKeyError",
    "Localizer",
    "LocalizerConfig",
    "MessageContext",
    "WarningKind",
    "WarningPolicy",
    "__version__",
    "cldr_plural_rule",
    "get_system_locale",
]
