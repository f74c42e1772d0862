"""Shared constants for i18ncore.

Centralized configuration constants used across the messages, runtime and
localization packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Active locale when none is configured
- Depth limits: Recursion protection for linked-message resolution
- Cache limits: Memory bounds for caching subsystems
- Message syntax: Markers recognized inside message templates

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "FALLBACK_BABEL_LOCALE",
    # Depth limits
    "MAX_LINK_DEPTH",
    "RECURSION_RESERVE_FRAMES",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_PATH_CACHE_SIZE",
    # Message syntax
    "PLURAL_SEPARATOR",
    "IMPLICIT_PLURAL_NAMES",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Active locale used when a Localizer is created without one.
DEFAULT_LOCALE: str = "en-US"

# Babel locale substituted when a locale code cannot be parsed for formatting.
# The original code is preserved on the LocaleContext for debugging.
FALLBACK_BABEL_LOCALE: str = "en_US"

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of linked messages (@:path inside @:path ...).
# A self-referencing message reaches this bound after five expansions and
# degrades to its raw reference text. Legitimate chains rarely exceed two.
MAX_LINK_DEPTH: int = 5

# Stack frames kept free when clamping a configured depth against
# sys.getrecursionlimit().
RECURSION_RESERVE_FRAMES: int = 50

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum parsed key paths kept by the path tokenizer.
# Applications rarely use more than a few thousand distinct keys.
MAX_PATH_CACHE_SIZE: int = 4096

# ============================================================================
# MESSAGE SYNTAX
# ============================================================================

# Separator for plural variants written inline in a single template:
#   "no apples | one apple | {count} apples"
PLURAL_SEPARATOR: str = "|"

# Named values injected with the plural count unless supplied by the caller.
IMPLICIT_PLURAL_NAMES: tuple[str, ...] = ("count", "n")
