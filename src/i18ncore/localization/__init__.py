"""Localization package for Localizer.

Provides the translation orchestrator, its configuration and the type
aliases used to annotate hooks.

Submodules:
    types        - PEP 695 type aliases (LocaleCode, MessagePath, MissingHandler,
                   PostTranslationHandler)
    config       - LocalizerConfig (frozen configuration, legacy option conversion)
    orchestrator - Localizer (fallback chains, plurals, links, formats)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from i18ncore.localization.config import LocalizerConfig
from i18ncore.localization.orchestrator import Localizer
from i18ncore.localization.types import (
    LocaleCode,
    MessagePath,
    MissingHandler,
    PostTranslationHandler,
)

__all__ = [
    # Main orchestrator
    "Localizer",
    "LocalizerConfig",
    # Type aliases for user code type annotations
    "LocaleCode",
    "MessagePath",
    "MissingHandler",
    "PostTranslationHandler",
]
