"""Diagnostic system for i18ncore.

Provides structured diagnostics with codes and hints, the exception
hierarchy, and the advisory warning policy.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FormattingError,
    I18nError,
    InvalidArgumentError,
    InvalidKeyError,
    LinkDepthExceededError,
)
from .policy import Silence, WarningHandler, WarningPolicy, WarningReporter
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "FormattingError",
    "I18nError",
    "InvalidArgumentError",
    "InvalidKeyError",
    "LinkDepthExceededError",
    "Silence",
    "WarningHandler",
    "WarningPolicy",
    "WarningReporter",
]
