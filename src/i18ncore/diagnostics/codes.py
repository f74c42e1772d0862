"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup diagnostics (missing keys, fallbacks)
        2000-2999: Interpolation diagnostics (placeholders, linked messages)
        3000-3999: Formatting diagnostics (dates, numbers)
        4000-4999: Call-shape errors (argument normalization)
    """

    # Lookup (1000-1999)
    MESSAGE_NOT_FOUND = 1001
    MESSAGE_FALLBACK = 1002
    MESSAGE_ROOT_FALLBACK = 1003
    MESSAGE_NOT_TRANSLATABLE = 1004

    # Interpolation (2000-2999)
    LIST_VALUE_MISSING = 2001
    NAMED_VALUE_MISSING = 2002
    LINK_DEPTH_EXCEEDED = 2003
    LINK_NOT_FOUND = 2004
    LINK_MODIFIER_UNKNOWN = 2005
    COMPILED_MESSAGE_FAILED = 2006

    # Formatting (3000-3999)
    FORMAT_KEY_NOT_FOUND = 3001
    FORMATTING_FAILED = 3002
    FORMAT_OPTION_UNKNOWN = 3003

    # Call shape (4000-4999)
    INVALID_KEY = 4001
    INVALID_VALUE = 4002
    TOO_MANY_ARGUMENTS = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        key: Message path or format key the diagnostic is about
        locale: Locale in effect when the diagnostic was produced
        hint: Suggestion for fixing the problem
        severity: "error" for raised failures, "warning" for advisories
    """

    code: DiagnosticCode
    message: str
    key: str | None = None
    locale: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic on one or more lines.

        Example output:
            warning[MESSAGE_NOT_FOUND]: Cannot translate 'nav.home' (locale 'fr-FR')
              = help: Add the key to the locale messages or to a fallback locale

        Control characters in the message are escaped so that user-supplied
        keys cannot forge extra log lines.

        Returns:
            Formatted diagnostic text
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
