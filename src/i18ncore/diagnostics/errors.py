"""i18ncore exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic for rich error information.
Only InvalidArgumentError (and its InvalidKeyError subclass) escapes the
public API; the others are raised and caught internally to drive graceful
degradation.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class I18nError(Exception):
    """Base exception for all i18ncore errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidArgumentError(I18nError, TypeError):
    """Malformed call shape.

    Raised when a positional argument cannot play any role in its slot,
    e.g. a non-numeric value passed to n().
    """


class InvalidKeyError(InvalidArgumentError):
    """First argument to a translate call is not a message path string."""


class FormattingError(I18nError):
    """Locale-aware formatting failed.

    Carries a fallback_value that is used in the output in place of the
    formatted text, so a formatting gap never crashes the caller.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class LinkDepthExceededError(I18nError):
    """Linked-message nesting exceeded the configured bound.

    This error indicates either:
    - A cycle between linked messages (a -> b -> a)
    - A message linking to itself
    - An unintentionally deep chain of links
    """
