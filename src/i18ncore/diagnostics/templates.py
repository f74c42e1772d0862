"""Error message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized diagnostic templates.

    All diagnostic messages are created here. NO f-strings in exception
    constructors! Call sites pick a template and pass the resulting
    Diagnostic to an exception or to the warning reporter.
    """

    # Lookup ------------------------------------------------------------

    @staticmethod
    def message_not_found(key: str, locales: tuple[str, ...]) -> Diagnostic:
        """Key absent in every locale of the chain.

        Args:
            key: Message path that was requested
            locales: Locale chain that was searched

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        searched = ", ".join(f"'{locale}'" for locale in locales)
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=f"Cannot translate the value of keypath '{key}' (searched: {searched})",
            key=key,
            locale=locales[0] if locales else None,
            hint="Add the key to the locale messages or to a fallback locale",
            severity="warning",
        )

    @staticmethod
    def message_fallback(key: str, requested: str, resolved: str) -> Diagnostic:
        """Key resolved from a fallback locale.

        Args:
            key: Message path that was requested
            requested: Primary locale of the chain
            resolved: Locale that supplied the message

        Returns:
            Diagnostic for MESSAGE_FALLBACK
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_FALLBACK,
            message=f"Fall back to translate '{key}' with '{resolved}' locale",
            key=key,
            locale=requested,
            hint=f"Translate '{key}' for locale '{requested}'",
            severity="warning",
        )

    @staticmethod
    def message_root_fallback(key: str, requested: str) -> Diagnostic:
        """Key resolved from the root localizer.

        Args:
            key: Message path that was requested
            requested: Primary locale of the local chain

        Returns:
            Diagnostic for MESSAGE_ROOT_FALLBACK
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_ROOT_FALLBACK,
            message=f"Fall back to translate '{key}' with root locale",
            key=key,
            locale=requested,
            severity="warning",
        )

    @staticmethod
    def message_not_translatable(key: str, locale: str) -> Diagnostic:
        """Path addresses a nested node rather than a message.

        Args:
            key: Message path that was requested
            locale: Locale whose tree holds the node

        Returns:
            Diagnostic for MESSAGE_NOT_TRANSLATABLE
        """
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_TRANSLATABLE,
            message=f"Keypath '{key}' addresses a message group in locale '{locale}'",
            key=key,
            locale=locale,
            hint="Address a leaf message, e.g. 'group.child'",
            severity="warning",
        )

    # Interpolation -----------------------------------------------------

    @staticmethod
    def list_value_missing(index: int, key: str) -> Diagnostic:
        """Positional placeholder without a list value.

        Args:
            index: Placeholder index
            key: Message path being interpolated

        Returns:
            Diagnostic for LIST_VALUE_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.LIST_VALUE_MISSING,
            message=f"Placeholder '{{{index}}}' in '{key}' has no list value",
            key=key,
            hint="Pass a sequence of values, e.g. t(key, [value0, value1])",
            severity="warning",
        )

    @staticmethod
    def named_value_missing(name: str, key: str) -> Diagnostic:
        """Named placeholder without a named value.

        Args:
            name: Placeholder name
            key: Message path being interpolated

        Returns:
            Diagnostic for NAMED_VALUE_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.NAMED_VALUE_MISSING,
            message=f"Placeholder '{{{name}}}' in '{key}' has no named value",
            key=key,
            hint=f"Pass a mapping with '{name}', e.g. t(key, {{'{name}': ...}})",
            severity="warning",
        )

    @staticmethod
    def link_depth_exceeded(reference: str, max_depth: int) -> Diagnostic:
        """Linked-message nesting beyond the bound.

        Args:
            reference: Raw link text, e.g. '@:greeting'
            max_depth: Configured bound

        Returns:
            Diagnostic for LINK_DEPTH_EXCEEDED
        """
        return Diagnostic(
            code=DiagnosticCode.LINK_DEPTH_EXCEEDED,
            message=f"Linked message '{reference}' exceeds maximum depth of {max_depth}",
            key=reference,
            hint="Check for messages that link to each other in a cycle",
            severity="warning",
        )

    @staticmethod
    def link_not_found(reference: str, target: str, key: str) -> Diagnostic:
        """Linked message target missing in every locale.

        The diagnostic is keyed by the link target so that missing-key
        silencing patterns match the absent message.

        Args:
            reference: Raw link text, e.g. '@:greeting'
            target: Path of the linked message
            key: Message path containing the link

        Returns:
            Diagnostic for LINK_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.LINK_NOT_FOUND,
            message=f"Linked message '{reference}' in '{key}' not found",
            key=target,
            severity="warning",
        )

    @staticmethod
    def link_modifier_unknown(modifier: str, key: str) -> Diagnostic:
        """Link modifier not registered.

        Args:
            modifier: Modifier name
            key: Message path containing the link

        Returns:
            Diagnostic for LINK_MODIFIER_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.LINK_MODIFIER_UNKNOWN,
            message=f"Unknown link modifier '{modifier}' in '{key}'",
            key=key,
            hint="Built-in modifiers are 'upper', 'lower' and 'capitalize'",
            severity="warning",
        )

    @staticmethod
    def compiled_message_failed(key: str, error: Exception) -> Diagnostic:
        """Compiled message callable raised.

        Args:
            key: Message path of the compiled message
            error: Exception raised by the callable

        Returns:
            Diagnostic for COMPILED_MESSAGE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.COMPILED_MESSAGE_FAILED,
            message=f"Compiled message '{key}' failed: {type(error).__name__}: {error}",
            key=key,
            severity="warning",
        )

    # Formatting --------------------------------------------------------

    @staticmethod
    def format_key_not_found(format_key: str, kind: str, locale: str) -> Diagnostic:
        """Named format missing in every locale of the chain.

        Args:
            format_key: Requested format name
            kind: "datetime" or "number"
            locale: Primary locale of the chain

        Returns:
            Diagnostic for FORMAT_KEY_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.FORMAT_KEY_NOT_FOUND,
            message=f"Fall back to default {kind} format: key '{format_key}' not found",
            key=format_key,
            locale=locale,
            hint=f"Register '{format_key}' with set_{kind}_format() or merge_{kind}_format()",
            severity="warning",
        )

    @staticmethod
    def formatting_failed(value: object, kind: str, locale: str, error: str) -> Diagnostic:
        """Babel could not format the value.

        Args:
            value: Value being formatted
            kind: "datetime" or "number"
            locale: Formatting locale
            error: Underlying error description

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=f"Cannot format {kind} {value!r} for locale '{locale}': {error}",
            locale=locale,
            severity="warning",
        )

    @staticmethod
    def format_option_unknown(option: str, kind: str) -> Diagnostic:
        """Format option name not understood.

        Args:
            option: Option name
            kind: "datetime" or "number"

        Returns:
            Diagnostic for FORMAT_OPTION_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.FORMAT_OPTION_UNKNOWN,
            message=f"Ignoring unknown {kind} format option '{option}'",
            key=option,
            severity="warning",
        )

    # Call shape --------------------------------------------------------

    @staticmethod
    def invalid_key(value: object) -> Diagnostic:
        """First translate argument is not a path string.

        Args:
            value: Offending argument

        Returns:
            Diagnostic for INVALID_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEY,
            message=f"Message key must be a string, got {type(value).__name__}",
            hint="Pass the message path first, e.g. t('nav.home')",
        )

    @staticmethod
    def invalid_value(value: object, operation: str, expected: str) -> Diagnostic:
        """Value argument of a format call has the wrong type.

        Args:
            value: Offending argument
            operation: Operation name ("d" or "n")
            expected: Human-readable list of accepted types

        Returns:
            Diagnostic for INVALID_VALUE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message=f"{operation}() expects {expected}, got {type(value).__name__}",
        )

    @staticmethod
    def too_many_arguments(operation: str, count: int) -> Diagnostic:
        """More positional arguments than any call shape accepts.

        Args:
            operation: Operation name
            count: Number of arguments received

        Returns:
            Diagnostic for TOO_MANY_ARGUMENTS
        """
        return Diagnostic(
            code=DiagnosticCode.TOO_MANY_ARGUMENTS,
            message=f"{operation}() takes at most 3 positional arguments ({count} given)",
        )
