"""Tests for the diagnostics package: codes, templates, errors and policy."""

from __future__ import annotations

import logging
import re
import threading
from typing import TYPE_CHECKING

import pytest

from i18ncore.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    FormattingError,
    I18nError,
    InvalidArgumentError,
    InvalidKeyError,
    LinkDepthExceededError,
    WarningPolicy,
    WarningReporter,
)
from i18ncore.enums import WarningKind

if TYPE_CHECKING:
    from conftest import WarningRecorder


class TestDiagnosticCode:
    """Test code numbering."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low"),
        [
            (DiagnosticCode.MESSAGE_NOT_FOUND, 1000),
            (DiagnosticCode.LINK_DEPTH_EXCEEDED, 2000),
            (DiagnosticCode.FORMATTING_FAILED, 3000),
            (DiagnosticCode.INVALID_KEY, 4000),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int) -> None:
        assert low <= code.value < low + 1000


class TestDiagnostic:
    """Test Diagnostic rendering."""

    def test_str_is_message(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_KEY, message="bad key")

        assert str(diagnostic) == "bad key"

    def test_format_error_with_hint(self) -> None:
        diagnostic = ErrorTemplate.message_not_found("nav.home", ("fr-FR", "en-US"))

        assert diagnostic.format_error() == (
            "warning[MESSAGE_NOT_FOUND]: Cannot translate the value of keypath 'nav.home' "
            "(searched: 'fr-FR', 'en-US')\n"
            "  = help: Add the key to the locale messages or to a fallback locale"
        )

    def test_format_error_escapes_control_characters(self) -> None:
        """User-supplied keys cannot forge extra log lines."""
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_KEY, message="a\nb\tc\r")

        assert diagnostic.format_error() == "error[INVALID_KEY]: a\\nb\\tc\\r"

    def test_is_frozen(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_KEY, message="x")

        with pytest.raises(AttributeError):
            diagnostic.message = "y"  # type: ignore[misc]


class TestErrorTemplate:
    """Test template contents."""

    def test_message_fallback(self) -> None:
        diagnostic = ErrorTemplate.message_fallback("greet", "fr-FR", "en-US")

        assert diagnostic.code is DiagnosticCode.MESSAGE_FALLBACK
        assert diagnostic.key == "greet"
        assert diagnostic.locale == "fr-FR"
        assert "'en-US'" in diagnostic.message

    def test_message_not_found_empty_chain(self) -> None:
        assert ErrorTemplate.message_not_found("k", ()).locale is None

    def test_named_value_hint_mentions_name(self) -> None:
        diagnostic = ErrorTemplate.named_value_missing("user", "greet")

        assert diagnostic.message == "Placeholder '{user}' in 'greet' has no named value"
        assert diagnostic.hint is not None
        assert "'user'" in diagnostic.hint

    def test_list_value_missing(self) -> None:
        diagnostic = ErrorTemplate.list_value_missing(2, "pair")

        assert diagnostic.message == "Placeholder '{2}' in 'pair' has no list value"

    def test_compiled_message_failed_names_error(self) -> None:
        diagnostic = ErrorTemplate.compiled_message_failed("k", ValueError("boom"))

        assert diagnostic.message == "Compiled message 'k' failed: ValueError: boom"

    def test_invalid_key_names_type(self) -> None:
        assert "got int" in ErrorTemplate.invalid_key(3).message

    def test_too_many_arguments(self) -> None:
        assert ErrorTemplate.too_many_arguments("t", 4).message == (
            "t() takes at most 3 positional arguments (4 given)"
        )

    @pytest.mark.parametrize(
        "diagnostic",
        [
            ErrorTemplate.message_root_fallback("k", "en"),
            ErrorTemplate.message_not_translatable("k", "en"),
            ErrorTemplate.link_depth_exceeded("@:k", 5),
            ErrorTemplate.link_not_found("@:k", "k", "m"),
            ErrorTemplate.link_modifier_unknown("shout", "k"),
            ErrorTemplate.format_key_not_found("money", "number", "en"),
            ErrorTemplate.formatting_failed(1, "number", "en", "bad"),
            ErrorTemplate.format_option_unknown("colour", "number"),
        ],
    )
    def test_advisories_are_warnings(self, diagnostic: Diagnostic) -> None:
        assert diagnostic.severity == "warning"


class TestErrors:
    """Test the exception hierarchy."""

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.invalid_key(None)

        error = I18nError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_plain_message(self) -> None:
        error = I18nError("plain")

        assert error.diagnostic is None
        assert str(error) == "plain"

    def test_invalid_argument_is_type_error(self) -> None:
        assert issubclass(InvalidArgumentError, TypeError)
        assert issubclass(InvalidKeyError, InvalidArgumentError)

    def test_formatting_error_fallback(self) -> None:
        error = FormattingError("failed", fallback_value="42")

        assert error.fallback_value == "42"

    def test_link_depth_is_i18n_error(self) -> None:
        assert issubclass(LinkDepthExceededError, I18nError)


class TestWarningPolicy:
    """Test per-category suppression."""

    def test_default_emits_everything(self) -> None:
        policy = WarningPolicy()

        assert not any(policy.is_silenced(kind, "k") for kind in WarningKind)

    def test_silent_suppresses_everything(self) -> None:
        policy = WarningPolicy.silent()

        assert all(policy.is_silenced(kind, "k") for kind in WarningKind)

    def test_pattern_matches_key(self) -> None:
        policy = WarningPolicy(missing=re.compile(r"^debug\."))

        assert policy.is_silenced(WarningKind.MISSING, "debug.banner")
        assert not policy.is_silenced(WarningKind.MISSING, "nav.home")
        assert not policy.is_silenced(WarningKind.FALLBACK, "debug.banner")

    def test_pattern_without_key(self) -> None:
        policy = WarningPolicy(link=re.compile("."))

        assert not policy.is_silenced(WarningKind.LINK, None)

    def test_with_silence_returns_copy(self) -> None:
        policy = WarningPolicy()

        updated = policy.with_silence(WarningKind.FALLBACK, True)

        assert updated.fallback is True
        assert policy.fallback is False

    def test_invalid_setting_raises(self) -> None:
        policy = WarningPolicy(format="yes")  # type: ignore[arg-type]

        with pytest.raises(TypeError):
            policy.is_silenced(WarningKind.FORMAT, "k")


class TestWarningReporter:
    """Test policy-driven reporting."""

    def test_emits_to_handler_and_log(
        self, recorder: WarningRecorder, caplog: pytest.LogCaptureFixture
    ) -> None:
        reporter = WarningReporter(WarningPolicy, lambda: recorder)
        diagnostic = ErrorTemplate.message_not_found("k", ("en",))

        with caplog.at_level(logging.WARNING, logger="i18ncore.diagnostics.policy"):
            emitted = reporter.warn(WarningKind.MISSING, diagnostic)

        assert emitted
        assert recorder.records == [(WarningKind.MISSING, diagnostic)]
        assert "[missing] Cannot translate the value of keypath 'k'" in caplog.text

    def test_silenced_warning_dropped(
        self, recorder: WarningRecorder, caplog: pytest.LogCaptureFixture
    ) -> None:
        reporter = WarningReporter(WarningPolicy.silent, lambda: recorder)

        with caplog.at_level(logging.WARNING):
            emitted = reporter.warn(WarningKind.MISSING, ErrorTemplate.invalid_key(1))

        assert not emitted
        assert recorder.records == []
        assert caplog.records == []

    def test_reads_policy_on_every_call(self, recorder: WarningRecorder) -> None:
        """Policy changes take effect on the next warning."""
        state = {"policy": WarningPolicy()}
        reporter = WarningReporter(lambda: state["policy"], lambda: recorder)
        diagnostic = ErrorTemplate.message_not_found("k", ("en",))

        reporter.warn(WarningKind.MISSING, diagnostic)
        state["policy"] = WarningPolicy.silent()
        reporter.warn(WarningKind.MISSING, diagnostic)

        assert len(recorder.records) == 1

    def test_without_handler(self, caplog: pytest.LogCaptureFixture) -> None:
        reporter = WarningReporter(WarningPolicy, lambda: None)

        with caplog.at_level(logging.WARNING):
            assert reporter.warn(WarningKind.LINK, ErrorTemplate.link_not_found("@:x", "x", "k"))

        assert "[link]" in caplog.text

    def test_custom_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        reporter = WarningReporter(WarningPolicy, lambda: None, log=logging.getLogger("app.i18n"))

        with caplog.at_level(logging.WARNING, logger="app.i18n"):
            reporter.warn(WarningKind.FORMAT, ErrorTemplate.format_option_unknown("x", "number"))

        assert [record.name for record in caplog.records] == ["app.i18n"]


class TestDeferredDelivery:
    """Test WarningReporter.deferred buffering."""

    def test_handler_called_after_block(
        self, recorder: WarningRecorder, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Logging is immediate, handler delivery waits for the block to exit."""
        reporter = WarningReporter(WarningPolicy, lambda: recorder)
        first = ErrorTemplate.message_not_found("a", ("en",))
        second = ErrorTemplate.named_value_missing("name", "b")

        with caplog.at_level(logging.WARNING), reporter.deferred():
            reporter.warn(WarningKind.MISSING, first)
            reporter.warn(WarningKind.INTERPOLATION, second)
            assert recorder.records == []
            assert len(caplog.records) == 2

        assert recorder.records == [
            (WarningKind.MISSING, first),
            (WarningKind.INTERPOLATION, second),
        ]

    def test_nested_blocks_flush_once_at_outermost(self, recorder: WarningRecorder) -> None:
        reporter = WarningReporter(WarningPolicy, lambda: recorder)
        diagnostic = ErrorTemplate.message_not_found("a", ("en",))

        with reporter.deferred():
            with reporter.deferred():
                reporter.warn(WarningKind.MISSING, diagnostic)
            assert recorder.records == []

        assert recorder.records == [(WarningKind.MISSING, diagnostic)]

    def test_buffer_dropped_on_error(self, recorder: WarningRecorder) -> None:
        reporter = WarningReporter(WarningPolicy, lambda: recorder)

        with pytest.raises(RuntimeError), reporter.deferred():
            reporter.warn(WarningKind.MISSING, ErrorTemplate.message_not_found("a", ("en",)))
            msg = "boom"
            raise RuntimeError(msg)

        assert recorder.records == []
        reporter.warn(WarningKind.MISSING, ErrorTemplate.message_not_found("b", ("en",)))
        assert len(recorder.records) == 1

    def test_silenced_warnings_not_buffered(self, recorder: WarningRecorder) -> None:
        reporter = WarningReporter(WarningPolicy.silent, lambda: recorder)

        with reporter.deferred():
            assert not reporter.warn(
                WarningKind.MISSING, ErrorTemplate.message_not_found("a", ("en",))
            )

        assert recorder.records == []

    def test_other_threads_not_deferred(self, recorder: WarningRecorder) -> None:
        """Deferral is per thread."""
        reporter = WarningReporter(WarningPolicy, lambda: recorder)
        diagnostic = ErrorTemplate.message_not_found("a", ("en",))

        with reporter.deferred():
            worker = threading.Thread(
                target=reporter.warn, args=(WarningKind.MISSING, diagnostic)
            )
            worker.start()
            worker.join(timeout=10)
            assert recorder.records == [(WarningKind.MISSING, diagnostic)]
