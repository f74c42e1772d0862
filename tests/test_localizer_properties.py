"""Tests for Localizer state, root delegation and system-level properties.

Python 3.13+.
"""

from __future__ import annotations

import gc
import re
import threading
from typing import TYPE_CHECKING

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from i18ncore import (
    InvalidArgumentError,
    Localizer,
    LocalizerConfig,
    WarningKind,
    WarningPolicy,
    cldr_plural_rule,
)
from i18ncore.diagnostics import DiagnosticCode

if TYPE_CHECKING:
    from conftest import WarningRecorder


def _localizer(recorder: WarningRecorder, **options: object) -> Localizer:
    config = LocalizerConfig(on_warning=recorder, **options)  # type: ignore[arg-type]
    return Localizer(
        config,
        messages={
            "en-US": {"hi": "Hi", "nav": {"home": "Home"}},
            "fr-FR": {"hi": "Salut"},
        },
    )


class TestLocaleState:
    """Test locale and fallback configuration at runtime."""

    def test_locale_setter(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.locale = "fr-FR"

        assert i18n.locale == "fr-FR"
        assert i18n.t("hi") == "Salut"

    @pytest.mark.parametrize("value", ["", None, 3])
    def test_invalid_locale_rejected(self, recorder: WarningRecorder, value: object) -> None:
        i18n = _localizer(recorder)

        with pytest.raises(InvalidArgumentError):
            i18n.locale = value  # type: ignore[assignment]
        assert i18n.locale == "en-US"

    def test_fallback_locales_accepts_string(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder, locale="de")

        i18n.fallback_locales = "fr-FR"

        assert i18n.fallback_locales == ("fr-FR",)
        assert i18n.t("hi") == "Salut"

    def test_fallback_locales_accepts_iterable(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.fallback_locales = ["de", "", "fr-FR"]

        assert i18n.fallback_locales == ("de", "fr-FR")

    def test_fallback_locales_none_clears(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder, fallback_locales=("fr-FR",))

        i18n.fallback_locales = None

        assert i18n.fallback_locales == ()

    @pytest.mark.parametrize("value", [3, ["de", 3], b"en"])
    def test_invalid_fallback_locales_rejected(
        self, recorder: WarningRecorder, value: object
    ) -> None:
        i18n = _localizer(recorder, fallback_locales=("fr-FR",))

        with pytest.raises(InvalidArgumentError):
            i18n.fallback_locales = value  # type: ignore[assignment]
        assert i18n.fallback_locales == ("fr-FR",)

    def test_available_locales(self, recorder: WarningRecorder) -> None:
        assert _localizer(recorder).available_locales == ("en-US", "fr-FR")

    def test_config_is_unchanged_by_setters(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.locale = "fr-FR"
        i18n.fallback_format = True

        assert i18n.config.locale == "en-US"
        assert i18n.config.fallback_format is False

    def test_repr(self, recorder: WarningRecorder) -> None:
        assert repr(_localizer(recorder)) == (
            "Localizer(locale='en-US', fallback_locales=(), "
            "available_locales=('en-US', 'fr-FR'))"
        )

    def test_creation_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="i18ncore.localization.orchestrator"):
            Localizer(LocalizerConfig(locale="lv"))

        assert "Localizer created: locale=lv" in caplog.text


class TestMessageState:
    """Test get/set/merge of messages."""

    def test_messages_property_is_copy(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.messages["en-US"]["hi"] = "changed"

        assert i18n.t("hi") == "Hi"

    def test_set_messages_replaces(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.set_messages("en-US", {"bye": "Bye"})

        assert i18n.get_messages("en-US") == {"bye": "Bye"}
        assert i18n.t("hi") == "hi"

    def test_merge_messages_deep(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.merge_messages("en-US", {"nav": {"about": "About"}})

        assert i18n.t("nav.home") == "Home"
        assert i18n.t("nav.about") == "About"

    def test_merge_new_locale(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.merge_messages("de", {"hi": "Hallo"})

        assert i18n.t("hi", "de") == "Hallo"
        assert "de" in i18n.available_locales

    def test_get_messages_absent_locale(self, recorder: WarningRecorder) -> None:
        assert _localizer(recorder).get_messages("ja") == {}

    @given(
        st.dictionaries(
            st.sampled_from(["a", "b", "c"]),
            st.one_of(
                st.text(max_size=4),
                st.dictionaries(st.sampled_from(["x", "y"]), st.text(max_size=4), max_size=2),
            ),
            max_size=3,
        )
    )
    @settings(deadline=None)
    def test_merge_twice_equals_once(self, overlay: dict[str, object]) -> None:
        """Merging the same tree again changes nothing."""
        once = Localizer(messages={"en-US": {"a": {"x": "1"}, "z": "2"}})
        twice = Localizer(messages={"en-US": {"a": {"x": "1"}, "z": "2"}})

        once.merge_messages("en-US", overlay)
        twice.merge_messages("en-US", overlay)
        twice.merge_messages("en-US", overlay)

        assert once.messages == twice.messages


class TestFormatState:
    """Test get/set/merge of format tables."""

    def test_number_format_round_trip(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.set_number_format("en-US", {"pct": {"style": "percent"}})
        i18n.merge_number_format("en-US", {"pct": {"maximum_fraction_digits": 1}})

        assert i18n.get_number_format("en-US") == {
            "pct": {"style": "percent", "maximum_fraction_digits": 1}
        }
        assert i18n.number_formats == {
            "en-US": {"pct": {"style": "percent", "maximum_fraction_digits": 1}}
        }

    def test_datetime_format_round_trip(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.set_datetime_format("en-US", {"iso": {"pattern": "yyyy-MM-dd"}})
        i18n.merge_datetime_format("en-US", {"year": {"pattern": "yyyy"}})

        assert set(i18n.get_datetime_format("en-US")) == {"iso", "year"}
        assert i18n.datetime_formats["en-US"]["year"] == {"pattern": "yyyy"}

    def test_replaced_format_takes_effect(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)
        i18n.set_number_format("en-US", {"money": {"style": "currency", "currency": "USD"}})
        assert i18n.n(1, "money") == "$1.00"

        i18n.set_number_format("en-US", {"money": {"style": "currency", "currency": "EUR"}})

        assert i18n.n(1, "money") == "€1.00"


class TestHooksAndWarnings:
    """Test runtime-replaceable hooks and warning suppression."""

    def test_missing_property(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.missing = lambda locale, path: "?"

        assert i18n.t("nope") == "?"
        i18n.missing = None
        assert i18n.missing is None
        assert i18n.t("nope") == "nope"

    def test_post_translation_property(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.post_translation = str.lower

        assert i18n.t("hi") == "hi"
        i18n.set_post_translation_handler(None)
        assert i18n.t("hi") == "Hi"

    def test_silent_translation_warn(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.silent_translation_warn = True
        i18n.t("nope")

        assert recorder.records == []
        assert i18n.warnings.missing is True

    def test_silent_translation_warn_pattern(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)
        i18n.silent_translation_warn = re.compile(r"^debug\.")

        i18n.t("debug.banner")
        i18n.t("real.key")

        assert [d.key for d in recorder.of(WarningKind.MISSING)] == ["real.key"]

    def test_silent_fallback_warn(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder, locale="de", fallback_locales=("en-US",))
        i18n.silent_fallback_warn = True

        assert i18n.t("hi") == "Hi"
        assert recorder.records == []
        assert i18n.silent_fallback_warn is True

    def test_warning_policy_replaced(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.warnings = WarningPolicy.silent()
        i18n.t("nope")
        i18n.t("nope", {"x": 1})

        assert recorder.records == []

    def test_on_warning_replaced(self, recorder: WarningRecorder) -> None:
        i18n = Localizer(messages={"en-US": {}})

        i18n.on_warning = recorder
        i18n.t("nope")

        assert recorder.kinds() == [WarningKind.MISSING]
        assert i18n.on_warning is recorder

    def test_fallback_format_setter(self, recorder: WarningRecorder) -> None:
        i18n = _localizer(recorder)

        i18n.fallback_format = True

        assert i18n.t("{0}!", ["Hey"]) == "Hey!"

    def test_exactly_one_fallback_warning(self, recorder: WarningRecorder) -> None:
        i18n = Localizer(
            LocalizerConfig(locale="fr", fallback_locales=("en",), on_warning=recorder),
            messages={"en": {"a": "@:b @:c", "b": "B", "c": "C"}},
        )

        assert i18n.t("a") == "B C"
        assert recorder.kinds() == [WarningKind.FALLBACK]


class TestPluralConfiguration:
    """Test plural rules supplied through configuration."""

    def test_cldr_rule_from_config(self, recorder: WarningRecorder) -> None:
        i18n = Localizer(
            LocalizerConfig(
                locale="pl",
                plural_rules={"pl": cldr_plural_rule("pl", ["one", "few", "many", "other"])},
                on_warning=recorder,
            ),
            messages={"pl": {"apple": "{count} jabłko | {count} jabłka | {count} jabłek"}},
        )

        assert [i18n.tc("apple", count) for count in (1, 3, 5)] == [
            "1 jabłko",
            "3 jabłka",
            "5 jabłek",
        ]


class TestRootLocalizer:
    """Test delegation to a root Localizer."""

    def test_root_supplies_missing_key(self, recorder: WarningRecorder) -> None:
        root = Localizer(LocalizerConfig(locale="de"), messages={"de": {"x": "Hallo"}})
        child = Localizer(LocalizerConfig(on_warning=recorder), root=root)

        assert child.t("x") == "Hallo"
        [diagnostic] = recorder.of(WarningKind.FALLBACK)
        assert diagnostic.code is DiagnosticCode.MESSAGE_ROOT_FALLBACK

    def test_root_uses_its_own_fallbacks(self, recorder: WarningRecorder) -> None:
        root = Localizer(
            LocalizerConfig(locale="de", fallback_locales=("en",)),
            messages={"en": {"x": "Hello"}},
        )
        child = Localizer(LocalizerConfig(on_warning=recorder), root=root)

        assert child.t("x") == "Hello"

    def test_fallback_root_disabled(self, recorder: WarningRecorder) -> None:
        root = Localizer(messages={"en-US": {"x": "root"}})
        child = Localizer(LocalizerConfig(fallback_root=False, on_warning=recorder), root=root)

        assert child.t("x") == "x"
        child.fallback_root = True
        assert child.t("x") == "root"

    def test_local_message_preferred(self, recorder: WarningRecorder) -> None:
        root = Localizer(messages={"en-US": {"x": "root"}})
        child = Localizer(
            LocalizerConfig(on_warning=recorder), messages={"en-US": {"x": "child"}}, root=root
        )

        assert child.t("x") == "child"
        assert recorder.records == []

    def test_root_missing_handler_not_called(self, recorder: WarningRecorder) -> None:
        calls: list[str] = []
        root = Localizer(
            LocalizerConfig(missing=lambda locale, path: calls.append(path) or "root-miss")
        )
        child = Localizer(LocalizerConfig(on_warning=recorder), root=root)

        assert child.t("nope") == "nope"
        assert calls == []

    def test_links_reach_root(self, recorder: WarningRecorder) -> None:
        root = Localizer(messages={"en-US": {"brand": "Acme"}})
        child = Localizer(
            LocalizerConfig(on_warning=recorder), messages={"en-US": {"w": "Hi @:brand"}}, root=root
        )

        assert child.t("w") == "Hi Acme"

    def test_root_held_weakly(self, recorder: WarningRecorder) -> None:
        root = Localizer(messages={"en-US": {"x": "root"}})
        child = Localizer(LocalizerConfig(on_warning=recorder), root=root)
        held = child.root is root

        del root
        gc.collect()

        assert held
        assert child.root is None
        assert child.t("x") == "x"


class TestThreadSafety:
    """Test the thread_safe configuration."""

    def test_concurrent_reads_and_writes(self) -> None:
        i18n = Localizer(
            LocalizerConfig(thread_safe=True, warnings=WarningPolicy.silent()),
            messages={"en-US": {"k0": "v0"}},
        )
        errors: list[BaseException] = []

        def reader() -> None:
            try:
                for _ in range(200):
                    assert i18n.t("k0") == "v0"
            except AssertionError as e:
                errors.append(e)

        def writer() -> None:
            for index in range(1, 50):
                i18n.merge_messages("en-US", {f"k{index}": f"v{index}"})

        threads = [threading.Thread(target=reader) for _ in range(4)]
        threads.append(threading.Thread(target=writer))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)

        assert errors == []
        assert len(i18n.get_messages("en-US")) == 50

    def test_compiled_message_cannot_mutate(self) -> None:
        """Mutation from inside a translation fails instead of deadlocking."""
        i18n = Localizer(LocalizerConfig(thread_safe=True))
        i18n.set_messages(
            "en-US", {"c": lambda ctx: i18n.set_messages("en-US", {}) or "x"}
        )

        with pytest.raises(RuntimeError, match="upgrade"):
            i18n.t("c")

    def test_warning_handler_may_mutate_while_rendering(self) -> None:
        """on_warning runs after the read lock is released."""
        seen: list[WarningKind] = []

        def handler(kind: WarningKind, diagnostic: object) -> None:
            seen.append(kind)
            i18n.merge_messages("en-US", {"patched": "yes"})

        i18n = Localizer(
            LocalizerConfig(thread_safe=True, on_warning=handler),
            messages={"en-US": {"greet": "Hello {name}", "link": "See @:nowhere"}},
        )

        assert i18n.t("greet") == "Hello {name}"
        assert i18n.t("link") == "See @:nowhere"
        assert seen == [WarningKind.INTERPOLATION, WarningKind.MISSING]
        assert i18n.t("patched") == "yes"

    def test_warning_handler_may_mutate_while_formatting(self) -> None:
        seen: list[WarningKind] = []

        def handler(kind: WarningKind, diagnostic: object) -> None:
            seen.append(kind)
            i18n.merge_number_format("en-US", {"plain": {"style": "decimal"}})

        i18n = Localizer(LocalizerConfig(thread_safe=True, on_warning=handler))

        assert i18n.n(5, "unknown") == "5"
        assert seen == [WarningKind.FORMAT]
        assert "plain" in i18n.get_number_format("en-US")

    def test_fallback_format_handler_may_mutate(self) -> None:
        """Warnings from interpolating a missing path are delivered unlocked too."""
        seen: list[WarningKind] = []

        def handler(kind: WarningKind, diagnostic: object) -> None:
            seen.append(kind)
            i18n.merge_messages("en-US", {"patched": "yes"})

        i18n = Localizer(
            LocalizerConfig(thread_safe=True, fallback_format=True, on_warning=handler)
        )

        assert i18n.t("Hi {name}") == "Hi {name}"
        assert seen == [WarningKind.MISSING, WarningKind.INTERPOLATION]
        assert i18n.te("patched")
