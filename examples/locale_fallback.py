"""Localizer Example - Multi-Locale Fallback Chains.

Demonstrates real-world usage of Localizer for handling incomplete
translations and locale fallback chains.

Scenarios covered:
1. E-commerce site with partial Latvian translations
2. Warning callbacks for translation gaps
3. Shared root Localizer for common strings
4. Lazy loading through the missing handler

Python 3.13+.
"""

from __future__ import annotations

from i18ncore import Diagnostic, Localizer, LocalizerConfig, WarningKind, WarningPolicy


def example_1_basic_fallback() -> None:
    """Example 1: Basic two-locale fallback (Latvian -> English)."""
    print("=" * 60)
    print("Example 1: Basic Fallback (lv -> en)")
    print("=" * 60)

    l10n = Localizer(
        LocalizerConfig(locale="lv", fallback_locales=("en",), warnings=WarningPolicy.silent()),
        messages={
            "lv": {
                "welcome": "Sveiki, {name}!",
                "cart": "Grozs",
            },
            "en": {
                "welcome": "Hello, {name}!",
                "cart": "Cart",
                "payment": {"success": "Payment successful!", "error": "Payment failed: {reason}"},
            },
        },
    )

    print("\nMessages in Latvian:")
    print(f"  welcome: {l10n.t('welcome', {'name': 'Anna'})}")
    print(f"  cart: {l10n.t('cart')}")

    print("\nMessages falling back to English:")
    print(f"  payment.success: {l10n.t('payment.success')}")
    print(f"  payment.error: {l10n.t('payment.error', {'reason': 'card declined'})}")

    print("\nExistence checks only consult the active locale:")
    print(f"  te('payment.success'): {l10n.te('payment.success')}")
    print(f"  te('payment.success', 'en'): {l10n.te('payment.success', 'en')}")


def example_2_warning_callback() -> None:
    """Example 2: Collect translation gaps through on_warning."""
    print("\n" + "=" * 60)
    print("Example 2: Warning Callback")
    print("=" * 60)

    gaps: list[tuple[WarningKind, Diagnostic]] = []

    def collect(kind: WarningKind, diagnostic: Diagnostic) -> None:
        gaps.append((kind, diagnostic))

    l10n = Localizer(
        LocalizerConfig(locale="et", fallback_locales=("en",), on_warning=collect),
        messages={"et": {"hello": "Tere"}, "en": {"hello": "Hello", "bye": "Goodbye"}},
    )

    for key in ("hello", "bye", "unknown"):
        print(f"  {key}: {l10n.t(key)}")

    print("\nCollected warnings:")
    for kind, diagnostic in gaps:
        print(f"  [{kind}] {diagnostic.code.name}: {diagnostic.key}")


def example_3_root_localizer() -> None:
    """Example 3: Component Localizers share a root for common strings."""
    print("\n" + "=" * 60)
    print("Example 3: Root Localizer")
    print("=" * 60)

    root = Localizer(
        LocalizerConfig(locale="lt", warnings=WarningPolicy.silent()),
        messages={"lt": {"common": {"ok": "Gerai", "cancel": "Atšaukti"}}},
    )
    dialog = Localizer(
        LocalizerConfig(locale="lt", warnings=WarningPolicy.silent()),
        messages={"lt": {"title": "Ištrinti failą?", "confirm": "@:common.ok"}},
        root=root,
    )

    print(f"  title: {dialog.t('title')}")
    print(f"  confirm: {dialog.t('confirm')}")
    print(f"  common.cancel: {dialog.t('common.cancel')}")


def example_4_lazy_loading() -> None:
    """Example 4: Load messages on demand from the missing handler."""
    print("\n" + "=" * 60)
    print("Example 4: Lazy Loading")
    print("=" * 60)

    catalog = {"de": {"greeting": "Guten Tag"}, "fr": {"greeting": "Bonjour"}}
    l10n = Localizer(LocalizerConfig(locale="de", thread_safe=True))

    def load(locale: str, path: str) -> str | None:
        tree = catalog.get(locale)
        if tree is None:
            return None
        print(f"  [LOADER] Loading messages for {locale}")
        l10n.merge_messages(locale, tree)
        return l10n.t(path, locale)

    l10n.set_missing_handler(load)

    print(f"  de: {l10n.t('greeting')}")
    print(f"  de again: {l10n.t('greeting')}")
    print(f"  fr: {l10n.t('greeting', 'fr')}")


if __name__ == "__main__":
    example_1_basic_fallback()
    example_2_warning_callback()
    example_3_root_localizer()
    example_4_lazy_loading()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples completed successfully!")
    print("=" * 60)
