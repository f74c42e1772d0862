"""Quickstart example for i18ncore.

This example demonstrates basic usage of i18ncore for localization.

Note: Advisory warnings (missing keys, fallbacks) are logged through the
standard logging module. Examples silence them for cleaner terminal output;
in production, route them to your logging setup or an on_warning callback.
"""

from datetime import UTC, datetime

from i18ncore import Localizer, LocalizerConfig, WarningPolicy

QUIET = WarningPolicy.silent()

# Example 1: Simple message
print("=" * 50)
print("Example 1: Simple Message")
print("=" * 50)

i18n = Localizer(
    LocalizerConfig(locale="en", warnings=QUIET),
    messages={
        "en": {
            "hello": "Hello, World!",
            "welcome": "Welcome to i18ncore!",
        },
    },
)

print(i18n.t("hello"))
# Output: Hello, World!

print(i18n.t("welcome"))
# Output: Welcome to i18ncore!

# Example 2: Named and list values
print("\n" + "=" * 50)
print("Example 2: Interpolation")
print("=" * 50)

i18n.merge_messages("en", {
    "greeting": "Hello, {name}!",
    "user": {"info": "{0} {1} (Age: {2})"},
})

print(i18n.t("greeting", {"name": "Alice"}))
# Output: Hello, Alice!

print(i18n.t("user.info", ["Bob", "Smith", 30]))
# Output: Bob Smith (Age: 30)

# Example 3: Plurals
print("\n" + "=" * 50)
print("Example 3: Plural Forms (English)")
print("=" * 50)

i18n.merge_messages("en", {
    "emails": "You have one email. | You have {count} emails.",
})

print(i18n.tc("emails", 1))
# Output: You have one email.

print(i18n.tc("emails", 5))
# Output: You have 5 emails.

# Example 4: Linked messages
print("\n" + "=" * 50)
print("Example 4: Linked Messages")
print("=" * 50)

i18n.merge_messages("en", {
    "brand": "acme",
    "tagline": "@.capitalize:brand makes everything. Ask @.upper:brand!",
})

print(i18n.t("tagline"))
# Output: Acme makes everything. Ask ACME!

# Example 5: Missing keys
print("\n" + "=" * 50)
print("Example 5: Missing Keys")
print("=" * 50)

print(i18n.t("nav.missing"))
# Output: nav.missing

i18n.set_missing_handler(lambda locale, path: f"[{locale}] {path}")
print(i18n.t("nav.missing"))
# Output: [en] nav.missing

# Example 6: Numbers and dates
print("\n" + "=" * 50)
print("Example 6: Numbers and Dates")
print("=" * 50)

formats = Localizer(
    LocalizerConfig(locale="en-US", warnings=QUIET),
    number_formats={"en-US": {"money": {"style": "currency", "currency": "USD"}}},
    datetime_formats={"en-US": {"short": {"date_style": "short"}}},
)

print(formats.n(1234.5, "money"))
# Output: $1,234.50

print(formats.n(0.256, {"style": "percent"}))
# Output: 26%

print(formats.d(datetime(2025, 10, 27, tzinfo=UTC), "short"))
# Output: 10/27/25

print(formats.n(1234.5, {"locale": "de-DE"}))
# Output: 1.234,5

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
