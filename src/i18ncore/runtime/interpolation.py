"""Template interpolation and linked-message expansion.

Template syntax:

    {0}, {1}            list placeholder, replaced from positional values
    {name}              named placeholder, replaced from a mapping
    {'text'}            literal, emitted as ``text`` (escapes { } @)
    @:path              linked message
    @:(path)            linked message with a path that may contain ':'
    @.modifier:path     linked message passed through a modifier

A template is scanned once, left to right. Linked text is produced by the
caller-supplied LinkResolver (the Localizer resolves it through the same
locale chain with the same values) and inserted as is; it is not scanned
again.

Nothing here raises for bad data. Unmatched placeholders stay in the output
literally, unresolvable links emit their raw reference text, and each such
gap produces an advisory warning.

Thread Safety:
    Interpolator holds no per-call state. Link depth is tracked by the
    DepthGuard passed through each call.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType

from i18ncore.constants import MAX_LINK_DEPTH
from i18ncore.core.depth_guard import DepthGuard
from i18ncore.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    LinkDepthExceededError,
    WarningReporter,
)
from i18ncore.enums import WarningKind

__all__ = [
    "BUILTIN_MODIFIERS",
    "Interpolator",
    "LinkModifier",
    "LinkResolver",
    "MessageContext",
    "Values",
    "format_value",
]

logger = logging.getLogger(__name__)

type Values = Sequence[object] | Mapping[str, object] | None
"""List values, named values, or nothing."""

type LinkModifier = Callable[[str], str]
"""Transforms linked text, e.g. str.upper."""

type LinkResolver = Callable[[str, DepthGuard], str | None]
"""(linked path, guard) -> fully rendered linked text, or None if missing."""

_TOKEN_PATTERN = re.compile(
    r"\{\s*'(?P<literal>[^']*)'\s*\}"
    r"|\{\s*(?P<index>\d+)\s*\}"
    r"|\{\s*(?P<name>[^\W\d][\w.\-]*)\s*\}"
    r"|@(?:\.(?P<modifier>[A-Za-z]+))?:"
    r"(?:\((?P<bracketed>[\w\-:|./]+)\)|(?P<path>[\w\-|./]+))"
)


def _capitalize(text: str) -> str:
    # str.capitalize() would lowercase the rest
    return text[:1].upper() + text[1:]


BUILTIN_MODIFIERS: Mapping[str, LinkModifier] = MappingProxyType({
    "upper": str.upper,
    "lower": str.lower,
    "capitalize": _capitalize,
})


def format_value(value: object) -> str:
    """Render an interpolation value as text.

    Examples:
        >>> format_value("Ada"), format_value(3), format_value(True), format_value(None)
        ('Ada', '3', 'true', '')
    """
    match value:
        case str():
            return value
        case bool():
            # Check bool BEFORE int (bool is a subclass of int)
            return "true" if value else "false"
        case None:
            return ""
        case _:
            return str(value)


@dataclass(frozen=True, slots=True)
class MessageContext:
    """Everything a compiled message may use to build its text.

    Compiled messages are plain callables stored in a message tree in place
    of a template string. They receive one MessageContext and return the
    final text.

    Attributes:
        locale: Locale the message was found in
        path: Message path being translated
        list_values: Positional values (empty when none were given)
        named_values: Named values (empty when none were given)
        plural: Plural count, or None
        link: Resolves another message path with the same locale chain and
            values, e.g. ``ctx.link("brand.name")``

    Example:
        >>> def greeting(ctx: MessageContext) -> str:
        ...     return f"Hello {ctx.named('name')}, welcome to {ctx.link('brand')}"
    """

    locale: str
    path: str
    list_values: tuple[object, ...] = ()
    named_values: Mapping[str, object] = field(
        default_factory=lambda: MappingProxyType({})
    )
    plural: int | float | Decimal | None = None
    link: Callable[[str], str] = str

    def positional(self, index: int) -> object:
        """Positional value at ``index``, or None."""
        if 0 <= index < len(self.list_values):
            return self.list_values[index]
        return None

    def named(self, name: str) -> object:
        """Named value ``name``, or None."""
        return self.named_values.get(name)


class Interpolator:
    """Renders templates against list or named values.

    Args:
        modifiers: Custom link modifiers; they extend (and may override) the
            built-in upper, lower and capitalize
        reporter: Destination for advisory warnings; logs directly when None
        max_link_depth: Bound on nested linked messages

    Example:
        >>> interpolator = Interpolator()
        >>> interpolator.interpolate("Hello {name}", {"name": "Ada"}, locale="en", path="hi")
        'Hello Ada'
        >>> interpolator.interpolate("{0} + {1}", [1, 2], locale="en", path="sum")
        '1 + 2'
    """

    __slots__ = ("_max_link_depth", "_modifiers", "_reporter")

    def __init__(
        self,
        *,
        modifiers: Mapping[str, LinkModifier] | None = None,
        reporter: WarningReporter | None = None,
        max_link_depth: int = MAX_LINK_DEPTH,
    ) -> None:
        self._modifiers: dict[str, LinkModifier] = {**BUILTIN_MODIFIERS, **(modifiers or {})}
        self._reporter = reporter
        self._max_link_depth = max_link_depth

    @property
    def modifiers(self) -> dict[str, LinkModifier]:
        """Copy of the active link modifiers keyed by name."""
        return dict(self._modifiers)

    @property
    def max_link_depth(self) -> int:
        """Configured bound on nested linked messages."""
        return self._max_link_depth

    def new_guard(self) -> DepthGuard:
        """Fresh depth guard for one top-level translation."""
        return DepthGuard(max_depth=self._max_link_depth)

    @staticmethod
    def has_markup(template: str) -> bool:
        """Quick check whether a template needs interpolation at all."""
        return "{" in template or "@" in template

    def interpolate(
        self,
        template: str,
        values: Values = None,
        *,
        locale: str,
        path: str,
        resolve_link: LinkResolver | None = None,
        depth: DepthGuard | None = None,
    ) -> str:
        """Render ``template``.

        Args:
            template: Template text
            values: List values (sequence) or named values (mapping)
            locale: Locale the template belongs to (for diagnostics)
            path: Message path of the template (for diagnostics)
            resolve_link: Renders linked messages; links are left untouched
                when None
            depth: Link depth guard shared across one translation; a fresh
                guard is used when None

        Returns:
            Rendered text; never raises for missing values or links
        """
        if not self.has_markup(template):
            return template
        if depth is None:
            depth = self.new_guard()

        def replace(match: re.Match[str]) -> str:
            return self._render_token(match, values, path, resolve_link, depth)

        rendered = _TOKEN_PATTERN.sub(replace, template)
        logger.debug("Interpolated '%s' for locale: %s", path, locale)
        return rendered

    def _render_token(
        self,
        match: re.Match[str],
        values: Values,
        path: str,
        resolve_link: LinkResolver | None,
        depth: DepthGuard,
    ) -> str:
        if (literal := match.group("literal")) is not None:
            return literal
        if (index := match.group("index")) is not None:
            return self._render_list(match.group(0), int(index), values, path)
        if (name := match.group("name")) is not None:
            return self._render_named(match.group(0), name, values, path)
        if resolve_link is None:
            return match.group(0)

        target = match.group("bracketed")
        suffix = ""
        if target is None:
            # "See @:terms." ends a sentence; the period is not part of the path
            target = match.group("path").rstrip(".")
            suffix = match.group("path")[len(target):]
            if not target:
                return match.group(0)
        reference = match.group(0)[: len(match.group(0)) - len(suffix)]
        return self.render_link(
            reference, target, match.group("modifier"), path=path,
            resolve_link=resolve_link, depth=depth,
        ) + suffix

    def _render_list(self, raw: str, index: int, values: Values, path: str) -> str:
        if isinstance(values, Sequence) and not isinstance(values, str) and index < len(values):
            return format_value(values[index])
        self._warn(WarningKind.INTERPOLATION, ErrorTemplate.list_value_missing(index, path))
        return raw

    def _render_named(self, raw: str, name: str, values: Values, path: str) -> str:
        if isinstance(values, Mapping) and name in values:
            return format_value(values[name])
        self._warn(WarningKind.INTERPOLATION, ErrorTemplate.named_value_missing(name, path))
        return raw

    def render_link(
        self,
        reference: str,
        target: str,
        modifier: str | None = None,
        *,
        path: str,
        resolve_link: LinkResolver,
        depth: DepthGuard,
    ) -> str:
        """Expand one linked message.

        Args:
            reference: Raw link text, emitted when the link cannot be expanded
            target: Path of the linked message
            modifier: Modifier name applied to the linked text, or None
            path: Message path containing the link (for diagnostics)
            resolve_link: Renders the linked message
            depth: Link depth guard shared across one translation
        """
        try:
            with depth.enter(reference):
                linked = resolve_link(target, depth)
        except LinkDepthExceededError as e:
            if e.diagnostic is not None:
                self._warn(WarningKind.LINK, e.diagnostic)
            return reference

        if linked is None:
            self._warn(WarningKind.MISSING, ErrorTemplate.link_not_found(reference, target, path))
            return reference
        if modifier is None:
            return linked

        transform = self._modifiers.get(modifier)
        if transform is None:
            self._warn(WarningKind.LINK, ErrorTemplate.link_modifier_unknown(modifier, path))
            return linked
        return transform(linked)

    def _warn(self, kind: WarningKind, diagnostic: Diagnostic) -> None:
        if self._reporter is not None:
            self._reporter.warn(kind, diagnostic)
        else:
            logger.warning("[%s] %s", kind, diagnostic.message)
