"""Advisory warning policy and reporting.

Recovered conditions (missing keys, fallbacks, unresolved placeholders,
link cycles, format gaps) never raise. They produce a Diagnostic that is
logged and optionally forwarded to a host callback, unless the category is
silenced by the WarningPolicy.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace

from i18ncore.enums import WarningKind

from .codes import Diagnostic

__all__ = ["Silence", "WarningHandler", "WarningPolicy", "WarningReporter"]

logger = logging.getLogger(__name__)

type Silence = bool | re.Pattern[str]
"""True silences a warning kind, a pattern silences keys it matches."""

type WarningHandler = Callable[[WarningKind, Diagnostic], None]
"""Host callback receiving every warning that passes the policy."""


@dataclass(frozen=True, slots=True)
class WarningPolicy:
    """Per-category suppression settings.

    Each field accepts False (emit), True (suppress all) or a compiled
    regular expression (suppress when ``pattern.search(key)`` matches).

    Example:
        >>> policy = WarningPolicy(missing=re.compile(r"^debug\\."))
        >>> policy.is_silenced(WarningKind.MISSING, "debug.banner")
        True
        >>> policy.is_silenced(WarningKind.MISSING, "nav.home")
        False
    """

    missing: Silence = False
    fallback: Silence = False
    interpolation: Silence = False
    link: Silence = False
    format: Silence = False

    def is_silenced(self, kind: WarningKind, key: str | None) -> bool:
        """Check whether a warning of ``kind`` about ``key`` is suppressed."""
        match getattr(self, kind.value):
            case bool() as flag:
                return flag
            case re.Pattern() as pattern:
                return key is not None and pattern.search(key) is not None
            case other:
                msg = f"Invalid silence setting for {kind}: {other!r}"
                raise TypeError(msg)

    def with_silence(self, kind: WarningKind, silence: Silence) -> WarningPolicy:
        """Return a copy with one category replaced."""
        return replace(self, **{kind.value: silence})

    @classmethod
    def silent(cls) -> WarningPolicy:
        """Policy that suppresses every category."""
        return cls(missing=True, fallback=True, interpolation=True, link=True, format=True)


class WarningReporter:
    """Emits advisory diagnostics according to a policy.

    The reporter reads its policy and handler through callables so that the
    owning Localizer can change configuration at any time and have the next
    warning see it.

    Inside a ``deferred()`` block, warnings are still filtered and logged at
    once but reach the host handler only when the outermost block on that
    thread exits. The Localizer defers while it holds its read lock, so an
    ``on_warning`` handler may mutate the Localizer.
    """

    __slots__ = ("_get_handler", "_get_policy", "_logger", "_pending", "_pending_lock")

    def __init__(
        self,
        get_policy: Callable[[], WarningPolicy],
        get_handler: Callable[[], WarningHandler | None],
        *,
        log: logging.Logger | None = None,
    ) -> None:
        self._get_policy = get_policy
        self._get_handler = get_handler
        self._logger = log if log is not None else logger
        self._pending: dict[int, list[tuple[WarningKind, Diagnostic]]] = {}
        self._pending_lock = threading.Lock()

    @contextmanager
    def deferred(self) -> Iterator[None]:
        """Hold handler delivery for warnings raised on this thread.

        Nested blocks share the outermost buffer. Buffered warnings are
        delivered in order on normal exit and dropped if the block raises.
        """
        thread_id = threading.get_ident()
        with self._pending_lock:
            nested = thread_id in self._pending
            if not nested:
                self._pending[thread_id] = []
        if nested:
            yield
            return

        try:
            yield
        finally:
            with self._pending_lock:
                queued = self._pending.pop(thread_id)
        handler = self._get_handler()
        if handler is not None:
            for kind, diagnostic in queued:
                handler(kind, diagnostic)

    def warn(self, kind: WarningKind, diagnostic: Diagnostic) -> bool:
        """Emit a warning unless silenced.

        Returns:
            True if the warning was emitted, False if the policy suppressed it
        """
        if self._get_policy().is_silenced(kind, diagnostic.key):
            return False
        self._logger.warning("[%s] %s", kind, diagnostic.message)
        with self._pending_lock:
            queue = self._pending.get(threading.get_ident())
        if queue is not None:
            queue.append((kind, diagnostic))
            return True
        handler = self._get_handler()
        if handler is not None:
            handler(kind, diagnostic)
        return True
