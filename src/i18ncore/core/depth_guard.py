"""Depth limiting for linked-message recursion.

A message may embed another through ``@:path``; the embedded message may
itself link further. DepthGuard bounds that recursion so a cycle degrades to
literal text instead of a RecursionError.

Thread-safe: uses explicit state, no thread-local storage. Each translate
call creates its own guard.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from i18ncore.constants import MAX_LINK_DEPTH, RECURSION_RESERVE_FRAMES
from i18ncore.diagnostics import ErrorTemplate, LinkDepthExceededError

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting link depth.

    Usage:
        guard = DepthGuard(max_depth=5)
        with guard:
            text = resolve_link(target, guard)

    Mutability Note:
        Intentionally mutable to track depth across __enter__/__exit__.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_LINK_DEPTH)
        current_depth: Current recursion depth
        reference: Link text reported when the limit is hit
    """

    max_depth: int = MAX_LINK_DEPTH
    current_depth: int = field(default=0, init=False)
    reference: str = field(default="", init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates BEFORE incrementing: __exit__ is not called when __enter__
        raises, so incrementing first would leave the depth permanently
        elevated for the rest of the call.
        """
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    def enter(self, reference: str) -> DepthGuard:
        """Record the link being followed and return self for ``with``."""
        self.reference = reference
        return self

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth

    def is_exceeded(self) -> bool:
        """Check if depth limit has been reached."""
        return self.current_depth >= self.max_depth

    def check(self) -> None:
        """Explicitly check depth and raise if exceeded.

        Raises:
            LinkDepthExceededError: If depth limit reached
        """
        if self.current_depth >= self.max_depth:
            raise LinkDepthExceededError(
                ErrorTemplate.link_depth_exceeded(self.reference, self.max_depth)
            )


def depth_clamp(requested_depth: int, reserve_frames: int = RECURSION_RESERVE_FRAMES) -> int:
    """Clamp requested depth against Python recursion limit.

    Each link level costs several stack frames (orchestrator, interpolator,
    modifier), so the usable depth is a fraction of the interpreter limit.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead

    Returns:
        Safe depth value, clamped if necessary

    Raises:
        ValueError: If requested_depth is negative
    """
    if requested_depth < 0:
        msg = f"Link depth must be non-negative, got {requested_depth}"
        raise ValueError(msg)
    max_safe_depth = max((sys.getrecursionlimit() - reserve_frames) // 10, 1)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested link depth %d exceeds safe limit for recursion limit %d. "
            "Clamping to %d.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
