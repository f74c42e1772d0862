"""Tests for core/depth_guard.py."""

from __future__ import annotations

import sys

import pytest

from i18ncore.core.depth_guard import DepthGuard, depth_clamp
from i18ncore.diagnostics import DiagnosticCode, LinkDepthExceededError


class TestDepthGuard:
    """Test DepthGuard enter/exit accounting."""

    def test_tracks_depth(self) -> None:
        guard = DepthGuard(max_depth=3)

        with guard:
            assert guard.depth == 1
            with guard:
                assert guard.depth == 2
        assert guard.depth == 0

    def test_raises_at_limit(self) -> None:
        guard = DepthGuard(max_depth=2)

        with (
            guard,
            guard,
            pytest.raises(LinkDepthExceededError) as exc_info,
            guard.enter("@:loop"),
        ):
            pass

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.LINK_DEPTH_EXCEEDED
        assert exc_info.value.diagnostic.key == "@:loop"

    def test_failed_enter_leaves_depth_unchanged(self) -> None:
        guard = DepthGuard(max_depth=1)

        with guard:
            with pytest.raises(LinkDepthExceededError):
                guard.__enter__()
            assert guard.depth == 1
        assert guard.depth == 0

    def test_exit_on_exception(self) -> None:
        guard = DepthGuard(max_depth=3)

        with pytest.raises(RuntimeError), guard:
            raise RuntimeError

        assert guard.depth == 0

    def test_is_exceeded(self) -> None:
        guard = DepthGuard(max_depth=1)

        assert not guard.is_exceeded()
        with guard:
            assert guard.is_exceeded()

    def test_zero_depth_rejects_first_entry(self) -> None:
        with pytest.raises(LinkDepthExceededError), DepthGuard(max_depth=0):
            pass


class TestDepthClamp:
    """Test depth_clamp."""

    def test_small_depth_unchanged(self) -> None:
        assert depth_clamp(5) == 5

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            depth_clamp(-1)

    def test_huge_depth_clamped(self, caplog: pytest.LogCaptureFixture) -> None:
        clamped = depth_clamp(sys.getrecursionlimit() * 10)

        assert clamped < sys.getrecursionlimit()
        assert "Clamping" in caplog.text

    def test_guard_clamps_on_creation(self) -> None:
        assert DepthGuard(max_depth=10**9).max_depth == depth_clamp(10**9)
