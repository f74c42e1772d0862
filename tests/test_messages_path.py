"""Tests for messages/path.py key path parsing and resolution.

Resolution must never raise: missing keys, malformed paths, out-of-range
indexes and stepping into leaves all yield NOT_FOUND.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from i18ncore.messages.path import NOT_FOUND, NotFound, parse_path, resolve_value

TREE = {
    "nav": {"home": "Home", "about": "About"},
    "items": [{"label": "First"}, {"label": "Second"}],
    "errors": {"not.found": "Not found", "it's": "quoted"},
    "empty": None,
    "plural": ["one", "many"],
}


class TestParsePath:
    """Test parse_path segmentation."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("a", ("a",)),
            ("a.b.c", ("a", "b", "c")),
            ("a[0]", ("a", "0")),
            ("a[0].b", ("a", "0", "b")),
            ("a[0][1]", ("a", "0", "1")),
            ('a["x.y"]', ("a", "x.y")),
            ("a['k']", ("a", "k")),
            ("a[ 'k' ]", ("a", "k")),
            ('a["say \\"hi\\""]', ("a", 'say "hi"')),
            ("['top']", ("top",)),
        ],
    )
    def test_valid_paths(self, path: str, expected: tuple[str, ...]) -> None:
        """Dots and brackets split into segments."""
        assert parse_path(path) == expected

    @pytest.mark.parametrize(
        "path",
        ["", ".", "a.", ".a", "a..b", "a[", "a[0", "a]", "a[]", "a['x", "a[0]b", "a['x'b]"],
    )
    def test_malformed_paths(self, path: str) -> None:
        """Empty segments and unbalanced brackets are rejected."""
        assert parse_path(path) is None

    def test_result_is_cached(self) -> None:
        """Repeated parses return the same tuple object."""
        assert parse_path("cache.me[1]") is parse_path("cache.me[1]")


class TestResolveValue:
    """Test resolve_value against a nested tree."""

    def test_nested_mapping(self) -> None:
        """Dotted path walks nested mappings."""
        assert resolve_value(TREE, "nav.home") == "Home"

    def test_list_index(self) -> None:
        """Bracket index selects a list element."""
        assert resolve_value(TREE, "items[1].label") == "Second"

    def test_dotted_index(self) -> None:
        """A numeric dotted segment also indexes a list."""
        assert resolve_value(TREE, "items.0.label") == "First"

    def test_quoted_key_with_dot(self) -> None:
        """Quoted bracket keys may contain dots."""
        assert resolve_value(TREE, 'errors["not.found"]') == "Not found"

    def test_quoted_key_with_other_quote(self) -> None:
        """Double-quoted keys may contain single quotes."""
        assert resolve_value(TREE, 'errors["it\'s"]') == "quoted"

    def test_returns_subtree(self) -> None:
        """A path to a node returns the node itself."""
        assert resolve_value(TREE, "nav") == {"home": "Home", "about": "About"}

    def test_returns_variants(self) -> None:
        """A path to a list returns the list."""
        assert resolve_value(TREE, "plural") == ["one", "many"]

    @pytest.mark.parametrize(
        "path",
        [
            "missing",
            "nav.missing",
            "nav.home.deeper",
            "items[5].label",
            "items[-1].label",
            "items.first",
            "empty",
            "a..b",
            "",
        ],
    )
    def test_not_found(self, path: str) -> None:
        """Every kind of miss resolves to NOT_FOUND."""
        assert resolve_value(TREE, path) is NOT_FOUND

    def test_unicode_digit_is_not_an_index(self) -> None:
        """Non-ASCII digits never index a list."""
        assert resolve_value(TREE, "items.١") is NOT_FOUND

    def test_non_mapping_root(self) -> None:
        """A leaf root cannot be walked."""
        assert resolve_value("leaf", "a") is NOT_FOUND


class TestNotFoundSentinel:
    """Test the NOT_FOUND sentinel."""

    def test_is_falsy(self) -> None:
        """NOT_FOUND is falsy so callers may use truthiness."""
        assert not NOT_FOUND

    def test_repr(self) -> None:
        """NOT_FOUND has a readable repr."""
        assert repr(NOT_FOUND) == "NOT_FOUND"

    def test_is_singleton(self) -> None:
        """NOT_FOUND is the sole member of NotFound."""
        assert list(NotFound) == [NOT_FOUND]


class TestResolutionProperties:
    """Property tests: resolution is total."""

    @given(st.text(max_size=40))
    def test_never_raises(self, path: str) -> None:
        """Arbitrary text resolves to a value or NOT_FOUND."""
        result = resolve_value(TREE, path)
        assert result is NOT_FOUND or result is not None

    @given(
        st.lists(
            st.text(alphabet="abcdefghij_", min_size=1, max_size=6), min_size=1, max_size=5
        )
    )
    def test_dotted_segments_round_trip(self, segments: list[str]) -> None:
        """Plain identifier segments joined by dots parse back unchanged."""
        assert parse_path(".".join(segments)) == tuple(segments)

    @pytest.mark.fuzz
    @given(st.text(alphabet="ab.[]'\"\\ 0", max_size=60))
    def test_bracket_soup_never_raises(self, path: str) -> None:
        """Dense bracket and quote combinations never raise."""
        segments = parse_path(path)
        assert segments is None or all(isinstance(s, str) for s in segments)
