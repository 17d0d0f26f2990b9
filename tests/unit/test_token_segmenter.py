"""Unit tests for pattern-based segmentation."""

import re

import pytest

from formflow.interfaces.segmenter import MatchSegment, PlainSegment
from formflow.strategies.segmenters import TokenSegmenter, replace_with_component, segment


class TestSegment:
    """Test suite for the segment function."""

    # =========================================================================
    # Partition Tests
    # =========================================================================

    def test_plain_and_matches_alternate(self):
        """Test that plain text and matches alternate in order."""
        result = list(segment("Use Bfast to pay with Bfast.", "Bfast"))

        assert result == [
            PlainSegment("Use "),
            MatchSegment("Bfast", 0),
            PlainSegment(" to pay with "),
            MatchSegment("Bfast", 1),
            PlainSegment("."),
        ]

    def test_no_match_yields_single_plain(self):
        """Test that a pattern that never matches yields the whole source."""
        assert list(segment("hello", "xyz")) == [PlainSegment("hello")]

    def test_empty_source(self):
        """Test that an empty source yields nothing."""
        assert list(segment("", "x")) == []

    def test_match_at_edges(self):
        """Test that no empty plain segments are emitted at the edges."""
        result = list(segment("abcab", "ab"))

        assert result == [
            MatchSegment("ab", 0),
            PlainSegment("c"),
            MatchSegment("ab", 1),
        ]

    def test_adjacent_matches(self):
        """Test that adjacent matches have no plain segment between them."""
        result = list(segment("aaa", "a"))

        assert result == [MatchSegment("a", 0), MatchSegment("a", 1), MatchSegment("a", 2)]

    def test_non_overlapping(self):
        """Test that matches are found left to right without overlap."""
        result = list(segment("aaaa", "aa"))

        assert result == [MatchSegment("aa", 0), MatchSegment("aa", 1)]

    def test_zero_width_matches_skipped(self):
        """Test that zero-width matches produce no segments."""
        assert list(segment("abc", "x*")) == [PlainSegment("abc")]

    def test_compiled_pattern_with_groups(self):
        """Test that the whole match is used even with capture groups."""
        pattern = re.compile(r"\*(\w+)\*")

        result = list(segment("a *bold* b", pattern))

        assert result[1] == MatchSegment("*bold*", 0)

    @pytest.mark.parametrize(
        "source, pattern",
        [
            ("Use Bfast daily", "Bfast"),
            ("", "a"),
            ("no matches here", r"\d+"),
            ("12 apples and 345 pears 6", r"\d+"),
            ("ünïcödé ünï", "ünï"),
            ("line one\nline two", r"^line"),
        ],
    )
    def test_concatenation_reproduces_source(self, source, pattern):
        """Test that segment texts concatenate back to the source."""
        assert "".join(part.text for part in segment(source, pattern)) == source

    def test_restartable(self):
        """Test that calling segment again reproduces the same sequence."""
        first = list(segment("x1y22z", r"\d+"))
        second = list(segment("x1y22z", r"\d+"))

        assert first == second

    def test_lazy(self):
        """Test that segments are produced on demand."""
        iterator = segment("a1b2", r"\d")

        assert next(iterator) == PlainSegment("a")
        assert next(iterator) == MatchSegment("1", 0)


class TestReplaceWithComponent:
    """Test suite for replace_with_component."""

    def test_matches_rendered(self):
        """Test that matches are replaced by rendered fragments."""
        result = replace_with_component(
            "Use Bfast now",
            lambda match, i: ("highlight", match, i),
            "Bfast",
        )

        assert result == ["Use ", ("highlight", "Bfast", 0), " now"]

    def test_no_match_returns_source(self):
        """Test that the source is returned unchanged without matches."""
        assert replace_with_component("hello", lambda m, i: m.upper(), "z") == ["hello"]


class TestTokenSegmenter:
    """Test suite for TokenSegmenter."""

    @pytest.fixture
    def segmenter(self):
        """Create a segmenter for digits."""
        return TokenSegmenter(r"\d+")

    def test_segment(self, segmenter):
        """Test that the bound pattern is used."""
        assert list(segmenter.segment("a12")) == [PlainSegment("a"), MatchSegment("12", 0)]

    def test_replace_with_component(self, segmenter):
        """Test the base class fragment replacement."""
        assert segmenter.replace_with_component("a1b", lambda m, i: int(m)) == ["a", 1, "b"]

    def test_invalid_pattern(self):
        """Test that invalid patterns fail at construction."""
        with pytest.raises(re.error):
            TokenSegmenter("(unclosed")
