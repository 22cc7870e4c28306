"""Tests for text utility functions."""

from __future__ import annotations

from docindex.utils.text import count_tokens, snippet, tokenize


class TestTokenize:
    """Test tokenize function."""

    def test_lowercases(self) -> None:
        """Should lower-case every token."""
        assert tokenize("Eikonal HOME") == ["eikonal", "home"]

    def test_splits_punctuation(self) -> None:
        """Should split words on punctuation."""
        assert tokenize("sub-tuples") == ["sub", "tuples"]
        assert tokenize("Eikonal.brgc") == ["eikonal", "brgc"]
        assert tokenize("Modules = [Eikonal]") == ["modules", "eikonal"]

    def test_signature(self) -> None:
        """Should tokenize code signatures into identifiers."""
        assert tokenize("subtuples(t::NTuple{N, T})") == ["subtuples", "t", "ntuple", "n", "t"]

    def test_empty(self) -> None:
        """Should handle empty and whitespace-only text."""
        assert tokenize("") == []
        assert tokenize("   \n\n") == []

    def test_keeps_underscores_and_digits(self) -> None:
        assert tokenize("max_iter 64bit") == ["max_iter", "64bit"]


class TestCountTokens:
    """Test count_tokens function."""

    def test_counts_across_fields(self) -> None:
        """Should sum occurrences across all parts."""
        counts = count_tokens(["Eikonal.brgc", "brgc(n) gray code", "method"])

        assert counts["brgc"] == 2
        assert counts["eikonal"] == 1
        assert counts["method"] == 1
        assert counts["missing"] == 0


class TestSnippet:
    """Test snippet function."""

    def test_short_text(self) -> None:
        """Short text is flattened but not truncated."""
        assert snippet("brgc(n)\n\nGet the code") == "brgc(n) Get the code"

    def test_long_text(self) -> None:
        """Long text is truncated to max_chars."""
        result = snippet("word " * 100, max_chars=20)

        assert len(result) <= 20
        assert result.endswith("…")
