"""Tests for podium.validation module."""

from __future__ import annotations

from podium.models import Word
from podium.validation import is_sorted_by_start, validate_words


class TestIsSortedByStart:
    def test_sorted(self, even_words: list[Word]) -> None:
        assert is_sorted_by_start(even_words) is True

    def test_equal_starts_allowed(self, word_factory) -> None:
        words = word_factory([("a", 0, 100), ("b", 0, 200)])
        assert is_sorted_by_start(words) is True

    def test_unsorted(self, word_factory) -> None:
        words = word_factory([("a", 500, 600), ("b", 0, 100)])
        assert is_sorted_by_start(words) is False

    def test_empty(self) -> None:
        assert is_sorted_by_start([]) is True


class TestValidateWords:
    def test_valid_words(self, even_words: list[Word]) -> None:
        result = validate_words(even_words)
        assert result["valid"] is True
        assert result["warnings"] == []
        assert result["word_count"] == 10

    def test_empty_is_valid_with_warning(self) -> None:
        result = validate_words([])
        assert result["valid"] is True
        assert len(result["warnings"]) == 1

    def test_out_of_order(self, word_factory) -> None:
        words = word_factory([("a", 500, 600), ("b", 0, 100)])
        result = validate_words(words)
        assert result["valid"] is False
        assert "not re-sorted" in result["warnings"][0]

    def test_negative_duration(self, word_factory) -> None:
        result = validate_words(word_factory([("a", 500, 400)]))
        assert result["valid"] is False
        assert "end before they start" in result["warnings"][0]

    def test_confidence_out_of_range(self, word_factory) -> None:
        result = validate_words(word_factory([("a", 0, 100, 1.4)]))
        assert result["valid"] is False
        assert "outside [0, 1]" in result["warnings"][0]
