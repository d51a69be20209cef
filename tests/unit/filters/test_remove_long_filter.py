"""Unit tests for RemoveLongFilter."""

import pytest

from tokenizer_pipeline.filters import RemoveLongFilter
from tokenizer_pipeline.tokenizers import SimpleTokenizer


def _texts(limit, text):
    return [t.text for t in SimpleTokenizer().filter(RemoveLongFilter(limit)).tokenize(text)]


class TestRemoveLongFilter:
    """Tests for RemoveLongFilter class."""

    def test_drops_tokens_longer_than_limit(self):
        assert _texts(5, "short muchlonger tiny") == ["short", "tiny"]

    def test_keeps_token_of_exactly_limit(self):
        assert _texts(40, "b" * 40) == ["b" * 40]

    def test_drops_41_characters_with_default_limit(self, long_word):
        assert _texts(40, long_word) == []

    def test_default_limit(self):
        assert RemoveLongFilter().limit == 40

    def test_limit_counts_characters_not_bytes(self):
        word = "é" * 10
        assert _texts(10, word) == [word]

    def test_positions_not_renumbered(self):
        tokens = list(SimpleTokenizer().filter(RemoveLongFilter(3)).tokenize("abcd a ab abcde b"))
        assert [(t.text, t.position) for t in tokens] == [("a", 1), ("ab", 2), ("b", 4)]

    @pytest.mark.parametrize("limit", [0, -5])
    def test_invalid_limit(self, limit):
        with pytest.raises(ValueError):
            RemoveLongFilter(limit)
