"""Unit tests for AsciiFoldingFilter."""

from tokenizer_pipeline.filters import AsciiFoldingFilter
from tokenizer_pipeline.filters.ascii_folding import fold_to_ascii
from tokenizer_pipeline.tokenizers import SimpleTokenizer


class TestAsciiFoldingFilter:
    """Tests for AsciiFoldingFilter class."""

    def test_fold_to_ascii(self):
        assert fold_to_ascii("Café") == "Cafe"
        assert fold_to_ascii("naïve") == "naive"
        assert fold_to_ascii("ﬁne") == "fine"

    def test_filter_folds_and_drops_empty(self):
        chain = SimpleTokenizer().filter(AsciiFoldingFilter())
        tokens = list(chain.tokenize("Crème brûlée 日本"))
        assert [(t.text, t.position) for t in tokens] == [("Creme", 0), ("brulee", 1)]
