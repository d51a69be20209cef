"""
Japanese word segmentation.

Japanese is written without spaces, so words come from a dictionary-based
morphological analyser: spaCy's ``ja`` language, which is backed by
SudachiPy and its core dictionary.
"""

from typing import Optional

from tokenizer_pipeline.registry import tokenizers
from tokenizer_pipeline.tokenizers.spacy import SpacyTokenizer

SPLIT_MODES = ("A", "B", "C")


@tokenizers.register("ja")
class JapaneseTokenizer(SpacyTokenizer):
    """
    Segments Japanese text with Sudachi through ``spacy.blank("ja")``.

    Args:
        split_mode: Sudachi split mode, "A" (shortest units), "B" or "C"
            (named entities kept whole). None uses spaCy's default.
        keep_punct: Also emit punctuation tokens
    """

    def __init__(self, split_mode: Optional[str] = None, keep_punct: bool = False) -> None:
        if split_mode is not None and split_mode not in SPLIT_MODES:
            raise ValueError(
                f"Unknown Sudachi split mode '{split_mode}'. Expected one of {', '.join(SPLIT_MODES)}."
            )
        super().__init__(lang="ja", keep_punct=keep_punct)
        self.split_mode = split_mode

    def _create_nlp(self):
        config = {}
        if self.split_mode is not None:
            config = {"nlp": {"tokenizer": {"split_mode": self.split_mode}}}
        return super()._create_nlp(config)

    def duplicate(self) -> "JapaneseTokenizer":
        return JapaneseTokenizer(split_mode=self.split_mode, keep_punct=self.keep_punct)

    def __repr__(self) -> str:
        return f"JapaneseTokenizer(split_mode={self.split_mode!r}, keep_punct={self.keep_punct})"
