"""
spaCy-backed base tokenizer.

Uses the rule-based tokenizer of a blank spaCy pipeline, which knows
language-specific exceptions ("don't" -> "do", "n't") that a plain
character split does not.
"""

import logging
from typing import Iterator

from tokenizer_pipeline.registry import tokenizers
from tokenizer_pipeline.tokenizer import Tokenizer
from tokenizer_pipeline.types import Token

logger = logging.getLogger(__name__)

# Lazy imports
_spacy = None


def _get_spacy():
    """Lazy import of spaCy."""
    global _spacy
    if _spacy is None:
        try:
            import spacy

            _spacy = spacy
        except ImportError:
            raise ImportError(
                "spacy package required for the spaCy tokenizer. "
                "Install with: pip install spacy"
            )
    return _spacy


@tokenizers.register("spacy")
class SpacyTokenizer(Tokenizer):
    """
    Tokenizer using ``spacy.blank(lang)``.

    Whitespace tokens are never emitted. Positions are spaCy token
    indices, so skipped tokens leave gaps instead of being renumbered.

    The spaCy ``Language`` owns a mutable string store, so every
    instance builds its own on first use and duplicates never share it.

    Args:
        lang: spaCy language code
        keep_punct: Also emit punctuation tokens
    """

    def __init__(self, lang: str = "en", keep_punct: bool = False) -> None:
        self.lang = lang
        self.keep_punct = keep_punct
        self._nlp = None

    @property
    def nlp(self):
        if self._nlp is None:
            logger.debug("Creating blank spaCy pipeline for '%s'", self.lang)
            self._nlp = self._create_nlp()
        return self._nlp

    def _create_nlp(self, config=None):
        return _get_spacy().blank(self.lang, config=config or {})

    def token_stream(self, text: str) -> Iterator[Token]:
        doc = self.nlp.make_doc(text)
        for tok in doc:
            if tok.is_space:
                continue
            if tok.is_punct and not self.keep_punct:
                continue
            yield Token(
                offset_from=tok.idx,
                offset_to=tok.idx + len(tok.text),
                position=tok.i,
                text=tok.text,
            )

    def duplicate(self) -> "SpacyTokenizer":
        return SpacyTokenizer(lang=self.lang, keep_punct=self.keep_punct)

    def __repr__(self) -> str:
        return f"SpacyTokenizer(lang={self.lang!r}, keep_punct={self.keep_punct})"
