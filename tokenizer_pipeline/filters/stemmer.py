"""
Snowball stemming filter backed by PyStemmer.

A PyStemmer ``Stemmer`` keeps an internal word cache, so it is per-instance
state: each filter creates its own on first use and ``duplicate()`` never
shares it.
"""

import logging
from typing import Iterator

from tokenizer_pipeline.registry import token_filters
from tokenizer_pipeline.tokenizer import TokenFilter
from tokenizer_pipeline.types import Token

logger = logging.getLogger(__name__)

# Lazy imports
_Stemmer = None


def _get_stemmer():
    """Lazy import of Stemmer."""
    global _Stemmer
    if _Stemmer is None:
        try:
            import Stemmer

            _Stemmer = Stemmer
        except ImportError:
            raise ImportError(
                "PyStemmer package required for the stemmer filter. "
                "Install with: pip install PyStemmer"
            )
    return _Stemmer


@token_filters.register("stemmer")
class StemmerFilter(TokenFilter):
    """
    Replaces token text with its stem ("running" -> "run").

    Args:
        language: Snowball algorithm name, e.g. "english", "french"
    """

    def __init__(self, language: str = "english") -> None:
        if language not in _get_stemmer().algorithms():
            raise ValueError(f"Unknown stemmer language: {language}")
        self.language = language
        self._stemmer = None

    @property
    def stemmer(self):
        if self._stemmer is None:
            logger.debug("Creating %s stemmer", self.language)
            self._stemmer = _get_stemmer().Stemmer(self.language)
        return self._stemmer

    def transform(self, tokens: Iterator[Token]) -> Iterator[Token]:
        stemmer = self.stemmer
        for token in tokens:
            token.text = stemmer.stemWord(token.text)
            yield token

    def duplicate(self) -> "StemmerFilter":
        return StemmerFilter(self.language)

    def __repr__(self) -> str:
        return f"StemmerFilter(language={self.language!r})"
