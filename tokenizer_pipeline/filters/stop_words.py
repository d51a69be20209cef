import importlib
from typing import FrozenSet, Iterable, Iterator, Optional

from tokenizer_pipeline.registry import token_filters
from tokenizer_pipeline.tokenizer import TokenFilter
from tokenizer_pipeline.types import Token


def load_stop_words(language: str) -> FrozenSet[str]:
    """Load spaCy's stop word list for ``language`` (e.g. "en", "fr")."""
    try:
        module = importlib.import_module(f"spacy.lang.{language}.stop_words")
    except ImportError as exc:
        raise ValueError(f"No spaCy stop words for language '{language}'") from exc
    return frozenset(module.STOP_WORDS)


@token_filters.register("stop_words")
class StopWordFilter(TokenFilter):
    """
    Drops stop words.

    Matching is exact, so put this filter after ``LowerCaser`` when the
    list is lowercase. Without ``words`` the spaCy list for ``language``
    is used.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, language: str = "en") -> None:
        self.language = language
        if words is None:
            self.words = load_stop_words(language)
        else:
            self.words = frozenset(words)

    def transform(self, tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text not in self.words:
                yield token

    def duplicate(self) -> "StopWordFilter":
        # The word set is immutable and can be shared.
        return StopWordFilter(words=self.words, language=self.language)

    def __repr__(self) -> str:
        return f"StopWordFilter(language={self.language!r}, words={len(self.words)})"
