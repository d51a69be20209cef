import unicodedata
from typing import Iterator

from tokenizer_pipeline.registry import token_filters
from tokenizer_pipeline.tokenizer import TokenFilter
from tokenizer_pipeline.types import Token


def fold_to_ascii(text: str) -> str:
    """NFKD-decompose ``text`` and drop everything outside ASCII."""
    decomposed = unicodedata.normalize("NFKD", text)
    return decomposed.encode("ascii", "ignore").decode("ascii")


@token_filters.register("ascii_folding")
class AsciiFoldingFilter(TokenFilter):
    """Folds accented characters to ASCII ("Café" -> "Cafe").

    Tokens with nothing left after folding are dropped.
    """

    def transform(self, tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            folded = fold_to_ascii(token.text)
            if not folded:
                continue
            token.text = folded
            yield token

    def __repr__(self) -> str:
        return "AsciiFoldingFilter()"
