from typing import Iterator

from tokenizer_pipeline.registry import token_filters
from tokenizer_pipeline.tokenizer import TokenFilter
from tokenizer_pipeline.types import Token


@token_filters.register("lower_caser")
class LowerCaser(TokenFilter):
    """Lowercases token text."""

    def transform(self, tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            token.text = token.text.lower()
            yield token

    def __repr__(self) -> str:
        return "LowerCaser()"
