from typing import Iterator

from tokenizer_pipeline.registry import token_filters
from tokenizer_pipeline.tokenizer import TokenFilter
from tokenizer_pipeline.types import Token


@token_filters.register("alpha_num_only")
class AlphaNumOnlyFilter(TokenFilter):
    """Keeps only tokens made of ASCII letters and digits."""

    def transform(self, tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text.isascii() and token.text.isalnum():
                yield token

    def __repr__(self) -> str:
        return "AlphaNumOnlyFilter()"
