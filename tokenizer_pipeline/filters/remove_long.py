from typing import Iterator

from tokenizer_pipeline.registry import token_filters
from tokenizer_pipeline.tokenizer import TokenFilter
from tokenizer_pipeline.types import Token


@token_filters.register("remove_long")
class RemoveLongFilter(TokenFilter):
    """
    Drops tokens longer than ``limit`` characters.

    Positions of the remaining tokens are left as they are.
    """

    def __init__(self, limit: int = 40) -> None:
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        self.limit = limit

    def transform(self, tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            if len(token.text) <= self.limit:
                yield token

    def __repr__(self) -> str:
        return f"RemoveLongFilter(limit={self.limit})"
