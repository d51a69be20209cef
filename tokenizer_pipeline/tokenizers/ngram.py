from typing import Iterator

from tokenizer_pipeline.registry import tokenizers
from tokenizer_pipeline.tokenizer import Tokenizer
from tokenizer_pipeline.types import Token


@tokenizers.register("ngram")
class NgramTokenizer(Tokenizer):
    """
    Emits character n-grams of the input.

    Grams are ordered by start offset, then by length. The position of a
    gram is its start offset, so positions never decrease.

    Args:
        min_gram: Shortest gram length (>= 1)
        max_gram: Longest gram length (>= min_gram)
        prefix_only: Only emit grams starting at the beginning of the input
    """

    def __init__(self, min_gram: int = 1, max_gram: int = 2, prefix_only: bool = False) -> None:
        if min_gram < 1:
            raise ValueError(f"min_gram must be >= 1, got {min_gram}")
        if max_gram < min_gram:
            raise ValueError(
                f"max_gram ({max_gram}) must be >= min_gram ({min_gram})"
            )
        self.min_gram = min_gram
        self.max_gram = max_gram
        self.prefix_only = prefix_only

    def token_stream(self, text: str) -> Iterator[Token]:
        starts = range(1) if self.prefix_only else range(len(text))
        for start in starts:
            for length in range(self.min_gram, self.max_gram + 1):
                end = start + length
                if end > len(text):
                    break
                yield Token(
                    offset_from=start,
                    offset_to=end,
                    position=start,
                    text=text[start:end],
                )

    def __repr__(self) -> str:
        return (
            f"NgramTokenizer(min_gram={self.min_gram}, max_gram={self.max_gram}, "
            f"prefix_only={self.prefix_only})"
        )
