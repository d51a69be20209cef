from typing import Iterator

from tokenizer_pipeline.registry import tokenizers
from tokenizer_pipeline.tokenizer import Tokenizer
from tokenizer_pipeline.types import Token


@tokenizers.register("raw")
class RawTokenizer(Tokenizer):
    """Emits the whole input as a single token, untouched."""

    def token_stream(self, text: str) -> Iterator[Token]:
        yield Token(offset_from=0, offset_to=len(text), position=0, text=text)

    def __repr__(self) -> str:
        return "RawTokenizer()"
