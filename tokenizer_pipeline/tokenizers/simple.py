import re
from typing import Iterator

from tokenizer_pipeline.registry import tokenizers
from tokenizer_pipeline.tokenizer import Tokenizer
from tokenizer_pipeline.types import Token

# Runs of unicode letters and digits; everything else separates tokens.
_WORD_PATTERN = re.compile(r"[^\W_]+")


@tokenizers.register("simple")
class SimpleTokenizer(Tokenizer):
    """Splits text on whitespace and punctuation."""

    def token_stream(self, text: str) -> Iterator[Token]:
        for position, match in enumerate(_WORD_PATTERN.finditer(text)):
            yield Token(
                offset_from=match.start(),
                offset_to=match.end(),
                position=position,
                text=match.group(0),
            )

    def __repr__(self) -> str:
        return "SimpleTokenizer()"
