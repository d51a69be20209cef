"""
Pipeline abstraction.

A pipeline is a base ``Tokenizer`` wrapped by zero or more ``TokenFilter``
stages. Pipelines of any shape are stored behind a ``BoxedTokenizer`` so
the manager can keep them in one mapping and hand out independent copies.

Example:
    pipeline = SimpleTokenizer().filter(RemoveLongFilter(40)).filter(LowerCaser())
    boxed = box_tokenizer(pipeline)
    [token.text for token in boxed.tokenize("Hello World")]  # ["hello", "world"]
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple, Union

from tokenizer_pipeline.types import Token

logger = logging.getLogger(__name__)

TextInput = Union[str, bytes]


def decode_text(text: TextInput) -> Tuple[str, Optional[int]]:
    """
    Decode tokenizer input to ``str``.

    Bytes are decoded as UTF-8. Invalid input is truncated at the first
    offending byte, so only the valid prefix gets tokenized.

    Args:
        text: Text or UTF-8 encoded bytes

    Returns:
        Decoded text, and the character offset where it was cut (None
        when the whole input decoded)
    """
    if isinstance(text, str):
        return text, None
    try:
        return bytes(text).decode("utf-8"), None
    except UnicodeDecodeError as exc:
        logger.warning(
            "Invalid UTF-8 at byte %d of %d, tokenizing the valid prefix only",
            exc.start,
            len(text),
        )
        prefix = bytes(text[: exc.start]).decode("utf-8")
        return prefix, len(prefix)


class TokenStream:
    """
    Lazy, finite stream of tokens for a single input.

    The stream is consumed by iterating it and cannot be restarted;
    tokenize the input again to get a new one.

    When the input was cut at ``cut``, the stream ends before the first
    token reaching the cut, since that token holds the malformed unit.
    """

    def __init__(self, tokens: Iterator[Token], cut: Optional[int] = None) -> None:
        self._tokens = iter(tokens)
        self._cut = cut
        self._done = False

    def __iter__(self) -> "TokenStream":
        return self

    def __next__(self) -> Token:
        if self._done:
            raise StopIteration
        try:
            token = next(self._tokens)
        except StopIteration:
            self._done = True
            raise
        except UnicodeError as exc:
            logger.warning("Ending token stream on malformed input: %s", exc)
            self._done = True
            raise StopIteration from exc
        if self._cut is not None and token.offset_to >= self._cut:
            logger.debug("Dropping token %r truncated by malformed input", token.text)
            self._done = True
            raise StopIteration
        return token


class Tokenizer(ABC):
    """Produces a token stream from text. Base class of every pipeline."""

    @abstractmethod
    def token_stream(self, text: str) -> Iterator[Token]:
        ...

    def tokenize(self, text: TextInput) -> TokenStream:
        decoded, cut = decode_text(text)
        return TokenStream(self.token_stream(decoded), cut=cut)

    def filter(self, token_filter: "TokenFilter") -> "ChainTokenizer":
        """Wrap this tokenizer with ``token_filter``, applied after all current stages."""
        return ChainTokenizer(self, token_filter)

    def duplicate(self) -> "Tokenizer":
        """Return an instance whose mutable state is independent of this one."""
        return copy.deepcopy(self)


class TokenFilter(ABC):
    """Transforms a token stream: drops, normalizes or rewrites tokens."""

    @abstractmethod
    def transform(self, tokens: Iterator[Token]) -> Iterator[Token]:
        ...

    def duplicate(self) -> "TokenFilter":
        return copy.deepcopy(self)


class ChainTokenizer(Tokenizer):
    """A tokenizer (``head``) followed by one filter (``tail``)."""

    def __init__(self, head: Tokenizer, tail: TokenFilter) -> None:
        self.head = head
        self.tail = tail

    def token_stream(self, text: str) -> Iterator[Token]:
        return self.tail.transform(self.head.token_stream(text))

    def duplicate(self) -> "ChainTokenizer":
        return ChainTokenizer(self.head.duplicate(), self.tail.duplicate())

    def __repr__(self) -> str:
        return f"{self.head!r}.filter({self.tail!r})"


class BoxedTokenizer:
    """
    Type-erased handle around a pipeline of any shape.

    Only ``tokenize`` and ``duplicate`` are exposed, so callers never
    need to know how the wrapped pipeline was composed.
    """

    __slots__ = ("_tokenizer",)

    def __init__(self, tokenizer: Tokenizer) -> None:
        self._tokenizer = tokenizer

    def tokenize(self, text: TextInput) -> TokenStream:
        return self._tokenizer.tokenize(text)

    def token_texts(self, text: TextInput) -> List[str]:
        return [token.text for token in self.tokenize(text)]

    def duplicate(self) -> "BoxedTokenizer":
        return BoxedTokenizer(self._tokenizer.duplicate())

    def __repr__(self) -> str:
        return f"BoxedTokenizer({self._tokenizer!r})"


def box_tokenizer(tokenizer: Union[Tokenizer, BoxedTokenizer]) -> BoxedTokenizer:
    if isinstance(tokenizer, BoxedTokenizer):
        return tokenizer
    if not isinstance(tokenizer, Tokenizer):
        raise TypeError(
            f"Expected a Tokenizer, got {type(tokenizer).__name__}."
        )
    return BoxedTokenizer(tokenizer)
