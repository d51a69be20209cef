"""Base tokenizers."""

from .raw import RawTokenizer  # noqa: F401
from .simple import SimpleTokenizer  # noqa: F401
from .japanese import JapaneseTokenizer  # noqa: F401
from .ngram import NgramTokenizer  # noqa: F401
from .spacy import SpacyTokenizer  # noqa: F401
