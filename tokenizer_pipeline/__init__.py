"""
Tokenizer pipeline package.

Composes base tokenizers with token filters into analysis pipelines and
keeps them in a thread-safe, name-keyed ``TokenizerManager`` that hands
every caller an independent copy.
"""

__all__ = [
    "BoxedTokenizer",
    "Token",
    "TokenFilter",
    "Tokenizer",
    "TokenizerManager",
    "box_tokenizer",
]

__version__ = "0.1.0"

from .types import Token  # noqa: E402
from .tokenizer import BoxedTokenizer, TokenFilter, Tokenizer, box_tokenizer  # noqa: E402
from .manager import TokenizerManager  # noqa: E402
