"""
Tokenizer manager.

The manager is the store of all named, pre-configured tokenizer pipelines.
It keeps one template per name and hands every caller its own duplicate,
so callers never share mutable tokenizer state.

``TokenizerManager.default()`` is populated with:

- raw: does not split nor normalize the text
- default: splits on whitespace and punctuation, removes tokens longer
  than 40 characters, lowercases
- en_stem: like default, then applies an English stemmer
- ja: Japanese segmentation, removes tokens longer than 40 characters
"""

import logging
from typing import Dict, List, Optional, Union

from tokenizer_pipeline.config import ManagerConfig, build_analyzer
from tokenizer_pipeline.filters import LowerCaser, RemoveLongFilter, StemmerFilter
from tokenizer_pipeline.tokenizer import BoxedTokenizer, Tokenizer, box_tokenizer
from tokenizer_pipeline.tokenizers import JapaneseTokenizer, RawTokenizer, SimpleTokenizer
from tokenizer_pipeline.utils.locks import ReadWriteLock

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_LENGTH_LIMIT = 40


class TokenizerManager:
    """Thread-safe mapping of pipeline name to pipeline template."""

    def __init__(self) -> None:
        self._tokenizers: Dict[str, BoxedTokenizer] = {}
        self._lock = ReadWriteLock()

    def register(self, name: str, tokenizer: Union[Tokenizer, BoxedTokenizer]) -> None:
        """
        Register ``tokenizer`` under ``name``, replacing any previous entry.

        The manager keeps its own duplicate as the template, so later use
        of ``tokenizer`` by the caller does not affect it.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Tokenizer name must be a non-empty string.")
        template = box_tokenizer(tokenizer).duplicate()
        with self._lock.write_locked():
            replaced = name in self._tokenizers
            self._tokenizers[name] = template
        logger.debug(
            "%s tokenizer '%s': %r", "Replaced" if replaced else "Registered", name, template
        )

    def get(self, name: str) -> Optional[BoxedTokenizer]:
        """
        Return a fresh instance of the pipeline registered under ``name``.

        Returns None when no pipeline has that name. The returned instance
        belongs to the caller.
        """
        with self._lock.read_locked():
            template = self._tokenizers.get(name)
        if template is None:
            logger.debug("Unknown tokenizer '%s'", name)
            return None
        # Templates are replaced, never mutated in place.
        return template.duplicate()

    def names(self) -> List[str]:
        with self._lock.read_locked():
            return sorted(self._tokenizers)

    def __contains__(self, name: object) -> bool:
        with self._lock.read_locked():
            return name in self._tokenizers

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._tokenizers)

    @classmethod
    def default(cls) -> "TokenizerManager":
        """Create a manager pre-populated with the standard pipelines."""
        manager = cls()
        manager.register("raw", RawTokenizer())
        manager.register(
            "default",
            SimpleTokenizer()
            .filter(RemoveLongFilter(DEFAULT_TOKEN_LENGTH_LIMIT))
            .filter(LowerCaser()),
        )
        manager.register(
            "en_stem",
            SimpleTokenizer()
            .filter(RemoveLongFilter(DEFAULT_TOKEN_LENGTH_LIMIT))
            .filter(LowerCaser())
            .filter(StemmerFilter("english")),
        )
        manager.register(
            "ja", JapaneseTokenizer().filter(RemoveLongFilter(DEFAULT_TOKEN_LENGTH_LIMIT))
        )
        return manager

    @classmethod
    def from_config(cls, config: ManagerConfig) -> "TokenizerManager":
        """Create a manager from a ``ManagerConfig``; configured analyzers override defaults."""
        manager = cls.default() if config.include_defaults else cls()
        for name, analyzer_config in config.analyzers.items():
            manager.register(name, build_analyzer(analyzer_config))
        return manager
