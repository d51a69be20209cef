"""Shared fixtures for tokenizer pipeline tests."""

import json
import os
import tempfile
from typing import Dict, Iterator, List

import pytest

from tokenizer_pipeline.manager import TokenizerManager
from tokenizer_pipeline.tokenizer import TokenFilter, Tokenizer
from tokenizer_pipeline.types import Token


# ---------------------------------------------------------------------------
# Sample data fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_text() -> str:
    """Sample English text with punctuation and mixed case."""
    return "The quick Brown fox, running fast, jumped over the lazy dogs."


@pytest.fixture
def long_word() -> str:
    """A 41-character word, one over the default length limit."""
    return "a" * 41


# ---------------------------------------------------------------------------
# Mock classes
# ---------------------------------------------------------------------------


class MockTokenizer(Tokenizer):
    """Emits predefined words, one token each, regardless of input."""

    def __init__(self, words: List[str]):
        self.words = list(words)

    def token_stream(self, text: str) -> Iterator[Token]:
        offset = 0
        for position, word in enumerate(self.words):
            yield Token(offset, offset + len(word), position, word)
            offset += len(word) + 1


class CountingTokenizer(Tokenizer):
    """Whitespace tokenizer that counts calls in mutable instance state."""

    def __init__(self):
        self.calls = 0

    def token_stream(self, text: str) -> Iterator[Token]:
        self.calls += 1
        offset = 0
        for position, word in enumerate(text.split()):
            start = text.index(word, offset)
            offset = start + len(word)
            yield Token(start, offset, position, f"{word}#{self.calls}")


class SuffixFilter(TokenFilter):
    """Appends a fixed suffix to every token; used to check filter order."""

    def __init__(self, suffix: str):
        self.suffix = suffix

    def transform(self, tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            token.text = token.text + self.suffix
            yield token


class RecordingFilter(TokenFilter):
    """Keeps every token and records the text it saw."""

    def __init__(self):
        self.seen: List[str] = []

    def transform(self, tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            self.seen.append(token.text)
            yield token


# ---------------------------------------------------------------------------
# Manager fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def manager() -> TokenizerManager:
    """Manager pre-populated with the default pipelines."""
    return TokenizerManager.default()


@pytest.fixture
def empty_manager() -> TokenizerManager:
    """Manager with nothing registered."""
    return TokenizerManager()


# ---------------------------------------------------------------------------
# Configuration fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def analyzer_config_dict() -> Dict:
    """Config dict registering one custom analyzer next to the defaults."""
    return {
        "analyzers": {
            "en_stop": {
                "tokenizer": {"name": "simple"},
                "filters": [
                    {"name": "lower_caser"},
                    {"name": "stop_words", "params": {"language": "en"}},
                ],
            },
        },
    }


@pytest.fixture
def temp_config_file(analyzer_config_dict: Dict) -> Iterator[str]:
    """Temporary config JSON file for CLI testing."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        json.dump(analyzer_config_dict, f)
        path = f.name
    yield path
    os.unlink(path)


@pytest.fixture
def temp_text_file(sample_text: str) -> Iterator[str]:
    """Create a temporary text file with sample content."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False, encoding="utf-8") as f:
        f.write(sample_text)
        path = f.name
    yield path
    os.unlink(path)
