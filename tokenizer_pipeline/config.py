from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

# Ensure component registration by importing modules with registry decorators.
from tokenizer_pipeline import filters as _filters_pkg  # noqa: F401
from tokenizer_pipeline import tokenizers as _tokenizers_pkg  # noqa: F401

from .registry import token_filters, tokenizers
from .tokenizer import Tokenizer


@dataclass
class ComponentConfig:
    """Generic component configuration."""

    name: str
    params: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(data: Any) -> "ComponentConfig":
        if isinstance(data, str):
            return ComponentConfig(name=data)
        if not isinstance(data, Mapping) or "name" not in data:
            raise ValueError(f"Component entry needs a 'name': {data!r}")
        return ComponentConfig(name=data["name"], params=dict(data.get("params") or {}))


@dataclass
class AnalyzerConfig:
    """A base tokenizer and the filters applied to it, in order."""

    tokenizer: ComponentConfig
    filters: List[ComponentConfig] = field(default_factory=list)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "AnalyzerConfig":
        if "tokenizer" not in data:
            raise ValueError("Analyzer entry needs a 'tokenizer' section.")
        return AnalyzerConfig(
            tokenizer=ComponentConfig.from_dict(data["tokenizer"]),
            filters=[ComponentConfig.from_dict(f) for f in data.get("filters") or []],
        )


@dataclass
class ManagerConfig:
    """Top-level configuration of a tokenizer manager."""

    analyzers: Dict[str, AnalyzerConfig] = field(default_factory=dict)
    include_defaults: bool = True

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "ManagerConfig":
        analyzers = data.get("analyzers") or {}
        if not isinstance(analyzers, Mapping):
            raise ValueError("'analyzers' must map analyzer names to analyzer entries.")
        include_defaults = data.get("include_defaults", True)
        if not isinstance(include_defaults, bool):
            raise ValueError(f"'include_defaults' must be true or false, got {include_defaults!r}.")
        return ManagerConfig(
            analyzers={
                name: AnalyzerConfig.from_dict(entry) for name, entry in analyzers.items()
            },
            include_defaults=include_defaults,
        )


def build_analyzer(config: AnalyzerConfig) -> Tokenizer:
    """Instantiate the configured tokenizer and chain its filters."""
    analyzer = tokenizers.create(config.tokenizer.name, **config.tokenizer.params)
    for filter_config in config.filters:
        analyzer = analyzer.filter(token_filters.create(filter_config.name, **filter_config.params))
    return analyzer
