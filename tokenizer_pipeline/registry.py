"""
Component registry for tokenizer pipelines.

Provides pluggable factory registration for base tokenizers and
token filters, so analyzers can be assembled by name (see config.py).
Each registry knows the pipeline stage type it produces, so a filter
can never be registered as a tokenizer or the other way round.
"""

import inspect
import logging
from typing import Any, Callable, Dict, Optional, TypeVar

from tokenizer_pipeline.tokenizer import TokenFilter, Tokenizer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ComponentRegistry:
    """
    Name -> factory mapping for one kind of pipeline stage.

    Args:
        kind: Label used in error messages ("Tokenizer", "Token filter")
        base: Type every factory must produce. Classes are checked when
            registered, other callables when ``create`` calls them.
    """

    def __init__(self, kind: str = "Component", base: Optional[type] = None) -> None:
        self.kind = kind
        self.base = base
        self._registry: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
        def decorator(factory: Callable[..., T]) -> Callable[..., T]:
            if name in self._registry:
                raise ValueError(f"{self.kind} '{name}' already registered.")
            if self.base is not None and inspect.isclass(factory) and not issubclass(factory, self.base):
                raise TypeError(
                    f"{self.kind} '{name}' must subclass {self.base.__name__}, got {factory.__name__}."
                )
            self._registry[name] = factory
            logger.debug("Registered %s '%s'", self.kind.lower(), name)
            return factory

        return decorator

    def get(self, name: str) -> Callable[..., Any]:
        try:
            return self._registry[name]
        except KeyError as exc:
            raise KeyError(f"{self.kind} '{name}' not found.") from exc

    def create(self, name: str, **params: Any) -> Any:
        """Instantiate the factory registered under ``name``."""
        component = self.get(name)(**params)
        if self.base is not None and not isinstance(component, self.base):
            raise TypeError(
                f"{self.kind} '{name}' produced {type(component).__name__}, "
                f"expected {self.base.__name__}."
            )
        return component

    def available(self) -> Dict[str, Callable[..., Any]]:
        return dict(self._registry)


# Factories for the two kinds of pipeline stages
tokenizers = ComponentRegistry("Tokenizer", Tokenizer)
token_filters = ComponentRegistry("Token filter", TokenFilter)
