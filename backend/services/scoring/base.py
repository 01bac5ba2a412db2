"""Lifecycle contract for scoring models handed out by the registry."""

from abc import ABC, abstractmethod
from typing import Any
import logging

logger = logging.getLogger(__name__)


class ScoringModel(ABC):
    """A model that turns a feature vector into a typed score.

    Subclasses set ``model_name`` and ``feature_names`` and implement
    ``load()`` (materialise parameters once) and ``predict(**kwargs)``.
    """

    model_name: str = ""
    feature_names: list[str] = []

    def __init__(self) -> None:
        self._loaded = False

    @abstractmethod
    def load(self) -> None:
        """Build model parameters. Called once, through ensure_loaded()."""

    @abstractmethod
    def predict(self, **kwargs: Any) -> Any:
        """Score one input. Returns a Pydantic schema defined per model."""

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        if self._loaded:
            return
        self.load()
        self._loaded = True
        logger.info("Scoring model ready: %s (%d features)", self.model_name, len(self.feature_names))

    def describe(self) -> dict[str, Any]:
        """Summary used by the health endpoint."""
        return {
            "model": self.model_name,
            "loaded": self._loaded,
            "features": list(self.feature_names),
        }
