"""Lazy-loading registry of scoring models.

Global singleton per model name, created and loaded on first use.
"""

from services.scoring.base import ScoringModel

PLACEMENT_MODEL = "placement_linear"

_registry: dict[str, ScoringModel] = {}


def _create_model(name: str) -> ScoringModel:
    """Factory: create a model by name with deferred imports."""
    if name == PLACEMENT_MODEL:
        from services.scoring.score_engine import ScoreEngine
        return ScoreEngine()
    raise ValueError(f"Unknown model: {name}")


def get_model(name: str = PLACEMENT_MODEL) -> ScoringModel:
    """Get a model by name, creating and loading it on first access."""
    if name not in _registry:
        _registry[name] = _create_model(name)
    model = _registry[name]
    model.ensure_loaded()
    return model


def clear() -> None:
    """Drop all model instances. Useful for testing."""
    _registry.clear()
