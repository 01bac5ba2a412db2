"""Shared dependencies for API routes."""

from services.scoring.base import ScoringModel
from services.scoring.registry import PLACEMENT_MODEL, get_model


def get_score_engine() -> ScoringModel:
    return get_model(PLACEMENT_MODEL)
