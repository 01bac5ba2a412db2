"""Score engine output."""

from pydantic import BaseModel, Field


class ScoreResult(BaseModel):
    """Derived per submission, never stored."""
    raw_linear_score: float
    probability: float = Field(ge=0.0, le=1.0)
    percentage: float = Field(ge=0.0, le=100.0)
