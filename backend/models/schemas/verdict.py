"""Qualitative feedback attached to a score."""

from pydantic import BaseModel


class Verdict(BaseModel):
    tier: str  # Excellent Prospects, Good Prospects, Needs Improvement
    message: str = ""
    color: str = ""  # green, yellow, red
