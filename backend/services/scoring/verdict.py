"""Tier classification and feedback for a placement percentage."""

from models.schemas.verdict import Verdict

EXCELLENT = "Excellent Prospects"
GOOD = "Good Prospects"
NEEDS_IMPROVEMENT = "Needs Improvement"

EXCELLENT_THRESHOLD = 80.0
GOOD_THRESHOLD = 60.0

_MESSAGES = {
    EXCELLENT: "Excellent! You have a high probability of successful placement. Keep up the great work!",
    GOOD: "Good prospects! Consider improving in areas where you scored lower to increase your chances.",
    NEEDS_IMPROVEMENT: "Focus on skill development and gaining more experience to improve your placement prospects.",
}

_COLORS = {
    EXCELLENT: "green",
    GOOD: "yellow",
    NEEDS_IMPROVEMENT: "red",
}


def classify_tier(percentage: float) -> str:
    if percentage >= EXCELLENT_THRESHOLD:
        return EXCELLENT
    if percentage >= GOOD_THRESHOLD:
        return GOOD
    return NEEDS_IMPROVEMENT


def build_verdict(percentage: float) -> Verdict:
    tier = classify_tier(percentage)
    return Verdict(tier=tier, message=_MESSAGES[tier], color=_COLORS[tier])
