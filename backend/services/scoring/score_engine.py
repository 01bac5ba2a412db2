"""Placement score engine: fixed linear model squashed through a sigmoid.

raw        = INTERCEPT + sum(x[i] * WEIGHTS[i])
probability = 1 / (1 + exp(-raw))
percentage = clamp(probability * 100, 0, 100)

The coefficients were fitted offline on FEATURE_COLUMNS. They are
constants: nothing here trains or updates them.
"""

import logging
import math
from collections.abc import Sequence
from typing import Any

import numpy as np

from models.schemas.feature_vector import FEATURE_COLUMNS, FeatureVector
from models.schemas.score_result import ScoreResult
from services.scoring.base import ScoringModel

logger = logging.getLogger(__name__)

INTERCEPT = -28.841797314668007

WEIGHTS: tuple[float, ...] = (
    0.1079845539174013,     # IQ
    1.225804047346464,      # CGPA
    -0.010188111356505292,  # Academic_Performance
    0.04235407811768269,    # Internship_Experience
    -0.010663467448247333,  # Extra_Curricular_Score
    0.6457323393079181,     # Communication_Skills
    0.6859962350066806,     # Projects_Completed
)


def build_weights(weights: Sequence[float] = WEIGHTS) -> np.ndarray:
    """Read-only float64 weight vector, checked against FEATURE_COLUMNS."""
    array = np.array(weights, dtype=np.float64)
    if array.shape != (len(FEATURE_COLUMNS),):
        raise ValueError(
            f"Expected {len(FEATURE_COLUMNS)} weights ({', '.join(FEATURE_COLUMNS)}), got shape {array.shape}"
        )
    if not np.all(np.isfinite(array)):
        raise ValueError("Weights must be finite")
    array.setflags(write=False)
    return array


def _as_array(features: FeatureVector | Sequence[float]) -> np.ndarray:
    if isinstance(features, FeatureVector):
        values = features.as_list()
    else:
        values = list(features)
    if len(values) != len(FEATURE_COLUMNS):
        raise ValueError(
            f"Expected {len(FEATURE_COLUMNS)} features ({', '.join(FEATURE_COLUMNS)}), got {len(values)}"
        )
    return np.asarray(values, dtype=np.float64)


def linear_score(
    features: FeatureVector | Sequence[float],
    weights: np.ndarray | None = None,
) -> float:
    """Intercept plus weighted feature sum, before squashing."""
    if weights is None:
        weights = build_weights()
    # Huge out-of-range inputs may overflow to +/-inf; the sigmoid absorbs that
    with np.errstate(over="ignore", invalid="ignore"):
        return INTERCEPT + float(np.dot(_as_array(features), weights))


def sigmoid(x: float) -> float:
    """Logistic function, split on sign so exp() never overflows."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def compute(
    features: FeatureVector | Sequence[float],
    weights: np.ndarray | None = None,
) -> ScoreResult:
    """Score a 7-feature vector.

    Total over inputs whose weighted sum is defined; raises ValueError only
    when overflowing terms of opposite sign cancel to NaN.
    """
    raw = linear_score(features, weights)
    if math.isnan(raw):
        raise ValueError("Linear score is undefined for these inputs")
    probability = sigmoid(raw)
    percentage = max(0.0, min(100.0, probability * 100.0))
    return ScoreResult(
        raw_linear_score=raw,
        probability=probability,
        percentage=percentage,
    )


class ScoreEngine(ScoringModel):
    model_name = "placement_linear"
    feature_names = list(FEATURE_COLUMNS)

    def __init__(self) -> None:
        super().__init__()
        self._weights: np.ndarray | None = None

    @property
    def weights(self) -> np.ndarray | None:
        return self._weights

    def load(self) -> None:
        self._weights = build_weights(WEIGHTS)
        logger.debug("Placement weights: %s, intercept %s", self._weights.tolist(), INTERCEPT)

    def predict(self, **kwargs: Any) -> ScoreResult:
        # No-op when handed out by the registry; loads on direct construction
        self.ensure_loaded()
        features: FeatureVector | Sequence[float] = kwargs["features"]
        return compute(features, self._weights)
