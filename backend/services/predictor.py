"""Prediction orchestrator.

Flow:
    FormState
      ├─ missing_fields()      → IncompleteFormError if any input is empty
      ├─ to_feature_vector()   → FeatureVector (fresh, immutable)
      ├─ ScoreEngine.predict() → ScoreResult
      └─ build_verdict()       → Verdict
                  ↓
         PredictionResponse
"""

import logging
import math

from models.responses import PredictionResponse
from models.schemas.feature_vector import FeatureVector
from models.schemas.form_state import FormState
from models.schemas.score_result import ScoreResult
from services.errors import IncompleteFormError
from services.input_validator import missing_fields, to_feature_vector
from services.scoring.registry import PLACEMENT_MODEL, get_model
from services.scoring.verdict import build_verdict

logger = logging.getLogger(__name__)


async def predict(state: FormState, strict: bool = False) -> PredictionResponse:
    """Score a submitted form.

    Raises IncompleteFormError when any input is empty, and
    IncompleteInputError (strict mode only) when an input is not numeric.
    """
    missing = missing_fields(state)
    if missing:
        raise IncompleteFormError(missing)

    features: FeatureVector = to_feature_vector(state, strict=strict)
    logger.debug("Input data: %s", features.as_list())

    engine = get_model(PLACEMENT_MODEL)
    result: ScoreResult = engine.predict(features=features)
    logger.debug(
        "Raw prediction: %s, sigmoid: %s, percentage: %s",
        result.raw_linear_score, result.probability, result.percentage,
    )

    verdict = build_verdict(result.percentage)

    return PredictionResponse(
        raw_linear_score=result.raw_linear_score if math.isfinite(result.raw_linear_score) else None,
        probability=result.probability,
        percentage=result.percentage,
        tier=verdict.tier,
        message=verdict.message,
        color=verdict.color,
        features=features.model_dump(by_alias=True),
    )
