"""Pydantic contracts shared by the validator, score engine and API."""

from models.schemas.feature_vector import FEATURE_COLUMNS, FeatureVector
from models.schemas.field_spec import FieldSpec
from models.schemas.form_state import FormState
from models.schemas.score_result import ScoreResult
from models.schemas.verdict import Verdict

__all__ = [
    "FEATURE_COLUMNS",
    "FeatureVector",
    "FieldSpec",
    "FormState",
    "ScoreResult",
    "Verdict",
]
