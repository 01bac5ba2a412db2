from pydantic import BaseModel

from models.schemas.form_state import FormState


class FieldEditResponse(BaseModel):
    accepted: bool
    value: str = ""  # stored text for the field after the edit
    state: FormState = FormState()
    ready: bool = False


class PredictionResponse(BaseModel):
    # None when the weighted sum overflowed; JSON has no infinity
    raw_linear_score: float | None = 0.0
    probability: float = 0.0
    percentage: float = 0.0
    tier: str = ""
    message: str = ""
    color: str = ""
    # Coerced inputs keyed by model column, in coefficient order
    features: dict[str, float] = {}
