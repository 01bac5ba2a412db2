import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_score_engine
from api.page import render_page
from config import settings
from models.requests import FieldEditRequest
from models.responses import FieldEditResponse, PredictionResponse
from models.schemas.field_spec import FieldSpec
from models.schemas.form_state import FormState
from services import input_validator, predictor
from services.errors import IncompleteFormError, IncompleteInputError, UnknownFieldError
from services.fields import FIELDS
from services.scoring.base import ScoringModel

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/", response_class=HTMLResponse)
async def index() -> str:
    return render_page(FIELDS, settings.result_delay_ms)


@router.get("/health")
async def health(engine: ScoringModel = Depends(get_score_engine)):
    return {"status": "ok", **engine.describe()}


@router.get("/fields", response_model=list[FieldSpec])
async def fields():
    return FIELDS


@router.post("/form/validate", response_model=FieldEditResponse)
async def validate_field(body: FieldEditRequest):
    # Rejections are silent: 200 with the previous state
    try:
        accepted, state = input_validator.apply_edit(body.state, body.field, body.raw_text)
    except UnknownFieldError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return FieldEditResponse(
        accepted=accepted,
        value=getattr(state, body.field),
        state=state,
        ready=input_validator.is_ready(state),
    )


@router.post("/predict", response_model=PredictionResponse)
@limiter.limit(settings.predict_rate_limit)
async def predict(request: Request, body: FormState):
    try:
        return await predictor.predict(body, strict=settings.strict_inputs)
    except (IncompleteFormError, IncompleteInputError) as e:
        raise HTTPException(status_code=400, detail={"message": str(e), "fields": e.fields})
    except Exception:
        logger.exception("Prediction failed")
        raise HTTPException(status_code=500, detail="Prediction failed")
