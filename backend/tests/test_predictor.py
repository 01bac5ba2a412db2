"""Tests for the prediction orchestrator."""

import asyncio
import math

import pytest

from models.responses import PredictionResponse
from models.schemas.form_state import FormState
from services import predictor
from services.errors import IncompleteFormError, IncompleteInputError
from services.scoring.score_engine import compute

FULL_FORM = FormState(
    iq="150",
    cgpa="8.5",
    academic="8",
    internship="1",
    comm="8",
    extra="7",
    projects="4",
)


def _predict(state, **kwargs):
    return asyncio.run(predictor.predict(state, **kwargs))


def test_full_form_scores():
    result = _predict(FULL_FORM)
    expected = compute([150, 8.5, 8, 1, 7, 8, 4])

    assert isinstance(result, PredictionResponse)
    assert result.raw_linear_score == pytest.approx(expected.raw_linear_score, abs=1e-9)
    assert result.percentage == pytest.approx(expected.percentage, abs=1e-9)
    assert result.percentage == pytest.approx(
        100 / (1 + math.exp(-result.raw_linear_score)), abs=1e-9
    )
    assert result.tier == "Excellent Prospects"
    assert result.color == "green"
    assert result.message


def test_features_reported_in_model_order():
    result = _predict(FULL_FORM)
    assert list(result.features) == [
        "IQ",
        "CGPA",
        "Academic_Performance",
        "Internship_Experience",
        "Extra_Curricular_Score",
        "Communication_Skills",
        "Projects_Completed",
    ]
    assert result.features["Communication_Skills"] == 8.0
    assert result.features["Extra_Curricular_Score"] == 7.0


def test_low_profile_needs_improvement():
    state = FormState(
        iq="90", cgpa="5", academic="5", internship="0", comm="3", extra="5", projects="0",
    )
    result = _predict(state)
    assert result.percentage < 60
    assert result.tier == "Needs Improvement"


def test_incomplete_form_rejected():
    state = FULL_FORM.model_copy(update={"cgpa": "", "projects": ""})
    with pytest.raises(IncompleteFormError) as exc:
        _predict(state)
    assert exc.value.fields == ["cgpa", "projects"]


def test_unparsable_scores_as_zero_by_default():
    state = FULL_FORM.model_copy(update={"iq": "abc"})
    result = _predict(state)
    assert result.features["IQ"] == 0.0
    assert result.raw_linear_score == pytest.approx(
        compute([0, 8.5, 8, 1, 7, 8, 4]).raw_linear_score
    )


def test_strict_mode_rejects_unparsable():
    state = FULL_FORM.model_copy(update={"iq": "abc"})
    with pytest.raises(IncompleteInputError):
        _predict(state, strict=True)


def test_overflowing_score_reported_without_raw_value():
    state = FULL_FORM.model_copy(update={"cgpa": "1.7e308"})
    result = _predict(state)
    assert result.raw_linear_score is None
    assert result.percentage == 100.0
    assert result.tier == "Excellent Prospects"
