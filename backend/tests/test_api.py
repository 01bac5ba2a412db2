from fastapi.testclient import TestClient

from config import settings
from main import app

client = TestClient(app)

FULL_FORM = {
    "iq": "150",
    "cgpa": "8.5",
    "academic": "8",
    "internship": "1",
    "comm": "8",
    "extra": "7",
    "projects": "4",
}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["model"] == "placement_linear"


def test_index_renders_form():
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    html = response.text
    assert "Placement Predictor" in html
    for key in FULL_FORM:
        assert f'id="{key}"' in html
    assert 'step="0.1"' in html
    assert "$" not in html


def test_fields_catalogue():
    response = client.get("/fields")
    assert response.status_code == 200
    data = response.json()
    assert [f["key"] for f in data] == list(FULL_FORM)
    assert data[0]["max"] == 200
    assert data[1]["step"] == 0.1


def test_validate_accepts_in_range_edit():
    response = client.post(
        "/form/validate",
        json={"field": "cgpa", "raw_text": "9.1", "state": {}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["accepted"] is True
    assert data["value"] == "9.1"
    assert data["state"]["cgpa"] == "9.1"
    assert data["ready"] is False


def test_validate_rejects_silently():
    response = client.post(
        "/form/validate",
        json={"field": "projects", "raw_text": "51", "state": {"projects": "12"}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["accepted"] is False
    assert data["value"] == "12"
    assert data["state"]["projects"] == "12"


def test_validate_reports_ready_when_last_field_filled():
    state = dict(FULL_FORM, projects="")
    response = client.post(
        "/form/validate",
        json={"field": "projects", "raw_text": "4", "state": state},
    )
    assert response.json()["ready"] is True


def test_validate_unknown_field():
    response = client.post(
        "/form/validate",
        json={"field": "salary", "raw_text": "10"},
    )
    assert response.status_code == 422


def test_predict():
    response = client.post("/predict", json=FULL_FORM)
    assert response.status_code == 200
    data = response.json()
    assert 0 <= data["percentage"] <= 100
    assert 0 <= data["probability"] <= 1
    assert data["tier"] in ("Excellent Prospects", "Good Prospects", "Needs Improvement")
    assert data["color"] in ("green", "yellow", "red")
    assert len(data["features"]) == 7


def test_predict_rejects_incomplete_form():
    response = client.post("/predict", json=dict(FULL_FORM, comm=""))
    assert response.status_code == 400
    assert response.json()["detail"]["fields"] == ["comm"]


def test_predict_strict_mode(monkeypatch):
    monkeypatch.setattr(settings, "strict_inputs", True)
    response = client.post("/predict", json=dict(FULL_FORM, iq="abc"))
    assert response.status_code == 400
    assert response.json()["detail"]["fields"] == ["iq"]


def test_predict_lenient_mode_scores_unparsable_as_zero():
    response = client.post("/predict", json=dict(FULL_FORM, iq="abc"))
    assert response.status_code == 200
    assert response.json()["features"]["IQ"] == 0.0


def test_health_reports_loaded_engine():
    data = client.get("/health").json()
    assert data["loaded"] is True
    assert len(data["features"]) == 7


def test_index_queues_edits_before_predicting():
    html = client.get("/").text
    assert "editQueue = editQueue.then(" in html
    assert "await editQueue;" in html
    assert "catch (err)" in html


def test_validate_accepts_long_in_range_text():
    response = client.post(
        "/form/validate",
        json={"field": "projects", "raw_text": "0" * 40 + "5", "state": {}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["accepted"] is True
    assert data["state"]["projects"] == "0" * 40 + "5"


def test_validate_rejects_long_garbage_silently():
    response = client.post(
        "/form/validate",
        json={"field": "projects", "raw_text": "x" * 40, "state": {"projects": "12"}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["accepted"] is False
    assert data["value"] == "12"


def test_predict_accepts_long_values():
    response = client.post("/predict", json=dict(FULL_FORM, projects="0" * 40 + "5"))
    assert response.status_code == 200
    assert response.json()["features"]["Projects_Completed"] == 5.0


def test_predict_reads_integer_prefix():
    response = client.post("/predict", json=dict(FULL_FORM, projects="5e1"))
    assert response.json()["features"]["Projects_Completed"] == 5.0


def test_predict_overflowing_input():
    response = client.post("/predict", json=dict(FULL_FORM, cgpa="1.7e308"))
    assert response.status_code == 200
    data = response.json()
    assert data["percentage"] == 100.0
    assert data["raw_linear_score"] is None
