"""
Tests for the Flask JSON API
"""
import pytest

from api import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["status"] == "ok"


def test_api_info_lists_endpoints(client):
    body = client.get("/api").get_json()
    assert body["success"] is True
    assert "/api/evaluate" in body["data"]["endpoints"]


@pytest.mark.parametrize("payload, expected", [
    ({"text": "12", "key": "+"}, "12+"),
    ({"text": "12+", "key": "×"}, "12*"),
    ({"text": "12", "key": "x"}, "12"),
    ({"text": "12", "edit": {"kind": "dot"}}, "12."),
    ({"text": "12", "edit": {"kind": "digits", "value": "3a"}}, "12"),
    ({"text": "12", "edit": {"kind": "backspace"}}, "1"),
])
def test_edit(client, payload, expected):
    resp = client.post("/api/edit", json=payload)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["text"] == expected


@pytest.mark.parametrize("payload", [
    {"text": "12", "edit": {"kind": "square"}},
    {"text": "12"},
    {"text": 12, "key": "+"},
    {"text": "12", "key": 5},
    ["12", "+"],
])
def test_edit_rejects_bad_requests(client, payload):
    resp = client.post("/api/edit", json=payload)
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


@pytest.mark.parametrize("url, payload", [
    ("/api/edit", {"key": "5"}),
    ("/api/evaluate", {}),
    ("/api/press", {"key": "="}),
])
def test_missing_text_is_rejected(client, url, payload):
    resp = client.post(url, json=payload)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert body["error"] == "'text' is required"


def test_edit_rejects_non_json(client):
    resp = client.post("/api/edit", data="12+", content_type="text/plain")
    assert resp.status_code == 400


def test_evaluate(client):
    data = client.post("/api/evaluate", json={"text": "2+3*4"}).get_json()["data"]
    assert data["value"] == pytest.approx(14.0)
    assert data["error"] is None
    assert data["display"] == "14"


@pytest.mark.parametrize("text, error", [
    ("5/0", "divide_by_zero"),
    ("5*-", "malformed"),
    ("5..2+3", "malformed"),
])
def test_evaluate_errors(client, text, error):
    data = client.post("/api/evaluate", json={"text": text}).get_json()["data"]
    assert data["value"] is None
    assert data["error"] == error
    assert data["display"] == "Error"


def test_evaluate_empty(client):
    data = client.post("/api/evaluate", json={"text": ""}).get_json()["data"]
    assert data == {"value": None, "error": None, "message": "", "display": ""}


def test_press(client):
    data = client.post("/api/press", json={"text": "12+3.5", "key": "="}).get_json()["data"]
    assert data["text"] == "12+3.5"
    assert data["result"]["display"] == "15.5"

    data = client.post("/api/press", json={"text": "12+", "key": "AC"}).get_json()["data"]
    assert data == {"text": "", "result": None}

    data = client.post("/api/press", json={"text": "12", "key": "."}).get_json()["data"]
    assert data == {"text": "12.", "result": None}
