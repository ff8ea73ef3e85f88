"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from recipeflow.main import app
from recipeflow.samples import sample_rects
from tests.conftest import COOKIES, recipe_payload, rects_payload


client = TestClient(app)


def _flow_body(**extra) -> dict:
    ingredient_rects, instruction_rects = sample_rects(COOKIES)
    body = recipe_payload()
    body["ingredient_rects"] = rects_payload(ingredient_rects)
    body["instruction_rects"] = rects_payload(instruction_rects)
    body.update(extra)
    return body


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["transforms_registered"] == 7


def test_sample():
    data = client.get("/api/sample").json()
    assert data["title"] == "Ultimate Chocolate Chip Cookies"
    assert len(data["ingredients"]) == 9
    assert len(data["instructions"]) == 8
    assert data["instructions"][0]["step"] == 1


def test_links():
    response = client.post("/api/links", json=recipe_payload())
    assert response.status_code == 200
    data = response.json()
    pairs = {(l["ingredient_index"], l["instruction_index"]) for l in data["links"]}
    assert (0, 1) in pairs
    assert (8, 5) in pairs
    # Chocolate chips only feed step 6 (cyan)
    assert data["connection_colors"]["8"] == ["#32ADE6"]


def test_links_empty_recipe():
    data = client.post("/api/links", json={"ingredients": [], "instructions": []}).json()
    assert data["links"] == []
    assert data["connection_colors"] == {}


def test_links_rejects_step_zero():
    body = {"ingredients": [], "instructions": [{"step": 0, "description": "x"}]}
    assert client.post("/api/links", json=body).status_code == 422


def test_flow():
    response = client.post("/api/flow", json=_flow_body())
    assert response.status_code == 200
    data = response.json()
    assert len(data["shapes"]) == len(data["links"])
    assert data["curve_apex_length"] == 30.0
    for shape in data["shapes"]:
        assert shape["d"].startswith("M")
        assert 0.4 <= shape["opacity"] <= 0.8


def test_flow_without_rects_has_links_but_no_shapes():
    data = client.post("/api/flow", json=recipe_payload()).json()
    assert data["links"]
    assert data["shapes"] == []


def test_flow_preset_and_override():
    data = client.post("/api/flow", json=_flow_body(preset="bouncy")).json()
    assert data["curve_apex_length"] == 40.0
    data = client.post("/api/flow", json=_flow_body(preset="bouncy", curve_apex_length=12)).json()
    assert data["curve_apex_length"] == 12.0


def test_flow_unknown_preset():
    response = client.post("/api/flow", json=_flow_body(preset="wobbly"))
    assert response.status_code == 400


def test_flow_svg():
    response = client.post("/api/flow/svg", json=_flow_body(width=600, height=400))
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert "<svg" in response.text
    assert "<path" in response.text
