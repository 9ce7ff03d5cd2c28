from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client():
    from api import app

    return TestClient(app)


def test_health(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


@pytest.mark.parametrize(
    "body, kind, roots, summary",
    [
        ({"a": 1, "b": 0, "c": -1}, "two", [-1.0, 1.0], "two roots: -1, 1"),
        ({"a": 1, "b": -2, "c": 1}, "one", [1.0], "one root: 1"),
        ({"a": 1, "b": 0, "c": 1}, "none", [], "no roots"),
        ({"a": 0, "b": 0, "c": 0}, "infinite", [], "infinite roots"),
    ],
)
def test_solve_endpoint(client, body, kind, roots, summary) -> None:
    r = client.post("/solve", json=body)
    assert r.status_code == 200
    data = r.json()
    assert data["kind"] == kind
    assert data["roots"] == roots
    assert data["summary"] == summary
    if roots:
        assert data["residual_norm"] == pytest.approx(0.0, abs=1e-12)
    else:
        assert data["residual_norm"] is None


def test_solve_rejects_non_finite_and_missing(client) -> None:
    r = client.post("/solve", content='{"a": NaN, "b": 0, "c": 0}', headers={"content-type": "application/json"})
    assert r.status_code == 422
    detail = r.json()["detail"]
    assert detail[0]["loc"] == ["body", "a"]
    assert detail[0]["input"] == "nan"

    r = client.post("/solve", content='{"a": 1, "b": -Infinity, "c": 0}', headers={"content-type": "application/json"})
    assert r.status_code == 422
    assert r.json()["detail"][0]["loc"] == ["body", "b"]

    r = client.post("/solve", json={"a": 1, "b": 2})
    assert r.status_code == 422


def test_solve_rejects_overflowing_roots(client) -> None:
    r = client.post("/solve", json={"a": 1e200, "b": 1e200, "c": 1e200})
    assert r.status_code == 422
    assert "overflow" in r.json()["detail"]
