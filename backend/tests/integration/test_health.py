"""Integration tests for the health endpoint."""

from __future__ import annotations


def test_health_endpoint(client) -> None:
    """Health check should return OK payload."""

    resp = client.get("/api/healthz")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok", "store": "ok"}


def test_health_reports_broken_store(client, app_store) -> None:
    app_store.path.write_text("{broken", encoding="utf-8")

    resp = client.get("/api/healthz")

    assert resp.status_code == 200
    assert resp.get_json()["store"] == "fail"
