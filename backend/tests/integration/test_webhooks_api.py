"""Integration tests for the billing webhook."""

from __future__ import annotations

from chirpy.core.config import TestingConfig

API_KEY_HEADER = {"Authorization": f"ApiKey {TestingConfig.POLKA_API_KEY}"}


def _event(event: str, user_id: int | None = None) -> dict:
    body: dict = {"event": event}
    if user_id is not None:
        body["data"] = {"user_id": user_id}
    return body


def test_upgrade_event_sets_flag(client, api_user, app_store) -> None:
    resp = client.post(
        "/api/polka/webhooks", json=_event("user.upgraded", api_user.id), headers=API_KEY_HEADER
    )

    assert resp.status_code == 200
    assert resp.data == b""
    assert app_store.read().users[api_user.id].is_chirpy_red is True


def test_other_events_are_ignored(client, api_user, app_store) -> None:
    resp = client.post(
        "/api/polka/webhooks", json=_event("user.payment_failed"), headers=API_KEY_HEADER
    )

    assert resp.status_code == 200
    assert resp.data == b""
    assert app_store.read().users[api_user.id].is_chirpy_red is False


def test_unknown_user_returns_404(client) -> None:
    resp = client.post(
        "/api/polka/webhooks", json=_event("user.upgraded", 999), headers=API_KEY_HEADER
    )
    assert resp.status_code == 404


def test_wrong_api_key_is_rejected(client, api_user) -> None:
    resp = client.post(
        "/api/polka/webhooks",
        json=_event("user.upgraded", api_user.id),
        headers={"Authorization": "ApiKey nope"},
    )
    assert resp.status_code == 401


def test_upgrade_without_user_is_invalid(client) -> None:
    resp = client.post(
        "/api/polka/webhooks", json=_event("user.upgraded"), headers=API_KEY_HEADER
    )
    assert resp.status_code == 422


def test_upgraded_flag_shows_on_login(client, api_user, user_password) -> None:
    client.post(
        "/api/polka/webhooks", json=_event("user.upgraded", api_user.id), headers=API_KEY_HEADER
    )

    resp = client.post("/api/login", json={"email": api_user.email, "password": user_password})

    assert resp.get_json()["data"]["is_chirpy_red"] is True
