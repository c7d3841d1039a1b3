"""Billing provider webhooks."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from chirpy.api.deps import auth_service, identity_service, timing
from chirpy.schemas import UPGRADE_EVENT, PolkaWebhookSchema

bp = Blueprint("webhooks", __name__)

webhook_schema = PolkaWebhookSchema()


@bp.post("/webhooks")
@timing
def polka_webhook():
    """Activate the upgrade flag on ``user.upgraded``; ignore other events."""

    auth_service().verify_webhook_key(request.headers.get("Authorization"))
    payload = webhook_schema.load(request.get_json(silent=True) or {})
    if payload["event"] != UPGRADE_EVENT:
        current_app.logger.debug("webhook.ignored", extra={"endpoint": request.endpoint})
        return Response(status=200)

    identity_service().activate_upgrade(payload["data"]["user_id"])
    return Response(status=200)
