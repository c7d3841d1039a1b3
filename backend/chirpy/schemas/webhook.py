"""Billing webhook payload schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validates_schema

UPGRADE_EVENT = "user.upgraded"


class WebhookDataSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Integer(required=True)


class PolkaWebhookSchema(Schema):
    """Event sent by the billing provider.

    ``data.user_id`` is only required for the upgrade event; other events are
    accepted and ignored.
    """

    class Meta:
        unknown = EXCLUDE

    event = fields.String(required=True)
    data = fields.Nested(WebhookDataSchema, load_default=None)

    @validates_schema
    def require_user_for_upgrade(self, data: dict[str, Any], **_: Any) -> None:
        if data.get("event") == UPGRADE_EVENT and not data.get("data"):
            raise ValidationError("Missing data.user_id for upgrade event.", field_name="data")
