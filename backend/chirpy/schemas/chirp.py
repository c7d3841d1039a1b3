"""Chirp-related Marshmallow schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, fields, post_load


class ChirpSchema(Schema):
    """Serialized chirp."""

    id = fields.Integer(dump_only=True)
    author_id = fields.Integer(dump_only=True)
    body = fields.String(required=True)


class ChirpCreateSchema(Schema):
    """Input payload for posting a chirp.

    Length is enforced by the service so that it applies to the body exactly as
    posted.
    """

    body = fields.String(required=True)


class ChirpListQuerySchema(Schema):
    """Parse ``author_id`` and ``sort`` query parameters.

    An ``author_id`` that is not an integer means "no filter"; any ``sort``
    value other than ``desc`` means ascending.
    """

    class Meta:
        unknown = EXCLUDE

    author_id = fields.String(load_default=None)
    sort = fields.String(load_default="asc")

    @post_load
    def normalize(self, data: dict[str, Any], **_: Any) -> dict[str, Any]:
        raw = data.get("author_id")
        try:
            data["author_id"] = int(raw) if raw is not None else None
        except ValueError:
            data["author_id"] = None
        data["sort_desc"] = str(data.pop("sort", "")).strip().lower() == "desc"
        return data
