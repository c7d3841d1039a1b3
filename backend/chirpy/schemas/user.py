"""User-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class UserSchema(Schema):
    """Public representation of a user; never carries the password."""

    id = fields.Integer(dump_only=True)
    email = fields.Email(required=True)
    is_chirpy_red = fields.Boolean(dump_only=True)


class UserCredentialsSchema(Schema):
    """Input payload for registering or updating a user."""

    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))
