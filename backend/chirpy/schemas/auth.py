"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields


class LoginSchema(Schema):
    """Input payload for authenticating a user.

    Both fields are free-form: an address that is not email-shaped is just a
    lookup miss and ends as the same 401 as a wrong password.
    """

    email = fields.String(required=True)
    password = fields.String(required=True)


class SessionSchema(Schema):
    """Response payload of a successful login."""

    id = fields.Integer(required=True)
    email = fields.Email(required=True)
    is_chirpy_red = fields.Boolean(required=True)
    token = fields.String(required=True)
    refresh_token = fields.String(required=True)


class TokenSchema(Schema):
    """Response payload carrying a single token (new access or revoked refresh)."""

    token = fields.String(required=True)
