"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import LoginSchema, SessionSchema, TokenSchema
from .chirp import ChirpCreateSchema, ChirpListQuerySchema, ChirpSchema
from .user import UserCredentialsSchema, UserSchema
from .webhook import UPGRADE_EVENT, PolkaWebhookSchema

__all__ = [
    "LoginSchema",
    "SessionSchema",
    "TokenSchema",
    "ChirpSchema",
    "ChirpCreateSchema",
    "ChirpListQuerySchema",
    "UserSchema",
    "UserCredentialsSchema",
    "PolkaWebhookSchema",
    "UPGRADE_EVENT",
]
