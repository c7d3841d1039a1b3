"""Repositories over the in-memory document of a Unit of Work."""

from __future__ import annotations

from .base import BaseRepository
from .chirp import ChirpRepository
from .refresh_token import RefreshTokenRepository
from .user import UserRepository

__all__ = [
    "BaseRepository",
    "ChirpRepository",
    "RefreshTokenRepository",
    "UserRepository",
]
