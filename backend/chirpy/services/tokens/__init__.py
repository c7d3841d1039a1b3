"""Refresh token revocation service."""

from .service import RefreshTokenService

__all__ = ["RefreshTokenService"]
