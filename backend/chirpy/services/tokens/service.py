"""
RefreshTokenService
===================

Server-side revocation table for refresh tokens. A token is usable only while
it is present and not flagged as revoked.
"""

from __future__ import annotations

import logging

from chirpy.services._shared.base import BaseService

log = logging.getLogger(__name__)


class RefreshTokenService(BaseService):
    """Save, check and revoke refresh tokens."""

    def save(self, token: str) -> None:
        """Record a freshly issued refresh token as active."""
        with self.rw_uow() as uow:
            uow.refresh_tokens.register(token)

    def check(self, token: str) -> bool:
        """
        Return ``True`` only for a saved, non-revoked token.

        Unknown tokens are reported the same way as revoked ones.
        """
        with self.ro_uow() as uow:
            return uow.refresh_tokens.is_active(token)

    def revoke(self, token: str) -> None:
        """
        Flag ``token`` as revoked.

        Idempotent; a token that was never saved simply gets a revoked entry.
        """
        with self.rw_uow() as uow:
            known = uow.refresh_tokens.mark_revoked(token)
        if not known:
            log.info("refresh_token.revoked_unknown")
