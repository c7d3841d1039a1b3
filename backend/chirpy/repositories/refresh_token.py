"""Refresh token revocation table."""

from __future__ import annotations

from chirpy.repositories.base import BaseRepository


class RefreshTokenRepository(BaseRepository):
    """
    Map of every refresh token ever issued to its ``revoked`` flag.

    Entries are never deleted, only flipped to revoked.
    """

    def register(self, token: str) -> None:
        """Record ``token`` as active."""
        self._touch()
        self.document.refresh_tokens[token] = False

    def is_active(self, token: str) -> bool:
        """``True`` only for a known, non-revoked token."""
        revoked = self.document.refresh_tokens.get(token)
        return revoked is False

    def mark_revoked(self, token: str) -> bool:
        """
        Flag ``token`` as revoked, creating the entry if needed.

        :returns: ``True`` if the token was known before.
        """
        existed = token in self.document.refresh_tokens
        self._touch()
        self.document.refresh_tokens[token] = True
        return existed

    def count(self) -> int:
        return len(self.document.refresh_tokens)
