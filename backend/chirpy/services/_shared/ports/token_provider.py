from __future__ import annotations

from typing import Protocol

ACCESS_SCOPE = "chirpy-access"
REFRESH_SCOPE = "chirpy-refresh"


class TokenProvider(Protocol):
    """
    Port for issuing and verifying scoped bearer tokens.

    Both scopes share one signing key; the scope travels in the ``iss`` claim.
    """

    def issue(self, subject: int | str, scope: str) -> str: ...

    def verify(self, token: str, expected_scope: str) -> int:
        """
        Return the integer subject of a valid token.

        :raises AuthError: ``BAD_SIGNATURE``, ``EXPIRED``, ``WRONG_SCOPE`` or
            ``MALFORMED_SUBJECT``.
        """
        ...
