# chirpy/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass

from chirpy.services.identity.dto import UserPublicOut

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: User email, matched exactly.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    email: str
    password: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class SessionOut:
    """
    Output DTO of a successful login.

    :param user: Public-safe user data.
    :type user: UserPublicOut
    :param access_token: Encoded access JWT.
    :type access_token: str
    :param refresh_token: Encoded refresh JWT, already saved as active.
    :type refresh_token: str
    """

    user: UserPublicOut
    access_token: str
    refresh_token: str


@dataclass(frozen=True, slots=True)
class AccessTokenOut:
    """New access token minted from a refresh token."""

    access_token: str


@dataclass(frozen=True, slots=True)
class RevokedTokenOut:
    """Echo of the refresh token that was revoked."""

    revoked_token: str
