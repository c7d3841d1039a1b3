"""
DTOs for IdentityService.

Data Transfer Objects (DTOs) isolate the service layer from the stored
entities; in particular no output DTO carries a password or its hash.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserCreateIn:
    """
    Input DTO for user registration.

    :param email: Login email, stored as given.
    :type email: str
    :param password: Raw password to be hashed.
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class UserUpdateIn:
    """
    Input DTO for replacing a user's credentials.

    :param email: New email.
    :type email: str
    :param password: New raw password.
    :type password: str
    """

    email: str
    password: str


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UserPublicOut:
    """
    Output DTO representing public-safe user data.

    :param id: User identifier.
    :type id: int
    :param email: Email address.
    :type email: str
    :param is_chirpy_red: Upgrade flag.
    :type is_chirpy_red: bool
    """

    id: int
    email: str
    is_chirpy_red: bool
