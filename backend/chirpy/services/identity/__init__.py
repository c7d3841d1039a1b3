"""User aggregate service."""

from .dto import UserCreateIn, UserPublicOut, UserUpdateIn
from .service import IdentityService

__all__ = ["IdentityService", "UserCreateIn", "UserPublicOut", "UserUpdateIn"]
