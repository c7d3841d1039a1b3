"""Session lifecycle service."""

from .dto import AccessTokenOut, LoginIn, RevokedTokenOut, SessionOut
from .service import AuthService

__all__ = ["AccessTokenOut", "AuthService", "LoginIn", "RevokedTokenOut", "SessionOut"]
