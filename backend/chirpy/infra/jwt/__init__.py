"""PyJWT-backed token provider."""

from .jwt_token_provider import DEFAULT_LIFETIMES, JWTTokenProvider, parse_bearer_header

__all__ = ["DEFAULT_LIFETIMES", "JWTTokenProvider", "parse_bearer_header"]
