# chirpy/infra/jwt/jwt_token_provider.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

import jwt

from chirpy.services._shared.errors import AuthError, AuthFailure
from chirpy.services._shared.ports import ACCESS_SCOPE, REFRESH_SCOPE, TokenProvider

DEFAULT_LIFETIMES: Mapping[str, timedelta] = {
    ACCESS_SCOPE: timedelta(minutes=60),
    REFRESH_SCOPE: timedelta(minutes=86400),
}


def parse_bearer_header(value: str | None) -> str:
    """
    Extract the raw token from an ``Authorization`` header value.

    The value must have exactly two space-separated parts, ``<scheme> <token>``.
    The scheme word itself is not checked.

    :param value: Raw header value (``None`` when the header is absent).
    :returns: The token part.
    :raises AuthError: ``MALFORMED_HEADER`` for any other shape.
    """
    if not value:
        raise AuthError(AuthFailure.MALFORMED_HEADER)
    parts = value.split(" ")
    if len(parts) != 2 or not parts[1]:
        raise AuthError(AuthFailure.MALFORMED_HEADER)
    return parts[1]


@dataclass(slots=True)
class JWTTokenProvider(TokenProvider):
    """
    HS256 adapter built on PyJWT.

    One secret signs both scopes; ``iss`` carries the scope tag and only the
    lifetimes differ.

    :param secret: Shared signing key.
    :param lifetimes: Lifetime per scope tag.
    :param algorithm: JWS algorithm.
    """

    secret: str
    lifetimes: Mapping[str, timedelta] = field(default_factory=lambda: dict(DEFAULT_LIFETIMES))
    algorithm: str = "HS256"

    def issue(self, subject: int | str, scope: str) -> str:
        lifetime = self.lifetimes.get(scope)
        if lifetime is None:
            raise ValueError(f"Unknown token scope: {scope!r}")
        issued_at = datetime.now(UTC)
        claims: dict[str, Any] = {
            "iss": scope,
            "sub": str(subject),
            "iat": issued_at,
            "exp": issued_at + lifetime,
            # Two tokens minted in the same second must still differ
            "jti": uuid4().hex,
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str, expected_scope: str) -> int:
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iss", "sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthError(AuthFailure.EXPIRED) from exc
        except jwt.InvalidTokenError as exc:
            # Bad signature, undecodable token or missing claims
            raise AuthError(AuthFailure.BAD_SIGNATURE) from exc

        if claims.get("iss") != expected_scope:
            raise AuthError(AuthFailure.WRONG_SCOPE)

        try:
            return int(claims["sub"])
        except (TypeError, ValueError) as exc:
            raise AuthError(AuthFailure.MALFORMED_SUBJECT) from exc
