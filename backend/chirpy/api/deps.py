"""Shared API helpers for service wiring and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

from flask import Response, current_app, g, jsonify, request

from chirpy.core.extensions import get_store, get_token_provider
from chirpy.services._shared.base import ServiceContext
from chirpy.services.auth import AuthService
from chirpy.services.chirps import ChirpService
from chirpy.services.identity import IdentityService

F = TypeVar("F", bound=Callable[..., Any])


def _context() -> ServiceContext:
    return ServiceContext(
        actor_id=getattr(g, "user_id", None),
        request_id=getattr(g, "request_id", None),
    )


def auth_service() -> AuthService:
    """Return an :class:`AuthService` bound to the app's store and token provider."""

    return AuthService(
        store=get_store(),
        token_provider=get_token_provider(),
        webhook_api_key=current_app.config.get("POLKA_API_KEY", ""),
        ctx=_context(),
    )


def chirp_service() -> ChirpService:
    return ChirpService(store=get_store(), ctx=_context())


def identity_service() -> IdentityService:
    return IdentityService(store=get_store(), ctx=_context())


def require_auth(func: F) -> F:
    """Ensure the request carries a valid access token.

    The authenticated user id is stored in ``g.user_id``; any failure is raised
    as an ``AuthError`` and rendered as an opaque 401.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        g.user_id = auth_service().authenticate_access(request.headers.get("Authorization"))
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_user_id() -> int:
    """Return the id resolved by :func:`require_auth`."""

    user_id = getattr(g, "user_id", None)
    if user_id is None:
        raise RuntimeError("current_user_id() called outside a @require_auth handler.")
    return cast(int, user_id)


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
