"""Session endpoints (login / refresh / revoke)."""

from __future__ import annotations

from flask import Blueprint, request

from chirpy.api.deps import auth_service, json_response, timing
from chirpy.schemas import LoginSchema, SessionSchema, TokenSchema
from chirpy.services.auth import LoginIn

bp = Blueprint("auth", __name__)

login_schema = LoginSchema()
session_schema = SessionSchema()
token_schema = TokenSchema()


@bp.post("/login")
@timing
def login():
    """Authenticate credentials and issue an access/refresh token pair."""

    data = login_schema.load(request.get_json(silent=True) or {})
    session = auth_service().login(LoginIn(**data))
    body = session_schema.dump(
        {
            "id": session.user.id,
            "email": session.user.email,
            "is_chirpy_red": session.user.is_chirpy_red,
            "token": session.access_token,
            "refresh_token": session.refresh_token,
        }
    )
    return json_response({"data": body})


@bp.post("/refresh")
@timing
def refresh():
    """Exchange a saved, non-revoked refresh token for a new access token."""

    out = auth_service().refresh(request.headers.get("Authorization"))
    return json_response({"data": token_schema.dump({"token": out.access_token})})


@bp.post("/revoke")
@timing
def revoke():
    """Revoke the presented refresh token."""

    out = auth_service().revoke(request.headers.get("Authorization"))
    return json_response({"data": token_schema.dump({"token": out.revoked_token})})
