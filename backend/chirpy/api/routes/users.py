"""User endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from chirpy.api.deps import current_user_id, identity_service, json_response, require_auth, timing
from chirpy.schemas import UserCredentialsSchema, UserSchema
from chirpy.services.identity import UserCreateIn, UserUpdateIn

bp = Blueprint("users", __name__)

user_schema = UserSchema()
credentials_schema = UserCredentialsSchema()


@bp.post("")
@timing
def create_user():
    """Register a new user."""

    payload = credentials_schema.load(request.get_json(silent=True) or {})
    user = identity_service().create_user(UserCreateIn(**payload))
    return json_response({"data": user_schema.dump(user)}, status=201)


@bp.put("")
@require_auth
@timing
def update_user():
    """Replace the authenticated user's email and password."""

    payload = credentials_schema.load(request.get_json(silent=True) or {})
    user = identity_service().update_user(current_user_id(), UserUpdateIn(**payload))
    return json_response({"data": user_schema.dump(user)})
