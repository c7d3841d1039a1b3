"""Chirp endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from chirpy.api.deps import chirp_service, current_user_id, json_response, require_auth, timing
from chirpy.core.errors import NotFound
from chirpy.schemas import ChirpCreateSchema, ChirpListQuerySchema, ChirpSchema
from chirpy.services.chirps import ChirpCreateIn

bp = Blueprint("chirps", __name__)

chirp_schema = ChirpSchema()
chirp_list_schema = ChirpSchema(many=True)
chirp_create_schema = ChirpCreateSchema()
chirp_query_schema = ChirpListQuerySchema()


@bp.get("")
@timing
def list_chirps():
    """Return chirps, optionally filtered by author, ordered by id."""

    query = chirp_query_schema.load(request.args)
    items = chirp_service().list_chirps(
        author_id=query["author_id"], sort_desc=query["sort_desc"]
    )
    return json_response({"data": chirp_list_schema.dump(items)})


@bp.post("")
@require_auth
@timing
def create_chirp():
    """Post a chirp as the authenticated user."""

    payload = chirp_create_schema.load(request.get_json(silent=True) or {})
    chirp = chirp_service().create_chirp(current_user_id(), ChirpCreateIn(body=payload["body"]))
    return json_response({"data": chirp_schema.dump(chirp)}, status=201)


@bp.get("/<int:chirp_id>")
@timing
def read_chirp(chirp_id: int):
    """Return a single chirp."""

    chirp = chirp_service().read_chirp(chirp_id)
    if chirp is None:
        raise NotFound(f"Chirp not found: {chirp_id}")
    return json_response({"data": chirp_schema.dump(chirp)})


@bp.delete("/<int:chirp_id>")
@require_auth
@timing
def delete_chirp(chirp_id: int):
    """Delete one of the authenticated user's chirps."""

    chirp = chirp_service().delete_chirp(current_user_id(), chirp_id)
    return json_response({"data": chirp_schema.dump(chirp)})
