"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from chirpy.api.deps import json_response, timing
from chirpy.core.extensions import get_store
from chirpy.services._shared.errors import StorageError

bp = Blueprint("health", __name__)


@bp.get("/healthz")
@timing
def healthcheck():
    """Return application and document store health information."""

    store_status = "ok"
    try:
        get_store().read()
    except StorageError:
        current_app.logger.exception("healthcheck.store_error")
        store_status = "fail"
    payload = {"status": "ok", "store": store_status}
    return json_response(payload)
