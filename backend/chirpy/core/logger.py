"""
Structured JSON logging for Chirpy.

One line per record on stdout. Besides the basic fields every record carries
the request id of the HTTP request it was emitted from (``None`` outside a
request). Modules attach context through ``extra=``; the formatter only keeps
the keys it knows about:

- request timing: ``endpoint``, ``elapsed_ms``
- domain ids: ``user_id``, ``chirp_id``
- authentication: ``auth_reason``
- document store: ``store_path`` and ``storage_kind``, rendered together as a
  nested ``"store"`` object (see :func:`store_extra`)

This module is also the single owner of request-id handling: errors and
responses read the id through :func:`ensure_request_id`.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from flask import Flask, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
# Checked in order; werkzeug header lookup is case-insensitive.
INBOUND_ID_HEADERS = (REQUEST_ID_HEADER, "X-Correlation-ID")

FLAT_EXTRAS = ("endpoint", "elapsed_ms", "user_id", "chirp_id", "auth_reason")
STORE_EXTRAS = {"store_path": "path", "storage_kind": "kind"}


def store_extra(path: str | os.PathLike[str], kind: Enum | None = None) -> dict[str, Any]:
    """
    Build the ``extra=`` mapping for a document store log call.

    :param path: Location of the JSON document.
    :param kind: Failure kind (a :class:`~chirpy.services._shared.errors.StorageFailure`)
        for error records; omitted for routine events.
    :returns: Keys understood by :class:`JSONFormatter`.
    :rtype: dict
    """
    extra: dict[str, Any] = {"store_path": str(path)}
    if kind is not None:
        extra["storage_kind"] = kind.value
    return extra


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        for key in FLAT_EXTRAS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)

        store = {
            out: getattr(record, attr) for attr, out in STORE_EXTRAS.items() if hasattr(record, attr)
        }
        if store:
            payload["store"] = store

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Stamp ``request_id`` on every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


def ensure_request_id() -> str:
    """
    Return the id of the current request, assigning one on first use.

    An inbound ``X-Request-ID`` (or ``X-Correlation-ID``) wins; otherwise a
    UUID4 is generated. The value is cached in ``g.request_id`` so logs,
    problem responses and the echoed header agree. Outside a request a fresh
    UUID4 is returned and nothing is cached.
    """
    if not has_request_context():
        return str(uuid4())

    cached = g.get("request_id")
    if cached:
        return cached

    inbound = next(
        (value for value in (request.headers.get(h) for h in INBOUND_ID_HEADERS) if value),
        None,
    )
    g.request_id = inbound or str(uuid4())
    return g.request_id


def configure_logging(level: str | int = "INFO") -> None:
    """Route the root logger to stdout in JSON, replacing existing handlers."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)


def init_app(app: Flask) -> None:
    """Seed the request id before each request and echo it on the response."""

    app.logger.addFilter(RequestIdFilter())

    @app.before_request
    def _seed_request_id() -> None:
        ensure_request_id()

    @app.after_request
    def _echo_request_id(response):
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = [
    "JSONFormatter",
    "RequestIdFilter",
    "configure_logging",
    "ensure_request_id",
    "init_app",
    "store_extra",
]
