"""Process-wide collaborators and initialization helpers."""

from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, current_app

from chirpy.core.logger import store_extra
from chirpy.infra.jwt import JWTTokenProvider
from chirpy.services._shared.ports import ACCESS_SCOPE, REFRESH_SCOPE
from chirpy.storage import JSONDocumentStore

log = logging.getLogger(__name__)

STORE_KEY = "chirpy.store"
TOKEN_PROVIDER_KEY = "chirpy.token_provider"


def init_app(app: Flask) -> None:
    """Build the document store and the token provider for ``app``.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``extensions`` mapping receives one
        :class:`JSONDocumentStore` and one :class:`JWTTokenProvider`. Both are
        created exactly once per application; services receive them
        explicitly through :mod:`chirpy.api.deps`.
    """
    store = JSONDocumentStore(app.config["DATABASE_PATH"])
    if app.config.get("RESET_DATABASE_ON_START") and store.reset():
        log.warning("store.reset_on_start", extra=store_extra(store.path))
    app.extensions[STORE_KEY] = store

    app.extensions[TOKEN_PROVIDER_KEY] = JWTTokenProvider(
        secret=app.config["JWT_SECRET"],
        lifetimes={
            ACCESS_SCOPE: timedelta(minutes=int(app.config["ACCESS_TOKEN_MINUTES"])),
            REFRESH_SCOPE: timedelta(minutes=int(app.config["REFRESH_TOKEN_MINUTES"])),
        },
    )


def get_store(app: Flask | None = None) -> JSONDocumentStore:
    """Return the document store bound to ``app`` (or the current app)."""
    target = app or current_app
    store = target.extensions.get(STORE_KEY)
    if store is None:
        raise RuntimeError("Document store is not initialized. Call init_app() first.")
    return store


def get_token_provider(app: Flask | None = None) -> JWTTokenProvider:
    """Return the token provider bound to ``app`` (or the current app)."""
    target = app or current_app
    provider = target.extensions.get(TOKEN_PROVIDER_KEY)
    if provider is None:
        raise RuntimeError("Token provider is not initialized. Call init_app() first.")
    return provider
