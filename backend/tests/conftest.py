"""Pytest fixtures for an isolated, per-test JSON document store.

Every test gets its own document file under ``tmp_path`` so data never leaks
between cases; nothing is shared at session scope except the Faker instance.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from flask import Flask

from chirpy.core.config import TestingConfig
from chirpy.core.extensions import get_store
from chirpy.factory import create_app
from chirpy.infra.jwt import JWTTokenProvider
from chirpy.models import User
from chirpy.services.auth import AuthService
from chirpy.services.chirps import ChirpService
from chirpy.services.identity import IdentityService
from chirpy.services.tokens import RefreshTokenService
from chirpy.storage import JSONDocumentStore
from tests.factories import seed_document
from tests.factories.user import DEFAULT_PASSWORD, UserFactory
from tests.helpers.auth import bearer, issue_access_token, issue_refresh_token


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    """Location of the document used by the current test (not created yet)."""
    return tmp_path / "database.json"


@pytest.fixture()
def store(db_path: Path) -> JSONDocumentStore:
    """Return a store over an empty (missing) document."""
    return JSONDocumentStore(db_path)


@pytest.fixture()
def app(db_path: Path) -> Flask:
    """Create a Flask application configured for testing.

    Returns
    -------
    flask.Flask
        Application whose store points at this test's document.
    """
    config = type("PerTestConfig", (TestingConfig,), {"DATABASE_PATH": str(db_path)})
    application = create_app(config, instance_relative_config=False)
    application.logger.setLevel("WARNING")
    return application


@pytest.fixture()
def app_store(app: Flask) -> JSONDocumentStore:
    """The store instance owned by ``app``."""
    return get_store(app)


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


# --------------------------------------------------------------------------- #
# Services
# --------------------------------------------------------------------------- #


@pytest.fixture()
def token_provider() -> JWTTokenProvider:
    return JWTTokenProvider(secret=TestingConfig.JWT_SECRET)


@pytest.fixture()
def identity_service(store: JSONDocumentStore) -> IdentityService:
    return IdentityService(store=store)


@pytest.fixture()
def chirp_service(store: JSONDocumentStore) -> ChirpService:
    return ChirpService(store=store)


@pytest.fixture()
def refresh_token_service(store: JSONDocumentStore) -> RefreshTokenService:
    return RefreshTokenService(store=store)


@pytest.fixture()
def auth_service(store: JSONDocumentStore, token_provider: JWTTokenProvider) -> AuthService:
    return AuthService(
        store=store,
        token_provider=token_provider,
        webhook_api_key=TestingConfig.POLKA_API_KEY,
    )


# --------------------------------------------------------------------------- #
# Users & tokens
# --------------------------------------------------------------------------- #


@pytest.fixture()
def user(store: JSONDocumentStore) -> User:
    """Persist and return a user in the unit-test store."""
    u = UserFactory()
    seed_document(store, users=[u])
    return u


@pytest.fixture()
def api_user(app_store: JSONDocumentStore) -> User:
    """Persist and return a user in the app's store."""
    u = UserFactory()
    seed_document(app_store, users=[u])
    return u


@pytest.fixture()
def user_password() -> str:
    return DEFAULT_PASSWORD


@pytest.fixture()
def auth_header(app: Flask, api_user: User) -> dict[str, str]:
    """Authorization header carrying an access token for ``api_user``."""
    with app.app_context():
        return bearer(issue_access_token(api_user.id))


@pytest.fixture()
def refresh_header(
    app: Flask, api_user: User, app_store: JSONDocumentStore
) -> dict[str, str]:
    """Authorization header carrying a saved refresh token for ``api_user``."""
    with app.app_context():
        token = issue_refresh_token(api_user.id)
    RefreshTokenService(store=app_store).save(token)
    return bearer(token)


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
