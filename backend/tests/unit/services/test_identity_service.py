"""Unit tests for IdentityService."""

from __future__ import annotations

from dataclasses import fields

import pytest

from chirpy.services._shared.errors import (
    AuthError,
    AuthFailure,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from chirpy.services.identity import UserCreateIn, UserPublicOut, UserUpdateIn


class TestIdentityService:
    """Validate IdentityService behaviours for the User aggregate."""

    # --------------------------------------------------------------------- #
    # Registration
    # --------------------------------------------------------------------- #

    def test_create_user(self, identity_service, store, faker):
        email = faker.email()

        out = identity_service.create_user(UserCreateIn(email=email, password="password123"))

        assert out.email == email
        assert out.is_chirpy_red is False
        stored = store.read().users[out.id]
        assert stored.verify_password("password123")

    def test_output_never_carries_password(self, identity_service, faker):
        dto = UserCreateIn(email=faker.email(), password="hunter2-secret")
        out = identity_service.create_user(dto)

        assert {f.name for f in fields(UserPublicOut)} == {"id", "email", "is_chirpy_red"}
        assert "hunter2-secret" not in repr(out)

    def test_duplicate_email_conflicts_without_mutation(self, identity_service, store, faker):
        email = faker.email()
        identity_service.create_user(UserCreateIn(email=email, password="first"))
        before = store.read()

        with pytest.raises(ConflictError):
            identity_service.create_user(UserCreateIn(email=email, password="second"))

        assert store.read() == before

    def test_email_uniqueness_is_case_sensitive(self, identity_service):
        identity_service.create_user(UserCreateIn(email="Case@example.com", password="pw"))
        identity_service.create_user(UserCreateIn(email="case@example.com", password="pw"))

    @pytest.mark.parametrize(("email", "password"), [("", "pw"), ("a@example.com", "")])
    def test_empty_credentials_are_invalid(self, identity_service, email, password):
        with pytest.raises(ValidationError):
            identity_service.create_user(UserCreateIn(email=email, password=password))

    # --------------------------------------------------------------------- #
    # Update
    # --------------------------------------------------------------------- #

    def test_update_replaces_credentials(self, identity_service, user, faker):
        new_email = faker.email()

        out = identity_service.update_user(
            user.id, UserUpdateIn(email=new_email, password="changed")
        )

        assert out.email == new_email
        assert identity_service.authenticate(new_email, "changed").id == user.id

    def test_update_to_own_email_is_allowed(self, identity_service, user):
        out = identity_service.update_user(user.id, UserUpdateIn(email=user.email, password="x"))
        assert out.email == user.email

    def test_update_to_taken_email_conflicts(self, identity_service, user, faker):
        other = identity_service.create_user(UserCreateIn(email=faker.email(), password="pw"))

        with pytest.raises(ConflictError):
            identity_service.update_user(user.id, UserUpdateIn(email=other.email, password="x"))

    def test_update_missing_user(self, identity_service):
        with pytest.raises(NotFoundError):
            identity_service.update_user(999, UserUpdateIn(email="a@example.com", password="x"))

    # --------------------------------------------------------------------- #
    # Authentication
    # --------------------------------------------------------------------- #

    def test_authenticate_valid_credentials(self, identity_service, user, user_password):
        out = identity_service.authenticate(user.email, user_password)
        assert out.id == user.id

    @pytest.mark.parametrize("wrong", ["email", "password"])
    def test_authenticate_failures_look_the_same(
        self, identity_service, user, user_password, wrong
    ):
        email = "nobody@example.com" if wrong == "email" else user.email
        password = "nope" if wrong == "password" else user_password

        with pytest.raises(AuthError) as excinfo:
            identity_service.authenticate(email, password)

        assert excinfo.value.reason is AuthFailure.INVALID_CREDENTIALS

    # --------------------------------------------------------------------- #
    # Upgrade
    # --------------------------------------------------------------------- #

    def test_activate_upgrade_is_idempotent(self, identity_service, user):
        identity_service.activate_upgrade(user.id)
        identity_service.activate_upgrade(user.id)

        assert identity_service.get_user(user.id).is_chirpy_red is True

    def test_activate_upgrade_unknown_user(self, identity_service):
        with pytest.raises(NotFoundError):
            identity_service.activate_upgrade(999)
