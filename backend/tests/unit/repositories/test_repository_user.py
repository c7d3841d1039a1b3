"""Unit tests for UserRepository."""

from __future__ import annotations

import pytest

from chirpy.uow import DocumentUnitOfWork, ReadOnlyDocumentUnitOfWork


class TestUserRepository:
    """Ensure ``UserRepository`` performs core persistence operations."""

    def test_add_and_get_user(self, store):
        """Create a user and fetch it by email to verify retrieval."""
        with DocumentUnitOfWork(store) as uow:
            created = uow.users.add(email="alice@example.com", password="pw-alice")

        with ReadOnlyDocumentUnitOfWork(store) as uow:
            fetched = uow.users.get_by_email("alice@example.com")
            assert fetched is not None
            assert fetched.id == created.id
            assert fetched.password_hash != "pw-alice"

    def test_email_lookup_is_case_sensitive(self, store):
        with DocumentUnitOfWork(store) as uow:
            uow.users.add(email="Bob@example.com", password="pw")

        with ReadOnlyDocumentUnitOfWork(store) as uow:
            assert uow.users.exists_by_email("Bob@example.com")
            assert not uow.users.exists_by_email("bob@example.com")

    def test_update_credentials_keeps_upgrade_flag(self, store, user):
        with DocumentUnitOfWork(store) as uow:
            uow.users.set_chirpy_red(user.id)
            uow.users.update_credentials(user.id, email="new@example.com", password="newpass")

        with ReadOnlyDocumentUnitOfWork(store) as uow:
            refreshed = uow.users.get(user.id)
            assert refreshed.email == "new@example.com"
            assert refreshed.is_chirpy_red is True
            assert refreshed.verify_password("newpass")

    def test_update_missing_user_raises(self, store):
        with pytest.raises(ValueError), DocumentUnitOfWork(store) as uow:
            uow.users.update_credentials(999, email="x@example.com", password="pw")

    def test_authenticate_valid_and_invalid(self, store, user, user_password):
        """Authenticate with correct credentials and reject invalid attempts."""
        with ReadOnlyDocumentUnitOfWork(store) as uow:
            # valid
            assert uow.users.authenticate(user.email, user_password) is not None
            # wrong password
            assert uow.users.authenticate(user.email, "wrongpass") is None
            # unknown user
            assert uow.users.authenticate("nope@example.com", user_password) is None
