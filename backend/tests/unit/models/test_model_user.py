"""Unit tests for the User entity."""

from __future__ import annotations

from chirpy.models import User
from tests.factories.user import DEFAULT_PASSWORD, UserFactory


def test_factory_hashes_password() -> None:
    user = UserFactory()

    assert user.password_hash
    assert user.password_hash != DEFAULT_PASSWORD
    assert user.verify_password(DEFAULT_PASSWORD)
    assert not user.verify_password("wrong")


def test_set_password_replaces_hash() -> None:
    user = UserFactory(password="first-pass")
    old_hash = user.password_hash

    user.set_password("second-pass")

    assert user.password_hash != old_hash
    assert user.verify_password("second-pass")
    assert not user.verify_password("first-pass")


def test_to_dict_round_trip() -> None:
    user = UserFactory(is_chirpy_red=True)

    assert User.from_dict(user.to_dict()) == user


def test_password_key_from_first_release_is_read_as_hash() -> None:
    user = User.from_dict({"id": 3, "email": "old@example.com", "password": "stored-hash"})

    assert user.password_hash == "stored-hash"
    assert not user.is_chirpy_red


def test_bcrypt_hash_from_first_release_does_not_verify() -> None:
    user = User.from_dict(
        {
            "id": 3,
            "email": "old@example.com",
            "password": "$2a$10$N9qo8uLOickgx2ZMRZoMyeIjZAgcfl7p92ldGxad68LJZdL17lhWy",
        }
    )

    assert user.verify_password("anything") is False
