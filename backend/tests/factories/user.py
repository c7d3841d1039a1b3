"""Factory Boy definition for :class:`chirpy.models.user.User`."""

from __future__ import annotations

import factory

from chirpy.models.user import User
from tests.factories import BaseFactory

DEFAULT_PASSWORD = "Passw0rd!"


class UserFactory(BaseFactory):
    """
    Build :class:`chirpy.models.user.User` instances.

    Notes
    -----
    - Ids come from a sequence; persist with :func:`tests.factories.seed_document`.
    - The password is hashed through the model setter.
    """

    class Meta:
        model = User

    id = factory.Sequence(lambda n: n + 1)
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    is_chirpy_red = False

    @factory.post_generation
    def password(obj, create, extracted, **kwargs):
        """Set password using model setter (ensures hashing)."""
        obj.set_password(extracted or DEFAULT_PASSWORD)
