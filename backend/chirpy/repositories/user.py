"""User repository for persistence and authentication utilities."""

from __future__ import annotations

from chirpy.models import User
from chirpy.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    """Persistence-only repository for :class:`User`.

    This repository focuses on lookup, creation and password operations.
    It NEVER handles JWT or session creation, only document-level user management.
    """

    # ---------------------------- Lookup helpers ----------------------------

    def get(self, user_id: int) -> User | None:
        """Return the user with ``user_id`` or ``None``."""
        return self.document.users.get(user_id)

    def get_by_email(self, email: str) -> User | None:
        """Fetch a user by exact email (linear scan, case-sensitive).

        :param email: Email address as stored.
        :type email: str
        :returns: User instance or ``None`` when not found.
        :rtype: User | None
        """
        for user in self.document.users.values():
            if user.email == email:
                return user
        return None

    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` when a user with the provided email exists."""
        return self.get_by_email(email) is not None

    def count(self) -> int:
        return len(self.document.users)

    # ---------------------------- Writes ----------------------------

    def add(self, *, email: str, password: str) -> User:
        """Create a user with a freshly allocated id and hashed password.

        :param email: Login email (uniqueness is the service's concern).
        :type email: str
        :param password: Raw password; hashed before storage.
        :type password: str
        :returns: The stored user.
        :rtype: User
        """
        self._touch()
        user = User(id=self.document.allocate_id("users"), email=email)
        user.set_password(password)
        self.document.users[user.id] = user
        return user

    def update_credentials(self, user_id: int, *, email: str, password: str) -> User:
        """Replace email and password hash, keeping the upgrade flag.

        :raises ValueError: If the user does not exist.
        """
        user = self.get(user_id)
        if user is None:
            raise ValueError(f"User {user_id} not found.")
        self._touch()
        user.email = email
        user.set_password(password)
        return user

    def set_chirpy_red(self, user_id: int, value: bool = True) -> User:
        """Set the upgrade flag.

        :raises ValueError: If the user does not exist.
        """
        user = self.get(user_id)
        if user is None:
            raise ValueError(f"User {user_id} not found.")
        self._touch()
        user.is_chirpy_red = value
        return user

    # ---------------------------- Password ops ----------------------------

    def authenticate(self, email: str, password: str) -> User | None:
        """Authenticate a user by email and password.

        :param email: Email address to authenticate.
        :type email: str
        :param password: Raw password to verify.
        :type password: str
        :returns: Authenticated user or ``None`` when credentials fail.
        :rtype: User | None
        """
        user = self.get_by_email(email)
        if not user or not user.verify_password(password):
            return None
        return user
