"""
IdentityService
===============

Aggregate service responsible for managing the `User` aggregate:
- Registration with email uniqueness
- Credential replacement
- Authentication (verification only, no token issuance)
- The billing upgrade flag
"""

from __future__ import annotations

import logging

from chirpy.models import User
from chirpy.repositories import UserRepository
from chirpy.services._shared.base import BaseService
from chirpy.services._shared.errors import (
    AuthError,
    AuthFailure,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from chirpy.services.identity.dto import UserCreateIn, UserPublicOut, UserUpdateIn

log = logging.getLogger(__name__)


class IdentityService(BaseService):
    """
    Application service for the `User` aggregate.

    Responsibilities
    ----------------
    - Register users ensuring email uniqueness.
    - Authenticate credentials.
    - Replace credentials while keeping the upgrade flag.
    - Activate the upgrade flag on billing events.
    """

    # --------------------------------------------------------------------- #
    # Registration
    # --------------------------------------------------------------------- #

    def create_user(self, dto: UserCreateIn) -> UserPublicOut:
        """
        Register a new user.

        :param dto: User registration input DTO.
        :type dto: UserCreateIn
        :returns: Public-safe user DTO.
        :rtype: UserPublicOut
        :raises ValidationError: On empty email or password.
        :raises ConflictError: If the email is already registered.
        """
        self._validate_credentials(dto.email, dto.password)

        with self.rw_uow() as uow:
            repo: UserRepository = uow.users

            if repo.exists_by_email(dto.email):
                raise ConflictError("User", "email already in use")

            user = repo.add(email=dto.email, password=dto.password)
            out = self._to_public(user)

        log.info("user.created", extra={"user_id": out.id})
        return out

    # --------------------------------------------------------------------- #
    # Update
    # --------------------------------------------------------------------- #

    def update_user(self, user_id: int, dto: UserUpdateIn) -> UserPublicOut:
        """
        Replace email and password of an existing user.

        :param user_id: Target user (the authenticated caller).
        :type user_id: int
        :param dto: New credentials.
        :type dto: UserUpdateIn
        :returns: Updated public-safe user DTO.
        :rtype: UserPublicOut
        :raises NotFoundError: If the user does not exist.
        :raises ConflictError: If the email belongs to another user.
        """
        self._validate_credentials(dto.email, dto.password)

        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            if repo.get(user_id) is None:
                raise NotFoundError("User", user_id)

            holder = repo.get_by_email(dto.email)
            if holder is not None and holder.id != user_id:
                raise ConflictError("User", "email already in use")

            user = repo.update_credentials(user_id, email=dto.email, password=dto.password)
            return self._to_public(user)

    # --------------------------------------------------------------------- #
    # Authentication
    # --------------------------------------------------------------------- #

    def authenticate(self, email: str, password: str) -> UserPublicOut:
        """
        Verify credentials.

        Unknown email and wrong password are indistinguishable to the caller.

        :raises AuthError: ``INVALID_CREDENTIALS`` on any mismatch.
        """
        with self.ro_uow() as uow:
            user = uow.users.authenticate(email, password)
            if user is None:
                raise AuthError(AuthFailure.INVALID_CREDENTIALS)
            return self._to_public(user)

    # --------------------------------------------------------------------- #
    # Queries
    # --------------------------------------------------------------------- #

    def get_user(self, user_id: int) -> UserPublicOut:
        """
        Retrieve a single user.

        :raises NotFoundError: If the user does not exist.
        """
        with self.ro_uow() as uow:
            user = uow.users.get(user_id)
            if user is None:
                raise NotFoundError("User", user_id)
            return self._to_public(user)

    # --------------------------------------------------------------------- #
    # Billing
    # --------------------------------------------------------------------- #

    def activate_upgrade(self, user_id: int) -> None:
        """
        Turn on the upgrade flag. Calling it again is a no-op.

        :raises NotFoundError: If the user does not exist.
        """
        with self.rw_uow() as uow:
            repo: UserRepository = uow.users
            user = repo.get(user_id)
            if user is None:
                raise NotFoundError("User", user_id)
            if not user.is_chirpy_red:
                repo.set_chirpy_red(user_id, True)
                log.info("user.upgraded", extra={"user_id": user_id})

    # --------------------------------------------------------------------- #
    # Helpers
    # --------------------------------------------------------------------- #

    @staticmethod
    def _validate_credentials(email: str, password: str) -> None:
        if not isinstance(email, str) or not email.strip():
            raise ValidationError("email", "must not be empty")
        if not isinstance(password, str) or not password:
            raise ValidationError("password", "must not be empty")

    @staticmethod
    def _to_public(user: User) -> UserPublicOut:
        """
        Map the stored ``User`` to :class:`UserPublicOut`.

        :param user: Stored user entity.
        :type user: :class:`chirpy.models.User`
        :returns: Public-safe DTO.
        :rtype: :class:`UserPublicOut`
        """
        return UserPublicOut(id=user.id, email=user.email, is_chirpy_red=user.is_chirpy_red)
