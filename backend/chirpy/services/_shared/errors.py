"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP directly. They serve as stable contracts between the document
store, repositories and application services.

The translation to HTTP responses (RFC 7807) is handled by
``chirpy/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from the store, repositories or domain logic.
    - The API layer or BaseService will later translate them to APIError.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True, eq=False)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the document.

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True, eq=False)
class ConflictError(ServiceError):
    """
    Raised when a uniqueness rule is violated (e.g. email already taken).

    :param entity: Entity name (e.g., "User").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"


@dataclass(slots=True, eq=False)
class ValidationError(ServiceError):
    """
    Raised for client-caused input problems (e.g. chirp body too long).

    :param field: Offending input field.
    :type field: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    field: str
    detail: str

    def __str__(self) -> str:
        return f"Invalid {self.field}: {self.detail}"


@dataclass(slots=True, eq=False)
class AuthorizationError(ServiceError):
    """
    Raised when the actor is authenticated but does not own the resource.

    Kept distinct from :class:`NotFoundError` so callers can tell a missing
    chirp from somebody else's chirp.
    """

    detail: str = "Not allowed"

    def __str__(self) -> str:
        return self.detail


class AuthFailure(Enum):
    """Why an authentication step was rejected. Never shown to clients."""

    BAD_SIGNATURE = "bad_signature"
    EXPIRED = "expired"
    WRONG_SCOPE = "wrong_scope"
    MALFORMED_SUBJECT = "malformed_subject"
    MALFORMED_HEADER = "malformed_header"
    INVALID_CREDENTIALS = "invalid_credentials"
    REVOKED_TOKEN = "revoked_token"
    INVALID_API_KEY = "invalid_api_key"


@dataclass(slots=True, eq=False)
class AuthError(ServiceError):
    """
    Raised for every authentication failure.

    The ``reason`` is for logs and tests only; the delivery layer always
    answers with an opaque 401.

    :param reason: Specific failure.
    :type reason: AuthFailure
    """

    reason: AuthFailure

    def __str__(self) -> str:
        return f"Unauthorized ({self.reason.value})"


class StorageFailure(Enum):
    """Kind of document store failure."""

    READ_FAILED = "read_failed"
    PARSE_FAILED = "parse_failed"
    WRITE_FAILED = "write_failed"


@dataclass(slots=True, eq=False)
class StorageError(ServiceError):
    """
    Raised when the JSON document cannot be read, parsed or written.

    Fatal to the current operation; nothing is partially applied.

    :param kind: Failure kind.
    :type kind: StorageFailure
    :param path: Backing file location.
    :type path: str
    :param detail: Underlying error message.
    :type detail: str
    """

    kind: StorageFailure
    path: str
    detail: str = ""

    def __str__(self) -> str:
        suffix = f": {self.detail}" if self.detail else ""
        return f"Storage {self.kind.value} for {self.path}{suffix}"
