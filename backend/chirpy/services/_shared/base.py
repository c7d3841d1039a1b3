# chirpy/services/_shared/base.py
from __future__ import annotations

from dataclasses import dataclass

from chirpy.core import errors as api_errors
from chirpy.services._shared.errors import (
    AuthError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ServiceError,
    StorageError,
    ValidationError,
)
from chirpy.storage import JSONDocumentStore
from chirpy.uow.document_uow import DocumentUnitOfWork, ReadOnlyDocumentUnitOfWork


@dataclass(slots=True)
class ServiceContext:
    """
    Carry cross-cutting request-scoped data (auth, request ids, etc.).

    :param actor_id: Authenticated user identifier.
    :param request_id: Correlation id for logging/tracing.
    """

    actor_id: int | None = None
    request_id: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide helpers to run read-only and read-write units of work.
    * Centralize error translation.
    * Offer the shared ownership check.

    Notes
    -----
    - Services never touch the document directly; always use a Unit of Work.
    - The store is handed in explicitly; there is no module-level instance.
    """

    def __init__(self, *, store: JSONDocumentStore, ctx: ServiceContext | None = None) -> None:
        """
        Initialize the base service.

        :param store: Document store shared by the whole process.
        :type store: JSONDocumentStore
        :param ctx: Optional request-scoped context (auth, tracing).
        :type ctx: ServiceContext | None
        """
        self.store = store
        self.ctx = ctx or ServiceContext()

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> DocumentUnitOfWork:
        """
        Create a read-write Unit of Work (exclusive lock).

        :returns: Read-write UoW instance.
        :rtype: DocumentUnitOfWork
        """
        return DocumentUnitOfWork(self.store)

    def ro_uow(self) -> ReadOnlyDocumentUnitOfWork:
        """
        Create a read-only Unit of Work (shared lock).

        :returns: Read-only UoW instance.
        :rtype: ReadOnlyDocumentUnitOfWork
        """
        return ReadOnlyDocumentUnitOfWork(self.store)

    # -------------------------- Error handling ------------------------------

    @staticmethod
    def translate_exceptions(exc: Exception) -> Exception:
        """
        Map domain/service-level errors to API-level (HTTP) errors.

        :param exc: Exception raised within the service.
        :type exc: Exception
        :returns: Translated exception ready to be re-raised.
        :rtype: Exception
        """
        if isinstance(exc, NotFoundError):
            # → 404 Not Found
            return api_errors.NotFound(str(exc))

        if isinstance(exc, ConflictError):
            # → 409 Conflict
            return api_errors.Conflict(str(exc))

        if isinstance(exc, AuthError):
            # → 401, never revealing which check failed
            return api_errors.Unauthorized()

        if isinstance(exc, AuthorizationError):
            # → 403 Forbidden
            return api_errors.Forbidden(str(exc))

        if isinstance(exc, StorageError):
            # → 500, details stay in the logs
            return api_errors.APIError(
                message="There was a problem accessing the database",
                status_code=500,
                code="storage_error",
            )

        if isinstance(exc, ValidationError):
            return api_errors.BadRequest(str(exc))

        # Any other ServiceError subclass → 400 Bad Request
        if isinstance(exc, ServiceError):
            return api_errors.BadRequest(str(exc))

        # Fallback: return untouched (will bubble up to Flask handler)
        return exc

    # --------------------------- AuthZ --------------------------------

    def ensure_owner(self, actor_id: int | None, owner_id: int, *, msg: str | None = None) -> None:
        """
        Ensure the current actor is the resource owner.

        :param actor_id: Authenticated user id.
        :param owner_id: Expected owner user id.
        :type owner_id: int
        :param msg: Optional custom error message.
        :type msg: str | None
        :raises AuthorizationError: If actor is not the owner.
        """
        from chirpy.services._shared.policies.common import is_owner

        if not is_owner(actor_id=actor_id, owner_id=owner_id):
            raise AuthorizationError(msg or "You can only modify your own resources.")
