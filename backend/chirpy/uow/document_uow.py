"""
JSON document implementation of UnitOfWork.

A write UoW holds the store's exclusive lock from ``__enter__`` to
``__exit__``: the document is loaded once, repositories mutate it in memory,
and ``commit`` replaces the file. Leaving the block with an exception discards
the in-memory changes. A read-only UoW holds the shared lock and refuses
every write.
"""

from __future__ import annotations

from chirpy.models import Document
from chirpy.repositories import ChirpRepository, RefreshTokenRepository, UserRepository
from chirpy.storage import JSONDocumentStore
from chirpy.uow.base import UnitOfWork


class DocumentSession:
    """
    In-memory view of the document shared by all repositories of one UoW.

    :param document: Loaded document.
    :param read_only: When ``True`` any write attempt raises ``RuntimeError``.
    """

    def __init__(self, document: Document, *, read_only: bool) -> None:
        self.document = document
        self.read_only = read_only
        self.dirty = False

    def mark_dirty(self) -> None:
        """Record a pending mutation; blocked in read-only scopes."""
        if self.read_only:
            raise RuntimeError("Read-only UnitOfWork: document write blocked.")
        self.dirty = True


class DocumentRepositoryContainer:
    """Provide repository instances that share a document session."""

    def __init__(self, *, session: DocumentSession) -> None:
        self.session = session
        self.users = UserRepository(session=self.session)
        self.chirps = ChirpRepository(session=self.session)
        self.refresh_tokens = RefreshTokenRepository(session=self.session)


class DocumentUnitOfWork(UnitOfWork):
    """
    Read-write UoW: exclusive lock across load, mutate and replace.

    :param store: Store owning the document and its lock.
    :type store: JSONDocumentStore
    """

    def __init__(self, store: JSONDocumentStore) -> None:
        self.store = store
        self._container: DocumentRepositoryContainer | None = None

    def __enter__(self) -> DocumentUnitOfWork:
        self.store.lock.acquire_write()
        try:
            document = self.store.load()
        except BaseException:
            self.store.lock.release_write()
            raise
        self._container = DocumentRepositoryContainer(
            session=DocumentSession(document, read_only=False)
        )
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is None:
                try:
                    self.commit()
                except Exception:
                    self.rollback()
                    raise
            else:
                self.rollback()
        finally:
            self._container = None
            self.store.lock.release_write()

    # ----------------------------- repositories ------------------------------

    def _active(self) -> DocumentRepositoryContainer:
        if self._container is None:
            raise RuntimeError("UnitOfWork is not active; use it as a context manager.")
        return self._container

    @property
    def session(self) -> DocumentSession:
        return self._active().session

    @property
    def users(self) -> UserRepository:
        return self._active().users

    @property
    def chirps(self) -> ChirpRepository:
        return self._active().chirps

    @property
    def refresh_tokens(self) -> RefreshTokenRepository:
        return self._active().refresh_tokens

    # ------------------------------- Public API ------------------------------

    def commit(self) -> None:
        """Persist the document if anything changed since the last commit."""
        session = self.session
        if not session.dirty:
            return
        self.store.replace(session.document)
        session.dirty = False

    def rollback(self) -> None:
        """
        Discard pending in-memory changes.

        The file still holds the last committed state. Repositories of this
        UoW are unusable afterwards.
        """
        self._container = None


class ReadOnlyDocumentUnitOfWork(UnitOfWork):
    """
    Read-only UoW: shared lock, write guards, no commit.

    :param store: Store owning the document and its lock.
    :type store: JSONDocumentStore
    """

    def __init__(self, store: JSONDocumentStore) -> None:
        self.store = store
        self._container: DocumentRepositoryContainer | None = None

    def __enter__(self) -> ReadOnlyDocumentUnitOfWork:
        self.store.lock.acquire_read()
        try:
            document = self.store.load()
        except BaseException:
            self.store.lock.release_read()
            raise
        self._container = DocumentRepositoryContainer(
            session=DocumentSession(document, read_only=True)
        )
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._container = None
        self.store.lock.release_read()

    def _active(self) -> DocumentRepositoryContainer:
        if self._container is None:
            raise RuntimeError("UnitOfWork is not active; use it as a context manager.")
        return self._container

    @property
    def session(self) -> DocumentSession:
        return self._active().session

    @property
    def users(self) -> UserRepository:
        return self._active().users

    @property
    def chirps(self) -> ChirpRepository:
        return self._active().chirps

    @property
    def refresh_tokens(self) -> RefreshTokenRepository:
        return self._active().refresh_tokens

    def commit(self) -> None:
        """
        Disallow commit in read-only Unit of Work.

        :raises RuntimeError: always, to prevent accidental writes.
        """
        raise RuntimeError("Read-only UnitOfWork does not allow commit().")

    def rollback(self) -> None:
        """Nothing to undo: read-only scopes never mutate the document."""
