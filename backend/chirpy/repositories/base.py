"""Repository base bound to a document session.

This module centralizes persistence-only concerns shared by all repositories:

- Access to the in-memory document of the enclosing Unit of Work.
- Write guards (every mutation goes through :meth:`BaseRepository._touch`).
- No business logic, no commit/rollback; Services own transactions.

Design decisions
----------------
* Repositories MUST remain thin and persistence-focused.
* Lookups other than by id are linear scans; the document is small by
  assumption and keeps no secondary indexes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from chirpy.models import Document
    from chirpy.uow.document_uow import DocumentSession


class BaseRepository:
    """
    Common plumbing for document repositories.

    :param session: Document session shared with the enclosing UoW.
    """

    def __init__(self, *, session: DocumentSession) -> None:
        self.session = session

    @property
    def document(self) -> Document:
        return self.session.document

    def _touch(self) -> None:
        """Flag the document as modified (raises in read-only scopes)."""
        self.session.mark_dirty()
