"""Unit of Work abstractions and concrete implementations.

This package re-exports the document-backed units of work used throughout the
application, alongside the abstract contracts that service layers depend on.
"""

from .base import SupportsCommit, UnitOfWork
from .document_uow import DocumentSession, DocumentUnitOfWork, ReadOnlyDocumentUnitOfWork

__all__ = [
    "SupportsCommit",
    "UnitOfWork",
    "DocumentSession",
    "DocumentUnitOfWork",
    "ReadOnlyDocumentUnitOfWork",
]
