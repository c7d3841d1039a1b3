"""On-disk document store and its lock."""

from .json_store import JSONDocumentStore
from .rwlock import ReadWriteLock

__all__ = ["JSONDocumentStore", "ReadWriteLock"]
