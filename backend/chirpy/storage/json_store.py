"""
Single-file JSON document store.

The store owns the on-disk document and the lock guarding it. It knows
nothing about use cases: Units of Work (:mod:`chirpy.uow`) take the lock,
call :meth:`JSONDocumentStore.load` / :meth:`JSONDocumentStore.replace`, and
hand the in-memory :class:`~chirpy.models.Document` to repositories.

Locking contract
----------------
``load`` and ``replace`` do not lock by themselves: the caller must hold
``store.lock`` (shared for ``load``, exclusive for ``replace``). Holding the
exclusive lock across ``load -> mutate -> replace`` is what makes a write
transaction atomic with respect to every other store operation.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from chirpy.core.logger import store_extra
from chirpy.models import Document
from chirpy.services._shared.errors import StorageError, StorageFailure

from .rwlock import ReadWriteLock

log = logging.getLogger(__name__)


class JSONDocumentStore:
    """
    Whole-document persistence with crash-atomic replacement.

    :param path: Location of the JSON document. A missing file is a valid,
        empty document.
    :type path: str | os.PathLike
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.lock = ReadWriteLock()

    def __repr__(self) -> str:
        return f"<JSONDocumentStore path={str(self.path)!r}>"

    # ------------------------------------------------------------------ #
    # Primitives (caller holds the lock)
    # ------------------------------------------------------------------ #

    def load(self) -> Document:
        """
        Return the current document, or an empty one if none exists yet.

        :raises StorageError: ``READ_FAILED`` if the file cannot be read,
            ``PARSE_FAILED`` if its content is not a valid document.
        """
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return Document.empty()
        except OSError as exc:
            log.error(
                "store.read_failed",
                extra=store_extra(self.path, StorageFailure.READ_FAILED),
                exc_info=True,
            )
            raise StorageError(StorageFailure.READ_FAILED, str(self.path), str(exc)) from exc

        try:
            return Document.from_dict(json.loads(raw.decode("utf-8")))
        except ValueError as exc:  # UnicodeDecodeError and JSONDecodeError included
            log.error(
                "store.parse_failed",
                extra=store_extra(self.path, StorageFailure.PARSE_FAILED),
                exc_info=True,
            )
            raise StorageError(StorageFailure.PARSE_FAILED, str(self.path), str(exc)) from exc

    def replace(self, document: Document) -> None:
        """
        Overwrite the on-disk document.

        Writes to a temporary file in the same directory, then swaps it over
        the target with :func:`os.replace`. Readers either see the previous
        document or the new one, never a partial write. On failure the
        previous file is left untouched.

        :raises StorageError: ``WRITE_FAILED`` on any I/O error.
        """
        payload = json.dumps(document.to_dict(), indent=2)
        directory = self.path.parent
        tmp_name: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            log.error(
                "store.write_failed",
                extra=store_extra(self.path, StorageFailure.WRITE_FAILED),
                exc_info=True,
            )
            raise StorageError(StorageFailure.WRITE_FAILED, str(self.path), str(exc)) from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

    # ------------------------------------------------------------------ #
    # Self-locking helpers
    # ------------------------------------------------------------------ #

    def read(self) -> Document:
        """Load the document under the shared lock."""
        with self.lock.read_locked():
            return self.load()

    def reset(self) -> bool:
        """
        Delete the backing file under the exclusive lock.

        :returns: ``True`` if a file was removed.
        :raises StorageError: ``WRITE_FAILED`` if the file cannot be removed.
        """
        with self.lock.write_locked():
            try:
                self.path.unlink()
            except FileNotFoundError:
                return False
            except OSError as exc:
                log.error(
                    "store.reset_failed",
                    extra=store_extra(self.path, StorageFailure.WRITE_FAILED),
                )
                raise StorageError(StorageFailure.WRITE_FAILED, str(self.path), str(exc)) from exc
        log.info("store.reset", extra=store_extra(self.path))
        return True
