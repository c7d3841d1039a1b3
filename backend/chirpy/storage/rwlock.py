"""Process-local reader/writer lock."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class ReadWriteLock:
    """
    Shared/exclusive lock built on :class:`threading.Condition`.

    Any number of readers may hold the lock together; a writer holds it alone.
    Waiting writers block new readers, so a steady stream of reads cannot
    starve a write. Acquisition blocks indefinitely and is not reentrant.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    # ------------------------------ shared ------------------------------

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a shared hold")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    # ----------------------------- exclusive ----------------------------

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() called without an exclusive hold")
            self._writer = False
            self._cond.notify_all()

    # ------------------------- context managers -------------------------

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the lock in shared mode for the ``with`` block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the lock in exclusive mode for the ``with`` block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
