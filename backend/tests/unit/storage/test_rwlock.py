"""Unit tests for the reader/writer lock."""

from __future__ import annotations

import threading
import time

import pytest

from chirpy.storage import ReadWriteLock
from tests.helpers.utils import not_raises


def test_readers_share_the_lock() -> None:
    lock = ReadWriteLock()
    lock.acquire_read()
    acquired = threading.Event()

    def other_reader() -> None:
        with lock.read_locked():
            acquired.set()

    t = threading.Thread(target=other_reader)
    t.start()
    t.join(timeout=2)
    lock.release_read()

    assert acquired.is_set()


def test_writer_waits_for_readers() -> None:
    lock = ReadWriteLock()
    lock.acquire_read()
    wrote = threading.Event()

    def writer() -> None:
        with lock.write_locked():
            wrote.set()

    t = threading.Thread(target=writer)
    t.start()
    time.sleep(0.05)
    assert not wrote.is_set()

    lock.release_read()
    t.join(timeout=2)
    assert wrote.is_set()


def test_waiting_writer_blocks_new_readers() -> None:
    lock = ReadWriteLock()
    lock.acquire_read()
    order: list[str] = []

    def writer() -> None:
        with lock.write_locked():
            order.append("writer")

    def late_reader() -> None:
        with lock.read_locked():
            order.append("reader")

    w = threading.Thread(target=writer)
    w.start()
    time.sleep(0.05)
    r = threading.Thread(target=late_reader)
    r.start()
    time.sleep(0.05)
    assert order == []

    lock.release_read()
    w.join(timeout=2)
    r.join(timeout=2)
    assert order == ["writer", "reader"]


def test_release_without_hold_raises() -> None:
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_context_manager_releases_on_error() -> None:
    lock = ReadWriteLock()
    with pytest.raises(KeyError), lock.write_locked():
        raise KeyError("boom")

    with not_raises(RuntimeError):
        lock.acquire_write()
        lock.release_write()
