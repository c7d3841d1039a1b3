"""Concurrency tests: many threads sharing one store."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from chirpy.services._shared.errors import ConflictError
from chirpy.services.chirps import ChirpCreateIn, ChirpService
from chirpy.services.identity import IdentityService, UserCreateIn


def test_concurrent_writers_lose_no_updates(store):
    service = ChirpService(store=store)

    def post(i: int) -> int:
        return service.create_chirp(i % 3 + 1, ChirpCreateIn(body=f"chirp {i}")).id

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(post, range(40)))

    assert len(set(ids)) == 40
    assert sorted(store.read().chirps) == sorted(ids)


def test_concurrent_signups_allow_one_per_email(store):
    service = IdentityService(store=store)

    def signup(_: int) -> bool:
        try:
            service.create_user(UserCreateIn(email="race@example.com", password="pw"))
        except ConflictError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=6) as pool:
        results = list(pool.map(signup, range(6)))

    assert results.count(True) == 1
    assert len(store.read().users) == 1


def test_readers_see_complete_documents(store):
    service = ChirpService(store=store)

    def write(i: int) -> None:
        service.create_chirp(1, ChirpCreateIn(body=f"b{i}"))

    def read(_: int) -> int:
        return len(service.list_chirps())

    with ThreadPoolExecutor(max_workers=8) as pool:
        writes = [pool.submit(write, i) for i in range(20)]
        reads = [pool.submit(read, i) for i in range(20)]
        for f in writes:
            f.result()
        counts = [f.result() for f in reads]

    assert all(0 <= c <= 20 for c in counts)
    assert len(service.list_chirps()) == 20
