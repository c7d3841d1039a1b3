"""Factory Boy helpers and document seeding for tests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import factory

from chirpy.models import Chirp, User
from chirpy.storage import JSONDocumentStore
from chirpy.uow import DocumentUnitOfWork


class BaseFactory(factory.Factory):
    """Base class for factories building plain entity dataclasses."""

    class Meta:
        abstract = True


def seed_document(
    store: JSONDocumentStore,
    *,
    users: Iterable[User] = (),
    chirps: Iterable[Chirp] = (),
    refresh_tokens: Mapping[str, bool] | None = None,
) -> None:
    """Write prebuilt entities into ``store`` in one transaction.

    Parameters
    ----------
    store:
        Store whose document receives the entities.
    users, chirps:
        Entities inserted under their own ids (existing ids are overwritten).
    refresh_tokens:
        Optional ``token -> revoked`` entries.
    """
    with DocumentUnitOfWork(store) as uow:
        document = uow.session.document
        for user in users:
            document.users[user.id] = user
        for chirp in chirps:
            document.chirps[chirp.id] = chirp
        document.refresh_tokens.update(refresh_tokens or {})
        # Keep counters ahead of seeded ids, as real allocation would
        for kind in ("users", "chirps"):
            entities = getattr(document, kind)
            if entities:
                document.next_ids[kind] = max(document.next_ids.get(kind, 1), max(entities) + 1)
        uow.session.mark_dirty()
