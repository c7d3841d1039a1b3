"""Chirp repository."""

from __future__ import annotations

from chirpy.models import Chirp
from chirpy.repositories.base import BaseRepository


class ChirpRepository(BaseRepository):
    """Persistence-only repository for :class:`Chirp`."""

    def get(self, chirp_id: int) -> Chirp | None:
        return self.document.chirps.get(chirp_id)

    def count(self) -> int:
        return len(self.document.chirps)

    def list_by_author(
        self, *, author_id: int | None = None, sort_desc: bool = False
    ) -> list[Chirp]:
        """Return chirps ordered by id.

        :param author_id: Restrict to this author when truthy.
        :type author_id: int | None
        :param sort_desc: Descending id order when ``True``.
        :type sort_desc: bool
        :returns: Matching chirps.
        :rtype: list[Chirp]
        """
        items = [
            chirp
            for chirp in self.document.chirps.values()
            if not author_id or chirp.author_id == author_id
        ]
        items.sort(key=lambda c: c.id, reverse=sort_desc)
        return items

    def add(self, *, author_id: int, body: str) -> Chirp:
        self._touch()
        chirp = Chirp(id=self.document.allocate_id("chirps"), author_id=author_id, body=body)
        self.document.chirps[chirp.id] = chirp
        return chirp

    def delete(self, chirp_id: int) -> Chirp:
        """Remove and return a chirp.

        :raises KeyError: If no chirp has ``chirp_id``.
        """
        if chirp_id not in self.document.chirps:
            raise KeyError(chirp_id)
        self._touch()
        return self.document.chirps.pop(chirp_id)
