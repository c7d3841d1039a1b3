"""
ChirpService
============

Aggregate service for the `Chirp` aggregate: posting with the length rule and
profanity masking, lookups, author-scoped listing and owner-only deletion.
"""

from __future__ import annotations

import logging

from chirpy.models import MAX_CHIRP_LENGTH, Chirp
from chirpy.repositories import ChirpRepository
from chirpy.services._shared.base import BaseService
from chirpy.services._shared.errors import NotFoundError, ValidationError
from chirpy.services.chirps.dto import ChirpCreateIn, ChirpOut
from chirpy.services.chirps.profanity import clean_profanity

log = logging.getLogger(__name__)


class ChirpService(BaseService):
    """
    Application service for chirps.

    Responsibilities
    ----------------
    - Reject bodies longer than :data:`MAX_CHIRP_LENGTH`.
    - Store the masked body under a fresh id.
    - List by optional author, ordered by id.
    - Delete only on behalf of the author.
    """

    def create_chirp(self, author_id: int, dto: ChirpCreateIn) -> ChirpOut:
        """
        Post a chirp for ``author_id``.

        The length rule applies to the body as posted; masking happens after.

        :param author_id: Authenticated author.
        :type author_id: int
        :param dto: Raw chirp input.
        :type dto: ChirpCreateIn
        :returns: Stored chirp.
        :rtype: ChirpOut
        :raises ValidationError: If the body is longer than 140 characters.
        """
        if len(dto.body) > MAX_CHIRP_LENGTH:
            raise ValidationError("body", "Chirp is too long")

        body = clean_profanity(dto.body)
        with self.rw_uow() as uow:
            chirp = uow.chirps.add(author_id=author_id, body=body)
            out = self._to_out(chirp)

        log.info("chirp.created", extra={"chirp_id": out.id, "user_id": author_id})
        return out

    def read_chirp(self, chirp_id: int) -> ChirpOut | None:
        """Return the chirp or ``None`` when it does not exist."""
        with self.ro_uow() as uow:
            chirp = uow.chirps.get(chirp_id)
            return self._to_out(chirp) if chirp is not None else None

    def list_chirps(self, author_id: int | None = None, sort_desc: bool = False) -> list[ChirpOut]:
        """
        List chirps ordered by id.

        :param author_id: Restrict to this author; ``None`` or ``0`` means all.
        :param sort_desc: Descending order when ``True``.
        :returns: Matching chirps.
        :rtype: list[ChirpOut]
        """
        with self.ro_uow() as uow:
            repo: ChirpRepository = uow.chirps
            return [
                self._to_out(c) for c in repo.list_by_author(author_id=author_id, sort_desc=sort_desc)
            ]

    def delete_chirp(self, actor_id: int, chirp_id: int) -> ChirpOut:
        """
        Delete a chirp owned by ``actor_id``.

        :raises NotFoundError: If the chirp does not exist.
        :raises AuthorizationError: If ``actor_id`` is not the author.
        """
        with self.rw_uow() as uow:
            repo: ChirpRepository = uow.chirps
            chirp = repo.get(chirp_id)
            if chirp is None:
                raise NotFoundError("Chirp", chirp_id)
            self.ensure_owner(actor_id, chirp.author_id, msg="You can only delete your own chirps.")
            removed = repo.delete(chirp_id)
            out = self._to_out(removed)

        log.info("chirp.deleted", extra={"chirp_id": chirp_id, "user_id": actor_id})
        return out

    @staticmethod
    def _to_out(chirp: Chirp) -> ChirpOut:
        return ChirpOut(id=chirp.id, author_id=chirp.author_id, body=chirp.body)
