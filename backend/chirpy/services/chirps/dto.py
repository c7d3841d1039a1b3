"""DTOs for ChirpService."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ChirpCreateIn:
    """
    Input DTO for posting a chirp.

    :param body: Raw, uncensored text.
    :type body: str
    """

    body: str


@dataclass(frozen=True, slots=True)
class ChirpOut:
    """
    Output DTO for a stored chirp.

    :param id: Chirp identifier.
    :param author_id: Id of the posting user.
    :param body: Censored text.
    """

    id: int
    author_id: int
    body: str
