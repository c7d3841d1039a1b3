"""Chirp entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MAX_CHIRP_LENGTH = 140


@dataclass(slots=True)
class Chirp:
    """
    A single short authored message.

    Fields
    ------
    id : int
        Unique within the document.
    author_id : int
        Id of the user who posted it.
    body : str
        Censored text, at most :data:`MAX_CHIRP_LENGTH` characters as posted.
    """

    id: int
    author_id: int
    body: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "author_id": self.author_id, "body": self.body}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Chirp:
        return cls(
            id=int(data["id"]),
            author_id=int(data["author_id"]),
            body=str(data["body"]),
        )
