"""The persisted document: the whole state of the application."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .chirp import Chirp
from .user import User

SECTIONS = ("chirps", "users", "refresh_tokens")


@dataclass(slots=True)
class Document:
    """
    Entire persisted state, the unit of load/replace atomicity.

    Fields
    ------
    chirps : dict[int, Chirp]
        Chirps keyed by id.
    users : dict[int, User]
        Users keyed by id.
    refresh_tokens : dict[str, bool]
        Revocation table: token string -> ``revoked`` flag.
    next_ids : dict[str, int]
        Monotonic id counters per entity kind (``"chirps"``, ``"users"``).
        Ids handed out are never reused, even after deletion.
    """

    chirps: dict[int, Chirp] = field(default_factory=dict)
    users: dict[int, User] = field(default_factory=dict)
    refresh_tokens: dict[str, bool] = field(default_factory=dict)
    next_ids: dict[str, int] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Document:
        return cls()

    # ------------------------------------------------------------------ #
    # Id allocation
    # ------------------------------------------------------------------ #

    def allocate_id(self, kind: str) -> int:
        """
        Return a fresh id for ``kind`` and advance its counter.

        Documents without a stored counter (first release format) start from
        the highest existing id plus one.

        :param kind: ``"chirps"`` or ``"users"``.
        :type kind: str
        :returns: Id not used by any current or past entity of that kind.
        :rtype: int
        """
        entities: dict[int, Any] = getattr(self, kind)
        floor = max(entities, default=0) + 1
        next_id = max(self.next_ids.get(kind, 1), floor)
        self.next_ids[kind] = next_id + 1
        return next_id

    # ------------------------------------------------------------------ #
    # JSON mapping
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        return {
            "chirps": {str(k): c.to_dict() for k, c in sorted(self.chirps.items())},
            "users": {str(k): u.to_dict() for k, u in sorted(self.users.items())},
            "refresh_tokens": dict(self.refresh_tokens),
            "next_ids": dict(self.next_ids),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Document:
        """
        Build a document from decoded JSON.

        Missing sections are treated as empty.

        :raises ValueError: If the structure is not a valid document.
        """
        if not isinstance(data, dict):
            raise ValueError("document root must be an object")
        for name in (*SECTIONS, "next_ids"):
            if not isinstance(data.get(name, {}), dict):
                raise ValueError(f"section {name!r} must be an object")

        try:
            chirps = {int(k): Chirp.from_dict(v) for k, v in data.get("chirps", {}).items()}
            users = {int(k): User.from_dict(v) for k, v in data.get("users", {}).items()}
            next_ids = {str(k): int(v) for k, v in data.get("next_ids", {}).items()}
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"malformed entity: {exc}") from exc

        refresh_tokens: dict[str, bool] = {}
        for token, revoked in data.get("refresh_tokens", {}).items():
            if not isinstance(revoked, bool):
                raise ValueError("refresh token flags must be booleans")
            refresh_tokens[str(token)] = revoked

        return cls(
            chirps=chirps,
            users=users,
            refresh_tokens=refresh_tokens,
            next_ids=next_ids,
        )
