"""User entity holding credentials and the upgrade flag."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from chirpy.core.security import hash_password, verify_password


@dataclass(slots=True)
class User:
    """
    Authentication identity as persisted in the document.

    Fields
    ------
    id : int
        Unique within the document.
    email : str
        Login email. Unique, compared case-sensitively as stored.
    password_hash : str
        Hashed password (write via :meth:`set_password`). Never leaves the
        service layer; services map users to ``UserPublicOut``.
    is_chirpy_red : bool
        Upgrade flag toggled by the billing webhook.
    """

    id: int
    email: str
    password_hash: str = ""
    is_chirpy_red: bool = False

    # -------------------- Password API --------------------

    def set_password(self, raw: str) -> None:
        """
        Hash and set the password.

        :param raw: Plain text password to hash.
        :type raw: str
        """
        self.password_hash = hash_password(raw)

    def verify_password(self, raw: str) -> bool:
        """
        Verify a password against the stored hash.

        :param raw: Plain text password candidate.
        :type raw: str
        :returns: ``True`` if it matches; otherwise ``False``.
        :rtype: bool
        """
        return verify_password(raw, self.password_hash)

    # -------------------- Serialization --------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "password_hash": self.password_hash,
            "is_chirpy_red": self.is_chirpy_red,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        # Documents written by the first release stored the hash under "password".
        password_hash = data.get("password_hash", data.get("password", ""))
        return cls(
            id=int(data["id"]),
            email=str(data["email"]),
            password_hash=str(password_hash or ""),
            is_chirpy_red=bool(data.get("is_chirpy_red", False)),
        )
