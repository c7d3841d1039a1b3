"""Entities persisted in the JSON document."""

from __future__ import annotations

from .chirp import MAX_CHIRP_LENGTH, Chirp
from .document import Document
from .user import User

__all__ = ["Chirp", "Document", "MAX_CHIRP_LENGTH", "User"]
