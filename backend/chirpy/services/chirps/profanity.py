"""Banned-word masking for chirp bodies."""

from __future__ import annotations

import re
from collections.abc import Iterable

BANNED_WORDS: tuple[str, ...] = ("kerfuffle", "sharbert", "fornax")
MASK = "****"


def _compile(words: Iterable[str]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))
    return re.compile(alternation, re.IGNORECASE)


_BANNED_RE = _compile(BANNED_WORDS)


def clean_profanity(body: str) -> str:
    """
    Replace every case-insensitive occurrence of a banned word with :data:`MASK`.

    Matching is by substring, so ``"Kerfuffles"`` becomes ``"****s"``. The
    mask has a fixed width whatever the length of the word it hides.

    :param body: Raw chirp text.
    :returns: Text with banned words masked; all other characters untouched.
    """
    return _BANNED_RE.sub(MASK, body)
