"""Password hashing primitives.

Thin wrappers around :mod:`werkzeug.security` so the rest of the code base has
a single place that knows the hashing method. Hashes are salted and use the
library's default adaptive method and cost.
"""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(raw: str) -> str:
    """
    Return a salted one-way hash of ``raw``.

    :param raw: Plain text password.
    :type raw: str
    :returns: Encoded hash (method, salt and digest).
    :rtype: str
    :raises ValueError: If ``raw`` is not a non-empty string.
    """
    if not isinstance(raw, str) or not raw:
        raise ValueError("Password must be a non-empty string.")
    return generate_password_hash(raw)


def verify_password(raw: str, hashed: str | None) -> bool:
    """
    Check ``raw`` against a hash produced by :func:`hash_password`.

    :param raw: Plain text password candidate.
    :type raw: str
    :param hashed: Stored hash; empty or ``None`` never verifies.
    :type hashed: str | None
    :returns: ``True`` if it matches; otherwise ``False``. A hash in a format
        werkzeug does not know (e.g. bcrypt ``$2a$...``) never matches.
    :rtype: bool
    """
    if not hashed or not isinstance(raw, str):
        return False
    try:
        return bool(check_password_hash(hashed, raw))
    except ValueError:
        return False
