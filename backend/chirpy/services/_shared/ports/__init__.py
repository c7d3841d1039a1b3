"""
chirpy.services._shared.ports
=============================

*Ports* (hexagonal interfaces) the service layer depends on.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, the abstraction for scoped token
    issuance and verification, plus the two scope tags.

Concrete adapters live under ``chirpy.infra``.
"""

from __future__ import annotations

from .token_provider import ACCESS_SCOPE, REFRESH_SCOPE, TokenProvider

__all__ = ["ACCESS_SCOPE", "REFRESH_SCOPE", "TokenProvider"]
