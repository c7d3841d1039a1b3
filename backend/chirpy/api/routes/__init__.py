"""Blueprint registry for the HTTP API."""

from __future__ import annotations

from flask import Blueprint

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .auth import bp as auth_bp  # noqa: E402
from .chirps import bp as chirps_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .users import bp as users_bp  # noqa: E402
from .webhooks import bp as webhooks_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_api_base)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /api/healthz
    (auth_bp, ""),  # -> /api/login, /api/refresh, /api/revoke
    (users_bp, "/users"),
    (chirps_bp, "/chirps"),
    (webhooks_bp, "/polka"),
]
