"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'


# Load .env in development (no-op when the file is missing)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, falling back to ``default``."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    SECRET_KEY: str
        Flask secret used for session signing.
    JWT_SECRET: str
        Shared HS256 key for both access and refresh tokens. The two token
        kinds are told apart by their ``iss`` claim only.
    POLKA_API_KEY: str
        Key the billing provider presents on webhook calls.
    DATABASE_PATH: str
        Location of the JSON document holding users, chirps and refresh tokens.
    RESET_DATABASE_ON_START: bool
        Delete the document when the app starts (local debugging aid).
    ACCESS_TOKEN_MINUTES: int
        Access token lifetime.
    REFRESH_TOKEN_MINUTES: int
        Refresh token lifetime.
    JSON_SORT_KEYS: bool
        Keeps JSON output order stable when ``False``.
    PROPAGATE_EXCEPTIONS: bool
        Controls Flask error propagation.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    DEBUG: bool
        Toggles Flask debug mode.
    TESTING: bool
        Enables Flask testing mode when ``True``.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"

    # Secrets / security
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    JWT_SECRET = os.getenv("JWT_SECRET", "CHANGE_ME_JWT")
    POLKA_API_KEY = os.getenv("POLKA_API_KEY", "")

    # Token lifetimes
    ACCESS_TOKEN_MINUTES = env_int("ACCESS_TOKEN_MINUTES", 60)
    REFRESH_TOKEN_MINUTES = env_int("REFRESH_TOKEN_MINUTES", 86400)

    # Document store
    DATABASE_PATH = os.getenv("DATABASE_PATH", "database.json")
    RESET_DATABASE_ON_START = env_bool("RESET_DATABASE_ON_START", False)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode by default and honors ``RESET_DATABASE_ON_START`` so a
    fresh document can be requested per run.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    RESET_DATABASE_ON_START = env_bool("RESET_DATABASE_ON_START", False)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Uses a dedicated document unless ``TEST_DATABASE_PATH`` is set; test
      fixtures normally override it with a temporary path.
    - Propagates exceptions so pytest can surface tracebacks directly.
    """

    TESTING = True
    DEBUG = False
    DATABASE_PATH = os.getenv("TEST_DATABASE_PATH", "test-database.json")
    JWT_SECRET = "test-jwt-secret"
    POLKA_API_KEY = "test-polka-key"
    PROPAGATE_EXCEPTIONS = True


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    Never resets the document on start, whatever the environment says.
    """

    DEBUG = False
    RESET_DATABASE_ON_START = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
