"""Unit tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from chirpy.core import config as cfg


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("true", True), ("Yes", True), ("on", True), ("0", False), ("nope", False)],
)
def test_env_bool_parses_truthy_values(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("CHIRPY_FLAG", raw)
    assert cfg.env_bool("CHIRPY_FLAG") is expected


def test_env_bool_returns_default_when_unset(monkeypatch) -> None:
    monkeypatch.delenv("CHIRPY_FLAG", raising=False)
    assert cfg.env_bool("CHIRPY_FLAG", default=True) is True


def test_env_int_falls_back_on_blank(monkeypatch) -> None:
    monkeypatch.setenv("CHIRPY_MINUTES", "  ")
    assert cfg.env_int("CHIRPY_MINUTES", 15) == 15
    monkeypatch.setenv("CHIRPY_MINUTES", "42")
    assert cfg.env_int("CHIRPY_MINUTES", 15) == 42


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("development", cfg.DevelopmentConfig),
        ("testing", cfg.TestingConfig),
        ("PRODUCTION", cfg.ProductionConfig),
        ("unknown", cfg.DevelopmentConfig),
    ],
)
def test_get_config_selects_class_from_app_env(monkeypatch, name, expected) -> None:
    monkeypatch.setenv(cfg.ENV_VAR, name)
    assert cfg.get_config() is expected


def test_default_token_lifetimes() -> None:
    """Access tokens last an hour; refresh tokens sixty days."""
    assert cfg.BaseConfig.ACCESS_TOKEN_MINUTES == 60
    assert cfg.BaseConfig.REFRESH_TOKEN_MINUTES == 86400


def test_production_never_resets_the_document() -> None:
    assert cfg.ProductionConfig.RESET_DATABASE_ON_START is False
