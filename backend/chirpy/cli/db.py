"""Flask CLI commands for inspecting and resetting the JSON document."""

from __future__ import annotations

import os

import click
from flask import current_app
from flask.cli import with_appcontext

from chirpy.core.config import ENV_VAR
from chirpy.core.extensions import get_store
from chirpy.services._shared.errors import StorageError


def _ensure_non_production() -> None:
    """Abort destructive commands when running in production."""
    config = current_app.config
    app_env = os.getenv(ENV_VAR, "").strip().lower()
    is_debug = bool(config.get("DEBUG"))
    is_testing = bool(config.get("TESTING"))
    if app_env == "production" or (not is_debug and not is_testing):
        raise click.UsageError(
            "The 'flask db reset' command is restricted to non-production environments."
        )


@click.group("db")
def db_cli() -> None:
    """Collection of document store commands."""


@db_cli.command("stats")
@with_appcontext
def stats_command() -> None:
    """Print how many users, chirps and refresh tokens are stored."""
    store = get_store()
    try:
        document = store.read()
    except StorageError as exc:
        raise click.ClickException(f"Could not read {store.path}: {exc}") from exc
    click.echo(f"Document: {store.path}")
    click.echo(f"  users           {len(document.users):>6}")
    click.echo(f"  chirps          {len(document.chirps):>6}")
    click.echo(f"  refresh_tokens  {len(document.refresh_tokens):>6}")


@db_cli.command("reset")
@click.option("--yes", is_flag=True, help="Skip the destructive confirmation prompt.")
@with_appcontext
def reset_command(yes: bool) -> None:
    """Delete the JSON document so the next request starts from scratch."""
    _ensure_non_production()
    store = get_store()
    if not yes:
        click.confirm(f"This will DELETE {store.path}. Continue?", abort=True)
    try:
        removed = store.reset()
    except StorageError as exc:
        raise click.ClickException(f"Reset failed: {exc}") from exc
    click.echo("Document removed." if removed else "Nothing to remove.")
