"""Thin CLI wrapper — Typer commands that delegate to the settings store.

All store access goes through the Container (bootstrap.py).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer

from deskstore.domain.errors import DeskStoreError
from deskstore.presentation.cli.formatters import (
    error_message,
    json_panel,
    plain,
    render_value,
    success_message,
)

app = typer.Typer(
    name="deskstore",
    help="🔐 Local settings store with encrypted values",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _container(ctx: typer.Context):
    from deskstore.bootstrap import Container
    from deskstore.config.loader import load_config

    opts = ctx.obj or {}
    try:
        config = load_config(opts.get("config"))
    except (FileNotFoundError, DeskStoreError) as e:
        error_message(str(e))
        raise typer.Exit(code=1)
    if opts.get("data_dir"):
        config = config.model_copy(update={"data_dir": opts["data_dir"]})
    return Container(config)


def parse_value(raw: str) -> Any:
    """Interpret *raw* as a JSON literal, or keep it as a string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--data-dir", "-d", help="Use this data directory instead of the platform default"
        ),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a JSON config file"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
) -> None:
    """Read and write persisted application settings."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"data_dir": data_dir, "config": config}


# ---------------------------------------------------------------------------
# deskstore get / set
# ---------------------------------------------------------------------------


@app.command()
def get(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Setting name")],
    secure: Annotated[bool, typer.Option("--secure", "-s", help="Decrypt the stored value")] = False,
) -> None:
    """Print the value stored under KEY."""
    try:
        value = _container(ctx).store.get_value(key, secure=secure)
    except DeskStoreError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    if value is None:
        error_message(f"'{key}' is not set")
        raise typer.Exit(code=1)
    plain(render_value(value))


@app.command("set")
def set_(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Setting name")],
    value: Annotated[str, typer.Argument(help="Value (JSON literal or text)")],
    secure: Annotated[bool, typer.Option("--secure", "-s", help="Encrypt the value at rest")] = False,
    raw: Annotated[bool, typer.Option("--raw", help="Store VALUE as a literal string")] = False,
) -> None:
    """Store VALUE under KEY."""
    parsed = value if raw else parse_value(value)
    try:
        _container(ctx).store.set_value(key, parsed, secure=secure)
    except DeskStoreError as e:
        error_message(str(e))
        raise typer.Exit(code=1)
    success_message(f"Saved '{key}'")


# ---------------------------------------------------------------------------
# deskstore socket-password / path / show
# ---------------------------------------------------------------------------


@app.command("socket-password")
def socket_password(ctx: typer.Context) -> None:
    """Print the local socket password, generating it on first use."""
    try:
        password = _container(ctx).store.get_socket_password()
    except DeskStoreError as e:
        error_message(str(e))
        raise typer.Exit(code=1)
    plain(password)


@app.command()
def path(ctx: typer.Context) -> None:
    """Print the location of the settings document."""
    plain(str(_container(ctx).storage_path))


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the raw on-disk document (secure values stay encrypted)."""
    container = _container(ctx)
    try:
        document = container.document_store.read()
    except DeskStoreError as e:
        error_message(str(e))
        raise typer.Exit(code=1)
    json_panel(document, title=str(container.storage_path))


if __name__ == "__main__":
    app()
