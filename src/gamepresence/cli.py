"""Game presence settings CLI.

Helpers for inspecting and repairing the settings document outside the
application: print its location, dump it, check that it validates, or
reset it to the defaults.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Final

import typer
import yaml
from dotenv import load_dotenv

from gamepresence.config.store import ConfigStore
from gamepresence.errors import ConfigError, StateValidationError
from gamepresence.state.deriver import StateDeriver

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Game presence settings CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "gamepresence.cli"


class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"


CONFIG_FILE_OPTION = typer.Option(
    None, "--config-file", "-c", dir_okay=False, help="Settings file to use instead of the default"
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
FORMAT_OPTION = typer.Option(OutputFormat.JSON, "--format", "-f", help="Output format")
YES_OPTION = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation")


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Path | None = CONFIG_FILE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Inspect and maintain the game presence settings."""
    # .env may set GAME_PRESENCE_CONFIG_DIR
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    ctx.obj = ConfigStore(config_file)


def _fail(exc: Exception) -> typer.Exit:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("path")
def show_path(ctx: typer.Context) -> None:
    """Print where the settings file lives."""
    store: ConfigStore = ctx.obj
    try:
        typer.echo(str(store.path))
    except ConfigError as exc:
        raise _fail(exc) from exc


@config_app.command("show")
def show_config(ctx: typer.Context, output: OutputFormat = FORMAT_OPTION) -> None:
    """Print the settings, restoring defaults if the file is unreadable."""
    store: ConfigStore = ctx.obj
    try:
        config = asyncio.run(store.read())
    except ConfigError as exc:
        raise _fail(exc) from exc

    if output is OutputFormat.YAML:
        data = config.model_dump(mode="json", by_alias=True, exclude_none=True)
        typer.echo(yaml.safe_dump(data, sort_keys=False), nl=False)
    else:
        typer.echo(config.to_json())


@config_app.command("validate")
def validate_config(ctx: typer.Context) -> None:
    """Check that the settings can be turned into a runtime state."""
    store: ConfigStore = ctx.obj
    try:
        config = asyncio.run(store.read())
        state = StateDeriver.derive(config)
    except ConfigError as exc:
        raise _fail(exc) from exc
    except StateValidationError as exc:
        typer.secho(f"{exc.field}: {exc.message}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    enabled = ", ".join(s.value for s in state.enabled_services()) or "none"
    typer.echo("✅ Config valid")
    typer.echo(f"Enabled services: {enabled}")


@config_app.command("reset")
def reset_config(ctx: typer.Context, yes: bool = YES_OPTION) -> None:
    """Overwrite the settings with the defaults."""
    store: ConfigStore = ctx.obj
    try:
        path = store.path
        if not yes:
            typer.confirm(f"Overwrite {path} with the default settings?", abort=True)
        asyncio.run(store.reset())
    except ConfigError as exc:
        raise _fail(exc) from exc
    typer.secho(f"Settings reset in {path}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
