"""Command-line helpers for inspecting and editing settings files."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, Optional

import typer
from dotenv import find_dotenv, load_dotenv

from glueconf.context import SettingsContext
from glueconf.errors import GlueConfError
from glueconf.persister import persist_setting

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Flat name=value settings file helper", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "glueconf.cli"

CONFIG_OPTION = typer.Option(
    None, "--config", "-c", dir_okay=False, help="Settings file (default: config.properties)"
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
STRICT_OPTION = typer.Option(False, "--strict", help="Fail if the name has no line in the file")
NAME_ARGUMENT = typer.Argument(..., help="Setting name")
VALUE_ARGUMENT = typer.Argument(..., help="New value")


def _setup(debug: bool) -> SettingsContext:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return SettingsContext(base_dir=Path.cwd())


def _fail(exc: GlueConfError) -> typer.Exit:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


@app.callback()
def main() -> None:
    """Read .env files so GLUECONF_CONFIG can be set there."""
    load_dotenv(find_dotenv(usecwd=True))


@app.command()
def show(config: Optional[Path] = CONFIG_OPTION, debug: bool = DEBUG_OPTION) -> None:
    """Print every resolved setting as name=value."""
    ctx = _setup(debug)
    try:
        settings = ctx.retrieve(config)
    except GlueConfError as exc:
        raise _fail(exc) from exc
    for name, value in settings.items():
        typer.echo(f"{name}={value}")


@app.command()
def get(
    name: str = NAME_ARGUMENT,
    config: Optional[Path] = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print the resolved value of one setting."""
    ctx = _setup(debug)
    try:
        settings = ctx.retrieve(config)
    except GlueConfError as exc:
        raise _fail(exc) from exc
    if name not in settings:
        typer.secho(f"No setting named {name}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(settings[name])


@app.command("set")
def set_value(
    name: str = NAME_ARGUMENT,
    value: str = VALUE_ARGUMENT,
    config: Optional[Path] = CONFIG_OPTION,
    strict: bool = STRICT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Save a new value for an existing setting."""
    ctx = _setup(debug)
    try:
        if config is not None:
            saved = persist_setting(config, name, value, strict=strict)
        else:
            saved = ctx.persist(name, value, strict=strict)
    except GlueConfError as exc:
        raise _fail(exc) from exc
    if saved:
        typer.secho(f"{name}={value}", fg=typer.colors.GREEN)
    else:
        typer.echo(f"No {name}= line found, nothing saved")


@app.command()
def check(config: Optional[Path] = CONFIG_OPTION, debug: bool = DEBUG_OPTION) -> None:
    """Load a settings file and report whether it is valid."""
    ctx = _setup(debug)
    try:
        settings = ctx.retrieve(config)
    except GlueConfError as exc:
        raise _fail(exc) from exc
    typer.echo(f"✅ Config valid ({len(settings)} settings)")


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
