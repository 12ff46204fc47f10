"""Lockbox settings CLI.

Command-line helpers to check, inspect, normalise and create the JSON
settings file the application persists its configuration in.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Final

import typer
import yaml

from lockbox.codec import SettingsCodec
from lockbox.environment import Environment
from lockbox.errors import SettingsDecodeError
from lockbox.settings import Settings
from lockbox.utils import atomic_write

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Lockbox settings file tools", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "lockbox.cli"


class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"


FILE_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Settings JSON file")
DST_ARGUMENT = typer.Argument(..., dir_okay=False, help="Settings JSON file to create")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
FORMAT_OPTION = typer.Option(OutputFormat.JSON, "--format", "-f", help="Output format")
OUTPUT_OPTION = typer.Option(
    None, "--output", "-o", dir_okay=False, help="Write here instead of rewriting FILE"
)
FORCE_OPTION = typer.Option(False, "--force", help="Overwrite an existing file")


@app.callback()
def main(debug: bool = DEBUG_OPTION) -> None:
    """Inspect and maintain Lockbox settings files."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load(codec: SettingsCodec, file: Path) -> Settings:
    """Decode ``file``, exiting with status 1 if it is malformed."""
    try:
        with file.open(encoding="utf-8") as f:
            return codec.read(f)
    except SettingsDecodeError as exc:
        typer.secho(f"{file}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── commands ──────────────────────────────────────────
@app.command()
def validate(file: Path = FILE_ARGUMENT) -> None:
    """Check that FILE is a well-formed settings document."""
    _load(SettingsCodec(Environment.from_env()), file)
    typer.echo("✅ Settings valid")


@app.command()
def show(file: Path = FILE_ARGUMENT, fmt: OutputFormat = FORMAT_OPTION) -> None:
    """Print FILE as it is seen after loading, defaults filled in."""
    codec = SettingsCodec(Environment.from_env())
    settings = _load(codec, file)
    if fmt is OutputFormat.YAML:
        typer.echo(yaml.safe_dump(codec.encode(settings), sort_keys=False, allow_unicode=True))
    else:
        typer.echo(codec.dumps(settings))


@app.command()
def normalize(file: Path = FILE_ARGUMENT, output: Path | None = OUTPUT_OPTION) -> None:
    """Rewrite FILE with stale values replaced and unknown members dropped."""
    codec = SettingsCodec(Environment.from_env())
    settings = _load(codec, file)
    target = output or file
    with atomic_write(target) as f:
        codec.write(f, settings)
    typer.secho(f"Settings written to {target}", fg=typer.colors.GREEN)


@app.command()
def init(dst: Path = DST_ARGUMENT, force: bool = FORCE_OPTION) -> None:
    """Create a settings file holding the defaults for this machine."""
    if dst.exists() and not force:
        typer.secho(f"{dst} already exists, use --force to overwrite", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    env = Environment.from_env()
    codec = SettingsCodec(env)
    with atomic_write(dst) as f:
        codec.write(f, Settings.from_environment(env))
    typer.secho(f"Settings written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
