from __future__ import annotations

from pathlib import Path

import typer

from trenako_seeding.config import CommandOptions
from trenako_seeding.env import SOURCE_ENVVAR
from trenako_seeding.logging_utils import setup_rich_logging
from trenako_seeding.seeding import run
from trenako_seeding.version import __version__

COMMAND_NAME = "trenako-seeding"

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Seed the trenako database from a dataset of JSON resources.",
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{COMMAND_NAME} {__version__}")
        raise typer.Exit()


@app.command(name=COMMAND_NAME)
def seed(
    verbose: bool = typer.Option(
        False,
        "-v",
        "--verbose",
        help="Enable verbose output.",
    ),
    source: Path | None = typer.Option(
        None,
        "-s",
        "--source",
        envvar=SOURCE_ENVVAR,
        exists=True,
        file_okay=False,
        dir_okay=True,
        help="Root directory of the dataset to validate before seeding.",
    ),
    version: bool = typer.Option(
        False,
        "-V",
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Print version and exit.",
    ),
) -> None:
    """Seed the trenako database from a dataset of JSON resources."""
    options = CommandOptions(verbose=verbose, source=source)
    setup_rich_logging(options.verbose)

    exit_code = run(options)
    if exit_code != 0:
        raise typer.Exit(code=exit_code)


def main() -> None:
    app(prog_name=COMMAND_NAME)
