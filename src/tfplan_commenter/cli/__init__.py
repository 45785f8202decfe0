"""Typer application: ``tfplan-commenter comment`` and global options."""

from __future__ import annotations

import logging
import sys

import typer

from tfplan_commenter import __version__
from tfplan_commenter.config.settings import LOG_ENV_VAR, LoggingSettings

app = typer.Typer(
    name="tfplan-commenter",
    help=(
        "Summarize `terraform show -json` output as a Markdown pull-request comment. "
        "Point `comment` at one plan file, or at a directory to report every "
        "tfplan.json below it grouped by environment."
    ),
    no_args_is_help=True,
    add_completion=False,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_VERBOSITY = {1: logging.INFO, 2: logging.DEBUG}


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"tfplan-commenter {__version__}")
        raise typer.Exit


def _requested_level(verbose: int) -> int | None:
    """Pick the package log level; ``TFPLAN_LOG`` overrides ``-v`` flags."""
    name = LoggingSettings().log.strip().upper()
    if not name:
        return _VERBOSITY.get(min(verbose, 2))
    if name not in _LEVEL_NAMES:
        typer.echo(
            f"WARNING: invalid {LOG_ENV_VAR} level '{name}' "
            f"(expected {', '.join(_LEVEL_NAMES)}); using INFO",
            err=True,
        )
        return logging.INFO
    return logging.getLevelName(name)


def _configure_logging(verbose: int) -> None:
    """Route ``tfplan_commenter`` logs to stderr when a level was requested."""
    level = _requested_level(verbose)
    if level is None:
        return
    logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT, stream=sys.stderr, force=True)
    logging.getLogger("tfplan_commenter").setLevel(level)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help=f"Log to stderr (-v info, -vv debug; {LOG_ENV_VAR} overrides).",
    ),
) -> None:
    """Turn Terraform plan JSON into Markdown pull-request comments."""
    _configure_logging(verbose)


from tfplan_commenter.cli import commands as _commands  # noqa: E402, F401
