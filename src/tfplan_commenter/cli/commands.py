"""CLI command implementations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from tfplan_commenter.cli import app
from tfplan_commenter.cli.errors import handle_error

ConfigPath = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to a settings file (default: .tfplan-commenter.yaml if present).",
    ),
]

NoColor = Annotated[
    bool,
    typer.Option("--no-color", help="Disable colored output."),
]


def _use_color(no_color: bool) -> bool:
    """Determine whether to use color output."""
    return not (no_color or os.environ.get("NO_COLOR"))


@app.command()
def comment(
    input_path: Annotated[
        Path,
        typer.Argument(
            metavar="INPUT",
            help="Terraform plan JSON file, or a directory searched for tfplan.json files.",
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Argument(help="Output Markdown file (default: terraform-plan-comment.md)."),
    ] = None,
    config: ConfigPath = None,
    stdout: Annotated[
        bool,
        typer.Option("--stdout", help="Print the comment instead of writing a file."),
    ] = False,
    no_color: NoColor = False,
) -> None:
    """Generate a Markdown pull-request comment from one or more plans."""
    from tfplan_commenter.config import load_settings
    from tfplan_commenter.plan import NoPlansFoundError, find_plans, read_plan
    from tfplan_commenter.render import render_plan, render_plans

    color = _use_color(no_color)
    plan_count: int | None = None
    try:
        settings = load_settings(config)
        if input_path.is_dir():
            plans = find_plans(input_path, filename=settings.plan_filename)
            if not plans:
                raise NoPlansFoundError(input_path, settings.plan_filename)
            plan_count = len(plans)
            markdown = render_plans(plans, max_listed=settings.max_listed)
        else:
            markdown = render_plan(read_plan(input_path), max_listed=settings.max_listed)

        if stdout:
            typer.echo(markdown, nl=False)
            return

        out = output if output is not None else settings.output
        out.write_text(markdown, encoding="utf-8")
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    if plan_count is not None:
        typer.echo(f"Multi-plan comment generated from {plan_count} plan(s): {out}")
    else:
        typer.echo(f"Terraform plan comment generated: {out}")
