#!/usr/bin/env python3
"""
tracker - activity tracker CLI

Turns activity records into distance, speed and calorie summaries.

Usage:
    tracker training "3456,ходьба,3h00m" -w 85 -H 185
    tracker steps "+1000,30m0s"
    tracker batch records.txt --kind steps
"""

import typer
from rich.console import Console

from src.cli import __version__
from src.cli.commands import batch, reports
from src.shared.logging_config import configure_logging

# Create the main app
app = typer.Typer(
    name="tracker",
    help="Summarize activity records from the terminal.",
    no_args_is_help=True,
    add_completion=True,
)

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"tracker version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version"
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help="Logging level (defaults to TRACKER_LOG_LEVEL)"
    ),
) -> None:
    """
    tracker - summarize activity records from the terminal.
    """
    configure_logging(log_level)


# Register commands directly on the app
app.command(name="training")(reports.training)
app.command(name="steps")(reports.steps)
app.command(name="batch")(batch.batch)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
