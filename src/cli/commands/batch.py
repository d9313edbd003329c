"""Batch command for processing a file of records."""

import logging
from enum import Enum
from pathlib import Path

import typer

from src.cli import display
from src.cli.commands.reports import resolve_biometrics
from src.shared.tracker import StepsCalculator, TrackerError, training_report

logger = logging.getLogger(__name__)


class RecordKind(str, Enum):
    """Format of the records in a batch file."""

    TRAINING = "training"
    STEPS = "steps"


def batch(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="File with one record per line"
    ),
    kind: RecordKind = typer.Option(RecordKind.TRAINING, "--kind", "-k", help="Record format"),
    weight: float | None = typer.Option(None, "--weight", "-w", help="Body weight in kg"),
    height: float | None = typer.Option(None, "--height", "-H", help="Body height"),
) -> None:
    """Report on every record in a file, one line at a time."""
    biometrics = resolve_biometrics(weight, height)
    calculator = StepsCalculator(log=display.display_warning)

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as e:
        display.display_error(f"Cannot read {path.name}: not valid UTF-8 ({e.reason})")
        raise typer.Exit(1)

    logger.info(f"Processing {len(lines)} line(s) from {path} as {kind.value} records")

    processed = 0
    failed = 0
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        processed += 1

        if kind == RecordKind.TRAINING:
            try:
                text = training_report(line, biometrics.weight, biometrics.height)
            except TrackerError as e:
                display.display_error(f"Line {number}: {e}")
                failed += 1
                continue
        else:
            text = calculator.report(line, biometrics.weight, biometrics.height)
            if not text:
                display.display_error(f"Line {number}: daily steps record rejected")
                failed += 1
                continue

        display.display_report(text, title=f"Line {number}")

    display.display_summary(processed, failed)
    if failed:
        raise typer.Exit(1)
