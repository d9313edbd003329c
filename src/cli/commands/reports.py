"""Report commands for the tracker CLI."""

import json

import typer

from src.cli import display
from src.shared.config import get_settings
from src.shared.models import Biometrics
from src.shared.tracker import StepsCalculator, TrackerError, build_training_report


def resolve_biometrics(weight: float | None, height: float | None) -> Biometrics:
    """Fill in missing weight or height from the configured defaults."""
    defaults = get_settings().default_biometrics()
    return Biometrics(
        weight=defaults.weight if weight is None else weight,
        height=defaults.height if height is None else height,
    )


def training(
    record: str = typer.Argument(..., help='Training record, e.g. "3456,ходьба,3h00m"'),
    weight: float | None = typer.Option(None, "--weight", "-w", help="Body weight in kg"),
    height: float | None = typer.Option(None, "--height", "-H", help="Body height"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show distance, speed and calories for a training session."""
    biometrics = resolve_biometrics(weight, height)

    try:
        report = build_training_report(record, biometrics.weight, biometrics.height)
    except TrackerError as e:
        display.display_error(str(e))
        raise typer.Exit(1)

    if json_output:
        print(json.dumps(report.model_dump(), indent=2, ensure_ascii=False))
    else:
        display.display_report(report.render(), title="Training")


def steps(
    record: str = typer.Argument(..., help='Daily steps record, e.g. "+1000,30m0s"'),
    weight: float | None = typer.Option(None, "--weight", "-w", help="Body weight in kg"),
    height: float | None = typer.Option(None, "--height", "-H", help="Body height"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show distance and calories for a day's steps."""
    biometrics = resolve_biometrics(weight, height)
    calculator = StepsCalculator(log=display.display_warning)

    report = calculator.build(record, biometrics.weight, biometrics.height)
    if report is None:
        display.display_error("Daily steps record rejected")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps(report.model_dump(), indent=2, ensure_ascii=False))
    else:
        display.display_report(report.render(), title="Daily steps")
