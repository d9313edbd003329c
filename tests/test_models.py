"""Tests for Pydantic data models."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from src.shared.models import (
    Biometrics,
    DailyStepsReport,
    StepsRecord,
    TrainingKind,
    TrainingRecord,
    TrainingReport,
)


def test_minimal_training_record():
    """Test creating a training record with valid fields."""
    record = TrainingRecord(steps=678, kind="ходьба", duration=timedelta(minutes=50))

    assert record.steps == 678
    assert record.kind == "ходьба"
    assert record.duration == timedelta(minutes=50)


@pytest.mark.parametrize(
    ("steps", "duration"),
    [
        (0, timedelta(minutes=50)),
        (-1, timedelta(minutes=50)),
        (100, timedelta(0)),
        (100, timedelta(seconds=-1)),
    ],
)
def test_training_record_rejects_invalid_values(steps, duration):
    """Test non-positive steps or durations fail validation."""
    with pytest.raises(ValidationError):
        TrainingRecord(steps=steps, kind="бег", duration=duration)


def test_steps_record_validation():
    """Test steps records enforce the same positivity rules."""
    assert StepsRecord(steps=1, duration=timedelta(seconds=1)).steps == 1

    with pytest.raises(ValidationError, match="duration must be positive"):
        StepsRecord(steps=1, duration=timedelta(0))
    with pytest.raises(ValidationError):
        StepsRecord(steps=0, duration=timedelta(hours=1))


def test_records_are_frozen():
    """Test parsed records cannot be mutated."""
    record = StepsRecord(steps=10, duration=timedelta(minutes=1))

    with pytest.raises(ValidationError):
        record.steps = 20


def test_biometrics_accepts_any_number():
    """Test biometrics leave positivity checks to the calorie functions."""
    biometrics = Biometrics(weight=0, height=-1)

    assert biometrics.weight == 0
    assert biometrics.height == -1


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("running", TrainingKind.RUNNING),
        ("Running", TrainingKind.RUNNING),
        ("бег", TrainingKind.RUNNING),
        ("Бег", TrainingKind.RUNNING),
        ("walking", TrainingKind.WALKING),
        ("ХОДЬБА", TrainingKind.WALKING),
        ("плавание", None),
        (" бег", None),
        ("", None),
    ],
)
def test_training_kind_from_label(label, expected):
    """Test kind labels resolve case-insensitively."""
    assert TrainingKind.from_label(label) == expected


def test_training_report_render():
    """Test training report lines and rounding."""
    report = TrainingReport(
        kind="бег",
        duration_hours=1.5,
        distance_km=12.3456,
        speed_kmh=8.2304,
        calories=612.345,
    )

    lines = report.render().splitlines()
    assert lines == [
        "Тип тренировки: бег",
        "Длительность: 1.50 ч.",
        "Дистанция: 12.35 км.",
        "Скорость: 8.23 км/ч",
        f"Сожгли калорий: {612.345:.2f}",
    ]
    assert report.render().endswith("\n")


def test_daily_steps_report_render():
    """Test daily steps report lines."""
    report = DailyStepsReport(steps=6000, distance_km=3.9, calories=250.0)

    assert report.render() == (
        "Количество шагов: 6000.\n"
        "Дистанция составила 3.90 км.\n"
        "Вы сожгли 250.00 ккал.\n"
    )


def test_report_serializes_to_dict():
    """Test reports dump to plain dictionaries."""
    report = DailyStepsReport(steps=10, distance_km=0.0065, calories=1.5)

    assert report.model_dump() == {"steps": 10, "distance_km": 0.0065, "calories": 1.5}
