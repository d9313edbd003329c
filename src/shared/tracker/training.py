"""Training record parsing and distance, speed and calorie calculations."""

import logging
import re
from collections.abc import Callable
from datetime import timedelta

from src.shared.models import (
    M_IN_KM,
    MIN_IN_H,
    TrainingKind,
    TrainingRecord,
    TrainingReport,
    duration_hours,
    duration_minutes,
)

from .durations import parse_duration
from .errors import (
    CalorieComputationError,
    CalorieInputError,
    InvalidDurationError,
    InvalidStepsError,
    MalformedRecordError,
    UnknownTrainingKindError,
)

logger = logging.getLogger(__name__)

# Stride length as a fraction of body height
STEP_LENGTH_COEFFICIENT = 0.45
# Walking burns this fraction of the running estimate
WALKING_CALORIES_COEFFICIENT = 0.5

TRAINING_FIELDS = 3

# Largest step count a record may carry (signed 64-bit)
MAX_STEPS = 2**63 - 1
MAX_STEPS_DIGITS = len(str(MAX_STEPS))

_STEPS_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_training(raw: str) -> TrainingRecord:
    """
    Parse a "steps,kind,duration" training record.

    Surrounding whitespace in the steps and duration fields is ignored.
    The kind is kept exactly as written.

    Args:
        raw: Record such as "678,ходьба,50m"

    Returns:
        Parsed training record

    Raises:
        MalformedRecordError: If the record does not have three fields
        InvalidStepsError: If steps is not a positive integer
        InvalidDurationError: If the duration is unparsable or not positive
    """
    fields = raw.split(",")
    if len(fields) != TRAINING_FIELDS:
        raise MalformedRecordError()

    steps_field, kind, duration_field = fields

    steps_field = steps_field.strip()
    if not _STEPS_PATTERN.fullmatch(steps_field):
        raise InvalidStepsError()
    if len(steps_field.lstrip("+-").lstrip("0")) > MAX_STEPS_DIGITS:
        raise InvalidStepsError()
    steps = int(steps_field)
    if steps <= 0 or steps > MAX_STEPS:
        raise InvalidStepsError()

    duration = parse_duration(duration_field.strip())
    if duration <= timedelta(0):
        raise InvalidDurationError()

    logger.debug(f"Parsed training record: steps={steps}, kind={kind!r}, duration={duration}")
    return TrainingRecord(steps=steps, kind=kind, duration=duration)


def distance(steps: int, height: float) -> float:
    """
    Estimate distance covered from step count and height.

    Args:
        steps: Number of steps
        height: Body height

    Returns:
        Distance in kilometers
    """
    return STEP_LENGTH_COEFFICIENT * height * steps / M_IN_KM


def mean_speed(steps: int, height: float, duration: timedelta) -> float:
    """
    Calculate mean speed in kilometers per hour.

    Returns 0 for a non-positive duration.
    """
    if duration <= timedelta(0):
        return 0.0
    hours = duration_hours(duration)
    if hours <= 0:
        return 0.0
    return distance(steps, height) / hours


def _check_calorie_inputs(steps: int, weight: float, height: float, duration: timedelta) -> None:
    if steps <= 0:
        raise CalorieInputError("steps")
    if weight <= 0:
        raise CalorieInputError("weight")
    if height <= 0:
        raise CalorieInputError("height")
    if duration <= timedelta(0):
        raise CalorieInputError("duration")


def running_spent_calories(
    steps: int, weight: float, height: float, duration: timedelta
) -> float:
    """
    Calculate calories burned while running.

    Args:
        steps: Number of steps
        weight: Body weight in kilograms
        height: Body height
        duration: Session duration

    Returns:
        Calories burned in kcal

    Raises:
        CalorieInputError: If any input is not positive
    """
    _check_calorie_inputs(steps, weight, height, duration)
    speed = mean_speed(steps, height, duration)
    return weight * speed * duration_minutes(duration) / MIN_IN_H


def walking_spent_calories(
    steps: int, weight: float, height: float, duration: timedelta
) -> float:
    """
    Calculate calories burned while walking.

    Same inputs and errors as running_spent_calories, scaled down by
    WALKING_CALORIES_COEFFICIENT.
    """
    _check_calorie_inputs(steps, weight, height, duration)
    speed = mean_speed(steps, height, duration)
    calories = weight * speed * duration_minutes(duration) / MIN_IN_H
    return calories * WALKING_CALORIES_COEFFICIENT


CALORIE_FUNCTIONS: dict[TrainingKind, Callable[[int, float, float, timedelta], float]] = {
    TrainingKind.RUNNING: running_spent_calories,
    TrainingKind.WALKING: walking_spent_calories,
}


def build_training_report(raw: str, weight: float, height: float) -> TrainingReport:
    """
    Parse a training record and calculate its report values.

    Args:
        raw: Record such as "3456,ходьба,3h00m"
        weight: Body weight in kilograms
        height: Body height

    Returns:
        Report with duration, distance, speed and calories

    Raises:
        ParseError: If the record cannot be parsed
        UnknownTrainingKindError: If the kind is not running or walking
        CalorieComputationError: If calories cannot be computed
    """
    record = parse_training(raw)

    kind = TrainingKind.from_label(record.kind)
    if kind is None:
        raise UnknownTrainingKindError(record.kind)

    try:
        calories = CALORIE_FUNCTIONS[kind](record.steps, weight, height, record.duration)
    except CalorieInputError as e:
        logger.debug(f"Calorie calculation rejected input: {e}")
        raise CalorieComputationError() from e

    return TrainingReport(
        kind=record.kind,
        duration_hours=duration_hours(record.duration),
        distance_km=distance(record.steps, height),
        speed_kmh=mean_speed(record.steps, height, record.duration),
        calories=calories,
    )


def training_report(raw: str, weight: float, height: float) -> str:
    """Parse a training record and render its report text."""
    return build_training_report(raw, weight, height).render()
