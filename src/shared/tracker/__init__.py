"""Activity record parsing and calorie calculations."""

from .daily_steps import StepsCalculator, daily_steps_report, parse_package
from .durations import format_duration, parse_duration
from .errors import (
    CalorieComputationError,
    CalorieInputError,
    InvalidDurationError,
    InvalidStepsError,
    MalformedRecordError,
    ParseError,
    TrackerError,
    UnknownTrainingKindError,
)
from .training import (
    build_training_report,
    distance,
    mean_speed,
    parse_training,
    running_spent_calories,
    training_report,
    walking_spent_calories,
)

__all__ = [
    # Reports
    "training_report",
    "build_training_report",
    "daily_steps_report",
    "StepsCalculator",
    # Parsing
    "parse_training",
    "parse_package",
    "parse_duration",
    "format_duration",
    # Calculations
    "distance",
    "mean_speed",
    "running_spent_calories",
    "walking_spent_calories",
    # Errors
    "TrackerError",
    "ParseError",
    "MalformedRecordError",
    "InvalidStepsError",
    "InvalidDurationError",
    "UnknownTrainingKindError",
    "CalorieInputError",
    "CalorieComputationError",
]
