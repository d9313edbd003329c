"""Data models for the activity tracker."""

from .enums import TrainingKind
from .records import Biometrics, StepsRecord, TrainingRecord
from .reports import DailyStepsReport, TrainingReport
from .units import (
    M_IN_KM,
    MIN_IN_H,
    duration_hours,
    duration_minutes,
    format_km,
    meters_to_km,
)

__all__ = [
    # Records
    "TrainingRecord",
    "StepsRecord",
    "Biometrics",
    # Reports
    "TrainingReport",
    "DailyStepsReport",
    # Enums
    "TrainingKind",
    # Units
    "M_IN_KM",
    "MIN_IN_H",
    "meters_to_km",
    "duration_hours",
    "duration_minutes",
    "format_km",
]
