"""Parsed activity record models."""

from datetime import timedelta

from pydantic import BaseModel, Field, field_validator


def _require_positive_duration(v: timedelta) -> timedelta:
    if v <= timedelta(0):
        raise ValueError("duration must be positive")
    return v


class TrainingRecord(BaseModel):
    """
    A training session parsed from a "steps,kind,duration" record.

    The kind is stored exactly as written; case folding only happens
    when it is matched against known training kinds.
    """

    steps: int = Field(description="Number of steps taken", gt=0)
    kind: str = Field(description="Training kind as written in the record")
    duration: timedelta = Field(description="Session duration")

    model_config = {"frozen": True}

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: timedelta) -> timedelta:
        """Ensure the session lasted a positive amount of time."""
        return _require_positive_duration(v)


class StepsRecord(BaseModel):
    """Daily steps parsed from a "steps,duration" record."""

    steps: int = Field(description="Number of steps taken", gt=0)
    duration: timedelta = Field(description="Time spent walking")

    model_config = {"frozen": True}

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: timedelta) -> timedelta:
        """Ensure the activity lasted a positive amount of time."""
        return _require_positive_duration(v)


class Biometrics(BaseModel):
    """
    User body measurements supplied with each calculation.

    Height must be in the unit the step-length coefficient expects.
    Positivity is checked by the calorie functions, which report each
    invalid measurement separately.
    """

    weight: float = Field(description="Body weight in kilograms")
    height: float = Field(description="Body height")

    model_config = {"frozen": True}
