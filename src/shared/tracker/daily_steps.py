"""Daily step count parsing and reporting."""

import logging
from collections.abc import Callable
from datetime import timedelta

from src.shared.models import DailyStepsReport, StepsRecord, meters_to_km

from .durations import parse_duration
from .errors import (
    CalorieInputError,
    InvalidDurationError,
    InvalidStepsError,
    MalformedRecordError,
    ParseError,
)
from .training import MAX_STEPS, MAX_STEPS_DIGITS, walking_spent_calories

logger = logging.getLogger(__name__)

# Length of one step in meters
STEP_LENGTH = 0.65

STEPS_FIELDS = 2

_DIGITS = frozenset("0123456789")


def parse_package(raw: str) -> StepsRecord:
    """
    Parse a "steps,duration" daily steps record.

    Unlike training records, fields with leading or trailing whitespace
    are rejected rather than trimmed. A single leading "+" on the step
    count is allowed.

    Args:
        raw: Record such as "+1000,30m0s"

    Returns:
        Parsed steps record

    Raises:
        MalformedRecordError: If the record does not have two fields or a
            field has surrounding whitespace
        InvalidStepsError: If steps is not a positive run of digits
        InvalidDurationError: If the duration is unparsable or not positive
    """
    fields = raw.split(",")
    if len(fields) != STEPS_FIELDS:
        raise MalformedRecordError()

    steps_field, duration_field = fields
    if steps_field != steps_field.strip() or duration_field != duration_field.strip():
        raise MalformedRecordError("malformed record: surrounding whitespace")

    digits = steps_field.removeprefix("+")
    if not digits or not _DIGITS.issuperset(digits):
        raise InvalidStepsError()
    if len(digits.lstrip("0")) > MAX_STEPS_DIGITS:
        raise InvalidStepsError()
    steps = int(digits)
    if steps <= 0 or steps > MAX_STEPS:
        raise InvalidStepsError()

    duration = parse_duration(duration_field)
    if duration <= timedelta(0):
        raise InvalidDurationError()

    return StepsRecord(steps=steps, duration=duration)


def _log_warning(message: str) -> None:
    logger.warning(message)


class StepsCalculator:
    """
    Builds daily steps reports on a best-effort basis.

    Failures never propagate: they are passed to the ``log`` collaborator
    and the report comes back empty.
    """

    def __init__(self, log: Callable[[str], None] | None = None) -> None:
        """
        Initialize the calculator.

        Args:
            log: Sink for failure messages; defaults to a module logger warning
        """
        self.log = log if log is not None else _log_warning

    def parse(self, raw: str) -> StepsRecord:
        """Parse a daily steps record, raising ParseError on bad input."""
        return parse_package(raw)

    def build(self, raw: str, weight: float, height: float) -> DailyStepsReport | None:
        """
        Parse a record and calculate its report values.

        Args:
            raw: Record such as "+1000,30m0s"
            weight: Body weight in kilograms
            height: Body height

        Returns:
            Report, or None if the record or biometrics were rejected
        """
        try:
            record = self.parse(raw)
        except ParseError as e:
            self.log(str(e))
            return None

        distance_km = meters_to_km(record.steps * STEP_LENGTH)

        try:
            calories = walking_spent_calories(record.steps, weight, height, record.duration)
        except CalorieInputError as e:
            self.log(f"unable to compute calories: {e}")
            return None

        return DailyStepsReport(steps=record.steps, distance_km=distance_km, calories=calories)

    def report(self, raw: str, weight: float, height: float) -> str:
        """Render the daily steps report, or "" if it could not be built."""
        result = self.build(raw, weight, height)
        if result is None:
            return ""
        return result.render()


def daily_steps_report(
    raw: str,
    weight: float,
    height: float,
    log: Callable[[str], None] | None = None,
) -> str:
    """Render a daily steps report using a one-off StepsCalculator."""
    return StepsCalculator(log=log).report(raw, weight, height)
