"""Exception types raised while parsing records and computing calories."""


class TrackerError(Exception):
    """Base class for all activity tracker errors."""


class ParseError(TrackerError, ValueError):
    """Raised when a raw record cannot be parsed."""


class MalformedRecordError(ParseError):
    """Record has the wrong number of fields or stray whitespace."""

    def __init__(self, message: str = "malformed record") -> None:
        super().__init__(message)


class InvalidStepsError(ParseError):
    """Step field is not a positive integer."""

    def __init__(self, message: str = "invalid step value") -> None:
        super().__init__(message)


class InvalidDurationError(ParseError):
    """Duration field is unparsable or not positive."""

    def __init__(self, message: str = "invalid duration") -> None:
        super().__init__(message)


class UnknownTrainingKindError(TrackerError, ValueError):
    """Training kind is neither running nor walking."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"unknown training kind: {kind}")


class CalorieInputError(TrackerError, ValueError):
    """
    A calorie function received a non-positive input.

    Attributes:
        field: Name of the offending input (steps, weight, height or duration)
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"invalid {field}")


class CalorieComputationError(TrackerError):
    """Calories could not be computed for a report."""

    def __init__(self, message: str = "unable to compute calories") -> None:
        super().__init__(message)
