"""Parser for compound duration strings such as "40m" or "1h30m"."""

import re
from datetime import timedelta
from decimal import ROUND_HALF_EVEN, Decimal

from .errors import InvalidDurationError

# Seconds per unit suffix
UNIT_SECONDS: dict[str, Decimal] = {
    "ns": Decimal("0.000000001"),
    "us": Decimal("0.000001"),
    "µs": Decimal("0.000001"),  # U+00B5 micro sign
    "μs": Decimal("0.000001"),  # U+03BC greek mu
    "ms": Decimal("0.001"),
    "s": Decimal(1),
    "m": Decimal(60),
    "h": Decimal(3600),
}

# Longer suffixes first so "ms" is not read as "m" followed by garbage
_COMPONENT = re.compile(r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(ns|us|µs|μs|ms|h|m|s)")


def parse_duration(text: str) -> timedelta:
    """
    Parse a duration made of concatenated ``<number><unit>`` groups.

    Accepts an optional leading sign and fractional numbers, e.g. "1h30m",
    "30m0s", "1.5h", "-10s". The bare string "0" is a zero duration.
    Positivity is not checked here. Values are kept to the microsecond,
    and a positive total below one microsecond becomes one microsecond.

    Args:
        text: Duration string

    Returns:
        Parsed duration

    Raises:
        InvalidDurationError: If the string does not follow the grammar
    """
    if text == "0":
        return timedelta(0)

    body = text
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]

    if not body:
        raise InvalidDurationError(f"invalid duration: {text!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(body):
        match = _COMPONENT.match(body, pos)
        if match is None:
            raise InvalidDurationError(f"invalid duration: {text!r}")
        number, unit = match.groups()
        total += Decimal(number) * UNIT_SECONDS[unit]
        pos = match.end()

    if negative:
        total = -total

    # timedelta resolution is one microsecond; keep positive totals positive
    micros = int((total * 1_000_000).to_integral_value(rounding=ROUND_HALF_EVEN))
    if total > 0 and micros == 0:
        micros = 1

    try:
        return timedelta(microseconds=micros)
    except OverflowError as e:
        raise InvalidDurationError(f"duration out of range: {text!r}") from e


def format_duration(duration: timedelta) -> str:
    """
    Format a duration in the same grammar parse_duration accepts.

    Hours and minutes are only shown when non-zero at the leading
    position, e.g. "3h0m0s", "30m0s", "1.5s". Zero is "0s".
    """
    micros = (duration.days * 86400 + duration.seconds) * 1_000_000 + duration.microseconds
    if micros == 0:
        return "0s"

    sign = "-" if micros < 0 else ""
    hours, rest = divmod(abs(micros), 3600 * 1_000_000)
    minutes, rest = divmod(rest, 60 * 1_000_000)
    seconds, fraction = divmod(rest, 1_000_000)

    secs = str(seconds)
    if fraction:
        secs += f".{fraction:06d}".rstrip("0")

    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"
