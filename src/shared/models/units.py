"""Unit conversion utilities for distance and time."""

from datetime import timedelta

# Conversion constants
M_IN_KM = 1000
MIN_IN_H = 60
SEC_IN_MIN = 60
SEC_IN_H = SEC_IN_MIN * MIN_IN_H


def meters_to_km(meters: float) -> float:
    """
    Convert meters to kilometers.

    Args:
        meters: Distance in meters

    Returns:
        Distance in kilometers
    """
    return meters / M_IN_KM


def duration_hours(duration: timedelta) -> float:
    """Get a duration as fractional hours."""
    return duration.total_seconds() / SEC_IN_H


def duration_minutes(duration: timedelta) -> float:
    """Get a duration as fractional minutes."""
    return duration.total_seconds() / SEC_IN_MIN


def format_km(distance_km: float) -> str:
    """
    Format distance in kilometers with two decimals.

    Args:
        distance_km: Distance in kilometers

    Returns:
        Formatted distance string (e.g., "8.43 км")
    """
    return f"{distance_km:.2f} км"
