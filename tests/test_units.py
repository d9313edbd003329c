"""Tests for unit conversion utilities."""

from datetime import timedelta

import pytest

from src.shared.models import (
    M_IN_KM,
    MIN_IN_H,
    duration_hours,
    duration_minutes,
    format_km,
    meters_to_km,
)


def test_meters_to_km_conversion():
    """Test meter to kilometer conversion."""
    assert meters_to_km(650) == pytest.approx(0.65)
    assert meters_to_km(M_IN_KM) == 1
    assert meters_to_km(42195) == pytest.approx(42.195)  # Marathon


def test_duration_hours():
    """Test durations convert to fractional hours."""
    assert duration_hours(timedelta(hours=3)) == 3
    assert duration_hours(timedelta(minutes=90)) == pytest.approx(1.5)
    assert duration_hours(timedelta(minutes=-30)) == pytest.approx(-0.5)
    assert duration_hours(timedelta(0)) == 0


def test_duration_minutes():
    """Test durations convert to fractional minutes."""
    assert duration_minutes(timedelta(hours=1)) == MIN_IN_H
    assert duration_minutes(timedelta(seconds=90)) == pytest.approx(1.5)


def test_format_km():
    """Test distance formatting in kilometers."""
    assert format_km(8.432) == "8.43 км"
    assert format_km(21.1) == "21.10 км"
    assert format_km(0) == "0.00 км"
