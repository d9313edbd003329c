"""Shared pytest fixtures."""

import pytest

from src.shared.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Reload settings for each test without picking up a local environment."""
    for name in ("TRACKER_DEFAULT_WEIGHT", "TRACKER_DEFAULT_HEIGHT", "TRACKER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
