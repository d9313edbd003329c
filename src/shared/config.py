"""Configuration management for the activity tracker."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared.models import Biometrics

logger = logging.getLogger(__name__)


def find_env_file() -> Path | None:
    """Find .env file at git root (project root)."""
    # Search up for git root and use .env there
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / ".git").exists():
            env_file = parent / ".env"
            if env_file.exists():
                return env_file
            break
    # Fallback to current directory
    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env
    return None


# Find env file once at module load
_env_file = find_env_file()


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Variables use the TRACKER_ prefix, e.g. TRACKER_DEFAULT_WEIGHT=80.
    Locally, they may also come from a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file,
        env_file_encoding="utf-8",
        env_prefix="TRACKER_",
        case_sensitive=False,
        extra="ignore",
    )

    # Default biometrics for the CLI
    default_weight: float = Field(
        default=75.0,
        description="Body weight in kilograms used when none is given",
    )
    default_height: float = Field(
        default=175.0,
        description="Body height used when none is given",
    )

    # Application Settings
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    def default_biometrics(self) -> Biometrics:
        """Biometrics built from the configured defaults."""
        return Biometrics(weight=self.default_weight, height=self.default_height)


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern).

    Returns:
        Settings instance with all configuration
    """
    global _settings
    if _settings is not None:
        return _settings

    _settings = Settings()
    logger.debug(f"Loaded settings: log_level={_settings.log_level}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
