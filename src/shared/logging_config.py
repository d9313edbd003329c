"""Logging setup for the activity tracker."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from src.shared.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """
    Route log records through Rich on stderr.

    Args:
        level: Logging level name; defaults to the configured log_level
    """
    log_level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
