"""
Shared utilities for the Ladder score system.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import math
from pathlib import Path

from ladder.config import TEAM_MARKER


def clean_player_name(name) -> str:
    """Trim surrounding whitespace; anything else about a name is significant."""
    if name is None:
        return ""
    return str(name).strip()


def is_team_entry(name: str) -> bool:
    """Return True when a cell names a grouped entry such as 'Alice/Bob'."""
    return TEAM_MARKER in name


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def silence_logging(level: int = logging.WARNING) -> None:
    """Raise the level of every ladder logger, e.g. while printing a table."""
    for name in list(logging.root.manager.loggerDict):
        if name == "ladder" or name.startswith("ladder."):
            logging.getLogger(name).setLevel(level)


# --- Validation ---
def validate_input_size(path: Path, max_size: int) -> None:
    """
    Validate that an input file does not exceed maximum size.

    Args:
        path: File to check
        max_size: Maximum allowed size in bytes

    Raises:
        ValueError: If the file exceeds max_size
    """
    size = path.stat().st_size
    if size > max_size:
        raise ValueError(
            f"Input too large: {size:,} bytes. "
            f"Maximum allowed: {max_size:,} bytes"
        )


def validate_positive(value, label: str) -> None:
    """
    Validate that a tuning constant is a finite, strictly positive number.

    Raises:
        ValueError: If value is zero, negative, NaN or infinite
    """
    if not (isinstance(value, (int, float)) and math.isfinite(value) and value > 0):
        raise ValueError(f"{label} must be a positive number, got {value!r}")


__all__ = [
    # Names
    'clean_player_name',
    'is_team_entry',
    # Logging
    'setup_logging',
    'silence_logging',
    # Validation
    'validate_input_size',
    'validate_positive',
]
