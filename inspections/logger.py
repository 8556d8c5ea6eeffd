"""
Logging configuration for the inspection analyser.
Provides centralized logging setup.
"""

import logging
import sys
from .config import LOG_LEVEL, LOG_FORMAT, LOG_DIR, CONSOLE_LOG_LEVEL

# Log file path
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "inspections.log"


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a logger with both file and console handlers.

    Args:
        name: Name of the logger (typically __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # File handler - detailed logs
    file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    # Console handler - diagnostics go to stderr, menu output owns stdout
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, CONSOLE_LOG_LEVEL))
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    return logger


def log_record_stats(records, logger: logging.Logger, name: str = "Records"):
    """Log statistics about a batch of inspection records."""
    if not records:
        logger.warning(f"{name}: no records")
        return

    dates = [record.inspection_date for record in records]
    logger.info(
        f"{name}: {len(records)} records, "
        f"{len({record.neighborhood for record in records})} neighborhoods, "
        f"date range: {min(dates).display()} to {max(dates).display()}"
    )
