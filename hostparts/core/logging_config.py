"""Logging configuration for hostparts."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .constants import LOG_BACKUP_COUNT, LOG_MAX_BYTES

# Format strings
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(debug_mode: bool = False, log_file: Path | str | None = None) -> None:
    """
    Configure application logging.

    Sets up up to two log targets:
    1. Console: stderr, WARNING and above (DEBUG in debug mode)
    2. Log file: rotating file handler with DEBUG level, when log_file is set

    Args:
        debug_mode: If True, output DEBUG to console
        log_file: Optional path of a rotating debug log
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug_mode else logging.WARNING)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)
