"""Logging configuration module with optional file output."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from basics.config import Settings, settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_DETAILED = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)


def setup_logging(config: Settings | None = None) -> None:
    """Configure application logging based on settings.

    Sets up console logging (always) and file logging (if enabled).
    File logging uses rotation to prevent unbounded growth.
    """
    config = config or settings
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.log_level))

    # Remove existing handlers to avoid duplicates on reload
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console goes to stderr so command output stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    if config.log_file_enabled:
        log_path = config.resolved_log_file_path
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=log_path,
            maxBytes=config.log_file_max_bytes,
            backupCount=config.log_file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED))
        root_logger.addHandler(file_handler)
