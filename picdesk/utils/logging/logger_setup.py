"""Module: logger_setup.py

Date: 2026-10-17

Provides the ConfigureLogger class for setting up application-wide logging.
The root logger gets a console handler (INFO by default, dev-only records
filtered out) and optional rotating file handlers for the activity log and
a DEBUG log, all driven by the logging constants in picdesk.config.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

from picdesk.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DATE_FORMAT,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_DIR,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_FORMAT,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from picdesk.utils.logging.logger_helper import DevOnlyFilter


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> RotatingFileHandler:
    """Attach a rotating file handler to a logger.

    Args:
        logger: The logger to attach the handler to.
        log_path: Path to the log file.
        level: Logging level for this file handler.
        max_bytes: Maximum file size before rotating.
        backup_count: Number of backup files to keep.

    Returns:
        The handler that was added.
    """
    directory = os.path.dirname(log_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(file_handler)
    return file_handler


class ConfigureLogger:
    """Configures application-wide logging on the root logger."""

    def __init__(
        self,
        log_name: str = "picdesk",
        log_dir: str = LOG_DIR,
        console_level: int | None = None,
        log_to_file: bool = LOG_TO_FILE,
        debug_file: bool = LOG_DEBUG_FILE_ENABLED,
    ):
        """Initialize and configure the root logger.

        Args:
            log_name: Base name for the log files.
            log_dir: Directory to store log files.
            console_level: Console level, defaults to LOG_CONSOLE_LEVEL.
            log_to_file: Write the activity log file.
            debug_file: Write the DEBUG log file.
        """
        if console_level is None:
            console_level = getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO)

        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels

        if self.logger.hasHandlers():
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if LOG_TO_CONSOLE:
            self._setup_console_handler(console_level)

        if log_to_file:
            add_file_handler(
                self.logger,
                os.path.join(log_dir, f"{log_name}_{timestamp}.log"),
                level=getattr(logging, LOG_FILE_LEVEL, logging.INFO),
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )

        if debug_file:
            add_file_handler(
                self.logger,
                os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log"),
                level=logging.DEBUG,
                max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int) -> None:
        """Sets up console handler with UTF-8-safe output and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)
