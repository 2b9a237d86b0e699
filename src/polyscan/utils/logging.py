"""Centralized logging utilities for polyscan.

Provides a single place to configure logging and fetch namespaced loggers.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"

# Log rotation settings
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def level_from_name(name: Optional[str], default: int = logging.WARNING) -> int:
    """Map a level name such as "info" to its logging constant."""
    if not name:
        return default
    return LEVEL_NAMES.get(str(name).upper(), default)


def level_from_verbosity(verbose: int) -> int:
    """-v gives INFO, -vv or more gives DEBUG, otherwise WARNING."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    level: int = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> None:
    """Configure logging for the 'polyscan' namespace.

    Args:
        level: Logging level for the application logger
        log_file: Optional path for log file output
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)

    Notes:
        - Root logger kept at WARNING to suppress third-party noise
        - Console handler writes to stderr; stdout carries BED output
        - File handler (if any) is detailed at DEBUG and rotates
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    app_logger = logging.getLogger("polyscan")
    app_logger.setLevel(level)
    # Avoid duplicate logs if called multiple times
    for h in list(app_logger.handlers):
        app_logger.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    app_logger.addHandler(console)

    if log_file:
        log_file = Path(log_file)
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            app_logger.addHandler(file_handler)
            # File handler wants DEBUG even when the console is quieter
            app_logger.setLevel(logging.DEBUG)
        except OSError as e:
            import warnings
            warnings.warn(f"Failed to create log file {log_file}: {e}")

    # Do not propagate to root to avoid double-printing
    app_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger under 'polyscan' root."""
    base = logging.getLogger("polyscan")
    return base.getChild(name)


class LogTemplates:
    """Standard log message templates for consistent logging across modules."""

    RUN_START = "Scanning {path} ({params})"
    RECORD_SCANNED = "{record_id}: {length:,} bp, {windows:,} windows, {plus:,} (+) / {minus:,} (-)"
    RECORD_SKIPPED = "{record_id}: {length:,} bp is shorter than window {window:,}, skipped"
    RUN_SUMMARY = (
        "Scanned {records:,} records ({skipped:,} skipped), {windows:,} windows, "
        "{matches:,} matches written"
    )
    FILE_CREATED = "Created output file: {path}"
