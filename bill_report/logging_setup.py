"""Logging configuration for command-line runs."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOGGER_NAME = "bill_report"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure the package logger with a stderr handler and an optional file handler.

    Calling it again in the same process does not add duplicate handlers.
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")

    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler) for h in log.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        log.addHandler(handler)
    if log_file and not any(getattr(h, "baseFilename", "") == os.path.abspath(log_file) for h in log.handlers):
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            log.addHandler(file_handler)
        except OSError:
            log.warning("Could not open log file %s", log_file)

    return log
