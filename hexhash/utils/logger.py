"""Logging setup with a stderr console handler and optional JSONL output."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any


def get_logger(
    name: str,
    log_file: Path | None = None,
    level: str | int = logging.WARNING,
) -> logging.Logger:
    """
    Get a configured logger with a console handler and optional file handler.

    Console output goes to stderr because stdout carries command results.

    Args:
        name: Logger name (usually the package name)
        log_file: Optional path to JSONL log file
        level: Logging level name or number

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Only add handlers once
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        logger.addHandler(JSONLFileHandler(log_file))

    return logger


class JSONLFileHandler(logging.Handler):
    """Handler that appends log records as JSON Lines."""

    def __init__(self, filepath: Path):
        super().__init__()
        self.filepath = Path(filepath)
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        """
        Write log record as one JSON line.

        Args:
            record: Log record to write
        """
        try:
            log_entry = {
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno,
            }

            # Structured fields from log_event
            if hasattr(record, "extra"):
                log_entry.update(record.extra)

            with open(self.filepath, "a", encoding="utf-8") as f:
                f.write(json.dumps(log_entry) + "\n")

        except Exception:
            self.handleError(record)


def log_event(
    logger: logging.Logger,
    event_type: str,
    message: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log a structured event with additional metadata.

    Args:
        logger: Logger instance
        event_type: Type of event (e.g., "hash_success", "hash_failed")
        message: Human-readable message
        level: Logging level for the record
        **kwargs: Additional metadata to include in log
    """
    if not logger.isEnabledFor(level):
        return

    record = logger.makeRecord(
        logger.name,
        level,
        "(unknown file)",
        0,
        message,
        (),
        None,
    )
    record.extra = {"event_type": event_type, **kwargs}
    logger.handle(record)
