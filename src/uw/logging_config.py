"""Logging configuration for uw.

Diagnostics go to stderr; stdout is reserved for help text, completion
candidates and command output. When a log directory is configured, records
are also written to a rotating text log and, optionally, a JSON-lines log.

Usage:
    from uw.logging_config import LogContext, setup_logging

    setup_logging(level=logging.DEBUG)
    with LogContext(command="uwb"):
        logger.info("dispatching")
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
import traceback
from datetime import datetime, timezone
from pathlib import Path

from .schema import LoggingConfig


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    @staticmethod
    def _utc_isoformat() -> str:
        return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self._utc_isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Context fields from LogContext
        if hasattr(record, "extra"):
            log_data.update(record.extra)

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_data)


def setup_logging(
    name: str = "uw",
    level: int = logging.WARNING,
    log_dir: Path | None = None,
    enable_json: bool = False,
    enable_console: bool = True,
) -> logging.Logger:
    """Set up logging for one invocation.

    Args:
        name: Logger name
        level: Logging level
        log_dir: Directory for log files; no file logging when None
        enable_json: Also write JSON lines to ``<name>.json.log``
        enable_console: Log to stderr

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(min(level, logging.DEBUG) if log_dir else level)
    logger.propagate = False

    logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(
            logging.Formatter("%(name)s: %(levelname)s: %(message)s")
        )
        logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / f"{name}.log",
            maxBytes=1024 * 1024,
            backupCount=3,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s:%(funcName)s:%(lineno)d - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

        if enable_json:
            json_handler = logging.handlers.RotatingFileHandler(
                log_dir / f"{name}.json.log",
                maxBytes=1024 * 1024,
                backupCount=3,
            )
            json_handler.setLevel(logging.DEBUG)
            json_handler.setFormatter(JSONFormatter())
            logger.addHandler(json_handler)

    return logger


def configure_from(config: LoggingConfig) -> logging.Logger:
    return setup_logging(
        level=config.level,
        log_dir=config.log_dir,
        enable_json=config.json,
    )


class LogContext:
    """Context manager for adding contextual information to logs.

    Usage:
        with LogContext(command="uwa"):
            logger.info("dispatching")
            # All records in this block carry command="uwa"
    """

    def __init__(self, **kwargs):
        self.context = kwargs
        self.old_factory = None

    def __enter__(self):
        old_factory = logging.getLogRecordFactory()

        def record_factory(*args, **kwargs):
            record = old_factory(*args, **kwargs)
            record.extra = self.context
            return record

        logging.setLogRecordFactory(record_factory)
        self.old_factory = old_factory
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        logging.setLogRecordFactory(self.old_factory)


__all__ = [
    "setup_logging",
    "configure_from",
    "LogContext",
    "JSONFormatter",
]
