"""
Logging setup for cipherbench.

Every module logs through ``logging.getLogger(__name__)``; this module
attaches a single stream handler to the package logger, either with a
pipe-separated text format or with one JSON object per line.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

PACKAGE_LOGGER = "cipherbench"

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


class JSONFormatter(logging.Formatter):
    """Emit each log record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Cipher context passed through ``extra=``
        for attr in ("cipher_type", "error_kind"):
            val = getattr(record, attr, None)
            if val is not None:
                entry[attr] = val

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO", json_logs: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Safe to call more than once: existing handlers are replaced rather
    than duplicated.

    Args:
        level: Minimum severity name (DEBUG, INFO, WARNING, ...)
        json_logs: Emit JSON lines instead of the text format

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler()
    if json_logs:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    return logger
