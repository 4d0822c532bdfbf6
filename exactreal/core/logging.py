"""
Structured logging configuration.

The library itself only emits DEBUG records; applications that want to see
them call setup_logging() once at startup.
"""

import sys
import logging
from typing import Any, Dict
from datetime import datetime, timezone
import json

from .config import get_settings


class StructuredFormatter(logging.Formatter):
    """JSON structured log formatter"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text log formatter"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def setup_logging() -> None:
    """Attach a stdout handler to the exactreal logger tree."""
    settings = get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)

    if settings.LOG_FORMAT == "json":
        formatter = StructuredFormatter()
    else:
        formatter = TextFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    package_logger = logging.getLogger("exactreal")
    package_logger.handlers = [console_handler]
    package_logger.setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


# Example usage:
# logger = get_logger(__name__)
# logger.debug("No exact root", extra={"extra_data": {"radicand": 2, "base": 2}})
