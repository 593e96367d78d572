"""
Paramount - Logging Setup

Structured JSON logging for the ``paramount`` logger hierarchy.
Every module logs through ``logging.getLogger(__name__)`` with ``extra=``
fields; this module decides how those records are rendered.
"""

import json
import logging
from datetime import UTC, datetime

from ..config import get_config

ROOT_LOGGER = "paramount"

_RESERVED_ATTRS = frozenset(
    (
        "args",
        "msg",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "name",
        "message",
    )
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add any extra fields from record.__dict__
        for key, value in record.__dict__.items():
            if key not in log_data and not key.startswith("_") and key not in _RESERVED_ATTRS:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(level: str | None = None, json_logs: bool | None = None) -> logging.Logger:
    """
    Configure the ``paramount`` logger.

    Args:
        level: Log level name (default: PARAMOUNT_LOG_LEVEL)
        json_logs: Use JSONFormatter (default: PARAMOUNT_JSON_LOGS)

    Returns:
        The configured logger
    """
    if level is None or json_logs is None:
        config = get_config()
        level = level or config.log_level.value
        json_logs = config.json_logs if json_logs is None else json_logs

    logger = logging.getLogger(ROOT_LOGGER)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler()
    if json_logs:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)

    return logger
