"""
Logging setup for the employee directory.

Log lines are tagged with the ID of the request being served, held in a
context variable that ``RequestLoggingMiddleware`` sets and clears. Two
output styles exist: coloured text for a terminal and one JSON object per
line for log shippers (``LOG_JSON=true``).
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any, Dict, Optional
from uuid import uuid4

DEFAULT_LOGGER_NAME = "employee-directory"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

request_id_context: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields passed as ``extra={"extra_fields": {...}}``."""
    return getattr(record, "extra_fields", None) or {}


class StructuredFormatter(logging.Formatter):
    """Renders a record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        request_id = request_id_context.get()
        if request_id:
            payload["request_id"] = request_id
        payload.update(_extra_fields(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class HumanReadableFormatter(logging.Formatter):
    """
    Renders a record as one coloured line.

    Layout: ``time LEVEL [logger] [req:abcd1234] message key=value ...``
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        line = (
            f"{self.formatTime(record, self.datefmt)} "
            f"{color}{record.levelname:8}{self.RESET} [{record.name}]"
        )

        request_id = request_id_context.get()
        if request_id:
            line += f" [req:{request_id[:8]}]"

        line += f" {record.getMessage()}"

        fields = _extra_fields(record)
        if fields:
            line += " " + " ".join(f"{key}={value}" for key, value in fields.items())

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    service_name: str = DEFAULT_LOGGER_NAME,
    use_json: bool = False,
) -> logging.Logger:
    """
    Route all logging to stdout in the chosen style.

    Any handlers already on the root logger are replaced, so calling this
    again (e.g. from ``create_app`` in tests) does not duplicate lines.

    Args:
        log_level: Level name applied to the root and service loggers
        service_name: Name of the logger returned
        use_json: Emit JSON lines instead of coloured text

    Returns:
        The service logger
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    formatter_cls = StructuredFormatter if use_json else HumanReadableFormatter
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter_cls(datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # RequestLoggingMiddleware writes the access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    service_logger = logging.getLogger(service_name)
    service_logger.setLevel(level)
    return service_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a module, or the service logger when no name is given."""
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


def set_request_id(request_id: Optional[str] = None) -> str:
    """
    Tag subsequent log lines in this context with a request ID.

    Args:
        request_id: ID to use, a new UUID4 when None

    Returns:
        The ID now in effect
    """
    request_id = request_id or str(uuid4())
    request_id_context.set(request_id)
    return request_id


def get_request_id() -> Optional[str]:
    return request_id_context.get()


def clear_request_id() -> None:
    request_id_context.set(None)
