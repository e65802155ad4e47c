"""Structured logging configuration for the CRM stand-in.

JSON output is meant for CI log collection, the pretty format for local
development.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any


# Record attributes copied into JSON output when present
_CONTEXT_FIELDS = (
    "event",
    "request_id",
    "resource",
    "object_id",
    "method",
    "path",
    "duration_ms",
    "status_code",
    "events_count",
    "changed",
    "to_object_type",
    "to_object_id",
    "groups",
    "total",
    "matched",
    "root_cause",
    "error_type",
)


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def __init__(
        self,
        *,
        include_timestamp: bool = True,
        include_level: bool = True,
        include_logger: bool = True,
        include_path: bool = False,
        extra_fields: dict[str, Any] | None = None,
    ):
        super().__init__()
        self.include_timestamp = include_timestamp
        self.include_level = include_level
        self.include_logger = include_logger
        self.include_path = include_path
        self.extra_fields = extra_fields or {}

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string."""
        log_data: dict[str, Any] = {}

        if self.include_timestamp:
            log_data["timestamp"] = datetime.now(UTC).isoformat()

        if self.include_level:
            log_data["level"] = record.levelname

        if self.include_logger:
            log_data["logger"] = record.name

        log_data["message"] = record.getMessage()

        if self.include_path:
            log_data["path"] = f"{record.pathname}:{record.lineno}"
            log_data["function"] = record.funcName

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in _CONTEXT_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        log_data.update(self.extra_fields)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class PrettyFormatter(logging.Formatter):
    """Human-readable formatter for development/debugging."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = self.RESET

        timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S")
        level = f"{color}{record.levelname:8}{reset}"
        logger_name = record.name[:24].ljust(24)
        output = f"{timestamp} | {level} | {logger_name} | {record.getMessage()}"

        if record.exc_info:
            output += f"\n{self.formatException(record.exc_info)}"

        return output


def setup_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    include_path: bool = False,
    service_name: str = "hubspot-mock",
) -> None:
    """Configure logging for the application.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON format (True) or pretty format (False)
        include_path: Include source file path in logs
        service_name: Service name to include in JSON logs
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))

    if json_format:
        formatter: logging.Formatter = JSONFormatter(
            include_path=include_path,
            extra_fields={"service": service_name},
        )
    else:
        formatter = PrettyFormatter()

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Usage:
        logger = get_logger(__name__)
        logger.info("Stored object", extra={"resource": "contacts", "object_id": 10000000})
    """
    return logging.getLogger(name)


LOG_EVENT_TITLES: dict[str, str] = {
    "object_created": "CRM: object created",
    "object_updated": "CRM: object updated",
    "object_archived": "CRM: object archived",
    "association_created": "CRM: association created",
    "search_executed": "CRM: search executed",
    "form_submitted": "CRM: form submitted",
    "state_reset": "CRM: state reset",
    "webhook_sent": "Webhook: batch delivered",
    "webhook_skipped": "Webhook: no destination, skipped",
}


def log_event(
    logger: logging.Logger,
    *,
    event: str,
    level: str | None = None,
    **kwargs: Any,
) -> None:
    """Log a named event with its context as structured ``extra`` fields.

    The message is the event's title from LOG_EVENT_TITLES followed by the
    context as ``key=value`` pairs, so pretty output stays readable.
    """
    lvl = (level or "info").lower()
    log_fn = getattr(logger, lvl, logger.info)

    title = LOG_EVENT_TITLES.get(event, event)
    details = " ".join(f"{key}={value}" for key, value in kwargs.items() if value is not None)
    message = f"{title} | {details}" if details else title

    log_fn(message, extra={"event": event, **kwargs})


def log_with_root_cause(
    logger: logging.Logger,
    level: str,
    message: str,
    *,
    root_cause: str | None = None,
    error: Exception | None = None,
    **context: Any,
) -> None:
    """Log with root cause in [ROOT_CAUSE: ...] brackets.

    When ``root_cause`` is omitted it is taken from the error's ``error_code``
    attribute, falling back to the exception class name.
    """
    level = level.upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        level = "INFO"

    if root_cause is None and error is not None:
        root_cause = getattr(error, "error_code", None) or type(error).__name__

    if root_cause:
        message = f"{message} [ROOT_CAUSE: {root_cause}]"

    extra = context.copy()
    if root_cause:
        extra["root_cause"] = root_cause
    if error:
        extra["error_type"] = type(error).__name__

    log_fn = getattr(logger, level.lower(), logger.info)
    log_fn(message, extra=extra)
