"""Logging configuration for the RoyaleAPI client.

The library only creates loggers; nothing is configured on import.
Applications that want the bundled formatting call ``setup_logging()``.
"""

import json
import logging
import logging.config
import sys
import traceback
from datetime import datetime
from typing import Any, Dict, Optional

from royale.core.config import settings


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Outputs log records as JSON objects for consumption by log aggregation
    systems.

    Attributes:
        fields: List of fields to include in JSON output
    """

    STANDARD_FIELDS = ["name", "levelname", "message", "timestamp"]

    # Contextual fields describing a gateway exchange
    CONTEXT_FIELDS = [
        "method",        # HTTP method
        "path",          # Service-relative request path
        "status_code",   # HTTP response status
        "duration_ms",   # Request duration in milliseconds
        "remaining",     # Requests left in the rate-limit window
        "retry_after",   # Seconds until the window resets
    ]

    # LogRecord attributes that are not user supplied
    _RESERVED = frozenset((
        "name", "msg", "args", "levelname", "levelno", "pathname",
        "filename", "module", "exc_info", "exc_text", "stack_info",
        "lineno", "funcName", "created", "msecs", "relativeCreated",
        "thread", "threadName", "processName", "process", "message",
        "asctime", "taskName", "timestamp", "logger", "level", "source",
    ))

    def __init__(
        self,
        fields: Optional[list] = None,
        datefmt: Optional[str] = None,
    ):
        """Initialize JSON formatter.

        Args:
            fields: Custom fields to include (defaults to all standard + context)
            datefmt: Date format string (ISO8601 by default)
        """
        super().__init__(datefmt=datefmt)
        self.fields = fields or (self.STANDARD_FIELDS + self.CONTEXT_FIELDS)

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string representation of the log record
        """
        log_data: Dict[str, Any] = {}

        record.message = record.getMessage()

        log_data["timestamp"] = datetime.now().astimezone().isoformat()
        log_data["level"] = record.levelname
        log_data["logger"] = record.name
        log_data["message"] = record.message

        log_data["source"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName,
        }

        for field in self.CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        for key, value in record.__dict__.items():
            if key in self._RESERVED or key in self.CONTEXT_FIELDS:
                continue
            log_data.setdefault("extra", {})[key] = value

        if record.exc_info and record.exc_info != (None, None, None):
            log_data["exception"] = traceback.format_exception(*record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False)


class ContextFilter(logging.Filter):
    """Logging filter that adds contextual fields to log records.

    Gives every record a default for each gateway context field so that
    custom format strings can reference them on any record.
    """

    CONTEXT_DEFAULTS = {
        "method": None,
        "path": None,
        "status_code": None,
        "duration_ms": None,
        "remaining": None,
        "retry_after": None,
    }

    def filter(self, record: logging.LogRecord) -> bool:
        for field, default in self.CONTEXT_DEFAULTS.items():
            if not hasattr(record, field):
                setattr(record, field, default)
        return True


def get_logging_config() -> Dict[str, Any]:
    """Get logging configuration dictionary.

    Returns:
        Logging configuration dict compatible with logging.config.dictConfig
    """
    log_format = settings.log_format.lower()
    log_level = settings.log_level.upper()

    formatters: Dict[str, Dict[str, Any]] = {
        "text": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s"
        },
        "json": {
            "()": "royale.core.logging.JSONFormatter",
        },
    }

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": log_level,
            "formatter": log_format,
            "stream": sys.stdout,
            "filters": ["context"],
        },
        "error_console": {
            "class": "logging.StreamHandler",
            "level": "ERROR",
            "formatter": log_format,
            "stream": sys.stderr,
            "filters": ["context"],
        },
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": {
            "context": {
                "()": "royale.core.logging.ContextFilter",
            },
        },
        "handlers": handlers,
        "loggers": {
            "royale": {
                "level": log_level,
                "handlers": ["console", "error_console"],
                "propagate": False,
            },
            "httpx": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging() -> None:
    """Configure the ``royale`` logger hierarchy for an application."""
    logging.config.dictConfig(get_logging_config())


def get_logger(name: str = "royale") -> logging.Logger:
    """Get a logger instance with the specified name.

    Args:
        name: Logger name, defaults to "royale"

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def get_log_context(
    method: Optional[str] = None,
    path: Optional[str] = None,
    status_code: Optional[int] = None,
    **extra
) -> Dict[str, Any]:
    """Create a log context dictionary for use with the extra parameter.

    Example:
        >>> logger.debug(
        ...     "GET /player/2PP",
        ...     extra=get_log_context(method="GET", path="/player/2PP", status_code=200)
        ... )
    """
    context = {
        "method": method,
        "path": path,
        "status_code": status_code,
    }
    context.update(extra)
    return {k: v for k, v in context.items() if v is not None}
