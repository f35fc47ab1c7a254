"""Centralized logging configuration for SQLPilot.

This module provides namespaced loggers for the library together with an opt-in
structured (JSON) formatter and correlation ID tracking. Nothing here is applied
on import; applications call :func:`configure_logging` when they want output.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from sqlpilot._serialization import encode_json

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "correlation_id_var",
    "get_correlation_id",
    "get_logger",
    "log_with_context",
    "set_correlation_id",
)

ROOT_LOGGER_NAME = "sqlpilot"
SIMPLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MANAGED_HANDLER_FLAG = "_sqlpilot_managed"

correlation_id_var: ContextVar[str | None] = ContextVar("sqlpilot_correlation_id", default=None)


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The correlation ID to set, or None to clear
    """
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    """Get the current correlation ID."""
    return correlation_id_var.get()


class StructuredFormatter(logging.Formatter):
    """Structured JSON formatter with correlation ID support."""

    def format(self, record: LogRecord) -> str:
        """Format log record as structured JSON.

        Args:
            record: The log record to format

        Returns:
            JSON formatted log entry
        """
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if correlation_id := get_correlation_id():
            log_entry["correlation_id"] = correlation_id

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            log_entry.update(extra_fields)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return encode_json(log_entry)


class CorrelationIDFilter(logging.Filter):
    """Filter that adds correlation ID to log records."""

    def filter(self, record: LogRecord) -> bool:
        if correlation_id := get_correlation_id():
            record.correlation_id = correlation_id  # type: ignore[attr-defined]
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``sqlpilot`` namespace.

    Args:
        name: Logger name. If not provided, returns the root sqlpilot logger.

    Returns:
        Logger instance with the correlation ID filter attached.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())

    return logger


def configure_logging(
    level: str = "INFO", *, structured: bool = True, handler: logging.Handler | None = None
) -> logging.Handler:
    """Send SQLPilot's log records somewhere.

    Installs one handler on the ``sqlpilot`` logger. Calling it again replaces (and
    closes) the handler from the previous call, so it is safe to call more than once.
    Propagation to the root logger is left alone.

    Args:
        level: Logging level name for the ``sqlpilot`` logger, e.g. "DEBUG"
        structured: Format records as JSON instead of plain text
        handler: Handler to install. Defaults to a stderr ``StreamHandler``.

    Returns:
        The installed handler.
    """
    logger = get_logger()
    logger.setLevel(level.upper())

    for previous in [h for h in logger.handlers if getattr(h, _MANAGED_HANDLER_FLAG, False) and h is not handler]:
        logger.removeHandler(previous)
        previous.close()

    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter() if structured else logging.Formatter(SIMPLE_FORMAT))
    setattr(handler, _MANAGED_HANDLER_FLAG, True)
    logger.addHandler(handler)
    return handler


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log a message with structured extra fields.

    Args:
        logger: The logger to use
        level: Log level
        message: Log message
        **extra_fields: Additional fields to include in structured logs
    """
    if not logger.isEnabledFor(level):
        return
    logger.log(level, message, extra={"extra_fields": extra_fields}, stacklevel=2)
