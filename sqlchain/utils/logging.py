"""Logging helpers for sqlchain.

Every logger lives under the ``sqlchain`` namespace. Builders and the
default render observer attach the details of a rendered statement
(operation, builder class, SQL length) to their records under
``extra_fields``; :class:`StructuredFormatter` lifts those keys into the
JSON payload. Nothing is configured on import.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from sqlchain._serialization import encode_json

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "ROOT_LOGGER_NAME",
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "correlation_id_var",
    "get_correlation_id",
    "get_logger",
    "render_log_fields",
    "set_correlation_id",
)

ROOT_LOGGER_NAME = "sqlchain"

correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)

_SIMPLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation ID for the current context, or clear it with None."""
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    return correlation_id_var.get()


def render_log_fields(operation: str, builder: str, sql_length: int | None = None, **fields: Any) -> dict[str, Any]:
    """Build the ``extra`` mapping for a log call about one rendered statement.

    Args:
        operation: Statement kind name, e.g. ``"SELECT"``.
        builder: Name of the builder class that rendered it.
        sql_length: Length of the rendered text, when known.
        **fields: Additional keys to emit alongside.

    Returns:
        A mapping suitable for the ``extra`` argument of a logging call.
    """
    extra_fields: dict[str, Any] = {"operation": operation, "builder": builder}
    if sql_length is not None:
        extra_fields["sql_length"] = sql_length
    extra_fields.update(fields)
    return {"extra_fields": extra_fields}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record.

    The payload always holds timestamp, level, logger, message and source
    location. A correlation ID comes from the record when a filter or the
    caller set one, otherwise from the current context.
    """

    def format(self, record: LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        correlation_id = getattr(record, "correlation_id", None) or get_correlation_id()
        if correlation_id:
            payload["correlation_id"] = correlation_id
        payload.update(getattr(record, "extra_fields", None) or {})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return encode_json(payload)


class CorrelationIDFilter(logging.Filter):
    """Copy the context correlation ID onto each record that passes."""

    def filter(self, record: LogRecord) -> bool:
        if correlation_id := get_correlation_id():
            record.correlation_id = correlation_id  # type: ignore[attr-defined]
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``sqlchain`` namespace.

    Args:
        name: Dotted suffix such as ``"builder"``; a name already starting
            with ``sqlchain`` is used as is. None returns the root logger.

    Returns:
        The logger, carrying exactly one :class:`CorrelationIDFilter`.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())
    return logger


def _build_handlers(format_style: str, log_to_file: str | None) -> list[logging.Handler]:
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(StructuredFormatter() if format_style == "structured" else logging.Formatter(_SIMPLE_FORMAT))
    handlers: list[logging.Handler] = [console]
    if log_to_file:
        # File output is always JSON.
        file_handler = logging.FileHandler(log_to_file)
        file_handler.setFormatter(StructuredFormatter())
        handlers.append(file_handler)
    return handlers


def configure_logging(
    level: str = "INFO",
    format_style: str = "structured",
    log_to_file: str | None = None,
    extra_handlers: list[logging.Handler] | None = None,
) -> None:
    """Install handlers on the ``sqlchain`` root logger.

    Existing handlers are replaced and propagation to the Python root logger
    is turned off.

    Args:
        level: Level name, e.g. ``"DEBUG"``.
        format_style: ``"structured"`` for JSON on the console, anything else for plain text.
        log_to_file: Optional path of a JSON log file.
        extra_handlers: Handlers to add as they are.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level.upper())
    root_logger.handlers[:] = [*_build_handlers(format_style, log_to_file), *(extra_handlers or ())]
    root_logger.propagate = False
    root_logger.info(
        "sqlchain logging configured",
        extra={
            "extra_fields": {"level": level, "format_style": format_style, "handlers_count": len(root_logger.handlers)}
        },
    )
