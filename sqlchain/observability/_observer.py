"""Render observer primitives."""

from collections.abc import Callable
from dataclasses import dataclass
from time import time
from typing import Any

from sqlchain.utils.logging import get_logger, render_log_fields

__all__ = ("RenderEvent", "create_event", "default_render_observer", "format_render_event")


logger = get_logger("sqlchain.observability")


RenderObserver = Callable[["RenderEvent"], None]


@dataclass(slots=True)
class RenderEvent:
    """Structured payload describing one rendered statement."""

    sql: str
    operation: str
    builder: str
    rendered_at: float
    correlation_id: "str | None"

    def as_dict(self) -> "dict[str, Any]":
        """Return event payload as a dictionary."""

        return {
            "sql": self.sql,
            "operation": self.operation,
            "builder": self.builder,
            "rendered_at": self.rendered_at,
            "correlation_id": self.correlation_id,
        }


def format_render_event(event: RenderEvent, sql_truncation_length: int | None = None) -> str:
    """Create a concise human-readable representation of a render event."""

    sql = event.sql
    if sql_truncation_length is not None and len(sql) > sql_truncation_length:
        sql = f"{sql[:sql_truncation_length]}... (truncated)"
    return f"[{event.builder}] {event.operation} ({len(event.sql)} chars)\nSQL: {sql}"


def default_render_observer(event: RenderEvent, sql_truncation_length: int | None = None) -> None:
    """Log the rendered SQL when no custom observer is supplied."""

    truncated = sql_truncation_length is not None and len(event.sql) > sql_truncation_length
    extra = render_log_fields(event.operation, event.builder, len(event.sql), truncated=truncated)
    logger.info(
        format_render_event(event, sql_truncation_length), extra={**extra, "correlation_id": event.correlation_id}
    )


def create_event(
    *, sql: str, operation: str, builder: str, correlation_id: "str | None", rendered_at: float | None = None
) -> RenderEvent:
    """Factory helper used by builders to build render events."""

    return RenderEvent(
        sql=sql,
        operation=operation,
        builder=builder,
        rendered_at=rendered_at if rendered_at is not None else time(),
        correlation_id=correlation_id,
    )
