"""Fluent SQL text builder base.

The builder only accumulates text fragments. Rendering happens on
:meth:`AbstractSQL.to_sql`, :meth:`AbstractSQL.using_appender` or ``str()``
and may be repeated; it never changes the accumulated statement.
"""

import io
from typing import TypeVar

from sqlchain.builder._renderer import render_statement
from sqlchain.builder._sink import OutputSink
from sqlchain.builder._statement import Statement, StatementKind
from sqlchain.builder.mixins import (
    ConjunctionMixin,
    DeleteFromClauseMixin,
    FromClauseMixin,
    GroupByClauseMixin,
    HavingClauseMixin,
    InsertIntoClauseMixin,
    InsertValuesMixin,
    JoinClauseMixin,
    LimitOffsetClauseMixin,
    OrderByClauseMixin,
    SelectClauseMixin,
    UpdateSetClauseMixin,
    UpdateTableClauseMixin,
    WhereClauseMixin,
)
from sqlchain.observability import ObservabilityConfig, create_event, default_render_observer
from sqlchain.protocols import SupportsWrite
from sqlchain.utils.logging import get_correlation_id, get_logger, render_log_fields

__all__ = ("AbstractSQL",)

logger = get_logger("builder")

WriterT = TypeVar("WriterT", bound=SupportsWrite)


class AbstractSQL(
    SelectClauseMixin,
    FromClauseMixin,
    JoinClauseMixin,
    WhereClauseMixin,
    HavingClauseMixin,
    ConjunctionMixin,
    GroupByClauseMixin,
    OrderByClauseMixin,
    LimitOffsetClauseMixin,
    InsertIntoClauseMixin,
    InsertValuesMixin,
    UpdateTableClauseMixin,
    UpdateSetClauseMixin,
    DeleteFromClauseMixin,
):
    """Base class for fluent SQL builders.

    Subclass it to add project-specific shortcuts; every clause method
    returns the builder typed as the subclass. Calls may come in any order
    and never raise: a later statement-kind call replaces an earlier one,
    and the last limiting call picks the LIMIT or FETCH FIRST style.

    A builder is not safe for concurrent mutation. Concurrent renders of a
    builder nobody is mutating are fine.
    """

    __slots__ = ("_observability", "_statement")

    def __init__(self, observability_config: ObservabilityConfig | None = None) -> None:
        self._statement = Statement()
        self._observability = observability_config

    def get_statement(self) -> Statement:
        return self._statement

    @property
    def statement(self) -> Statement:
        """The accumulated statement. Mutating it bypasses the fluent API."""
        return self._statement

    @property
    def statement_kind(self) -> StatementKind:
        return self._statement.kind

    @property
    def observability_config(self) -> ObservabilityConfig | None:
        return self._observability

    def using_appender(self, writer: WriterT) -> WriterT:
        """Render the statement into ``writer``.

        Args:
            writer: Any object with a ``write(str)`` method.

        With observers enabled the statement is rendered once into a buffer
        and handed to ``writer`` in a single write, so observers see exactly
        the text the writer received.

        Raises:
            SinkWriteError: If the writer fails; the writer may hold partial text.

        Returns:
            ``writer``, unchanged if no statement kind was chosen.
        """
        builder = type(self).__name__
        operation = self._statement.kind.name
        config = self._observability
        if config is not None and config.enabled:
            sql = self._render_text()
            if sql is not None:
                OutputSink(writer).append(sql)
                logger.debug(
                    "Rendered %s statement into %s",
                    operation,
                    type(writer).__name__,
                    extra=render_log_fields(operation, builder, len(sql), writer=type(writer).__name__),
                )
                self._notify(sql)
                return writer
        elif render_statement(self._statement, OutputSink(writer)):
            logger.debug(
                "Rendered %s statement into %s",
                operation,
                type(writer).__name__,
                extra=render_log_fields(operation, builder, writer=type(writer).__name__),
            )
            return writer
        logger.debug("No statement kind chosen for %s, nothing to render", builder)
        return writer

    def to_sql(self) -> str | None:
        """Render the statement to a string.

        Returns:
            The SQL text, or None if no statement kind was ever chosen.
        """
        sql = self._render_text()
        if sql is None:
            logger.debug("No statement kind chosen for %s, nothing to render", type(self).__name__)
            return None
        operation = self._statement.kind.name
        logger.debug(
            "Rendered %s statement (%d chars)",
            operation,
            len(sql),
            extra=render_log_fields(operation, type(self).__name__, len(sql)),
        )
        self._notify(sql)
        return sql

    def _render_text(self) -> str | None:
        buffer = io.StringIO()
        if not render_statement(self._statement, OutputSink(buffer)):
            return None
        return buffer.getvalue()

    def _notify(self, sql: str) -> None:
        config = self._observability
        if config is None or not config.enabled:
            return
        event = create_event(
            sql=sql,
            operation=self._statement.kind.name,
            builder=type(self).__name__,
            correlation_id=get_correlation_id(),
        )
        if config.print_sql:
            default_render_observer(event, config.sql_truncation_length)
        for observer in config.statement_observers or ():
            observer(event)

    def __str__(self) -> str:
        return self.to_sql() or ""

    def __repr__(self) -> str:
        statement = self._statement
        return (
            f"{type(self).__name__}(kind={statement.kind.name}, tables={len(statement.tables)}, "
            f"where={len(statement.where)}, rows={len(statement.values_list)})"
        )
