"""Render a :class:`~sqlchain.builder._statement.Statement` into SQL text.

Every clause goes through :func:`render_clause`; the per-kind routines only
decide the order of clauses and the keyword, brackets and separator of each.
Rendering reads the statement and never modifies it.
"""

from collections.abc import Callable, Sequence

from sqlchain.builder._limiting import append_limiting_clause
from sqlchain.builder._sink import OutputSink
from sqlchain.builder._statement import Conjunction, Fragment, Statement, StatementKind

__all__ = ("render_clause", "render_statement")


def _normalize_conjunctions(fragments: Sequence[Fragment]) -> list[Fragment]:
    """Keep only conjunctions that sit between two predicates.

    A run of consecutive conjunctions collapses to its last member.
    """
    normalized: list[Fragment] = []
    pending: Conjunction | None = None
    for fragment in fragments:
        if isinstance(fragment, Conjunction):
            pending = fragment
            continue
        if pending is not None and normalized:
            normalized.append(pending)
        pending = None
        normalized.append(fragment)
    return normalized


def render_clause(
    sink: OutputSink, keyword: str, fragments: Sequence[Fragment], open_: str, close: str, separator: str
) -> None:
    """Write one clause: ``keyword``, then the fragments joined by ``separator`` inside ``open_``/``close``.

    Nothing is written for an empty fragment list. A newline precedes the
    clause when the sink already holds text. No separator is written next
    to a conjunction, whose own text joins the neighbouring predicates.
    """
    parts = _normalize_conjunctions(fragments)
    if not parts:
        return
    if not sink.is_empty():
        sink.append("\n")
    sink.append(keyword).append(" ").append(open_)
    previous: Fragment | None = None
    for index, part in enumerate(parts):
        if index > 0 and not isinstance(part, Conjunction) and not isinstance(previous, Conjunction):
            sink.append(separator)
        sink.append(part.text if isinstance(part, Conjunction) else part)
        previous = part
    sink.append(close)


def _render_joins(sink: OutputSink, statement: Statement) -> None:
    render_clause(sink, "JOIN", statement.join, "", "", "\nJOIN ")
    render_clause(sink, "INNER JOIN", statement.inner_join, "", "", "\nINNER JOIN ")
    render_clause(sink, "OUTER JOIN", statement.outer_join, "", "", "\nOUTER JOIN ")
    render_clause(sink, "LEFT OUTER JOIN", statement.left_outer_join, "", "", "\nLEFT OUTER JOIN ")
    render_clause(sink, "RIGHT OUTER JOIN", statement.right_outer_join, "", "", "\nRIGHT OUTER JOIN ")


def _render_where(sink: OutputSink, statement: Statement) -> None:
    render_clause(sink, "WHERE", statement.where, "(", ")", " AND ")


def _render_select(sink: OutputSink, statement: Statement) -> None:
    keyword = "SELECT DISTINCT" if statement.distinct else "SELECT"
    render_clause(sink, keyword, statement.select, "", "", ", ")
    render_clause(sink, "FROM", statement.tables, "", "", ", ")
    _render_joins(sink, statement)
    _render_where(sink, statement)
    render_clause(sink, "GROUP BY", statement.group_by, "", "", ", ")
    render_clause(sink, "HAVING", statement.having, "(", ")", " AND ")
    render_clause(sink, "ORDER BY", statement.order_by, "", "", ", ")
    append_limiting_clause(statement.limiting_rows_strategy, sink, statement.offset, statement.limit)


def _render_insert(sink: OutputSink, statement: Statement) -> None:
    render_clause(sink, "INSERT INTO", statement.tables, "", "", "")
    render_clause(sink, "", statement.columns, "(", ")", ", ")
    for index, row in enumerate(statement.values_list):
        render_clause(sink, "," if index > 0 else "VALUES", row, "(", ")", ", ")


def _render_delete(sink: OutputSink, statement: Statement) -> None:
    render_clause(sink, "DELETE FROM", statement.tables, "", "", "")
    _render_where(sink, statement)
    # DELETE only supports a row count, never an offset.
    append_limiting_clause(statement.limiting_rows_strategy, sink, None, statement.limit)


def _render_update(sink: OutputSink, statement: Statement) -> None:
    render_clause(sink, "UPDATE", statement.tables, "", "", "")
    _render_joins(sink, statement)
    render_clause(sink, "SET", statement.sets, "", "", ", ")
    _render_where(sink, statement)
    append_limiting_clause(statement.limiting_rows_strategy, sink, None, statement.limit)


_RENDERERS: dict[StatementKind, Callable[[OutputSink, Statement], None]] = {
    StatementKind.SELECT: _render_select,
    StatementKind.INSERT: _render_insert,
    StatementKind.UPDATE: _render_update,
    StatementKind.DELETE: _render_delete,
}


def render_statement(statement: Statement, sink: OutputSink) -> bool:
    """Write ``statement`` into ``sink``.

    Returns:
        False when no statement kind was ever chosen; nothing is written then.
    """
    renderer = _RENDERERS.get(statement.kind)
    if renderer is None:
        return False
    renderer(sink, statement)
    return True
