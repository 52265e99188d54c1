"""Helpers shared by the clause mixins."""

from sqlchain.builder._statement import Statement, StatementKind
from sqlchain.utils.logging import get_logger

__all__ = ("as_sql_text", "set_statement_kind")

logger = get_logger("builder")


def set_statement_kind(statement: Statement, kind: StatementKind) -> None:
    """Make ``kind`` the statement kind. The last call wins."""
    if statement.kind is not StatementKind.UNSET and statement.kind is not kind:
        logger.debug(
            "Statement kind switched from %s to %s",
            statement.kind.name,
            kind.name,
            extra={"extra_fields": {"previous_operation": statement.kind.name, "operation": kind.name}},
        )
    statement.kind = kind


def as_sql_text(value: int | str) -> str:
    """Text for a limit or offset value. Placeholders pass through unchanged."""
    return value if isinstance(value, str) else str(value)
