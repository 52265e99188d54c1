from mypy_extensions import trait
from typing_extensions import Self

from sqlchain.builder._statement import Statement, StatementKind
from sqlchain.builder.mixins._common import set_statement_kind

__all__ = ("DeleteFromClauseMixin",)


@trait
class DeleteFromClauseMixin:
    """Mixin providing the DELETE FROM target table."""

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def DELETE_FROM(self, table: str) -> Self:  # noqa: N802
        statement = self.get_statement()
        set_statement_kind(statement, StatementKind.DELETE)
        statement.tables.append(table)
        return self

    delete_from = DELETE_FROM
