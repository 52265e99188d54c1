from mypy_extensions import trait
from typing_extensions import Self

from sqlchain.builder._statement import Statement, StatementKind
from sqlchain.builder.mixins._common import set_statement_kind

__all__ = ("UpdateSetClauseMixin", "UpdateTableClauseMixin")


@trait
class UpdateTableClauseMixin:
    """Mixin providing the UPDATE target table."""

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def UPDATE(self, table: str) -> Self:  # noqa: N802
        statement = self.get_statement()
        set_statement_kind(statement, StatementKind.UPDATE)
        statement.tables.append(table)
        return self

    update = UPDATE


@trait
class UpdateSetClauseMixin:
    """Mixin providing SET assignments for UPDATE builders."""

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def SET(self, *sets: str) -> Self:  # noqa: N802
        """Add assignments such as ``"name = :name"``, joined with commas."""
        self.get_statement().sets.extend(sets)
        return self

    set = SET
