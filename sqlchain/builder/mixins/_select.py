from mypy_extensions import trait
from typing_extensions import Self

from sqlchain.builder._statement import Statement, StatementKind
from sqlchain.builder.mixins._common import set_statement_kind

__all__ = ("FromClauseMixin", "SelectClauseMixin")


@trait
class SelectClauseMixin:
    """Mixin providing SELECT and SELECT DISTINCT column lists."""

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def SELECT(self, *columns: str) -> Self:  # noqa: N802
        """Add columns to the SELECT list and make this a SELECT statement.

        Args:
            *columns: Column expressions, rendered verbatim.

        Returns:
            The current builder instance for method chaining.
        """
        statement = self.get_statement()
        set_statement_kind(statement, StatementKind.SELECT)
        statement.select.extend(columns)
        return self

    def SELECT_DISTINCT(self, *columns: str) -> Self:  # noqa: N802
        """Same as :meth:`SELECT`, rendering ``SELECT DISTINCT``.

        The DISTINCT flag stays set for the lifetime of the builder.
        """
        self.get_statement().distinct = True
        return self.SELECT(*columns)

    select = SELECT
    select_distinct = SELECT_DISTINCT


@trait
class FromClauseMixin:
    """Mixin providing the FROM table list for SELECT builders."""

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def FROM(self, *tables: str) -> Self:  # noqa: N802
        self.get_statement().tables.extend(tables)
        return self

    from_ = FROM
