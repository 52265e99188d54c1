from mypy_extensions import trait
from typing_extensions import Self

from sqlchain.builder._statement import Statement, StatementKind
from sqlchain.builder.mixins._common import set_statement_kind

__all__ = ("InsertIntoClauseMixin", "InsertValuesMixin")


@trait
class InsertIntoClauseMixin:
    """Mixin providing the INSERT INTO target and its column list."""

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def INSERT_INTO(self, table: str) -> Self:  # noqa: N802
        statement = self.get_statement()
        set_statement_kind(statement, StatementKind.INSERT)
        statement.tables.append(table)
        return self

    def INTO_COLUMNS(self, *columns: str) -> Self:  # noqa: N802
        self.get_statement().columns.extend(columns)
        return self

    insert_into = INSERT_INTO
    into_columns = INTO_COLUMNS


@trait
class InsertValuesMixin:
    """Mixin providing single and multi-row VALUES lists.

    Values always go into the last row. The statement starts with one empty
    row; :meth:`ADD_ROW` opens the next one. Empty rows are skipped when
    rendering, and only the first row carries the ``VALUES`` keyword, so
    calling :meth:`ADD_ROW` before any value leaves the statement without
    it: ``INSERT_INTO("t").ADD_ROW().INTO_VALUES("1")`` renders
    ``INSERT INTO t\\n, (1)``.

    Example:
        >>> SQL().INSERT_INTO("t").INTO_COLUMNS("a", "b").INTO_VALUES("1", "2").ADD_ROW().INTO_VALUES("3", "4")
    """

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def INTO_VALUES(self, *values: str) -> Self:  # noqa: N802
        self.get_statement().current_row.extend(values)
        return self

    def VALUES(self, columns: str, values: str) -> Self:  # noqa: N802
        """Add a column fragment and a value fragment to the current row.

        Args:
            columns: Column text, e.g. ``"id, name"``.
            values: Matching value text, e.g. ``"#{id}, #{name}"``.

        Returns:
            The current builder instance for method chaining.
        """
        statement = self.get_statement()
        statement.columns.append(columns)
        statement.current_row.append(values)
        return self

    def ADD_ROW(self) -> Self:  # noqa: N802
        self.get_statement().values_list.append([])
        return self

    into_values = INTO_VALUES
    values = VALUES
    add_row = ADD_ROW
