from mypy_extensions import trait
from typing_extensions import Self

from sqlchain.builder._limiting import LimitingRowsStrategy
from sqlchain.builder._statement import Statement
from sqlchain.builder.mixins._common import as_sql_text

__all__ = ("LimitOffsetClauseMixin",)


@trait
class LimitOffsetClauseMixin:
    """Mixin providing row limiting in two dialect families.

    ``LIMIT``/``OFFSET`` render ``LIMIT m OFFSET n``;
    ``FETCH_FIRST_ROWS_ONLY``/``OFFSET_ROWS`` render
    ``OFFSET n ROWS FETCH FIRST m ROWS ONLY``. Both families write the same
    limit and offset values, and the family of the last call decides the
    rendering. DELETE and UPDATE statements only render the limit.
    """

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def _set_limit(self, value: int | str, strategy: LimitingRowsStrategy) -> Self:
        statement = self.get_statement()
        statement.limit = as_sql_text(value)
        statement.limiting_rows_strategy = strategy
        return self

    def _set_offset(self, value: int | str, strategy: LimitingRowsStrategy) -> Self:
        statement = self.get_statement()
        statement.offset = as_sql_text(value)
        statement.limiting_rows_strategy = strategy
        return self

    def LIMIT(self, value: int | str) -> Self:  # noqa: N802
        """Set the row limit, e.g. ``10`` or a placeholder such as ``":limit"``.

        Returns:
            The current builder instance for method chaining.
        """
        return self._set_limit(value, LimitingRowsStrategy.OFFSET_LIMIT)

    def OFFSET(self, value: int | str) -> Self:  # noqa: N802
        """Set the number of rows to skip, rendered as ``OFFSET n``."""
        return self._set_offset(value, LimitingRowsStrategy.OFFSET_LIMIT)

    def FETCH_FIRST_ROWS_ONLY(self, value: int | str) -> Self:  # noqa: N802
        """Set the row limit, rendered as ``FETCH FIRST n ROWS ONLY``."""
        return self._set_limit(value, LimitingRowsStrategy.ISO)

    def OFFSET_ROWS(self, value: int | str) -> Self:  # noqa: N802
        """Set the number of rows to skip, rendered as ``OFFSET n ROWS``."""
        return self._set_offset(value, LimitingRowsStrategy.ISO)

    limit = LIMIT
    offset = OFFSET
    fetch_first_rows_only = FETCH_FIRST_ROWS_ONLY
    offset_rows = OFFSET_ROWS
