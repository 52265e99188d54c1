from mypy_extensions import trait
from typing_extensions import Self

from sqlchain.builder._statement import Statement

__all__ = ("GroupByClauseMixin", "OrderByClauseMixin")


@trait
class GroupByClauseMixin:
    """Mixin providing GROUP BY for SELECT builders."""

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def GROUP_BY(self, *columns: str) -> Self:  # noqa: N802
        self.get_statement().group_by.extend(columns)
        return self

    group_by = GROUP_BY


@trait
class OrderByClauseMixin:
    """Mixin providing ORDER BY for SELECT builders."""

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def ORDER_BY(self, *columns: str) -> Self:  # noqa: N802
        """Add ORDER BY items such as ``"created_at DESC"``."""
        self.get_statement().order_by.extend(columns)
        return self

    order_by = ORDER_BY
