from mypy_extensions import trait
from typing_extensions import Self

from sqlchain.builder._statement import Statement

__all__ = ("JoinClauseMixin",)


@trait
class JoinClauseMixin:
    """Mixin providing the five JOIN families for SELECT and UPDATE builders.

    Each family is rendered as its own clause, in the order JOIN, INNER JOIN,
    OUTER JOIN, LEFT OUTER JOIN, RIGHT OUTER JOIN, whatever order the calls
    were made in. Repeated entries of one family each get their own keyword.
    """

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def JOIN(self, *joins: str) -> Self:  # noqa: N802
        """Add ``JOIN`` entries, e.g. ``"orders o ON o.user_id = u.id"``."""
        self.get_statement().join.extend(joins)
        return self

    def INNER_JOIN(self, *joins: str) -> Self:  # noqa: N802
        self.get_statement().inner_join.extend(joins)
        return self

    def OUTER_JOIN(self, *joins: str) -> Self:  # noqa: N802
        self.get_statement().outer_join.extend(joins)
        return self

    def LEFT_OUTER_JOIN(self, *joins: str) -> Self:  # noqa: N802
        self.get_statement().left_outer_join.extend(joins)
        return self

    def RIGHT_OUTER_JOIN(self, *joins: str) -> Self:  # noqa: N802
        self.get_statement().right_outer_join.extend(joins)
        return self

    join = JOIN
    inner_join = INNER_JOIN
    outer_join = OUTER_JOIN
    left_outer_join = LEFT_OUTER_JOIN
    right_outer_join = RIGHT_OUTER_JOIN
