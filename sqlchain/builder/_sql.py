"""The ready-to-use SQL builder."""

from sqlchain.builder._base import AbstractSQL

__all__ = ("SQL",)


class SQL(AbstractSQL):
    """Fluent SQL text builder.

    Example:
        >>> sql = SQL().SELECT("id", "name").FROM("users").WHERE("active = :active").ORDER_BY("name")
        >>> print(sql)
        SELECT id, name
        FROM users
        WHERE (active = :active)
        ORDER BY name
    """

    __slots__ = ()
