from mypy_extensions import trait
from typing_extensions import Self

from sqlchain.builder._statement import Conjunction, PredicateTarget, Statement
from sqlchain.utils.logging import get_logger

__all__ = ("ConjunctionMixin", "HavingClauseMixin", "WhereClauseMixin")

logger = get_logger("builder")


@trait
class WhereClauseMixin:
    """Mixin providing WHERE predicates for SELECT, UPDATE, and DELETE builders."""

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def WHERE(self, *conditions: str) -> Self:  # noqa: N802
        """Add WHERE predicates.

        Predicates from separate calls are joined with ``AND`` unless an
        :meth:`~ConjunctionMixin.OR` call sits between them. Later ``AND()``
        and ``OR()`` calls apply to the WHERE clause.

        Args:
            *conditions: Predicate text, rendered verbatim.

        Returns:
            The current builder instance for method chaining.
        """
        statement = self.get_statement()
        statement.where.extend(conditions)
        statement.last_predicate_target = PredicateTarget.WHERE
        return self

    where = WHERE


@trait
class HavingClauseMixin:
    """Mixin providing HAVING predicates for SELECT builders."""

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def HAVING(self, *conditions: str) -> Self:  # noqa: N802
        """Add HAVING predicates; later ``AND()`` and ``OR()`` calls apply to HAVING."""
        statement = self.get_statement()
        statement.having.extend(conditions)
        statement.last_predicate_target = PredicateTarget.HAVING
        return self

    having = HAVING


@trait
class ConjunctionMixin:
    """Mixin providing AND/OR between predicates of the last WHERE or HAVING call."""

    __slots__ = ()

    def get_statement(self) -> Statement: ...

    def _add_conjunction(self, conjunction: Conjunction) -> Self:
        statement = self.get_statement()
        predicates = statement.predicate_list(statement.last_predicate_target)
        if predicates is None:
            logger.debug("Ignoring %s() with no preceding WHERE or HAVING", conjunction.name)
            return self
        predicates.append(conjunction)
        return self

    def AND(self) -> Self:  # noqa: N802
        return self._add_conjunction(Conjunction.AND)

    def OR(self) -> Self:  # noqa: N802
        """Join the next predicate of the current clause with ``OR``.

        ``WHERE("a = 1").OR().WHERE("b = 2")`` renders ``WHERE (a = 1) OR (b = 2)``.
        """
        return self._add_conjunction(Conjunction.OR)

    and_ = AND
    or_ = OR
