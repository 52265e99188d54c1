"""Mutable statement model accumulated by the fluent builder."""

from dataclasses import dataclass, field
from enum import Enum, auto

from sqlchain.builder._limiting import LimitingRowsStrategy

__all__ = ("Conjunction", "Fragment", "PredicateTarget", "Statement", "StatementKind")


class StatementKind(Enum):
    """The statement a builder renders. ``UNSET`` renders to nothing."""

    UNSET = auto()
    SELECT = auto()
    INSERT = auto()
    UPDATE = auto()
    DELETE = auto()


class Conjunction(Enum):
    """Marker placed between predicates by ``AND()`` and ``OR()``.

    The value is the text that joins the surrounding predicates inside the
    parenthesized WHERE/HAVING clause.
    """

    AND = " AND "
    OR = ") OR ("

    @property
    def text(self) -> str:
        return self.value


class PredicateTarget(Enum):
    """Which predicate list ``AND()`` and ``OR()`` append to."""

    NONE = auto()
    WHERE = auto()
    HAVING = auto()


Fragment = str | Conjunction


@dataclass(slots=True)
class Statement:
    """Clause fragments collected in call order.

    Lists are only ever appended to. ``values_list`` starts with one empty
    row so ``INTO_VALUES`` always has a row to extend.
    """

    kind: StatementKind = StatementKind.UNSET
    select: list[str] = field(default_factory=list)
    tables: list[str] = field(default_factory=list)
    join: list[str] = field(default_factory=list)
    inner_join: list[str] = field(default_factory=list)
    outer_join: list[str] = field(default_factory=list)
    left_outer_join: list[str] = field(default_factory=list)
    right_outer_join: list[str] = field(default_factory=list)
    where: list[Fragment] = field(default_factory=list)
    having: list[Fragment] = field(default_factory=list)
    group_by: list[str] = field(default_factory=list)
    order_by: list[str] = field(default_factory=list)
    sets: list[str] = field(default_factory=list)
    columns: list[str] = field(default_factory=list)
    values_list: list[list[str]] = field(default_factory=lambda: [[]])
    last_predicate_target: PredicateTarget = PredicateTarget.NONE
    distinct: bool = False
    offset: str | None = None
    limit: str | None = None
    limiting_rows_strategy: LimitingRowsStrategy = LimitingRowsStrategy.NOP

    def predicate_list(self, target: PredicateTarget) -> list[Fragment] | None:
        """Resolve a predicate target to its list, or None for ``PredicateTarget.NONE``."""
        if target is PredicateTarget.WHERE:
            return self.where
        if target is PredicateTarget.HAVING:
            return self.having
        return None

    @property
    def current_row(self) -> list[str]:
        return self.values_list[-1]
