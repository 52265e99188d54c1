"""Clause mixins composed into the SQL builders."""

from sqlchain.builder.mixins._delete import DeleteFromClauseMixin
from sqlchain.builder.mixins._group_order import GroupByClauseMixin, OrderByClauseMixin
from sqlchain.builder.mixins._insert import InsertIntoClauseMixin, InsertValuesMixin
from sqlchain.builder.mixins._join import JoinClauseMixin
from sqlchain.builder.mixins._limit_offset import LimitOffsetClauseMixin
from sqlchain.builder.mixins._select import FromClauseMixin, SelectClauseMixin
from sqlchain.builder.mixins._update import UpdateSetClauseMixin, UpdateTableClauseMixin
from sqlchain.builder.mixins._where import ConjunctionMixin, HavingClauseMixin, WhereClauseMixin

__all__ = (
    "ConjunctionMixin",
    "DeleteFromClauseMixin",
    "FromClauseMixin",
    "GroupByClauseMixin",
    "HavingClauseMixin",
    "InsertIntoClauseMixin",
    "InsertValuesMixin",
    "JoinClauseMixin",
    "LimitOffsetClauseMixin",
    "OrderByClauseMixin",
    "SelectClauseMixin",
    "UpdateSetClauseMixin",
    "UpdateTableClauseMixin",
    "WhereClauseMixin",
)
