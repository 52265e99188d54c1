"""Fluent SQL text builder.

Builders accumulate clause fragments through chained calls and render them
into SQL text for one of four statement kinds. Fragments are emitted
verbatim; placeholders such as ``:id`` or ``#{id}`` are left for the
execution layer to bind.
"""

from sqlchain.builder._base import AbstractSQL
from sqlchain.builder._limiting import LimitingRowsStrategy
from sqlchain.builder._renderer import render_clause, render_statement
from sqlchain.builder._sink import OutputSink
from sqlchain.builder._sql import SQL
from sqlchain.builder._statement import Conjunction, PredicateTarget, Statement, StatementKind
from sqlchain.exceptions import SinkWriteError, SQLBuilderError

__all__ = (
    "SQL",
    "AbstractSQL",
    "Conjunction",
    "LimitingRowsStrategy",
    "OutputSink",
    "PredicateTarget",
    "SQLBuilderError",
    "SinkWriteError",
    "Statement",
    "StatementKind",
    "render_clause",
    "render_statement",
)
