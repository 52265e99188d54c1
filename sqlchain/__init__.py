"""sqlchain: fluent SQL text building for Python."""

from sqlchain import builder, exceptions, observability, utils
from sqlchain.__metadata__ import __version__
from sqlchain.builder import (
    SQL,
    AbstractSQL,
    Conjunction,
    LimitingRowsStrategy,
    Statement,
    StatementKind,
)
from sqlchain.exceptions import SinkWriteError, SQLBuilderError, SQLChainError
from sqlchain.observability import ObservabilityConfig, RenderEvent

__all__ = (
    "SQL",
    "AbstractSQL",
    "Conjunction",
    "LimitingRowsStrategy",
    "ObservabilityConfig",
    "RenderEvent",
    "SQLBuilderError",
    "SQLChainError",
    "SinkWriteError",
    "Statement",
    "StatementKind",
    "__version__",
    "builder",
    "exceptions",
    "observability",
    "utils",
)
