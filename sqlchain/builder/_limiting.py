"""Row limiting clauses appended after the last rendered clause."""

from collections.abc import Callable
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlchain.builder._sink import OutputSink

__all__ = ("LimitingRowsStrategy", "append_limiting_clause")


class LimitingRowsStrategy(Enum):
    """How LIMIT/OFFSET style values are rendered."""

    NOP = auto()
    """No row limiting clause."""
    ISO = auto()
    """``OFFSET n ROWS FETCH FIRST m ROWS ONLY``."""
    OFFSET_LIMIT = auto()
    """``LIMIT m OFFSET n``."""

    def __str__(self) -> str:
        return self.name.lower()


def _append_nop(sink: "OutputSink", offset: str | None, limit: str | None) -> None:
    return


def _append_iso(sink: "OutputSink", offset: str | None, limit: str | None) -> None:
    if offset is not None:
        sink.append(" OFFSET ").append(offset).append(" ROWS")
    if limit is not None:
        sink.append(" FETCH FIRST ").append(limit).append(" ROWS ONLY")


def _append_offset_limit(sink: "OutputSink", offset: str | None, limit: str | None) -> None:
    if limit is not None:
        sink.append(" LIMIT ").append(limit)
    if offset is not None:
        sink.append(" OFFSET ").append(offset)


_LIMITING_CLAUSES: dict[LimitingRowsStrategy, Callable[["OutputSink", str | None, str | None], None]] = {
    LimitingRowsStrategy.NOP: _append_nop,
    LimitingRowsStrategy.ISO: _append_iso,
    LimitingRowsStrategy.OFFSET_LIMIT: _append_offset_limit,
}


def append_limiting_clause(
    strategy: LimitingRowsStrategy, sink: "OutputSink", offset: str | None, limit: str | None
) -> None:
    """Write the trailing row limiting clause for ``strategy``.

    Args:
        strategy: The strategy selected by the last limiting call.
        sink: Destination of the rendered text.
        offset: Offset text, or None to omit it.
        limit: Limit text, or None to omit it.
    """
    _LIMITING_CLAUSES[strategy](sink, offset, limit)
