"""Output sink used while rendering a statement."""

from typing import TYPE_CHECKING

from sqlchain.exceptions import SinkWriteError

if TYPE_CHECKING:
    from sqlchain.protocols import SupportsWrite

__all__ = ("OutputSink",)


class OutputSink:
    """Forwards text to a writer and remembers whether anything was written yet.

    The emptiness latch only tracks text written through this sink, not
    whatever the underlying writer held before rendering started.
    """

    __slots__ = ("_empty", "_writer")

    def __init__(self, writer: "SupportsWrite") -> None:
        self._writer = writer
        self._empty = True

    @property
    def writer(self) -> "SupportsWrite":
        return self._writer

    def append(self, text: str) -> "OutputSink":
        """Write ``text`` to the underlying writer.

        Raises:
            SinkWriteError: If the writer fails.

        Returns:
            The sink, so writes can be chained.
        """
        try:
            self._writer.write(text)
        except (OSError, TypeError, ValueError) as e:
            msg = f"Failed to write SQL text to {type(self._writer).__name__}: {e}"
            raise SinkWriteError(msg, fragment=text) from e
        if self._empty and text:
            self._empty = False
        return self

    def is_empty(self) -> bool:
        return self._empty
