from typing import Any

__all__ = (
    "ImproperConfigurationError",
    "SQLBuilderError",
    "SQLChainError",
    "SerializationError",
    "SinkWriteError",
)


class SQLChainError(Exception):
    """Base exception class from which all sqlchain exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLChainError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class SQLBuilderError(SQLChainError):
    """Issues Building or Generating SQL statements."""

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class SinkWriteError(SQLBuilderError):
    """The writer behind an output sink rejected a write.

    Raised from the original exception; the render call that triggered it
    is abandoned and the writer may hold a partial statement.
    """

    fragment: str | None

    def __init__(self, message: str | None = None, fragment: str | None = None) -> None:
        if message is None:
            message = "Failed to write SQL text to the output sink."
        super().__init__(message)
        self.fragment = fragment


class ImproperConfigurationError(SQLChainError):
    """Improper Configuration error.

    Raised when a configuration object holds values the library cannot use.
    """


class SerializationError(SQLChainError):
    """Encoding or decoding of an object failed."""
