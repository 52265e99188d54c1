"""Runtime-checkable protocols used at the library's seams."""

from typing import Any, Protocol, runtime_checkable

__all__ = ("SupportsWrite",)


@runtime_checkable
class SupportsWrite(Protocol):
    """Anything accepting text through ``write``, such as ``io.StringIO`` or an open text file."""

    def write(self, s: str, /) -> Any: ...
