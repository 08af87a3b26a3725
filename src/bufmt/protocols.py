"""Conversion protocols: the contracts every formattable value implements.

Any type can take part in the engines either by implementing
:class:`IWritable` / :class:`IReadable` itself, or by registering a writer
and reader pair with :mod:`bufmt.convert.registry`. The engines only ever
call these two operations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bufmt.buffers import CSubstr, Substr


@runtime_checkable
class IWritable(Protocol):
    """A value that knows how to serialize itself into a buffer."""

    def write_chars(self, buf: Substr) -> int:
        """Write at most ``len(buf)`` characters and return the required size.

        The required size must not depend on ``len(buf)``: calling twice
        with the same value returns the same number, whether or not the
        buffer was large enough.
        """
        ...


@runtime_checkable
class IReadable(Protocol):
    """A parse target that stores the value it reads on itself."""

    def read_chars(self, buf: CSubstr) -> int:
        """Parse from the head of ``buf``.

        Returns:
            The number of characters consumed, or ``NPOS`` on failure.
        """
        ...


@runtime_checkable
class IResizableStore(Protocol):
    """Resizable character storage driven by the growth adapter."""

    def size(self) -> int:
        """Current number of characters held."""
        ...

    def resize(self, n: int) -> None:
        """Grow (zero-filled) or truncate to exactly ``n`` characters."""
        ...

    def view(self) -> Substr:
        """Writable view over the whole current storage."""
        ...


__all__ = ["IWritable", "IReadable", "IResizableStore"]
