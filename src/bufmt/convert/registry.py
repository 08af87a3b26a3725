"""The single customization point: ``write`` and ``read`` for any value.

Usage::

    from bufmt.convert.registry import register_converter, write, read

    register_converter(Point, writer=write_point, reader=read_point)

    n = write(buf, Point(1, 2))   # required size
    n = read(buf, Ref(Point))     # consumed, or NPOS

Writers take ``(buf, value)`` and return the required size. Readers take
``(buf)`` and return ``(consumed, value)``, or ``(NPOS, None)``. Lookups walk
the value type's MRO, so registering a base class covers its subclasses
unless they register their own entry.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from bufmt.buffers import CSubstr, Substr
from bufmt.core.types import NPOS, ReadResult
from bufmt.exceptions import UnsupportedTypeError
from bufmt.protocols import IReadable, IWritable

log = logging.getLogger(__name__)

Writer = Callable[[Substr, Any], int]
Reader = Callable[[CSubstr], ReadResult]


class ConverterRegistry:
    """Type-keyed table of writer/reader pairs."""

    def __init__(self) -> None:
        self._writers: dict[type, Writer] = {}
        self._readers: dict[type, Reader] = {}
        self._writer_cache: dict[type, Optional[Writer]] = {}
        self._reader_cache: dict[type, Optional[Reader]] = {}

    def register(
        self,
        tp: type,
        *,
        writer: Optional[Writer] = None,
        reader: Optional[Reader] = None,
    ) -> None:
        """Register a writer and/or reader for ``tp`` (and its subclasses)."""
        if writer is None and reader is None:
            raise ValueError(f"register({tp.__name__}) needs a writer or a reader")
        if writer is not None:
            if tp in self._writers:
                log.warning("Writer for %s already registered, overwriting", tp.__name__)
            self._writers[tp] = writer
        if reader is not None:
            if tp in self._readers:
                log.warning("Reader for %s already registered, overwriting", tp.__name__)
            self._readers[tp] = reader
        self._writer_cache.clear()
        self._reader_cache.clear()
        log.debug("Registered converter for %s", tp.__name__)

    def has(self, tp: type) -> bool:
        return self.find_writer(tp) is not None or self.find_reader(tp) is not None

    def find_writer(self, tp: type) -> Optional[Writer]:
        if tp not in self._writer_cache:
            self._writer_cache[tp] = next(
                (self._writers[base] for base in tp.__mro__ if base in self._writers), None
            )
        return self._writer_cache[tp]

    def find_reader(self, tp: type) -> Optional[Reader]:
        if tp not in self._reader_cache:
            self._reader_cache[tp] = next(
                (self._readers[base] for base in tp.__mro__ if base in self._readers), None
            )
        return self._reader_cache[tp]

    # ── Customization point ──────────────────────────────────────────

    def write(self, buf: Substr, value: Any) -> int:
        """Serialize ``value`` into ``buf`` and return its required size."""
        if isinstance(value, IWritable):
            return value.write_chars(buf)
        writer = self.find_writer(type(value))
        if writer is None:
            raise UnsupportedTypeError(
                f"No writer registered for {type(value).__name__}", type(value)
            )
        return writer(buf, value)

    def read(self, buf: CSubstr, target: Any) -> int:
        """Parse the head of ``buf`` into ``target``.

        ``IReadable`` targets parse and store the value themselves. Anything
        else is treated as a literal whose text form must appear at the head
        of ``buf``.

        Returns:
            Characters consumed, or ``NPOS``.
        """
        if isinstance(target, IReadable):
            return target.read_chars(buf)
        expected = self.render(target)
        return len(expected) if buf.startswith(expected) else NPOS

    def read_value(self, buf: CSubstr, tp: type) -> ReadResult:
        """Parse a plain value of type ``tp`` from the head of ``buf``."""
        reader = self.find_reader(tp)
        if reader is None:
            raise UnsupportedTypeError(f"No reader registered for {tp.__name__}", tp)
        return reader(buf)

    def render(self, value: Any) -> bytes:
        """Return the full text form of ``value`` (measure, then write)."""
        size = self.write(Substr(bytearray()), value)
        out = bytearray(size)
        self.write(Substr(out), value)
        return bytes(out)


default_registry = ConverterRegistry()


def register_converter(
    tp: type,
    *,
    writer: Optional[Writer] = None,
    reader: Optional[Reader] = None,
) -> None:
    """Register a converter pair with the default registry."""
    default_registry.register(tp, writer=writer, reader=reader)


def write(buf: Substr, value: Any) -> int:
    """Serialize one value; see :meth:`ConverterRegistry.write`."""
    return default_registry.write(buf, value)


def read(buf: CSubstr, target: Any) -> int:
    """Parse one value; see :meth:`ConverterRegistry.read`."""
    return default_registry.read(buf, target)


def render(value: Any) -> bytes:
    return default_registry.render(value)
