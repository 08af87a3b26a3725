"""Built-in converters for str, bytes-likes, views, bool, int and float.

Text values are copied verbatim (``str`` as UTF-8). Reading a text value
takes the first whitespace-delimited span, skipping and counting any
leading whitespace. Plain ``bool`` is written as ``1``/``0``; use
:func:`bufmt.fmt.boolean` for ``true``/``false``.
"""

from __future__ import annotations

import re

from bufmt.buffers import CSubstr, Substr
from bufmt.convert.numeric import atof_first, atoi_first, ftoa, itoa
from bufmt.convert.registry import ConverterRegistry, default_registry
from bufmt.core.types import NPOS, ReadResult

_SPAN_RE = re.compile(rb"\s*(\S*)")
_BOOL_RE = re.compile(rb"true|false|1|0")


def _write_str(buf: Substr, value: str) -> int:
    return buf.put(value.encode("utf-8"))


def _write_bytes(buf: Substr, value: bytes | bytearray | memoryview) -> int:
    return buf.put(value)


def _write_view(buf: Substr, value: CSubstr | Substr) -> int:
    return buf.put(value.tobytes())


def _write_bool(buf: Substr, value: bool) -> int:
    return buf.put(b"1" if value else b"0")


def _write_int(buf: Substr, value: int) -> int:
    return buf.put(itoa(value))


def _write_float(buf: Substr, value: float) -> int:
    return buf.put(ftoa(value))


def _read_span(buf: CSubstr) -> tuple[int, bytes]:
    match = _SPAN_RE.match(buf.tobytes())
    return match.end(), match.group(1)


def _read_str(buf: CSubstr) -> ReadResult:
    consumed, span = _read_span(buf)
    try:
        return consumed, span.decode("utf-8")
    except UnicodeDecodeError:
        return NPOS, None


def _read_bytes(buf: CSubstr) -> ReadResult:
    return _read_span(buf)


def _read_bytearray(buf: CSubstr) -> ReadResult:
    consumed, span = _read_span(buf)
    return consumed, bytearray(span)


def _read_bool(buf: CSubstr) -> ReadResult:
    match = _BOOL_RE.match(buf.tobytes())
    if match is None:
        return NPOS, None
    return match.end(), match.group() in (b"true", b"1")


def _read_int(buf: CSubstr) -> ReadResult:
    return atoi_first(buf.tobytes())


def _read_float(buf: CSubstr) -> ReadResult:
    return atof_first(buf.tobytes())


def register_builtins(registry: ConverterRegistry) -> None:
    """Install the built-in converters on ``registry``."""
    registry.register(str, writer=_write_str, reader=_read_str)
    registry.register(bytes, writer=_write_bytes, reader=_read_bytes)
    registry.register(bytearray, writer=_write_bytes, reader=_read_bytearray)
    registry.register(memoryview, writer=_write_bytes)
    registry.register(CSubstr, writer=_write_view)
    registry.register(Substr, writer=_write_view)
    registry.register(bool, writer=_write_bool, reader=_read_bool)
    registry.register(int, writer=_write_int, reader=_read_int)
    registry.register(float, writer=_write_float, reader=_read_float)


register_builtins(default_registry)
