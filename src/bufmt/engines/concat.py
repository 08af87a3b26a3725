"""Concatenation: arguments written back to back, no separator."""

from __future__ import annotations

from typing import Any

from bufmt.buffers import CSubstr, Substr, to_csubstr, to_substr
from bufmt.convert import read, write
from bufmt.core.types import NPOS


def concatenate(buf: Substr | bytearray, *args: Any) -> int:
    """Serialize ``args`` back to back into ``buf``.

    No byte past ``len(buf)`` is ever written. Sizing carries on against an
    empty view once the buffer is exhausted.

    Returns:
        The characters needed for the whole result. Anything larger than
        ``len(buf)`` means the output was truncated.
    """
    buf = to_substr(buf)
    total = 0
    for arg in args:
        size = write(buf, arg)
        total += size
        buf = buf.advance(size)
    return total


def concatenate_view(buf: Substr | bytearray, *args: Any) -> Substr:
    """Like :func:`concatenate`, returning a view of what was written.

    The view is clipped to ``buf``; compare with :func:`concatenate` when
    truncation matters.
    """
    buf = to_substr(buf)
    size = concatenate(buf, *args)
    return buf.first(min(size, len(buf)))


def parse_concatenated(buf: CSubstr | bytes | str, *targets: Any) -> int:
    """Parse ``targets`` in order from ``buf``.

    Returns:
        Characters consumed, or ``NPOS`` as soon as one target fails.
        Targets after the failing one are left untouched.
    """
    buf = to_csubstr(buf)
    total = 0
    for target in targets:
        consumed = read(buf, target)
        if consumed == NPOS:
            return NPOS
        total += consumed
        buf = buf.advance(consumed)
    return total
