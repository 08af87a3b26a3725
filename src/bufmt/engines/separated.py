"""Separated concatenation: a separator between each pair of arguments."""

from __future__ import annotations

from typing import Any

from bufmt.buffers import CSubstr, Substr, to_csubstr, to_substr
from bufmt.convert import read, write
from bufmt.core.types import NPOS


def concatenate_separated(buf: Substr | bytearray, sep: Any, *args: Any) -> int:
    """Serialize ``args`` into ``buf`` with ``sep`` between each pair.

    ``sep`` goes through the same conversion as the arguments, so it can be
    a string, a number or any wrapper. No arguments give 0; one argument is
    written alone.

    Returns:
        The characters needed for the whole result.
    """
    buf = to_substr(buf)
    total = 0
    for index, arg in enumerate(args):
        if index:
            size = write(buf, sep)
            total += size
            buf = buf.advance(size)
        size = write(buf, arg)
        total += size
        buf = buf.advance(size)
    return total


def concatenate_separated_view(buf: Substr | bytearray, sep: Any, *args: Any) -> Substr:
    """Like :func:`concatenate_separated`, returning a (clipped) view of the output."""
    buf = to_substr(buf)
    size = concatenate_separated(buf, sep, *args)
    return buf.first(min(size, len(buf)))


def parse_separated(buf: CSubstr | bytes | str, sep: Any, *targets: Any) -> int:
    """Parse ``targets`` from ``buf``, expecting ``sep`` between each pair.

    A plain ``sep`` must match literally; a readable ``sep`` (e.g. a
    :class:`~bufmt.convert.Ref`) is parsed again at every position.

    Returns:
        Characters consumed, or ``NPOS`` on the first failure.
    """
    buf = to_csubstr(buf)
    total = 0
    for index, target in enumerate(targets):
        if index:
            consumed = read(buf, sep)
            if consumed == NPOS:
                return NPOS
            total += consumed
            buf = buf.advance(consumed)
        consumed = read(buf, target)
        if consumed == NPOS:
            return NPOS
        total += consumed
        buf = buf.advance(consumed)
    return total
