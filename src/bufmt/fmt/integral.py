"""Integers with an explicit radix, plus pointer and null normalization."""

from __future__ import annotations

import ctypes
import operator
from typing import Any

from bufmt.buffers import CSubstr, Substr
from bufmt.convert.numeric import atoi_first, check_radix, itoa
from bufmt.convert.ref import Ref, deref
from bufmt.core.types import NPOS
from bufmt.exceptions import PreconditionError

_POINTER_MASK = (1 << (8 * ctypes.sizeof(ctypes.c_void_p))) - 1


def check_integer(val: Any) -> int:
    try:
        return operator.index(val)
    except TypeError as e:
        raise PreconditionError(f"expected an integer, got {type(val).__name__} {val!r}") from e


def as_address(val: Any) -> Any:
    """Normalize ``None`` and ctypes pointers to a pointer-width integer.

    Anything else (ints, Refs) passes through untouched.
    """
    if val is None:
        return 0
    if isinstance(val, ctypes.c_void_p):
        return val.value or 0
    if isinstance(val, (ctypes._Pointer, ctypes.c_char_p, ctypes.c_wchar_p)):
        return (ctypes.cast(val, ctypes.c_void_p).value or 0) & _POINTER_MASK
    return val


class Integral:
    """An integer rendered in ``radix`` (2 to 36)."""

    __slots__ = ("val", "radix")

    def __init__(self, val: Any = 0, radix: int = 10) -> None:
        if not isinstance(val, Ref):
            check_integer(val)
        self.val = val
        self.radix = check_radix(radix)

    def __repr__(self) -> str:
        return f"Integral({self.val!r}, radix={self.radix})"

    @property
    def value(self) -> int:
        return check_integer(deref(self.val))

    def write_chars(self, buf: Substr) -> int:
        return buf.put(itoa(self.value, self.radix))

    def read_chars(self, buf: CSubstr) -> int:
        consumed, parsed = atoi_first(buf.tobytes(), self.radix)
        if consumed == NPOS:
            return NPOS
        if isinstance(self.val, Ref):
            self.val.value = parsed
        else:
            self.val = parsed
        return consumed


def integral(val: Any = 0, radix: int = 10) -> Integral:
    """Format an integer (or pointer, or ``None``) in ``radix``."""
    return Integral(as_address(val), radix)


def hex(val: Any = 0) -> Integral:  # noqa: A001
    """Format as ``0x``-prefixed hexadecimal."""
    return integral(val, 16)


def oct(val: Any = 0) -> Integral:  # noqa: A001
    """Format as ``0o``-prefixed octal."""
    return integral(val, 8)


def bin(val: Any = 0) -> Integral:  # noqa: A001
    """Format as ``0b``-prefixed binary."""
    return integral(val, 2)


def pointer(val: Any) -> Integral:
    """Format a pointer's address (``None`` is ``0x0``) in hexadecimal."""
    return integral(val, 16)
