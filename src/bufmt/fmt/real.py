"""Floating point with explicit precision, notation and width."""

from __future__ import annotations

from typing import Any

from bufmt.buffers import CSubstr, Substr
from bufmt.convert.numeric import RealFormat, atof_first, check_width, ftoa
from bufmt.convert.ref import Ref, deref
from bufmt.core.types import NPOS


class Real:
    """A float rendered with a precision and :class:`RealFormat` notation.

    ``width`` selects single (32) or double (64) precision. Negative
    precision gives the shortest text that round-trips at that width.
    """

    __slots__ = ("val", "precision", "notation", "width")

    def __init__(
        self,
        val: Any = 0.0,
        precision: int = -1,
        notation: RealFormat = RealFormat.SHORTEST,
        width: int = 64,
    ) -> None:
        self.val = val
        self.precision = precision
        self.notation = RealFormat(notation)
        self.width = check_width(width)

    def __repr__(self) -> str:
        return (
            f"Real({self.val!r}, precision={self.precision}, "
            f"notation={self.notation.name}, width={self.width})"
        )

    @property
    def value(self) -> float:
        return float(deref(self.val))

    def write_chars(self, buf: Substr) -> int:
        return buf.put(ftoa(self.value, self.precision, self.notation, self.width))

    def read_chars(self, buf: CSubstr) -> int:
        consumed, parsed = atof_first(buf.tobytes(), self.width)
        if consumed == NPOS:
            return NPOS
        if isinstance(self.val, Ref):
            self.val.value = parsed
        else:
            self.val = parsed
        return consumed


def real(
    val: Any = 0.0,
    precision: int = -1,
    notation: RealFormat = RealFormat.SHORTEST,
    width: int = 64,
) -> Real:
    """Format a float with the given precision, notation and width."""
    return Real(val, precision, notation, width)
