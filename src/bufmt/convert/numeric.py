"""Numeric text primitives.

Thin layer over Python's own integer and float formatting. Wrappers and the
built-in converters call into it; the engines never do.

Integers carry a radix prefix for the conventional bases (``0b``, ``0o``,
``0x``) with the sign in front of it. Floats are written in the requested
notation. A negative precision asks for the shortest text that reads back to
the same value at the requested width.
"""

from __future__ import annotations

import math
import re
import struct
from decimal import Decimal
from enum import Enum
from functools import lru_cache

from bufmt.core.types import NPOS, ReadResult
from bufmt.exceptions import PreconditionError

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_PREFIXES = {2: "0b", 8: "0o", 16: "0x"}
_BUILTIN_SPECS = {2: "b", 8: "o", 16: "x"}


class RealFormat(str, Enum):
    """Floating point notation."""

    FIXED = "f"
    SCIENTIFIC = "e"
    SHORTEST = "g"
    HEXA = "a"


# ── Integers ─────────────────────────────────────────────────────────


def check_radix(radix: int) -> int:
    if not isinstance(radix, int) or not 2 <= radix <= 36:
        raise PreconditionError(f"radix must be an integer in [2, 36], got {radix!r}")
    return radix


def itoa(value: int, radix: int = 10) -> bytes:
    """Render ``value`` in ``radix``, e.g. ``itoa(-255, 16) == b"-0xff"``."""
    check_radix(radix)
    value = int(value)
    if radix == 10:
        return str(value).encode("ascii")
    sign = "-" if value < 0 else ""
    magnitude = -value if value < 0 else value
    spec = _BUILTIN_SPECS.get(radix)
    if spec is not None:
        digits = format(magnitude, spec)
    else:
        chunks = []
        while True:
            magnitude, rem = divmod(magnitude, radix)
            chunks.append(_DIGITS[rem])
            if not magnitude:
                break
        digits = "".join(reversed(chunks))
    return f"{sign}{_PREFIXES.get(radix, '')}{digits}".encode("ascii")


@lru_cache(maxsize=64)
def _integer_pattern(radix: int) -> re.Pattern[bytes]:
    if radix <= 10:
        digit = f"[0-{radix - 1}]"
    else:
        last = _DIGITS[radix - 1]
        digit = f"[0-9a-{last}A-{last.upper()}]"
    prefix = _PREFIXES.get(radix)
    head = f"(?:0[{prefix[1]}{prefix[1].upper()}])?" if prefix else ""
    return re.compile(f"([-+]?)({head})({digit}+)".encode("ascii"))


def atoi_first(data: bytes, radix: int = 10) -> ReadResult:
    """Parse the leading integer of ``data``.

    Returns:
        ``(consumed, value)``, or ``(NPOS, None)`` when no digit is found.
    """
    check_radix(radix)
    match = _integer_pattern(radix).match(data)
    if match is None:
        return NPOS, None
    sign, _, digits = match.groups()
    value = int(digits, radix)
    return match.end(), -value if sign == b"-" else value


# ── Floating point ───────────────────────────────────────────────────


def check_width(width: int) -> int:
    if width not in (32, 64):
        raise PreconditionError(f"floating point width must be 32 or 64, got {width!r}")
    return width


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest IEEE single precision number."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _shortest(value: float, width: int) -> str:
    if width == 64:
        return repr(value)
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if to_float32(float(text)) == value:
            return text
    return f"{value:.9g}"


def ftoa(
    value: float,
    precision: int = -1,
    notation: RealFormat = RealFormat.SHORTEST,
    width: int = 64,
) -> bytes:
    """Render a float.

    Args:
        value: The number to render.
        precision: Digits after the point (``FIXED``/``SCIENTIFIC``) or
            significant digits (``SHORTEST``). Negative means the shortest
            round-trippable text. Ignored for ``HEXA``.
        notation: One of :class:`RealFormat`.
        width: 32 or 64; 32 rounds through single precision first.
    """
    notation = RealFormat(notation)
    check_width(width)
    value = float(value)
    if width == 32:
        value = to_float32(value)
    if not math.isfinite(value):
        return repr(value).encode("ascii")
    if notation is RealFormat.HEXA:
        return value.hex().encode("ascii")
    if precision >= 0:
        return format(value, f".{precision}{notation.value}").encode("ascii")

    shortest = _shortest(value, width)
    if notation is RealFormat.SHORTEST:
        return shortest.encode("ascii")
    _, digits, exponent = Decimal(shortest).normalize().as_tuple()
    if notation is RealFormat.FIXED:
        return format(value, f".{max(0, -exponent)}f").encode("ascii")
    return format(value, f".{len(digits) - 1}e").encode("ascii")


_FLOAT_RE = re.compile(
    rb"""
    [-+]?
    (?:
        0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)p[-+]?[0-9]+
      | (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[-+]?[0-9]+)?
      | inf(?:inity)?
      | nan
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def atof_first(data: bytes, width: int = 64) -> ReadResult:
    """Parse the leading float of ``data`` (decimal, exponent, hex, inf, nan)."""
    check_width(width)
    match = _FLOAT_RE.match(data)
    if match is None:
        return NPOS, None
    text = match.group().decode("ascii")
    if "x" in text or "X" in text:
        value = float.fromhex(text)
    else:
        value = float(text)
    if width == 32:
        value = to_float32(value)
    return match.end(), value
