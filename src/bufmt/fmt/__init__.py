"""Value wrappers that attach formatting policy before conversion.

Usage::

    from bufmt import fmt

    concatenate(buf, fmt.hex(255), " ", fmt.real(3.14159, 2, RealFormat.FIXED))
    # b"0xff 3.14"
"""

from __future__ import annotations

from bufmt.convert.numeric import RealFormat
from bufmt.fmt.boolean import BoolAlpha, boolean
from bufmt.fmt.integral import Integral, as_address, bin, hex, integral, oct, pointer
from bufmt.fmt.raw import RawWrapper, raw
from bufmt.fmt.real import Real, real

__all__ = [
    "BoolAlpha",
    "Integral",
    "RawWrapper",
    "Real",
    "RealFormat",
    "as_address",
    "bin",
    "boolean",
    "hex",
    "integral",
    "oct",
    "pointer",
    "raw",
    "real",
]
