"""Shared constants and type aliases for the conversion layer."""

from __future__ import annotations

from typing import Any, Callable, Final, Union

# Not-found sentinel returned by every parse operation on failure.
# Never a valid consumed-character count.
NPOS: Final[int] = -1

# Alignment used for raw copies when neither the caller nor the value
# provides one (matches the usual max_align_t).
MAX_ALIGN: Final[int] = 16

# Number of measure/resize passes the growth adapter may take.
MAX_GROWTH_PASSES: Final[int] = 2

# Raw inputs accepted wherever a read-only buffer view is expected
CharsLike = Union[bytes, bytearray, memoryview, str]

# (consumed | NPOS, parsed value)
ReadResult = tuple[int, Any]

# An engine is any of the fixed-buffer serialize functions:
# engine(buf, *args, **kwargs) -> required size
Engine = Callable[..., int]
