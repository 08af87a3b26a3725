"""Typed parse targets.

Python has no out-parameters, so parse operations fill a :class:`Ref`::

    count, word = Ref(int), Ref(str)
    parse_formatted("3 apples", "{} {}", count, word)
    count.value, word.value   # (3, "apples")
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from bufmt.buffers import CSubstr, Substr
from bufmt.convert.registry import default_registry
from bufmt.core.types import NPOS

T = TypeVar("T")


class Ref(Generic[T]):
    """A mutable cell whose declared type selects the reader.

    Writing a ``Ref`` writes its current value, so the same cell can be
    serialized and then parsed back.
    """

    __slots__ = ("type", "value")

    def __init__(self, tp: type[T], value: Optional[T] = None) -> None:
        self.type = tp
        self.value: Any = tp() if value is None else value

    def __repr__(self) -> str:
        return f"Ref({self.type.__name__}, {self.value!r})"

    def write_chars(self, buf: Substr) -> int:
        return default_registry.write(buf, self.value)

    def read_chars(self, buf: CSubstr) -> int:
        consumed, value = default_registry.read_value(buf, self.type)
        if consumed == NPOS:
            return NPOS
        self.value = value
        return consumed


def deref(value: Any) -> Any:
    """Return the value held by a :class:`Ref`, or ``value`` itself."""
    return value.value if isinstance(value, Ref) else value
