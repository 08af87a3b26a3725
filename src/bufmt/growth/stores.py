"""Resizable character stores for the growth adapter."""

from __future__ import annotations

from typing import Any, Optional

from bufmt.buffers import Substr
from bufmt.exceptions import PreconditionError
from bufmt.protocols import IResizableStore


class ByteStore:
    """A ``bytearray``-backed store.

    Wraps a caller's ``bytearray`` in place when one is given, so resizes
    and writes are visible through the caller's reference.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[bytearray | bytes | str] = None) -> None:
        if data is None:
            data = bytearray()
        elif isinstance(data, str):
            data = bytearray(data.encode("utf-8"))
        elif not isinstance(data, bytearray):
            data = bytearray(data)
        self._data = data

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteStore):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray)):
            return self._data == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ByteStore({bytes(self._data)!r})"

    @property
    def data(self) -> bytearray:
        return self._data

    def size(self) -> int:
        return len(self._data)

    def resize(self, n: int) -> None:
        if n < 0:
            raise PreconditionError(f"cannot resize to {n}")
        current = len(self._data)
        if n < current:
            del self._data[n:]
        elif n > current:
            self._data.extend(bytes(n - current))

    def view(self) -> Substr:
        return Substr(self._data)

    def text(self, encoding: str = "utf-8") -> str:
        return self._data.decode(encoding)


def as_store(obj: Any) -> IResizableStore:
    """Accept an ``IResizableStore`` as-is, or wrap a ``bytearray`` in place."""
    if isinstance(obj, bytearray):
        return ByteStore(obj)
    if isinstance(obj, IResizableStore):
        return obj
    raise PreconditionError(
        f"{type(obj).__name__} is not a resizable store; pass a ByteStore or bytearray"
    )
