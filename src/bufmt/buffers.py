"""Non-owning views over character storage.

``Substr`` is the mutable write target and ``CSubstr`` the read-only parse
source. Both are ``(storage, start, length)`` triples. Neither copies nor
reallocates the storage it points into. Offsets are absolute within the
backing storage so raw copies can align against it.

A view obtained before its storage was resized must not be used afterwards.
"""

from __future__ import annotations

from typing import Union

from bufmt.core.types import NPOS, CharsLike
from bufmt.exceptions import PreconditionError

WritableStorage = Union[bytearray, memoryview]


def _flat_bytes(data: memoryview, *, copy: bool) -> memoryview:
    """Return ``data`` as a 1-D unsigned byte view so lengths count bytes.

    A view that cannot be recast (non-contiguous, non-native format) is
    copied when ``copy`` is set and rejected otherwise.
    """
    if data.format == "B" and data.ndim == 1:
        return data
    try:
        return data.cast("B")
    except (TypeError, ValueError) as e:
        if not copy:
            raise PreconditionError(
                f"cannot write through a memoryview of format {data.format!r}"
            ) from e
        return memoryview(data.tobytes())


class Substr:
    """Mutable window over a ``bytearray`` (or writable ``memoryview``).

    Writes through :meth:`put` are clipped to the window. An *anchored*
    empty view may sit past the end of its storage. It accepts no bytes but
    remembers the logical offset at which writing would have continued.
    """

    __slots__ = ("_storage", "start", "length")

    def __init__(self, storage: WritableStorage, start: int = 0, length: int | None = None) -> None:
        if isinstance(storage, memoryview) and storage.readonly:
            raise PreconditionError("Substr requires writable storage")
        if isinstance(storage, memoryview):
            storage = _flat_bytes(storage, copy=False)
        if start < 0:
            raise PreconditionError(f"negative view start: {start}")
        if length is None:
            length = max(0, len(storage) - start)
        if length < 0 or (length and start + length > len(storage)):
            raise PreconditionError(
                f"view [{start}, {start + length}) exceeds storage of {len(storage)} bytes"
            )
        self._storage = storage
        self.start = start
        self.length = length

    def __len__(self) -> int:
        return self.length

    def __bool__(self) -> bool:
        return self.length > 0

    def __bytes__(self) -> bytes:
        return self.tobytes()

    def __repr__(self) -> str:
        return f"Substr(start={self.start}, length={self.length}, data={self.tobytes()!r})"

    @property
    def storage(self) -> WritableStorage:
        return self._storage

    def sub(self, offset: int, length: int | None = None) -> Substr:
        """Return the view ``[offset, offset + length)`` relative to this one."""
        if offset < 0 or offset > self.length:
            raise PreconditionError(f"offset {offset} outside view of length {self.length}")
        if length is None:
            length = self.length - offset
        if length < 0 or offset + length > self.length:
            raise PreconditionError(f"length {length} overruns view of length {self.length}")
        return Substr(self._storage, self.start + offset, length)

    def first(self, n: int) -> Substr:
        return self.sub(0, n)

    def advance(self, n: int) -> Substr:
        """Return what remains after ``n`` characters.

        When ``n`` runs past the end the result is an empty view anchored at
        the logical position ``start + n``.
        """
        if n <= self.length:
            return Substr(self._storage, self.start + n, self.length - n)
        return Substr(self._storage, self.start + n, 0)

    def put(self, data: bytes | bytearray | memoryview) -> int:
        """Copy as much of ``data`` as fits, returning its size in bytes."""
        if isinstance(data, memoryview):
            data = _flat_bytes(data, copy=True)
        size = len(data)
        count = size if size <= self.length else self.length
        if count:
            self._storage[self.start : self.start + count] = data[:count]
        return size

    def tobytes(self) -> bytes:
        return bytes(self._storage[self.start : self.start + self.length])

    def decode(self, encoding: str = "utf-8") -> str:
        return self.tobytes().decode(encoding)

    def as_csubstr(self) -> CSubstr:
        return CSubstr(self._storage, self.start, self.length)


class CSubstr:
    """Read-only window over ``bytes``, ``bytearray``, ``memoryview`` or ``str``.

    A ``str`` is encoded as UTF-8 once at construction.
    """

    __slots__ = ("_data", "start", "length")

    def __init__(self, data: CharsLike, start: int = 0, length: int | None = None) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        elif isinstance(data, memoryview):
            data = _flat_bytes(data, copy=True)
        if start < 0:
            raise PreconditionError(f"negative view start: {start}")
        if length is None:
            length = max(0, len(data) - start)
        if length < 0 or (length and start + length > len(data)):
            raise PreconditionError(
                f"view [{start}, {start + length}) exceeds data of {len(data)} bytes"
            )
        self._data = data
        self.start = start
        self.length = length

    def __len__(self) -> int:
        return self.length

    def __bool__(self) -> bool:
        return self.length > 0

    def __bytes__(self) -> bytes:
        return self.tobytes()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (CSubstr, Substr)):
            return self.tobytes() == other.tobytes()
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.tobytes() == bytes(other)
        if isinstance(other, str):
            return self.tobytes() == other.encode("utf-8")
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.tobytes())

    def __repr__(self) -> str:
        return f"CSubstr({self.tobytes()!r})"

    def sub(self, offset: int, length: int | None = None) -> CSubstr:
        if offset < 0 or offset > self.length:
            raise PreconditionError(f"offset {offset} outside view of length {self.length}")
        if length is None:
            length = self.length - offset
        if length < 0 or offset + length > self.length:
            raise PreconditionError(f"length {length} overruns view of length {self.length}")
        return CSubstr(self._data, self.start + offset, length)

    def first(self, n: int) -> CSubstr:
        return self.sub(0, n)

    def advance(self, n: int) -> CSubstr:
        """Return what remains after ``n`` characters (anchored empty once exhausted)."""
        if n <= self.length:
            return CSubstr(self._data, self.start + n, self.length - n)
        return CSubstr(self._data, self.start + n, 0)

    def find(self, token: bytes) -> int:
        """Index of the first occurrence of ``token`` in the view, or ``NPOS``."""
        if not self.length:
            return NPOS
        pos = bytes(self._data[self.start : self.start + self.length]).find(token)
        return NPOS if pos < 0 else pos

    def startswith(self, prefix: bytes) -> bool:
        if len(prefix) > self.length:
            return False
        return bytes(self._data[self.start : self.start + len(prefix)]) == prefix

    def peek(self, n: int) -> bytes:
        """Return up to ``n`` leading bytes."""
        n = min(n, self.length)
        return bytes(self._data[self.start : self.start + n])

    def tobytes(self) -> bytes:
        return bytes(self._data[self.start : self.start + self.length])

    def decode(self, encoding: str = "utf-8") -> str:
        return self.tobytes().decode(encoding)


def to_substr(obj: Substr | WritableStorage) -> Substr:
    """Coerce a writable buffer into a :class:`Substr`."""
    if isinstance(obj, Substr):
        return obj
    if isinstance(obj, (bytearray, memoryview)):
        return Substr(obj)
    raise PreconditionError(f"cannot write into {type(obj).__name__}; pass a bytearray or Substr")


def to_csubstr(obj: CSubstr | Substr | CharsLike) -> CSubstr:
    """Coerce a readable buffer into a :class:`CSubstr`."""
    if isinstance(obj, CSubstr):
        return obj
    if isinstance(obj, Substr):
        return obj.as_csubstr()
    if isinstance(obj, (bytes, bytearray, memoryview, str)):
        return CSubstr(obj)
    raise PreconditionError(f"cannot read from {type(obj).__name__}")
