"""Raw byte-for-byte copies with an alignment requirement.

The alignment is measured from the start of the buffer's backing storage.
Padding needed to reach it is written as zero bytes and counted in the
required size. Views carry absolute offsets even once exhausted, so the
padding is known exactly whether or not the buffer was large enough.
"""

from __future__ import annotations

import ctypes
from typing import Any, Optional

from bufmt.buffers import CSubstr, Substr
from bufmt.core.config import get_settings
from bufmt.core.types import NPOS
from bufmt.exceptions import PreconditionError

_CTYPES_BASES = (ctypes._SimpleCData, ctypes.Structure, ctypes.Union, ctypes.Array)


def _check_alignment(alignment: int) -> int:
    if not isinstance(alignment, int) or alignment <= 0 or alignment & (alignment - 1):
        raise PreconditionError(f"alignment must be a power of two, got {alignment!r}")
    return alignment


def _byte_view(data: Any) -> memoryview:
    try:
        return memoryview(data).cast("B")
    except (TypeError, ValueError) as e:
        raise PreconditionError(
            f"raw() needs a ctypes object or a buffer of native format, got {type(data).__name__}"
        ) from e


class RawWrapper:
    """Copies ``target``'s bytes into (or out of) a buffer at an aligned offset.

    The target is not pinned: a ``bytearray`` may be resized between
    conversions, and its current size is used each time.
    """

    __slots__ = ("target", "alignment", "_ctypes")

    def __init__(self, target: Any, alignment: int) -> None:
        self.alignment = _check_alignment(alignment)
        self._ctypes = isinstance(target, _CTYPES_BASES)
        if not self._ctypes:
            # views are taken per call and released, so no export outlives it
            with _byte_view(target):
                pass
        self.target = target

    @property
    def nbytes(self) -> int:
        if self._ctypes:
            return ctypes.sizeof(self.target)
        with _byte_view(self.target) as view:
            return view.nbytes

    @property
    def readonly(self) -> bool:
        if self._ctypes:
            return False
        with _byte_view(self.target) as view:
            return view.readonly

    def __len__(self) -> int:
        return self.nbytes

    def __repr__(self) -> str:
        return f"RawWrapper(nbytes={self.nbytes}, alignment={self.alignment})"

    def _padding(self, start: int) -> int:
        return -start % self.alignment

    def payload(self) -> bytes:
        if self._ctypes:
            return bytes(self.target)
        with _byte_view(self.target) as view:
            return view.tobytes()

    def _store(self, data: bytes) -> None:
        if self._ctypes:
            ctypes.memmove(ctypes.addressof(self.target), data, len(data))
        else:
            with _byte_view(self.target) as view:
                view[:] = data

    def write_chars(self, buf: Substr) -> int:
        pad = self._padding(buf.start)
        payload = self.payload()
        if pad + len(payload) > len(buf):
            return pad + len(payload)
        return buf.put(bytes(pad) + payload)

    def read_chars(self, buf: CSubstr) -> int:
        if self.readonly:
            raise PreconditionError("cannot read into a read-only raw target")
        pad = self._padding(buf.start)
        nbytes = self.nbytes
        needed = pad + nbytes
        if needed > len(buf):
            return NPOS
        self._store(buf.sub(pad, nbytes).tobytes())
        return needed


def raw(data: Any, alignment: Optional[int] = None) -> RawWrapper:
    """Mark ``data`` to be copied byte-for-byte.

    Args:
        data: A ctypes instance or any buffer-protocol object. Must be
            writable to be used as a parse target.
        alignment: Power of two. Defaults to the ctypes alignment of
            ``data``, else ``BUFMT_FORMAT_RAW_DEFAULT_ALIGNMENT``.

    Raises:
        PreconditionError: On a non-power-of-two alignment, before any
            buffer is touched.
    """
    if alignment is None:
        if isinstance(data, _CTYPES_BASES):
            alignment = ctypes.alignment(data)
        else:
            alignment = get_settings().format.raw_default_alignment
    return RawWrapper(data, alignment)
