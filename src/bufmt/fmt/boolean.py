"""Alphabetic booleans: ``true`` / ``false``."""

from __future__ import annotations

import re
from typing import Any

from bufmt.buffers import CSubstr, Substr
from bufmt.convert.ref import Ref, deref
from bufmt.core.types import NPOS

_LENIENT_RE = re.compile(rb"(?i:true|false)|1|0")
_STRICT_RE = re.compile(rb"true|false")


class BoolAlpha:
    """Writes ``true``/``false``; reads them back into ``val``.

    A strict read accepts only the exact lowercase words. A lenient read
    also accepts any letter case and ``1``/``0``.
    """

    __slots__ = ("val", "strict")

    def __init__(self, val: Any = False, strict: bool = False) -> None:
        self.val = val
        self.strict = strict

    def __repr__(self) -> str:
        return f"BoolAlpha({self.val!r}, strict={self.strict})"

    @property
    def value(self) -> bool:
        return bool(deref(self.val))

    def write_chars(self, buf: Substr) -> int:
        return buf.put(b"true" if self.value else b"false")

    def read_chars(self, buf: CSubstr) -> int:
        pattern = _STRICT_RE if self.strict else _LENIENT_RE
        match = pattern.match(buf.peek(5))
        if match is None:
            return NPOS
        parsed = match.group().lower() in (b"true", b"1")
        if isinstance(self.val, Ref):
            self.val.value = parsed
        else:
            self.val = parsed
        return match.end()


def boolean(val: Any = False, strict: bool = False) -> BoolAlpha:
    """Format ``val`` as an alphabetic boolean."""
    return BoolAlpha(val, strict)
