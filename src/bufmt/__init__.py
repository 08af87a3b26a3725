"""bufmt: buffer-exact text serialization and parsing.

Fixed-buffer engines::

    from bufmt import concatenate, format_substitute, parse_formatted, Ref

    buf = bytearray(32)
    n = format_substitute(buf, "the {} drank {} {}", "partier", 5, "beers")
    buf[:n]                          # b"the partier drank 5 beers"

    count = Ref(int)
    parse_formatted(b"drank 5", "drank {}", count)
    count.value                      # 5

Growth adapter::

    from bufmt import ByteStore, convert_append, convert_overwrite

    store = ByteStore()
    convert_overwrite(store, concatenate, "a", 1)
    convert_append(store, concatenate, "b", 2)
    bytes(store)                     # b"a1b2"
"""

from __future__ import annotations

from bufmt import fmt
from bufmt.buffers import CSubstr, Substr, to_csubstr, to_substr
from bufmt.convert import (
    ConverterRegistry,
    Ref,
    default_registry,
    read,
    register_converter,
    write,
)
from bufmt.core.config import AppSettings, get_settings
from bufmt.core.types import NPOS
from bufmt.engines import (
    concatenate,
    concatenate_separated,
    concatenate_separated_view,
    concatenate_view,
    format_substitute,
    format_substitute_view,
    parse_concatenated,
    parse_formatted,
    parse_separated,
)
from bufmt.exceptions import BufmtError, GrowthError, PreconditionError, UnsupportedTypeError
from bufmt.growth import ByteStore, as_store, convert_append, convert_overwrite, render
from bufmt.protocols import IReadable, IResizableStore, IWritable

__all__ = [
    # Buffers
    "CSubstr",
    "Substr",
    "to_csubstr",
    "to_substr",
    "NPOS",
    # Customization point
    "ConverterRegistry",
    "IReadable",
    "IWritable",
    "Ref",
    "default_registry",
    "read",
    "register_converter",
    "write",
    "fmt",
    # Engines
    "concatenate",
    "concatenate_view",
    "parse_concatenated",
    "concatenate_separated",
    "concatenate_separated_view",
    "parse_separated",
    "format_substitute",
    "format_substitute_view",
    "parse_formatted",
    # Growth
    "ByteStore",
    "IResizableStore",
    "as_store",
    "convert_append",
    "convert_overwrite",
    "render",
    # Settings & errors
    "AppSettings",
    "get_settings",
    "BufmtError",
    "GrowthError",
    "PreconditionError",
    "UnsupportedTypeError",
]
