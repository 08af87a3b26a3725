"""Growth adapter: fixed-buffer engines over resizable stores."""

from __future__ import annotations

from bufmt.growth.adapter import convert_append, convert_overwrite, render
from bufmt.growth.stores import ByteStore, as_store

__all__ = ["ByteStore", "as_store", "convert_append", "convert_overwrite", "render"]
