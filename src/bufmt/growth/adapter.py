"""Measure, resize, retry: fixed-buffer engines over resizable stores.

Usage::

    store = ByteStore()
    convert_overwrite(store, format_substitute, "{} + {}", 1, 2)
    bytes(store)                              # b"1 + 2"

    convert_append(store, concatenate, " = ", 3)
    bytes(store)                              # b"1 + 2 = 3"

An engine is any of the fixed-buffer serializers
(:func:`~bufmt.engines.concatenate`, :func:`~bufmt.engines.concatenate_separated`,
:func:`~bufmt.engines.format_substitute`) or anything with their shape.
"""

from __future__ import annotations

import logging
from typing import Any

from bufmt.buffers import CSubstr, Substr
from bufmt.core.types import MAX_GROWTH_PASSES, Engine
from bufmt.exceptions import GrowthError
from bufmt.growth.stores import ByteStore, as_store

log = logging.getLogger(__name__)


def convert_overwrite(store: Any, engine: Engine, *args: Any, **kwargs: Any) -> Substr:
    """Run ``engine`` from the start of ``store``, sizing it to exactly the result.

    Returns:
        A view over the store's new contents (invalid after the next resize).

    Raises:
        GrowthError: If the result still did not fit after the second pass.
    """
    store = as_store(store)
    required = 0
    available = 0
    for attempt in range(MAX_GROWTH_PASSES):
        buf = store.view()
        available = len(buf)
        required = engine(buf, *args, **kwargs)
        store.resize(required)
        if required <= available:
            return store.view()
        log.debug(
            "Store too small (pass %d): need %d, had %d; resized and retrying",
            attempt + 1,
            required,
            available,
        )
    raise GrowthError(
        f"{getattr(engine, '__name__', engine)} did not settle after "
        f"{MAX_GROWTH_PASSES} passes (needs {required}, had {available})",
        required=required,
        available=available,
    )


def convert_append(store: Any, engine: Engine, *args: Any, **kwargs: Any) -> CSubstr:
    """Run ``engine`` after the store's current end, growing it as needed.

    Existing content before the append position is never touched.

    Returns:
        A read-only view over the appended region only.

    Raises:
        GrowthError: If the result still did not fit after the second pass.
    """
    store = as_store(store)
    pos = store.size()
    required = 0
    available = 0
    for attempt in range(MAX_GROWTH_PASSES):
        buf = store.view().advance(pos)
        available = len(buf)
        required = engine(buf, *args, **kwargs)
        store.resize(pos + required)
        if required <= available:
            return store.view().as_csubstr().sub(pos, required)
        log.debug(
            "Append region too small (pass %d): need %d, had %d; resized and retrying",
            attempt + 1,
            required,
            available,
        )
    raise GrowthError(
        f"{getattr(engine, '__name__', engine)} did not settle after "
        f"{MAX_GROWTH_PASSES} passes (needs {required}, had {available})",
        required=required,
        available=available,
    )


def render(engine: Engine, *args: Any, **kwargs: Any) -> bytes:
    """Run ``engine`` into a fresh store and return the bytes produced."""
    store = ByteStore()
    convert_overwrite(store, engine, *args, **kwargs)
    return bytes(store)
