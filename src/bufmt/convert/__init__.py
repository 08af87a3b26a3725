"""Customization point and built-in converters.

Importing this package installs the built-in converters on the default
registry.
"""

from __future__ import annotations

from bufmt.convert import primitives as _primitives  # noqa: F401
from bufmt.convert.numeric import RealFormat
from bufmt.convert.ref import Ref, deref
from bufmt.convert.registry import (
    ConverterRegistry,
    default_registry,
    read,
    register_converter,
    render,
    write,
)

__all__ = [
    "ConverterRegistry",
    "RealFormat",
    "Ref",
    "default_registry",
    "deref",
    "read",
    "register_converter",
    "render",
    "write",
]
