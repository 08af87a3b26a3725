"""Fixed-buffer engines: concatenation, separated concatenation, templates."""

from __future__ import annotations

from bufmt.engines.concat import concatenate, concatenate_view, parse_concatenated
from bufmt.engines.separated import (
    concatenate_separated,
    concatenate_separated_view,
    parse_separated,
)
from bufmt.engines.template import format_substitute, format_substitute_view, parse_formatted

__all__ = [
    "concatenate",
    "concatenate_view",
    "parse_concatenated",
    "concatenate_separated",
    "concatenate_separated_view",
    "parse_separated",
    "format_substitute",
    "format_substitute_view",
    "parse_formatted",
]
