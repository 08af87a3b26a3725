"""Template substitution driven by a two-character placeholder token.

Usage::

    format_substitute(buf, "the {} drank {} {}", "partier", 5, "beers")
    # writes b"the partier drank 5 beers"

The template is scanned left to right and never re-scanned. Arguments left
over once the template runs out of placeholders are ignored. Placeholders
left over once the arguments run out are copied as literal text.
"""

from __future__ import annotations

from typing import Any, Optional

from bufmt.buffers import CSubstr, Substr, to_csubstr, to_substr
from bufmt.convert import read, write
from bufmt.core.config import get_settings
from bufmt.core.types import NPOS
from bufmt.exceptions import PreconditionError


def _token(placeholder: Optional[str | bytes]) -> bytes:
    if placeholder is None:
        placeholder = get_settings().format.placeholder
    token = placeholder.encode("utf-8") if isinstance(placeholder, str) else bytes(placeholder)
    if len(token) != 2:
        raise PreconditionError(f"placeholder must be exactly two characters, got {placeholder!r}")
    return token


def format_substitute(
    buf: Substr | bytearray,
    template: CSubstr | bytes | str,
    *args: Any,
    placeholder: Optional[str | bytes] = None,
) -> int:
    """Write ``template`` into ``buf``, substituting ``args`` at each placeholder.

    Returns:
        The characters needed for the whole result.
    """
    buf = to_substr(buf)
    template = to_csubstr(template)
    token = _token(placeholder)
    total = 0
    for arg in args:
        pos = template.find(token)
        if pos == NPOS:
            break
        size = write(buf, template.first(pos))
        total += size
        buf = buf.advance(size)
        size = write(buf, arg)
        total += size
        buf = buf.advance(size)
        template = template.advance(pos + len(token))
    return total + write(buf, template)


def format_substitute_view(
    buf: Substr | bytearray,
    template: CSubstr | bytes | str,
    *args: Any,
    placeholder: Optional[str | bytes] = None,
) -> Substr:
    """Like :func:`format_substitute`, returning a (clipped) view of the output."""
    buf = to_substr(buf)
    size = format_substitute(buf, template, *args, placeholder=placeholder)
    return buf.first(min(size, len(buf)))


def parse_formatted(
    buf: CSubstr | bytes | str,
    template: CSubstr | bytes | str,
    *targets: Any,
    placeholder: Optional[str | bytes] = None,
) -> int:
    """Parse ``targets`` from ``buf`` at the template's placeholder positions.

    Literal spans are skipped by length and not compared with the input.
    Only placeholders consume parsed input. The literal tail after the last
    used placeholder is not counted.

    Returns:
        Characters consumed, or ``NPOS`` on the first failure.
    """
    buf = to_csubstr(buf)
    template = to_csubstr(template)
    token = _token(placeholder)
    total = 0
    for target in targets:
        pos = template.find(token)
        if pos == NPOS:
            break
        total += pos
        buf = buf.advance(pos)
        consumed = read(buf, target)
        if consumed == NPOS:
            return NPOS
        total += consumed
        buf = buf.advance(consumed)
        template = template.advance(pos + len(token))
    return total
