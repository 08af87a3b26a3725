"""Startup validation: fail fast on settings the engines cannot honour."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bufmt.exceptions import PreconditionError

if TYPE_CHECKING:
    from bufmt.core.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate settings before first use. Raises PreconditionError on fatal misconfig.

    Field validators only run when a config is constructed from input.
    Attribute assignment and ``model_construct()`` bypass them, so the
    placeholder and alignment are checked again on the instance in use.
    """
    _check_placeholder(settings)
    _check_alignment(settings)


def _check_placeholder(settings: AppSettings) -> None:
    token = settings.format.placeholder
    if len(token.encode("utf-8")) != 2:
        raise PreconditionError(
            f"BUFMT_FORMAT_PLACEHOLDER must be exactly two characters, got {token!r}"
        )
    if token[0].isspace() or token[-1].isspace():
        log.warning(
            "Placeholder %r contains whitespace; literal spans may be hard to read.", token
        )


def _check_alignment(settings: AppSettings) -> None:
    alignment = settings.format.raw_default_alignment
    if alignment <= 0 or alignment & (alignment - 1):
        raise PreconditionError(
            f"BUFMT_FORMAT_RAW_DEFAULT_ALIGNMENT must be a power of two, got {alignment}"
        )
