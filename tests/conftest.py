"""Shared fixtures for bufmt tests."""

from __future__ import annotations

from typing import Callable

import pytest

from bufmt.buffers import Substr
from bufmt.core.config import reset_settings

GUARD = b"####"


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from BUFMT_* env vars and the settings cache."""
    import os

    for key in list(os.environ):
        if key.startswith("BUFMT_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def guarded() -> Callable[[int], tuple[bytearray, Substr]]:
    """Factory for an L-byte view followed by guard bytes that must survive."""

    def _make(length: int) -> tuple[bytearray, Substr]:
        storage = bytearray(b"." * length + GUARD)
        return storage, Substr(storage, 0, length)

    return _make
