"""Nested pydantic-settings configuration for bufmt.

Each group reads its own env vars via a sub-model prefix::

    export BUFMT_FORMAT_PLACEHOLDER='<>'
    export BUFMT_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from bufmt.core.types import MAX_ALIGN


class FormatConfig(BaseSettings):
    """Conversion defaults.

    Env vars use ``BUFMT_FORMAT_`` prefix.
    """

    model_config = {"env_prefix": "BUFMT_FORMAT_"}

    placeholder: str = "{}"
    raw_default_alignment: int = Field(default=MAX_ALIGN, gt=0)

    @field_validator("placeholder")
    @classmethod
    def _two_characters(cls, value: str) -> str:
        if len(value.encode("utf-8")) != 2:
            raise ValueError(f"placeholder must be exactly two characters, got {value!r}")
        return value

    @field_validator("raw_default_alignment")
    @classmethod
    def _power_of_two(cls, value: int) -> int:
        if value & (value - 1):
            raise ValueError(f"raw_default_alignment must be a power of two, got {value}")
        return value


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``BUFMT_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "BUFMT_OBSERVABILITY_"}

    log_level: str = "WARNING"
    log_format: Literal["auto", "json", "console"] = "auto"


class BenchConfig(BaseSettings):
    """Defaults for ``bufmt bench``.

    Env vars use ``BUFMT_BENCH_`` prefix.
    """

    model_config = {"env_prefix": "BUFMT_BENCH_"}

    iterations: int = Field(default=20_000, ge=1)
    repeat: int = Field(default=3, ge=1, le=50)


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    format: FormatConfig = Field(default_factory=FormatConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    bench: BenchConfig = Field(default_factory=BenchConfig)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return the process-wide settings, read from the environment once."""
    return AppSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
