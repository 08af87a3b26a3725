"""Process-level hooks (logging setup)."""

from bufmt.hooks.logging_config import setup_logging

__all__ = ["setup_logging"]
