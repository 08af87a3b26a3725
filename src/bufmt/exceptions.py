"""Exception hierarchy for bufmt.

Only contract breaches raise. A buffer that is too small and an input that
does not parse are ordinary return values (a larger required size, or
``NPOS``), never exceptions.
"""


class BufmtError(Exception):
    """Base exception for all bufmt errors."""


class PreconditionError(BufmtError, ValueError):
    """Raised when a caller breaks a construction-time contract.

    Examples: a raw wrapper alignment that is not a power of two, an
    unsupported radix, or a placeholder token that is not two characters.
    """


class UnsupportedTypeError(BufmtError, TypeError):
    """Raised when no converter is registered for a value's type."""

    def __init__(self, message: str, value_type: type | None = None) -> None:
        super().__init__(message)
        self.value_type = value_type


class GrowthError(BufmtError):
    """Raised when a resizable store did not settle within two passes.

    The second pass runs against a store sized to the first measurement, so
    a third pass means the required size was not stable between calls.
    """

    def __init__(self, message: str, required: int = 0, available: int = 0) -> None:
        super().__init__(message)
        self.required = required
        self.available = available
