class CaljalaliError(Exception):
    """Base error."""

class InvalidDateError(CaljalaliError, ValueError):
    """Raised when calendar coordinates fall outside the valid range for that calendar."""

class UnsupportedConversionError(CaljalaliError, NotImplementedError):
    """Raised for conversions the engine deliberately does not provide (e.g. Hijri -> Gregorian)."""
