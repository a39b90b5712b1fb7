class TqcalError(Exception):
    """Base error."""

class InvalidDateError(TqcalError, ValueError):
    """Raised when a Tranquility date (or CLI date text) does not exist."""

class SpecError(TqcalError, ValueError):
    """Raised when a TranquilitySpec carries inconsistent constants."""
