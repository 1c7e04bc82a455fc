"""
Domain-specific exception hierarchy for the datecalc library.
"""


class DateCalcError(Exception):
    """Base class for all application-level errors."""


class DateParseError(DateCalcError, ValueError):
    """Raised when a value cannot be interpreted as a date."""


class CalendarError(DateCalcError):
    """Raised when a bounded calendar search finds nothing."""
