"""
Exceptions raised by the business calendar.
"""


class BusinessCalendarError(Exception):
    """Base class for all business calendar errors."""


class InvalidDateError(BusinessCalendarError, ValueError):
    """A date that does not exist on the Gregorian calendar, or lies outside years 1-9999."""


class InvalidRangeError(BusinessCalendarError, ValueError):
    """A date range whose end lies before its start."""


class CalendarInvariantError(BusinessCalendarError):
    """A resolved holiday year that breaks its own invariants."""
