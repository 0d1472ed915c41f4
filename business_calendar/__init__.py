"""
Business calendar: U.S. federal holidays, weekends and business days.
"""

from business_calendar.core.calculator import BusinessDayCalculator
from business_calendar.core.engine import classify, holidays_in_range, resolve_holidays
from business_calendar.core.holiday_provider import HolidayProvider
from business_calendar.data.schemas import (
    CalendarDate,
    CalendarMode,
    CalendarYear,
    ClassificationResult,
    DayKind,
    Holiday,
    Weekday,
)
from business_calendar.exceptions import (
    BusinessCalendarError,
    CalendarInvariantError,
    InvalidDateError,
    InvalidRangeError,
)

__version__ = "0.1.0"

__all__ = [
    "BusinessCalendarError",
    "BusinessDayCalculator",
    "CalendarDate",
    "CalendarInvariantError",
    "CalendarMode",
    "CalendarYear",
    "ClassificationResult",
    "DayKind",
    "Holiday",
    "HolidayProvider",
    "InvalidDateError",
    "InvalidRangeError",
    "Weekday",
    "classify",
    "holidays_in_range",
    "resolve_holidays",
]
