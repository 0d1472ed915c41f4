"""
Core business logic for holiday resolution and business day calculation.
"""

from business_calendar.core.calculator import BusinessDayCalculator
from business_calendar.core.engine import classify, holidays_in_range, resolve_holidays
from business_calendar.core.holiday_provider import HolidayProvider

__all__ = [
    "BusinessDayCalculator",
    "HolidayProvider",
    "classify",
    "holidays_in_range",
    "resolve_holidays",
]
