"""
Data models and holiday tables for the business calendar.
"""

from business_calendar.data.schemas import (
    BusinessDayReport,
    BusinessDayRequest,
    CalendarDate,
    CalendarMode,
    CalendarYear,
    ClassificationResult,
    Config,
    DayKind,
    Holiday,
    HolidayDefinition,
    HolidayRule,
    Weekday,
)

__all__ = [
    "BusinessDayReport",
    "BusinessDayRequest",
    "CalendarDate",
    "CalendarMode",
    "CalendarYear",
    "ClassificationResult",
    "Config",
    "DayKind",
    "Holiday",
    "HolidayDefinition",
    "HolidayRule",
    "Weekday",
]
