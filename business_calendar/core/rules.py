"""
Resolution of holiday rules to concrete dates.
"""

import calendar

from business_calendar.data.schemas import (
    CalendarDate,
    FixedDayOfYear,
    FixedMonthDay,
    HolidayRule,
    LastWeekdayFromAnchor,
    LastWeekdayOfMonth,
    NthWeekdayFromAnchor,
    NthWeekdayOfMonth,
    Weekday,
)
from business_calendar.exceptions import InvalidDateError


def days_forward_to(day: CalendarDate, target: Weekday) -> int:
    """Days (0-6) to add to ``day`` to reach ``target``, staying put if already there."""
    return (target + 7 - day.day_of_week()) % 7


def days_back_to(day: CalendarDate, target: Weekday) -> int:
    """Days (0-6) to subtract from ``day`` to reach ``target``, staying put if already there."""
    return (day.day_of_week() + 7 - target) % 7


def roll_forward(day: CalendarDate, target: Weekday) -> CalendarDate:
    return day.add_days(days_forward_to(day, target))


def roll_back(day: CalendarDate, target: Weekday) -> CalendarDate:
    return day.add_days(-days_back_to(day, target))


def nth_weekday_of_month(year: int, month: int, weekday: Weekday, n: int) -> CalendarDate:
    """
    Date of the nth occurrence of a weekday within a month.

    Args:
        year: Year.
        month: Month (1-12).
        weekday: Weekday to find.
        n: Occurrence, starting at 1.

    Returns:
        The matching CalendarDate.

    Raises:
        InvalidDateError: If the month has fewer than ``n`` such weekdays.
    """
    first = roll_forward(CalendarDate(year, month, 1), weekday)
    result = first.add_days(7 * (n - 1))
    if result.month != month:
        raise InvalidDateError(
            f"{year:04d}-{month:02d} has no occurrence #{n} of {weekday.name.capitalize()}"
        )
    return result


def last_weekday_of_month(year: int, month: int, weekday: Weekday) -> CalendarDate:
    """Date of the last occurrence of a weekday within a month."""
    last_day = calendar.monthrange(year, month)[1]
    return roll_back(CalendarDate(year, month, last_day), weekday)


def resolve_rule(rule: HolidayRule, year: int) -> CalendarDate:
    """
    Resolve a holiday rule against a year.

    Args:
        rule: One of the HolidayRule variants.
        year: Year to resolve in.

    Returns:
        The date the rule yields for ``year``.

    Raises:
        TypeError: If ``rule`` is not a known HolidayRule variant.
    """
    if isinstance(rule, FixedDayOfYear):
        return CalendarDate.from_year_offset(year, rule.offset_days)

    if isinstance(rule, NthWeekdayFromAnchor):
        anchor = CalendarDate.from_year_offset(year, rule.anchor_offset_days)
        return roll_forward(anchor, rule.target_weekday)

    if isinstance(rule, LastWeekdayFromAnchor):
        anchor = CalendarDate.from_year_offset(year, rule.anchor_offset_days)
        return roll_back(anchor, rule.target_weekday)

    if isinstance(rule, FixedMonthDay):
        return CalendarDate(year, rule.month, rule.day)

    if isinstance(rule, NthWeekdayOfMonth):
        return nth_weekday_of_month(year, rule.month, rule.weekday, rule.n)

    if isinstance(rule, LastWeekdayOfMonth):
        return last_weekday_of_month(year, rule.month, rule.weekday)

    raise TypeError(f"Unknown holiday rule: {type(rule).__name__}")
