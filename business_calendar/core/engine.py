"""
Holiday resolution and date classification.

Every function here is pure: results depend only on the arguments, nothing is
cached, and nothing is shared between calls. Callers that query the same year
repeatedly can memoize ``resolve_holidays`` (see ``HolidayProvider``).
"""

import logging
from typing import List

from business_calendar.core.rules import resolve_rule
from business_calendar.data.federal_holidays import HOLIDAY_TABLES
from business_calendar.data.schemas import (
    CalendarDate,
    CalendarMode,
    CalendarYear,
    ClassificationResult,
    DayKind,
    Holiday,
    MAX_YEAR,
    MIN_YEAR,
)
from business_calendar.exceptions import InvalidDateError, InvalidRangeError

logger = logging.getLogger(__name__)


def resolve_holidays(year: int, mode: CalendarMode = CalendarMode.GREGORIAN) -> CalendarYear:
    """
    Compute the federal holidays of one year.

    Args:
        year: Year to resolve (1-9999).
        mode: GREGORIAN for month-anchored dates, LEGACY for the fixed
            day-of-year offsets.

    Returns:
        CalendarYear with the holidays ordered by date.

    Raises:
        InvalidDateError: If ``year`` is not an integer within 1-9999.
    """
    if isinstance(year, bool) or not isinstance(year, int) or not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidDateError(f"Year must be an integer between {MIN_YEAR} and {MAX_YEAR}, got {year!r}")

    mode = CalendarMode(mode)
    holidays = [
        Holiday(name=definition.name, date=resolve_rule(definition.rule, year), rule=definition.rule)
        for definition in HOLIDAY_TABLES[mode]
    ]
    holidays.sort(key=lambda h: h.date)
    logger.debug(f"Resolved {len(holidays)} holidays for {year} ({mode.value})")
    return CalendarYear(year=year, mode=mode, holidays=tuple(holidays))


def classify_in(calendar_year: CalendarYear, day: CalendarDate) -> ClassificationResult:
    """
    Classify a date against an already resolved year.

    A holiday wins over a weekend when both apply.
    """
    if day.year != calendar_year.year:
        raise ValueError(f"{day} is not in {calendar_year.year}")

    holiday = calendar_year.holiday_on(day)
    if holiday is not None:
        return ClassificationResult(date=day, kind=DayKind.HOLIDAY, holiday_name=holiday.name)
    if day.is_weekend():
        return ClassificationResult(date=day, kind=DayKind.WEEKEND)
    return ClassificationResult(date=day, kind=DayKind.BUSINESS_DAY)


def classify(day: CalendarDate, mode: CalendarMode = CalendarMode.GREGORIAN) -> ClassificationResult:
    """
    Classify a date as a holiday, a weekend day, or a business day.

    Args:
        day: Date to classify.
        mode: Holiday computation mode.

    Returns:
        ClassificationResult for ``day``.
    """
    return classify_in(resolve_holidays(day.year, mode), day)


def holidays_in_range(
    start: CalendarDate, end: CalendarDate, mode: CalendarMode = CalendarMode.GREGORIAN
) -> List[Holiday]:
    """
    List the holidays between two dates, both inclusive.

    Args:
        start: First day of the range.
        end: Last day of the range.
        mode: Holiday computation mode.

    Returns:
        Holidays ordered by date.

    Raises:
        InvalidRangeError: If ``end`` is before ``start``.
    """
    if end < start:
        raise InvalidRangeError(f"End date {end} is before start date {start}")

    result = []
    for year in range(start.year, end.year + 1):
        for holiday in resolve_holidays(year, mode).holidays:
            if start <= holiday.date <= end:
                result.append(holiday)
    return result
