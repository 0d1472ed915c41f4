"""
Holiday provider caching resolved years on top of the calendar engine.
"""

import logging
from typing import Dict, List, Set

from business_calendar.core.engine import classify_in, resolve_holidays
from business_calendar.data.schemas import (
    CalendarDate,
    CalendarMode,
    CalendarYear,
    ClassificationResult,
    Holiday,
)
from business_calendar.exceptions import InvalidRangeError

logger = logging.getLogger(__name__)


class HolidayProvider:
    """Provides holiday information for one calendar mode, memoizing each resolved year."""

    def __init__(self, mode: CalendarMode = CalendarMode.GREGORIAN):
        """
        Initialize the holiday provider.

        Args:
            mode: Holiday computation mode ('gregorian' or 'legacy').
        """
        self.mode = CalendarMode(mode)
        self._cache: Dict[int, CalendarYear] = {}

    def get_calendar_year(self, year: int) -> CalendarYear:
        """
        Get the resolved holidays of a year, computing them on first use.

        Resolution is idempotent, so concurrent first fills store equal values.
        """
        calendar_year = self._cache.get(year)
        if calendar_year is None:
            calendar_year = resolve_holidays(year, self.mode)
            self._cache[year] = calendar_year
            logger.debug(f"Cached holidays for {year} ({self.mode.value})")
        return calendar_year

    def get_holidays_for_year(self, year: int) -> List[Holiday]:
        """
        Get all holidays for a specific year.

        Args:
            year: Year to get holidays for.

        Returns:
            List of Holiday objects for the year, ordered by date.
        """
        return list(self.get_calendar_year(year).holidays)

    def get_holidays_for_range(self, start: CalendarDate, end: CalendarDate) -> List[Holiday]:
        """
        Get all holidays within a date range.

        Args:
            start: Start date of the range.
            end: End date of the range (inclusive).

        Returns:
            List of Holiday objects within the range, ordered by date.

        Raises:
            InvalidRangeError: If end is before start.
        """
        if end < start:
            raise InvalidRangeError(f"End date {end} is before start date {start}")

        result = []
        for year in range(start.year, end.year + 1):
            result.extend(
                h for h in self.get_calendar_year(year).holidays if start <= h.date <= end
            )
        return result

    def get_holiday_dates(self, start: CalendarDate, end: CalendarDate) -> Set[CalendarDate]:
        """Get the set of holiday dates within a range."""
        return {h.date for h in self.get_holidays_for_range(start, end)}

    def is_holiday(self, check_date: CalendarDate) -> bool:
        """Check if a specific date is a holiday."""
        return self.get_calendar_year(check_date.year).holiday_on(check_date) is not None

    def classify(self, check_date: CalendarDate) -> ClassificationResult:
        """Classify a date using the cached year."""
        return classify_in(self.get_calendar_year(check_date.year), check_date)

    def clear_cache(self) -> None:
        """Clear the holiday cache."""
        self._cache.clear()
