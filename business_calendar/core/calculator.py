"""
Business day calculations.
"""

import logging
from typing import Iterable, List

from business_calendar.core.holiday_provider import HolidayProvider
from business_calendar.data.schemas import (
    BusinessDayReport,
    BusinessDayRequest,
    CalendarDate,
    ClassificationResult,
    Weekday,
)
from business_calendar.exceptions import BusinessCalendarError, InvalidRangeError

logger = logging.getLogger(__name__)

# Upper bound for the business day search loops
MAX_SEARCH_DAYS = 366


class BusinessDayCalculator:
    """Counts and steps through business days, skipping weekends and holidays."""

    def __init__(self, holiday_provider: HolidayProvider):
        """
        Initialize the business day calculator.

        Args:
            holiday_provider: Provider for holiday information.
        """
        self.holiday_provider = holiday_provider

    def calculate(self, request: BusinessDayRequest) -> BusinessDayReport:
        """
        Calculate business days for a given request.

        Args:
            request: BusinessDayRequest with an inclusive date range.

        Returns:
            BusinessDayReport with per-kind day counts and the holidays in range.

        Raises:
            InvalidRangeError: If the end date is before the start date.
        """
        start, end = request.start_date, request.end_date
        if end < start:
            raise InvalidRangeError(f"End date {end} is before start date {start}")

        holidays = self.holiday_provider.get_holidays_for_range(start, end)
        calendar_days = (end - start) + 1

        # Each run of seven consecutive days holds exactly one Saturday and one Sunday
        full_weeks, remainder = divmod(calendar_days, 7)
        saturdays = sundays = full_weeks
        first_weekday = start.day_of_week()
        for offset in range(remainder):
            weekday = (first_weekday + offset) % 7
            if weekday == Weekday.SATURDAY:
                saturdays += 1
            elif weekday == Weekday.SUNDAY:
                sundays += 1

        holiday_dates = {h.date for h in holidays}
        weekend_holiday_dates = {d for d in holiday_dates if d.is_weekend()}
        holiday_days = len(holiday_dates)
        weekend_days = saturdays + sundays - len(weekend_holiday_dates)
        business_days = calendar_days - holiday_days - weekend_days

        warnings = []
        weekend_holidays = [h for h in holidays if h.date in weekend_holiday_dates]
        for holiday in weekend_holidays:
            warnings.append(
                f"{holiday.name} falls on a {holiday.date.day_of_week().name.capitalize()} "
                f"({holiday.date}) and is counted as a holiday, not a weekend day."
            )

        logger.debug(
            f"{start}..{end}: {business_days} business days of {calendar_days}"
        )

        return BusinessDayReport(
            start_date=start,
            end_date=end,
            mode=self.holiday_provider.mode,
            calendar_days=calendar_days,
            holiday_days=holiday_days,
            weekend_days=weekend_days,
            business_days=business_days,
            holidays=holidays,
            weekends_detail={"saturdays": saturdays, "sundays": sundays},
            warnings=warnings,
        )

    def calculate_simple(self, start_date: CalendarDate, end_date: CalendarDate) -> BusinessDayReport:
        """Shortcut for ``calculate`` without building a request first."""
        return self.calculate(BusinessDayRequest(start_date=start_date, end_date=end_date))

    def is_business_day(self, day: CalendarDate) -> bool:
        return self.holiday_provider.classify(day).is_business_day

    def next_business_day(self, day: CalendarDate) -> CalendarDate:
        """The first business day strictly after ``day``."""
        return self._step(day, 1)

    def previous_business_day(self, day: CalendarDate) -> CalendarDate:
        """The last business day strictly before ``day``."""
        return self._step(day, -1)

    def add_business_days(self, day: CalendarDate, count: int) -> CalendarDate:
        """
        Move ``count`` business days away from ``day``.

        Args:
            day: Starting date; it does not need to be a business day itself.
            count: Number of business days to move, negative to go backward.

        Returns:
            The business day reached, or ``day`` unchanged when ``count`` is 0.
        """
        direction = 1 if count > 0 else -1
        current = day
        for _ in range(abs(count)):
            current = self._step(current, direction)
        return current

    def filter_non_business_days(self, dates: Iterable[CalendarDate]) -> List[ClassificationResult]:
        """
        Keep only the dates that are holidays or weekend days.

        Args:
            dates: Dates to check, in any order and spanning any years.

        Returns:
            Classification of every holiday or weekend date, in input order.
        """
        result = []
        for day in dates:
            classification = self.holiday_provider.classify(day)
            if not classification.is_business_day:
                result.append(classification)
        return result

    def _step(self, day: CalendarDate, direction: int) -> CalendarDate:
        current = day
        for _ in range(MAX_SEARCH_DAYS):
            current = current.add_days(direction)
            if self.is_business_day(current):
                return current
        raise BusinessCalendarError(f"No business day within {MAX_SEARCH_DAYS} days of {day}")
