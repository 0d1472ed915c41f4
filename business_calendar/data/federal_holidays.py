"""
U.S. federal holiday tables.

Both tables list the same ten holidays in the same order. The legacy table
anchors every floating holiday to a constant number of days after January 1,
which drifts by a day in leap years for everything after February. The
Gregorian table uses month anchors instead.
"""

from typing import Dict, List

from business_calendar.data.schemas import (
    CalendarMode,
    FixedDayOfYear,
    FixedMonthDay,
    HolidayDefinition,
    LastWeekdayFromAnchor,
    LastWeekdayOfMonth,
    NthWeekdayFromAnchor,
    NthWeekdayOfMonth,
    Weekday,
)

NEW_YEARS_DAY = "New Year's Day"
MLK_DAY = "MLK Day"
PRESIDENTS_DAY = "Presidents' Day"
MEMORIAL_DAY = "Memorial Day"
INDEPENDENCE_DAY = "Independence Day"
LABOR_DAY = "Labor Day"
COLUMBUS_DAY = "Columbus Day"
VETERANS_DAY = "Veterans Day"
THANKSGIVING = "Thanksgiving"
CHRISTMAS = "Christmas"

HOLIDAY_NAMES = [
    NEW_YEARS_DAY,
    MLK_DAY,
    PRESIDENTS_DAY,
    MEMORIAL_DAY,
    INDEPENDENCE_DAY,
    LABOR_DAY,
    COLUMBUS_DAY,
    VETERANS_DAY,
    THANKSGIVING,
    CHRISTMAS,
]

LEGACY_HOLIDAYS: List[HolidayDefinition] = [
    HolidayDefinition(name=NEW_YEARS_DAY, rule=FixedDayOfYear(offset_days=0)),
    HolidayDefinition(
        name=MLK_DAY,
        rule=NthWeekdayFromAnchor(anchor_offset_days=14, target_weekday=Weekday.MONDAY),
    ),
    HolidayDefinition(
        name=PRESIDENTS_DAY,
        rule=NthWeekdayFromAnchor(anchor_offset_days=31, target_weekday=Weekday.MONDAY),
    ),
    HolidayDefinition(
        name=MEMORIAL_DAY,
        rule=LastWeekdayFromAnchor(anchor_offset_days=151, target_weekday=Weekday.MONDAY),
    ),
    HolidayDefinition(name=INDEPENDENCE_DAY, rule=FixedDayOfYear(offset_days=185)),
    HolidayDefinition(
        name=LABOR_DAY,
        rule=NthWeekdayFromAnchor(anchor_offset_days=244, target_weekday=Weekday.MONDAY),
    ),
    HolidayDefinition(
        name=COLUMBUS_DAY,
        rule=NthWeekdayFromAnchor(anchor_offset_days=275, target_weekday=Weekday.MONDAY),
    ),
    HolidayDefinition(name=VETERANS_DAY, rule=FixedDayOfYear(offset_days=314)),
    # Anchor sits in the fourth week of November
    HolidayDefinition(
        name=THANKSGIVING,
        rule=NthWeekdayFromAnchor(anchor_offset_days=325, target_weekday=Weekday.THURSDAY),
    ),
    HolidayDefinition(name=CHRISTMAS, rule=FixedDayOfYear(offset_days=358)),
]

GREGORIAN_HOLIDAYS: List[HolidayDefinition] = [
    HolidayDefinition(name=NEW_YEARS_DAY, rule=FixedMonthDay(month=1, day=1)),
    HolidayDefinition(name=MLK_DAY, rule=NthWeekdayOfMonth(month=1, weekday=Weekday.MONDAY, n=3)),
    HolidayDefinition(name=PRESIDENTS_DAY, rule=NthWeekdayOfMonth(month=2, weekday=Weekday.MONDAY, n=3)),
    HolidayDefinition(name=MEMORIAL_DAY, rule=LastWeekdayOfMonth(month=5, weekday=Weekday.MONDAY)),
    HolidayDefinition(name=INDEPENDENCE_DAY, rule=FixedMonthDay(month=7, day=4)),
    HolidayDefinition(name=LABOR_DAY, rule=NthWeekdayOfMonth(month=9, weekday=Weekday.MONDAY, n=1)),
    HolidayDefinition(name=COLUMBUS_DAY, rule=NthWeekdayOfMonth(month=10, weekday=Weekday.MONDAY, n=2)),
    HolidayDefinition(name=VETERANS_DAY, rule=FixedMonthDay(month=11, day=11)),
    HolidayDefinition(name=THANKSGIVING, rule=NthWeekdayOfMonth(month=11, weekday=Weekday.THURSDAY, n=4)),
    HolidayDefinition(name=CHRISTMAS, rule=FixedMonthDay(month=12, day=25)),
]

HOLIDAY_TABLES: Dict[CalendarMode, List[HolidayDefinition]] = {
    CalendarMode.LEGACY: LEGACY_HOLIDAYS,
    CalendarMode.GREGORIAN: GREGORIAN_HOLIDAYS,
}
