"""
Data models for the business calendar.

``CalendarDate`` is a plain frozen value type; everything built on top of it
(rules, holidays, results, configuration) is a Pydantic model.
"""

import logging
from dataclasses import dataclass
from datetime import date as _date, datetime, timedelta
from enum import Enum, IntEnum
from typing import Annotated, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from business_calendar.exceptions import CalendarInvariantError, InvalidDateError

MIN_YEAR = 1
MAX_YEAR = 9999

DATE_FORMATS = ["%Y-%m-%d", "%m/%d/%Y"]


class Weekday(IntEnum):
    """Day of the week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


WEEKEND_DAYS = (Weekday.SUNDAY, Weekday.SATURDAY)


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A calendar date without a time of day.

    Instances are validated on construction: a day/month combination that
    does not exist in the given year raises ``InvalidDateError``.
    """

    year: int
    month: int
    day: int

    def __post_init__(self):
        for part in (self.year, self.month, self.day):
            if isinstance(part, bool) or not isinstance(part, int):
                raise InvalidDateError(
                    f"Date parts must be integers, got {self.year!r}-{self.month!r}-{self.day!r}"
                )
        try:
            _date(self.year, self.month, self.day)
        except ValueError as e:
            raise InvalidDateError(
                f"Invalid date {self.year:04d}-{self.month:02d}-{self.day:02d}: {e}"
            ) from e

    @classmethod
    def from_date(cls, value: _date) -> "CalendarDate":
        """Build from a ``datetime.date`` (or ``datetime``, dropping the time)."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """
        Parse a date string.

        Args:
            text: Date as YYYY-MM-DD or MM/DD/YYYY.

        Returns:
            The parsed CalendarDate.

        Raises:
            InvalidDateError: If the text matches none of the accepted formats.
        """
        for fmt in DATE_FORMATS:
            try:
                return cls.from_date(datetime.strptime(text.strip(), fmt).date())
            except ValueError:
                continue
        raise InvalidDateError(f"Invalid date: {text!r}. Use YYYY-MM-DD or MM/DD/YYYY")

    @classmethod
    def start_of_year(cls, year: int) -> "CalendarDate":
        """January 1 of ``year``."""
        if isinstance(year, bool) or not isinstance(year, int) or not MIN_YEAR <= year <= MAX_YEAR:
            raise InvalidDateError(f"Year must be an integer between {MIN_YEAR} and {MAX_YEAR}, got {year!r}")
        return cls(year, 1, 1)

    @classmethod
    def from_year_offset(cls, year: int, offset_days: int) -> "CalendarDate":
        """The date ``offset_days`` days after January 1 of ``year``."""
        return cls.start_of_year(year).add_days(offset_days)

    def to_date(self) -> _date:
        """Convert to ``datetime.date``."""
        return _date(self.year, self.month, self.day)

    def day_of_week(self) -> Weekday:
        """Day of the week, 0 = Sunday ... 6 = Saturday."""
        return Weekday((self.to_date().weekday() + 1) % 7)

    def year_offset(self) -> int:
        """Days elapsed since January 1 of this date's year."""
        return self.to_date().timetuple().tm_yday - 1

    def is_weekend(self) -> bool:
        return self.day_of_week() in WEEKEND_DAYS

    def add_days(self, days: int) -> "CalendarDate":
        """
        Shift by a signed number of days.

        Raises:
            InvalidDateError: If the result falls outside years 1-9999.
        """
        try:
            return CalendarDate.from_date(self.to_date() + timedelta(days=days))
        except OverflowError as e:
            raise InvalidDateError(f"{self.isoformat()} {days:+d} days is out of range") from e

    def __add__(self, days):
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return self.add_days(days)

    def __sub__(self, other):
        if isinstance(other, CalendarDate):
            return (self.to_date() - other.to_date()).days
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add_days(-other)

    def isoformat(self) -> str:
        return self.to_date().isoformat()

    def __str__(self) -> str:
        return self.isoformat()


class CalendarMode(str, Enum):
    """How floating holiday dates are computed."""

    GREGORIAN = "gregorian"  # Month anchors, leap-year safe
    LEGACY = "legacy"  # Fixed day-of-year offsets from January 1


class DayKind(str, Enum):
    """Classification of a single date."""

    HOLIDAY = "holiday"
    WEEKEND = "weekend"
    BUSINESS_DAY = "business_day"


# Holiday rules


class FixedDayOfYear(BaseModel):
    """Holiday falling a fixed number of days after January 1."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed_day_of_year"] = "fixed_day_of_year"
    offset_days: int = Field(..., ge=0, le=365, description="Days after January 1")


class NthWeekdayFromAnchor(BaseModel):
    """Roll forward from an anchor day-of-year to the next target weekday (or stay on it)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["nth_weekday_from_anchor"] = "nth_weekday_from_anchor"
    anchor_offset_days: int = Field(..., ge=0, le=365, description="Anchor, in days after January 1")
    target_weekday: Weekday = Field(..., description="Weekday to land on")


class LastWeekdayFromAnchor(BaseModel):
    """Roll backward from an anchor day-of-year to the most recent target weekday (or stay on it)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["last_weekday_from_anchor"] = "last_weekday_from_anchor"
    anchor_offset_days: int = Field(..., ge=0, le=365, description="Anchor, in days after January 1")
    target_weekday: Weekday = Field(..., description="Weekday to land on")


class FixedMonthDay(BaseModel):
    """Holiday on the same month and day every year."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed_month_day"] = "fixed_month_day"
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)

    @model_validator(mode="after")
    def validate_month_day(self) -> "FixedMonthDay":
        """Reject combinations that exist in no year, such as April 31."""
        try:
            _date(2000, self.month, self.day)
        except ValueError:
            raise ValueError(f"Day {self.day} does not exist in month {self.month}")
        return self


class NthWeekdayOfMonth(BaseModel):
    """The nth occurrence of a weekday within a month, e.g. third Monday of January."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["nth_weekday_of_month"] = "nth_weekday_of_month"
    month: int = Field(..., ge=1, le=12)
    weekday: Weekday
    n: int = Field(..., ge=1, le=5)


class LastWeekdayOfMonth(BaseModel):
    """The last occurrence of a weekday within a month, e.g. last Monday of May."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["last_weekday_of_month"] = "last_weekday_of_month"
    month: int = Field(..., ge=1, le=12)
    weekday: Weekday


HolidayRule = Annotated[
    Union[
        FixedDayOfYear,
        NthWeekdayFromAnchor,
        LastWeekdayFromAnchor,
        FixedMonthDay,
        NthWeekdayOfMonth,
        LastWeekdayOfMonth,
    ],
    Field(discriminator="kind"),
]


class HolidayDefinition(BaseModel):
    """A named rule, before it is resolved against a year."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Holiday name, e.g. 'Thanksgiving'")
    rule: HolidayRule

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure the holiday name is not empty."""
        if not v or not v.strip():
            raise ValueError("Holiday name cannot be empty")
        return v.strip()


class Holiday(BaseModel):
    """A holiday resolved to a concrete date."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Holiday name")
    date: CalendarDate = Field(..., description="Date the holiday falls on")
    rule: HolidayRule = Field(..., description="Rule the date was derived from")


class CalendarYear(BaseModel):
    """All resolved holidays of one year, ordered by date."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR)
    mode: CalendarMode = Field(default=CalendarMode.GREGORIAN)
    holidays: Tuple[Holiday, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def check_invariants(self) -> "CalendarYear":
        names = [h.name for h in self.holidays]
        if len(set(names)) != len(names):
            raise CalendarInvariantError(f"Duplicate holiday names in {self.year}: {names}")
        for holiday in self.holidays:
            if holiday.date.year != self.year:
                raise CalendarInvariantError(
                    f"{holiday.name} resolved to {holiday.date}, outside {self.year}"
                )
        return self

    def __len__(self) -> int:
        return len(self.holidays)

    @property
    def names(self) -> List[str]:
        return [h.name for h in self.holidays]

    def get(self, name: str) -> Optional[Holiday]:
        """Look up a holiday by name."""
        for holiday in self.holidays:
            if holiday.name == name:
                return holiday
        return None

    def holiday_on(self, day: CalendarDate) -> Optional[Holiday]:
        """The holiday falling on ``day``, if any."""
        for holiday in self.holidays:
            if holiday.date == day:
                return holiday
        return None


class ClassificationResult(BaseModel):
    """Outcome of classifying one date."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    date: CalendarDate
    kind: DayKind
    holiday_name: Optional[str] = Field(default=None, description="Set only for holidays")

    @model_validator(mode="after")
    def validate_holiday_name(self) -> "ClassificationResult":
        if (self.kind == DayKind.HOLIDAY) != (self.holiday_name is not None):
            raise ValueError("holiday_name must be set exactly when kind is 'holiday'")
        return self

    @property
    def is_holiday(self) -> bool:
        return self.kind == DayKind.HOLIDAY

    @property
    def is_weekend(self) -> bool:
        return self.kind == DayKind.WEEKEND

    @property
    def is_business_day(self) -> bool:
        return self.kind == DayKind.BUSINESS_DAY

    @property
    def label(self) -> str:
        """Human readable form, e.g. 'Holiday (Christmas)'."""
        if self.kind == DayKind.HOLIDAY:
            return f"Holiday ({self.holiday_name})"
        if self.kind == DayKind.WEEKEND:
            return "Weekend"
        return "Business day"


class BusinessDayRequest(BaseModel):
    """Request model for business day calculation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    start_date: CalendarDate = Field(..., description="First day of the period")
    end_date: CalendarDate = Field(..., description="Last day of the period (inclusive)")


class BusinessDayReport(BaseModel):
    """Complete result of a business day calculation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    start_date: CalendarDate = Field(..., description="First day of the period")
    end_date: CalendarDate = Field(..., description="Last day of the period")
    mode: CalendarMode = Field(..., description="Holiday computation mode used")
    calendar_days: int = Field(..., ge=0, description="Total calendar days in range")
    holiday_days: int = Field(..., ge=0, description="Days classified as holidays")
    weekend_days: int = Field(..., ge=0, description="Weekend days that are not holidays")
    business_days: int = Field(..., ge=0, description="Remaining business days")
    holidays: List[Holiday] = Field(default_factory=list, description="Holidays in the range")
    weekends_detail: Dict[str, int] = Field(
        default_factory=dict, description="Breakdown of Saturdays and Sundays"
    )
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )
    warnings: List[str] = Field(default_factory=list, description="Any warnings generated")


class Config(BaseModel):
    """Configuration for the business calendar."""

    calendar_mode: CalendarMode = Field(
        default=CalendarMode.GREGORIAN, description="Holiday computation mode"
    )
    output_format: str = Field(default="json", description="Default export format: json or csv")
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "csv"):
            raise ValueError("output_format must be 'json' or 'csv'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level: {v}")
        return v
