"""
FastAPI REST API for the business calendar.
"""

from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from business_calendar.config.manager import ConfigManager
from business_calendar.core.calculator import BusinessDayCalculator
from business_calendar.core.holiday_provider import HolidayProvider
from business_calendar.data.schemas import (
    MAX_YEAR,
    MIN_YEAR,
    BusinessDayRequest,
    CalendarDate,
    CalendarMode,
    Holiday,
)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# One cached provider per mode; resolved years never change
providers = {mode: HolidayProvider(mode=mode) for mode in CalendarMode}


def get_provider(mode: Optional[CalendarMode]) -> HolidayProvider:
    return providers[mode or config.calendar_mode]


# API Models
class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    date: date
    name: str
    weekday: str
    rule: str


class ClassificationResponse(BaseModel):
    """Response model for a classified date."""

    date: date
    kind: str
    holiday_name: Optional[str] = None
    mode: str


class BusinessDaysRequest(BaseModel):
    """Request model for business day calculation."""

    start_date: date = Field(..., description="First day of the period")
    end_date: date = Field(..., description="Last day of the period (inclusive)")
    mode: Optional[CalendarMode] = Field(None, description="Holiday computation mode")


class BusinessDaysResponse(BaseModel):
    """Response model for business day calculation."""

    start_date: date
    end_date: date
    mode: str
    calendar_days: int
    holiday_days: int
    weekend_days: int
    saturdays: int
    sundays: int
    business_days: int
    holidays: List[HolidayResponse]
    warnings: List[str]


def to_holiday_response(holiday: Holiday) -> HolidayResponse:
    return HolidayResponse(
        date=holiday.date.to_date(),
        name=holiday.name,
        weekday=holiday.date.day_of_week().name.capitalize(),
        rule=holiday.rule.kind,
    )


# FastAPI app
app = FastAPI(
    title="Business Calendar API",
    description="U.S. federal holidays, weekends and business days",
    version="0.1.0",
)


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Business Calendar API",
        "version": "0.1.0",
        "default_mode": config.calendar_mode.value,
        "endpoints": {
            "GET /classify/{day}": "Classify a date",
            "GET /holidays/{year}": "Get the holidays of a year",
            "GET /holidays?start=&end=": "Get the holidays in a date range",
            "POST /business-days": "Count business days in a date range",
        },
    }


@app.get("/classify/{day}", response_model=ClassificationResponse)
async def classify_date(day: date, mode: Optional[CalendarMode] = Query(None)):
    """
    Classify a date as holiday, weekend or business day.

    Args:
        day: Date in YYYY-MM-DD format.
        mode: Optional holiday computation mode (gregorian or legacy).
    """
    provider = get_provider(mode)
    try:
        result = provider.classify(CalendarDate.from_date(day))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ClassificationResponse(
        date=day,
        kind=result.kind.value,
        holiday_name=result.holiday_name,
        mode=provider.mode.value,
    )


@app.get("/holidays/{year}", response_model=List[HolidayResponse])
async def get_holidays(year: int, mode: Optional[CalendarMode] = Query(None)):
    """
    Get all federal holidays of a year.

    Args:
        year: Year (1-9999).
        mode: Optional holiday computation mode.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise HTTPException(
            status_code=400,
            detail=f"Year must be between {MIN_YEAR} and {MAX_YEAR}",
        )

    holidays = get_provider(mode).get_holidays_for_year(year)
    return [to_holiday_response(h) for h in holidays]


@app.get("/holidays", response_model=List[HolidayResponse])
async def get_holidays_in_range(
    start: date = Query(..., description="First day of the range"),
    end: date = Query(..., description="Last day of the range (inclusive)"),
    mode: Optional[CalendarMode] = Query(None),
):
    """Get the holidays between two dates, ordered by date."""
    try:
        holidays = get_provider(mode).get_holidays_for_range(
            CalendarDate.from_date(start), CalendarDate.from_date(end)
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return [to_holiday_response(h) for h in holidays]


@app.post("/business-days", response_model=BusinessDaysResponse)
async def count_business_days(request: BusinessDaysRequest):
    """Count holidays, weekend days and business days in a date range."""
    calculator = BusinessDayCalculator(get_provider(request.mode))
    try:
        report = calculator.calculate(
            BusinessDayRequest(
                start_date=CalendarDate.from_date(request.start_date),
                end_date=CalendarDate.from_date(request.end_date),
            )
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return BusinessDaysResponse(
        start_date=request.start_date,
        end_date=request.end_date,
        mode=report.mode.value,
        calendar_days=report.calendar_days,
        holiday_days=report.holiday_days,
        weekend_days=report.weekend_days,
        saturdays=report.weekends_detail.get("saturdays", 0),
        sundays=report.weekends_detail.get("sundays", 0),
        business_days=report.business_days,
        holidays=[to_holiday_response(h) for h in report.holidays],
        warnings=report.warnings,
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "0.1.0"}
