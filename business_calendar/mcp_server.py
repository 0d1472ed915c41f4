"""
MCP Server for the Business Calendar.

This module provides an MCP (Model Context Protocol) server that exposes
holiday lookup, date classification and business day counting to MCP clients.

Supports two transport modes:
- stdio: For local desktop integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import logging
import os
from typing import Optional

from mcp.server.fastmcp import FastMCP

from business_calendar.config.manager import ConfigManager
from business_calendar.core.calculator import BusinessDayCalculator
from business_calendar.core.holiday_provider import HolidayProvider
from business_calendar.data.schemas import (
    MAX_YEAR,
    MIN_YEAR,
    BusinessDayRequest,
    CalendarDate,
    CalendarMode,
    Config,
)
from business_calendar.output.exporter import classification_to_dict, holiday_to_dict, report_to_dict

logger = logging.getLogger(__name__)


def _resolve_mode(mode: Optional[str], default: CalendarMode) -> CalendarMode:
    """Parse an optional mode name, raising ValueError for unknown names."""
    if not mode:
        return default
    try:
        return CalendarMode(mode.lower())
    except ValueError:
        valid = ", ".join(m.value for m in CalendarMode)
        raise ValueError(f"Invalid mode: {mode}. Valid modes: {valid}")


class BusinessCalendarTools:
    """The calendar operations exposed as MCP tools, one provider per mode."""

    def __init__(self, config: Config):
        self.config = config
        self.providers = {mode: HolidayProvider(mode=mode) for mode in CalendarMode}

    def classify_date(self, day: str, mode: Optional[str] = None) -> dict:
        """
        Classify a date as a U.S. federal holiday, a weekend day or a business day.

        A holiday that falls on a Saturday or Sunday is reported as a holiday.

        Args:
            day: Date in format YYYY-MM-DD (e.g., "2024-11-28")
            mode: "gregorian" (default, calendar-correct) or "legacy"
                  (fixed day-of-year offsets)

        Returns:
            Dictionary with date, kind ("holiday", "weekend" or "business_day"),
            holiday_name (only for holidays) and the mode used.

        Examples:
            >>> classify_date("2024-12-25")
            {"date": "2024-12-25", "kind": "holiday", "holiday_name": "Christmas", ...}
        """
        try:
            calendar_mode = _resolve_mode(mode, self.config.calendar_mode)
            result = self.providers[calendar_mode].classify(CalendarDate.parse(day))
        except ValueError as e:
            return {"error": str(e)}

        return {**classification_to_dict(result), "mode": calendar_mode.value}

    def get_holidays(self, year: int, mode: Optional[str] = None) -> dict:
        """
        Get the ten U.S. federal holidays of a year.

        Args:
            year: Year to get holidays for (e.g., 2025)
            mode: "gregorian" (default) or "legacy"

        Returns:
            Dictionary with year, mode, holiday_count and the holidays
            (date, name, weekday, rule) ordered by date.
        """
        if year < MIN_YEAR or year > MAX_YEAR:
            return {"error": f"Year must be between {MIN_YEAR} and {MAX_YEAR}"}

        try:
            calendar_mode = _resolve_mode(mode, self.config.calendar_mode)
        except ValueError as e:
            return {"error": str(e)}

        holidays = self.providers[calendar_mode].get_holidays_for_year(year)
        return {
            "year": year,
            "mode": calendar_mode.value,
            "holiday_count": len(holidays),
            "holidays": [holiday_to_dict(h) for h in holidays],
        }

    def get_holidays_in_range(self, start_date: str, end_date: str, mode: Optional[str] = None) -> dict:
        """
        Get the U.S. federal holidays between two dates (both inclusive).

        Args:
            start_date: Start date in format YYYY-MM-DD
            end_date: End date in format YYYY-MM-DD
            mode: "gregorian" (default) or "legacy"

        Returns:
            Dictionary with the range, mode and the holidays ordered by date.
        """
        try:
            calendar_mode = _resolve_mode(mode, self.config.calendar_mode)
            start = CalendarDate.parse(start_date)
            end = CalendarDate.parse(end_date)
            holidays = self.providers[calendar_mode].get_holidays_for_range(start, end)
        except ValueError as e:
            return {"error": str(e)}

        return {
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "mode": calendar_mode.value,
            "holiday_count": len(holidays),
            "holidays": [holiday_to_dict(h) for h in holidays],
        }

    def count_business_days(self, start_date: str, end_date: str, mode: Optional[str] = None) -> dict:
        """
        Count business days between two dates (both inclusive).

        Business days exclude Saturdays, Sundays and U.S. federal holidays.

        Args:
            start_date: Start date in format YYYY-MM-DD (e.g., "2024-12-20")
            end_date: End date in format YYYY-MM-DD (e.g., "2025-01-05")
            mode: "gregorian" (default) or "legacy"

        Returns:
            Dictionary with calendar_days, holiday_days, weekend_days,
            business_days, the holidays in range and any warnings.
        """
        try:
            calendar_mode = _resolve_mode(mode, self.config.calendar_mode)
            request = BusinessDayRequest(
                start_date=CalendarDate.parse(start_date),
                end_date=CalendarDate.parse(end_date),
            )
            report = BusinessDayCalculator(self.providers[calendar_mode]).calculate(request)
        except ValueError as e:
            return {"error": str(e)}

        return report_to_dict(report)


def create_mcp_server(
    host: str = "127.0.0.1", port: int = 8000, config_path: Optional[str] = None
) -> FastMCP:
    """Create and configure the MCP server with tools."""
    tools = BusinessCalendarTools(ConfigManager(config_path).load_config())

    mcp = FastMCP("Business Calendar", host=host, port=port)

    mcp.tool()(tools.classify_date)
    mcp.tool()(tools.get_holidays)
    mcp.tool()(tools.get_holidays_in_range)
    mcp.tool()(tools.count_business_days)

    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="Business Calendar MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", os.environ.get("FASTMCP_HOST", "0.0.0.0")),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", os.environ.get("FASTMCP_PORT", "8080"))),
        help="Port to listen on (SSE mode only, default: 8080)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config file (optional)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Create MCP server with configured host/port
    mcp = create_mcp_server(host=args.host, port=args.port, config_path=args.config)

    logger.info(f"Starting Business Calendar MCP server ({args.transport})")
    if args.transport == "sse":
        logger.info(f"SSE endpoint at http://{args.host}:{args.port}/sse")
        # Run with SSE transport for HTTP access
        mcp.run(transport="sse")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
