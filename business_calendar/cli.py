"""
CLI interface for the business calendar.
"""

import logging
import sys
from datetime import date
from typing import Optional

import click

from business_calendar.config.manager import ConfigManager
from business_calendar.core.calculator import BusinessDayCalculator
from business_calendar.core.holiday_provider import HolidayProvider
from business_calendar.data.schemas import BusinessDayRequest, CalendarDate, CalendarMode, Config
from business_calendar.output.exporter import ResultExporter
from business_calendar.output.formatter import ConsoleFormatter

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

MODE_CHOICES = [m.value for m in CalendarMode]
FORMAT_CHOICES = ["console", "json", "csv"]


def parse_date(value: str) -> CalendarDate:
    """Parse a command-line date, turning failures into click usage errors."""
    try:
        return CalendarDate.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def load_config(config_path: Optional[str]) -> Config:
    """Load configuration and apply its log level."""
    cfg = ConfigManager(config_path).load_config()
    if logging.getLogger().level != logging.DEBUG:
        logging.getLogger().setLevel(cfg.log_level)
    return cfg


def resolve_mode(mode: Optional[str], cfg: Config) -> CalendarMode:
    return CalendarMode(mode) if mode else cfg.calendar_mode


mode_option = click.option(
    "--mode", "-m",
    type=click.Choice(MODE_CHOICES),
    default=None,
    help="Holiday computation mode (default: from config, gregorian)",
)
config_option = click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
format_option = click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default="console",
    help="Output format (default: console)",
)
output_option = click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path (optional)",
)


@click.group()
@click.version_option(version="0.1.0", prog_name="business-calendar")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose):
    """Business Calendar - U.S. federal holidays, weekends and business days."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@main.command()
@click.argument("dates", nargs=-1, required=True)
@click.option(
    "--non-business-only",
    is_flag=True,
    default=False,
    help="Only list dates that are holidays or weekend days",
)
@mode_option
@format_option
@output_option
@config_option
def classify(dates, non_business_only, mode, output_format, output, config):
    """Classify dates as holiday, weekend or business day."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_config(config)
        calendar_mode = resolve_mode(mode, cfg)
        provider = HolidayProvider(mode=calendar_mode)

        parsed = [parse_date(d) for d in dates]
        if non_business_only:
            results = BusinessDayCalculator(provider).filter_non_business_days(parsed)
        else:
            results = [provider.classify(d) for d in parsed]

        if output_format == "console":
            formatter.print_classifications(results, calendar_mode)
        else:
            exporter = ResultExporter(output_directory=cfg.output_directory)
            if output_format == "json":
                path = exporter.export_classifications_json(results, output)
            else:
                path = exporter.export_classifications_csv(results, output)
            formatter.print_success(f"Classifications saved to {path}")

    except click.BadParameter:
        raise
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        logger.exception("Detailed error:")
        sys.exit(1)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: current year)",
)
@mode_option
@format_option
@output_option
@config_option
def holidays(year, mode, output_format, output, config):
    """List the federal holidays of a year."""
    formatter = ConsoleFormatter()

    try:
        # Default to current year
        if year is None:
            year = date.today().year

        cfg = load_config(config)
        calendar_mode = resolve_mode(mode, cfg)
        holiday_list = HolidayProvider(mode=calendar_mode).get_holidays_for_year(year)

        _output_holidays(formatter, cfg, holiday_list, output_format, output)
        if output_format == "console":
            formatter.print_holidays_for_year(year, calendar_mode, holiday_list)

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        logger.exception("Detailed error:")
        sys.exit(1)


@main.command(name="range")
@click.option("--start", "-s", required=True, help="Start date (YYYY-MM-DD or MM/DD/YYYY)")
@click.option("--end", "-e", required=True, help="End date (YYYY-MM-DD or MM/DD/YYYY)")
@mode_option
@format_option
@output_option
@config_option
def holiday_range(start, end, mode, output_format, output, config):
    """List the holidays between two dates (inclusive)."""
    formatter = ConsoleFormatter()

    try:
        start_date = parse_date(start)
        end_date = parse_date(end)

        cfg = load_config(config)
        calendar_mode = resolve_mode(mode, cfg)
        holiday_list = HolidayProvider(mode=calendar_mode).get_holidays_for_range(start_date, end_date)

        _output_holidays(formatter, cfg, holiday_list, output_format, output)
        if output_format == "console":
            if holiday_list:
                formatter.print_holidays(holiday_list, title=f"Holidays {start_date} - {end_date}")
            else:
                formatter.console.print("[dim]No holidays found for this period.[/dim]")

    except click.BadParameter:
        raise
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        logger.exception("Detailed error:")
        sys.exit(1)


@main.command()
@click.option("--start", "-s", required=True, help="Start date (YYYY-MM-DD or MM/DD/YYYY)")
@click.option("--end", "-e", required=True, help="End date (YYYY-MM-DD or MM/DD/YYYY)")
@mode_option
@format_option
@output_option
@config_option
def count(start, end, mode, output_format, output, config):
    """Count business days between two dates (inclusive)."""
    formatter = ConsoleFormatter()

    try:
        start_date = parse_date(start)
        end_date = parse_date(end)

        cfg = load_config(config)
        calculator = BusinessDayCalculator(HolidayProvider(mode=resolve_mode(mode, cfg)))
        report = calculator.calculate(BusinessDayRequest(start_date=start_date, end_date=end_date))

        if output_format == "console":
            formatter.print_report(report)
        else:
            exporter = ResultExporter(output_directory=cfg.output_directory)
            if output_format == "json":
                path = exporter.export_report_json(report, output)
            else:
                path = exporter.export_report_csv(report, output)
            formatter.print_success(f"Result saved to {path}")

    except click.BadParameter:
        raise
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        logger.exception("Detailed error:")
        sys.exit(1)


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@config_option
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn

        cfg = load_config(config)

        # Use provided values or fall back to config
        api_host = host or cfg.api_host
        api_port = port or cfg.api_port

        formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
        formatter.console.print("Press Ctrl+C to stop")
        formatter.console.print()

        uvicorn.run(
            "business_calendar.api:app",
            host=api_host,
            port=api_port,
            reload=False,
        )

    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Error starting server: {e}")
        sys.exit(1)


def _output_holidays(formatter, cfg, holiday_list, output_format, output) -> None:
    """Export holidays when a file format was requested."""
    if output_format == "console":
        return

    exporter = ResultExporter(output_directory=cfg.output_directory)
    if output_format == "json":
        path = exporter.export_holidays_json(holiday_list, output)
    else:
        path = exporter.export_holidays_csv(holiday_list, output)
    formatter.print_success(f"Holidays saved to {path}")


if __name__ == "__main__":
    main()
