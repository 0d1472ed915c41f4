"""
Console output formatting using Rich.
"""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from business_calendar.data.schemas import (
    BusinessDayReport,
    CalendarMode,
    ClassificationResult,
    DayKind,
    Holiday,
)

KIND_STYLES = {
    DayKind.HOLIDAY: "bold magenta",
    DayKind.WEEKEND: "yellow",
    DayKind.BUSINESS_DAY: "green",
}

DISPLAY_FORMAT = "%a %m/%d/%Y"


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize the console formatter.

        Args:
            console: Rich console to print to. A new one is created if omitted.
        """
        self.console = console or Console()

    def print_classifications(self, results: List[ClassificationResult], mode: CalendarMode) -> None:
        """
        Print a table of classified dates.

        Args:
            results: Classifications to display.
            mode: Calendar mode the dates were classified with.
        """
        table = Table(title=f"[bold]Date Classification[/bold] [dim]({mode.value})[/dim]")
        table.add_column("Date", style="cyan", width=16)
        table.add_column("Classification", style="white")

        for result in results:
            table.add_row(
                result.date.to_date().strftime(DISPLAY_FORMAT),
                Text(result.label, style=KIND_STYLES[result.kind]),
            )

        self.console.print(table)

    def print_report(self, report: BusinessDayReport) -> None:
        """
        Print a business day calculation report.

        Args:
            report: BusinessDayReport to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Business Day Calculation[/bold blue]")
        self.console.print()

        summary_table = Table(show_header=False, box=None)
        summary_table.add_column("Label", style="cyan", width=20)
        summary_table.add_column("Value", style="white")
        summary_table.add_row(
            "Period:",
            f"{report.start_date.to_date().strftime(DISPLAY_FORMAT)} - "
            f"{report.end_date.to_date().strftime(DISPLAY_FORMAT)}",
        )
        summary_table.add_row("Calendar Mode:", report.mode.value.capitalize())
        self.console.print(Panel(summary_table, title="[bold]Period[/bold]"))

        calc_table = Table(show_header=False, box=None)
        calc_table.add_column("Label", style="cyan", width=20)
        calc_table.add_column("Value", style="white", justify="right", width=10)

        calc_table.add_row("Calendar Days:", str(report.calendar_days))
        calc_table.add_row(
            "Weekend Days:",
            f"- {report.weekend_days} ({report.weekends_detail.get('saturdays', 0)} Sat, "
            f"{report.weekends_detail.get('sundays', 0)} Sun)",
        )
        calc_table.add_row("Holidays:", f"- {report.holiday_days}")
        calc_table.add_row("", "─" * 15)
        calc_table.add_row(
            Text("Business Days:", style="bold green"),
            Text(str(report.business_days), style="bold green"),
        )
        self.console.print(Panel(calc_table, title="[bold]Calculation[/bold]"))

        if report.holidays:
            self.print_holidays(report.holidays)

        if report.warnings:
            self.console.print()
            for warning in report.warnings:
                self.console.print(f"[yellow]Warning:[/yellow] {warning}")

        self.console.print()

    def print_holidays(self, holidays: List[Holiday], title: str = "Holidays in Period") -> None:
        """
        Print a table of holidays.

        Args:
            holidays: List of holidays to display.
            title: Table title.
        """
        holiday_table = Table(title=f"[bold]{title}[/bold]")
        holiday_table.add_column("Date", style="cyan", width=12)
        holiday_table.add_column("Day", style="dim", width=12)
        holiday_table.add_column("Name", style="white")

        for holiday in holidays:
            day = holiday.date.to_date()
            holiday_table.add_row(
                day.strftime("%m/%d/%Y"),
                day.strftime("%A"),
                holiday.name,
            )

        self.console.print(holiday_table)

    def print_holidays_for_year(self, year: int, mode: CalendarMode, holidays: List[Holiday]) -> None:
        """
        Print all holidays of a year.

        Args:
            year: Year.
            mode: Calendar mode the holidays were resolved with.
            holidays: List of holidays.
        """
        self.console.print()
        self.console.rule(f"[bold blue]Federal Holidays {year} ({mode.value})[/bold blue]")
        self.console.print()

        if holidays:
            self.print_holidays(holidays, title=f"Holidays {year}")
        else:
            self.console.print("[dim]No holidays found for this period.[/dim]")

        self.console.print()

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
