"""
Tests for result export and console formatting.
"""

import csv
import json

import pytest
from rich.console import Console

from business_calendar.core.calculator import BusinessDayCalculator
from business_calendar.core.engine import classify, holidays_in_range, resolve_holidays
from business_calendar.core.holiday_provider import HolidayProvider
from business_calendar.data.schemas import CalendarDate, CalendarMode
from business_calendar.output.exporter import ResultExporter
from business_calendar.output.formatter import ConsoleFormatter

D = CalendarDate


@pytest.fixture
def exporter(tmp_path):
    """Create a ResultExporter writing into a temporary directory."""
    return ResultExporter(output_directory=str(tmp_path / "results"))


@pytest.fixture
def report():
    """Business day report for the 2024/2025 holiday season."""
    calculator = BusinessDayCalculator(HolidayProvider())
    return calculator.calculate_simple(D(2024, 12, 20), D(2025, 1, 5))


class TestResultExporter:
    """Tests for ResultExporter."""

    def test_export_holidays_json(self, exporter, tmp_path):
        path = exporter.export_holidays_json(
            resolve_holidays(2024).holidays, str(tmp_path / "holidays.json")
        )

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        assert len(data) == 10
        assert data[0] == {
            "date": "2024-01-01",
            "name": "New Year's Day",
            "weekday": "Monday",
            "rule": "fixed_month_day",
        }

    def test_export_holidays_csv_default_path(self, exporter, tmp_path):
        path = exporter.export_holidays_csv(holidays_in_range(D(2024, 12, 20), D(2025, 1, 5)))

        assert path.startswith(str(tmp_path / "results"))
        assert path.endswith(".csv")
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))

        assert rows[0] == ["Date", "Name", "Weekday", "Rule"]
        assert rows[1][:2] == ["2024-12-25", "Christmas"]
        assert rows[2][:2] == ["2025-01-01", "New Year's Day"]

    def test_export_classifications(self, exporter, tmp_path):
        results = [classify(D(2024, 12, 25)), classify(D(2024, 4, 13)), classify(D(2024, 4, 10))]

        json_path = exporter.export_classifications_json(results, str(tmp_path / "c.json"))
        csv_path = exporter.export_classifications_csv(results, str(tmp_path / "c.csv"))

        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
        assert [d["kind"] for d in data] == ["holiday", "weekend", "business_day"]
        assert data[0]["holiday_name"] == "Christmas"
        assert data[2]["holiday_name"] is None

        with open(csv_path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[1] == ["2024-12-25", "holiday", "Christmas"]
        assert rows[3] == ["2024-04-10", "business_day", ""]

    def test_export_report_json(self, exporter, report, tmp_path):
        path = exporter.export_report_json(report, str(tmp_path / "report.json"))

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        assert data["mode"] == "gregorian"
        assert data["calculation"]["business_days"] == 9
        assert data["calculation"]["weekends_detail"] == {"saturdays": 3, "sundays": 3}
        assert [h["name"] for h in data["holidays"]] == ["Christmas", "New Year's Day"]

    def test_export_report_csv(self, exporter, report, tmp_path):
        path = exporter.export_report_csv(report, str(tmp_path / "sub" / "report.csv"))

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))

        assert rows[1] == ["2024-12-20", "2025-01-05", "gregorian", "17", "2", "6", "3", "3", "9"]


class TestConsoleFormatter:
    """Tests for ConsoleFormatter."""

    @pytest.fixture
    def formatter(self):
        return ConsoleFormatter(Console(record=True, width=120))

    def test_print_holidays_for_year(self, formatter):
        formatter.print_holidays_for_year(2024, CalendarMode.LEGACY, resolve_holidays(2024, "legacy").holidays)
        text = formatter.console.export_text()

        assert "Federal Holidays 2024 (legacy)" in text
        assert "11/21/2024" in text
        assert "Thanksgiving" in text

    def test_print_classifications(self, formatter):
        formatter.print_classifications([classify(D(2022, 12, 25))], CalendarMode.GREGORIAN)
        text = formatter.console.export_text()

        assert "Holiday (Christmas)" in text

    def test_print_report(self, formatter, report):
        formatter.print_report(report)
        text = formatter.console.export_text()

        assert "Business Days:" in text
        assert "New Year's Day" in text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
