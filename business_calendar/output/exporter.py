"""
Export functionality for holidays, classifications and business day reports.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from business_calendar.data.schemas import BusinessDayReport, ClassificationResult, Holiday

logger = logging.getLogger(__name__)


def holiday_to_dict(holiday: Holiday) -> dict:
    """JSON-serializable form of a holiday."""
    return {
        "date": holiday.date.isoformat(),
        "name": holiday.name,
        "weekday": holiday.date.day_of_week().name.capitalize(),
        "rule": holiday.rule.kind,
    }


def classification_to_dict(result: ClassificationResult) -> dict:
    """JSON-serializable form of a classification."""
    return {
        "date": result.date.isoformat(),
        "kind": result.kind.value,
        "holiday_name": result.holiday_name,
    }


def report_to_dict(report: BusinessDayReport) -> dict:
    """JSON-serializable form of a business day report."""
    return {
        "start_date": report.start_date.isoformat(),
        "end_date": report.end_date.isoformat(),
        "mode": report.mode.value,
        "calculation": {
            "calendar_days": report.calendar_days,
            "holiday_days": report.holiday_days,
            "weekend_days": report.weekend_days,
            "weekends_detail": report.weekends_detail,
            "business_days": report.business_days,
        },
        "holidays": [holiday_to_dict(h) for h in report.holidays],
        "metadata": {
            "calculation_timestamp": report.calculation_timestamp.isoformat(),
            "warnings": report.warnings,
        },
    }


class ResultExporter:
    """Exports business calendar results to JSON and CSV."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _resolve_path(self, prefix: str, extension: str, output_path: Optional[str]) -> Path:
        """Use the given path, or a timestamped file in the output directory."""
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path

        output_dir = Path(self.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime(self.timestamp_format)
        return output_dir / f"{prefix}_{timestamp}.{extension}"

    def _write_json(self, data, file_path: Path) -> str:
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        return str(file_path)

    def export_holidays_json(self, holidays: List[Holiday], output_path: Optional[str] = None) -> str:
        """
        Export a list of holidays to a JSON file.

        Args:
            holidays: Holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("holidays", "json", output_path)
        path = self._write_json([holiday_to_dict(h) for h in holidays], file_path)
        logger.info(f"Exported {len(holidays)} holidays to: {path}")
        return path

    def export_holidays_csv(self, holidays: List[Holiday], output_path: Optional[str] = None) -> str:
        """
        Export a list of holidays to a CSV file.

        Args:
            holidays: Holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("holidays", "csv", output_path)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Date", "Name", "Weekday", "Rule"])
            for holiday in holidays:
                row = holiday_to_dict(holiday)
                writer.writerow([row["date"], row["name"], row["weekday"], row["rule"]])

        logger.info(f"Exported {len(holidays)} holidays to: {file_path}")
        return str(file_path)

    def export_classifications_json(
        self, results: List[ClassificationResult], output_path: Optional[str] = None
    ) -> str:
        """Export classified dates to a JSON file."""
        file_path = self._resolve_path("classification", "json", output_path)
        path = self._write_json([classification_to_dict(r) for r in results], file_path)
        logger.info(f"Exported {len(results)} classifications to: {path}")
        return path

    def export_classifications_csv(
        self, results: List[ClassificationResult], output_path: Optional[str] = None
    ) -> str:
        """Export classified dates to a CSV file."""
        file_path = self._resolve_path("classification", "csv", output_path)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Date", "Kind", "Holiday Name"])
            for result in results:
                writer.writerow([result.date.isoformat(), result.kind.value, result.holiday_name or ""])

        logger.info(f"Exported {len(results)} classifications to: {file_path}")
        return str(file_path)

    def export_report_json(self, report: BusinessDayReport, output_path: Optional[str] = None) -> str:
        """
        Export a business day report to a JSON file.

        Args:
            report: BusinessDayReport to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("business_days", "json", output_path)
        path = self._write_json(report_to_dict(report), file_path)
        logger.info(f"Exported result to: {path}")
        return path

    def export_report_csv(self, report: BusinessDayReport, output_path: Optional[str] = None) -> str:
        """
        Export a business day report summary to a CSV file.

        Args:
            report: BusinessDayReport to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("business_days", "csv", output_path)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "Start Date",
                "End Date",
                "Mode",
                "Calendar Days",
                "Holiday Days",
                "Weekend Days",
                "Saturdays",
                "Sundays",
                "Business Days",
            ])
            writer.writerow([
                report.start_date.isoformat(),
                report.end_date.isoformat(),
                report.mode.value,
                report.calendar_days,
                report.holiday_days,
                report.weekend_days,
                report.weekends_detail.get("saturdays", 0),
                report.weekends_detail.get("sundays", 0),
                report.business_days,
            ])

        logger.info(f"Exported result to: {file_path}")
        return str(file_path)
