"""
Tests for the command-line interface.
"""

import json

import pytest
from click.testing import CliRunner

from business_calendar.cli import main
from business_calendar.config.manager import ConfigManager


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove any BUSINESS_CALENDAR_* overrides from the environment."""
    for env_var in ConfigManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def runner():
    return CliRunner()


class TestClassifyCommand:
    """Tests for the classify command."""

    def test_classify_dates(self, runner):
        result = runner.invoke(main, ["classify", "2024-12-25", "2024-04-13", "04/10/2024"])

        assert result.exit_code == 0
        assert "Holiday (Christmas)" in result.output
        assert "Weekend" in result.output
        assert "Business day" in result.output

    def test_classify_legacy_mode(self, runner, tmp_path):
        output = tmp_path / "classified.json"
        result = runner.invoke(
            main,
            ["classify", "2024-11-21", "2024-11-28", "--mode", "legacy", "-f", "json", "-o", str(output)],
        )

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [d["kind"] for d in data] == ["holiday", "business_day"]

    def test_non_business_only(self, runner, tmp_path):
        output = tmp_path / "filtered.csv"
        result = runner.invoke(
            main,
            ["classify", "2024-04-10", "2024-04-13", "--non-business-only", "-f", "csv", "-o", str(output)],
        )

        assert result.exit_code == 0
        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines == ["Date,Kind,Holiday Name", "2024-04-13,weekend,"]

    def test_invalid_date(self, runner):
        result = runner.invoke(main, ["classify", "2024-02-30"])

        assert result.exit_code == 2
        assert "Invalid date" in result.output


class TestHolidaysCommand:
    """Tests for the holidays and range commands."""

    def test_holidays_for_year(self, runner):
        result = runner.invoke(main, ["holidays", "--year", "2024"])

        assert result.exit_code == 0
        assert "Thanksgiving" in result.output
        assert "11/28/2024" in result.output

    def test_holidays_json_export(self, runner, tmp_path):
        output = tmp_path / "holidays.json"
        result = runner.invoke(main, ["holidays", "-y", "2024", "-m", "legacy", "-f", "json", "-o", str(output)])

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert len(data) == 10
        assert {"date": "2024-11-21", "name": "Thanksgiving", "weekday": "Thursday",
                "rule": "nth_weekday_from_anchor"} in data

    def test_holidays_invalid_year(self, runner):
        result = runner.invoke(main, ["holidays", "--year", "0"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_range(self, runner):
        result = runner.invoke(main, ["range", "-s", "2024-12-20", "-e", "2025-01-05"])

        assert result.exit_code == 0
        assert "Christmas" in result.output
        assert "New Year's Day" in result.output

    def test_range_end_before_start(self, runner):
        result = runner.invoke(main, ["range", "-s", "2025-01-05", "-e", "2024-12-20"])

        assert result.exit_code == 1
        assert "before start date" in result.output


class TestCountCommand:
    """Tests for the count command."""

    def test_count_console(self, runner):
        result = runner.invoke(main, ["count", "-s", "2024-12-20", "-e", "2025-01-05"])

        assert result.exit_code == 0
        assert "Business Days:" in result.output

    def test_count_json(self, runner, tmp_path):
        output = tmp_path / "report.json"
        result = runner.invoke(
            main, ["count", "-s", "2024-12-20", "-e", "2025-01-05", "-f", "json", "-o", str(output)]
        )

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["calculation"]["business_days"] == 9
        assert data["calculation"]["holiday_days"] == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
