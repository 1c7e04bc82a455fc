"""
Tests for the command line interface.
"""

import pytest
from typer.testing import CliRunner

from datecalc import __version__
from datecalc.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_local_config(tmp_path, monkeypatch):
    """Run every command where no datecalc.yaml can be found."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("datecalc.config.get_default_config_path", lambda: tmp_path / "datecalc.yaml")


def _invoke(*args):
    return runner.invoke(app, list(args))


class TestDateCommands:
    """Commands that take a single date."""

    def test_timestamp(self):
        result = _invoke("timestamp", "1970-01-01T00:00:00Z")

        assert result.exit_code == 0
        assert result.stdout.strip() == "0"

    def test_time(self):
        result = _invoke("time", "2023-06-01T08:20:55Z")

        assert result.exit_code == 0
        assert result.stdout.strip() == "08:20:55"

    def test_day_name_legacy(self):
        result = _invoke("day-name", "2024-01-31")

        assert result.exit_code == 0
        assert result.stdout.strip() == "Wensday"

    def test_next_friday(self):
        result = _invoke("next-friday", "2024-02-03T00:00:00Z")

        assert result.exit_code == 0
        assert "2024-02-09T00:00:00" in result.stdout

    def test_format(self):
        result = _invoke("format", "2024-02-01T15:00:00.000Z")

        assert result.exit_code == 0
        assert result.stdout.strip() == "2/1/2024, 3:00:00 PM"

    def test_week_number(self):
        result = _invoke("week-number", "2024-02-23")

        assert result.exit_code == 0
        assert result.stdout.strip() == "8"

    def test_friday13(self):
        result = _invoke("friday13", "2024-01-13")

        assert result.exit_code == 0
        assert result.stdout.strip() == "Friday, 13.09.2024"

    def test_quarter(self):
        result = _invoke("quarter", "2024-11-10")

        assert result.exit_code == 0
        assert result.stdout.strip() == "4"

    def test_leap_year(self):
        result = _invoke("leap-year", "1900-06-01")

        assert result.exit_code == 0
        assert result.stdout.strip() == "1900 is not a leap year"

    def test_date_defaults_to_now(self):
        result = _invoke("quarter")

        assert result.exit_code == 0
        assert result.stdout.strip() in {"1", "2", "3", "4"}

    def test_invalid_date_fails(self):
        result = _invoke("timestamp", "xyz")

        assert result.exit_code == 1


class TestMonthAndPeriodCommands:
    """Commands about months and periods."""

    def test_days_in_month(self):
        result = _invoke("days-in-month", "2", "2024")

        assert result.exit_code == 0
        assert result.stdout.strip() == "29"

    def test_weekends(self):
        result = _invoke("weekends", "12", "2023")

        assert result.exit_code == 0
        assert result.stdout.strip() == "10"

    def test_days_in_period(self):
        result = _invoke("days-in-period", "2024-02-01", "2024-02-12")

        assert result.exit_code == 0
        assert result.stdout.strip() == "12"

    def test_in_period(self):
        inside = _invoke("in-period", "2024-03-02", "2024-02-02", "2024-03-02")
        outside = _invoke("in-period", "2024-02-01", "2024-02-02", "2024-03-02")

        assert inside.stdout.strip() == "yes"
        assert outside.stdout.strip() == "no"


class TestScheduleCommand:
    """Tests for the schedule command."""

    def test_explicit_pattern(self):
        result = _invoke("schedule", "01-01-2024", "15-01-2024", "--work", "1", "--off", "3")

        assert result.exit_code == 0
        for day in ["01-01-2024", "05-01-2024", "09-01-2024", "13-01-2024"]:
            assert day in result.stdout
        assert "02-01-2024" not in result.stdout

    def test_default_pattern(self):
        result = _invoke("schedule", "01-01-2024", "07-01-2024")

        assert result.exit_code == 0
        assert "05-01-2024" in result.stdout
        assert "06-01-2024" not in result.stdout

    def test_no_days(self):
        result = _invoke("schedule", "15-01-2024", "01-01-2024")

        assert result.exit_code == 0
        assert "No working days" in result.stdout

    def test_empty_cycle_fails(self):
        result = _invoke("schedule", "01-01-2024", "15-01-2024", "--work", "0", "--off", "0")

        assert result.exit_code == 1


class TestConfigOption:
    """Tests for the --config option."""

    def test_config_file_changes_spelling(self, tmp_path):
        config = tmp_path / "custom.yaml"
        config.write_text("display:\n  weekday_spelling: standard\n", encoding="utf-8")

        result = _invoke("--config", str(config), "day-name", "2024-01-31")

        assert result.exit_code == 0
        assert result.stdout.strip() == "Wednesday"

    def test_missing_config_fails(self, tmp_path):
        result = _invoke("--config", str(tmp_path / "missing.yaml"), "day-name", "2024-01-31")

        assert result.exit_code == 1


def test_version():
    result = _invoke("version")

    assert result.exit_code == 0
    assert __version__ in result.stdout
