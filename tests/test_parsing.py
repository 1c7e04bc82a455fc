"""
Tests for date coercion helpers.
"""

from datetime import date, datetime, timezone

import pendulum
import pytest

from datecalc.domain.exceptions import DateCalcError, DateParseError
from datecalc.domain.parsing import (
    month_start,
    parse_day_month_year,
    to_datetime,
    try_datetime,
)


class TestToDatetime:
    """Tests for to_datetime."""

    def test_pendulum_value_is_returned_as_is(self):
        """Pendulum values are not copied."""
        value = pendulum.datetime(2024, 1, 1, tz="Europe/Berlin")

        assert to_datetime(value) is value

    def test_naive_datetime_is_utc(self):
        """Naive datetimes keep their fields and become UTC."""
        result = to_datetime(datetime(2024, 1, 1, 8, 30))

        assert result == pendulum.datetime(2024, 1, 1, 8, 30)
        assert result.timezone_name == "UTC"

    def test_aware_datetime_keeps_offset(self):
        """Aware datetimes keep their instant."""
        result = to_datetime(datetime(2024, 1, 1, 8, 30, tzinfo=timezone.utc))

        assert result == pendulum.datetime(2024, 1, 1, 8, 30)

    def test_plain_date_is_midnight(self):
        """Plain dates become midnight."""
        assert to_datetime(date(2024, 2, 29)) == pendulum.datetime(2024, 2, 29)

    def test_millisecond_timestamp(self):
        """Numbers are milliseconds since the epoch."""
        assert to_datetime(818035920000) == pendulum.datetime(1995, 12, 4, 0, 12)

    def test_string_without_offset_uses_tz(self):
        """Offset-less strings are read in the given timezone."""
        result = to_datetime("2024-01-01T10:00:00", tz="Europe/Berlin")

        assert result == pendulum.datetime(2024, 1, 1, 9, 0)

    def test_day_month_name_string(self):
        """Strings outside ISO 8601 fall back to the lenient parser."""
        assert to_datetime("04 Dec 1995 00:12:00 UTC") == pendulum.datetime(1995, 12, 4, 0, 12)

    @pytest.mark.parametrize("value", ["xyz", "", "P1D", True, None, [2024, 1, 1]])
    def test_invalid_values_raise(self, value):
        """Anything that is not a date raises DateParseError."""
        with pytest.raises(DateParseError):
            to_datetime(value)

    def test_parse_error_hierarchy(self):
        """Parse errors are both application errors and ValueErrors."""
        assert issubclass(DateParseError, DateCalcError)
        assert issubclass(DateParseError, ValueError)


class TestTryDatetime:
    """Tests for try_datetime."""

    def test_valid_value(self):
        """Valid input is converted."""
        assert try_datetime("2024-01-01") == pendulum.datetime(2024, 1, 1)

    def test_invalid_value_is_none(self):
        """Invalid input gives None."""
        assert try_datetime("xyz") is None


class TestParseDayMonthYear:
    """Tests for parse_day_month_year."""

    def test_valid_string(self):
        """DD-MM-YYYY strings become midnight UTC."""
        assert parse_day_month_year("13-09-2024") == pendulum.datetime(2024, 9, 13)

    @pytest.mark.parametrize("value", ["2024-09-13", "31-02-2024", "13/09/2024", 13092024])
    def test_invalid_strings(self, value):
        """Other layouts and impossible dates raise DateParseError."""
        with pytest.raises(DateParseError):
            parse_day_month_year(value)


class TestMonthStart:
    """Tests for month_start."""

    def test_regular_month(self):
        """The first of the month at midnight."""
        assert month_start(2, 2024) == pendulum.datetime(2024, 2, 1)

    def test_rollover(self):
        """Months outside 1-12 move into neighbouring years."""
        assert month_start(13, 2023) == pendulum.datetime(2024, 1, 1)
        assert month_start(0, 2024) == pendulum.datetime(2023, 12, 1)
