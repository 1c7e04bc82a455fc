"""
Coercion of date-like values into pendulum DateTime objects.

Every public calendar operation accepts the same loose set of inputs: pendulum
or stdlib datetimes, plain dates, millisecond timestamps and strings. This
module is the single place where those are turned into aware ``DateTime``
values.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Union

import pendulum
from pendulum import DateTime

from .exceptions import DateParseError

logger = logging.getLogger(__name__)

DateLike = Union[DateTime, datetime, date, int, float, str]

INVALID_DATE = "Invalid Date"
DAY_MONTH_YEAR = "DD-MM-YYYY"


def to_datetime(value: DateLike, tz: str = "UTC") -> DateTime:
    """
    Coerce a date-like value into a pendulum DateTime.

    Args:
        value: DateTime, datetime, date, millisecond timestamp or string
        tz: Timezone applied to naive values and offset-less strings

    Returns:
        Aware DateTime

    Raises:
        DateParseError: If the value cannot be interpreted as a date
    """
    if isinstance(value, DateTime):
        return value

    if isinstance(value, datetime):
        return pendulum.instance(value, tz=tz)

    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day, tz=tz)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return pendulum.from_timestamp(value / 1000, tz=tz)
        except (ValueError, OverflowError, OSError) as exc:
            raise DateParseError(f"Invalid timestamp: {value!r}") from exc

    if isinstance(value, str):
        try:
            parsed = pendulum.parse(value.strip(), strict=False, tz=tz)
        except (ValueError, OverflowError) as exc:
            raise DateParseError(f"Invalid date string: {value!r}") from exc

        # Durations, intervals and bare times are valid ISO 8601 but not dates
        if not isinstance(parsed, DateTime):
            raise DateParseError(f"Not a date and time: {value!r}")
        return parsed

    raise DateParseError(f"Unsupported date value: {value!r}")


def try_datetime(value: DateLike, tz: str = "UTC") -> Optional[DateTime]:
    """Like ``to_datetime`` but returns None for values that cannot be parsed."""
    try:
        return to_datetime(value, tz=tz)
    except DateParseError as exc:
        logger.debug("Treating %r as an invalid date: %s", value, exc)
        return None


def parse_day_month_year(text: str, tz: str = "UTC") -> DateTime:
    """Parse a strict ``DD-MM-YYYY`` string to midnight of that day."""
    if not isinstance(text, str):
        raise DateParseError(f"Expected a {DAY_MONTH_YEAR} string, got {text!r}")

    try:
        return pendulum.from_format(text.strip(), DAY_MONTH_YEAR, tz=tz)
    except ValueError as exc:
        raise DateParseError(f"Expected {DAY_MONTH_YEAR}, got {text!r}") from exc


def month_start(month: int, year: int, tz: str = "UTC") -> DateTime:
    """
    First day of ``month`` in ``year``.

    Month numbers outside 1-12 roll over into neighbouring years, so month 13
    is January of the following year and month 0 is December of the previous.
    """
    return pendulum.datetime(year, 1, 1, tz=tz).add(months=month - 1)
