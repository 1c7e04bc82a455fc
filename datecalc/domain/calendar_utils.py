"""
Calendar calculation utilities.

Every function here is a pure transformation of date-like input: nothing is
mutated, and advancing a date always builds a new value. Input that cannot be
read as a date does not raise; it yields a degenerate result instead
(``math.nan`` for numbers, ``INVALID_DATE`` or ``None`` for strings, ``None``
for dates, ``False`` for checks and an empty list for schedules).
"""

import math
from typing import Any, Collection, List, Literal, Mapping, Optional, Union

import pendulum
from pendulum import DateTime

from .day_sequence import DaySequence, MonthSequence
from .exceptions import CalendarError
from .models import Period, WorkPattern
from .parsing import INVALID_DATE, DateLike, month_start, try_datetime
from .work_schedule import WorkScheduleBuilder

SECONDS_PER_DAY = 86400

# A Friday the 13th happens at least once in any 14 consecutive months
FRIDAY_13TH_SEARCH_MONTHS = 15

WeekdaySpelling = Literal["legacy", "standard"]
QuarterScheme = Literal["legacy", "standard"]

WEEKDAY_NAMES = {
    pendulum.MONDAY: "Monday",
    pendulum.TUESDAY: "Tuesday",
    pendulum.WEDNESDAY: "Wednesday",
    pendulum.THURSDAY: "Thursday",
    pendulum.FRIDAY: "Friday",
    pendulum.SATURDAY: "Saturday",
    pendulum.SUNDAY: "Sunday",
}

# Historical day-name table, typo included
LEGACY_WEEKDAY_NAMES = {**WEEKDAY_NAMES, pendulum.WEDNESDAY: "Wensday"}

DEFAULT_WEEKEND_DAYS = (pendulum.SATURDAY, pendulum.SUNDAY)

# Last month (1-12) of each quarter in the legacy 4/2/2/4 split
LEGACY_QUARTER_ENDS = ((4, 1), (6, 2), (8, 3), (12, 4))

PeriodLike = Union[Period, Mapping[str, Any]]


def _utc_midnight(value: DateLike) -> Optional[DateTime]:
    dt = try_datetime(value)
    if dt is None:
        return None
    return dt.in_timezone("UTC").start_of("day")


def date_to_timestamp(date: DateLike) -> Union[int, float]:
    """
    Milliseconds elapsed since 00:00:00 UTC on 1 January 1970.

    Example:
        '01 Jan 1970 00:00:00 UTC' -> 0
        '04 Dec 1995 00:12:00 UTC' -> 818035920000
    """
    dt = try_datetime(date)
    if dt is None:
        return math.nan
    return dt.int_timestamp * 1000 + dt.microsecond // 1000


def get_time(date: DateLike) -> str:
    """Wall-clock time of ``date`` as zero-padded ``hh:mm:ss`` on a 24-hour clock."""
    dt = try_datetime(date)
    if dt is None:
        return INVALID_DATE
    return dt.format("HH:mm:ss")


def get_day_name(date: DateLike, *, spelling: WeekdaySpelling = "legacy") -> Optional[str]:
    """
    English name of the weekday of ``date``.

    The legacy spelling keeps the historical "Wensday" for Wednesday;
    pass ``spelling="standard"`` for the correct name.
    """
    dt = try_datetime(date)
    if dt is None:
        return None
    names = LEGACY_WEEKDAY_NAMES if spelling == "legacy" else WEEKDAY_NAMES
    return names[dt.day_of_week]


def get_next_friday(date: DateLike) -> Optional[DateTime]:
    """
    The first Friday strictly after ``date``, at the same time of day.

    A Friday always moves a full week ahead.
    """
    dt = try_datetime(date)
    if dt is None:
        return None
    days_ahead = (pendulum.FRIDAY - dt.day_of_week) % 7 or 7
    return dt.add(days=days_ahead)


def get_count_days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` (1-12, rolling over outside that range) of ``year``."""
    # The day before the first of the following month is the last of this one
    return month_start(month + 1, year).subtract(days=1).day


def get_count_days_on_period(date_start: DateLike, date_end: DateLike) -> Union[int, float]:
    """
    Days between two dates, counting both ends.

    Both dates are truncated to midnight UTC first, so the time of day never
    matters. Equal dates give 1; an inverted period gives 0 or less.
    """
    start = _utc_midnight(date_start)
    end = _utc_midnight(date_end)
    if start is None or end is None:
        return math.nan
    return int((end - start).total_seconds() // SECONDS_PER_DAY) + 1


def is_date_in_period(date: DateLike, period: PeriodLike) -> bool:
    """Check if ``date`` falls within ``period``, both boundaries included, by UTC day."""
    period = Period.coerce(period)
    day = _utc_midnight(date)
    start = _utc_midnight(period.start)
    end = _utc_midnight(period.end)
    if day is None or start is None or end is None:
        return False
    return start <= day <= end


def format_date(date: DateLike) -> str:
    """
    Format the UTC fields of ``date`` as ``M/D/YYYY, h:mm:ss AM``.

    Example:
        '2024-02-01T15:00:00.000Z' -> '2/1/2024, 3:00:00 PM'
        '1999-01-05T02:20:00.000Z' -> '1/5/1999, 2:20:00 AM'
    """
    dt = try_datetime(date)
    if dt is None:
        return INVALID_DATE
    return dt.in_timezone("UTC").format("M/D/YYYY, h:mm:ss A", locale="en")


def get_count_weekends_in_month(
    month: int,
    year: int,
    *,
    weekend_days: Collection[int] = DEFAULT_WEEKEND_DAYS,
) -> int:
    """
    Number of weekend days in ``month`` of ``year``.

    Args:
        month: Month number, 1 for January
        year: Four-digit year
        weekend_days: Weekdays counted as weekend (0=Monday, 6=Sunday)
    """
    first = month_start(month, year)
    return sum(
        1 for day in DaySequence(first, first.end_of("month"))
        if day.day_of_week in weekend_days
    )


def get_week_number_by_date(date: DateLike) -> Union[int, float]:
    """
    Week of the year for ``date``, starting at 1 on January 1st.

    The count goes up by one for every Sunday that has started before
    ``date``. This is not ISO 8601 week numbering.
    """
    dt = try_datetime(date)
    if dt is None:
        return math.nan
    sundays = sum(
        1 for day in DaySequence(dt.start_of("year"), dt)
        if day < dt and day.day_of_week == pendulum.SUNDAY
    )
    return 1 + sundays


def get_next_friday_the_13th(date: DateLike) -> Optional[DateTime]:
    """
    The first Friday the 13th from the month of ``date`` onwards.

    The 13th of the starting month counts even when it lies before ``date``
    within that month. The time of day of ``date`` is kept.
    """
    dt = try_datetime(date)
    if dt is None:
        return None

    for candidate in MonthSequence(dt, day=13, months=FRIDAY_13TH_SEARCH_MONTHS):
        if candidate.day_of_week == pendulum.FRIDAY:
            return candidate

    raise CalendarError(
        f"No Friday the 13th within {FRIDAY_13TH_SEARCH_MONTHS} months of {dt.to_date_string()}"
    )


def get_quarter(date: DateLike, *, scheme: QuarterScheme = "legacy") -> Union[int, float]:
    """
    Quarter of the year (1-4) for ``date``.

    The legacy scheme splits the year into 4/2/2/4 months
    (Jan-Apr, May-Jun, Jul-Aug, Sep-Dec). ``scheme="standard"`` uses
    three-month calendar quarters.
    """
    dt = try_datetime(date)
    if dt is None:
        return math.nan

    if scheme == "standard":
        return dt.quarter

    for last_month, quarter in LEGACY_QUARTER_ENDS:
        if dt.month <= last_month:
            return quarter
    return 4


def get_work_schedule(period: PeriodLike, count_work_days: int, count_off_days: int) -> List[str]:
    """
    Working days of a repeating work/off pattern within ``period``.

    Args:
        period: Start and end dates in DD-MM-YYYY format, both inclusive
        count_work_days: Consecutive working days per cycle
        count_off_days: Consecutive days off per cycle

    Returns:
        Working days as DD-MM-YYYY strings

    Raises:
        ValueError: If the pattern counts are negative or both zero

    Example:
        {'start': '01-01-2024', 'end': '15-01-2024'}, 1, 3
        -> ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    pattern = WorkPattern(work_days=count_work_days, off_days=count_off_days)
    return WorkScheduleBuilder(pattern).build(period)


def is_leap_year(date: DateLike) -> bool:
    """Check if the year of ``date`` is a Gregorian leap year."""
    dt = try_datetime(date)
    if dt is None:
        return False
    year = dt.year
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
