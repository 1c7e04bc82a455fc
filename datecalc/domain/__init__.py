"""
Domain layer - Pure calendar math without external dependencies.
"""

from .calendar_utils import (
    date_to_timestamp,
    format_date,
    get_count_days_in_month,
    get_count_days_on_period,
    get_count_weekends_in_month,
    get_day_name,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_time,
    get_week_number_by_date,
    get_work_schedule,
    is_date_in_period,
    is_leap_year,
)
from .day_sequence import DaySequence, MonthSequence
from .exceptions import CalendarError, DateCalcError, DateParseError
from .models import Period, WorkPattern
from .parsing import INVALID_DATE, to_datetime, try_datetime
from .work_schedule import WorkScheduleBuilder

__all__ = [
    "date_to_timestamp",
    "format_date",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "get_count_weekends_in_month",
    "get_day_name",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_time",
    "get_week_number_by_date",
    "get_work_schedule",
    "is_date_in_period",
    "is_leap_year",
    "DaySequence",
    "MonthSequence",
    "CalendarError",
    "DateCalcError",
    "DateParseError",
    "Period",
    "WorkPattern",
    "INVALID_DATE",
    "to_datetime",
    "try_datetime",
    "WorkScheduleBuilder",
]
