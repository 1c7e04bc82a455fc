"""
Work/off-day schedule generation.
"""

import logging
from typing import Iterator, List, Mapping, Union

from pendulum import DateTime

from .day_sequence import DaySequence
from .exceptions import DateParseError
from .models import Period, WorkPattern
from .parsing import DAY_MONTH_YEAR, parse_day_month_year

logger = logging.getLogger(__name__)


class WorkScheduleBuilder:
    """
    Applies a repeating work/off pattern to a date range.

    Algorithm:
    1. Walk every day of the inclusive range
    2. Number the days from 0 at the start of the range
    3. Keep a day when its number falls in the work part of the cycle
    """

    def __init__(self, pattern: WorkPattern):
        self.pattern = pattern

    def iter_work_days(self, start: DateTime, end: DateTime) -> Iterator[DateTime]:
        """Yield the working days between ``start`` and ``end`` inclusive."""
        for offset, day in enumerate(DaySequence(start, end)):
            if self.pattern.is_work_offset(offset):
                yield day

    def build(self, period: Union[Period, Mapping[str, str]]) -> List[str]:
        """
        Build the schedule for a period given in ``DD-MM-YYYY`` format.

        Args:
            period: Period (or start/end mapping) with DD-MM-YYYY boundaries

        Returns:
            Working days formatted as DD-MM-YYYY, in order. Empty when a
            boundary cannot be parsed or the period is inverted.
        """
        period = Period.coerce(period)

        try:
            start = parse_day_month_year(period.start)
            end = parse_day_month_year(period.end)
        except DateParseError as exc:
            logger.debug("Cannot build a schedule for %s: %s", period, exc)
            return []

        return [day.format(DAY_MONTH_YEAR) for day in self.iter_work_days(start, end)]
