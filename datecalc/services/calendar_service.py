"""
Application service applying configuration to the calendar operations.

The domain functions take their presentation choices (weekday spelling,
quarter scheme, weekend days, schedule pattern) as explicit arguments. The
service reads those from an ``AppConfig`` so the CLI does not have to thread
them through every call.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Union

import pendulum
from pendulum import DateTime

from ..config import AppConfig
from ..domain import calendar_utils
from ..domain.models import Period
from ..domain.parsing import DateLike, to_datetime


class CalendarService:
    """Configured facade over the calendar utilities."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self._config = config or AppConfig()

    @property
    def config(self) -> AppConfig:
        return self._config

    def now(self) -> DateTime:
        """Current time in the configured timezone."""
        return pendulum.now(self._config.timezone)

    def parse(self, value: Optional[DateLike]) -> DateTime:
        """
        Strictly parse a date-like value in the configured timezone.

        None means "now". Raises DateParseError for anything unreadable.
        """
        if value is None:
            return self.now()
        return to_datetime(value, tz=self._config.timezone)

    def day_name(self, value: DateLike) -> Optional[str]:
        return calendar_utils.get_day_name(
            value, spelling=self._config.display.weekday_spelling
        )

    def quarter(self, value: DateLike) -> Union[int, float]:
        return calendar_utils.get_quarter(
            value, scheme=self._config.display.quarter_scheme
        )

    def weekends_in_month(self, month: int, year: int) -> int:
        return calendar_utils.get_count_weekends_in_month(
            month, year, weekend_days=self._config.weekend_days
        )

    def work_schedule(
        self,
        period: Union[Period, Mapping[str, str]],
        work_days: Optional[int] = None,
        off_days: Optional[int] = None,
    ) -> List[str]:
        """Build a schedule, filling missing counts from the configured defaults."""
        defaults = self._config.schedule
        return calendar_utils.get_work_schedule(
            period,
            defaults.work_days if work_days is None else work_days,
            defaults.off_days if off_days is None else off_days,
        )
