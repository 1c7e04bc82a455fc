"""
Finite, restartable sequences of calendar days.

The searches in this library (weekends in a month, week numbers, Friday the
13th, work schedules) all walk the calendar one step at a time. Instead of
mutating a cursor in a loop they iterate one of these sequences, which build a
fresh DateTime for every step and can be iterated any number of times.
"""

from typing import Iterator

from pendulum import DateTime


class DaySequence:
    """
    Consecutive days from ``start`` up to and including ``end``.

    Each step keeps the wall-clock time of ``start``. An inverted range is
    empty.
    """

    def __init__(self, start: DateTime, end: DateTime, step: int = 1):
        if step < 1:
            raise ValueError(f"Step must be a positive number of days, got {step}")
        self.start = start
        self.end = end
        self.step = step

    def __iter__(self) -> Iterator[DateTime]:
        offset = 0
        current = self.start
        while current <= self.end:
            yield current
            offset += self.step
            # Always derive from start so DST shifts never accumulate
            current = self.start.add(days=offset)

    def __len__(self) -> int:
        if self.end < self.start:
            return 0
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return (
            f"DaySequence(start={self.start.to_date_string()}, "
            f"end={self.end.to_date_string()}, step={self.step})"
        )


class MonthSequence:
    """
    The same day of the month across ``months`` consecutive months, starting
    with the month of ``start``.
    """

    def __init__(self, start: DateTime, day: int, months: int):
        if not 1 <= day <= 28:
            # Later days do not exist in every month
            raise ValueError(f"Day must be between 1 and 28, got {day}")
        if months < 0:
            raise ValueError(f"Month count must be non-negative, got {months}")
        self.first = start.set(day=day)
        self.day = day
        self.months = months

    def __iter__(self) -> Iterator[DateTime]:
        for offset in range(self.months):
            yield self.first.add(months=offset)

    def __len__(self) -> int:
        return self.months

    def __repr__(self) -> str:
        return (
            f"MonthSequence(first={self.first.to_date_string()}, "
            f"day={self.day}, months={self.months})"
        )
