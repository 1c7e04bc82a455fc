"""
Domain models for periods and work patterns.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class Period:
    """
    An inclusive date range given by two date-like boundaries.

    The boundaries are kept as supplied; ``start <= end`` is not enforced and
    an inverted period simply contains no dates.
    """
    start: Any
    end: Any

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Period":
        """Build a period from a ``{"start": ..., "end": ...}`` mapping."""
        try:
            return cls(start=data["start"], end=data["end"])
        except KeyError as exc:
            raise ValueError(f"Period mapping is missing the {exc.args[0]!r} key") from exc

    @classmethod
    def coerce(cls, value: Union["Period", Mapping[str, Any]]) -> "Period":
        """Accept either a Period or a mapping with start/end keys."""
        if isinstance(value, cls):
            return value
        return cls.from_mapping(value)

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"


@dataclass(frozen=True)
class WorkPattern:
    """
    A repeating cycle of ``work_days`` working days followed by ``off_days``
    days off.

    Invariant: both counts are non-negative and the cycle is at least one day.
    """
    work_days: int
    off_days: int

    def __post_init__(self):
        if self.work_days < 0 or self.off_days < 0:
            raise ValueError(
                f"Work and off days must be non-negative, got {self.work_days}/{self.off_days}"
            )
        if self.cycle_length == 0:
            raise ValueError("A work pattern needs at least one day per cycle")

    @property
    def cycle_length(self) -> int:
        return self.work_days + self.off_days

    def is_work_offset(self, offset: int) -> bool:
        """Check if the day ``offset`` days into the schedule is a working day."""
        return offset % self.cycle_length < self.work_days

    def __str__(self) -> str:
        return f"{self.work_days} on / {self.off_days} off"
