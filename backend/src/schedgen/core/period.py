"""
Schedule periods.

A period is an inclusive date range. Consecutive periods built from a list of
boundary dates touch without overlapping: each period starts the day after
the previous boundary and ends on the next one.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Sequence

from schedgen.core.errors import InvalidRangeError, ScheduleError


@dataclass(frozen=True, order=True)
class Period:
    """
    Inclusive date range ``[start, end]``.

    Attributes:
        start: First day of the period
        end: Last day of the period
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidRangeError(self.start, self.end)

    @property
    def number_of_days(self) -> int:
        """Number of calendar days in the period, both ends included."""
        return (self.end - self.start).days + 1

    def merge(self, other: "Period") -> "Period":
        """Join with an adjacent period (either side)."""
        if self.end + timedelta(days=1) == other.start:
            return Period(self.start, other.end)
        if other.end + timedelta(days=1) == self.start:
            return Period(other.start, self.end)
        raise ScheduleError(f"Periods {self} and {other} are not adjacent")

    def __contains__(self, d: date) -> bool:
        return self.start <= d <= self.end

    def __str__(self) -> str:
        return f"[{self.start.isoformat()}, {self.end.isoformat()}]"


def periods_from_boundaries(boundaries: Sequence[date]) -> List[Period]:
    """
    Build adjacent periods from sorted boundary dates.

    Args:
        boundaries: Strictly increasing dates; the first one is the day
            before the first period starts

    Returns:
        ``len(boundaries) - 1`` periods, empty for fewer than two dates

    Examples:
        >>> periods_from_boundaries([date(2014, 4, 10), date(2014, 4, 20)])
        [Period(start=datetime.date(2014, 4, 11), end=datetime.date(2014, 4, 20))]
    """
    return [
        Period(prev + timedelta(days=1), curr)
        for prev, curr in zip(boundaries, boundaries[1:])
    ]
