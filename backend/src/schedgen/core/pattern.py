"""
Recurrence patterns and boundary date generation.

A pattern steps from a seed date by a fixed interval of days, weeks, months
or years. Month and year based patterns can pin every generated date to a
day-of-month policy (e.g. last day of month) so that month-end anchoring
survives months of different lengths.
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import List, Optional

from schedgen.core.dates import DayOfMonth, add_months, with_day_of_month
from schedgen.core.errors import InvalidPatternError, InvalidRangeError

logger = logging.getLogger(__name__)


class PatternUnit(str, Enum):
    """Unit of a recurrence interval."""

    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


@dataclass(frozen=True)
class Pattern:
    """
    Recurrence description.

    Attributes:
        interval: Number of units between two boundaries (must be positive)
        unit: Day, week, month or year
        day_of_month: Optional day-of-month policy (month/year units only)
    """

    interval: int
    unit: PatternUnit = PatternUnit.MONTH
    day_of_month: Optional[DayOfMonth] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit", PatternUnit(self.unit))
        if self.interval <= 0:
            raise InvalidPatternError(
                f"Pattern interval must be positive, got {self.interval}"
            )
        if self.day_of_month is not None and self.unit in (PatternUnit.DAY, PatternUnit.WEEK):
            raise InvalidPatternError(
                f"Day of month {self.day_of_month} cannot be used with a "
                f"{self.unit.value.lower()} pattern"
            )

    @classmethod
    def daily(cls, interval: int = 1) -> "Pattern":
        return cls(interval, PatternUnit.DAY)

    @classmethod
    def weekly(cls, interval: int = 1) -> "Pattern":
        return cls(interval, PatternUnit.WEEK)

    @classmethod
    def monthly(cls, interval: int = 1, day_of_month: Optional[DayOfMonth] = None) -> "Pattern":
        return cls(interval, PatternUnit.MONTH, day_of_month)

    @classmethod
    def yearly(cls, interval: int = 1, day_of_month: Optional[DayOfMonth] = None) -> "Pattern":
        return cls(interval, PatternUnit.YEAR, day_of_month)

    def offset(self, seed: date, k: int) -> date:
        """
        The k-th date from ``seed`` (negative k steps backwards).

        Offsets are measured from the seed rather than from the previous
        date, so a 31st seed does not drift to the 28th after February.
        """
        if self.unit == PatternUnit.DAY:
            return seed + timedelta(days=k * self.interval)
        if self.unit == PatternUnit.WEEK:
            return seed + timedelta(weeks=k * self.interval)

        months = k * self.interval * (12 if self.unit == PatternUnit.YEAR else 1)
        shifted = add_months(seed, months)
        if self.day_of_month is not None:
            return with_day_of_month(shifted, self.day_of_month)
        return shifted

    def __str__(self) -> str:
        text = f"every {self.interval} {self.unit.value.lower()}(s)"
        if self.day_of_month is not None:
            text += f" on {self.day_of_month}"
        return text


@dataclass(frozen=True)
class Boundaries:
    """
    Generated boundary dates.

    Attributes:
        dates: Strictly increasing boundaries; the first is the day before the
            range start, the last is the range end
        stub: True when the boundary at the open end was forced onto the range
            edge instead of being produced by the pattern
        backward: True when generated from the end towards the start
    """

    dates: List[date]
    stub: bool
    backward: bool = False


def generate_boundaries(
    start: date,
    end: date,
    pattern: Pattern,
    backward: bool = False,
) -> Boundaries:
    """
    Generate unadjusted period boundaries covering ``[start, end]``.

    Forward generation seeds at the day before ``start`` and steps until it
    reaches or passes ``end``; the last boundary is forced to ``end``.
    Backward generation seeds at ``end`` and mirrors this towards ``start``.

    Args:
        start: First day covered by the schedule
        end: Last day covered by the schedule
        pattern: Recurrence pattern
        backward: Roll backward from ``end`` so any stub falls at the start

    Returns:
        Boundaries with stub flag

    Raises:
        InvalidRangeError: If start is after end
        AmbiguousDayOfMonthError: If the pattern's day-of-month policy does not
            resolve to exactly one day in some month
    """
    if start > end:
        raise InvalidRangeError(start, end)

    floor = start - timedelta(days=1)

    if backward:
        dates = [end]
        k = 1
        while True:
            candidate = pattern.offset(end, -k)
            if candidate <= floor:
                dates.append(floor)
                stub = candidate != floor
                break
            dates.append(candidate)
            k += 1
        dates.reverse()
    else:
        dates = [floor]
        k = 1
        while True:
            candidate = pattern.offset(floor, k)
            if candidate >= end:
                dates.append(end)
                stub = candidate != end
                break
            dates.append(candidate)
            k += 1

    logger.debug(
        "Generated %d boundaries for %s..%s (%s, %s, stub=%s)",
        len(dates), start, end, pattern, "backward" if backward else "forward", stub,
    )
    return Boundaries(dates=dates, stub=stub, backward=backward)
