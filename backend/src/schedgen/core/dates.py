"""
Calendar date helpers on top of ``datetime.date``.

Month arithmetic with month-end clamping, month-end queries, weekdays and
day-of-month policies (last day, 20th day, 3rd Friday, last Friday).
"""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import List, Union

from schedgen.core.errors import AmbiguousDayOfMonthError, InvalidPatternError


class Weekday(str, Enum):
    """Day of week, ordered as ``date.weekday()``."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @property
    def number(self) -> int:
        """Position matching ``date.weekday()`` (Monday=0)."""
        return _WEEKDAYS.index(self)

    @classmethod
    def of(cls, d: date) -> "Weekday":
        """Weekday of a date."""
        return _WEEKDAYS[d.weekday()]


_WEEKDAYS = list(Weekday)


def max_day_of_month(year: int, month: int) -> int:
    """Number of days in a month, leap Februaries included."""
    return calendar.monthrange(year, month)[1]


def add_months(d: date, months: int) -> date:
    """Add months to a date, clamping the day to the target month's end."""
    year = d.year + (d.month + months - 1) // 12
    month = (d.month + months - 1) % 12 + 1
    day = min(d.day, max_day_of_month(year, month))
    return date(year, month, day)


def add_years(d: date, years: int) -> date:
    """Add years to a date; 29 February maps to 28 February in common years."""
    return add_months(d, 12 * years)


def first_day_of_month(d: date) -> date:
    return d.replace(day=1)


def last_day_of_month(d: date) -> date:
    return d.replace(day=max_day_of_month(d.year, d.month))


def is_last_day_of_month(d: date) -> bool:
    return d.day == max_day_of_month(d.year, d.month)


def days_of_month(d: date) -> List[date]:
    """Every day of the month containing ``d``."""
    first = first_day_of_month(d)
    return [first + timedelta(days=i) for i in range(max_day_of_month(d.year, d.month))]


# ============================================================================
# Day-of-month policies
# ============================================================================

@dataclass(frozen=True)
class LastDayOfMonth:
    """Last calendar day of the month."""

    def is_valid(self, d: date) -> bool:
        return is_last_day_of_month(d)

    def __str__(self) -> str:
        return "last day"


@dataclass(frozen=True)
class FirstDayOfMonth:
    """First calendar day of the month."""

    def is_valid(self, d: date) -> bool:
        return d.day == 1

    def __str__(self) -> str:
        return "first day"


@dataclass(frozen=True)
class NthDayOfMonth:
    """Fixed day number, e.g. the 20th. Months without that day do not match."""

    n: int

    def __post_init__(self) -> None:
        if not 1 <= self.n <= 31:
            raise InvalidPatternError(f"Day of month must be in [1, 31], got {self.n}")

    def is_valid(self, d: date) -> bool:
        return d.day == self.n

    def __str__(self) -> str:
        return f"day {self.n}"


@dataclass(frozen=True)
class NthWeekdayOfMonth:
    """n-th occurrence of a weekday in the month, e.g. 3rd Friday."""

    n: int
    weekday: Weekday

    def __post_init__(self) -> None:
        if not 1 <= self.n <= 5:
            raise InvalidPatternError(f"Weekday ordinal must be in [1, 5], got {self.n}")
        object.__setattr__(self, "weekday", Weekday(self.weekday))

    def is_valid(self, d: date) -> bool:
        return Weekday.of(d) == self.weekday and (d.day - 1) // 7 + 1 == self.n

    def __str__(self) -> str:
        return f"{self.n} {self.weekday.value.title()}"


@dataclass(frozen=True)
class LastWeekdayOfMonth:
    """Last occurrence of a weekday in the month, e.g. last Friday."""

    weekday: Weekday

    def __post_init__(self) -> None:
        object.__setattr__(self, "weekday", Weekday(self.weekday))

    def is_valid(self, d: date) -> bool:
        return (
            Weekday.of(d) == self.weekday
            and d.day + 7 > max_day_of_month(d.year, d.month)
        )

    def __str__(self) -> str:
        return f"last {self.weekday.value.title()}"


DayOfMonth = Union[
    LastDayOfMonth,
    FirstDayOfMonth,
    NthDayOfMonth,
    NthWeekdayOfMonth,
    LastWeekdayOfMonth,
]


def with_day_of_month(d: date, dom: DayOfMonth) -> date:
    """
    Find the day of ``d``'s month matching a day-of-month policy.

    Args:
        d: Any date in the target month
        dom: Day-of-month policy

    Returns:
        The single matching date

    Raises:
        AmbiguousDayOfMonthError: If zero or several days match
    """
    matched = [x for x in days_of_month(d) if dom.is_valid(x)]
    if len(matched) != 1:
        raise AmbiguousDayOfMonthError(dom, d.year, d.month, matched)
    return matched[0]


def next_or_same(d: date, dom: DayOfMonth) -> date:
    """First date on or after ``d`` matching the policy (may be in a later month)."""
    current = d
    while not dom.is_valid(current):
        current += timedelta(days=1)
    return current


def previous_or_same(d: date, dom: DayOfMonth) -> date:
    """Last date on or before ``d`` matching the policy (may be in an earlier month)."""
    current = d
    while not dom.is_valid(current):
        current -= timedelta(days=1)
    return current
