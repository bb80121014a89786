"""
Holiday rules and business day helpers.

A holiday rule answers a single question: is this date a holiday? Rules are
immutable and may be combined; a composite rule flags a date when any of its
constituents does.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import FrozenSet, Iterable, Tuple, Union

from schedgen.core.dates import Weekday
from schedgen.core.errors import HolidayRuleError

# Upper bound on a single business-day search before giving up
MAX_ADJUSTMENT_DAYS = 366


@dataclass(frozen=True)
class NoHoliday:
    """Every day is a business day."""

    def is_holiday(self, d: date) -> bool:
        return False

    def __str__(self) -> str:
        return "no holidays"


@dataclass(frozen=True)
class Weekends:
    """Saturdays and Sundays are holidays."""

    def is_holiday(self, d: date) -> bool:
        return d.weekday() >= 5

    def __str__(self) -> str:
        return "weekends"


@dataclass(frozen=True)
class WeekdayHolidays:
    """Given weekdays are holidays (e.g. Friday/Saturday weekends)."""

    weekdays: FrozenSet[Weekday]

    def __post_init__(self) -> None:
        object.__setattr__(self, "weekdays", frozenset(Weekday(w) for w in self.weekdays))

    def is_holiday(self, d: date) -> bool:
        return Weekday.of(d) in self.weekdays

    def __str__(self) -> str:
        names = sorted(w.value.title() for w in self.weekdays)
        return f"weekdays({', '.join(names)})"


@dataclass(frozen=True)
class HolidayDates:
    """An explicit set of holiday dates, e.g. loaded from an exchange calendar."""

    dates: FrozenSet[date]
    name: str = "holidays"

    def __post_init__(self) -> None:
        object.__setattr__(self, "dates", frozenset(self.dates))

    def is_holiday(self, d: date) -> bool:
        return d in self.dates

    def __str__(self) -> str:
        return f"{self.name}({len(self.dates)} dates)"


@dataclass(frozen=True)
class CompositeHolidayRule:
    """Union of holiday rules."""

    rules: Tuple["HolidayRule", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))

    def is_holiday(self, d: date) -> bool:
        return any(rule.is_holiday(d) for rule in self.rules)

    def __str__(self) -> str:
        return " | ".join(str(rule) for rule in self.rules) or "no holidays"


HolidayRule = Union[NoHoliday, Weekends, WeekdayHolidays, HolidayDates, CompositeHolidayRule]

NO_HOLIDAY = NoHoliday()
WEEKENDS = Weekends()


def union(*rules: HolidayRule) -> HolidayRule:
    """
    Combine holiday rules, flattening nested composites.

    Returns the rule itself when only one is given.
    """
    flat = []
    for rule in rules:
        if isinstance(rule, CompositeHolidayRule):
            flat.extend(rule.rules)
        else:
            flat.append(rule)
    if len(flat) == 1:
        return flat[0]
    return CompositeHolidayRule(tuple(flat))


def holiday_dates(dates: Iterable[date], name: str = "holidays") -> HolidayDates:
    return HolidayDates(frozenset(dates), name)


# ============================================================================
# Business day helpers
# ============================================================================

def is_business_day(d: date, rule: HolidayRule) -> bool:
    """Check if a date is a business day under a holiday rule."""
    return not rule.is_holiday(d)


def _step_to_business_day(d: date, rule: HolidayRule, step: int) -> date:
    current = d
    for _ in range(MAX_ADJUSTMENT_DAYS):
        if not rule.is_holiday(current):
            return current
        current += timedelta(days=step)
    raise HolidayRuleError(rule, d, MAX_ADJUSTMENT_DAYS)


def next_business_day(d: date, rule: HolidayRule) -> date:
    """Get the next business day on or after the given date."""
    return _step_to_business_day(d, rule, 1)


def previous_business_day(d: date, rule: HolidayRule) -> date:
    """Get the previous business day on or before the given date."""
    return _step_to_business_day(d, rule, -1)


def add_business_days(d: date, days: int, rule: HolidayRule) -> date:
    """
    Move a date by a number of business days.

    The start date itself is not counted, so adding zero returns ``d``
    even when ``d`` is a holiday.
    """
    if days == 0:
        return d

    step = 1 if days > 0 else -1
    current = d
    for _ in range(abs(days)):
        current = _step_to_business_day(current + timedelta(days=step), rule, step)
    return current


def business_days_between(start: date, end: date, rule: HolidayRule) -> int:
    """Count business days between two dates (exclusive of start, inclusive of end)."""
    if end <= start:
        return 0

    count = 0
    current = start + timedelta(days=1)
    while current <= end:
        if is_business_day(current, rule):
            count += 1
        current += timedelta(days=1)

    return count
