"""
Error types raised by schedule generation.

Every error derives from ScheduleError, which is a ValueError so callers
that already guard date inputs with ``except ValueError`` keep working.
"""

from datetime import date
from typing import Any, List, Sequence


class ScheduleError(ValueError):
    """Base class for all schedule generation errors."""


class InvalidRangeError(ScheduleError):
    """Start date is after end date."""

    def __init__(self, start: date, end: date) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Invalid date range: start {start} is after end {end}")


class InvalidPatternError(ScheduleError):
    """Recurrence pattern or stub rule is not usable."""


class EmptyScheduleError(ScheduleError):
    """No date definitions were supplied."""

    def __init__(self) -> None:
        super().__init__("At least one date definition is required")


class DuplicateNameError(ScheduleError):
    """Two date definitions share a name."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = sorted(set(names))
        super().__init__(f"Duplicate date definition names: {', '.join(self.names)}")


class UnknownReferenceError(ScheduleError):
    """An anchor references a date definition that is not in the request."""

    def __init__(self, name: str, reference: str) -> None:
        self.name = name
        self.reference = reference
        super().__init__(
            f"Date definition '{name}' is anchored on unknown date '{reference}'"
        )


class CyclicDependencyError(ScheduleError):
    """Anchor references between date definitions form a cycle."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        super().__init__(f"Cyclic date dependency: {' -> '.join(self.cycle)}")


class AmbiguousDayOfMonthError(ScheduleError):
    """A day-of-month policy matched zero or several days in a month."""

    def __init__(self, policy: Any, year: int, month: int, matches: List[date]) -> None:
        self.policy = policy
        self.year = year
        self.month = month
        self.matches = list(matches)
        found = ", ".join(d.isoformat() for d in self.matches) or "none"
        super().__init__(
            f"Day of month {policy} must match exactly one day in "
            f"{year}-{month:02d}; matched: {found}"
        )


class HolidayRuleError(ScheduleError):
    """A business-day search never found a business day."""

    def __init__(self, rule: Any, start: date, max_days: int) -> None:
        self.rule = rule
        self.start = start
        self.max_days = max_days
        super().__init__(
            f"No business day within {max_days} days of {start} under {rule}"
        )
