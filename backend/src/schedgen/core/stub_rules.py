"""
Stub handling at the edges of a schedule.

When the date range is not a whole number of pattern intervals, one edge
period is a stub. A stub rule decides whether that stub stays a period of its
own or is merged into its neighbour:

- LongStart(N) / LongEnd(N): merge when the merged period is at most N days
- ShortStart(N) / ShortEnd(N): merge when the stub is shorter than N days

Start rules generate boundaries backward from the end date so the stub falls
at the start; end rules (and no rule) generate forward.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union

from schedgen.core.errors import InvalidPatternError
from schedgen.core.pattern import Pattern, generate_boundaries
from schedgen.core.period import Period, periods_from_boundaries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _StubRule:
    days: int

    def __post_init__(self) -> None:
        if self.days <= 0:
            raise InvalidPatternError(
                f"{type(self).__name__} threshold must be positive, got {self.days}"
            )

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.days})"


@dataclass(frozen=True)
class LongStart(_StubRule):
    """Merge the first two periods if the result is at most ``days`` long."""


@dataclass(frozen=True)
class ShortStart(_StubRule):
    """Merge a first-period stub shorter than ``days`` into the second period."""


@dataclass(frozen=True)
class LongEnd(_StubRule):
    """Merge the last two periods if the result is at most ``days`` long."""


@dataclass(frozen=True)
class ShortEnd(_StubRule):
    """Merge a last-period stub shorter than ``days`` into the previous period."""


StubRule = Union[LongStart, ShortStart, LongEnd, ShortEnd]


def _should_merge(rule: StubRule, stub: Period, neighbour: Period) -> bool:
    if isinstance(rule, (LongStart, LongEnd)):
        return stub.number_of_days + neighbour.number_of_days <= rule.days
    if isinstance(rule, (ShortStart, ShortEnd)):
        return stub.number_of_days < rule.days
    raise InvalidPatternError(f"Unknown stub rule: {rule!r}")


@dataclass(frozen=True)
class StubRulePeriodBuilder:
    """
    Builds final schedule periods from a pattern and an optional stub rule.

    Attributes:
        rule: Stub rule, or None to keep every generated interval as a period
    """

    rule: Optional[StubRule] = None

    def __post_init__(self) -> None:
        if self.rule is not None and not isinstance(self.rule, (LongStart, ShortStart, LongEnd, ShortEnd)):
            raise InvalidPatternError(f"Unknown stub rule: {self.rule!r}")

    @property
    def backward(self) -> bool:
        return isinstance(self.rule, (LongStart, ShortStart))

    def build(self, start: date, end: date, pattern: Pattern) -> List[Period]:
        """
        Generate periods exactly covering ``[start, end]``.

        Args:
            start: First day of the schedule
            end: Last day of the schedule
            pattern: Recurrence pattern

        Returns:
            Contiguous, chronologically ordered periods
        """
        boundaries = generate_boundaries(start, end, pattern, backward=self.backward)
        periods = periods_from_boundaries(boundaries.dates)

        if self.rule is None or not boundaries.stub or len(periods) < 2:
            return periods

        if self.backward:
            stub, neighbour = periods[0], periods[1]
            if _should_merge(self.rule, stub, neighbour):
                logger.debug("%s merges start stub %s into %s", self.rule, stub, neighbour)
                return [stub.merge(neighbour)] + periods[2:]
        else:
            stub, neighbour = periods[-1], periods[-2]
            if _should_merge(self.rule, stub, neighbour):
                logger.debug("%s merges end stub %s into %s", self.rule, stub, neighbour)
                return periods[:-2] + [neighbour.merge(stub)]

        return periods
