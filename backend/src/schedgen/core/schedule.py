"""
Schedule generation.

Builds periods from a date range and a recurrence pattern, then evaluates
every date definition in every period to produce named date series
(coupon dates, settlement dates, fixing dates, ...).
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from schedgen.core.anchors import resolve_anchor
from schedgen.core.date_def import DateDef, resolve_order
from schedgen.core.day_count import DayCountConvention, period_year_fraction
from schedgen.core.errors import InvalidRangeError
from schedgen.core.pattern import Pattern
from schedgen.core.period import Period
from schedgen.core.stub_rules import StubRule, StubRulePeriodBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleResult(Mapping):
    """
    Generated schedule.

    Behaves as a read-only mapping from date definition name to its dates,
    one per period in chronological order. Names keep declaration order.

    Attributes:
        periods: Final periods of the schedule
        dates: Date series by name
    """

    periods: Tuple[Period, ...]
    dates: Dict[str, Tuple[date, ...]] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Tuple[date, ...]:
        return self.dates[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.dates)

    def __len__(self) -> int:
        return len(self.dates)

    @property
    def names(self) -> List[str]:
        """Date definition names in declaration order."""
        return list(self.dates)

    @property
    def num_periods(self) -> int:
        return len(self.periods)

    def year_fractions(self, convention: DayCountConvention) -> List[float]:
        """Accrual fraction of each period."""
        return [period_year_fraction(p, convention) for p in self.periods]

    def rows(self) -> List[Dict[str, date]]:
        """One row per period: period bounds followed by each named date."""
        rows = []
        for i, period in enumerate(self.periods):
            row = {"period_start": period.start, "period_end": period.end}
            for name, series in self.dates.items():
                row[name] = series[i]
            rows.append(row)
        return rows

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "periods": [
                {"start": p.start.isoformat(), "end": p.end.isoformat()}
                for p in self.periods
            ],
            "dates": {
                name: [d.isoformat() for d in series]
                for name, series in self.dates.items()
            },
        }


class ScheduleEngine:
    """
    Schedule generator with a fixed stub policy.

    Example:
        >>> engine = ScheduleEngine(stub_rule=LongEnd(270))
        >>> result = engine.schedule(start, end, Pattern.monthly(6), [coupon])
        >>> result["CouponDate"]
    """

    def __init__(self, stub_rule: Optional[StubRule] = None) -> None:
        self.period_builder = StubRulePeriodBuilder(stub_rule)

    @property
    def stub_rule(self) -> Optional[StubRule]:
        return self.period_builder.rule

    def build_periods(self, start: date, end: date, pattern: Pattern) -> List[Period]:
        if start > end:
            raise InvalidRangeError(start, end)
        return self.period_builder.build(start, end, pattern)

    def schedule(
        self,
        start: date,
        end: date,
        pattern: Pattern,
        date_defs: Sequence[DateDef],
    ) -> ScheduleResult:
        """
        Generate a schedule.

        Args:
            start: First day of the schedule
            end: Last day of the schedule
            pattern: Recurrence pattern for period boundaries
            date_defs: Date definitions to evaluate in every period

        Returns:
            ScheduleResult with one date per period for each definition

        Raises:
            ScheduleError: Any of its subclasses for invalid input; no partial
                result is returned
        """
        if start > end:
            raise InvalidRangeError(start, end)

        # Dependency problems surface before any date arithmetic
        order = resolve_order(date_defs)
        periods = self.build_periods(start, end, pattern)

        logger.debug(
            "Scheduling %s..%s %s: %d periods, evaluation order %s",
            start, end, pattern, len(periods), [d.name for d in order],
        )

        series: Dict[str, List[date]] = {d.name: [] for d in date_defs}
        for period in periods:
            resolved: Dict[str, date] = {}
            for date_def in order:
                base = resolve_anchor(date_def.anchor, period, resolved)
                resolved[date_def.name] = date_def.apply(base)
            for name, value in resolved.items():
                series[name].append(value)

        return ScheduleResult(
            periods=tuple(periods),
            dates={name: tuple(values) for name, values in series.items()},
        )


def schedule(
    start: date,
    end: date,
    pattern: Pattern,
    stub_rule: Optional[StubRule] = None,
    date_defs: Sequence[DateDef] = (),
) -> ScheduleResult:
    """
    Generate a schedule of named date series.

    Args:
        start: First day of the schedule
        end: Last day of the schedule
        pattern: Recurrence pattern
        stub_rule: Stub policy (None keeps every generated period)
        date_defs: Date definitions to evaluate

    Returns:
        ScheduleResult

    Examples:
        >>> coupon = DateDef("CouponDate", PeriodEnd(), Selector.modified_following())
        >>> result = schedule(date(2015, 1, 1), date(2016, 12, 31),
        ...                   Pattern.monthly(6, LastDayOfMonth()), date_defs=[coupon])
        >>> [d.isoformat() for d in result["CouponDate"]]
        ['2015-06-30', '2015-12-31', '2016-06-30', '2016-12-30']
    """
    return ScheduleEngine(stub_rule).schedule(start, end, pattern, date_defs)
