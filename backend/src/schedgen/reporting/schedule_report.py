"""
Schedule reporting.

Tabulates a generated schedule period by period, with optional accrual
fractions, for console output and JSON export.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional
import json

from schedgen.core.day_count import DayCountConvention
from schedgen.core.schedule import ScheduleResult


@dataclass
class ScheduleRow:
    """
    One period of a schedule report.

    Attributes:
        index: Period number, starting at 1
        period_start: First day of the period
        period_end: Last day of the period
        days: Calendar days in the period
        dates: Generated dates by date definition name
        year_fraction: Accrual fraction (if a day count was requested)
    """

    index: int
    period_start: date
    period_end: date
    days: int
    dates: Dict[str, date] = field(default_factory=dict)
    year_fraction: Optional[float] = None


@dataclass
class ScheduleReport:
    """Period-by-period view of a schedule."""

    schedule_id: str
    names: List[str]
    rows: List[ScheduleRow]
    day_count: Optional[DayCountConvention] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize report to dictionary."""
        return {
            "schedule_id": self.schedule_id,
            "day_count": self.day_count.value if self.day_count else None,
            "periods": [
                {
                    "index": row.index,
                    "period_start": row.period_start.isoformat(),
                    "period_end": row.period_end.isoformat(),
                    "days": row.days,
                    "year_fraction": row.year_fraction,
                    "dates": {name: d.isoformat() for name, d in row.dates.items()},
                }
                for row in self.rows
            ],
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def print_summary(self) -> None:
        """Print formatted schedule table to console."""
        width = 34 + 8 + 13 * len(self.names) + (10 if self.day_count else 0)
        print(f"\n{'='*width}")
        print(f"Schedule: {self.schedule_id} ({len(self.rows)} periods)")
        print(f"{'='*width}")

        header = f"{'#':>3} {'Start':<12} {'End':<12} {'Days':>5} "
        header += "".join(f"{name[:12]:>13}" for name in self.names)
        if self.day_count:
            header += f"{self.day_count.value:>10}"
        print(header)
        print("-" * width)

        for row in self.rows:
            line = f"{row.index:>3} {row.period_start.isoformat():<12} {row.period_end.isoformat():<12} {row.days:>5} "
            line += "".join(f"{row.dates[name].isoformat():>13}" for name in self.names)
            if row.year_fraction is not None:
                line += f"{row.year_fraction:>10.6f}"
            print(line)

        print(f"{'='*width}")


def generate_schedule_report(
    result: ScheduleResult,
    schedule_id: str = "schedule",
    day_count: Optional[DayCountConvention] = None,
) -> ScheduleReport:
    """
    Build a report from a generated schedule.

    Args:
        result: Generated schedule
        schedule_id: Identifier shown in the report
        day_count: Day count for accrual fractions (omitted when None)

    Returns:
        ScheduleReport with one row per period
    """
    fractions = result.year_fractions(day_count) if day_count else [None] * result.num_periods

    rows = []
    for i, period in enumerate(result.periods):
        rows.append(ScheduleRow(
            index=i + 1,
            period_start=period.start,
            period_end=period.end,
            days=period.number_of_days,
            dates={name: result[name][i] for name in result.names},
            year_fraction=fractions[i],
        ))

    return ScheduleReport(
        schedule_id=schedule_id,
        names=result.names,
        rows=rows,
        day_count=DayCountConvention(day_count) if day_count else None,
    )
