"""
Anchors: where in a period a date definition starts from.
"""

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional, Union

from schedgen.core.period import Period


@dataclass(frozen=True)
class PeriodStart:
    """First day of the period."""

    def __str__(self) -> str:
        return "period start"


@dataclass(frozen=True)
class PeriodEnd:
    """Last day of the period."""

    def __str__(self) -> str:
        return "period end"


@dataclass(frozen=True)
class OtherDate:
    """The resolved value of another date definition in the same period."""

    name: str

    def __str__(self) -> str:
        return f"date '{self.name}'"


Anchor = Union[PeriodStart, PeriodEnd, OtherDate]


def reference_of(anchor: Anchor) -> Optional[str]:
    """Name of the date definition an anchor depends on, if any."""
    if isinstance(anchor, OtherDate):
        return anchor.name
    return None


def resolve_anchor(anchor: Anchor, period: Period, resolved: Mapping[str, date]) -> date:
    """
    Base date for an anchor in a period.

    Args:
        anchor: Anchor to resolve
        period: Current period
        resolved: Dates already resolved for this period, by name

    Returns:
        The anchored, unadjusted date
    """
    if isinstance(anchor, PeriodStart):
        return period.start
    if isinstance(anchor, PeriodEnd):
        return period.end
    if isinstance(anchor, OtherDate):
        return resolved[anchor.name]
    raise TypeError(f"Unknown anchor: {anchor!r}")
