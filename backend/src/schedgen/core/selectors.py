"""
Business day selectors.

Supports Following, Preceding, Modified Following, Modified Preceding and
Nearest conventions, plus Unadjusted.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from schedgen.core.calendar import (
    WEEKENDS,
    HolidayRule,
    next_business_day,
    previous_business_day,
)


class BusinessDayConvention(str, Enum):
    """Business day adjustment conventions."""

    UNADJUSTED = "UNADJUSTED"
    FOLLOWING = "FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"
    NEAREST = "NEAREST"


@dataclass(frozen=True)
class Selector:
    """
    Moves a date onto a business day.

    Attributes:
        convention: Business day convention
        rule: Holiday rule defining non-business days (weekends by default)
    """

    convention: BusinessDayConvention
    rule: HolidayRule = WEEKENDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "convention", BusinessDayConvention(self.convention))

    @classmethod
    def following(cls, rule: HolidayRule = WEEKENDS) -> "Selector":
        return cls(BusinessDayConvention.FOLLOWING, rule)

    @classmethod
    def preceding(cls, rule: HolidayRule = WEEKENDS) -> "Selector":
        return cls(BusinessDayConvention.PRECEDING, rule)

    @classmethod
    def modified_following(cls, rule: HolidayRule = WEEKENDS) -> "Selector":
        return cls(BusinessDayConvention.MODIFIED_FOLLOWING, rule)

    @classmethod
    def modified_preceding(cls, rule: HolidayRule = WEEKENDS) -> "Selector":
        return cls(BusinessDayConvention.MODIFIED_PRECEDING, rule)

    @classmethod
    def nearest(cls, rule: HolidayRule = WEEKENDS) -> "Selector":
        return cls(BusinessDayConvention.NEAREST, rule)

    @classmethod
    def unadjusted(cls) -> "Selector":
        return cls(BusinessDayConvention.UNADJUSTED)

    def select(self, d: date) -> date:
        return adjust_date(d, self.convention, self.rule)

    def __str__(self) -> str:
        return f"{self.convention.value.lower()}({self.rule})"


def adjust_date(
    d: date,
    convention: BusinessDayConvention,
    rule: HolidayRule = WEEKENDS,
) -> date:
    """
    Adjust a date according to a business day convention.

    Args:
        d: Date to adjust
        convention: Business day convention
        rule: Holiday rule (defaults to weekends)

    Returns:
        Adjusted date; ``d`` itself whenever it is already a business day
    """
    if convention == BusinessDayConvention.UNADJUSTED:
        return d

    elif convention == BusinessDayConvention.FOLLOWING:
        return next_business_day(d, rule)

    elif convention == BusinessDayConvention.PRECEDING:
        return previous_business_day(d, rule)

    elif convention == BusinessDayConvention.MODIFIED_FOLLOWING:
        adjusted = next_business_day(d, rule)
        # If adjusted date is in a different month, go backwards instead
        if adjusted.month != d.month:
            adjusted = previous_business_day(d, rule)
        return adjusted

    elif convention == BusinessDayConvention.MODIFIED_PRECEDING:
        adjusted = previous_business_day(d, rule)
        if adjusted.month != d.month:
            adjusted = next_business_day(d, rule)
        return adjusted

    elif convention == BusinessDayConvention.NEAREST:
        after = next_business_day(d, rule)
        before = previous_business_day(d, rule)
        # Ties go forward
        if (after - d) <= (d - before):
            return after
        return before

    else:
        raise ValueError(f"Unknown business day convention: {convention}")
