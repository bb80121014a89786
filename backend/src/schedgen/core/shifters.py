"""
Date shifters: fixed offsets in calendar days or working days.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from schedgen.core.calendar import WEEKENDS, HolidayRule, add_business_days


class ShiftUnit(str, Enum):
    """Unit of a shift."""

    CALENDAR_DAY = "CALENDAR_DAY"
    WORKING_DAY = "WORKING_DAY"


@dataclass(frozen=True)
class Shifter:
    """
    Moves a date by a fixed count of days.

    Attributes:
        count: Number of days; negative values shift backwards
        unit: Calendar days or working days
        rule: Holiday rule for working-day shifts (ignored for calendar days)
    """

    count: int
    unit: ShiftUnit = ShiftUnit.CALENDAR_DAY
    rule: HolidayRule = WEEKENDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit", ShiftUnit(self.unit))

    @classmethod
    def calendar_days(cls, count: int) -> "Shifter":
        return cls(count, ShiftUnit.CALENDAR_DAY)

    @classmethod
    def working_days(cls, count: int, rule: HolidayRule = WEEKENDS) -> "Shifter":
        return cls(count, ShiftUnit.WORKING_DAY, rule)

    def shift(self, d: date) -> date:
        if self.unit == ShiftUnit.WORKING_DAY:
            return add_business_days(d, self.count, self.rule)
        return d + timedelta(days=self.count)

    def __str__(self) -> str:
        if self.unit == ShiftUnit.WORKING_DAY:
            return f"{self.count:+d} working days({self.rule})"
        return f"{self.count:+d} calendar days"
