"""Core schedule engine: dates, holiday rules, patterns, periods and date definitions."""

from schedgen.core.anchors import Anchor, OtherDate, PeriodEnd, PeriodStart
from schedgen.core.calendar import (
    NO_HOLIDAY,
    WEEKENDS,
    CompositeHolidayRule,
    HolidayDates,
    HolidayRule,
    NoHoliday,
    WeekdayHolidays,
    Weekends,
    add_business_days,
    holiday_dates,
    union,
)
from schedgen.core.date_def import DateDef, resolve_order
from schedgen.core.dates import (
    DayOfMonth,
    FirstDayOfMonth,
    LastDayOfMonth,
    LastWeekdayOfMonth,
    NthDayOfMonth,
    NthWeekdayOfMonth,
    Weekday,
    with_day_of_month,
)
from schedgen.core.day_count import DayCountConvention, day_count_fraction
from schedgen.core.errors import (
    AmbiguousDayOfMonthError,
    CyclicDependencyError,
    DuplicateNameError,
    EmptyScheduleError,
    HolidayRuleError,
    InvalidPatternError,
    InvalidRangeError,
    ScheduleError,
    UnknownReferenceError,
)
from schedgen.core.pattern import Pattern, PatternUnit, generate_boundaries
from schedgen.core.period import Period, periods_from_boundaries
from schedgen.core.schedule import ScheduleEngine, ScheduleResult, schedule
from schedgen.core.selectors import BusinessDayConvention, Selector, adjust_date
from schedgen.core.shifters import ShiftUnit, Shifter
from schedgen.core.stub_rules import (
    LongEnd,
    LongStart,
    ShortEnd,
    ShortStart,
    StubRule,
    StubRulePeriodBuilder,
)

__all__ = [
    "Anchor",
    "OtherDate",
    "PeriodEnd",
    "PeriodStart",
    "NO_HOLIDAY",
    "WEEKENDS",
    "CompositeHolidayRule",
    "HolidayDates",
    "HolidayRule",
    "NoHoliday",
    "WeekdayHolidays",
    "Weekends",
    "add_business_days",
    "holiday_dates",
    "union",
    "DateDef",
    "resolve_order",
    "DayOfMonth",
    "FirstDayOfMonth",
    "LastDayOfMonth",
    "LastWeekdayOfMonth",
    "NthDayOfMonth",
    "NthWeekdayOfMonth",
    "Weekday",
    "with_day_of_month",
    "DayCountConvention",
    "day_count_fraction",
    "AmbiguousDayOfMonthError",
    "CyclicDependencyError",
    "DuplicateNameError",
    "EmptyScheduleError",
    "HolidayRuleError",
    "InvalidPatternError",
    "InvalidRangeError",
    "ScheduleError",
    "UnknownReferenceError",
    "Pattern",
    "PatternUnit",
    "generate_boundaries",
    "Period",
    "periods_from_boundaries",
    "ScheduleEngine",
    "ScheduleResult",
    "schedule",
    "BusinessDayConvention",
    "Selector",
    "adjust_date",
    "ShiftUnit",
    "Shifter",
    "LongEnd",
    "LongStart",
    "ShortEnd",
    "ShortStart",
    "StubRule",
    "StubRulePeriodBuilder",
]
