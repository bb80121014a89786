"""
Schedule Generator - rule-driven cash-flow date schedules.

Builds named date series (coupon dates, settlement dates, fixing dates) from:
- A date range and a recurrence pattern with day-of-month policies
- Stub rules merging short or long edge periods
- Anchors, business day selectors and working-day shifters per date
- Composable holiday rules

Example:
    >>> from datetime import date
    >>> from schedgen import schedule, Pattern, LastDayOfMonth, DateDef, PeriodEnd, Selector
    >>> coupon = DateDef("CouponDate", PeriodEnd(), Selector.modified_following())
    >>> result = schedule(date(2015, 1, 1), date(2016, 12, 31),
    ...                   Pattern.monthly(6, LastDayOfMonth()), date_defs=[coupon])
    >>> result["CouponDate"][-1]
    datetime.date(2016, 12, 30)
"""

__version__ = "0.1.0"

# Engine
from schedgen.core.schedule import (
    ScheduleEngine,
    ScheduleResult,
    schedule,
)

# Building blocks
from schedgen.core.anchors import OtherDate, PeriodEnd, PeriodStart
from schedgen.core.calendar import (
    NO_HOLIDAY,
    WEEKENDS,
    CompositeHolidayRule,
    HolidayDates,
    NoHoliday,
    WeekdayHolidays,
    Weekends,
    holiday_dates,
    union,
)
from schedgen.core.date_def import DateDef
from schedgen.core.dates import (
    FirstDayOfMonth,
    LastDayOfMonth,
    LastWeekdayOfMonth,
    NthDayOfMonth,
    NthWeekdayOfMonth,
    Weekday,
)
from schedgen.core.day_count import DayCountConvention
from schedgen.core.pattern import Pattern, PatternUnit
from schedgen.core.period import Period
from schedgen.core.selectors import BusinessDayConvention, Selector
from schedgen.core.shifters import ShiftUnit, Shifter
from schedgen.core.stub_rules import LongEnd, LongStart, ShortEnd, ShortStart

# Errors
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

# Schedule terms
from schedgen.terms.schema import (
    ScheduleTerms,
    build_schedule,
    load_schedule_terms,
    validate_schedule_terms_json,
)

# Reporting
from schedgen.reporting import (
    ScheduleReport,
    generate_schedule_report,
)

__all__ = [
    # Version
    "__version__",
    # Engine
    "ScheduleEngine",
    "ScheduleResult",
    "schedule",
    # Building blocks
    "OtherDate",
    "PeriodEnd",
    "PeriodStart",
    "NO_HOLIDAY",
    "WEEKENDS",
    "CompositeHolidayRule",
    "HolidayDates",
    "NoHoliday",
    "WeekdayHolidays",
    "Weekends",
    "holiday_dates",
    "union",
    "DateDef",
    "FirstDayOfMonth",
    "LastDayOfMonth",
    "LastWeekdayOfMonth",
    "NthDayOfMonth",
    "NthWeekdayOfMonth",
    "Weekday",
    "DayCountConvention",
    "Pattern",
    "PatternUnit",
    "Period",
    "BusinessDayConvention",
    "Selector",
    "ShiftUnit",
    "Shifter",
    "LongEnd",
    "LongStart",
    "ShortEnd",
    "ShortStart",
    # Errors
    "AmbiguousDayOfMonthError",
    "CyclicDependencyError",
    "DuplicateNameError",
    "EmptyScheduleError",
    "HolidayRuleError",
    "InvalidPatternError",
    "InvalidRangeError",
    "ScheduleError",
    "UnknownReferenceError",
    # Schedule terms
    "ScheduleTerms",
    "build_schedule",
    "load_schedule_terms",
    "validate_schedule_terms_json",
    # Reporting
    "ScheduleReport",
    "generate_schedule_report",
]
