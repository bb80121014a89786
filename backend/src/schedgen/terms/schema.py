"""
Strict Pydantic schema for schedule terms.

Schedule terms are the JSON form of a schedule request: date range, pattern,
stub rule, named holiday calendars and date definitions. They are validated
here and converted into core engine objects by ``build_schedule``.
"""

import json
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from schedgen.core.anchors import Anchor, OtherDate, PeriodEnd, PeriodStart
from schedgen.core.calendar import (
    NO_HOLIDAY,
    WEEKENDS,
    CompositeHolidayRule,
    HolidayDates,
    HolidayRule,
    WeekdayHolidays,
)
from schedgen.core.date_def import Adjustment, DateDef
from schedgen.core.dates import (
    DayOfMonth,
    FirstDayOfMonth,
    LastDayOfMonth,
    LastWeekdayOfMonth,
    NthDayOfMonth,
    NthWeekdayOfMonth,
    Weekday,
)
from schedgen.core.pattern import Pattern, PatternUnit
from schedgen.core.schedule import ScheduleResult, schedule
from schedgen.core.selectors import BusinessDayConvention, Selector
from schedgen.core.shifters import ShiftUnit, Shifter
from schedgen.core.stub_rules import LongEnd, LongStart, ShortEnd, ShortStart, StubRule

# Calendars every terms file can refer to without declaring them
BUILTIN_CALENDARS: Dict[str, HolidayRule] = {
    "WE": WEEKENDS,
    "NONE": NO_HOLIDAY,
}


# ============================================================================
# Enums for strict typing
# ============================================================================

class HolidayRuleType(str, Enum):
    """Holiday rule kinds."""
    NONE = "none"
    WEEKENDS = "weekends"
    WEEKDAYS = "weekdays"
    DATES = "dates"
    UNION = "union"


class DayOfMonthType(str, Enum):
    """Day-of-month policy kinds."""
    LAST_DAY = "last_day"
    FIRST_DAY = "first_day"
    NTH_DAY = "nth_day"
    NTH_WEEKDAY = "nth_weekday"
    LAST_WEEKDAY = "last_weekday"


class StubRuleType(str, Enum):
    """Stub rule kinds."""
    LONG_START = "long_start"
    SHORT_START = "short_start"
    LONG_END = "long_end"
    SHORT_END = "short_end"


class AnchorType(str, Enum):
    """Anchor kinds."""
    PERIOD_START = "period_start"
    PERIOD_END = "period_end"
    OTHER_DATE = "other_date"


class AdjustmentType(str, Enum):
    """Adjustment step kinds."""
    SELECT = "select"
    SHIFT = "shift"


# ============================================================================
# Sub-schemas for nested structures
# ============================================================================

class HolidayRuleSpec(BaseModel):
    """Holiday rule specification."""
    type: HolidayRuleType
    weekdays: Optional[List[Weekday]] = Field(
        default=None,
        description="Holiday weekdays for the weekdays rule"
    )
    dates: Optional[List[date]] = Field(
        default=None,
        description="Explicit holiday dates for the dates rule"
    )
    name: Optional[str] = None
    rules: Optional[List["HolidayRuleSpec"]] = Field(
        default=None,
        description="Constituent rules for the union rule"
    )

    @model_validator(mode='after')
    def validate_rule(self) -> 'HolidayRuleSpec':
        """Validate rule has required fields for its type."""
        if self.type == HolidayRuleType.WEEKDAYS:
            if not self.weekdays:
                raise ValueError("weekdays required for weekdays holiday rule")
        elif self.type == HolidayRuleType.DATES:
            if self.dates is None:
                raise ValueError("dates required for dates holiday rule")
        elif self.type == HolidayRuleType.UNION:
            if not self.rules:
                raise ValueError("rules required for union holiday rule")
        return self

    def to_rule(self) -> HolidayRule:
        """Build the core holiday rule."""
        if self.type == HolidayRuleType.NONE:
            return NO_HOLIDAY
        if self.type == HolidayRuleType.WEEKENDS:
            return WEEKENDS
        if self.type == HolidayRuleType.WEEKDAYS:
            return WeekdayHolidays(frozenset(self.weekdays))
        if self.type == HolidayRuleType.DATES:
            return HolidayDates(frozenset(self.dates), self.name or "holidays")
        return CompositeHolidayRule(tuple(r.to_rule() for r in self.rules))


HolidayRuleSpec.model_rebuild()


class DayOfMonthSpec(BaseModel):
    """Day-of-month policy specification."""
    type: DayOfMonthType
    n: Optional[int] = Field(default=None, ge=1, le=31, description="Day or ordinal")
    weekday: Optional[Weekday] = None

    @model_validator(mode='after')
    def validate_policy(self) -> 'DayOfMonthSpec':
        """Validate policy has required fields for its type."""
        if self.type in (DayOfMonthType.NTH_DAY, DayOfMonthType.NTH_WEEKDAY):
            if self.n is None:
                raise ValueError(f"n required for {self.type.value} day of month")
        if self.type == DayOfMonthType.NTH_WEEKDAY and self.n is not None and self.n > 5:
            raise ValueError(f"n must be in [1, 5] for nth_weekday, got {self.n}")
        if self.type in (DayOfMonthType.NTH_WEEKDAY, DayOfMonthType.LAST_WEEKDAY):
            if self.weekday is None:
                raise ValueError(f"weekday required for {self.type.value} day of month")
        return self

    def to_policy(self) -> DayOfMonth:
        if self.type == DayOfMonthType.LAST_DAY:
            return LastDayOfMonth()
        if self.type == DayOfMonthType.FIRST_DAY:
            return FirstDayOfMonth()
        if self.type == DayOfMonthType.NTH_DAY:
            return NthDayOfMonth(self.n)
        if self.type == DayOfMonthType.NTH_WEEKDAY:
            return NthWeekdayOfMonth(self.n, self.weekday)
        return LastWeekdayOfMonth(self.weekday)


class PatternSpec(BaseModel):
    """Recurrence pattern specification."""
    interval: int = Field(..., gt=0, description="Units between boundaries")
    unit: PatternUnit = PatternUnit.MONTH
    day_of_month: Optional[DayOfMonthSpec] = None

    @model_validator(mode='after')
    def validate_pattern(self) -> 'PatternSpec':
        """Day-of-month policies only apply to month and year patterns."""
        if self.day_of_month is not None and self.unit in (PatternUnit.DAY, PatternUnit.WEEK):
            raise ValueError(f"day_of_month not allowed for {self.unit.value} pattern")
        return self

    def to_pattern(self) -> Pattern:
        dom = self.day_of_month.to_policy() if self.day_of_month else None
        return Pattern(self.interval, self.unit, dom)


class StubRuleSpec(BaseModel):
    """Stub rule specification."""
    type: StubRuleType
    days: int = Field(..., gt=0, description="Threshold in days")

    def to_rule(self) -> StubRule:
        rule_cls = {
            StubRuleType.LONG_START: LongStart,
            StubRuleType.SHORT_START: ShortStart,
            StubRuleType.LONG_END: LongEnd,
            StubRuleType.SHORT_END: ShortEnd,
        }[self.type]
        return rule_cls(self.days)


class AnchorSpec(BaseModel):
    """Anchor specification."""
    type: AnchorType = AnchorType.PERIOD_END
    name: Optional[str] = Field(default=None, description="Referenced date for other_date")

    @model_validator(mode='after')
    def validate_anchor(self) -> 'AnchorSpec':
        if self.type == AnchorType.OTHER_DATE and not self.name:
            raise ValueError("name required for other_date anchor")
        return self

    def to_anchor(self) -> Anchor:
        if self.type == AnchorType.PERIOD_START:
            return PeriodStart()
        if self.type == AnchorType.PERIOD_END:
            return PeriodEnd()
        return OtherDate(self.name)


class AdjustmentSpec(BaseModel):
    """A selector or shifter step."""
    type: AdjustmentType
    convention: Optional[BusinessDayConvention] = None
    count: Optional[int] = None
    unit: ShiftUnit = ShiftUnit.CALENDAR_DAY
    calendar: str = Field(default="WE", description="Name of the holiday calendar")

    @model_validator(mode='after')
    def validate_adjustment(self) -> 'AdjustmentSpec':
        """Validate step has required fields for its type."""
        if self.type == AdjustmentType.SELECT:
            if self.convention is None:
                raise ValueError("convention required for select adjustment")
        elif self.type == AdjustmentType.SHIFT:
            if self.count is None:
                raise ValueError("count required for shift adjustment")
        return self

    def to_adjustment(self, calendars: Dict[str, HolidayRule]) -> Adjustment:
        rule = calendars[self.calendar]
        if self.type == AdjustmentType.SELECT:
            return Selector(self.convention, rule)
        return Shifter(self.count, self.unit, rule)


class DateDefSpec(BaseModel):
    """Date definition specification."""
    name: str = Field(..., min_length=1)
    anchor: AnchorSpec = Field(default_factory=AnchorSpec)
    adjustments: List[AdjustmentSpec] = Field(default_factory=list)

    def to_date_def(self, calendars: Dict[str, HolidayRule]) -> DateDef:
        steps = [a.to_adjustment(calendars) for a in self.adjustments]
        return DateDef(self.name, self.anchor.to_anchor(), steps or None)


# ============================================================================
# Main Schedule Terms Schema
# ============================================================================

class ScheduleTerms(BaseModel):
    """
    Complete schedule request.

    Structure is validated here; dependency problems between date
    definitions (duplicates, unknown references, cycles) are reported by the
    engine when the schedule is built.
    """

    model_config = ConfigDict(extra="forbid")

    schedule_id: str = Field(..., min_length=1)
    start_date: date
    end_date: date
    pattern: PatternSpec
    stub_rule: Optional[StubRuleSpec] = None
    calendars: Dict[str, HolidayRuleSpec] = Field(default_factory=dict)
    date_defs: List[DateDefSpec] = Field(..., min_length=1)

    @model_validator(mode='after')
    def validate_terms(self) -> 'ScheduleTerms':
        """Cross-field validation."""
        if self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date} cannot be before start_date {self.start_date}"
            )

        known = set(BUILTIN_CALENDARS) | set(self.calendars)
        for date_def in self.date_defs:
            for adjustment in date_def.adjustments:
                if adjustment.calendar not in known:
                    raise ValueError(
                        f"date_def '{date_def.name}' uses unknown calendar '{adjustment.calendar}'"
                    )
        return self

    def holiday_rules(self) -> Dict[str, HolidayRule]:
        """Built-in and declared calendars by name."""
        rules = dict(BUILTIN_CALENDARS)
        rules.update({name: spec.to_rule() for name, spec in self.calendars.items()})
        return rules

    def to_date_defs(self) -> List[DateDef]:
        rules = self.holiday_rules()
        return [d.to_date_def(rules) for d in self.date_defs]


# ============================================================================
# Loading and building functions
# ============================================================================

def load_schedule_terms(path: Union[str, Path]) -> ScheduleTerms:
    """
    Load and validate schedule terms from JSON file.

    Args:
        path: Path to JSON file

    Returns:
        Validated ScheduleTerms object

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If JSON doesn't match schema
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Schedule terms not found: {path}")

    with open(filepath, "r") as f:
        data = json.load(f)

    return ScheduleTerms(**data)


def validate_schedule_terms_json(data: dict) -> ScheduleTerms:
    """Validate schedule terms data dictionary."""
    return ScheduleTerms(**data)


def build_schedule(terms: ScheduleTerms) -> ScheduleResult:
    """
    Generate the schedule described by validated terms.

    Raises:
        ScheduleError: If the engine rejects the request
    """
    stub_rule = terms.stub_rule.to_rule() if terms.stub_rule else None
    return schedule(
        terms.start_date,
        terms.end_date,
        terms.pattern.to_pattern(),
        stub_rule,
        terms.to_date_defs(),
    )


def print_schedule_summary(terms: ScheduleTerms) -> None:
    """Print a clean summary of the schedule terms."""
    print("=" * 70)
    print(f"SCHEDULE TERMS: {terms.schedule_id}")
    print("=" * 70)

    print(f"\n--- RANGE ---")
    print(f"  Start:     {terms.start_date}")
    print(f"  End:       {terms.end_date}")
    print(f"  Pattern:   {terms.pattern.to_pattern()}")
    stub = terms.stub_rule.to_rule() if terms.stub_rule else "none"
    print(f"  Stub rule: {stub}")

    if terms.calendars:
        print(f"\n--- CALENDARS ({len(terms.calendars)}) ---")
        for name, spec in terms.calendars.items():
            print(f"  {name}: {spec.to_rule()}")

    print(f"\n--- DATE DEFINITIONS ({len(terms.date_defs)}) ---")
    for date_def in terms.to_date_defs():
        steps = ", ".join(str(s) for s in date_def.steps) or "unadjusted"
        print(f"  {date_def.name}: {date_def.anchor} -> {steps}")

    print("=" * 70)
