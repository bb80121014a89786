"""Schedule terms: JSON request schema and loaders."""

from schedgen.terms.schema import (
    ScheduleTerms,
    load_schedule_terms,
    validate_schedule_terms_json,
    build_schedule,
    print_schedule_summary,
    HolidayRuleSpec,
    DayOfMonthSpec,
    PatternSpec,
    StubRuleSpec,
    AnchorSpec,
    AdjustmentSpec,
    DateDefSpec,
)

__all__ = [
    "ScheduleTerms",
    "load_schedule_terms",
    "validate_schedule_terms_json",
    "build_schedule",
    "print_schedule_summary",
    "HolidayRuleSpec",
    "DayOfMonthSpec",
    "PatternSpec",
    "StubRuleSpec",
    "AnchorSpec",
    "AdjustmentSpec",
    "DateDefSpec",
]
