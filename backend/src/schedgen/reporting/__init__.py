"""
Reporting module for schedule generation.

Provides:
- ScheduleReport: Period-by-period table of generated dates
- ScheduleRow: A single period of the report
"""

from schedgen.reporting.schedule_report import (
    ScheduleReport,
    ScheduleRow,
    generate_schedule_report,
)

__all__ = [
    "ScheduleReport",
    "ScheduleRow",
    "generate_schedule_report",
]
