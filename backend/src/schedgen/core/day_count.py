"""
Accrual fractions for schedule periods.

A period ``[start, end]`` accrues from the day before ``start`` to ``end``,
so the fractions of adjacent periods add up to the fraction of their union.
"""

import calendar
from datetime import date, timedelta
from enum import Enum

from schedgen.core.period import Period


class DayCountConvention(str, Enum):
    """Year fraction conventions."""

    ACT_360 = "ACT/360"
    ACT_365F = "ACT/365F"
    THIRTY_360 = "30/360"
    ACT_ACT = "ACT/ACT"


def _year_length(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def _thirty_360(accrual_start: date, accrual_end: date) -> float:
    # ISDA bond basis: the 31st becomes the 30th, at the end only if the start was
    first_day = min(accrual_start.day, 30)
    last_day = accrual_end.day
    if last_day == 31 and first_day == 30:
        last_day = 30

    months = 12 * (accrual_end.year - accrual_start.year) + accrual_end.month - accrual_start.month
    return (30 * months + last_day - first_day) / 360.0


def _act_act(accrual_start: date, accrual_end: date) -> float:
    fraction = 0.0
    cursor = accrual_start
    while cursor.year < accrual_end.year:
        new_year = date(cursor.year + 1, 1, 1)
        fraction += (new_year - cursor).days / _year_length(cursor.year)
        cursor = new_year
    return fraction + (accrual_end - cursor).days / _year_length(cursor.year)


def day_count_fraction(start: date, end: date, convention: DayCountConvention) -> float:
    """
    Year fraction accrued over ``(start, end]``.

    Raises:
        ValueError: If end is before start
    """
    if end < start:
        raise ValueError(f"End date {end} must be >= start date {start}")

    convention = DayCountConvention(convention)
    actual_days = (end - start).days

    if convention == DayCountConvention.ACT_360:
        return actual_days / 360.0
    elif convention == DayCountConvention.ACT_365F:
        return actual_days / 365.0
    elif convention == DayCountConvention.THIRTY_360:
        return _thirty_360(start, end)
    return _act_act(start, end)


def period_year_fraction(period: Period, convention: DayCountConvention) -> float:
    """Accrual fraction of an inclusive period."""
    return day_count_fraction(period.start - timedelta(days=1), period.end, convention)
