"""
Shared pytest fixtures for schedule tests.

Provides reusable date ranges, patterns and date definitions for unit and
integration tests.
"""

import json
import pytest
from datetime import date
from pathlib import Path
from typing import Any, Dict

from schedgen.core.anchors import OtherDate, PeriodEnd
from schedgen.core.calendar import WEEKENDS, holiday_dates, union
from schedgen.core.date_def import DateDef
from schedgen.core.dates import LastDayOfMonth
from schedgen.core.pattern import Pattern
from schedgen.core.selectors import Selector
from schedgen.core.shifters import Shifter

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


@pytest.fixture
def start_date() -> date:
    """First day of the standard two-year schedule."""
    return date(2015, 1, 1)


@pytest.fixture
def end_date() -> date:
    """Last day of the standard two-year schedule."""
    return date(2016, 12, 31)


@pytest.fixture
def stub_end_date() -> date:
    """End date one month past a whole number of half years."""
    return date(2017, 1, 31)


@pytest.fixture
def semiannual_month_end() -> Pattern:
    """Every 6 months on the last day of the month."""
    return Pattern.monthly(6, LastDayOfMonth())


@pytest.fixture
def coupon_def() -> DateDef:
    """Period end, modified following on weekends."""
    return DateDef("CouponDate", PeriodEnd(), Selector.modified_following(WEEKENDS))


@pytest.fixture
def settlement_def() -> DateDef:
    """Two working days after the coupon date."""
    return DateDef("SettlementDate", OtherDate("CouponDate"), Shifter.working_days(2, WEEKENDS))


@pytest.fixture
def new_year_rule():
    """Weekends plus two New Year holidays."""
    return union(WEEKENDS, holiday_dates([date(2016, 1, 1), date(2017, 1, 2)], "new_year"))


@pytest.fixture
def semiannual_terms_data() -> Dict[str, Any]:
    """Raw JSON terms of the semiannual coupon example."""
    with open(EXAMPLES_DIR / "semiannual_coupons.json") as f:
        return json.load(f)


@pytest.fixture
def long_end_terms_data() -> Dict[str, Any]:
    """Raw JSON terms of the long end stub example."""
    with open(EXAMPLES_DIR / "long_end_stub.json") as f:
        return json.load(f)
