"""Tests for business day selectors."""

import pytest
from datetime import date

from schedgen.core.calendar import NO_HOLIDAY, WEEKENDS, holiday_dates, is_business_day
from schedgen.core.dates import days_of_month
from schedgen.core.selectors import BusinessDayConvention, Selector, adjust_date


class TestSelector:
    """Tests for each business day convention."""

    def test_following(self) -> None:
        assert Selector.following().select(date(2015, 1, 31)) == date(2015, 2, 2)

    def test_preceding(self) -> None:
        assert Selector.preceding().select(date(2015, 8, 1)) == date(2015, 7, 31)

    def test_modified_following_stays_in_month(self) -> None:
        assert Selector.modified_following().select(date(2015, 1, 31)) == date(2015, 1, 30)
        assert Selector.modified_following().select(date(2016, 12, 31)) == date(2016, 12, 30)

    def test_modified_following_mid_month(self) -> None:
        assert Selector.modified_following().select(date(2015, 1, 17)) == date(2015, 1, 19)

    def test_modified_preceding_stays_in_month(self) -> None:
        assert Selector.modified_preceding().select(date(2015, 8, 1)) == date(2015, 8, 3)

    def test_nearest(self) -> None:
        # Saturday is closer to Friday, Sunday to Monday
        assert Selector.nearest().select(date(2015, 1, 31)) == date(2015, 1, 30)
        assert Selector.nearest().select(date(2015, 5, 31)) == date(2015, 6, 1)

    def test_nearest_tie_goes_forward(self) -> None:
        rule = holiday_dates([date(2015, 7, 1)])
        assert Selector.nearest(rule).select(date(2015, 7, 1)) == date(2015, 7, 2)

    def test_unadjusted(self) -> None:
        assert Selector.unadjusted().select(date(2015, 1, 31)) == date(2015, 1, 31)

    def test_holiday_rule_is_used(self, new_year_rule) -> None:
        assert Selector.following(new_year_rule).select(date(2016, 1, 1)) == date(2016, 1, 4)
        assert Selector.following().select(date(2016, 1, 1)) == date(2016, 1, 1)

    def test_convention_from_string(self) -> None:
        selector = Selector("MODIFIED_FOLLOWING")
        assert selector.convention == BusinessDayConvention.MODIFIED_FOLLOWING
        assert selector.rule == WEEKENDS

    def test_no_holidays_never_moves(self) -> None:
        assert Selector.following(NO_HOLIDAY).select(date(2015, 1, 31)) == date(2015, 1, 31)


class TestSelectorProperties:
    """Properties that hold for every date in a month."""

    MONTHS = [
        date(2015, 2, 1),   # 28 days
        date(2016, 2, 1),   # 29 days
        date(2015, 4, 1),   # 30 days
        date(2015, 5, 1),   # 31 days, ends on a Sunday
        date(2015, 1, 1),   # 31 days, ends on a Saturday
        date(2016, 7, 1),   # 31 days, ends on a Sunday
    ]

    @pytest.mark.parametrize("convention", list(BusinessDayConvention))
    def test_business_day_is_unchanged(self, convention: BusinessDayConvention) -> None:
        d = date(2015, 6, 30)
        assert adjust_date(d, convention, WEEKENDS) == d

    @pytest.mark.parametrize("month", MONTHS)
    @pytest.mark.parametrize("convention", [
        BusinessDayConvention.MODIFIED_FOLLOWING,
        BusinessDayConvention.MODIFIED_PRECEDING,
    ])
    def test_modified_conventions_stay_in_month(self, month: date, convention) -> None:
        selector = Selector(convention, WEEKENDS)
        for d in days_of_month(month):
            selected = selector.select(d)
            assert selected.month == d.month
            assert is_business_day(selected, WEEKENDS)

    @pytest.mark.parametrize("month", MONTHS)
    @pytest.mark.parametrize("convention", [
        BusinessDayConvention.FOLLOWING,
        BusinessDayConvention.PRECEDING,
        BusinessDayConvention.NEAREST,
    ])
    def test_selected_date_is_business_day(self, month: date, convention) -> None:
        selector = Selector(convention, WEEKENDS)
        for d in days_of_month(month):
            assert is_business_day(selector.select(d), WEEKENDS)

    @pytest.mark.parametrize("month", MONTHS)
    def test_selection_is_idempotent(self, month: date) -> None:
        selector = Selector.modified_following()
        for d in days_of_month(month):
            once = selector.select(d)
            assert selector.select(once) == once
