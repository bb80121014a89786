"""Tests for calendar date helpers and day-of-month policies."""

import pytest
from datetime import date

from schedgen.core.dates import (
    FirstDayOfMonth,
    LastDayOfMonth,
    LastWeekdayOfMonth,
    NthDayOfMonth,
    NthWeekdayOfMonth,
    Weekday,
    add_months,
    add_years,
    days_of_month,
    is_last_day_of_month,
    max_day_of_month,
    next_or_same,
    previous_or_same,
    with_day_of_month,
)
from schedgen.core.errors import AmbiguousDayOfMonthError, InvalidPatternError


class TestWeekday:
    """Tests for Weekday enum."""

    def test_of_date(self) -> None:
        assert Weekday.of(date(2015, 1, 1)) == Weekday.THURSDAY
        assert Weekday.of(date(2016, 12, 31)) == Weekday.SATURDAY

    def test_number_matches_date_weekday(self) -> None:
        assert Weekday.MONDAY.number == 0
        assert Weekday.SUNDAY.number == 6


class TestMonthArithmetic:
    """Tests for month and year arithmetic."""

    @pytest.mark.parametrize("year,month,expected", [
        (2015, 2, 28),
        (2016, 2, 29),
        (2015, 4, 30),
        (2015, 12, 31),
    ])
    def test_max_day_of_month(self, year: int, month: int, expected: int) -> None:
        assert max_day_of_month(year, month) == expected

    def test_add_months_clamps_to_month_end(self) -> None:
        assert add_months(date(2015, 1, 31), 1) == date(2015, 2, 28)
        assert add_months(date(2016, 1, 31), 1) == date(2016, 2, 29)

    def test_add_months_backwards(self) -> None:
        assert add_months(date(2015, 3, 31), -1) == date(2015, 2, 28)
        assert add_months(date(2015, 1, 15), -2) == date(2014, 11, 15)

    def test_add_months_across_year(self) -> None:
        assert add_months(date(2015, 11, 15), 3) == date(2016, 2, 15)

    def test_add_years_leap_day(self) -> None:
        assert add_years(date(2016, 2, 29), 1) == date(2017, 2, 28)
        assert add_years(date(2016, 2, 29), 4) == date(2020, 2, 29)

    def test_is_last_day_of_month(self) -> None:
        assert is_last_day_of_month(date(2016, 2, 29))
        assert not is_last_day_of_month(date(2015, 2, 27))

    def test_days_of_month(self) -> None:
        days = days_of_month(date(2016, 2, 10))
        assert len(days) == 29
        assert days[0] == date(2016, 2, 1)
        assert days[-1] == date(2016, 2, 29)


class TestDayOfMonthPolicies:
    """Tests for day-of-month policies."""

    def test_last_day(self) -> None:
        assert with_day_of_month(date(2015, 2, 3), LastDayOfMonth()) == date(2015, 2, 28)

    def test_first_day(self) -> None:
        assert with_day_of_month(date(2015, 2, 17), FirstDayOfMonth()) == date(2015, 2, 1)

    def test_nth_day(self) -> None:
        assert with_day_of_month(date(2015, 6, 1), NthDayOfMonth(20)) == date(2015, 6, 20)

    def test_third_friday(self) -> None:
        policy = NthWeekdayOfMonth(3, Weekday.FRIDAY)
        assert with_day_of_month(date(2014, 5, 5), policy) == date(2014, 5, 16)

    def test_last_friday(self) -> None:
        policy = LastWeekdayOfMonth(Weekday.FRIDAY)
        assert with_day_of_month(date(2014, 5, 5), policy) == date(2014, 5, 30)

    def test_weekday_accepts_string(self) -> None:
        assert NthWeekdayOfMonth(1, "MONDAY").weekday == Weekday.MONDAY

    def test_missing_day_raises(self) -> None:
        """The 31st does not exist in February."""
        with pytest.raises(AmbiguousDayOfMonthError) as exc_info:
            with_day_of_month(date(2015, 2, 1), NthDayOfMonth(31))
        assert exc_info.value.matches == []
        assert (exc_info.value.year, exc_info.value.month) == (2015, 2)

    def test_missing_fifth_weekday_raises(self) -> None:
        """June 2014 has only four Fridays."""
        with pytest.raises(AmbiguousDayOfMonthError):
            with_day_of_month(date(2014, 6, 1), NthWeekdayOfMonth(5, Weekday.FRIDAY))

    @pytest.mark.parametrize("n", [0, 32, -1])
    def test_nth_day_out_of_range(self, n: int) -> None:
        with pytest.raises(InvalidPatternError):
            NthDayOfMonth(n)

    def test_nth_weekday_out_of_range(self) -> None:
        with pytest.raises(InvalidPatternError):
            NthWeekdayOfMonth(6, Weekday.FRIDAY)


class TestNextPrevious:
    """Tests for searching the next or previous matching date."""

    def test_next_or_same(self) -> None:
        assert next_or_same(date(2014, 7, 30), LastDayOfMonth()) == date(2014, 7, 31)
        assert next_or_same(date(2014, 7, 31), LastDayOfMonth()) == date(2014, 7, 31)
        assert next_or_same(date(2014, 8, 1), LastDayOfMonth()) == date(2014, 8, 31)

    def test_previous_or_same(self) -> None:
        assert previous_or_same(date(2014, 8, 5), LastDayOfMonth()) == date(2014, 7, 31)
        assert previous_or_same(date(2014, 8, 5), FirstDayOfMonth()) == date(2014, 8, 1)
