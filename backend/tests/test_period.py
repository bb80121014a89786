"""Tests for schedule periods."""

import pytest
from datetime import date

from schedgen.core.errors import InvalidRangeError, ScheduleError
from schedgen.core.period import Period, periods_from_boundaries


class TestPeriod:
    """Tests for Period."""

    def test_number_of_days_is_inclusive(self) -> None:
        assert Period(date(2017, 1, 1), date(2017, 1, 31)).number_of_days == 31
        assert Period(date(2015, 1, 1), date(2015, 1, 1)).number_of_days == 1

    def test_start_after_end_raises(self) -> None:
        with pytest.raises(InvalidRangeError):
            Period(date(2015, 2, 1), date(2015, 1, 31))

    def test_contains(self) -> None:
        period = Period(date(2015, 1, 1), date(2015, 6, 30))
        assert date(2015, 1, 1) in period
        assert date(2015, 6, 30) in period
        assert date(2015, 7, 1) not in period

    def test_merge_adjacent(self) -> None:
        first = Period(date(2016, 7, 1), date(2016, 12, 31))
        second = Period(date(2017, 1, 1), date(2017, 1, 31))
        merged = Period(date(2016, 7, 1), date(2017, 1, 31))

        assert first.merge(second) == merged
        assert second.merge(first) == merged

    def test_merge_with_gap_raises(self) -> None:
        first = Period(date(2016, 7, 1), date(2016, 12, 30))
        second = Period(date(2017, 1, 1), date(2017, 1, 31))
        with pytest.raises(ScheduleError, match="not adjacent"):
            first.merge(second)

    def test_ordering(self) -> None:
        early = Period(date(2015, 1, 1), date(2015, 6, 30))
        late = Period(date(2015, 7, 1), date(2015, 12, 31))
        assert sorted([late, early]) == [early, late]


class TestPeriodsFromBoundaries:
    """Tests for building periods from boundary dates."""

    def test_two_periods(self) -> None:
        periods = periods_from_boundaries(
            [date(2014, 4, 10), date(2014, 4, 20), date(2014, 4, 30)]
        )
        assert periods == [
            Period(date(2014, 4, 11), date(2014, 4, 20)),
            Period(date(2014, 4, 21), date(2014, 4, 30)),
        ]

    def test_single_day_period(self) -> None:
        periods = periods_from_boundaries([date(2014, 4, 10), date(2014, 4, 11)])
        assert periods == [Period(date(2014, 4, 11), date(2014, 4, 11))]

    @pytest.mark.parametrize("boundaries", [[], [date(2014, 4, 10)]])
    def test_too_few_boundaries(self, boundaries) -> None:
        assert periods_from_boundaries(boundaries) == []
