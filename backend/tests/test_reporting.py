"""Tests for schedule reports and the example runner."""

import importlib.util
import json
import sys
import pytest
from datetime import date
from pathlib import Path

from schedgen.core.day_count import DayCountConvention
from schedgen.core.schedule import schedule
from schedgen.reporting import ScheduleReport, generate_schedule_report

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


@pytest.fixture
def result(start_date, end_date, semiannual_month_end, coupon_def, settlement_def):
    return schedule(start_date, end_date, semiannual_month_end,
                    date_defs=[coupon_def, settlement_def])


@pytest.fixture
def run_schedule():
    """The example command-line runner, loaded as a module."""
    spec = importlib.util.spec_from_file_location("run_schedule", EXAMPLES_DIR / "run_schedule.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestScheduleReport:
    """Tests for generate_schedule_report."""

    def test_rows(self, result) -> None:
        report = generate_schedule_report(result, "SEMI")

        assert isinstance(report, ScheduleReport)
        assert report.names == ["CouponDate", "SettlementDate"]
        assert len(report.rows) == 4
        row = report.rows[0]
        assert row.index == 1
        assert row.period_start == date(2015, 1, 1)
        assert row.days == 181
        assert row.dates == {"CouponDate": date(2015, 6, 30), "SettlementDate": date(2015, 7, 2)}
        assert row.year_fraction is None

    def test_year_fractions(self, result) -> None:
        report = generate_schedule_report(result, "SEMI", DayCountConvention.ACT_360)
        assert report.rows[0].year_fraction == pytest.approx(181 / 360)
        assert report.rows[1].year_fraction == pytest.approx(184 / 360)

    def test_to_json(self, result) -> None:
        report = generate_schedule_report(result, "SEMI", DayCountConvention.ACT_365F)
        data = json.loads(report.to_json())

        assert data["schedule_id"] == "SEMI"
        assert data["day_count"] == "ACT/365F"
        assert data["periods"][-1]["dates"]["CouponDate"] == "2016-12-30"

    def test_print_summary(self, result, capsys) -> None:
        generate_schedule_report(result, "SEMI").print_summary()
        out = capsys.readouterr().out

        assert "Schedule: SEMI (4 periods)" in out
        assert "2016-12-30" in out
        assert "SettlementDa" in out


class TestRunSchedule:
    """Tests for the example runner."""

    def test_table_output(self, run_schedule, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, "argv", ["run_schedule.py"])
        assert run_schedule.main() == 0
        assert "SEMI-2015-2016" in capsys.readouterr().out

    def test_json_output(self, run_schedule, monkeypatch, capsys) -> None:
        terms = str(EXAMPLES_DIR / "long_end_stub.json")
        monkeypatch.setattr(sys, "argv", ["run_schedule.py", terms, "--format", "json", "-d", "ACT/360"])

        assert run_schedule.main() == 0
        data = json.loads(capsys.readouterr().out)
        assert data["schedule_id"] == "SEMI-LONG-END"
        assert len(data["periods"]) == 4

    def test_verbose_prints_terms(self, run_schedule, monkeypatch, capsys) -> None:
        terms = str(EXAMPLES_DIR / "long_end_stub.json")
        monkeypatch.setattr(sys, "argv", ["run_schedule.py", terms, "--verbose"])

        assert run_schedule.main() == 0
        out = capsys.readouterr().out
        assert "SCHEDULE TERMS: SEMI-LONG-END" in out
        assert "WE_NEWYEAR" in out
        assert "PaymentDate: date 'CouponDate'" in out

    def test_missing_file(self, run_schedule, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, "argv", ["run_schedule.py", "nonexistent.json"])
        assert run_schedule.main() == 1
        assert "ERROR" in capsys.readouterr().out
