#!/usr/bin/env python3
"""
Example: Load, validate, and generate a schedule.

Usage:
    python examples/run_schedule.py [terms.json] [--format table|json] [--day-count ACT/360] [--verbose]
"""

import sys
from pathlib import Path
import argparse
import logging
import traceback

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from schedgen.core.day_count import DayCountConvention
from schedgen.reporting import generate_schedule_report
from schedgen.terms.schema import (
    build_schedule,
    load_schedule_terms,
    print_schedule_summary,
)


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Generate a date schedule from JSON schedule terms"
    )
    parser.add_argument(
        "terms",
        type=str,
        nargs="?",
        default=str(Path(__file__).parent / "semiannual_coupons.json"),
        help="Path to JSON schedule terms file"
    )
    parser.add_argument(
        "--format", "-f",
        choices=["table", "json"],
        default="table",
        help="Output format"
    )
    parser.add_argument(
        "--day-count", "-d",
        choices=[c.value for c in DayCountConvention],
        default=None,
        help="Add accrual fractions with this day count"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print terms summary and debug logging"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    terms_path = Path(args.terms)

    try:
        terms = load_schedule_terms(terms_path)
        if args.verbose:
            print_schedule_summary(terms)

        result = build_schedule(terms)
        day_count = DayCountConvention(args.day_count) if args.day_count else None
        report = generate_schedule_report(result, terms.schedule_id, day_count)

        if args.format == "json":
            print(report.to_json())
        else:
            report.print_summary()

        return 0

    except FileNotFoundError as e:
        print(f"\nERROR: {e}")
        return 1

    except Exception as e:
        print(f"\nERROR: {type(e).__name__}: {e}")
        if args.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
