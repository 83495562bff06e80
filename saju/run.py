"""
CLI wrapper for compute_chart().

Usage:
    python3 -m saju.run --birth-date YYYY-MM-DD [--birth-hour HH | --unknown-time] \
        --gender GENDER [--calendar solar] [--now YYYY-MM-DD] [--current-age N] [--verbose]
"""

import argparse
import json
import logging
import sys
from datetime import date

from saju.birth import BirthInput
from saju.chart import compute_chart
from saju.errors import SajuError


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compute a Four Pillars chart.")
    parser.add_argument("--birth-date", required=True, dest="birth_date")
    parser.add_argument("--birth-hour", dest="birth_hour", default=None)
    parser.add_argument("--birth-minute", dest="birth_minute", default=None)
    parser.add_argument("--unknown-time", dest="unknown_time", action="store_true")
    parser.add_argument("--gender", required=True, choices=["male", "female"])
    parser.add_argument("--calendar", default="solar", choices=["solar", "lunar"])
    parser.add_argument("--now", default=None,
                        help="reference date YYYY-MM-DD (defaults to today)")
    parser.add_argument("--current-age", dest="current_age", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    try:
        year, month, day = args.birth_date.split("-")
        birth = BirthInput.create(
            year, month, day,
            hour=args.birth_hour,
            minute=args.birth_minute,
            gender=args.gender,
            calendar=args.calendar,
            unknown_time=args.unknown_time,
        )
        now = date.fromisoformat(args.now) if args.now else date.today()
        chart = compute_chart(birth, now=now, current_age=args.current_age)
    except (SajuError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(chart.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
