"""
Calendar utilities for pillar and luck calculations.
Handles day numbering, solar-term cutoff proxies, and date ranges.
"""

import calendar
from datetime import date, timedelta

import swisseph as swe


# ============================================================
# SOLAR TERM CUTOFF PROXIES
# ============================================================
#
# The 12 Jie (절기) solar terms mark month boundaries. Their true instants
# drift by a day or so between years; the engine uses fixed calendar days
# instead of ephemeris crossings.
#
# 입춘 (Li Chun) Feb 4 opens the year, and month pillars turn on the 5th.

YEAR_START_MONTH = 2
YEAR_START_DAY = 4
MONTH_START_DAY = 5

# Gregorian month → day of that month's Jie, used for luck start age
JEOLGI_DAYS = {
    1: 6, 2: 4, 3: 6, 4: 5, 5: 6, 6: 6,
    7: 7, 8: 8, 9: 8, 10: 8, 11: 7, 12: 7,
}


def day_number(d: date) -> int:
    """
    Julian Day Number of a calendar date.

    swe.julday returns the Julian Date at 00:00 UT, which sits half a day
    before the JDN noon boundary.
    """
    return int(swe.julday(d.year, d.month, d.day, 0.0) + 0.5)


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (negative when end precedes start)."""
    return day_number(end) - day_number(start)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def is_valid_date(year: int, month: int, day: int) -> bool:
    return 1 <= month <= 12 and 1 <= day <= days_in_month(year, month)


def day_of_week(d: date) -> dict:
    """Weekday info for a date (0=Monday, 6=Sunday)."""
    return {
        "date": d.isoformat(),
        "day_name": d.strftime("%A"),
        "day_number": d.weekday(),
    }


def date_range(start: date, end: date) -> list[date]:
    """Dates between start and end (inclusive)."""
    return [start + timedelta(days=i) for i in range(days_between(start, end) + 1)]
