"""
Luck timelines anchored to a natal chart.

- 대운 (Daeun): ten-year periods stepping from the month pillar
- 세운 (Seun): one pillar per calendar year
- 일운 (Ilun): one pillar per day around a reference date

Every function takes the reference point ("now", current age, current
year) as an argument; nothing here reads the system clock.
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from saju.astro_calendar import JEOLGI_DAYS, date_range, day_of_week, days_in_month
from saju.birth import Gender
from saju.cycle import CycleOffset
from saju.elements import EARTHLY_BRANCHES, HEAVENLY_STEMS, EarthlyBranch, HeavenlyStem, Polarity
from saju.hidden_stems import principal_stem
from saju.pillars import YEAR_EPOCH, FourPillars, day_offset
from saju.ten_gods import TenGod, ten_god

logger = logging.getLogger(__name__)

DAEUN_COUNT = 10
SEUN_COUNT = 10
SEUN_LEAD = 2
ILUN_RADIUS = 15

# Traditional conversion: 3 days between birth and the solar term ≈ 1 year of luck
DAYS_PER_LUCK_YEAR = 3


class _CyclePeriod:
    """Stem/branch accessors shared by every luck period."""

    offset: CycleOffset

    @property
    def stem(self) -> HeavenlyStem:
        return HEAVENLY_STEMS[self.offset.stem_index]

    @property
    def branch(self) -> EarthlyBranch:
        return EARTHLY_BRANCHES[self.offset.branch_index]

    def _pillar_dict(self):
        return {
            "stem": self.stem.to_dict(),
            "branch": self.branch.to_dict(),
            "combined": f"{self.stem.hanja}{self.branch.hanja}",
            "korean": f"{self.stem.korean}{self.branch.korean}",
        }


@dataclass(frozen=True)
class LuckPeriod(_CyclePeriod):
    index: int
    start_age: int
    end_age: int
    offset: CycleOffset
    relation: TenGod
    branch_relation: TenGod  # ten god of the branch's principal hidden stem
    is_current: bool

    def to_dict(self):
        return {
            "index": self.index,
            "start_age": self.start_age,
            "end_age": self.end_age,
            **self._pillar_dict(),
            "relation": self.relation.value,
            "relation_ko": self.relation.korean,
            "branch_relation": self.branch_relation.value,
            "is_current": self.is_current,
        }


@dataclass(frozen=True)
class AnnualPeriod(_CyclePeriod):
    year: int
    age: int
    offset: CycleOffset
    relation: TenGod
    is_current: bool

    def to_dict(self):
        return {
            "year": self.year,
            "age": self.age,
            **self._pillar_dict(),
            "relation": self.relation.value,
            "relation_ko": self.relation.korean,
            "is_current": self.is_current,
        }


@dataclass(frozen=True)
class DailyPeriod(_CyclePeriod):
    date: date
    offset: CycleOffset
    relation: TenGod
    is_current: bool

    def to_dict(self):
        return {
            **day_of_week(self.date),
            **self._pillar_dict(),
            "relation": self.relation.value,
            "relation_ko": self.relation.korean,
            "is_current": self.is_current,
        }


# ============================================================
# 대운 (DECADE LUCK)
# ============================================================

def is_forward(gender: Gender, year_stem: HeavenlyStem) -> bool:
    """
    Yang year + male or yin year + female count forward through the
    cycle; the other two combinations count backward.
    """
    yang = year_stem.polarity is Polarity.YANG
    return (gender is Gender.MALE and yang) or (gender is Gender.FEMALE and not yang)


def days_to_boundary(birth_date: date, forward: bool) -> int:
    """
    Days from birth to the neighbouring month cutoff in the luck direction.

    Forward counts the rest of the birth month plus the next month's cutoff
    day. Backward counts back to the birth month's own cutoff, or through
    the previous month to its cutoff when birth precedes it.
    """
    year, month, day = birth_date.year, birth_date.month, birth_date.day
    if forward:
        next_month = month % 12 + 1
        return (days_in_month(year, month) - day) + JEOLGI_DAYS[next_month]

    this_cutoff = JEOLGI_DAYS[month]
    if day >= this_cutoff:
        return day - this_cutoff
    prev_month = 12 if month == 1 else month - 1
    prev_year = year - 1 if month == 1 else year
    return day + (days_in_month(prev_year, prev_month) - JEOLGI_DAYS[prev_month])


def luck_start_age(birth_date: date, forward: bool) -> int:
    return round(days_to_boundary(birth_date, forward) / DAYS_PER_LUCK_YEAR)


def compute_daeun(pillars: FourPillars, birth_date: date, gender: Gender,
                  current_age: int, count: int = DAEUN_COUNT) -> list[LuckPeriod]:
    """
    Compute Luck Pillars (대운 Daeun).

    Args:
        pillars: natal pillars; the month pillar is the starting point
        birth_date: solar birth date
        gender: decides the direction together with the year stem polarity
        current_age: age used for the is_current flag
        count: how many ten-year periods to produce

    Returns:
        LuckPeriod list; period i covers ages
        [start + (i-1)*10, start + (i-1)*10 + 9].
    """
    forward = is_forward(gender, pillars.year.stem)
    start_age = luck_start_age(birth_date, forward)
    day_master = pillars.day.stem
    logger.debug("Daeun direction=%s start_age=%d", "forward" if forward else "reverse", start_age)

    periods = []
    for i in range(1, count + 1):
        offset = pillars.month.offset.shift(i if forward else -i)
        age_start = start_age + (i - 1) * 10
        age_end = age_start + 9
        branch = EARTHLY_BRANCHES[offset.branch_index]
        periods.append(LuckPeriod(
            index=i,
            start_age=age_start,
            end_age=age_end,
            offset=offset,
            relation=ten_god(day_master, HEAVENLY_STEMS[offset.stem_index]),
            branch_relation=ten_god(day_master, principal_stem(branch)),
            is_current=age_start <= current_age <= age_end,
        ))
    return periods


# ============================================================
# 세운 (ANNUAL LUCK)
# ============================================================

def annual_offset(year: int) -> CycleOffset:
    return CycleOffset(year - YEAR_EPOCH)


def compute_seun(day_master: HeavenlyStem, birth_year: int, current_year: int,
                 start_year: Optional[int] = None,
                 count: int = SEUN_COUNT) -> list[AnnualPeriod]:
    """
    Annual pillars for a window of years.

    The window starts SEUN_LEAD years before current_year unless
    start_year is given. Age uses East-Asian reckoning (born at age 1).
    """
    if start_year is None:
        start_year = current_year - SEUN_LEAD

    periods = []
    for year in range(start_year, start_year + count):
        offset = annual_offset(year)
        periods.append(AnnualPeriod(
            year=year,
            age=year - birth_year + 1,
            offset=offset,
            relation=ten_god(day_master, HEAVENLY_STEMS[offset.stem_index]),
            is_current=year == current_year,
        ))
    return periods


# ============================================================
# 일운 (DAILY LUCK)
# ============================================================

def compute_ilun(day_master: HeavenlyStem, today: date,
                 radius: int = ILUN_RADIUS) -> list[DailyPeriod]:
    """Day pillars for today ± radius days."""
    window = date_range(today - timedelta(days=radius), today + timedelta(days=radius))
    periods = []
    for d in window:
        offset = day_offset(d)
        periods.append(DailyPeriod(
            date=d,
            offset=offset,
            relation=ten_god(day_master, HEAVENLY_STEMS[offset.stem_index]),
            is_current=d == today,
        ))
    return periods
