"""
Four Pillars computation.

Converts a validated solar birth date and hour into the year, month,
day and hour pillars. Solar-term boundaries use the fixed cutoff days in
saju.astro_calendar rather than ephemeris instants.
"""

import logging
from dataclasses import dataclass
from datetime import date

from saju.astro_calendar import MONTH_START_DAY, YEAR_START_DAY, YEAR_START_MONTH, days_between
from saju.cycle import CycleOffset
from saju.elements import EARTHLY_BRANCHES, HEAVENLY_STEMS, EarthlyBranch, HeavenlyStem

logger = logging.getLogger(__name__)

# 2000-01-01 is 戊午, offset 54 in the cycle
DAY_EPOCH = date(2000, 1, 1)
DAY_EPOCH_OFFSET = 54

# Year 4 CE was 甲子, the start of the cycle
YEAR_EPOCH = 4


@dataclass(frozen=True)
class Pillar:
    position: str  # "year", "month", "day", "hour"
    offset: CycleOffset

    @property
    def stem(self) -> HeavenlyStem:
        return HEAVENLY_STEMS[self.offset.stem_index]

    @property
    def branch(self) -> EarthlyBranch:
        return EARTHLY_BRANCHES[self.offset.branch_index]

    def __str__(self):
        return f"{self.stem.hanja}{self.branch.hanja}"

    def to_dict(self):
        return {
            "position": self.position,
            "offset": self.offset.value,
            "stem": self.stem.to_dict(),
            "branch": self.branch.to_dict(),
            "combined": str(self),
            "korean": f"{self.stem.korean}{self.branch.korean}",
        }


@dataclass(frozen=True)
class FourPillars:
    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar
    solar_year: int

    def __iter__(self):
        return iter((self.year, self.month, self.day, self.hour))


# ============================================================
# PILLAR COMPUTATION
# ============================================================

def solar_year(year: int, month: int, day: int) -> int:
    """
    The pillar year starts at 입춘 (Li Chun), fixed here at Feb 4.
    Births before it belong to the previous year.
    """
    if month < YEAR_START_MONTH or (month == YEAR_START_MONTH and day < YEAR_START_DAY):
        return year - 1
    return year


def year_pillar(year: int, month: int, day: int) -> Pillar:
    return Pillar("year", CycleOffset(solar_year(year, month, day) - YEAR_EPOCH))


def month_pillar(year: int, month: int, day: int) -> Pillar:
    """
    Compute the Month Pillar.

    The Tiger month (branch 2) stem is fixed by the year stem
    (Five Tigers rule: 甲/己 → 丙, 乙/庚 → 戊, 丙/辛 → 庚, 丁/壬 → 壬, 戊/癸 → 甲),
    and each later month advances stem and branch together. Months turn
    on day 5 of the Gregorian month.
    """
    year_stem_index = CycleOffset(solar_year(year, month, day) - YEAR_EPOCH).stem_index
    tiger_stem = (year_stem_index * 2 + 2) % 10

    months_from_tiger = month - 2
    if day < MONTH_START_DAY:
        months_from_tiger -= 1
    months_from_tiger %= 12

    stem_index = (tiger_stem + months_from_tiger) % 10
    branch_index = (2 + months_from_tiger) % 12
    return Pillar("month", CycleOffset.from_indices(stem_index, branch_index))


def day_offset(d: date) -> CycleOffset:
    """Cycle offset of a calendar day, counted from the 2000-01-01 epoch."""
    return CycleOffset(DAY_EPOCH_OFFSET + days_between(DAY_EPOCH, d))


def day_pillar(d: date) -> Pillar:
    return Pillar("day", day_offset(d))


def hour_branch_index(hour: int) -> int:
    """
    Two-hour windows centred on even hours:
    23:00-00:59 = 子 (0), 01:00-02:59 = 丑 (1), ... 21:00-22:59 = 亥 (11).
    """
    return ((hour + 1) // 2) % 12


def hour_pillar(day_stem_index: int, hour: int) -> Pillar:
    """
    Compute the Hour Pillar using the Five Rats rule: the 子 hour stem is
    fixed by the day stem (甲/己 → 甲, 乙/庚 → 丙, 丙/辛 → 戊, 丁/壬 → 庚, 戊/癸 → 壬).
    """
    branch_index = hour_branch_index(hour)
    rat_stem = (day_stem_index * 2) % 10
    stem_index = (rat_stem + branch_index) % 10
    return Pillar("hour", CycleOffset.from_indices(stem_index, branch_index))


def compute_pillars(birth_date: date, hour: int) -> FourPillars:
    """
    Compute all four pillars for a solar birth date.

    Args:
        birth_date: solar calendar date of birth
        hour: hour in 24h format (0-23)
    """
    yp = year_pillar(birth_date.year, birth_date.month, birth_date.day)
    mp = month_pillar(birth_date.year, birth_date.month, birth_date.day)
    dp = day_pillar(birth_date)
    hp = hour_pillar(dp.offset.stem_index, hour)

    logger.debug("Pillars for %s %02d:00 -> %s %s %s %s", birth_date, hour, yp, mp, dp, hp)
    return FourPillars(
        year=yp,
        month=mp,
        day=dp,
        hour=hp,
        solar_year=solar_year(birth_date.year, birth_date.month, birth_date.day),
    )
