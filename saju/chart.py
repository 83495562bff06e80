"""
Chart assembly.

Computes the four pillars, enriches each with elements, hidden stems and
its ten god, and attaches the three luck timelines. The result is a
frozen Chart built fresh per call.

Usage from Python:
    from datetime import date
    from saju import BirthInput, compute_chart
    birth = BirthInput.create(1990, 5, 15, hour=8, gender="male")
    chart = compute_chart(birth, now=date(2026, 10, 19))
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional, Union

from saju.birth import MAX_YEAR, MIN_YEAR, BirthInput
from saju.elements import (
    ELEMENT_ORDER, Element, EarthlyBranch, HeavenlyStem, branch_element, stem_element,
)
from saju.errors import CalendarUnsupported, InvalidInput
from saju.hidden_stems import HiddenStem, hidden_stems_for
from saju.luck import (
    DAEUN_COUNT, ILUN_RADIUS, SEUN_COUNT, AnnualPeriod, DailyPeriod, LuckPeriod,
    compute_daeun, compute_ilun, compute_seun,
)
from saju.pillars import Pillar, compute_pillars
from saju.ten_gods import SELF_MARKER, TenGod, relation_korean, relation_value, ten_god

logger = logging.getLogger(__name__)

# Hour used for the raw hour pillar when the birth time is unknown.
# Never visible through relations or hidden stems.
UNKNOWN_TIME_PLACEHOLDER_HOUR = 12

STEM_WEIGHT = 1.0
BRANCH_WEIGHT = 1.0
HIDDEN_STEM_WEIGHT = 0.5

LunarConverter = Callable[[int, int, int], date]


@dataclass(frozen=True)
class PillarDetail:
    pillar: Pillar
    relation: Union[TenGod, str]  # TenGod, or SELF_MARKER for day / unknown hour
    hidden_stems: tuple[HiddenStem, ...]
    hidden_relations: tuple[TenGod, ...]
    is_unknown: bool = False

    @property
    def position(self) -> str:
        return self.pillar.position

    @property
    def stem(self) -> HeavenlyStem:
        return self.pillar.stem

    @property
    def branch(self) -> EarthlyBranch:
        return self.pillar.branch

    @property
    def stem_element(self) -> Element:
        return stem_element(self.pillar.stem)

    @property
    def branch_element(self) -> Element:
        return branch_element(self.pillar.branch)

    def to_dict(self):
        return {
            **self.pillar.to_dict(),
            "relation": relation_value(self.relation),
            "relation_ko": relation_korean(self.relation),
            "hidden_stems": [
                {**h.to_dict(), "relation": r.value}
                for h, r in zip(self.hidden_stems, self.hidden_relations)
            ],
            "is_unknown": self.is_unknown,
        }


@dataclass(frozen=True)
class Chart:
    pillars: tuple[PillarDetail, ...]  # hour, day, month, year
    day_master: HeavenlyStem
    daeun: tuple[LuckPeriod, ...]
    seun: tuple[AnnualPeriod, ...]
    ilun: tuple[DailyPeriod, ...]
    birth: BirthInput
    solar_date: date

    def pillar(self, position: str) -> PillarDetail:
        for p in self.pillars:
            if p.position == position:
                return p
        raise KeyError(position)

    @property
    def hour(self) -> PillarDetail:
        return self.pillar("hour")

    @property
    def day(self) -> PillarDetail:
        return self.pillar("day")

    @property
    def month(self) -> PillarDetail:
        return self.pillar("month")

    @property
    def year(self) -> PillarDetail:
        return self.pillar("year")

    def current_daeun(self) -> Optional[LuckPeriod]:
        return next((p for p in self.daeun if p.is_current), None)

    def element_distribution(self) -> dict:
        return element_distribution(self.pillars)

    def to_dict(self):
        return {
            "birth": self.birth.to_dict(),
            "solar_date": self.solar_date.isoformat(),
            "day_master": {
                **self.day_master.to_dict(),
                "description": str(self.day_master),
            },
            "pillars": [p.to_dict() for p in self.pillars],
            "element_distribution": self.element_distribution(),
            "daeun": [p.to_dict() for p in self.daeun],
            "seun": [p.to_dict() for p in self.seun],
            "ilun": [p.to_dict() for p in self.ilun],
        }


# ============================================================
# ELEMENT DISTRIBUTION
# ============================================================

def element_distribution(pillars) -> dict:
    """
    Count element presence across pillars.

    Visible stems and branches weigh 1.0, each hidden stem 0.5. An hour
    pillar with unknown time contributes nothing.
    """
    distribution = {e.value: 0.0 for e in ELEMENT_ORDER}
    for detail in pillars:
        if detail.is_unknown:
            continue
        distribution[detail.stem_element.value] += STEM_WEIGHT
        distribution[detail.branch_element.value] += BRANCH_WEIGHT
        for hidden in detail.hidden_stems:
            distribution[hidden.stem.element.value] += HIDDEN_STEM_WEIGHT
    return distribution


# ============================================================
# CHART COMPUTATION
# ============================================================

def resolve_solar_date(birth: BirthInput,
                       lunar_converter: Optional[LunarConverter] = None) -> date:
    """
    Solar date the pillars are computed from.

    Raises:
        CalendarUnsupported: lunar birth with no converter supplied
        InvalidInput: converter result outside the supported range
    """
    if not birth.is_lunar:
        return birth.as_date()
    if lunar_converter is None:
        raise CalendarUnsupported(
            f"lunar date {birth.year}-{birth.month:02d}-{birth.day:02d} "
            "needs a lunar-to-solar converter"
        )
    solar = lunar_converter(birth.year, birth.month, birth.day)
    if not MIN_YEAR <= solar.year <= MAX_YEAR:
        raise InvalidInput(f"converted solar date {solar} is outside {MIN_YEAR}-{MAX_YEAR}")
    logger.debug("Converted lunar %d-%02d-%02d to solar %s",
                 birth.year, birth.month, birth.day, solar)
    return solar


def _detail(pillar: Pillar, day_master: HeavenlyStem, relation=None,
            suppressed: bool = False) -> PillarDetail:
    if suppressed:
        return PillarDetail(pillar, SELF_MARKER, (), (), is_unknown=True)
    hidden = hidden_stems_for(pillar.branch)
    return PillarDetail(
        pillar=pillar,
        relation=relation if relation is not None else ten_god(day_master, pillar.stem),
        hidden_stems=hidden,
        hidden_relations=tuple(ten_god(day_master, h.stem) for h in hidden),
    )


def compute_chart(birth: BirthInput, now: Union[date, datetime],
                  current_age: Optional[int] = None,
                  lunar_converter: Optional[LunarConverter] = None,
                  daeun_count: int = DAEUN_COUNT,
                  seun_count: int = SEUN_COUNT,
                  ilun_radius: int = ILUN_RADIUS) -> Chart:
    """
    Compute a full chart from validated birth data.

    Args:
        birth: validated BirthInput
        now: reference instant for every is_current flag and the
             annual/daily windows
        current_age: overrides now.year - solar birth year for the decade flag.
             Lunar input uses the converted solar year here and for Seun ages,
             not the lunar year echoed in Chart.birth.
        lunar_converter: (year, month, day) -> solar date, required for
             lunar input
        daeun_count, seun_count, ilun_radius: timeline sizes

    Returns:
        Chart with pillars ordered hour, day, month, year.
    """
    if isinstance(now, datetime):
        now = now.date()
    solar = resolve_solar_date(birth, lunar_converter)

    hour = UNKNOWN_TIME_PLACEHOLDER_HOUR if birth.unknown_time else birth.hour
    pillars = compute_pillars(solar, hour)
    day_master = pillars.day.stem

    details = (
        _detail(pillars.hour, day_master, suppressed=birth.unknown_time),
        _detail(pillars.day, day_master, relation=SELF_MARKER),
        _detail(pillars.month, day_master),
        _detail(pillars.year, day_master),
    )

    if current_age is None:
        current_age = now.year - solar.year

    daeun = compute_daeun(pillars, solar, birth.gender, current_age, count=daeun_count)
    seun = compute_seun(day_master, solar.year, now.year, count=seun_count)
    ilun = compute_ilun(day_master, now, radius=ilun_radius)

    logger.debug("Chart assembled: day master %s, %d daeun, %d seun, %d ilun",
                 day_master.hanja, len(daeun), len(seun), len(ilun))
    return Chart(
        pillars=details,
        day_master=day_master,
        daeun=tuple(daeun),
        seun=tuple(seun),
        ilun=tuple(ilun),
        birth=birth,
        solar_date=solar,
    )
