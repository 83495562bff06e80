"""
Four Pillars (사주팔자) chart engine.

Pure, deterministic computation of pillars, hidden stems, ten gods and
luck timelines from a birth date and time.
"""

from saju.birth import BirthInput, CalendarType, Gender
from saju.chart import Chart, PillarDetail, compute_chart, element_distribution
from saju.cycle import CycleOffset, from_offset
from saju.elements import EARTHLY_BRANCHES, HEAVENLY_STEMS, Element, Polarity
from saju.errors import CalendarUnsupported, InvalidInput, SajuError
from saju.ten_gods import SELF_MARKER, TenGod, ten_god

__all__ = [
    "BirthInput",
    "CalendarType",
    "CalendarUnsupported",
    "Chart",
    "CycleOffset",
    "EARTHLY_BRANCHES",
    "Element",
    "Gender",
    "HEAVENLY_STEMS",
    "InvalidInput",
    "PillarDetail",
    "Polarity",
    "SELF_MARKER",
    "SajuError",
    "TenGod",
    "compute_chart",
    "element_distribution",
    "from_offset",
    "ten_god",
]
