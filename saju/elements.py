"""
Stems, branches, and their five-element / yin-yang classification.

All tables are module-level tuples of frozen dataclasses indexed by the
cycle position, so lookups are total and nothing here is mutable.
"""

from dataclasses import dataclass
from enum import Enum


# ============================================================
# FUNDAMENTAL DATA STRUCTURES
# ============================================================

class Polarity(Enum):
    YANG = "yang"
    YIN = "yin"


class Element(Enum):
    WOOD = "wood"
    FIRE = "fire"
    EARTH = "earth"
    METAL = "metal"
    WATER = "water"

    @property
    def order(self) -> int:
        return ELEMENT_ORDER.index(self)

    def generates(self) -> "Element":
        return ELEMENT_ORDER[(self.order + 1) % 5]

    def controls(self) -> "Element":
        return ELEMENT_ORDER[(self.order + 2) % 5]


# Generation order: Wood → Fire → Earth → Metal → Water → Wood
ELEMENT_ORDER = (Element.WOOD, Element.FIRE, Element.EARTH, Element.METAL, Element.WATER)

ELEMENT_HANJA = {
    Element.WOOD: "木",
    Element.FIRE: "火",
    Element.EARTH: "土",
    Element.METAL: "金",
    Element.WATER: "水",
}

ELEMENT_KO = {
    Element.WOOD: "목",
    Element.FIRE: "화",
    Element.EARTH: "토",
    Element.METAL: "금",
    Element.WATER: "수",
}


@dataclass(frozen=True)
class HeavenlyStem:
    hanja: str
    korean: str
    pinyin: str
    element: Element
    index: int  # 0-9 in the cycle

    @property
    def polarity(self) -> Polarity:
        return Polarity.YANG if self.index % 2 == 0 else Polarity.YIN

    def __str__(self):
        return f"{self.hanja}({self.korean}) {self.polarity.value} {self.element.value}"

    def to_dict(self):
        return {
            "hanja": self.hanja,
            "korean": self.korean,
            "pinyin": self.pinyin,
            "element": self.element.value,
            "element_hanja": ELEMENT_HANJA[self.element],
            "element_ko": ELEMENT_KO[self.element],
            "polarity": self.polarity.value,
        }


@dataclass(frozen=True)
class EarthlyBranch:
    hanja: str
    korean: str
    pinyin: str
    animal: str
    element: Element  # season element
    index: int  # 0-11 in the cycle

    @property
    def polarity(self) -> Polarity:
        return Polarity.YANG if self.index % 2 == 0 else Polarity.YIN

    def __str__(self):
        return f"{self.hanja}({self.korean}) {self.animal}"

    def to_dict(self):
        return {
            "hanja": self.hanja,
            "korean": self.korean,
            "pinyin": self.pinyin,
            "animal": self.animal,
            "element": self.element.value,
            "element_hanja": ELEMENT_HANJA[self.element],
            "element_ko": ELEMENT_KO[self.element],
        }


# ============================================================
# STEM AND BRANCH DEFINITIONS
# ============================================================

HEAVENLY_STEMS = (
    HeavenlyStem("甲", "갑", "Jia", Element.WOOD, 0),
    HeavenlyStem("乙", "을", "Yi", Element.WOOD, 1),
    HeavenlyStem("丙", "병", "Bing", Element.FIRE, 2),
    HeavenlyStem("丁", "정", "Ding", Element.FIRE, 3),
    HeavenlyStem("戊", "무", "Wu", Element.EARTH, 4),
    HeavenlyStem("己", "기", "Ji", Element.EARTH, 5),
    HeavenlyStem("庚", "경", "Geng", Element.METAL, 6),
    HeavenlyStem("辛", "신", "Xin", Element.METAL, 7),
    HeavenlyStem("壬", "임", "Ren", Element.WATER, 8),
    HeavenlyStem("癸", "계", "Gui", Element.WATER, 9),
)

EARTHLY_BRANCHES = (
    EarthlyBranch("子", "자", "Zi", "Rat", Element.WATER, 0),
    EarthlyBranch("丑", "축", "Chou", "Ox", Element.EARTH, 1),
    EarthlyBranch("寅", "인", "Yin", "Tiger", Element.WOOD, 2),
    EarthlyBranch("卯", "묘", "Mao", "Rabbit", Element.WOOD, 3),
    EarthlyBranch("辰", "진", "Chen", "Dragon", Element.EARTH, 4),
    EarthlyBranch("巳", "사", "Si", "Snake", Element.FIRE, 5),
    EarthlyBranch("午", "오", "Wu", "Horse", Element.FIRE, 6),
    EarthlyBranch("未", "미", "Wei", "Goat", Element.EARTH, 7),
    EarthlyBranch("申", "신", "Shen", "Monkey", Element.METAL, 8),
    EarthlyBranch("酉", "유", "You", "Rooster", Element.METAL, 9),
    EarthlyBranch("戌", "술", "Xu", "Dog", Element.EARTH, 10),
    EarthlyBranch("亥", "해", "Hai", "Pig", Element.WATER, 11),
)

# Lookup helpers
STEM_BY_HANJA = {s.hanja: s for s in HEAVENLY_STEMS}
BRANCH_BY_HANJA = {b.hanja: b for b in EARTHLY_BRANCHES}


def stem_element(stem: HeavenlyStem) -> Element:
    return stem.element


def branch_element(branch: EarthlyBranch) -> Element:
    return branch.element
