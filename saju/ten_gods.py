"""
Ten Gods (십신): relation of any stem to the day-master.

The relation is fully determined by the element relationship (5 cases)
and whether the polarities match (2 cases).
"""

from enum import Enum

from saju.elements import Element, HeavenlyStem

# Shown in place of a ten god for the day pillar itself and for an
# hour pillar whose time is unknown.
SELF_MARKER = "day-master"
SELF_MARKER_KO = "일간"


class ElementRelation(Enum):
    SAME = "same"
    GENERATES = "generates"          # day-master produces the other
    GENERATED_BY = "generated_by"    # the other produces the day-master
    CONTROLS = "controls"            # day-master controls the other
    CONTROLLED_BY = "controlled_by"  # the other controls the day-master


class TenGod(Enum):
    PEER_SAME = "peer-same"
    PEER_RIVAL = "peer-rival"
    OUTPUT_DIRECT = "output-direct"
    OUTPUT_INDIRECT = "output-indirect"
    WEALTH_INDIRECT = "wealth-indirect"
    WEALTH_DIRECT = "wealth-direct"
    AUTHORITY_INDIRECT = "authority-indirect"
    AUTHORITY_DIRECT = "authority-direct"
    RESOURCE_INDIRECT = "resource-indirect"
    RESOURCE_DIRECT = "resource-direct"

    @property
    def hanja(self) -> str:
        return TEN_GOD_NAMES[self][0]

    @property
    def korean(self) -> str:
        return TEN_GOD_NAMES[self][1]

    @property
    def english(self) -> str:
        return TEN_GOD_NAMES[self][2]


TEN_GOD_NAMES = {
    TenGod.PEER_SAME: ("比肩", "비견", "Companion"),
    TenGod.PEER_RIVAL: ("劫財", "겁재", "Rob Wealth"),
    TenGod.OUTPUT_DIRECT: ("食神", "식신", "Eating God"),
    TenGod.OUTPUT_INDIRECT: ("傷官", "상관", "Hurting Officer"),
    TenGod.WEALTH_INDIRECT: ("偏財", "편재", "Indirect Wealth"),
    TenGod.WEALTH_DIRECT: ("正財", "정재", "Direct Wealth"),
    TenGod.AUTHORITY_INDIRECT: ("偏官", "편관", "Seven Killings"),
    TenGod.AUTHORITY_DIRECT: ("正官", "정관", "Direct Officer"),
    TenGod.RESOURCE_INDIRECT: ("偏印", "편인", "Indirect Resource"),
    TenGod.RESOURCE_DIRECT: ("正印", "정인", "Direct Resource"),
}

# (relationship, same_polarity): ten god
TEN_GODS = {
    (ElementRelation.SAME, True): TenGod.PEER_SAME,
    (ElementRelation.SAME, False): TenGod.PEER_RIVAL,
    (ElementRelation.GENERATES, True): TenGod.OUTPUT_DIRECT,
    (ElementRelation.GENERATES, False): TenGod.OUTPUT_INDIRECT,
    (ElementRelation.CONTROLS, True): TenGod.WEALTH_INDIRECT,
    (ElementRelation.CONTROLS, False): TenGod.WEALTH_DIRECT,
    (ElementRelation.CONTROLLED_BY, True): TenGod.AUTHORITY_INDIRECT,
    (ElementRelation.CONTROLLED_BY, False): TenGod.AUTHORITY_DIRECT,
    (ElementRelation.GENERATED_BY, True): TenGod.RESOURCE_INDIRECT,
    (ElementRelation.GENERATED_BY, False): TenGod.RESOURCE_DIRECT,
}


def element_relationship(day_master_element: Element, other_element: Element) -> ElementRelation:
    """Determine the elemental relationship from the day-master's perspective."""
    if day_master_element is other_element:
        return ElementRelation.SAME
    if day_master_element.generates() is other_element:
        return ElementRelation.GENERATES
    if other_element.generates() is day_master_element:
        return ElementRelation.GENERATED_BY
    if day_master_element.controls() is other_element:
        return ElementRelation.CONTROLS
    # other controls the day-master
    return ElementRelation.CONTROLLED_BY


def ten_god(day_master: HeavenlyStem, other: HeavenlyStem) -> TenGod:
    """
    Determine the Ten God relationship between the day-master and another stem.

    Args:
        day_master: the day-master stem
        other: the stem being evaluated

    Returns:
        TenGod label; a stem against itself is always PEER_SAME.
    """
    relationship = element_relationship(day_master.element, other.element)
    same_polarity = day_master.polarity == other.polarity
    return TEN_GODS[(relationship, same_polarity)]


def relation_value(relation) -> str:
    """Serialised form of a TenGod or the self marker."""
    return relation.value if isinstance(relation, TenGod) else relation


def relation_korean(relation) -> str:
    return relation.korean if isinstance(relation, TenGod) else SELF_MARKER_KO
