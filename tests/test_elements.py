from saju.elements import (
    BRANCH_BY_HANJA, EARTHLY_BRANCHES, ELEMENT_ORDER, HEAVENLY_STEMS, STEM_BY_HANJA,
    Element, Polarity,
)
from saju.hidden_stems import HIDDEN_STEMS, SubPeriod, hidden_stems_for, principal_stem


def test_stem_polarity_follows_index_parity():
    for stem in HEAVENLY_STEMS:
        expected = Polarity.YANG if stem.index % 2 == 0 else Polarity.YIN
        assert stem.polarity is expected


def test_stems_pair_up_by_element():
    for i, element in enumerate(ELEMENT_ORDER):
        assert HEAVENLY_STEMS[2 * i].element is element
        assert HEAVENLY_STEMS[2 * i + 1].element is element


def test_branch_elements():
    expected = {
        "子": Element.WATER, "丑": Element.EARTH, "寅": Element.WOOD, "卯": Element.WOOD,
        "辰": Element.EARTH, "巳": Element.FIRE, "午": Element.FIRE, "未": Element.EARTH,
        "申": Element.METAL, "酉": Element.METAL, "戌": Element.EARTH, "亥": Element.WATER,
    }
    assert {b.hanja: b.element for b in EARTHLY_BRANCHES} == expected


def test_generation_and_control_cycles():
    assert Element.WOOD.generates() is Element.FIRE
    assert Element.WATER.generates() is Element.WOOD
    assert Element.WOOD.controls() is Element.EARTH
    assert Element.FIRE.controls() is Element.METAL
    assert Element.METAL.controls() is Element.WOOD


def test_lookup_by_hanja():
    assert STEM_BY_HANJA["庚"].index == 6
    assert BRANCH_BY_HANJA["午"].animal == "Horse"


def test_hidden_stems_fill_thirty_days_and_end_on_principal():
    for branch in EARTHLY_BRANCHES:
        entries = hidden_stems_for(branch)
        assert 2 <= len(entries) <= 3
        assert sum(e.days for e in entries) == 30
        assert entries[0].period is SubPeriod.EARLY
        assert entries[-1].period is SubPeriod.PRINCIPAL


def test_hidden_stem_contents():
    assert [e.stem.hanja for e in HIDDEN_STEMS[4]] == ["乙", "癸", "戊"]
    assert [e.stem.hanja for e in hidden_stems_for(BRANCH_BY_HANJA["午"])] == ["丙", "己", "丁"]
    assert principal_stem(BRANCH_BY_HANJA["子"]).hanja == "癸"
    assert principal_stem(BRANCH_BY_HANJA["寅"]).hanja == "甲"


def test_serialised_element_names():
    data = STEM_BY_HANJA["甲"].to_dict()
    assert (data["element"], data["element_hanja"], data["element_ko"]) == ("wood", "木", "목")
    assert BRANCH_BY_HANJA["子"].to_dict()["element_ko"] == "수"
