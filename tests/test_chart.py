import json
from datetime import date, datetime

import pytest

from saju.birth import BirthInput
from saju.chart import compute_chart
from saju.errors import CalendarUnsupported, InvalidInput
from saju.ten_gods import SELF_MARKER, TenGod

NOW = date(1990, 12, 31)


@pytest.fixture
def birth():
    return BirthInput.create(1990, 5, 15, hour=8, gender="male")


def test_regression_chart(birth):
    chart = compute_chart(birth, now=NOW)

    assert [p.position for p in chart.pillars] == ["hour", "day", "month", "year"]
    assert [str(p.pillar) for p in chart.pillars] == ["庚辰", "庚辰", "辛巳", "庚午"]
    assert chart.day_master.hanja == "庚"

    assert chart.day.relation == SELF_MARKER
    assert chart.hour.relation is TenGod.PEER_SAME
    assert chart.month.relation is TenGod.PEER_RIVAL
    assert chart.year.relation is TenGod.PEER_SAME

    assert [h.stem.hanja for h in chart.day.hidden_stems] == ["乙", "癸", "戊"]
    assert chart.day.hidden_relations == (
        TenGod.WEALTH_DIRECT, TenGod.OUTPUT_INDIRECT, TenGod.RESOURCE_INDIRECT,
    )

    assert chart.daeun[0].start_age == 7
    assert chart.current_daeun() is None
    assert [s.year for s in chart.seun if s.is_current] == [1990]
    assert [d.date for d in chart.ilun if d.is_current] == [NOW]


def test_element_distribution(birth):
    chart = compute_chart(birth, now=NOW)
    assert chart.element_distribution() == {
        "wood": 1.0, "fire": 3.5, "earth": 4.0, "metal": 4.5, "water": 1.0,
    }


def test_current_age_override(birth):
    chart = compute_chart(birth, now=NOW, current_age=20)
    assert chart.current_daeun().index == 2


def test_default_age_from_now(birth):
    chart = compute_chart(birth, now=date(2026, 10, 19))
    assert chart.current_daeun().start_age == 27
    assert [s.year for s in chart.seun if s.is_current] == [2026]


def test_datetime_now_accepted(birth):
    assert compute_chart(birth, now=datetime(1990, 12, 31, 23, 59)) == compute_chart(birth, now=NOW)


def test_deterministic(birth):
    first = compute_chart(birth, now=NOW)
    second = compute_chart(BirthInput.create(1990, 5, 15, hour=8, gender="male"), now=NOW)
    assert first == second
    assert first.to_dict() == second.to_dict()


@pytest.mark.parametrize("hour", [None, 0, 8, 12, 23, -1, 24, 99])
def test_unknown_time_suppresses_hour_outputs(hour):
    birth = BirthInput.create(1990, 5, 15, hour=hour, gender="male", unknown_time=True)
    chart = compute_chart(birth, now=NOW)

    assert chart.hour.relation == SELF_MARKER
    assert chart.hour.hidden_stems == ()
    assert chart.hour.hidden_relations == ()
    assert chart.hour.is_unknown
    assert chart.to_dict()["pillars"][0]["hidden_stems"] == []
    assert chart.to_dict()["pillars"][0]["relation"] == "day-master"


def test_unknown_time_leaves_other_pillars_alone(birth):
    known = compute_chart(birth, now=NOW)
    unknown = compute_chart(
        BirthInput.create(1990, 5, 15, gender="male", unknown_time=True), now=NOW,
    )
    assert unknown.pillars[1:] == known.pillars[1:]
    assert unknown.daeun == known.daeun


def test_unknown_time_excluded_from_distribution():
    chart = compute_chart(BirthInput.create(1990, 5, 15, gender="male", unknown_time=True), now=NOW)
    assert sum(chart.element_distribution().values()) == pytest.approx(6 + 0.5 * 9)


def test_lunar_without_converter_is_rejected():
    birth = BirthInput.create(1990, 4, 21, hour=8, gender="male", calendar="lunar")
    with pytest.raises(CalendarUnsupported):
        compute_chart(birth, now=NOW)


def test_lunar_with_converter(birth):
    lunar = BirthInput.create(1990, 4, 21, hour=8, gender="male", calendar="lunar")
    calls = []

    def converter(year, month, day):
        calls.append((year, month, day))
        return date(1990, 5, 15)

    chart = compute_chart(lunar, now=NOW, lunar_converter=converter)
    assert calls == [(1990, 4, 21)]
    assert chart.pillars == compute_chart(birth, now=NOW).pillars
    assert chart.solar_date == date(1990, 5, 15)
    assert chart.to_dict()["birth"]["calendar"] == "lunar"
    assert (chart.birth.month, chart.birth.day) == (4, 21)


def test_lunar_converter_out_of_range():
    lunar = BirthInput.create(1900, 1, 1, hour=8, gender="male", calendar="lunar")
    with pytest.raises(InvalidInput):
        compute_chart(lunar, now=NOW, lunar_converter=lambda y, m, d: date(1899, 12, 31))


def test_chart_is_frozen(birth):
    chart = compute_chart(birth, now=NOW)
    with pytest.raises(AttributeError):
        chart.day_master = None


def test_to_dict_is_json_ready(birth):
    data = compute_chart(birth, now=NOW).to_dict()
    text = json.dumps(data, ensure_ascii=False)
    assert "庚辰" in text
    assert data["pillars"][2]["relation_ko"] == "겁재"
    assert len(data["daeun"]) == 10
    assert len(data["seun"]) == 10
    assert len(data["ilun"]) == 31


def test_unknown_time_placeholder_hour_is_echoed():
    birth = BirthInput.create(1990, 5, 15, hour=99, gender="male", unknown_time=True)
    chart = compute_chart(birth, now=NOW)
    assert chart.birth.hour == 99
    assert chart.to_dict()["birth"]["hour"] == 99
    assert birth.record_key()["birth_hour"] is None


def test_direct_construction_drives_the_same_chart():
    direct = BirthInput(1990, 5, 15, 8, "male")
    chart = compute_chart(direct, now=NOW)
    assert direct == BirthInput.create(1990, 5, 15, hour=8, gender="male")
    assert chart.daeun[0].start_age == 7
    assert chart.daeun[0].stem.hanja + chart.daeun[0].branch.hanja == "壬午"


def test_lunar_ages_follow_converted_solar_year():
    lunar = BirthInput.create(1989, 12, 20, hour=8, gender="male", calendar="lunar")
    chart = compute_chart(lunar, now=NOW, lunar_converter=lambda y, m, d: date(1990, 1, 15))
    assert chart.birth.year == 1989
    assert chart.seun[2].year == 1990
    assert chart.seun[2].age == 1
