import json

from saju.run import main


def test_prints_chart_json(capsys):
    code = main([
        "--birth-date", "1990-05-15", "--birth-hour", "8",
        "--gender", "male", "--now", "1990-12-31",
    ])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert [p["combined"] for p in data["pillars"]] == ["庚辰", "庚辰", "辛巳", "庚午"]
    assert data["birth"]["unknown_time"] is False


def test_unknown_time_flag(capsys):
    assert main(["--birth-date", "1990-05-15", "--unknown-time", "--gender", "female",
                 "--now", "2026-10-19"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["pillars"][0]["is_unknown"] is True


def test_invalid_date_reports_error(capsys):
    code = main(["--birth-date", "1990-02-30", "--birth-hour", "8", "--gender", "male",
                 "--now", "2026-10-19"])
    assert code == 2
    assert "not a valid date" in capsys.readouterr().err


def test_lunar_without_converter_reports_error(capsys):
    code = main(["--birth-date", "1990-04-21", "--birth-hour", "8", "--gender", "male",
                 "--calendar", "lunar", "--now", "2026-10-19"])
    assert code == 2
    assert "converter" in capsys.readouterr().err
