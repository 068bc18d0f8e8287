# tests/test_cli.py

import pytest

from chinesecalendar import cli

def test_to_date(capsys):
    assert cli.main(["to-date", "漢平帝元始元年二月己酉"]) == 0
    assert capsys.readouterr().out.strip() == "1年4月3日"

def test_to_date_iso_bce(capsys):
    assert cli.main(["to-date", "--iso", "漢武帝後元二年二月戊辰"]) == 0
    assert capsys.readouterr().out.strip() == "-0086-03-30"

def test_from_date(capsys):
    assert cli.main(["from-date", "237年4月13日"]) == 0
    assert capsys.readouterr().out.split() == [
        "魏明帝景初元年四月初一",
        "蜀後主建興十五年三月初一",
        "吳大帝嘉禾六年三月初一",
    ]

def test_from_date_uncovered(capsys):
    assert cli.main(["from-date", "1000年1月1日"]) == 1
    assert "no era" in capsys.readouterr().err

def test_shortcut(capsys):
    assert cli.main(["公元前1年10月17日"]) == 0
    assert "漢哀帝元壽二年九月" in capsys.readouterr().out
    assert cli.main(["魏明帝景初元年四月初一"]) == 0
    assert capsys.readouterr().out.strip() == "237年4月13日"

def test_month_length_and_sexagenaries(capsys):
    assert cli.main(["month-length", "漢平帝元始元年正月"]) == 0
    assert capsys.readouterr().out.strip() == "30"
    assert cli.main(["sexagenaries", "辛酉", "5"]) == 0
    assert capsys.readouterr().out.strip() == "辛酉 壬戌 癸亥 甲子 乙丑"

def test_eras(capsys):
    assert cli.main(["eras"]) == 0
    names = capsys.readouterr().out.split()
    assert names[0] == "秦孝文王"
    assert "魏明帝景初" in names

def test_sanity(capsys):
    assert cli.main(["sanity"]) == 0
    assert capsys.readouterr().out.strip() == "ok"

@pytest.mark.parametrize("argv", [
    ["to-date", "唐太宗貞觀元年"],
    ["to-date", "魏明帝景初元年二月初一"],
    ["from-date", "237-04-13"],
    ["--calendar", "nope", "eras"],
])
def test_errors_exit_2(argv, capsys):
    assert cli.main(argv) == 2
    assert capsys.readouterr().err.startswith("error:")

def test_diag_new_years(capsys):
    assert cli.main(["diag", "new-years", "--from-year", "236", "--to-year", "238"]) == 0
    out = capsys.readouterr().out
    assert "02-13" in out       # 景初元年正月 in the court calendar
    assert "shu" in out.splitlines()[0]
