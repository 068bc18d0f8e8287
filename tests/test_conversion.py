# tests/test_conversion.py

import pytest

import chinesecalendar
from chinesecalendar.core.civil import CivilDate
from chinesecalendar.core.errors import DateOutOfEra, InvalidDayName, UnknownMonth, YearOutOfRange

# Dates from the historical record
HISTORICAL = [
    ("漢武帝後元二年二月戊辰", CivilDate(-86, 3, 30)),   # 漢昭帝即位
    ("漢昭帝元平元年四月癸未", CivilDate(-73, 6, 5)),    # 漢昭帝崩
    ("漢昭帝元平元年六月丙寅", CivilDate(-73, 7, 18)),
    ("漢昭帝元平元年六月癸巳", CivilDate(-73, 8, 14)),
    ("漢昭帝元平元年七月庚申", CivilDate(-73, 9, 10)),   # 漢宣帝即位
    ("漢宣帝黃龍元年十二月甲戌", CivilDate(-47, 1, 10)),
    ("漢哀帝元壽二年九月辛酉", CivilDate(0, 10, 17)),    # 漢平帝即位
]

# Dates from printed conversion tables
TABULATED = [
    ("漢平帝元始元年", CivilDate(1, 2, 12)),
    ("漢平帝元始二年", CivilDate(2, 2, 2)),
    ("漢平帝元始三年", CivilDate(3, 2, 21)),
    ("漢平帝元始元年一月朔", CivilDate(1, 2, 12)),
    ("漢平帝元始元年正月朔", CivilDate(1, 2, 12)),
    ("漢平帝元始元年正月初二", CivilDate(1, 2, 13)),
    ("漢平帝元始元年一月十一", CivilDate(1, 2, 22)),
    ("漢平帝元始元年一月晦", CivilDate(1, 3, 13)),
    ("漢平帝元始元年二月朔", CivilDate(1, 3, 14)),
    ("漢平帝元始元年二月十一", CivilDate(1, 3, 24)),
    ("漢平帝元始元年二月己丑", CivilDate(1, 3, 14)),
    ("漢平帝元始元年二月己亥", CivilDate(1, 3, 24)),
    ("漢平帝元始元年二月己酉", CivilDate(1, 4, 3)),
    ("漢平帝元始元年春二月己酉", CivilDate(1, 4, 3)),
    ("漢平帝元始元年三月廿一", CivilDate(1, 5, 2)),
    ("漢平帝元始四年二月十一", CivilDate(4, 3, 20)),
    ("魏明帝景初元年四月初一", CivilDate(237, 4, 13)),
    ("魏明帝景初三年後十二月初一", CivilDate(240, 1, 12)),
    ("晉武帝咸寧元年", CivilDate(275, 2, 13)),
]

@pytest.mark.parametrize("s,expected", HISTORICAL + TABULATED)
def test_to_date(cal, s, expected):
    assert cal.to_date(s) == expected

def test_to_date_accepts_parsed(cal):
    d = cal.parse("漢平帝元始元年二月己酉")
    assert cal.to_date(d) == CivilDate(1, 4, 3)

def test_module_api():
    assert chinesecalendar.to_date("漢平帝元始元年正月朔") == CivilDate(1, 2, 12)
    assert chinesecalendar.from_date("1年2月12日") == ["漢平帝元始元年正月初一"]
    assert chinesecalendar.month_length("漢平帝元始元年二月") == 29

def test_from_date(cal):
    assert cal.from_date(CivilDate(1, 2, 12)) == ["漢平帝元始元年正月初一"]
    assert cal.from_date(CivilDate(1, 2, 22)) == ["漢平帝元始元年正月十一"]

def test_from_date_three_kingdoms(cal):
    assert cal.from_date(CivilDate(237, 4, 13)) == [
        "魏明帝景初元年四月初一",
        "蜀後主建興十五年三月初一",
        "吳大帝嘉禾六年三月初一",
    ]
    assert cal.from_date("237年4月13日") == cal.from_date(CivilDate(237, 4, 13))

def test_from_date_uncovered(cal):
    assert cal.from_date(CivilDate(-300, 1, 1)) == []
    assert cal.from_date(CivilDate(1000, 1, 1)) == []

@pytest.mark.parametrize("s,n", [
    ("漢平帝元始元年正月", 30),
    ("漢平帝元始元年二月", 29),
    ("漢平帝元始元年十二月", 30),
    ("魏高貴鄉公甘露元年十二月", 29),
    ("吳會稽王太平元年十二月", 30),
])
def test_month_length(cal, s, n):
    assert cal.month_length(s) == n

def test_invalid_day(cal):
    # 二月 of 元始元年 has 29 days
    with pytest.raises(InvalidDayName):
        cal.to_date("漢平帝元始元年二月三十")
    assert cal.to_date("漢平帝元始元年二月三十", check=False) == CivilDate(1, 4, 12)

def test_date_out_of_era(cal):
    # 景初 begins in 四月; 237 has no 三月
    with pytest.raises(DateOutOfEra):
        cal.to_date("魏明帝景初元年二月初一")
    assert cal.to_date("魏明帝景初元年二月初一", check=False) == CivilDate(237, 3, 15)
    with pytest.raises(UnknownMonth):
        cal.to_date("魏明帝景初元年三月初一", check=False)

def test_placeholder_year(cal):
    with pytest.raises(YearOutOfRange):
        cal.to_date("齊和帝中興三年")
    with pytest.raises(YearOutOfRange):
        cal.to_date("北魏宣武帝景明九年")

def test_rollover(cal):
    # 元壽 has no third year; month navigation continues in 元始元年
    assert cal.to_date("漢哀帝元壽三年", check=False) == cal.to_date("漢平帝元始元年")

def test_year_sexagenary(cal):
    assert cal.year_sexagenary("漢平帝元始元年") == "辛酉"
    assert cal.year_sexagenary("魏明帝景初元年") == "丁巳"
    assert cal.year_sexagenary("蜀後主建興十五年") == "丁巳"
    assert cal.year_sexagenary("吳大帝嘉禾六年") == "丁巳"
    assert cal.year_sexagenary("漢武帝太初元年") == "丁丑"
    assert cal.year_sexagenary("漢武帝太初二年") == "戊寅"
    assert cal.year_sexagenary("北魏孝文帝太和元年") == "丁巳"

def test_sexagenary_first_day_of_month(cal):
    assert cal.sexagenary_first_day_of_month("漢平帝元始元年正月") == "己未"
    assert cal.sexagenary_first_day_of_month("漢平帝元始元年二月") == "己丑"

def test_sexagenaries():
    assert chinesecalendar.sexagenaries("辛酉", 5) == ["辛酉", "壬戌", "癸亥", "甲子", "乙丑"]

def test_day_info_attributes(cal):
    info = chinesecalendar.day_info("1年2月12日", attributes=("jdn", "weekday", "day_sexagenary"), calendar=cal)
    assert info.renderings == ("漢平帝元始元年正月初一",)
    assert info.attributes["jdn"] == 1721466
    assert info.attributes["day_sexagenary"] == "己未"
    assert info.attributes["weekday"] == 1721466 % 7
    with pytest.raises(KeyError):
        chinesecalendar.day_info("1年2月12日", attributes=("planet",), calendar=cal)

def test_render_first_month_and_year(cal):
    assert str(cal.parse("漢平帝元始元年閏正月")) == "漢平帝元始元年閏正月初一"
    assert str(cal.parse("漢平帝元始二年十一月")) == "漢平帝元始二年十一月初一"


def test_set_calendar_installs_default(cal):
    before = chinesecalendar.get_calendar()
    built = chinesecalendar.build_calendar("tongjian")
    try:
        chinesecalendar.set_calendar(built)
        assert chinesecalendar.get_calendar() is built
        assert chinesecalendar.to_date("漢平帝元始元年正月初一") == CivilDate(1, 2, 12)
    finally:
        chinesecalendar.set_calendar(before)
    with pytest.raises(KeyError):
        chinesecalendar.get_calendar("nonexistent")
