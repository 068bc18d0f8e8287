# tests/test_parser.py

import pytest

from chinesecalendar.core.errors import MalformedDateString, UnknownEra, UnknownMonth
from chinesecalendar.core.types import ChineseDate

def test_full_date(cal):
    assert cal.parse("漢平帝元始元年二月己酉") == ChineseDate("漢平帝元始", "一年", "二月", "己酉")
    assert cal.parse("魏明帝景初三年後十二月初一") == ChineseDate("魏明帝景初", "三年", "後十二月", "初一")
    assert cal.parse("晉孝武帝太元十年") == ChineseDate("晉孝武帝太元", "十年", "一月", "初一")

def test_day_tokens(cal):
    assert cal.parse("漢平帝元始元年正月朔").day_of_month == "初一"
    assert cal.parse("漢平帝元始元年一月晦").day_of_month == "晦"
    assert cal.parse("漢平帝元始元年三月廿一").day_of_month == "廿一"
    # a year followed directly by 朔 or 晦
    assert cal.parse("漢平帝元始元年晦") == ChineseDate("漢平帝元始", "一年", "一月", "晦")

def test_first_month_default(cal):
    # years before 太初 begin with 十月
    assert cal.parse("漢武帝元朔六年") == cal.parse("漢武帝元朔六年十月初一")
    assert cal.parse("漢武帝元朔六年").month == "十月"
    assert cal.parse("漢平帝元始元年") == cal.parse("漢平帝元始元年正月初一")

def test_month_forms(cal):
    assert cal.parse("漢平帝元始元年正月").month == "一月"
    d = cal.parse("漢平帝元始元年春二月己酉")
    assert d.month == "二月"
    assert d.season == "春"
    assert d == cal.parse("漢平帝元始元年二月己酉")
    assert cal.parse("漢平帝元始二年閏八月").month == "閏八月"

def test_year_numerals(cal):
    assert cal.parse("秦始皇二十六年").year == "二十六年"
    assert cal.parse("漢獻帝建安二十五年").year == "二十五年"
    assert cal.parse("漢武帝後元二年").era == "漢武帝後元"
    assert cal.parse("漢文帝後元年").era == "漢文帝後"
    assert cal.parse("吳大帝太元元年").era == "吳大帝太元"

def test_year_unit_zai(cal):
    d = cal.parse("漢平帝元始二載三月")
    assert d.year == "二載"
    assert cal.to_date(d) == cal.to_date("漢平帝元始二年三月")

def test_alias_resolves_to_canonical(cal):
    assert cal.parse("魏文帝三年").era == "魏文帝黃初"
    assert cal.parse("漢光武帝中元元年").era == "漢光武帝建武中元"

@pytest.mark.parametrize("s", [
    "黃初",
    "魏文帝黃初",
    "漢平帝元始元年二月初一三",
    "漢平帝元始元年初一",
    "漢平帝元始元年十三月",
    "漢平帝元始元年閏後八月",
    "漢平帝元始月",
])
def test_malformed(cal, s):
    with pytest.raises(MalformedDateString):
        cal.parse(s)

def test_unknown_era(cal):
    with pytest.raises(UnknownEra):
        cal.parse("唐太宗貞觀元年")

def test_unknown_month(cal):
    # 元始元年 has no leap month
    with pytest.raises(UnknownMonth):
        cal.to_date("漢平帝元始元年閏三月")
