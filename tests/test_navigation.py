# tests/test_navigation.py

import pytest

import chinesecalendar
from chinesecalendar.core.errors import DateOutOfEra

@pytest.mark.parametrize("start,days,expected", [
    # within one month
    ("漢平帝元始元年二月十一", 10, "漢平帝元始元年二月廿一"),
    ("漢平帝元始元年二月己丑", 11, "漢平帝元始元年二月庚子"),
    ("漢平帝元始元年二月廿一", -10, "漢平帝元始元年二月十一"),
    ("漢平帝元始元年二月庚子", -11, "漢平帝元始元年二月己丑"),
    ("漢平帝元始元年二月晦", -10, "漢平帝元始元年二月十九"),
    # across months and years
    ("漢平帝元始元年", 30, "漢平帝元始元年二月初一"),
    ("漢平帝元始元年二月初一", 29, "漢平帝元始元年三月初一"),
    ("漢平帝元始元年二月初一", 60, "漢平帝元始元年四月初二"),
    ("漢平帝元始元年十二月初一", 31, "漢平帝元始二年一月初二"),
    ("漢平帝元始元年二月己丑", 30, "漢平帝元始元年三月初二"),
])
def test_plus_days(cal, start, days, expected):
    assert cal.plus_days(start, days) == cal.parse(expected)

def test_plus_days_backward_across_months(cal):
    d = cal.plus_days("漢平帝元始元年三月初一", -30)
    assert cal.to_date(d) == cal.to_date("漢平帝元始元年三月初一") - 30
    assert cal.plus_days("漢平帝元始元年二月十一", 0) == cal.parse("漢平帝元始元年二月十一")

def test_plus_days_matches_civil_arithmetic(cal):
    start = cal.parse("魏明帝景初二年五月初七")
    d0 = cal.to_date(start)
    for n in (1, 25, 100, 400, -20, -200):
        assert cal.to_date(cal.plus_days(start, n)) == d0 + n

def test_first_day_next_month(cal):
    assert cal.first_day_next_month("漢平帝元始元年二月十一") == cal.parse("漢平帝元始元年三月初一")
    assert cal.first_day_next_month("漢平帝元始元年十二月初一") == cal.parse("漢平帝元始二年一月初一")

def test_first_day_next_month_new_era(cal):
    # 延康 began in 三月 of 建安二十五年
    assert cal.first_day_next_month("漢獻帝建安二十五年二月初三") == cal.parse("漢獻帝延康元年三月初一")

def test_next_month_into_other_calendar(cal):
    last = cal.parse("蜀後主炎興元年十一月初一")
    nxt = cal.first_day_next_month(last)
    assert nxt.era == "魏陳留王景元"
    assert nxt.day_of_month == "初一"
    exact = cal.first_day_next_month(last, continuous=True)
    assert exact.era == "魏陳留王景元"
    assert cal.to_date(exact) == cal.to_date(cal.parse("蜀後主炎興元年十一月晦")) + 1

def test_last_day_prev_month(cal):
    d = cal.last_day_prev_month("漢平帝元始元年三月十五")
    assert d == cal.parse("漢平帝元始元年二月廿九")
    prev = cal.last_day_prev_month("漢獻帝延康元年三月初一")
    assert (prev.era, prev.year, prev.month) == ("漢獻帝建安", "二十五年", "二月")
    assert cal.to_date(prev) == cal.to_date("漢獻帝延康元年三月初一") - 1

def test_same_day(cal):
    assert cal.same_day_next_month("漢平帝元始元年一月十一") == cal.parse("漢平帝元始元年二月十一")
    # 二月 has only 29 days
    assert cal.same_day_next_month("漢平帝元始元年一月三十") == cal.parse("漢平帝元始元年二月晦")
    assert cal.same_day_prev_month("漢平帝元始元年三月十五") == cal.parse("漢平帝元始元年二月十五")
    assert cal.same_day_prev_month("漢平帝元始元年三月三十").day_of_month == "晦"

def test_navigation_outside_era(cal):
    with pytest.raises(DateOutOfEra):
        cal.first_day_next_month("魏明帝景初元年二月初一")

def test_module_api():
    assert chinesecalendar.plus_days("漢平帝元始元年", 30) == chinesecalendar.parse("漢平帝元始元年二月初一")
    assert chinesecalendar.same_day_next_month("漢平帝元始元年一月十一").month == "二月"
