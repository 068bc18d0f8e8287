# tests/test_civil.py

import pytest
import random

from chinesecalendar.core import civil
from chinesecalendar.core.civil import CivilDate
from chinesecalendar.core.errors import MalformedDateString
from chinesecalendar.engines.interfaces import CivilCalendarDate

def test_leap_years():
    # Julian rule up to the reform, Gregorian afterwards
    assert civil.is_leap_year(1500)
    assert civil.is_leap_year(0)
    assert civil.is_leap_year(-4)
    assert not civil.is_leap_year(1700)
    assert civil.is_leap_year(2000)
    assert not civil.is_leap_year(1)

def test_gregorian_cutover():
    last_julian = CivilDate(1582, 10, 4)
    assert last_julian.add_days(1) == CivilDate(1582, 10, 15)
    assert CivilDate(1582, 10, 15) - last_julian == 1
    with pytest.raises(ValueError):
        CivilDate(1582, 10, 10)

def test_known_jdn():
    assert CivilDate(2000, 1, 1).to_ordinal_day() == 2451545
    assert CivilDate(1, 1, 1).to_ordinal_day() == 1721424
    assert CivilDate.from_ordinal_day(2451545) == CivilDate(2000, 1, 1)

def test_jdn_roundtrip():
    random.seed(42)
    for _ in range(5000):
        jdn = random.randint(1600000, 2500000)
        assert CivilDate.from_ordinal_day(jdn).to_ordinal_day() == jdn

def test_invalid_dates():
    with pytest.raises(ValueError):
        CivilDate(1, 2, 29)
    with pytest.raises(ValueError):
        CivilDate(1, 13, 1)
    assert CivilDate(4, 2, 29).month_days() == 29

def test_string_forms():
    assert CivilDate.from_string("237年4月13日") == CivilDate(237, 4, 13)
    assert CivilDate.from_string("公元前87年3月30日") == CivilDate(-86, 3, 30)
    assert str(CivilDate(-86, 3, 30)) == "公元前87年3月30日"
    assert str(CivilDate(0, 10, 17)) == "公元前1年10月17日"
    assert str(CivilDate(1, 2, 12)) == "1年2月12日"
    assert CivilDate(-86, 3, 30).isoformat() == "-0086-03-30"

@pytest.mark.parametrize("s", ["237-04-13", "公元前0年1月1日", "237年13月1日", "年月日"])
def test_malformed_strings(s):
    with pytest.raises(MalformedDateString):
        CivilDate.from_string(s)

def test_arithmetic_and_order():
    d = CivilDate(237, 4, 13)
    assert d + 30 == CivilDate(237, 5, 13)
    assert d - 13 == CivilDate(237, 3, 31)
    assert (d + 400) - d == 400
    assert d.compare(d + 1) == -1
    assert (d + 1).compare(d) == 1
    assert d.compare(CivilDate(237, 4, 13)) == 0
    assert CivilDate(-1, 12, 31) < CivilDate(0, 1, 1)

def test_satisfies_protocol():
    assert isinstance(CivilDate(1, 1, 1), CivilCalendarDate)
