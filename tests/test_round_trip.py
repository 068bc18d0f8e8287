# tests/test_round_trip.py

import random

import pytest

from chinesecalendar.core.civil import CivilDate
from chinesecalendar.engines.sanity import check_every_day, round_trip_failures

def test_every_day_three_kingdoms(cal):
    # 漢獻帝延康 .. 魏齊王芳正始, with 蜀 and 吳 running alongside
    assert check_every_day(cal, CivilDate(220, 1, 1), CivilDate(240, 12, 31))

def test_every_day_around_taichu(cal):
    # the 15-month year of the 太初 reform
    assert list(round_trip_failures(cal, CivilDate(-106, 1, 1), CivilDate(-100, 12, 31))) == []

def test_random_round_trip(cal):
    random.seed(123)
    first, last = cal.first_day, cal.last_day
    span = last - first
    for _ in range(2000):
        d = first + random.randint(0, span)
        renderings = cal.from_date(d)
        assert renderings, d
        for s in renderings:
            assert cal.to_date(cal.parse(s)) == d, s

@pytest.mark.parametrize("d", [CivilDate(1, 2, 12), CivilDate(237, 4, 13), CivilDate(-4, 8, 1)])
def test_rendering_is_in_era(cal, d):
    for s, seg in zip(cal.from_date(d), cal.segments_containing(d)):
        assert s.startswith(seg.era)
        assert cal.containing_segment(s) == seg
