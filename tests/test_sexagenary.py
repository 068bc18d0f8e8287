# tests/test_sexagenary.py

import pytest
import random

from chinesecalendar.core import sexagenary as sx
from chinesecalendar.core.civil import CivilDate
from chinesecalendar.core.errors import InvalidLabel

def test_sixty_distinct_labels():
    assert len(sx.LABELS) == 60
    assert len(set(sx.LABELS)) == 60
    assert sx.LABELS[0] == "甲子"
    assert sx.LABELS[59] == "癸亥"

def test_diff_closure():
    for x in sx.LABELS:
        assert sx.diff(x, x) == 0
    random.seed(7)
    for _ in range(500):
        x, y = random.choice(sx.LABELS), random.choice(sx.LABELS)
        assert (sx.diff(x, y) + sx.diff(y, x)) % 60 == 0
        assert 0 <= sx.diff(x, y) < 60
        assert sx.add(x, sx.diff(x, y)) == y

def test_sequence_wraps():
    assert sx.sequence("甲子", 3) == ["甲子", "乙丑", "丙寅"]
    assert sx.sequence("辛酉", 5) == ["辛酉", "壬戌", "癸亥", "甲子", "乙丑"]
    assert sx.sequence("甲子", 0) == []
    with pytest.raises(ValueError):
        sx.sequence("甲子", -1)

def test_invalid_label():
    with pytest.raises(InvalidLabel):
        sx.index_of("甲丑")
    with pytest.raises(InvalidLabel):
        sx.diff("甲子", "初一")
    assert not sx.is_label("晦")

def test_day_sexagenary():
    # 元始元年正月朔 was a 己未 day
    assert sx.day_sexagenary(CivilDate(1, 2, 12)) == "己未"
    assert sx.day_sexagenary(CivilDate(2000, 1, 1)) == "戊午"
    # 漢武帝後元二年二月戊辰
    assert sx.day_sexagenary(CivilDate(-86, 3, 30)) == "戊辰"
