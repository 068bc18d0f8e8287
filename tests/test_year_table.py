# tests/test_year_table.py

import pytest

from chinesecalendar.core import sexagenary as sx
from chinesecalendar.core.errors import TableCorruption, UnknownMonth, YearOutOfRange
from chinesecalendar.core.types import Month, Year
from chinesecalendar.engines.interfaces import CivilCalendarDate
from chinesecalendar.engines.year_table import (
    YearRow,
    YearTable,
    build_months,
    days_from_new_year,
)

from conftest import DayCountDate

LENGTHS_A = (30, 29) * 6
LENGTHS_B = (29, 30) * 6 + (29,)   # 13 months, leap after 八月

def months_text(start, lengths, leap_after=None):
    """Labels of consecutive months of the given lengths, 閏 before month `leap_after + 1`."""
    labels = [start]
    for n in lengths[:-1]:
        labels.append(sx.add(labels[-1], n))
    words = []
    for i, label in enumerate(labels):
        if leap_after is not None and i == leap_after:
            words.append("閏")
        words.append(label)
    return " ".join(words), sx.add(labels[-1], lengths[-1])

@pytest.fixture
def rows():
    text_a, nxt = months_text("甲子", LENGTHS_A)
    text_b, _ = months_text(nxt, LENGTHS_B, leap_after=8)
    return (
        YearRow(10, (1, 10), text_a),
        YearRow(11, (1, 4), text_b),
        YearRow(12, (1, 27), ""),   # placeholder
    )

@pytest.fixture
def table(rows):
    return YearTable.from_rows("toy", rows, DayCountDate.of, start_sexagenary="癸酉")

def test_build_months():
    assert build_months("己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯 甲申") == tuple(
        Month(name, label) for name, label in zip(
            ["一月", "二月", "三月", "四月", "五月", "六月", "七月", "八月", "九月", "十月", "十一月", "十二月"],
            "己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯 甲申".split(),
        )
    )
    leap = build_months("己卯 閏 戊申 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉")
    assert [m.name for m in leap[:3]] == ["一月", "閏一月", "二月"]
    skipped = build_months("己亥 己巳 進 戊戌 戊辰 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午")
    assert [m.name for m in skipped[:3]] == ["一月", "二月", "四月"]
    later = build_months("丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 後 壬午")
    assert later[-1] == Month("後十二月", "壬午")

def test_build_months_winter_start():
    months = build_months("乙未 甲子 甲午 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 後後 戊子 後後 戊午 後後 丁亥", 10)
    names = [m.name for m in months]
    assert names[:4] == ["十月", "十一月", "十二月", "一月"]
    assert names[-3:] == ["後十月", "後十一月", "後十二月"]
    assert len(months) == 15

def test_protocol_stub(table):
    assert isinstance(DayCountDate(0), CivilCalendarDate)
    assert table[0].first_day == DayCountDate.of(10, 1, 10)

def test_year_at(table):
    year, index = table.year_at(10, 1)
    assert (year.label, index) == (11, 1)
    with pytest.raises(YearOutOfRange):
        table.year_at(10, 2)      # placeholder
    with pytest.raises(YearOutOfRange):
        table.year_at(10, 3)      # past the end
    with pytest.raises(YearOutOfRange):
        table.year_at(10, -1)
    with pytest.raises(YearOutOfRange):
        table.year_at(9, 0)

def test_placeholder_and_filled(table):
    assert table[2].is_placeholder
    assert table.filled == 2
    assert table.year_sexagenary(0) == "癸酉"
    assert table.year_sexagenary(1) == "甲戌"

def test_days_from_new_year(table):
    year = table[0]
    assert days_from_new_year("一月", year) == (0, "甲子")
    assert days_from_new_year("二月", year) == (30, "甲午")
    assert days_from_new_year("十二月", year)[0] == sum(LENGTHS_A[:-1])
    with pytest.raises(UnknownMonth):
        days_from_new_year("閏三月", year)

def test_days_from_new_year_corrupt():
    year = Year(1, DayCountDate(0), build_months("甲子 甲午 甲子 甲午 甲子 甲午 甲子"))
    assert days_from_new_year("二月", year)[0] == 30
    bad = Year(1, DayCountDate(0), build_months("甲子 乙丑 甲子 甲午 甲子 甲午 甲子"))
    with pytest.raises(TableCorruption):
        days_from_new_year("三月", bad)

def test_month_lengths(table):
    year0 = table[0]
    assert [table.month_length(0, m.name) for m in year0.months] == list(LENGTHS_A)
    year1 = table[1]
    assert "閏八月" in [m.name for m in year1.months]
    # the last month of the last filled year is measured against the placeholder's first day
    assert table.month_length(1, "十二月") == table[2].first_day.n - table[1].first_day.n - sum(LENGTHS_B[:-1])

def test_unknown_last_month():
    text, _ = months_text("甲子", LENGTHS_A)
    table = YearTable.from_rows("tail", [YearRow(1, (1, 1), text)], DayCountDate.of, start_sexagenary="甲子")
    with pytest.raises(YearOutOfRange):
        table.month_length(0, "十二月")
    with_tail = YearTable.from_rows(
        "tail", [YearRow(1, (1, 1), text)], DayCountDate.of, start_sexagenary="甲子", tail_length=29
    )
    assert with_tail.month_length(0, "十二月") == 29
    assert with_tail.year_length(0) == sum(LENGTHS_A)

def test_locate(table):
    first = table[0].first_day
    assert table.locate(first) == (0, table[0].months[0], 0)
    assert table.locate(first.add_days(40)) == (0, table[0].months[1], 10)
    nxt = table[1].first_day
    assert table.locate(nxt.add_days(-1)) == (0, table[0].months[-1], LENGTHS_A[-1] - 1)
    assert table.locate(first.add_days(-1)) is None
    assert table.locate(table[2].first_day) is None

def test_derived_first_days():
    text_a, nxt = months_text("甲子", LENGTHS_A)
    text_b, after = months_text(nxt, LENGTHS_A)
    anchor = Year(3, DayCountDate(1000), build_months(months_text(after, LENGTHS_A)[0]))
    table = YearTable.from_rows(
        "derived",
        [YearRow(1, None, text_a), YearRow(2, None, text_b)],
        DayCountDate.of,
        start_sexagenary="甲子",
        anchor=anchor,
    )
    total = sum(LENGTHS_A)
    assert table[1].first_day == DayCountDate(1000 - total)
    assert table[0].first_day == DayCountDate(1000 - 2 * total)
    assert table.month_length(0, "十二月") == LENGTHS_A[-1]

def test_empty_table_rejected():
    with pytest.raises(ValueError):
        YearTable("empty", [], start_sexagenary="甲子")
