# tests/test_registry.py

import pytest

from chinesecalendar.core.civil import CivilDate
from chinesecalendar.core.errors import DuplicateEra, UnknownEra, YearOutOfRange
from chinesecalendar.engines.factory import build_tables
from chinesecalendar.engines.registry import EraDef, EraRegistry
from chinesecalendar.engines.specs import DEFAULT_SPEC

@pytest.fixture(scope="module")
def tables():
    return build_tables(DEFAULT_SPEC)

def test_resolve_and_aliases(tables):
    reg = EraRegistry.build(
        [EraDef("魏文帝黃初", "ce", 220, start="十月", aliases=("魏文帝",))],
        tables,
    )
    assert reg.resolve("魏文帝黃初") == (tables["ce"], 220)
    assert reg.canonical("魏文帝") == "魏文帝黃初"
    assert "魏文帝" in reg
    assert reg.names() == ["魏文帝黃初"]
    with pytest.raises(UnknownEra):
        reg.resolve("魏武帝")

def test_duplicate_alias_rejected(tables):
    defs = [
        EraDef("晉武帝泰始", "ce", 265, aliases=("晉武帝",)),
        EraDef("晉武帝咸寧", "ce", 275, aliases=("晉武帝",)),
    ]
    with pytest.raises(DuplicateEra):
        EraRegistry.build(defs, tables)

def test_repeated_span_allowed(tables):
    # 建平 resumes after 太初元將 with the same first year
    defs = [
        EraDef("漢哀帝建平", "bce", -5),
        EraDef("漢哀帝太初元將", "bce", -4, start="六月"),
        EraDef("漢哀帝建平", "bce", -5, start="二年八月"),
    ]
    reg = EraRegistry.build(defs, tables)
    assert reg.names() == ["漢哀帝建平", "漢哀帝太初元將"]

def test_unknown_table_or_year(tables):
    with pytest.raises(KeyError):
        EraRegistry.build([EraDef("X", "nowhere", 1)], tables)
    with pytest.raises(YearOutOfRange):
        EraRegistry.build([EraDef("X", "ce", 9999)], tables)

def test_registry_is_read_only(cal):
    with pytest.raises(TypeError):
        cal.registry._entries["新"] = None

def test_segments_in_registration_order(cal):
    segs = cal.segments_containing(CivilDate(237, 4, 13))
    assert [s.era for s in segs] == ["魏明帝景初", "蜀後主建興", "吳大帝嘉禾"]
    assert [s.order for s in segs] == sorted(s.order for s in segs)

def test_date_in_range(cal):
    assert cal.registry.date_in_range(CivilDate(237, 4, 13), "魏明帝景初")
    assert not cal.registry.date_in_range(CivilDate(237, 4, 12), "魏明帝景初")
    # both spans of 建平
    assert cal.registry.date_in_range(CivilDate(-4, 3, 1), "漢哀帝建平")
    assert len(cal.registry.segments_of("漢哀帝建平")) == 2

def test_segment_links(cal):
    (seg,) = cal.registry.segments_of("蜀後主炎興")
    assert seg.next_era == "魏陳留王景元"
    assert seg.prev_era == "蜀後主景耀"
    (first,) = cal.registry.segments_of("秦孝文王")
    assert first.prev_era == ""
    assert cal.first_day == first.start

def test_era_names(cal):
    names = cal.era_names()
    assert names[0] == "秦孝文王"
    assert names.count("漢哀帝建平") == 1
    assert "漢光武帝中元" not in names
    assert cal.registry.canonical("漢光武帝中元") == "漢光武帝建武中元"
