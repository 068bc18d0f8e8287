# tests/test_sanity.py

import logging

import pytest

import chinesecalendar
from chinesecalendar.core.civil import CivilDate
from chinesecalendar.engines.factory import build_tables
from chinesecalendar.engines.sanity import check_year_table, find_table_mismatch, sanity_check
from chinesecalendar.engines.specs import CE_TABLE, DEFAULT_SPEC, WU_TABLE

def _shifted(table_spec, label, delta):
    row = next(r for r in table_spec.rows if r.label == label)
    d = CivilDate(label, *row.first_day).add_days(delta)
    return table_spec.with_row(label, first_day=(d.month, d.day)), CivilDate(label, *row.first_day)

def test_unmodified_tables_pass(cal):
    assert chinesecalendar.sanity_check(calendar=cal)
    for table in cal.tables():
        assert find_table_mismatch(table) is None

def test_every_month_is_29_or_30_days(cal):
    for table in cal.tables():
        for i in range(table.filled):
            year = table[i]
            for a, b in zip(year.months, year.months[1:]):
                assert table.month_length(i, a.name) in (29, 30), (table.name, year.label, a.name)

@pytest.mark.parametrize("delta", [-1, 1])
def test_shifted_first_day_detected(delta, caplog):
    spec, stored = _shifted(CE_TABLE, 11, delta)
    tables = build_tables(DEFAULT_SPEC.tweak_table("ce", spec))

    mismatch = find_table_mismatch(tables["ce"])
    assert mismatch is not None
    assert mismatch.label == 11
    assert mismatch.calculated == stored
    assert mismatch.stored == stored.add_days(delta)

    with caplog.at_level(logging.WARNING, logger="chinesecalendar.engines.sanity"):
        assert not check_year_table(tables["ce"])
    assert "year 11" in caplog.text

    assert not sanity_check(tables.values())
    # the other tables are untouched
    assert check_year_table(tables["shu"])

def test_shifted_shared_year_only_hits_one_table():
    spec, _ = _shifted(WU_TABLE, 240, 1)
    tables = build_tables(DEFAULT_SPEC.tweak_table("wu", spec))
    assert not check_year_table(tables["wu"])
    assert check_year_table(tables["ce"])

def test_with_row_unknown_label():
    with pytest.raises(KeyError):
        CE_TABLE.with_row(9999, first_day=(1, 1))
    with pytest.raises(KeyError):
        DEFAULT_SPEC.tweak_table("song", CE_TABLE)
