"""
chinesecalendar.engines.sanity
------------------------------
Consistency checks over the literal data.

check_year_table() recomputes every stored first day from the month labels
of the years before it. check_every_day() converts each civil day to era
notation and back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from ..core import sexagenary as sx
from ..core.errors import ChineseCalendarError
from .interfaces import CivilCalendarDate
from .year_table import YearTable, days_from_new_year

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableCheck:
    """First stored first day that disagrees with the month labels."""
    table: str
    index: int
    label: int
    stored: CivilCalendarDate
    calculated: CivilCalendarDate


@dataclass(frozen=True)
class RoundTripFailure:
    civil_date: CivilCalendarDate
    rendering: str
    result: str  # the date it converts back to, or the error


def find_table_mismatch(table: YearTable) -> Optional[TableCheck]:
    """Walk `table` up to its first placeholder; None when consistent."""
    first = table[0]
    calculated = first.first_day
    prev = first.months[0].sexagenary
    for i, year in enumerate(table):
        if year.is_placeholder:
            break
        calculated = calculated.add_days(sx.diff(prev, year.months[0].sexagenary))
        if calculated.compare(year.first_day) != 0:
            return TableCheck(table.name, i, year.label, year.first_day, calculated)
        last = year.months[-1]
        offset, prev = days_from_new_year(last.name, year)
        calculated = calculated.add_days(offset)
    return None


def check_year_table(table: YearTable) -> bool:
    mismatch = find_table_mismatch(table)
    if mismatch is None:
        return True
    logger.warning(
        "table %s, year %d: stored first day %s, calculated %s",
        mismatch.table, mismatch.label, mismatch.stored, mismatch.calculated,
    )
    return False


def sanity_check(tables: Iterable[YearTable]) -> bool:
    """True when every table passes check_year_table()."""
    return all(check_year_table(t) for t in tables)


def round_trip_failures(
    calendar,
    start: Optional[CivilCalendarDate] = None,
    end: Optional[CivilCalendarDate] = None,
) -> Iterator[RoundTripFailure]:
    """
    Days in [start, end] (default: the whole calendar) whose era renderings
    do not convert back to the same day.
    """
    d = calendar.first_day if start is None else start
    last = calendar.last_day if end is None else end
    while d.compare(last) <= 0:
        for s in calendar.from_date(d):
            try:
                back = calendar.to_date(s)
            except ChineseCalendarError as e:
                yield RoundTripFailure(d, s, f"{type(e).__name__}: {e}")
                continue
            if back.compare(d) != 0:
                yield RoundTripFailure(d, s, str(back))
        d = d.add_days(1)


def check_every_day(
    calendar,
    start: Optional[CivilCalendarDate] = None,
    end: Optional[CivilCalendarDate] = None,
) -> bool:
    ok = True
    for f in round_trip_failures(calendar, start, end):
        logger.warning("%s -> %s -> %s", f.civil_date, f.rendering, f.result)
        ok = False
    return ok
