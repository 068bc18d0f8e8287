"""
chinesecalendar.engines.calendar
--------------------------------
The Orchestrator. Resolves era-notation dates against the registry and
year tables, converts them to civil dates and back, and navigates days
and months across era boundaries.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..core import sexagenary as sx
from ..core.civil import CivilDate
from ..core.errors import DateOutOfEra, InvalidDayName
from ..core.numerals import (
    DAY_INDEX,
    DAY_NAMES,
    FIRST_DAY,
    LAST_DAY,
    NUMBERS,
    YEAR_UNIT,
    number,
    year_number,
)
from ..core.types import ChineseDate, DayInfo, EraSegment, Year
from .interfaces import CivilCalendarDate
from .parser import DateParser
from .registry import EraRegistry
from .year_table import YearTable, days_from_new_year

DateLike = Union[ChineseDate, str]
CivilLike = Union[CivilCalendarDate, str]

# (era, year) pairs that continue in another era. There is no 漢哀帝元壽三年,
# but month navigation from 元壽二年十二月 asks for it.
Rollovers = Mapping[Tuple[str, str], Tuple[str, str]]


class ChineseCalendar:
    """
    Converts between era-notation dates and civil dates.

    A calendar is built once (see chinesecalendar.engines.factory) and is
    read-only afterwards.
    """

    def __init__(self, registry: EraRegistry, *, rollovers: Optional[Rollovers] = None):
        self.registry = registry
        self.rollovers: Dict[Tuple[str, str], Tuple[str, str]] = dict(rollovers or {})
        self.parser = DateParser(registry, self._lookup_year)

    # ---------------------------------------------------------
    # Table access
    # ---------------------------------------------------------

    def _lookup(self, era: str, year: str) -> Tuple[YearTable, int, Year]:
        era, year = self.rollovers.get((era, year), (era, year))
        table, start_year = self.registry.resolve(era)
        found, index = table.year_at(start_year, year_number(year) - 1)
        return table, index, found

    def _lookup_year(self, era: str, year: str) -> Year:
        return self._lookup(era, year)[2]

    def _as_date(self, date: DateLike) -> ChineseDate:
        return self.parse(date) if isinstance(date, str) else date

    def _as_civil(self, d: CivilLike) -> CivilCalendarDate:
        return CivilDate.from_string(d) if isinstance(d, str) else d

    def parse(self, s: str) -> ChineseDate:
        return self.parser.parse(s)

    def month_length(self, date: DateLike) -> int:
        date = self._as_date(date)
        table, index, _ = self._lookup(date.era, date.year)
        return table.month_length(index, date.month)

    def sexagenary_first_day_of_month(self, date: DateLike) -> str:
        date = self._as_date(date)
        _, _, year = self._lookup(date.era, date.year)
        return year.months[year.month_index(date.month)].sexagenary

    def year_sexagenary(self, date: DateLike) -> str:
        date = self._as_date(date)
        table, index, _ = self._lookup(date.era, date.year)
        return table.year_sexagenary(index)

    def era_names(self) -> List[str]:
        return self.registry.names()

    def tables(self) -> List[YearTable]:
        return self.registry.tables()

    # ---------------------------------------------------------
    # Forward: era notation to civil date
    # ---------------------------------------------------------

    def day_offset(self, date: DateLike) -> int:
        """0-based position of the date's day within its month."""
        date = self._as_date(date)
        day = date.day_of_month
        if day == LAST_DAY:
            return self.month_length(date) - 1
        if sx.is_label(day):
            return sx.diff(self.sexagenary_first_day_of_month(date), day)
        if day in DAY_INDEX:
            return DAY_INDEX[day]
        raise InvalidDayName(f"invalid day of month: {day!r}")

    def to_date(self, date: DateLike, *, check: bool = True) -> CivilCalendarDate:
        date = self._as_date(date)
        _, _, year = self._lookup(date.era, date.year)
        offset, _ = days_from_new_year(date.month, year)
        delta = self.day_offset(date)
        if check and date.day_of_month in DAY_INDEX and delta >= self.month_length(date):
            raise InvalidDayName(f"{date.day_of_month} does not exist in {date.era}{date.year}{date.month}")
        result = year.first_day.add_days(offset + delta)
        if check and not self.registry.date_in_range(result, date.era):
            raise DateOutOfEra(f"date {result} not in era {date.era}")
        return result

    # ---------------------------------------------------------
    # Inverse: civil date to era notation
    # ---------------------------------------------------------

    def segments_containing(self, d: CivilLike) -> List[EraSegment]:
        return self.registry.segments_containing(self._as_civil(d))

    def containing_segment(self, date: DateLike) -> Optional[EraSegment]:
        """The segment of the date's own era that contains it, if any."""
        date = self._as_date(date)
        civil = self.to_date(date, check=False)
        found = [s for s in self.registry.segments_of(date.era) if s.contains(civil)]
        if len(found) > 1:
            raise ValueError(f"overlapping segments of era {date.era} at {civil}")
        return found[0] if found else None

    def chinese_dates(self, d: CivilLike) -> List[ChineseDate]:
        """Structured form of from_date()."""
        d = self._as_civil(d)
        out: List[ChineseDate] = []
        for seg in self.registry.segments_containing(d):
            table, start_year = self.registry.resolve(seg.era)
            located = table.locate(d)
            if located is None:
                continue
            index, month, day = located
            year_no = index - table.index_of(start_year) + 1
            out.append(ChineseDate(seg.era, number(year_no) + YEAR_UNIT, month.name, DAY_NAMES[day]))
        return out

    def from_date(self, d: CivilLike) -> List[str]:
        """
        All renderings of civil date `d`, one per era segment covering it, in
        registration order. Empty when no era covers the date.
        """
        return [str(c) for c in self.chinese_dates(d)]

    # ---------------------------------------------------------
    # Navigation
    # ---------------------------------------------------------

    def _shift_in_month(self, date: ChineseDate, days: int) -> ChineseDate:
        day = date.day_of_month
        if sx.is_label(day):
            return replace(date, day_of_month=sx.add(day, days))
        return replace(date, day_of_month=DAY_NAMES[self.day_offset(date) + days])

    def _first_day_next_month_fast(self, date: ChineseDate) -> ChineseDate:
        """Next month in the same era, ignoring where the era ends."""
        _, _, year = self._lookup(date.era, date.year)
        i = year.month_index(date.month)
        if i + 1 < len(year.months):
            return ChineseDate(date.era, date.year, year.months[i + 1].name, FIRST_DAY)
        unit = date.year[-1]
        next_year = NUMBERS[year_number(date.year) + 1] + unit
        return self.parse(date.era + next_year)

    def plus_days(self, date: DateLike, days: int) -> ChineseDate:
        """
        Move `days` days forward (or back). A sexagenary day stays
        sexagenary while the result is in the same month.
        """
        date = self._as_date(date)
        while days != 0:
            length = self.month_length(date)
            pos = self.day_offset(date) + 1 + days
            if 1 <= pos <= length:
                return self._shift_in_month(date, days)
            if days > 0:
                date, days = self._first_day_next_month_fast(date), pos - 1 - length
            else:
                date, days = self.last_day_prev_month(date, continuous=True), pos
        return date

    def _segment_of(self, date: ChineseDate) -> EraSegment:
        seg = self.containing_segment(date)
        if seg is None:
            raise DateOutOfEra(f"{date} is outside the era {date.era}")
        return seg

    def _find_in_era(self, d: CivilCalendarDate, era: str) -> ChineseDate:
        for c in self.chinese_dates(d):
            if c.era == era:
                return c
        raise DateOutOfEra(f"no date of era {era} on {d}")

    def first_day_next_month(self, date: DateLike, *, continuous: bool = False) -> ChineseDate:
        """
        First day of the following month, moving to the next era at an era
        boundary. When the next era keeps a different calendar, `continuous`
        prefers the day right after the current month over its first day.
        """
        date = self._as_date(date)
        seg = self._segment_of(date)
        nxt = self._first_day_next_month_fast(date)
        nxt_civil = self.to_date(nxt, check=False)
        if seg.contains(nxt_civil):
            return nxt
        result = self._find_in_era(nxt_civil, seg.next_era)
        return result if continuous else replace(result, day_of_month=FIRST_DAY)

    def last_day_prev_month(self, date: DateLike, *, continuous: bool = False) -> ChineseDate:
        date = self._as_date(date)
        seg = self._segment_of(date)
        first = replace(date, day_of_month=FIRST_DAY)
        prev_civil = self.to_date(first, check=False).add_days(-1)
        if seg.contains(prev_civil):
            return self._find_in_era(prev_civil, date.era)
        result = self._find_in_era(prev_civil, seg.prev_era)
        if continuous:
            return result
        return replace(result, day_of_month=DAY_NAMES[self.month_length(result) - 1])

    def _same_day_as(self, target: ChineseDate, source: ChineseDate) -> ChineseDate:
        offset = self.day_offset(source)
        if offset >= self.month_length(target):
            return replace(target, day_of_month=LAST_DAY)
        return replace(target, day_of_month=DAY_NAMES[offset])

    def same_day_next_month(self, date: DateLike) -> ChineseDate:
        """Same day of the next month, or its last day when that is shorter."""
        date = self._as_date(date)
        return self._same_day_as(self.first_day_next_month(date), date)

    def same_day_prev_month(self, date: DateLike) -> ChineseDate:
        date = self._as_date(date)
        return self._same_day_as(self.last_day_prev_month(date), date)

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    @property
    def first_day(self) -> CivilCalendarDate:
        return min(self.registry.segments, key=lambda s: s.start_day).start

    @property
    def last_day(self) -> CivilCalendarDate:
        return max(self.registry.segments, key=lambda s: s.end_day).end

    def info(self) -> Dict[str, Any]:
        return {
            "eras": len(self.era_names()),
            "segments": len(self.registry.segments),
            "tables": [repr(t) for t in self.tables()],
            "first_day": str(self.first_day),
            "last_day": str(self.last_day),
        }

    def day_info(self, d: CivilLike) -> DayInfo:
        d = self._as_civil(d)
        return DayInfo(civil_date=d, renderings=tuple(self.from_date(d)))
