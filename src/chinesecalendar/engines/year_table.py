"""
chinesecalendar.engines.year_table
----------------------------------
Year tables. Each calendar system (the Han/Jin court calendar, 蜀, 吳,
北魏, ...) is an ordered sequence of years; a year stores the civil date
of its first day and the sexagenary label of the first day of every
month. Month lengths are never stored: they are the cyclic distance
between consecutive month labels.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..core import sexagenary as sx
from ..core.errors import TableCorruption, UnknownMonth, YearOutOfRange
from ..core.numerals import (
    FORWARD_MONTH,
    LATER_MONTH,
    LATER_MONTH_SPECIAL,
    LEAP_MONTH,
    month_name,
)
from ..core.types import Month, Year
from .interfaces import CivilCalendarDate, CivilFactory

logger = logging.getLogger(__name__)

MONTH_LENGTHS = (29, 30)


@dataclass(frozen=True)
class YearRow:
    """One literal record of a year table."""
    label: int
    first_day: Optional[Tuple[int, int]]  # civil (month, day) in year `label`; None if derived
    months: str                           # e.g. "己卯 閏 戊申 戊寅 ..."
    first_month: int = 1                  # 10 for years starting with 十月


def build_months(text: str, first_month: int = 1) -> Tuple[Month, ...]:
    """
    Name the months of a literal record.

    閏 marks the following label as a leap month and 後 as an extra month
    after the month just named. 後後 is used for the trailing months of the
    15-month 太初 year, which keep counting instead of repeating a number.
    進 skips one month number.
    """
    months: List[Month] = []
    n = first_month
    prefix = ""
    special = False
    for word in text.split():
        if word in (LEAP_MONTH, LATER_MONTH):
            prefix = word
        elif word == LATER_MONTH_SPECIAL:
            prefix, special = LATER_MONTH, True
        elif word == FORWARD_MONTH:
            n += 1
        else:
            sx.index_of(word)
            if prefix == LEAP_MONTH or (prefix == LATER_MONTH and not special):
                n -= 1
            if n > 12:
                n -= 12
            months.append(Month(month_name(prefix, n), word))
            prefix, special = "", False
            n += 1
    return tuple(months)


def days_from_new_year(month: str, year: Year) -> Tuple[int, str]:
    """
    Days from the first day of `year` to the first day of `month`, and the
    label of that day.
    """
    offset = 0
    prev = year.months[0].sexagenary if year.months else ""
    for i, m in enumerate(year.months):
        step = sx.diff(prev, m.sexagenary)
        if i > 0 and step not in MONTH_LENGTHS:
            raise TableCorruption(
                f"month length {step} between {prev} and {m.sexagenary} in year {year.label}"
            )
        offset += step
        if m.name == month:
            return offset, m.sexagenary
        prev = m.sexagenary
    raise UnknownMonth(f"no month {month} in year {year.label}")


def derive_first_days(
    rows: Sequence[YearRow],
    anchor_day: CivilCalendarDate,
    anchor_label: str,
) -> List[CivilCalendarDate]:
    """
    First days of `rows`, counted backward from the first day of the year
    that follows the last row (`anchor_day`, whose first month starts on
    `anchor_label`).
    """
    days: List[CivilCalendarDate] = []
    day, label = anchor_day, anchor_label
    for row in reversed(rows):
        span = 0
        for m in reversed(build_months(row.months, row.first_month)):
            span += sx.diff(m.sexagenary, label)
            label = m.sexagenary
        day = day.add_days(-span)
        days.append(day)
    days.reverse()
    return days


class YearTable:
    """
    Immutable sequence of years, indexed by position. Labels normally
    increase by one per position; a label may be missing where one record
    covers two nominal years (太初元年 has 15 months).
    """

    def __init__(
        self,
        name: str,
        years: Sequence[Year],
        *,
        start_sexagenary: str,
        tail_length: Optional[int] = None,
    ):
        if not years:
            raise ValueError(f"year table {name!r} is empty")
        sx.index_of(start_sexagenary)
        if tail_length is not None and tail_length not in MONTH_LENGTHS:
            raise ValueError(f"tail_length must be 29 or 30, got {tail_length}")

        self.name = name
        self.years: Tuple[Year, ...] = tuple(years)
        self.start_sexagenary = start_sexagenary
        self.tail_length = tail_length
        self._index: Dict[int, int] = {y.label: i for i, y in enumerate(self.years)}

        filled = 0
        for y in self.years:
            if y.is_placeholder:
                break
            if y.first_day is None:
                raise ValueError(f"year {y.label} of table {name!r} has no first day")
            filled += 1
        # Number of leading filled years; everything from here on is unusable.
        self.filled = filled
        self._first_days = [y.first_day.to_ordinal_day() for y in self.years[:filled]]

    @classmethod
    def from_rows(
        cls,
        name: str,
        rows: Sequence[YearRow],
        civil: CivilFactory,
        *,
        start_sexagenary: str,
        tail_length: Optional[int] = None,
        anchor: Optional[Year] = None,
    ) -> "YearTable":
        """
        Build a table from literal rows. Rows without a first day take it
        from `anchor` (the year following the table) when one is given.
        """
        derived: List[Optional[CivilCalendarDate]] = [None] * len(rows)
        if anchor is not None:
            derived = list(derive_first_days(rows, anchor.first_day, anchor.months[0].sexagenary))

        years = []
        for row, day in zip(rows, derived):
            if row.first_day is not None:
                day = civil(row.label, *row.first_day)
            years.append(Year(row.label, day, build_months(row.months, row.first_month)))
        table = cls(name, years, start_sexagenary=start_sexagenary, tail_length=tail_length)
        logger.debug("built year table %s: %d years, %d filled", name, len(table), table.filled)
        return table

    def __len__(self) -> int:
        return len(self.years)

    def __getitem__(self, index: int) -> Year:
        return self.years[index]

    def __iter__(self) -> Iterator[Year]:
        return iter(self.years)

    def __repr__(self) -> str:
        return f"YearTable({self.name!r}, {self.start_year}..{self.years[-1].label}, filled={self.filled})"

    @property
    def start_year(self) -> int:
        return self.years[0].label

    def index_of(self, label: int) -> int:
        if label not in self._index:
            raise YearOutOfRange(f"year {label} is not in table {self.name}")
        return self._index[label]

    def year_at(self, start_year: int, year_offset: int) -> Tuple[Year, int]:
        """
        Year number `year_offset + 1` of an era whose first year is the
        record labelled `start_year`.
        """
        index = self.index_of(start_year) + year_offset
        if index < 0 or index >= len(self.years):
            raise YearOutOfRange(
                f"year {year_offset + 1} from {start_year} is outside table {self.name}"
            )
        year = self.years[index]
        if year.is_placeholder:
            raise YearOutOfRange(f"year {year.label} of table {self.name} is not filled in")
        return year, index

    def year_sexagenary(self, index: int) -> str:
        return sx.add(self.start_sexagenary, index)

    def month_length(self, index: int, month: str) -> int:
        year = self.years[index]
        i = year.month_index(month)
        if i + 1 < len(year.months):
            return sx.diff(year.months[i].sexagenary, year.months[i + 1].sexagenary)
        return self._last_month_length(index)

    def _last_month_length(self, index: int) -> int:
        year = self.years[index]
        last = year.months[-1]
        if index + 1 < len(self.years):
            nxt = self.years[index + 1]
            if not nxt.is_placeholder:
                return sx.diff(last.sexagenary, nxt.months[0].sexagenary)
            if nxt.first_day is not None:
                offset, _ = days_from_new_year(last.name, year)
                length = nxt.first_day.to_ordinal_day() - year.first_day.to_ordinal_day() - offset
                if length not in MONTH_LENGTHS:
                    raise TableCorruption(
                        f"last month of {year.label} in {self.name} would have {length} days"
                    )
                return length
        elif self.tail_length is not None:
            return self.tail_length
        raise YearOutOfRange(f"length of {year.label}{last.name} in table {self.name} is unknown")

    def year_length(self, index: int) -> int:
        if index + 1 < self.filled:
            return self._first_days[index + 1] - self._first_days[index]
        year = self.years[index]
        offset, _ = days_from_new_year(year.months[-1].name, year)
        return offset + self._last_month_length(index)

    def year_containing(self, d: CivilCalendarDate) -> Optional[int]:
        """Index of the filled year covering civil date `d`, or None."""
        jdn = d.to_ordinal_day()
        i = bisect_right(self._first_days, jdn) - 1
        if i < 0:
            return None
        if i == self.filled - 1:
            try:
                if jdn >= self._first_days[i] + self.year_length(i):
                    return None
            except YearOutOfRange:
                return None
        return i

    def locate(self, d: CivilCalendarDate) -> Optional[Tuple[int, Month, int]]:
        """(year index, month, 0-based day in month) of civil date `d`."""
        i = self.year_containing(d)
        if i is None:
            return None
        year = self.years[i]
        rest = d.to_ordinal_day() - self._first_days[i]
        found, day = year.months[0], rest
        offset = 0
        prev = year.months[0].sexagenary
        for m in year.months:
            offset += sx.diff(prev, m.sexagenary)
            prev = m.sexagenary
            if offset > rest:
                break
            found, day = m, rest - offset
        return i, found, day
