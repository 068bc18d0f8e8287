"""
chinesecalendar.engines.parser
------------------------------
Parses era-notation date strings.

Grammar (right to left):

    date  = era [year [season] [閏|後] month [day]]
    year  = numeral (年|載), 元 standing for 一
    month = numeral 月, 正月 standing for 一月
    day   = 朔 | 晦 | 初一..三十 | sexagenary label

A string ending at the year selects the first month of that year, which
is 十月 for the years that began in winter.
"""

from __future__ import annotations

import re
from typing import Callable, Tuple

from ..core import sexagenary as sx
from ..core.errors import MalformedDateString
from ..core.numerals import (
    DAY_INDEX,
    FIRST_DAY,
    LAST_DAY,
    MONTH_UNIT,
    NEW_MOON,
    NUMBER_INDEX,
    SEASONS,
    YEAR_UNITS,
    canonical_month,
)
from ..core.types import ChineseDate, Year
from .registry import EraRegistry

# Shortest meaningful string, e.g. 黃初元年.
MIN_LENGTH = 4

_MONTH_RE = re.compile(r"^[閏後]?(十[一二]?|[一二三四五六七八九])月$")
_FIRST_YEAR_CHAR = "元"

YearLookup = Callable[[str, str], Year]


class DateParser:
    def __init__(self, registry: EraRegistry, lookup: YearLookup):
        self.registry = registry
        # (era, year) -> Year, used to fill in the default month
        self._lookup = lookup

    def parse(self, s: str) -> ChineseDate:
        s = s.strip()
        if len(s) < MIN_LENGTH:
            raise MalformedDateString(f"date string too short: {s!r}")

        if s.endswith(YEAR_UNITS):
            era, year = self.parse_year(s)
            return ChineseDate(era, year, self._first_month(era, year), FIRST_DAY)

        day, end = FIRST_DAY, len(s)
        if s.endswith(NEW_MOON):
            end -= 1
        elif s.endswith(LAST_DAY):
            day, end = LAST_DAY, end - 1
        else:
            tail = s[-2:]
            if sx.is_label(tail) or tail in DAY_INDEX:
                end -= 2
                if s.rfind(MONTH_UNIT) + 1 != end:
                    raise MalformedDateString(f"day {tail} must follow a month in {s!r}")
                day = tail
        return self._parse_month(s[:end], day, s)

    def _parse_month(self, s: str, day: str, original: str) -> ChineseDate:
        if not s.endswith(MONTH_UNIT):
            era, year = self.parse_year(s)
            return ChineseDate(era, year, self._first_month(era, year), day)

        k = max(s.rfind(unit) for unit in YEAR_UNITS)
        if k < 0:
            raise MalformedDateString(f"no year in {original!r}")
        text = s[k + 1:]
        season = ""
        if text[:1] and text[0] in SEASONS:
            season, text = text[0], text[1:]
        month = canonical_month(text)
        if not _MONTH_RE.match(month):
            raise MalformedDateString(f"bad month {text!r} in {original!r}")

        era, year = self.parse_year(s[: k + 1])
        return ChineseDate(era, year, month, day, season)

    def parse_year(self, s: str) -> Tuple[str, str]:
        """Split ``漢武帝元朔六年`` into the canonical era and ``六年``."""
        unit = s[-1:]
        if unit not in YEAR_UNITS:
            raise MalformedDateString(f"year must end with 年 or 載: {s!r}")
        t = s[:-1]
        for width in (3, 2, 1):
            if len(t) <= width:
                continue
            numeral = t[-width:]
            if width == 1 and numeral == _FIRST_YEAR_CHAR:
                numeral = "一"
            if numeral in NUMBER_INDEX:
                era = t[:-width]
                return self.registry.canonical(era), numeral + unit
        raise MalformedDateString(f"no year numeral in {s!r}")

    def _first_month(self, era: str, year: str) -> str:
        return self._lookup(era, year).months[0].name
