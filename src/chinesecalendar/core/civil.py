"""
chinesecalendar.core.civil
--------------------------
Proleptic hybrid Julian/Gregorian civil dates.

Years are astronomical (1 BCE is year 0). The Julian leap rule applies up
to and including 1582, the Gregorian rule afterwards, and 5-14 October
1582 do not exist. Python's ``datetime.date`` cannot represent these
dates, so arithmetic goes through Julian Day Numbers (JDN).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from .errors import MalformedDateString

# JDN of 1582-10-15, the first Gregorian day.
GREGORIAN_START_JDN = 2299161
REFORM_YEAR = 1582

BCE_MARKER = "公元前"
_CIVIL_RE = re.compile(r"^(公元前)?(\d+)年(\d{1,2})月(\d{1,2})日$")

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    if year <= REFORM_YEAR:
        return year % 4 == 0
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def to_jdn(year: int, month: int, day: int) -> int:
    """Julian Day Number of a hybrid calendar date."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4
    if (year, month, day) >= (REFORM_YEAR, 10, 15):
        return jdn - y2 // 100 + y2 // 400 - 32045
    return jdn - 32083


def from_jdn(jdn: int) -> "CivilDate":
    """Inverse of to_jdn (Fliegel-Van Flandern for the Gregorian part)."""
    if jdn >= GREGORIAN_START_JDN:
        a = jdn + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
    else:
        b = 0
        c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return CivilDate(year, month, day)


@dataclass(frozen=True, order=True)
class CivilDate:
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month out of range: {self.month}")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise ValueError(f"day out of range: {self.year}-{self.month}-{self.day}")
        if self.year == REFORM_YEAR and self.month == 10 and 4 < self.day < 15:
            raise ValueError(f"{self.year}-{self.month}-{self.day} was skipped by the Gregorian reform")

    @classmethod
    def from_ordinal_day(cls, jdn: int) -> "CivilDate":
        return from_jdn(jdn)

    @classmethod
    def from_string(cls, s: str) -> "CivilDate":
        """Parse ``[公元前]N年M月D日``; 公元前N年 is astronomical year 1 - N."""
        m = _CIVIL_RE.match(s.strip())
        if m is None:
            raise MalformedDateString(f"not a civil date: {s!r}")
        bce, y, month, day = m.groups()
        year = int(y)
        if bce:
            if year == 0:
                raise MalformedDateString(f"there is no year 0 BCE: {s!r}")
            year = 1 - year
        try:
            return cls(year, int(month), int(day))
        except ValueError as e:
            raise MalformedDateString(str(e)) from e

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def month_days(self) -> int:
        return days_in_month(self.year, self.month)

    def to_ordinal_day(self) -> int:
        return to_jdn(self.year, self.month, self.day)

    def add_days(self, n: int) -> "CivilDate":
        if n == 0:
            return self
        return from_jdn(self.to_ordinal_day() + n)

    def compare(self, other: "CivilDate") -> int:
        a, b = self.to_ordinal_day(), other.to_ordinal_day()
        return (a > b) - (a < b)

    def __add__(self, n: int) -> "CivilDate":
        if not isinstance(n, int):
            return NotImplemented
        return self.add_days(n)

    def __sub__(self, other: Union[int, "CivilDate"]):
        if isinstance(other, CivilDate):
            return self.to_ordinal_day() - other.to_ordinal_day()
        if isinstance(other, int):
            return self.add_days(-other)
        return NotImplemented

    def isoformat(self) -> str:
        # astronomical year, e.g. -0086-03-30
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        if self.year <= 0:
            return f"{BCE_MARKER}{1 - self.year}年{self.month}月{self.day}日"
        return f"{self.year}年{self.month}月{self.day}日"
