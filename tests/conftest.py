# tests/conftest.py

from dataclasses import dataclass

import pytest

import chinesecalendar


@dataclass(frozen=True)
class DayCountDate:
    """
    A second civil-date type: a bare day count split into 12 months of 30
    days. Enough for the year tables, which only need day arithmetic.
    """
    n: int

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "DayCountDate":
        return cls(year * 360 + (month - 1) * 30 + (day - 1))

    @property
    def year(self) -> int:
        return self.n // 360

    @property
    def month(self) -> int:
        return self.n % 360 // 30 + 1

    @property
    def day(self) -> int:
        return self.n % 30 + 1

    def is_leap_year(self) -> bool:
        return False

    def month_days(self) -> int:
        return 30

    def add_days(self, n: int) -> "DayCountDate":
        return DayCountDate(self.n + n)

    def compare(self, other: "DayCountDate") -> int:
        return (self.n > other.n) - (self.n < other.n)

    def to_ordinal_day(self) -> int:
        return self.n


@pytest.fixture(scope="session")
def cal():
    return chinesecalendar.get_calendar()
