"""
chinesecalendar.engines.interfaces
----------------------------------
Boundary between the lunar tables and the civil calendar they are
anchored to.

The tables only need day arithmetic and ordering from a civil date, so any
type with the capabilities below can carry a Year's first day. The
production implementation is chinesecalendar.core.civil.CivilDate.
"""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar, runtime_checkable

D = TypeVar("D", bound="CivilCalendarDate")


@runtime_checkable
class CivilCalendarDate(Protocol):
    year: int
    month: int
    day: int

    def is_leap_year(self) -> bool:
        ...

    def month_days(self) -> int:
        """Number of days in this date's month."""
        ...

    def add_days(self: D, n: int) -> D:
        """Return the date `n` days later (earlier for negative `n`)."""
        ...

    def compare(self, other: "CivilCalendarDate") -> int:
        """Negative, zero or positive as self is before, equal to or after `other`."""
        ...

    def to_ordinal_day(self) -> int:
        """Julian Day Number, or any day count shared by all dates of the type."""
        ...


# Builds a date from (year, month, day).
CivilFactory = Callable[[int, int, int], CivilCalendarDate]
