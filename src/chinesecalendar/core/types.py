from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .civil import CivilDate
from .errors import UnknownMonth
from .numerals import FIRST_DAY, FIRST_MONTH, FIRST_YEAR, display_month, display_year

# Years with this many months or fewer are unfilled table entries.
PLACEHOLDER_MAX_MONTHS = 6

@dataclass(frozen=True)
class Month:
    name: str        # 一月, 閏八月, 後十二月
    sexagenary: str  # label of the first day

@dataclass(frozen=True)
class Year:
    label: int
    first_day: Optional[CivilDate]
    months: Tuple[Month, ...]

    @property
    def is_placeholder(self) -> bool:
        return len(self.months) <= PLACEHOLDER_MAX_MONTHS

    def month_index(self, name: str) -> int:
        for i, m in enumerate(self.months):
            if m.name == name:
                return i
        raise UnknownMonth(f"no month {name} in year {self.label}")

@dataclass(frozen=True)
class ChineseDate:
    """A date in era notation, not yet resolved against the tables."""
    era: str
    year: str = FIRST_YEAR
    month: str = FIRST_MONTH
    day_of_month: str = FIRST_DAY
    season: str = field(default="", compare=False)

    def __str__(self) -> str:
        return self.era + display_year(self.year) + display_month(self.month) + self.day_of_month

@dataclass(frozen=True)
class EraSegment:
    """A contiguous span of civil days during which one era name applies."""
    era: str
    start_chinese: ChineseDate
    start: CivilDate
    end: CivilDate
    prev_era: str
    next_era: str
    order: int  # registration index
    start_day: int = field(init=False, repr=False, compare=False)
    end_day: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_day", self.start.to_ordinal_day())
        object.__setattr__(self, "end_day", self.end.to_ordinal_day())

    def contains(self, d: CivilDate) -> bool:
        return self.start_day <= d.to_ordinal_day() <= self.end_day

    def contains_day(self, jdn: int) -> bool:
        return self.start_day <= jdn <= self.end_day

@dataclass(frozen=True)
class DayInfo:
    civil_date: CivilDate
    renderings: Tuple[str, ...]
    attributes: Optional[Dict[str, Any]] = None
