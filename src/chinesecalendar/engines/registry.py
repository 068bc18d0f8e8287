"""
chinesecalendar.engines.registry
--------------------------------
Era registry: maps era names (monarch title, title + era, or an attested
alternative name) to a year table and the label of the era's first year,
and holds the era segments used for reverse lookup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial, reduce
from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

from ..core.errors import DuplicateEra, UnknownEra
from ..core.types import EraSegment
from .interfaces import CivilCalendarDate
from .year_table import YearTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EraDef:
    """
    One span of an era, as registered.

    start: where the span begins, relative to 元年 of the era: "" for 元年
        itself, a month like "八月" (元年八月), or a full "六年十二月".
    end: "" when the span ends the day before the next span starts;
        otherwise a month ("十一月", last day of that month in 元年), a
        year ("五年", its first day) or "四年三月".
    prev_era, next_era: neighbours for month navigation; "" means the
        previous/next registered span.
    """
    name: str
    table: str
    start_year: int
    start: str = ""
    end: str = ""
    prev_era: str = ""
    next_era: str = ""
    aliases: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EraEntry:
    name: str  # canonical name
    table: YearTable
    start_year: int


def _register(
    tables: Mapping[str, YearTable],
    acc: Mapping[str, EraEntry],
    era: EraDef,
) -> Dict[str, EraEntry]:
    if era.table not in tables:
        raise KeyError(f"Era '{era.name}' refers to unknown table '{era.table}'")
    table = tables[era.table]
    table.index_of(era.start_year)
    entry = EraEntry(era.name, table, era.start_year)

    names = (era.name,) + tuple(era.aliases)
    for name in names:
        old = acc.get(name)
        if old is not None and old != entry:
            raise DuplicateEra(f"'{name}' is already registered for {old.name}")
    return {**acc, **{name: entry for name in names}}


class EraRegistry:
    def __init__(
        self,
        entries: Mapping[str, EraEntry],
        defs: Sequence[EraDef],
        segments: Sequence[EraSegment] = (),
    ):
        self._entries = MappingProxyType(dict(entries))
        self.defs: Tuple[EraDef, ...] = tuple(defs)
        self.segments: Tuple[EraSegment, ...] = tuple(segments)
        durations: Dict[str, List[EraSegment]] = {}
        for seg in self.segments:
            durations.setdefault(seg.era, []).append(seg)
        self._durations = MappingProxyType({k: tuple(v) for k, v in durations.items()})

    @classmethod
    def build(cls, defs: Sequence[EraDef], tables: Mapping[str, YearTable]) -> "EraRegistry":
        entries = reduce(partial(_register, tables), defs, {})
        logger.debug("registered %d era names from %d spans", len(entries), len(defs))
        return cls(entries, defs)

    def with_segments(self, segments: Sequence[EraSegment]) -> "EraRegistry":
        return EraRegistry(self._entries, self.defs, segments)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def entry(self, name: str) -> EraEntry:
        if name not in self._entries:
            raise UnknownEra(f"Unknown era '{name}'")
        return self._entries[name]

    def resolve(self, name: str) -> Tuple[YearTable, int]:
        e = self.entry(name)
        return e.table, e.start_year

    def canonical(self, name: str) -> str:
        return self.entry(name).name

    def names(self) -> List[str]:
        """Canonical era names in registration order."""
        return list(dict.fromkeys(d.name for d in self.defs))

    def aliases(self) -> List[str]:
        return list(self._entries)

    def tables(self) -> List[YearTable]:
        out: Dict[int, YearTable] = {}
        for e in self._entries.values():
            out.setdefault(id(e.table), e.table)
        return list(out.values())

    def segments_of(self, era: str) -> Tuple[EraSegment, ...]:
        return self._durations.get(era, ())

    def segments_containing(self, d: CivilCalendarDate) -> List[EraSegment]:
        """Segments covering `d`, in registration order."""
        jdn = d.to_ordinal_day()
        return [s for s in self.segments if s.contains_day(jdn)]

    def date_in_range(self, d: CivilCalendarDate, era: str) -> bool:
        jdn = d.to_ordinal_day()
        return any(s.contains_day(jdn) for s in self.segments_of(era))
