"""
chinesecalendar.engines.segments
--------------------------------
Turns registered era spans into EraSegments (civil start and end days).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.errors import TableCorruption
from ..core.numerals import FIRST_YEAR_ALT, LAST_DAY, MONTH_UNIT, YEAR_UNIT
from ..core.types import ChineseDate, EraSegment
from .interfaces import CivilCalendarDate
from .registry import EraDef


def start_suffix(start: str) -> str:
    if not start:
        return FIRST_YEAR_ALT
    if YEAR_UNIT in start:
        return start
    return FIRST_YEAR_ALT + start


def end_suffix(end: str) -> str:
    suffix = end if YEAR_UNIT in end else FIRST_YEAR_ALT + end
    if end.endswith(MONTH_UNIT):
        suffix += LAST_DAY
    return suffix


@dataclass
class _Draft:
    era: str
    start_chinese: ChineseDate
    start: CivilCalendarDate
    end: Optional[CivilCalendarDate]
    prev_era: str
    next_era: str


def build_segments(eras: Sequence[EraDef], calendar) -> Tuple[EraSegment, ...]:
    """
    `calendar` needs parse() and to_date(check=False); era ranges are not
    known yet at this point.
    """
    drafts: List[_Draft] = []
    for i, era in enumerate(eras):
        start_chinese = calendar.parse(era.name + start_suffix(era.start))
        start = calendar.to_date(start_chinese, check=False)
        end = calendar.to_date(era.name + end_suffix(era.end), check=False) if era.end else None
        prev_era = era.prev_era or (eras[i - 1].name if i > 0 else "")
        next_era = era.next_era or (eras[i + 1].name if i + 1 < len(eras) else "")
        drafts.append(_Draft(era.name, start_chinese, start, end, prev_era, next_era))

    # open ends close the day before the following span starts
    for i, (era, draft) in enumerate(zip(eras, drafts)):
        if draft.end is not None:
            continue
        if era.next_era:
            following = next((d for d in drafts if d.era == era.next_era), None)
        else:
            following = drafts[i + 1] if i + 1 < len(drafts) else None
        if following is None:
            raise TableCorruption(f"cannot determine the end of era {era.name}")
        draft.end = following.start.add_days(-1)

    return tuple(
        EraSegment(d.era, d.start_chinese, d.start, d.end, d.prev_era, d.next_era, i)
        for i, d in enumerate(drafts)
    )
