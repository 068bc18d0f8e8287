from __future__ import annotations
from typing import Optional

from chinesecalendar.engines.calendar import ChineseCalendar
from chinesecalendar.engines.factory import make_calendar
from chinesecalendar.engines.specs import ALL_SPECS, DEFAULT_SPEC

def build_calendar(name: Optional[str] = None) -> ChineseCalendar:
    spec = DEFAULT_SPEC if name is None else ALL_SPECS[name]
    return make_calendar(spec)
