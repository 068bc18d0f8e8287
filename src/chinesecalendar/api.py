from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Union

from .attributes import standard as _standard  # noqa: F401  (registers the standard attributes)
from .attributes.registry import compute_attributes
from .core import sexagenary as sx
from .core.civil import CivilDate
from .core.types import ChineseDate, DayInfo
from .engines import sanity as _sanity
from .engines.calendar import ChineseCalendar
from .engines.factory import make_calendar

DateLike = Union[ChineseDate, str]
CivilLike = Union[CivilDate, str]

_calendar: Optional[ChineseCalendar] = None

def set_calendar(cal: ChineseCalendar) -> None:
    global _calendar
    _calendar = cal

def _cal(calendar: Optional[ChineseCalendar] = None) -> ChineseCalendar:
    if calendar is not None:
        return calendar
    if _calendar is None:
        raise RuntimeError("Calendar not initialized")
    return _calendar

def get_calendar(name: Optional[str] = None) -> ChineseCalendar:
    """The installed calendar, or a freshly built one for spec `name`."""
    if name is None:
        return _cal()
    from .engines.specs import ALL_SPECS
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown calendar spec '{name}'. Available: {sorted(ALL_SPECS)}")
    return make_calendar(ALL_SPECS[name])

def calendar_info(*, calendar: Optional[ChineseCalendar] = None) -> Dict[str, Any]:
    return _cal(calendar).info()

# ============================================================
# Conversion
# ============================================================

def parse(s: str, *, calendar: Optional[ChineseCalendar] = None) -> ChineseDate:
    return _cal(calendar).parse(s)

def to_date(date: DateLike, *, check: bool = True, calendar: Optional[ChineseCalendar] = None) -> CivilDate:
    return _cal(calendar).to_date(date, check=check)

def from_date(d: CivilLike, *, calendar: Optional[ChineseCalendar] = None) -> List[str]:
    return _cal(calendar).from_date(d)

def month_length(date: DateLike, *, calendar: Optional[ChineseCalendar] = None) -> int:
    return _cal(calendar).month_length(date)

def year_sexagenary(date: DateLike, *, calendar: Optional[ChineseCalendar] = None) -> str:
    return _cal(calendar).year_sexagenary(date)

def sexagenary_first_day_of_month(date: DateLike, *, calendar: Optional[ChineseCalendar] = None) -> str:
    return _cal(calendar).sexagenary_first_day_of_month(date)

def sexagenaries(start: str, count: int) -> List[str]:
    return sx.sequence(start, count)

def era_names(*, calendar: Optional[ChineseCalendar] = None) -> List[str]:
    return _cal(calendar).era_names()

def day_info(
    d: CivilLike,
    *,
    attributes: Sequence[str] = (),
    calendar: Optional[ChineseCalendar] = None,
) -> DayInfo:
    info = _cal(calendar).day_info(d)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

# ============================================================
# Navigation
# ============================================================

def plus_days(date: DateLike, days: int, *, calendar: Optional[ChineseCalendar] = None) -> ChineseDate:
    return _cal(calendar).plus_days(date, days)

def first_day_next_month(
    date: DateLike, *, continuous: bool = False, calendar: Optional[ChineseCalendar] = None
) -> ChineseDate:
    return _cal(calendar).first_day_next_month(date, continuous=continuous)

def last_day_prev_month(
    date: DateLike, *, continuous: bool = False, calendar: Optional[ChineseCalendar] = None
) -> ChineseDate:
    return _cal(calendar).last_day_prev_month(date, continuous=continuous)

def same_day_next_month(date: DateLike, *, calendar: Optional[ChineseCalendar] = None) -> ChineseDate:
    return _cal(calendar).same_day_next_month(date)

def same_day_prev_month(date: DateLike, *, calendar: Optional[ChineseCalendar] = None) -> ChineseDate:
    return _cal(calendar).same_day_prev_month(date)

# ============================================================
# Checks
# ============================================================

def sanity_check(*, calendar: Optional[ChineseCalendar] = None) -> bool:
    return _sanity.sanity_check(_cal(calendar).tables())

def check_every_day(
    start: Optional[CivilLike] = None,
    end: Optional[CivilLike] = None,
    *,
    calendar: Optional[ChineseCalendar] = None,
) -> bool:
    if isinstance(start, str):
        start = CivilDate.from_string(start)
    if isinstance(end, str):
        end = CivilDate.from_string(end)
    return _sanity.check_every_day(_cal(calendar), start, end)
