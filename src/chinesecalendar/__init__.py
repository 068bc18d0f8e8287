"""chinesecalendar public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Build the default calendar on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    parse,
    to_date,
    from_date,
    month_length,
    sanity_check,
    year_sexagenary,
    sexagenaries,
    sexagenary_first_day_of_month,
    plus_days,
    first_day_next_month,
    last_day_prev_month,
    same_day_next_month,
    same_day_prev_month,
    era_names,
    day_info,
    check_every_day,
    calendar_info,
    get_calendar,
    set_calendar,
)
from .bootstrap import build_calendar
from .core.civil import CivilDate
from .core.types import ChineseDate
from .core.errors import ChineseCalendarError

__all__ = [
    "parse",
    "to_date",
    "from_date",
    "month_length",
    "sanity_check",
    "year_sexagenary",
    "sexagenaries",
    "sexagenary_first_day_of_month",
    "plus_days",
    "first_day_next_month",
    "last_day_prev_month",
    "same_day_next_month",
    "same_day_prev_month",
    "era_names",
    "day_info",
    "check_every_day",
    "calendar_info",
    "get_calendar",
    "set_calendar",
    "build_calendar",
    "CivilDate",
    "ChineseDate",
    "ChineseCalendarError",
]
