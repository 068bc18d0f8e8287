from __future__ import annotations
from typing import Any, Dict

from ..core.sexagenary import from_ordinal_day
from .registry import register_attribute, jdn

def julian_day(info) -> Dict[str, Any]:
    return {"jdn": jdn(info)}

def weekday(info) -> Dict[str, Any]:
    # 0=Mon..6=Sun
    return {"weekday": jdn(info) % 7}

def day_sexagenary(info) -> Dict[str, Any]:
    return {"day_sexagenary": from_ordinal_day(jdn(info))}

register_attribute("jdn", julian_day)
register_attribute("weekday", weekday)
register_attribute("day_sexagenary", day_sexagenary)
