"""
chinesecalendar.core.sexagenary
-------------------------------
The sexagenary cycle (干支): 60 two-glyph labels naming years, months
and days.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .errors import InvalidLabel

STEMS = "甲乙丙丁戊己庚辛壬癸"
BRANCHES = "子丑寅卯辰巳午未申酉戌亥"

LABELS: Tuple[str, ...] = tuple(STEMS[i % 10] + BRANCHES[i % 12] for i in range(60))
_INDEX: Dict[str, int] = {s: i for i, s in enumerate(LABELS)}

# JDN 11 is a 甲子 day.
_JDN_EPOCH = 11


def is_label(s: str) -> bool:
    return s in _INDEX


def index_of(label: str) -> int:
    try:
        return _INDEX[label]
    except KeyError:
        raise InvalidLabel(f"not a sexagenary label: {label!r}") from None


def diff(a: str, b: str) -> int:
    """Circular distance from `a` forward to `b`, always in [0, 60)."""
    return (index_of(b) - index_of(a)) % 60


def add(label: str, n: int) -> str:
    return LABELS[(index_of(label) + n) % 60]


def sequence(start: str, count: int) -> List[str]:
    """Return `count` consecutive labels beginning with `start`."""
    if count < 0:
        raise ValueError("count must be >= 0")
    i = index_of(start)
    return [LABELS[(i + k) % 60] for k in range(count)]


def from_ordinal_day(jdn: int) -> str:
    return LABELS[(jdn - _JDN_EPOCH) % 60]


def day_sexagenary(d) -> str:
    """Label of a civil day, from its Julian Day Number."""
    return from_ordinal_day(d.to_ordinal_day())
