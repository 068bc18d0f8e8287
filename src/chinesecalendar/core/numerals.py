"""
chinesecalendar.core.numerals
-----------------------------
Chinese numerals for years and months, ordinal day names and the
markers used in month names.
"""

from __future__ import annotations

from typing import Dict, Tuple

_DIGITS = ("", "一", "二", "三", "四", "五", "六", "七", "八", "九")
_TENS = ("", "十", "二十", "三十", "四十", "五十", "六十")

# 〇, 一, ..., 十, 十一, ..., 六十九
NUMBERS: Tuple[str, ...] = ("〇",) + tuple(
    _TENS[i // 10] + _DIGITS[i % 10] for i in range(1, 70)
)
NUMBER_INDEX: Dict[str, int] = {s: i for i, s in enumerate(NUMBERS)}

DAY_NAMES: Tuple[str, ...] = (
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
)
DAY_INDEX: Dict[str, int] = {s: i for i, s in enumerate(DAY_NAMES)}

FIRST_DAY = "初一"
NEW_MOON = "朔"
LAST_DAY = "晦"

YEAR_UNIT = "年"
# Year unit used by some Tang emperors in place of 年.
ALT_YEAR_UNIT = "載"
YEAR_UNITS = (YEAR_UNIT, ALT_YEAR_UNIT)
MONTH_UNIT = "月"
SEASONS = "春夏秋冬"

LEAP_MONTH = "閏"
LATER_MONTH = "後"
# Only used for the trailing months of the 15-month year of 漢武帝太初.
LATER_MONTH_SPECIAL = "後後"
FORWARD_MONTH = "進"

FIRST_YEAR = "一年"
FIRST_YEAR_ALT = "元年"
FIRST_MONTH = "一月"
FIRST_MONTH_ALT = "正月"


def number(n: int) -> str:
    if not 0 <= n < len(NUMBERS):
        raise ValueError(f"number out of range: {n}")
    return NUMBERS[n]


def year_number(year: str) -> int:
    """Return the numeric value of a canonical year string like 十二年."""
    return NUMBER_INDEX[year[:-1]]


def month_name(prefix: str, n: int) -> str:
    return prefix + NUMBERS[n] + MONTH_UNIT


def split_month_prefix(month: str) -> Tuple[str, str]:
    """Split 閏八月 into ('閏', '八月')."""
    if month[:1] in (LEAP_MONTH, LATER_MONTH):
        return month[:1], month[1:]
    return "", month


def canonical_month(month: str) -> str:
    """正月 -> 一月, 閏正月 -> 閏一月."""
    prefix, rest = split_month_prefix(month)
    return prefix + FIRST_MONTH if rest == FIRST_MONTH_ALT else month


def display_year(year: str) -> str:
    return FIRST_YEAR_ALT if year == FIRST_YEAR else year


def display_month(month: str) -> str:
    prefix, rest = split_month_prefix(month)
    return prefix + FIRST_MONTH_ALT if rest == FIRST_MONTH else month
