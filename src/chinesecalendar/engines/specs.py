from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from ..data.eras import ERAS, ROLLOVERS
from ..data.years import BCE_YEARS, BEIWEI_YEARS, CE_YEARS, SHU_YEARS, WU_YEARS
from .registry import EraDef
from .year_table import YearRow


@dataclass(frozen=True)
class TableSpec:
    """Pure data for one year table."""
    rows: Tuple[YearRow, ...]
    start_sexagenary: str          # label of the table's first year
    tail_length: Optional[int] = None  # length of the very last month, when known
    anchor: Optional[str] = None   # table whose first year follows this one

    def with_row(self, label: int, **kwargs) -> "TableSpec":
        """Copy with the row labelled `label` replaced field by field."""
        rows = tuple(replace(r, **kwargs) if r.label == label else r for r in self.rows)
        if rows == self.rows:
            raise KeyError(f"no row labelled {label}")
        return replace(self, rows=rows)


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a full calendar."""
    id: str
    tables: Mapping[str, TableSpec]
    eras: Tuple[EraDef, ...]
    rollovers: Mapping[Tuple[str, str], Tuple[str, str]] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)

    def tweak_table(self, name: str, table: TableSpec) -> "CalendarSpec":
        if name not in self.tables:
            raise KeyError(f"Unknown table '{name}'")
        return replace(self, tables={**self.tables, name: table})


# ============================================================
# YEAR TABLES
# ============================================================

CE_TABLE = TableSpec(CE_YEARS, start_sexagenary="辛酉")

# First days are counted back from 元始元年 in the CE table.
BCE_TABLE = TableSpec(BCE_YEARS, start_sexagenary="辛亥", tail_length=29, anchor="ce")

# 30 is tentative; 炎興 ends before the last month is reached.
SHU_TABLE = TableSpec(SHU_YEARS, start_sexagenary="癸卯", tail_length=30)

WU_TABLE = TableSpec(WU_YEARS, start_sexagenary="壬寅", tail_length=29)

BEIWEI_TABLE = TableSpec(BEIWEI_YEARS, start_sexagenary="庚辰")


# ============================================================
# CALENDARS
# ============================================================

TONGJIAN_SPEC = CalendarSpec(
    id="tongjian",
    tables={
        "ce": CE_TABLE,
        "bce": BCE_TABLE,
        "shu": SHU_TABLE,
        "wu": WU_TABLE,
        "beiwei": BEIWEI_TABLE,
    },
    eras=ERAS,
    rollovers=ROLLOVERS,
    meta={"description": "Eras as used in 資治通鑑, from 秦孝文王 to 齊和帝 and 北魏宣武帝."},
)

DEFAULT_SPEC = TONGJIAN_SPEC

ALL_SPECS: Dict[str, CalendarSpec] = {
    TONGJIAN_SPEC.id: TONGJIAN_SPEC,
}
