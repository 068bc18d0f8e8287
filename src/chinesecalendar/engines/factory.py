"""
chinesecalendar.engines.factory
-------------------------------
Transforms pure data specifications into a live, executable calendar.
"""

from __future__ import annotations

import logging
from typing import Dict

from ..core.civil import CivilDate
from .calendar import ChineseCalendar
from .interfaces import CivilFactory
from .registry import EraRegistry
from .segments import build_segments
from .specs import CalendarSpec, TableSpec
from .year_table import YearTable

logger = logging.getLogger(__name__)


def build_table(
    name: str,
    spec: TableSpec,
    civil: CivilFactory,
    built: Dict[str, YearTable],
) -> YearTable:
    anchor = None
    if spec.anchor is not None:
        if spec.anchor not in built:
            raise KeyError(f"Table '{name}' is anchored on unknown table '{spec.anchor}'")
        anchor = built[spec.anchor][0]
    return YearTable.from_rows(
        name,
        spec.rows,
        civil,
        start_sexagenary=spec.start_sexagenary,
        tail_length=spec.tail_length,
        anchor=anchor,
    )


def build_tables(spec: CalendarSpec, civil: CivilFactory = CivilDate) -> Dict[str, YearTable]:
    """Build every table of `spec`; anchored tables after the tables they hang off."""
    built: Dict[str, YearTable] = {}
    for name, ts in spec.tables.items():
        if ts.anchor is None:
            built[name] = build_table(name, ts, civil, built)
    for name, ts in spec.tables.items():
        if ts.anchor is not None:
            built[name] = build_table(name, ts, civil, built)
    return {name: built[name] for name in spec.tables}


def make_calendar(spec: CalendarSpec, *, civil: CivilFactory = CivilDate) -> ChineseCalendar:
    """The universal entry point."""
    # 1. Year tables
    tables = build_tables(spec, civil)

    # 2. Era names -> (table, first year)
    registry = EraRegistry.build(spec.eras, tables)

    # 3. Segments need the forward conversion, so resolve them with a bare calendar
    bare = ChineseCalendar(registry, rollovers=spec.rollovers)
    segments = build_segments(spec.eras, bare)

    logger.debug("calendar %s: %d tables, %d segments", spec.id, len(tables), len(segments))
    return ChineseCalendar(registry.with_segments(segments), rollovers=spec.rollovers)
