from __future__ import annotations

import argparse
from typing import List, Optional

import chinesecalendar
from chinesecalendar.core.civil import CivilDate
from chinesecalendar.core.errors import YearOutOfRange
from chinesecalendar.core.numerals import FIRST_MONTH
from chinesecalendar.engines.year_table import YearTable, days_from_new_year


def mmdd(d: CivilDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def first_month_day(table: YearTable, label: int) -> Optional[CivilDate]:
    """Civil date of 正月初一 of year `label` in `table`, or None."""
    try:
        year = table[table.index_of(label)]
    except YearOutOfRange:
        return None
    if year.is_placeholder:
        return None
    offset, _ = days_from_new_year(FIRST_MONTH, year)
    return year.first_day.add_days(offset)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print the date of 正月初一 in every year table.")
    p.add_argument("--from-year", type=int, default=220)
    p.add_argument("--to-year", type=int, default=281)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    p.add_argument(
        "--differ",
        action="store_true",
        help="After the table, list the years in which the tables disagree.",
    )
    args = p.parse_args(argv)

    def fmt(d: Optional[CivilDate]) -> str:
        if d is None:
            return "-"
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    tables = chinesecalendar.get_calendar().tables()

    # table header
    headers = ["Year"] + [t.name for t in tables]
    colw = [5] + [max(11, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    differ: List[int] = []
    for Y in range(Y0, Y1 + 1):
        days = [first_month_day(t, Y) for t in tables]
        row = [str(Y).ljust(colw[0])] + [fmt(d).ljust(w) for d, w in zip(days, colw[1:])]
        print("  ".join(row))
        if len({d for d in days if d is not None}) > 1:
            differ.append(Y)

    if args.differ:
        print("\nYears in which the tables disagree:")
        print(", ".join(map(str, differ)) if differ else "(none)")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
