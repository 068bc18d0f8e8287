#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import argparse

import chinesecalendar
from chinesecalendar.core.civil import CivilDate
from chinesecalendar.diagnostics.new_years_table import first_month_day
from chinesecalendar.engines.year_table import YearTable


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "chinesecalendar[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "chinesecalendar[diagnostics]"') from e


def days_since_winter_solstice(d: CivilDate) -> int:
    """
    Days since Dec 22 of the previous civil year, with Dec 22 = 1.
    Dates before Dec 22 of their own year count from that year's Dec 22.
    """
    ws = CivilDate(d.year - 1, 12, 22)
    if d.month == 12 and d.day >= 22:
        ws = CivilDate(d.year, 12, 22)
    return (d - ws) + 1


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 14.0
    hollow: bool = False


def build_series(np, table: YearTable, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    xs: List[int] = []
    ys: List[float] = []
    for Y in range(start_year, end_year + 1):
        d = first_month_day(table, Y)
        if d is None:
            continue
        xs.append(Y)
        ys.append(float(days_since_winter_solstice(d)))
    return np.array(xs, dtype=int), np.array(ys, dtype=float)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of 正月初一 across the year tables.")
    p.add_argument("--start-year", type=int, default=-250)
    p.add_argument("--end-year", type=int, default=502)
    p.add_argument("--outbase", default="new_year_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    styles: Dict[str, Style] = {
        "bce":    Style("Qin / Western Han", "tab:purple", "o", size=10),
        "ce":     Style("Han / Wei / Jin / Southern", "tab:blue", "o", size=10),
        "shu":    Style("Shu", "tab:green", "_", size=18),
        "wu":     Style("Wu", "tab:red", "|", size=18),
        "beiwei": Style("Northern Wei", "0.45", "o", size=18, hollow=True),
    }

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Civil year")
    ax.set_ylabel("Days since winter solstice (Dec 22 = 1)")
    ax.set_title("正月初一 across year tables")

    for table in chinesecalendar.get_calendar().tables():
        st = styles.get(table.name, Style(table.name, "black", "."))
        x, y = build_series(np, table, args.start_year, args.end_year)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, alpha=0.60, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color, alpha=0.40, label=st.label)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
