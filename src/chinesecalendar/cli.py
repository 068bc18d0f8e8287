from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import ChineseCalendarError

_CIVIL_RE = re.compile(r"^(公元前)?\d+年")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _calendar(name: str | None):
    import chinesecalendar
    return chinesecalendar.get_calendar(name)


def cmd_to_date(args: argparse.Namespace) -> int:
    cal = _calendar(args.calendar)
    d = cal.to_date(args.date, check=not args.no_check)
    print(d.isoformat() if args.iso else d)
    return 0


def cmd_from_date(args: argparse.Namespace) -> int:
    cal = _calendar(args.calendar)
    out = cal.from_date(args.date)
    if not out:
        print(f"{args.date}: no era covers this date", file=sys.stderr)
        return 1
    for s in out:
        print(s)
    return 0


def cmd_month_length(args: argparse.Namespace) -> int:
    cal = _calendar(args.calendar)
    print(cal.month_length(args.date))
    return 0


def cmd_day(args: argparse.Namespace) -> int:
    import chinesecalendar

    info = chinesecalendar.day_info(
        args.date, attributes=tuple(args.attr), calendar=_calendar(args.calendar)
    )
    print(info)
    return 0


def cmd_sexagenaries(args: argparse.Namespace) -> int:
    import chinesecalendar

    print(" ".join(chinesecalendar.sexagenaries(args.start, args.count)))
    return 0


def cmd_eras(args: argparse.Namespace) -> int:
    cal = _calendar(args.calendar)
    if not args.segments:
        for name in cal.era_names():
            print(name)
        return 0
    for seg in cal.registry.segments:
        print(f"{seg.era}  {seg.start} .. {seg.end}  prev={seg.prev_era or '-'}  next={seg.next_era or '-'}")
    return 0


def cmd_sanity(args: argparse.Namespace) -> int:
    import chinesecalendar

    cal = _calendar(args.calendar)
    ok = chinesecalendar.sanity_check(calendar=cal)
    if ok and args.every_day:
        ok = chinesecalendar.check_every_day(calendar=cal)
    print("ok" if ok else "FAILED")
    return 0 if ok else 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="chinesecalendar", description="Chinese era-date converter CLI.")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More logging (repeatable)")
    p.add_argument("--calendar", default=None, help="Calendar spec name (default: the installed calendar)")
    sub = p.add_subparsers(dest="cmd", required=True)

    # conversion
    p_to = sub.add_parser("to-date", help="Era notation -> civil date")
    p_to.add_argument("date", help="e.g. 漢平帝元始元年二月己酉")
    p_to.add_argument("--no-check", action="store_true", help="Do not require the date to lie within its era")
    p_to.add_argument("--iso", action="store_true", help="Print astronomical ISO form")
    p_to.set_defaults(fn=cmd_to_date)

    p_from = sub.add_parser("from-date", help="Civil date -> era notation")
    p_from.add_argument("date", help="e.g. 237年4月13日 or 公元前87年3月30日")
    p_from.set_defaults(fn=cmd_from_date)

    p_len = sub.add_parser("month-length", help="Number of days in a month")
    p_len.add_argument("date", help="e.g. 漢平帝元始元年正月")
    p_len.set_defaults(fn=cmd_month_length)

    p_day = sub.add_parser("day", help="Civil date -> day info with attributes")
    p_day.add_argument("date")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    p_day.set_defaults(fn=cmd_day)

    p_sx = sub.add_parser("sexagenaries", help="List consecutive sexagenary labels")
    p_sx.add_argument("start")
    p_sx.add_argument("count", type=int)
    p_sx.set_defaults(fn=cmd_sexagenaries)

    p_eras = sub.add_parser("eras", help="List era names")
    p_eras.add_argument("--segments", action="store_true", help="Show civil spans of every era segment")
    p_eras.set_defaults(fn=cmd_eras)

    p_sanity = sub.add_parser("sanity", help="Check the year tables")
    p_sanity.add_argument("--every-day", action="store_true", help="Also round-trip every covered day (slow)")
    p_sanity.set_defaults(fn=cmd_sanity)

    # diagnostics
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-years", "new-year-scatter"],
        help="Which diagnostic to run",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `chinesecalendar 237年4月13日` or `chinesecalendar 魏明帝景初元年四月`
    if argv and not argv[0].startswith("-") and argv[0] not in _COMMANDS:
        argv = (["from-date"] if _CIVIL_RE.match(argv[0]) else ["to-date"]) + argv

    p = build_parser()
    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.WARNING - 10 * min(args.verbose, 2),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "chinesecalendar.diagnostics.round_trip",
            "new-years": "chinesecalendar.diagnostics.new_years_table",
            "new-year-scatter": "chinesecalendar.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    try:
        return args.fn(args)
    except (ChineseCalendarError, KeyError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


_COMMANDS = ("to-date", "from-date", "month-length", "day", "sexagenaries", "eras", "sanity", "diag")


if __name__ == "__main__":
    raise SystemExit(main())
