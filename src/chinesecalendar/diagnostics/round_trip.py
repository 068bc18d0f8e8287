from __future__ import annotations

import argparse
import random
from typing import Optional

import chinesecalendar
from chinesecalendar.core.civil import CivilDate
from chinesecalendar.engines.sanity import round_trip_failures


def random_date(start: CivilDate, end: CivilDate) -> CivilDate:
    span = end - start
    return start + random.randint(0, span)


def roundtrip_test(
    N: int,
    start: CivilDate,
    end: CivilDate,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        for s in chinesecalendar.from_date(d0):
            back = chinesecalendar.to_date(s)
            if back != d0:
                failures += 1
                print("\nFAIL")
                print("d0:", d0)
                print("chinese:", s)
                print("back:", back)
                print("day_info:", chinesecalendar.day_info(d0))
                if failures >= max_failures:
                    return failures

    return failures


def main(argv: Optional[list[str]] = None) -> int:
    cal = chinesecalendar.get_calendar()
    p = argparse.ArgumentParser(description="Round-trip tests: civil -> era notation -> civil.")
    p.add_argument("--N", type=int, default=2000, help="Random trials.")
    p.add_argument("--start", type=str, default=str(cal.first_day), help="Start date, e.g. 公元前250年11月4日.")
    p.add_argument("--end", type=str, default=str(cal.last_day), help="End date, e.g. 502年2月1日.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    p.add_argument("--all", action="store_true", help="Check every day in the range instead of sampling.")
    args = p.parse_args(argv)

    start = CivilDate.from_string(args.start)
    end = CivilDate.from_string(args.end)
    if end < start:
        raise SystemExit("--end must not be before --start")

    if args.all:
        failures = 0
        for f in round_trip_failures(cal, start, end):
            failures += 1
            print(f"FAIL {f.civil_date} -> {f.rendering} -> {f.result}")
            if failures >= args.max_failures:
                break
        print(f"every day {start} .. {end}: failures={failures}")
    else:
        failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
        print(f"{args.N} random days in {start} .. {end}: failures={failures}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
