from __future__ import annotations

import argparse
import random
from typing import List

import calarith
from calarith.rules.interfaces import CalendarRuleProtocol, Fields


def parse_calendars(s: str) -> List[str]:
    # "gregorian,simple" -> ["gregorian", "simple"]
    return [x.strip() for x in s.split(",") if x.strip()]


def random_fields(rule: CalendarRuleProtocol, rng: random.Random, start_year: int, end_year: int) -> Fields:
    year = rng.randint(start_year, end_year)
    month = rng.randint(1, rule.months_in_year(year))
    day = rng.randint(1, rule.days_in_month(year, month))
    return (
        year,
        month,
        day,
        rng.randrange(rule.hours_in_day),
        rng.randrange(rule.minutes_in_hour),
        rng.randrange(rule.seconds_in_minute),
        rng.randrange(rule.milliseconds_in_second),
    )


def roundtrip_test(
    calendar: str,
    N: int,
    start_year: int,
    end_year: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    rng = random.Random(seed)
    rule = calarith.get_calendar(calendar)
    failures = 0

    for _ in range(N):
        fields = random_fields(rule, rng, start_year, end_year)
        scalar = rule.to_scalar_strict(*fields)
        back = rule.from_scalar(scalar)
        if back != fields:
            failures += 1
            print("\nFAIL (round trip)")
            print("calendar:", calendar)
            print("fields:", fields)
            print("scalar:", scalar)
            print("back:", back)
            if failures >= max_failures:
                return failures

        before = rule.from_scalar(scalar - 1)
        if not before < back:
            failures += 1
            print("\nFAIL (order)")
            print("calendar:", calendar)
            print("scalar:", scalar)
            print("fields(scalar - 1):", before)
            print("fields(scalar):", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: fields -> scalar -> fields.")
    p.add_argument("--calendars", type=str, default="gregorian,simple",
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start-year", type=int, default=-10000, help="First year (astronomical).")
    p.add_argument("--end-year", type=int, default=10000, help="Last year (astronomical).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    total_fail = 0
    for cal in parse_calendars(args.calendars):
        print(f"Testing {cal} ...")
        total_fail += roundtrip_test(
            cal, N=args.N, start_year=args.start_year, end_year=args.end_year,
            seed=args.seed, max_failures=args.max_failures,
        )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
