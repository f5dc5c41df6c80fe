from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from fractions import Fraction
from typing import Any, Tuple

from .core.errors import CalarithError, CalendarRangeError

_DATE_RE = re.compile(
    r"^(?P<year>[-+]?\d+)-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[ T](?P<hour>\d{1,2}):(?P<minute>\d{1,2})(?::(?P<second>\d{1,2})(?:\.(?P<frac>\d+))?)?)?$"
)

_DIAG_TOOLS = {
    "round-trip": "calarith.diagnostics.round_trip",
    "year-lengths": "calarith.diagnostics.year_lengths",
}


def _parse_date(s: str) -> Tuple[Any, ...]:
    """Six integer fields plus the fractional second as an exact Fraction."""
    m = _DATE_RE.match(s.strip())
    if m is None:
        raise argparse.ArgumentTypeError(f"expected [-]Y-M-D[ h:m[:s[.ms]]], got {s!r}")
    *fields, frac = m.groups()
    fraction = Fraction(f"0.{frac}") if frac else Fraction(0)
    return tuple(int(v) if v is not None else 0 for v in fields) + (fraction,)


def _date_fields(date: Tuple[Any, ...], rule) -> Tuple[int, ...]:
    """Scale the fractional second of a parsed DATE to the calendar's sub-second unit."""
    *fields, fraction = date
    units = fraction * rule.milliseconds_in_second
    if units.denominator != 1:
        raise CalendarRangeError(
            f"fractional second {float(fraction)} is finer than 1/{rule.milliseconds_in_second} s in {rule.name}"
        )
    return tuple(fields) + (int(units),)


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


def _show(value) -> str:
    return f"{value.isoformat(milliseconds=True)} ({value.calendar.name})"


def cmd_list(args: argparse.Namespace) -> int:
    import calarith

    for name in calarith.list_calendars():
        print(f"{name:<16} {calarith.get_calendar(name).name}")
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    import calarith

    for key, value in calarith.calendar_info(args.id).items():
        print(f"{key:<24} {value}")
    return 0


def cmd_to_scalar(args: argparse.Namespace) -> int:
    import calarith

    if len(args.fields) > 6:
        print("calarith: error: at most 7 fields (year .. millisecond)", file=sys.stderr)
        return 2
    rule = calarith.get_calendar(args.calendar)
    fields = [args.year] + args.fields
    if args.strict:
        scalar = rule.to_scalar_strict(*fields)
    else:
        scalar = rule.to_scalar(*fields)
    print(scalar)
    return 0


def cmd_from_scalar(args: argparse.Namespace) -> int:
    import calarith

    value = calarith.Instant(args.scalar, calarith.get_calendar(args.calendar))
    print(_show(value))
    return 0


def cmd_shift(args: argparse.Namespace) -> int:
    import calarith

    rule = calarith.get_calendar(args.calendar)
    value = calarith.Instant.from_components(rule, *_date_fields(args.date, rule))
    value = value.add_years(args.years).add_months(args.months)
    value = value.add_days(args.days).add_hours(args.hours).add_minutes(args.minutes).add_seconds(args.seconds)
    print(_show(value))
    return 0


def cmd_diff(args: argparse.Namespace) -> int:
    import calarith

    rule = calarith.get_calendar(args.calendar)
    start = calarith.Instant.from_components(rule, *_date_fields(args.start, rule))
    end = calarith.Instant.from_components(rule, *_date_fields(args.end, rule))
    span = end - start
    print(span.format(start.calendar))
    return 0


def cmd_months(args: argparse.Namespace) -> int:
    import calarith

    rule = calarith.get_calendar(args.calendar)
    for month in range(1, rule.months_in_year(args.year) + 1):
        print(f"{month:>3} {rule.days_in_month(args.year, month):>4}")
    print(f"total {rule.days_in_year(args.year):>4}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(
        prog="calarith",
        description="Calendar arithmetic toolkit CLI.",
        epilog="BCE dates start with '-'; put them after '--', e.g. calarith shift --years 1 -- -0044-03-15",
    )
    p.add_argument("--calendars", metavar="FILE", help="JSON file with extra calendar definitions")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List registered calendars")

    p_info = sub.add_parser("info", help="Describe a calendar")
    p_info.add_argument("id")

    p_to = sub.add_parser("to-scalar", help="Calendar fields -> scalar")
    p_to.add_argument("year", type=int)
    p_to.add_argument("fields", type=int, nargs="*", metavar="FIELD", help="month day hour minute second millisecond")
    p_to.add_argument("--calendar", default="gregorian")
    p_to.add_argument("--strict", action="store_true", help="reject out-of-range fields instead of clamping")

    p_from = sub.add_parser("from-scalar", help="Scalar -> calendar fields")
    p_from.add_argument("scalar", type=int)
    p_from.add_argument("--calendar", default="gregorian")

    p_shift = sub.add_parser("shift", help="Move a date by calendar units")
    p_shift.add_argument("date", type=_parse_date)
    p_shift.add_argument("--calendar", default="gregorian")
    for unit in ("years", "months", "days", "hours", "minutes", "seconds"):
        p_shift.add_argument(f"--{unit}", type=int, default=0)

    p_diff = sub.add_parser("diff", help="Duration from START to END")
    p_diff.add_argument("start", type=_parse_date)
    p_diff.add_argument("end", type=_parse_date)
    p_diff.add_argument("--calendar", default="gregorian")

    p_months = sub.add_parser("months", help="Month lengths of a year")
    p_months.add_argument("year", type=int)
    p_months.add_argument("--calendar", default="gregorian")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=sorted(_DIAG_TOOLS), help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    if rest and args.cmd != "diag":
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "list": cmd_list,
        "info": cmd_info,
        "to-scalar": cmd_to_scalar,
        "from-scalar": cmd_from_scalar,
        "shift": cmd_shift,
        "diff": cmd_diff,
        "months": cmd_months,
    }

    try:
        if args.calendars:
            import calarith
            calarith.load_calendars(args.calendars, overwrite=True)

        if args.cmd == "diag":
            return _run_module_main(_DIAG_TOOLS[args.tool], rest)
        return handlers[args.cmd](args)
    except (CalarithError, KeyError) as e:
        msg = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f"calarith: error: {msg}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
