from __future__ import annotations

import argparse
from datetime import datetime
import sys
import re
import importlib
import inspect
from typing import Iterable

from loguru import logger

from tqcal.core.errors import InvalidDateError, TqcalError
from tqcal.core.time import is_leap_year
from tqcal.engines.specs import ALL_SPECS


_DATE_RE = re.compile(r"^(\d{1,6})-(\d{2})-(\d{2})$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2})(?:\.(\d{1,3}))?)?$")

# Output of the Unix `date` command, e.g. "Sun Jul 20 20:18:01 UTC 1969"
UNIX_DATE_FORMAT = "%a %b %d %H:%M:%S %Z %Y"

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

ENGINE_NAMES = sorted(ALL_SPECS)


def _parse_ymd(s: str) -> tuple[int, int]:
    """YYYY-MM-DD -> Gregorian (year, day-of-year)."""
    m = _DATE_RE.match(s)
    if not m:
        raise InvalidDateError(f"expected YYYY-MM-DD, got {s!r}")
    y, mo, d = (int(g) for g in m.groups())
    lengths = list(_MONTH_LENGTHS)
    if is_leap_year(y):
        lengths[1] = 29
    if not (1 <= mo <= 12 and 1 <= d <= lengths[mo - 1]):
        raise InvalidDateError(f"not a Gregorian date: {s!r}")
    return y, sum(lengths[: mo - 1]) + d


def _parse_hms(s: str) -> tuple[int, int, int, int]:
    """HH:MM[:SS[.fff]] -> (hour, minute, second, millisecond)."""
    m = _TIME_RE.match(s)
    if not m:
        raise InvalidDateError(f"expected HH:MM[:SS[.fff]], got {s!r}")
    h, mi = int(m.group(1)), int(m.group(2))
    sec = int(m.group(3) or 0)
    ms = int((m.group(4) or "0").ljust(3, "0"))
    if h > 23 or mi > 59 or sec > 59:
        raise InvalidDateError(f"not a clock reading: {s!r}")
    return h, mi, sec, ms


def _setup_logging(debug: bool = False) -> None:
    from tqcal.core.log import setup_logger

    setup_logger("DEBUG" if debug else "WARNING")


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


def cmd_date(argv: list[str]) -> int:
    import tqcal
    from tqcal.formatting import format_date

    p = argparse.ArgumentParser(prog="tqcal date", description="Gregorian -> Tranquility date")
    p.add_argument("date", help="YYYY-MM-DD (UTC)")
    p.add_argument("--time", default=None, help="HH:MM[:SS[.fff]] (UTC); also reports the epoch side")
    p.add_argument("--short", action="store_true", help="Use short output format")
    p.add_argument("--info", action="store_true", help="Print the resolved fields")
    p.add_argument("--engine", default="tranquility", choices=ENGINE_NAMES)
    args = p.parse_args(argv)

    gy, gyd = _parse_ymd(args.date)
    info = tqcal.date_info(gy, gyd, engine=args.engine)
    logger.debug(f"{args.date} -> gregorian ({gy}, {gyd}) -> {info}")

    print(format_date(info, "short" if args.short else "long"))
    if args.info:
        print(f"  year      = {info.year}")
        print(f"  month     = {info.month.name} ({int(info.month)})")
        print(f"  day       = {info.day.name if info.is_special else info.day}")
        print(f"  weekday   = {info.weekday.name} ({int(info.weekday)})")
        print(f"  year_day  = {info.year_day}")
    if args.time is not None:
        clock = _parse_hms(args.time)
        before = tqcal.is_before_tranquility(gy, gyd, *clock, engine=args.engine)
        print("Before Tranquility" if before else "After Tranquility")
    return 0


def convert_lines(lines: Iterable[str], input_format: str, *, short: bool = False,
                  engine: str = "tranquility") -> Iterable[str]:
    """Parse each non-blank line with input_format and yield its Tranquility date."""
    import tqcal
    from tqcal.formatting import format_date

    style = "short" if short else "long"
    for n, line in enumerate(lines, start=1):
        text = line.strip()
        if not text:
            continue
        try:
            dt = datetime.strptime(text, input_format)
        except ValueError as e:
            raise InvalidDateError(f"line {n}: {e}") from None
        yield format_date(tqcal.from_datetime(dt, engine=engine), style)


def cmd_convert(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="tqcal convert",
        description="Convert Gregorian dates, one per line, read from --input or stdin.",
    )
    p.add_argument("--input", default=None, help="Gregorian input date, use stdin if omitted")
    p.add_argument("--input-format", default=UNIX_DATE_FORMAT,
                   help=f"strptime format of the input (default: {UNIX_DATE_FORMAT!r})")
    p.add_argument("--short", action="store_true", help="Use short output format")
    p.add_argument("--engine", default="tranquility", choices=ENGINE_NAMES)
    args = p.parse_args(argv)

    lines = [args.input] if args.input is not None else sys.stdin
    for out in convert_lines(lines, args.input_format, short=args.short, engine=args.engine):
        print(out)
    return 0


def cmd_today(argv: list[str]) -> int:
    import tqcal
    from tqcal.formatting import format_long, format_short

    p = argparse.ArgumentParser(prog="tqcal today", description="Today's Tranquility date (UTC)")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--short", action="store_true")
    g.add_argument("--long", action="store_true")
    p.add_argument("--engine", default="tranquility", choices=ENGINE_NAMES)
    args = p.parse_args(argv)

    info = tqcal.today(engine=args.engine)
    if args.short:
        print(format_short(info))
    elif args.long:
        print(format_long(info))
    else:
        print(f"{format_long(info)}\t{format_short(info)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    debug = "--debug" in argv
    argv = [a for a in argv if a != "--debug"]
    _setup_logging(debug)

    try:
        return _dispatch(argv)
    except TqcalError as e:
        logger.error(str(e))
        return 1


def _dispatch(argv: list[str]) -> int:
    # Shorthand: `tqcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_date(argv)

    p = argparse.ArgumentParser(prog="tqcal", description="Tranquility calendar toolkit CLI.")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # date
    sub.add_parser("date", help="Gregorian -> Tranquility date", add_help=False)

    # streams
    sub.add_parser("convert", help="Convert dates read from --input or stdin", add_help=False)
    sub.add_parser("today", help="Today's Tranquility date", add_help=False)

    # diagnostics
    sub.add_parser("pretty-year", help="Print a Tranquility year as month grids", add_help=False)

    args, rest = p.parse_known_args(argv)

    if args.cmd == "date":
        return cmd_date(rest)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "pretty-year":
        return _run_module_main("tqcal.diagnostics.pretty_year", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
