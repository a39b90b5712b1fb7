from __future__ import annotations

from datetime import date, timedelta
import argparse

import tqcal
from tqcal.core.types import GregorianDay, TqMonth, TranquilityDate
from tqcal.formatting import WEEKDAY_NAMES, day_name, format_long, month_name


def dow_header() -> str:
    return "  ".join(f"{w[:2]:<4}" for w in WEEKDAY_NAMES).rstrip()


def cell(top: str, bot: str, w: int = 5) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def gregorian_label(g: GregorianDay) -> str:
    """MM-DD for years datetime can represent, day-of-year otherwise."""
    if 1 <= g.year <= 9999:
        d = date(g.year, 1, 1) + timedelta(days=g.day_of_year - 1)
        return f"{d.month:02d}-{d.day:02d}"
    return f"d{g.day_of_year:03d}"


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_grids(days: list[tuple[GregorianDay, TranquilityDate]]) -> dict[TqMonth, list[list[tuple[str, str]]]]:
    # every month starts on a Friday, so weeks never need padding
    grids: dict[TqMonth, list[list[tuple[str, str]]]] = {}
    for g, t in days:
        if t.is_special:
            continue
        weeks = grids.setdefault(t.month, [])
        if not weeks or len(weeks[-1]) == 7:
            weeks.append([])
        weeks[-1].append(cell(f"{t.day:2d}", gregorian_label(g)))
    return grids


def year_calendar(tq_year: int, *, engine: str = "tranquility") -> None:
    days = list(tqcal.days_of_year(tq_year, engine=engine))
    first, last = days[0][0], days[-1][0]
    print(f"Tranquility year {tq_year}  ({gregorian_label(first)} {first.year} .. "
          f"{gregorian_label(last)} {last.year}, {len(days)} days)")
    print()

    for m, weeks in month_grids(days).items():
        print_grid(f"{month_name(m)} {tq_year}", weeks)

    specials = [(g, t) for g, t in days if t.is_special]
    for g, t in specials:
        print(f"{day_name(t.special):<17} {gregorian_label(g)} {g.year}   {format_long(t)}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the months of a Tranquility year with the matching Gregorian dates."
    )
    p.add_argument("year", nargs="?", type=int, default=None,
                   help="Tranquility year (default: the current one)")
    p.add_argument("--engine", default="tranquility", choices=tqcal.list_engines())
    args = p.parse_args(argv)

    tq_year = args.year if args.year is not None else tqcal.today(engine=args.engine).year
    year_calendar(tq_year, engine=args.engine)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
