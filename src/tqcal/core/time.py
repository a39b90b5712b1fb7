from __future__ import annotations
from datetime import datetime, timezone
from typing import Tuple

from loguru import logger

from .types import GregorianInstant

COMMON_YEAR_LEN = 365


def is_leap_year(y: int) -> bool:
    """Gregorian leap-year rule (proleptic, no year-zero special casing)."""
    return y % 400 == 0 or (y % 4 == 0 and y % 100 != 0)

def year_length(y: int) -> int:
    return COMMON_YEAR_LEN + 1 if is_leap_year(y) else COMMON_YEAR_LEN

def armstrong_day_of_year(y: int, base: int = 201) -> int:
    """Day of Gregorian year y that falls on 20 July."""
    return base + 1 if is_leap_year(y) else base

def clock_modulo(a: int, b: int) -> int:
    """
    Modulo in the range [1, b] instead of [0, b-1].

    Calendars count from 1, so an exact multiple of b maps to b.
    """
    mod = a % b
    return b if mod == 0 else mod

def normalize(year: int, day_of_year: int) -> Tuple[int, int]:
    """Carry or borrow whole years until day_of_year lies in [1, year_length(year)]."""
    y, d = year, day_of_year
    while d < 1:
        y -= 1
        d += year_length(y)
    while d > year_length(y):
        d -= year_length(y)
        y += 1
    if y != year:
        logger.debug(f"normalized ({year}, {day_of_year}) -> ({y}, {d})")
    return y, d


def gregorian_fields(dt: datetime) -> GregorianInstant:
    """
    Decompose a datetime into Gregorian (year, day-of-year, clock) fields in UTC.
    Naive datetimes are taken to already be UTC.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    tt = dt.timetuple()
    return GregorianInstant(
        year=tt.tm_year,
        day_of_year=tt.tm_yday,
        hour=tt.tm_hour,
        minute=tt.tm_min,
        second=tt.tm_sec,
        millisecond=dt.microsecond // 1000,
    )

def from_unix(seconds: float) -> GregorianInstant:
    """Gregorian UTC fields of a UNIX timestamp."""
    return gregorian_fields(datetime.fromtimestamp(seconds, tz=timezone.utc))

def utc_now() -> GregorianInstant:
    return gregorian_fields(datetime.now(timezone.utc))
