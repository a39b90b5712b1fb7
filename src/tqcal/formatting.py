"""
tqcal.formatting
----------------
Fixed English names for Tranquility months, weekdays and special days, and the
short ("01A 1") and long ("Friday, 1 Archimedes, 1 After Tranquility") forms.

Lookups never raise: an invalid value renders as "" and callers must treat that
as unknown rather than as a blank name.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .core.types import SpecialDay, TranquilityDate
from .engines.factory import get_engine
from .engines.tranquility import TranquilityEngine

MONTH_NAMES = (
    "Archimedes",
    "Brahe",
    "Copernicus",
    "Darwin",
    "Einstein",
    "Faraday",
    "Galileo",
    "Hippocrates",
    "Imhotep",
    "Jung",
    "Kepler",
    "Lavoisier",
    "Mendel",
)

WEEKDAY_NAMES = ("Friday", "Saturday", "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday")

SPECIAL_NAMES: Dict[SpecialDay, str] = {
    SpecialDay.ARMSTRONG_DAY: "Armstrong Day",
    SpecialDay.ALDRIN_DAY: "Aldrin Day",
    SpecialDay.MOON_LANDING_DAY: "Moon Landing Day",
}

SPECIAL_CODES: Dict[SpecialDay, str] = {
    SpecialDay.ARMSTRONG_DAY: "ARM",
    SpecialDay.ALDRIN_DAY: "ALD",
    SpecialDay.MOON_LANDING_DAY: "MNL",
}

BEFORE = "Before Tranquility"
AFTER = "After Tranquility"


def _lookup(table: tuple, value: Any) -> str:
    # bool is an int subclass but never a calendar value
    if not isinstance(value, int) or isinstance(value, bool):
        return ""
    if 1 <= value <= len(table):
        return table[value - 1]
    return ""

def _special(value: Any) -> Optional[SpecialDay]:
    if not isinstance(value, int) or isinstance(value, bool):
        return None
    try:
        return SpecialDay(value)
    except ValueError:
        return None


def month_name(m: Any) -> str:
    return _lookup(MONTH_NAMES, m)

def month_letter(m: Any) -> str:
    return month_name(m)[:1]

def weekday_name(w: Any) -> str:
    return _lookup(WEEKDAY_NAMES, w)

def day_name(d: Any, *, month_length: int = 28) -> str:
    """Name of a special day, or the day of the month as a decimal."""
    sp = _special(d)
    if sp is not None:
        return SPECIAL_NAMES[sp]
    if isinstance(d, int) and not isinstance(d, bool) and 1 <= d <= month_length:
        return str(d)
    return ""

def day_code(d: Any, *, month_length: int = 28) -> str:
    """Three-letter code of a special day (ARM, ALD, MNL), or the day of the month."""
    sp = _special(d)
    if sp is not None:
        return SPECIAL_CODES[sp]
    return day_name(d, month_length=month_length)


def format_short(t: TranquilityDate) -> str:
    """
    "DDD Y" on special days, where DDD is the three-letter day code; otherwise
    "DDM Y" with a zero-padded day and the month initial. Y keeps its sign.
    """
    if t.special is not None:
        return f"{day_code(t.special)} {t.year}"
    return f"{int(t.day):02d}{month_letter(t.month)} {t.year}"

def format_long(t: TranquilityDate) -> str:
    if t.special == SpecialDay.MOON_LANDING_DAY:
        return day_name(t.special)

    suffix = BEFORE if t.year < 0 else AFTER
    y = abs(t.year)
    if t.special is not None:
        return f"{day_name(t.special)}, {y} {suffix}"
    return f"{weekday_name(t.weekday)}, {day_name(t.day)} {month_name(t.month)}, {y} {suffix}"

def format_date(t: TranquilityDate, style: str = "long") -> str:
    if style == "long":
        return format_long(t)
    if style == "short":
        return format_short(t)
    raise ValueError("style must be 'long' or 'short'")


def _engine(engine: Optional[TranquilityEngine]) -> TranquilityEngine:
    return engine if engine is not None else get_engine()

def short_date(year: int, day_of_year: int, *, engine: Optional[TranquilityEngine] = None) -> str:
    return format_short(_engine(engine).resolve(year, day_of_year))

def long_date(year: int, day_of_year: int, *, engine: Optional[TranquilityEngine] = None) -> str:
    return format_long(_engine(engine).resolve(year, day_of_year))
