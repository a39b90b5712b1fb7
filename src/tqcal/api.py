from __future__ import annotations

from datetime import datetime
from typing import Iterator, List, Optional, Tuple, Union

from .core import time as _time
from .core.types import DayValue, GregorianDay, TqMonth, TqWeekday, TranquilityDate
from .engines.factory import get_engine, make_engine  # noqa: F401
from .engines.specs import ALL_SPECS
from .engines.tranquility import TranquilityEngine
from . import formatting as _fmt

DEFAULT_ENGINE = "tranquility"


EngineRef = Union[str, TranquilityEngine]


def _eng(engine: EngineRef) -> TranquilityEngine:
    # a name from ALL_SPECS, or an engine built with make_engine
    if isinstance(engine, TranquilityEngine):
        return engine
    return get_engine(engine)

def list_engines() -> List[str]:
    return sorted(ALL_SPECS)

def engine_info(engine: EngineRef = DEFAULT_ENGINE) -> dict:
    return _eng(engine).info()

# ============================================================
# Gregorian (year, day-of-year) -> Tranquility fields
# ============================================================

def normalize(year: int, day_of_year: int) -> Tuple[int, int]:
    return _time.normalize(year, day_of_year)

def year_day(year: int, day_of_year: int, *, engine: EngineRef = DEFAULT_ENGINE) -> int:
    return _eng(engine).year_day(year, day_of_year)

def year(year: int, day_of_year: int, *, engine: EngineRef = DEFAULT_ENGINE) -> int:
    return _eng(engine).year(year, day_of_year)

def month(year: int, day_of_year: int, *, engine: EngineRef = DEFAULT_ENGINE) -> TqMonth:
    return _eng(engine).month(year, day_of_year)

def day(year: int, day_of_year: int, *, engine: EngineRef = DEFAULT_ENGINE) -> DayValue:
    return _eng(engine).day(year, day_of_year)

def weekday(year: int, day_of_year: int, *, engine: EngineRef = DEFAULT_ENGINE) -> TqWeekday:
    return _eng(engine).weekday(year, day_of_year)

def date_info(year: int, day_of_year: int, *, engine: EngineRef = DEFAULT_ENGINE) -> TranquilityDate:
    return _eng(engine).resolve(year, day_of_year)

def is_before_tranquility(
    year: int,
    day_of_year: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    *,
    engine: EngineRef = DEFAULT_ENGINE,
) -> bool:
    return _eng(engine).is_before_tranquility(year, day_of_year, hour, minute, second, millisecond)

# ============================================================
# Text
# ============================================================

month_name = _fmt.month_name
month_letter = _fmt.month_letter
day_name = _fmt.day_name
day_code = _fmt.day_code
weekday_name = _fmt.weekday_name

def short_date(year: int, day_of_year: int, *, engine: EngineRef = DEFAULT_ENGINE) -> str:
    return _fmt.short_date(year, day_of_year, engine=_eng(engine))

def long_date(year: int, day_of_year: int, *, engine: EngineRef = DEFAULT_ENGINE) -> str:
    return _fmt.long_date(year, day_of_year, engine=_eng(engine))

# ============================================================
# Tranquility -> Gregorian
# ============================================================

def to_gregorian(tq_year: int, month: int, day: int, *, engine: EngineRef = DEFAULT_ENGINE) -> GregorianDay:
    return _eng(engine).to_gregorian(tq_year, month, day)

def year_start(tq_year: int, *, engine: EngineRef = DEFAULT_ENGINE) -> GregorianDay:
    return _eng(engine).year_start(tq_year)

def days_of_year(tq_year: int, *, engine: EngineRef = DEFAULT_ENGINE) -> Iterator[Tuple[GregorianDay, TranquilityDate]]:
    return _eng(engine).iter_year(tq_year)

# ============================================================
# Timestamp conveniences
# ============================================================

def from_datetime(dt: datetime, *, engine: EngineRef = DEFAULT_ENGINE) -> TranquilityDate:
    g = _time.gregorian_fields(dt)
    return date_info(g.year, g.day_of_year, engine=engine)

def from_unix(seconds: float, *, engine: EngineRef = DEFAULT_ENGINE) -> TranquilityDate:
    g = _time.from_unix(seconds)
    return date_info(g.year, g.day_of_year, engine=engine)

def is_before_tranquility_at(dt: datetime, *, engine: EngineRef = DEFAULT_ENGINE) -> bool:
    g = _time.gregorian_fields(dt)
    return is_before_tranquility(g.year, g.day_of_year, *g.clock, engine=engine)

def today(*, engine: EngineRef = DEFAULT_ENGINE, now: Optional[datetime] = None) -> TranquilityDate:
    g = _time.gregorian_fields(now) if now is not None else _time.utc_now()
    return date_info(g.year, g.day_of_year, engine=engine)

def now_short(*, engine: EngineRef = DEFAULT_ENGINE) -> str:
    return _fmt.format_short(today(engine=engine))

def now_long(*, engine: EngineRef = DEFAULT_ENGINE) -> str:
    return _fmt.format_long(today(engine=engine))
