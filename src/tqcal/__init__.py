"""tqcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from loguru import logger as _logger

from .api import (
    normalize,
    year_day,
    year,
    month,
    day,
    weekday,
    date_info,
    is_before_tranquility,
    is_before_tranquility_at,
    month_name,
    month_letter,
    day_name,
    day_code,
    weekday_name,
    short_date,
    long_date,
    to_gregorian,
    year_start,
    days_of_year,
    from_datetime,
    from_unix,
    today,
    now_short,
    now_long,
    list_engines,
    engine_info,
    make_engine,
)
from .core.errors import TqcalError, InvalidDateError
from .core.types import (
    ALDRIN_DAY,
    ARMSTRONG_DAY,
    MOON_LANDING_DAY,
    GregorianDay,
    SpecialDay,
    TqMonth,
    TqWeekday,
    TranquilityDate,
)
from .engines.specs import TranquilitySpec

# Silent unless the application opts in (see tqcal.core.log.setup_logger)
_logger.disable("tqcal")

__all__ = [
    "normalize",
    "year_day",
    "year",
    "month",
    "day",
    "weekday",
    "date_info",
    "is_before_tranquility",
    "is_before_tranquility_at",
    "month_name",
    "month_letter",
    "day_name",
    "day_code",
    "weekday_name",
    "short_date",
    "long_date",
    "to_gregorian",
    "year_start",
    "days_of_year",
    "from_datetime",
    "from_unix",
    "today",
    "now_short",
    "now_long",
    "list_engines",
    "engine_info",
    "make_engine",
    "TqcalError",
    "InvalidDateError",
    "ARMSTRONG_DAY",
    "ALDRIN_DAY",
    "MOON_LANDING_DAY",
    "GregorianDay",
    "SpecialDay",
    "TqMonth",
    "TqWeekday",
    "TranquilityDate",
    "TranquilitySpec",
]
