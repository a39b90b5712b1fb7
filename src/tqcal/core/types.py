from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple, Union


class TqWeekday(IntEnum):
    """Day of the Tranquility week. Every month starts on a Friday."""
    SPECIAL_WEEKDAY = 0
    FRIDAY = 1
    SATURDAY = 2
    SUNDAY = 3
    MONDAY = 4
    TUESDAY = 5
    WEDNESDAY = 6
    THURSDAY = 7


class TqMonth(IntEnum):
    """Tranquility months, named after scientists in alphabetical order."""
    SPECIAL_DAY = 0
    ARCHIMEDES = 1
    BRAHE = 2
    COPERNICUS = 3
    DARWIN = 4
    EINSTEIN = 5
    FARADAY = 6
    GALILEO = 7
    HIPPOCRATES = 8
    IMHOTEP = 9
    JUNG = 10
    KEPLER = 11
    LAVOISIER = 12
    MENDEL = 13


class SpecialDay(IntEnum):
    """Days outside every month and week.

    Members compare equal to the negative markers -1, -2 and -3, so a day value
    is either an ordinary day of the month (1..28) or one of these.
    """
    ARMSTRONG_DAY = -1
    ALDRIN_DAY = -2
    MOON_LANDING_DAY = -3


ARMSTRONG_DAY = SpecialDay.ARMSTRONG_DAY
ALDRIN_DAY = SpecialDay.ALDRIN_DAY
MOON_LANDING_DAY = SpecialDay.MOON_LANDING_DAY

DayValue = Union[int, SpecialDay]
ClockTuple = Tuple[int, int, int, int]


@dataclass(frozen=True)
class GregorianDay:
    year: int
    day_of_year: int


@dataclass(frozen=True)
class GregorianInstant:
    """Gregorian civil fields in a single reference zone (UTC)."""
    year: int
    day_of_year: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0

    @property
    def day(self) -> GregorianDay:
        return GregorianDay(self.year, self.day_of_year)

    @property
    def clock(self) -> ClockTuple:
        return (self.hour, self.minute, self.second, self.millisecond)


@dataclass(frozen=True)
class TranquilityDate:
    year: int
    month: TqMonth
    day: DayValue
    weekday: TqWeekday
    year_day: int  # before the leap-day adjustment, 1..366

    @property
    def special(self) -> Optional[SpecialDay]:
        return self.day if isinstance(self.day, SpecialDay) else None

    @property
    def is_special(self) -> bool:
        return self.special is not None
