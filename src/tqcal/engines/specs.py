"""
tqcal.engines.specs
-------------------
Pure data describing where the Tranquility calendar sits on the Gregorian one.
Engines are built from these by tqcal.engines.factory.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from ..core.errors import SpecError
from ..core.time import is_leap_year
from ..core.types import TqMonth

# 20 July 1969, 20:18:01.2 UTC: "Houston, Tranquility Base here."
EPOCH_YEAR = 1969
EPOCH_TIME = (20, 18, 1, 200)

# 20 July is day 201 of a common Gregorian year.
ARMSTRONG_DOY_COMMON = 201

COMMON_YEAR_LEN = 365
MONTH_LEN = 28
WEEK_LEN = 7


@dataclass(frozen=True)
class TranquilitySpec:
    name: str
    epoch_year: int = EPOCH_YEAR
    epoch_time: Tuple[int, int, int, int] = EPOCH_TIME  # (h, m, s, ms) UTC
    armstrong_day_of_year: int = ARMSTRONG_DOY_COMMON
    common_year_length: int = COMMON_YEAR_LEN
    month_length: int = MONTH_LEN
    week_length: int = WEEK_LEN
    aldrin_month: TqMonth = TqMonth.HIPPOCRATES

    def __post_init__(self):
        if self.month_length * (len(TqMonth) - 1) + 1 != self.common_year_length:
            raise SpecError(
                f"{len(TqMonth) - 1} months of {self.month_length} days plus Armstrong Day "
                f"do not make a {self.common_year_length}-day year"
            )
        if self.month_length % self.week_length != 0:
            raise SpecError("months must hold a whole number of weeks")
        if not 1 <= self.armstrong_day_of_year <= self.common_year_length:
            raise SpecError(f"armstrong_day_of_year out of range: {self.armstrong_day_of_year}")
        h, m, s, ms = self.epoch_time
        if not (0 <= h < 24 and 0 <= m < 60 and 0 <= s < 60 and 0 <= ms < 1000):
            raise SpecError(f"epoch_time is not a valid clock reading: {self.epoch_time}")
        if self.aldrin_month == TqMonth.SPECIAL_DAY:
            raise SpecError("aldrin_month must be an ordinary month")
        if is_leap_year(self.epoch_year):
            # Moon Landing Day must sit on the common-year Armstrong slot
            raise SpecError(f"epoch_year must be a common year, got {self.epoch_year}")

    @property
    def year_day_shift(self) -> int:
        """Forward rotation from Gregorian day-of-year to Tranquility day-of-year."""
        return self.common_year_length - self.armstrong_day_of_year

    @property
    def aldrin_year_day(self) -> int:
        """Tranquility day-of-year that Aldrin Day occupies in leap years."""
        return self.month_length * int(self.aldrin_month)

    def tweak(self, **kwargs) -> "TranquilitySpec":
        return replace(self, **kwargs)


DEFAULT_SPEC = TranquilitySpec(name="tranquility")

# Whole-second cutoff used by UNIX-timestamp based implementations.
SECOND_SPEC = DEFAULT_SPEC.tweak(name="tranquility-seconds", epoch_time=(20, 18, 1, 0))

ALL_SPECS = {s.name: s for s in (DEFAULT_SPEC, SECOND_SPEC)}
