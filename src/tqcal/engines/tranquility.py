"""
tqcal.engines.tranquility
-------------------------
Gregorian (year, day-of-year) -> Tranquility (year, month, day, weekday).

All arithmetic is on small integers. Gregorian input is normalized first, so
day-of-year values outside the year (0, -5, 400, ...) are carried into the
neighbouring years rather than rejected. Only the inverse mapping
(to_gregorian) can raise, because not every Tranquility label exists.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Iterator, Tuple

from loguru import logger

from ..core.errors import InvalidDateError
from ..core.time import armstrong_day_of_year, clock_modulo, is_leap_year, normalize, year_length
from ..core.types import (
    ALDRIN_DAY,
    ARMSTRONG_DAY,
    MOON_LANDING_DAY,
    DayValue,
    GregorianDay,
    SpecialDay,
    TqMonth,
    TqWeekday,
    TranquilityDate,
)
from .specs import TranquilitySpec


class TranquilityEngine:
    """Stateless converter parameterised by a TranquilitySpec."""

    def __init__(self, spec: TranquilitySpec):
        self.spec = spec

    def info(self) -> dict:
        return {"name": self.spec.name, "spec": asdict(self.spec)}

    # ---------------------------------------------------------
    # Gregorian side
    # ---------------------------------------------------------

    def normalize(self, year: int, day_of_year: int) -> Tuple[int, int]:
        return normalize(year, day_of_year)

    def _armstrong_doy(self, gy: int) -> int:
        return armstrong_day_of_year(gy, base=self.spec.armstrong_day_of_year)

    def _is_epoch_day(self, gy: int, gyd: int) -> bool:
        # 20 July 1969 sits on the common-year Armstrong slot (1969 is not leap)
        return gy == self.spec.epoch_year and gyd == self.spec.armstrong_day_of_year

    # ---------------------------------------------------------
    # Forward: Gregorian -> Tranquility
    # ---------------------------------------------------------

    def year_day(self, year: int, day_of_year: int) -> int:
        """Tranquility day of year in [1, year_length(year)], before leap adjustment."""
        gy, gyd = normalize(year, day_of_year)
        return self._year_day(gy, gyd)

    def _year_day(self, gy: int, gyd: int) -> int:
        return clock_modulo(gyd + self.spec.year_day_shift, year_length(gy))

    def leap_adjusted_year_day(self, tqyd: int, gy: int) -> DayValue:
        """
        Map a Tranquility day of year onto the common-year grid.

        Returns a SpecialDay for Aldrin, Armstrong and Moon Landing Day, and
        otherwise the matching day (1..364) of a common Tranquility year, e.g.
        tqyd=300 in Gregorian 2000 is past Aldrin Day and becomes 299.
        """
        s = self.spec
        if is_leap_year(gy):
            if tqyd == s.aldrin_year_day:
                return ALDRIN_DAY
            if tqyd > s.aldrin_year_day:
                tqyd -= 1
        if tqyd == s.common_year_length:
            if gy == s.epoch_year:
                return MOON_LANDING_DAY
            return ARMSTRONG_DAY
        return tqyd

    def year(self, year: int, day_of_year: int) -> int:
        """
        Years since the Moon landing: negative before, 0 for Moon Landing Day
        only, positive after. 20 July 1968 (Armstrong Day) is year -2.
        """
        gy, gyd = normalize(year, day_of_year)
        return self._year(gy, gyd)

    def _year(self, gy: int, gyd: int) -> int:
        if self._is_epoch_day(gy, gyd):
            return 0
        diff = gy - self.spec.epoch_year
        if gyd > self._armstrong_doy(gy):
            diff += 1
        if diff < 1:  # no year 0 outside the epoch day
            diff -= 1
        return diff

    def _month(self, adjusted: DayValue) -> TqMonth:
        if isinstance(adjusted, SpecialDay):
            return TqMonth.SPECIAL_DAY
        return TqMonth((adjusted - 1) // self.spec.month_length + 1)

    def _day(self, adjusted: DayValue) -> DayValue:
        if isinstance(adjusted, SpecialDay):
            return adjusted
        return clock_modulo(adjusted, self.spec.month_length)

    def _weekday(self, day: DayValue) -> TqWeekday:
        if isinstance(day, SpecialDay):
            return TqWeekday.SPECIAL_WEEKDAY
        return TqWeekday(clock_modulo(day, self.spec.week_length))

    def _adjusted(self, year: int, day_of_year: int) -> DayValue:
        gy, gyd = normalize(year, day_of_year)
        return self.leap_adjusted_year_day(self._year_day(gy, gyd), gy)

    def month(self, year: int, day_of_year: int) -> TqMonth:
        return self._month(self._adjusted(year, day_of_year))

    def day(self, year: int, day_of_year: int) -> DayValue:
        """Day of the month (1..28), or the SpecialDay the date falls on."""
        return self._day(self._adjusted(year, day_of_year))

    def weekday(self, year: int, day_of_year: int) -> TqWeekday:
        return self._weekday(self.day(year, day_of_year))

    def resolve(self, year: int, day_of_year: int) -> TranquilityDate:
        gy, gyd = normalize(year, day_of_year)
        tqyd = self._year_day(gy, gyd)
        adjusted = self.leap_adjusted_year_day(tqyd, gy)
        day = self._day(adjusted)
        return TranquilityDate(
            year=self._year(gy, gyd),
            month=self._month(adjusted),
            day=day,
            weekday=self._weekday(day),
            year_day=tqyd,
        )

    def is_before_tranquility(
        self,
        year: int,
        day_of_year: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> bool:
        """
        True iff the instant is before 20:18:01.2 UTC on Moon Landing Day, the
        moment Armstrong said "Houston, Tranquility Base here".
        """
        tqy = self.year(year, day_of_year)
        if tqy != 0:
            return tqy < 0
        return (hour, minute, second, millisecond) < tuple(self.spec.epoch_time)

    # ---------------------------------------------------------
    # Inverse: Tranquility -> Gregorian
    # ---------------------------------------------------------

    def _first_gregorian_year(self, tq_year: int) -> int:
        """Gregorian year in which Tranquility year tq_year begins (21 July)."""
        return self.spec.epoch_year + tq_year - (1 if tq_year > 0 else 0)

    def has_armstrong_day(self, tq_year: int) -> bool:
        # Armstrong Day of year -1 would be 20 July 1969, which is Moon Landing Day
        return tq_year not in (0, -1)

    def has_aldrin_day(self, tq_year: int) -> bool:
        return tq_year != 0 and is_leap_year(self._first_gregorian_year(tq_year) + 1)

    def days_in_year(self, tq_year: int) -> int:
        if tq_year == 0:
            return 1
        n = self.spec.common_year_length - 1
        return n + int(self.has_armstrong_day(tq_year)) + int(self.has_aldrin_day(tq_year))

    def _reject(self, msg: str) -> InvalidDateError:
        logger.debug(f"rejected Tranquility date: {msg}")
        return InvalidDateError(msg)

    def to_gregorian(self, tq_year: int, month: int, day: int) -> GregorianDay:
        """
        Gregorian (year, day-of-year) of a Tranquility date.

        month is TqMonth.SPECIAL_DAY (0) when day is a SpecialDay marker.
        Raises InvalidDateError for labels the calendar never produces.
        """
        s = self.spec
        try:
            m = TqMonth(month)
        except ValueError:
            raise self._reject(f"month out of range: {month}") from None

        special = day < 1
        if special:
            try:
                day = SpecialDay(day)
            except ValueError:
                raise self._reject(f"day out of range: {day}") from None
            if m != TqMonth.SPECIAL_DAY:
                raise self._reject(f"{day.name} is not part of month {m.name}")
        elif m == TqMonth.SPECIAL_DAY:
            raise self._reject(f"ordinary day {day} needs a month")
        elif day > s.month_length:
            raise self._reject(f"day out of range: {day}")

        if tq_year == 0 or day == MOON_LANDING_DAY:
            if tq_year == 0 and day == MOON_LANDING_DAY:
                return GregorianDay(s.epoch_year, s.armstrong_day_of_year)
            raise self._reject(f"year 0 holds only Moon Landing Day (got year={tq_year}, day={day})")

        leap = self.has_aldrin_day(tq_year)
        if day == ALDRIN_DAY:
            if not leap:
                raise self._reject(f"year {tq_year} has no Aldrin Day")
            offset = s.aldrin_year_day - 1
        elif day == ARMSTRONG_DAY:
            if not self.has_armstrong_day(tq_year):
                raise self._reject(f"year {tq_year} has no Armstrong Day")
            offset = s.common_year_length - 1 + int(leap)
        else:
            c = (int(m) - 1) * s.month_length + day
            offset = c - 1 + int(leap and c >= s.aldrin_year_day)

        gy0 = self._first_gregorian_year(tq_year)
        gy, gyd = normalize(gy0, self._armstrong_doy(gy0) + 1 + offset)
        return GregorianDay(gy, gyd)

    def year_start(self, tq_year: int) -> GregorianDay:
        """Gregorian day of 1 Archimedes (or Moon Landing Day for year 0)."""
        if tq_year == 0:
            return self.to_gregorian(0, TqMonth.SPECIAL_DAY, MOON_LANDING_DAY)
        return self.to_gregorian(tq_year, TqMonth.ARCHIMEDES, 1)

    def iter_year(self, tq_year: int) -> Iterator[Tuple[GregorianDay, TranquilityDate]]:
        """Every day of a Tranquility year, in order, with its Gregorian day."""
        start = self.year_start(tq_year)
        for i in range(self.days_in_year(tq_year)):
            gy, gyd = normalize(start.year, start.day_of_year + i)
            yield GregorianDay(gy, gyd), self.resolve(gy, gyd)
