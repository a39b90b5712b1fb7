# tests/test_inverse.py

import pytest

import tqcal
from tqcal import ALDRIN_DAY, ARMSTRONG_DAY, MOON_LANDING_DAY, GregorianDay, InvalidDateError, TqMonth
from tqcal.core.time import normalize, year_length
from tqcal.engines.factory import get_engine


@pytest.mark.parametrize("tq, greg", [
    ((0, TqMonth.SPECIAL_DAY, MOON_LANDING_DAY), (1969, 201)),
    ((1, TqMonth.ARCHIMEDES, 1), (1969, 202)),
    ((-1, TqMonth.MENDEL, 28), (1969, 200)),
    ((-1, TqMonth.ARCHIMEDES, 1), (1968, 203)),
    ((-2, TqMonth.SPECIAL_DAY, ARMSTRONG_DAY), (1968, 202)),
    ((31, TqMonth.SPECIAL_DAY, ALDRIN_DAY), (2000, 60)),
    ((31, TqMonth.HIPPOCRATES, 28), (2000, 61)),
    ((-70, TqMonth.HIPPOCRATES, 28), (1900, 60)),
    ((32, TqMonth.FARADAY, 24), (2000, 366)),
])
def test_known_dates(tq, greg):
    assert tqcal.to_gregorian(*tq) == GregorianDay(*greg)

def test_round_trip_every_day():
    for gy in range(1890, 2110):
        for gyd in range(1, year_length(gy) + 1):
            t = tqcal.date_info(gy, gyd)
            assert tqcal.to_gregorian(t.year, t.month, t.day) == GregorianDay(gy, gyd)

@pytest.mark.parametrize("tq", [
    (-1, TqMonth.SPECIAL_DAY, ARMSTRONG_DAY),   # would be Moon Landing Day
    (-70, TqMonth.SPECIAL_DAY, ALDRIN_DAY),     # 1900 is not leap
    (5, TqMonth.SPECIAL_DAY, MOON_LANDING_DAY),
    (0, TqMonth.ARCHIMEDES, 1),
    (0, TqMonth.SPECIAL_DAY, ARMSTRONG_DAY),
    (1, 14, 1),
    (1, -1, 1),
    (1, TqMonth.ARCHIMEDES, 29),
    (1, TqMonth.ARCHIMEDES, 0),
    (1, TqMonth.ARCHIMEDES, -4),
    (1, TqMonth.SPECIAL_DAY, 5),
    (1, TqMonth.JUNG, ARMSTRONG_DAY),
])
def test_impossible_dates_raise(tq):
    with pytest.raises(InvalidDateError):
        tqcal.to_gregorian(*tq)

def test_invalid_date_error_is_value_error():
    with pytest.raises(ValueError):
        tqcal.to_gregorian(0, TqMonth.ARCHIMEDES, 1)

@pytest.mark.parametrize("tq_year, n, aldrin, armstrong", [
    (-2, 366, True, True),
    (-1, 364, False, False),
    (0, 1, False, False),
    (1, 365, False, True),
    (31, 366, True, True),
    (131, 365, False, True),   # Feb 2100 has no 29th
])
def test_year_composition(tq_year, n, aldrin, armstrong):
    days = list(tqcal.days_of_year(tq_year))
    assert len(days) == n == get_engine().days_in_year(tq_year)
    specials = [t.special for _, t in days if t.is_special]
    assert (ALDRIN_DAY in specials) is aldrin
    assert (ARMSTRONG_DAY in specials) is armstrong
    assert all(t.year == tq_year for _, t in days)
    ordinary = [t for _, t in days if not t.is_special]
    assert len(ordinary) == (0 if tq_year == 0 else 364)

def test_years_are_contiguous():
    prev = None
    for tq_year in range(-5, 6):
        days = list(tqcal.days_of_year(tq_year))
        first = days[0][0]
        if prev is not None:
            assert normalize(prev.year, prev.day_of_year + 1) == (first.year, first.day_of_year)
        prev = days[-1][0]

def test_year_start():
    assert tqcal.year_start(1) == GregorianDay(1969, 202)
    assert tqcal.year_start(0) == GregorianDay(1969, 201)
    assert tqcal.year_start(-1) == GregorianDay(1968, 203)
    assert tqcal.year_start(57) == GregorianDay(2025, 202)
