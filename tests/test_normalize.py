# tests/test_normalize.py

import random

import pytest

from tqcal.core.time import (
    armstrong_day_of_year,
    clock_modulo,
    is_leap_year,
    normalize,
    year_length,
)


@pytest.mark.parametrize("y, leap", [
    (1900, False),
    (1968, True),
    (1969, False),
    (2000, True),
    (2100, False),
    (2400, True),
    (-4, True),
])
def test_leap_years(y, leap):
    assert is_leap_year(y) is leap
    assert year_length(y) == (366 if leap else 365)

def test_armstrong_day_is_20_july():
    assert armstrong_day_of_year(1969) == 201
    assert armstrong_day_of_year(1968) == 202

def test_clock_modulo_never_zero():
    assert clock_modulo(28, 28) == 28
    assert clock_modulo(56, 28) == 28
    assert clock_modulo(29, 28) == 1
    assert clock_modulo(7, 7) == 7
    assert clock_modulo(365, 365) == 365
    for a in range(-50, 100):
        assert 1 <= clock_modulo(a, 7) <= 7

@pytest.mark.parametrize("given, expected", [
    ((2000, 60), (2000, 60)),
    ((2000, 366), (2000, 366)),
    ((1999, 366), (2000, 1)),
    ((2000, 367), (2001, 1)),
    ((2000, 0), (1999, 365)),
    ((2001, 0), (2000, 366)),
    ((2000, -365), (1998, 365)),
    ((2000, 366 + 365 + 1), (2002, 1)),
    ((1969, 201 + 365), (1970, 201)),
])
def test_normalize_carries_and_borrows(given, expected):
    assert normalize(*given) == expected

def test_normalize_is_idempotent():
    random.seed(42)
    for _ in range(2000):
        y = random.randint(-3000, 5000)
        d = random.randint(-2000, 2000)
        once = normalize(y, d)
        assert normalize(*once) == once
        assert 1 <= once[1] <= year_length(once[0])
