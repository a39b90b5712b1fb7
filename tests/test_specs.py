# tests/test_specs.py

import pytest

import tqcal
from tqcal.core.errors import SpecError
from tqcal.engines.factory import get_engine, make_engine
from tqcal.engines.specs import DEFAULT_SPEC, SECOND_SPEC, TranquilitySpec


def test_default_spec_constants():
    assert DEFAULT_SPEC.year_day_shift == 164
    assert DEFAULT_SPEC.aldrin_year_day == 224
    assert DEFAULT_SPEC.epoch_time == (20, 18, 1, 200)

@pytest.mark.parametrize("kwargs", [
    {"month_length": 27},
    {"week_length": 5},
    {"armstrong_day_of_year": 0},
    {"epoch_time": (24, 0, 0, 0)},
    {"epoch_time": (20, 18, 1, 1000)},
])
def test_inconsistent_specs_are_rejected(kwargs):
    with pytest.raises(SpecError):
        TranquilitySpec(name="bad", **kwargs)

def test_whole_second_epoch():
    # UNIX-timestamp implementations cut over at 20:18:01.000
    eng = make_engine(SECOND_SPEC)
    assert eng.is_before_tranquility(1969, 201, 20, 18, 1, 0) is False
    assert get_engine().is_before_tranquility(1969, 201, 20, 18, 1, 0) is True
    assert tqcal.is_before_tranquility(1969, 201, 20, 18, 1, 0, engine="tranquility-seconds") is False

def test_engine_registry():
    assert tqcal.list_engines() == ["tranquility", "tranquility-seconds"]
    assert tqcal.engine_info()["name"] == "tranquility"
    with pytest.raises(KeyError):
        get_engine("gregorian")

def test_engine_info_is_a_copy():
    info = tqcal.engine_info()
    info["spec"]["epoch_year"] = 2000
    info["spec"]["armstrong_day_of_year"] = 1
    assert tqcal.year(1969, 202) == 1
    assert tqcal.engine_info()["spec"]["epoch_year"] == 1969

@pytest.mark.parametrize("epoch_year", [1968, 2000])
def test_leap_epoch_year_is_rejected(epoch_year):
    # Moon Landing Day would fall off the common-year Armstrong slot
    with pytest.raises(SpecError):
        DEFAULT_SPEC.tweak(name="leap-epoch", epoch_year=epoch_year)

def test_custom_common_epoch_year_keeps_year_zero_unique():
    eng = make_engine(DEFAULT_SPEC.tweak(name="shifted", epoch_year=1970))
    moon = eng.resolve(1970, 201)
    assert (moon.year, moon.day) == (0, tqcal.MOON_LANDING_DAY)
    assert eng.year(1970, 200) == -1
    assert eng.year(1970, 202) == 1

def test_facade_accepts_engine_objects():
    eng = make_engine(SECOND_SPEC)
    assert tqcal.is_before_tranquility(1969, 201, 20, 18, 1, 0, engine=eng) is False
    assert tqcal.short_date(2000, 60, engine=eng) == "ALD 31"
    assert tqcal.date_info(1969, 202, engine=eng) == tqcal.date_info(1969, 202)
    assert tqcal.engine_info(eng)["name"] == "tranquility-seconds"
