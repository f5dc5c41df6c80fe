# tests/test_simple_rule.py

import random

import pytest

from calarith.core.errors import CalendarConfigError, CalendarRangeError
from calarith.rules.simple import SimpleCalendarRule

MS_PER_DAY = 86_400_000


@pytest.fixture
def thirty():
    return SimpleCalendarRule([30] * 12)


@pytest.fixture
def odd_units():
    # 20 h of 50 min of 40 s of 10 units
    return SimpleCalendarRule([10, 12], hours_in_day=20, minutes_in_hour=50,
                              seconds_in_minute=40, milliseconds_in_second=10, name="Odd")


@pytest.mark.parametrize("months", [[], None, "abc", [30, 0], [30, -1], [30, 1.5], [True], 12])
def test_bad_month_lengths(months):
    with pytest.raises(CalendarConfigError):
        SimpleCalendarRule(months)


@pytest.mark.parametrize("units", [
    {"hours_in_day": 0}, {"minutes_in_hour": -1}, {"seconds_in_minute": 2.5},
    {"milliseconds_in_second": False},
])
def test_bad_unit_sizes(units):
    with pytest.raises(CalendarConfigError):
        SimpleCalendarRule([30], **units)


def test_value_semantics():
    a = SimpleCalendarRule([30, 31])
    b = SimpleCalendarRule((30, 31))
    assert a.days_in_months == (30, 31)
    assert a == b
    assert hash(a) == hash(b)
    assert a != SimpleCalendarRule([30, 31], name="Other")


def test_structure(thirty):
    for year in (-1000, 0, 1, 2024, 10**12):
        assert thirty.days_in_year(year) == 360
        assert thirty.months_in_year(year) == 12
    assert thirty.days_in_month(5, 7) == 30
    assert thirty.days_before_month(5, 12) == 330
    assert thirty.mean_days_in_year == 360
    with pytest.raises(CalendarRangeError):
        thirty.days_in_month(5, 13)
    with pytest.raises(CalendarRangeError):
        thirty.days_before_month(5, 0)


def test_epoch_and_year_zero(thirty):
    assert thirty.to_scalar(1, 1, 1) == 0
    assert thirty.to_scalar(2, 1, 1) == 360 * MS_PER_DAY
    assert thirty.from_scalar(-1) == (0, 12, 30, 23, 59, 59, 999)
    assert thirty.to_scalar(0, 1, 1) == 0
    assert thirty.to_scalar_strict(0, 1, 1) == -360 * MS_PER_DAY
    assert thirty.to_scalar(-1, 1, 1) == -720 * MS_PER_DAY
    assert thirty.from_scalar(-720 * MS_PER_DAY) == (-1, 1, 1, 0, 0, 0, 0)


def test_round_trips(thirty):
    random.seed(11)
    for _ in range(3000):
        fields = (random.randint(-50000, 50000), random.randint(1, 12), random.randint(1, 30),
                  random.randrange(24), random.randrange(60), random.randrange(60), random.randrange(1000))
        assert thirty.from_scalar(thirty.to_scalar_strict(*fields)) == fields


def test_uneven_months():
    rule = SimpleCalendarRule([31, 28, 31])
    assert rule.to_scalar(1, 3, 1) == 59 * MS_PER_DAY
    assert rule.from_scalar(59 * MS_PER_DAY) == (1, 3, 1, 0, 0, 0, 0)
    assert rule.from_scalar(58 * MS_PER_DAY) == (1, 2, 28, 0, 0, 0, 0)
    assert rule.to_scalar(1, 2, 31) == rule.to_scalar(1, 2, 28)


def test_non_civil_units(odd_units):
    assert odd_units.units_per_day == 400_000
    assert odd_units.units_per_hour == 20_000
    assert odd_units.units_per_minute == 400
    scalar = odd_units.to_scalar(1, 2, 3, 19, 49, 39, 9)
    assert scalar == 5_199_999
    assert odd_units.from_scalar(scalar) == (1, 2, 3, 19, 49, 39, 9)
    assert odd_units.from_scalar(scalar + 1) == (1, 2, 4, 0, 0, 0, 0)
    with pytest.raises(CalendarRangeError):
        odd_units.validate(1, 1, 1, 20)
    assert odd_units.to_scalar(1, 1, 1, 23, 59, 59, 99) == odd_units.to_scalar(1, 1, 1, 19, 49, 39, 9)


def test_info(odd_units):
    info = odd_units.info()
    assert info["kind"] == "simple"
    assert info["name"] == "Odd"
    assert info["days_in_months"] == [10, 12]
    assert info["hours_in_day"] == 20
