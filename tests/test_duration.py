# tests/test_duration.py

from fractions import Fraction

import pytest

from calarith.rules.gregorian import GREGORIAN
from calarith.rules.simple import SimpleCalendarRule
from calarith.values.duration import Duration

ODD = SimpleCalendarRule([10, 12], hours_in_day=20, minutes_in_hour=50,
                         seconds_in_minute=40, milliseconds_in_second=10)


def test_factories():
    assert Duration.from_days(2, GREGORIAN).units == 172_800_000
    assert Duration.from_hours(1, GREGORIAN).units == 3_600_000
    assert Duration.from_minutes(1, GREGORIAN).units == 60_000
    assert Duration.from_seconds(1, GREGORIAN).units == 1000
    assert Duration.from_milliseconds(5).units == 5
    assert Duration.from_days(-1, GREGORIAN).units == -86_400_000
    assert Duration().units == 0


def test_factories_follow_calendar_units():
    assert Duration.from_days(1, ODD).units == ODD.units_per_day == 400_000
    assert Duration.from_hours(1, ODD).units == 20_000
    assert Duration.from_minutes(1, ODD).units == 400
    assert Duration.from_seconds(1, ODD).units == 10


def test_units_must_be_int():
    with pytest.raises(TypeError):
        Duration(1.5)
    with pytest.raises(TypeError):
        Duration(True)


def test_arithmetic():
    a, b = Duration(1500), Duration(500)
    assert a + b == Duration(2000)
    assert a - b == Duration(1000)
    assert b - a == Duration(-1000)
    assert -a == Duration(-1500)
    assert abs(Duration(-7)) == Duration(7)
    assert a * 3 == 3 * a == Duration(4500)
    assert not Duration(0)
    assert Duration(1)
    assert b < a
    assert max(a, b) is a
    with pytest.raises(TypeError):
        a + 1
    with pytest.raises(TypeError):
        a * 1.5


def test_split_and_format():
    d = Duration(90_061_001)
    assert d.split() == (1, 1, 1, 1, 1)
    assert str(d) == "1.01:01:01.001"
    assert str(-d) == "-1.01:01:01.001"
    assert (-d).split() == (1, 1, 1, 1, 1)
    assert str(Duration(0)) == "0.00:00:00.000"


def test_split_with_calendar_units():
    d = Duration(441_245)
    assert d.split(ODD) == (1, 2, 3, 4, 5)
    assert d.format(ODD) == "1.02:03:04.5"
    # without a calendar the civil split is used
    assert d.split() == (0, 0, 7, 21, 245)


def test_in_days():
    d = Duration.from_days(3, GREGORIAN) + Duration.from_hours(12, GREGORIAN)
    assert d.in_days() == Fraction(7, 2)
    assert Duration(200_000).in_days(ODD) == Fraction(1, 2)


def test_text_form():
    d = Duration(-123456789)
    assert d.to_text() == "-123456789"
    assert Duration.parse(d.to_text()) == d
    with pytest.raises(ValueError):
        Duration.parse("1.5")
