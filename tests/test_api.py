# tests/test_api.py

import json
import logging

import pytest

import calarith
from calarith.bootstrap import CONFIG_ENV, build_registry
from calarith.core.errors import CalendarConfigError
from calarith.core.registry import CalendarRegistry
from calarith.rules.factory import make_calendar
from calarith.rules.specs import GREGORIAN_SPEC, SIMPLE_SPEC, CalendarSpec, load_specs

HARPTOS = {
    "calendars": {
        "harptos": {"kind": "simple", "name": "Harptos", "days_in_months": [30] * 12},
        "long-day": {"kind": "simple", "days_in_months": [40, 40, 40], "hours_in_day": 30},
    }
}


def write_json(tmp_path, data, name="calendars.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_builtin_calendars():
    assert {"gregorian", "simple"} <= set(calarith.list_calendars())
    assert calarith.get_calendar("gregorian") is calarith.GREGORIAN
    assert calarith.get_calendar("simple").days_in_months == (30,) * 12
    assert calarith.calendar_info("simple")["kind"] == "simple"


def test_unknown_calendar():
    with pytest.raises(KeyError, match="Unknown calendar 'nope'"):
        calarith.get_calendar("nope")


def test_register_calendar(fresh_registry):
    rule = calarith.SimpleCalendarRule([10] * 36, name="Decans")
    calarith.register_calendar("decans", rule)
    assert calarith.get_calendar("decans") is rule
    with pytest.raises(KeyError, match="already exists"):
        calarith.register_calendar("decans", rule)
    other = calarith.SimpleCalendarRule([5] * 73)
    calarith.register_calendar("decans", other, overwrite=True)
    assert calarith.get_calendar("decans") is other


def test_registry_id_of():
    reg = CalendarRegistry({"g": calarith.GREGORIAN})
    assert reg.id_of(calarith.GREGORIAN) == "g"
    assert reg.list() == ["g"]
    with pytest.raises(KeyError):
        reg.id_of(calarith.SimpleCalendarRule([30]))


def test_instant_and_queries():
    v = calarith.instant(2024, 2, 30)
    assert v.fields == (2024, 2, 29, 0, 0, 0, 0)
    assert v.calendar is calarith.GREGORIAN
    assert calarith.instant(5, 12, 30, calendar="simple").day == 30
    assert calarith.days_in_month(2023, 2) == 28
    assert calarith.days_in_month(1, 5, calendar="simple") == 30


def test_field_ranges():
    ranges = calarith.field_ranges(2024, 2)
    assert ranges["month"] == (1, 12)
    assert ranges["day"] == (1, 29)
    assert ranges["hour"] == (0, 23)
    assert ranges["millisecond"] == (0, 999)


def test_dump_and_load_instant():
    v = calarith.instant(-44, 3, 15, 12, calendar="gregorian")
    record = calarith.dump_instant(v)
    assert record == {"calendar": "gregorian", "scalar": str(v.scalar)}
    assert calarith.load_instant(record) == v
    json.dumps(record)


def test_dump_unregistered_rule():
    v = calarith.Instant(0, calarith.SimpleCalendarRule([7] * 52))
    with pytest.raises(KeyError):
        calarith.dump_instant(v)


def test_load_calendars(fresh_registry, tmp_path):
    path = write_json(tmp_path, HARPTOS)
    assert calarith.load_calendars(path) == ["harptos", "long-day"]
    assert calarith.get_calendar("harptos").name == "Harptos"
    long_day = calarith.get_calendar("long-day")
    assert long_day.hours_in_day == 30
    assert long_day.name == "Simple Custom Calendar"
    assert calarith.instant(3, 3, 40, 29, calendar="long-day").hour == 29
    with pytest.raises(KeyError):
        calarith.load_calendars(path)
    calarith.load_calendars(path, overwrite=True)


def test_spec_round_trip():
    assert CalendarSpec.from_dict(SIMPLE_SPEC.to_dict()) == SIMPLE_SPEC
    assert CalendarSpec.from_dict({"kind": "gregorian"}) is GREGORIAN_SPEC
    assert make_calendar(GREGORIAN_SPEC) is calarith.GREGORIAN
    tweaked = SIMPLE_SPEC.tweak(hours_in_day=10)
    assert make_calendar(tweaked).units_per_day == 10 * 60 * 60 * 1000


@pytest.mark.parametrize("definition", [
    {"days_in_months": [30]},
    {"kind": "lunar"},
    {"kind": "simple", "days_in_months": [30], "leap": True},
    {"kind": "simple", "days_in_months": 30},
    [1, 2, 3],
])
def test_bad_definitions(definition):
    with pytest.raises(CalendarConfigError):
        CalendarSpec.from_dict(definition)


@pytest.mark.parametrize("definition", [
    {"kind": "simple", "days_in_months": [30, 0]},
    {"kind": "simple", "days_in_months": []},
    {"kind": "simple", "days_in_months": [30, "31"]},
    {"kind": "simple", "days_in_months": [30], "hours_in_day": 0},
    {"kind": "simple", "days_in_months": [30], "milliseconds_in_second": 2.5},
])
def test_bad_values_fail_when_read(definition):
    with pytest.raises(CalendarConfigError):
        CalendarSpec.from_dict(definition)


def test_bad_values_name_file_and_calendar(tmp_path):
    path = write_json(tmp_path, {"calendars": {"zero": {"kind": "simple", "days_in_months": [30, 0]}}})
    with pytest.raises(CalendarConfigError, match="calendar 'zero': Month lengths"):
        load_specs(path)


def test_load_specs_errors(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(CalendarConfigError, match="invalid JSON"):
        load_specs(broken)
    with pytest.raises(CalendarConfigError, match="cannot read"):
        load_specs(tmp_path / "missing.json")
    with pytest.raises(CalendarConfigError, match="'calendars'"):
        load_specs(write_json(tmp_path, {"harptos": {}}))
    with pytest.raises(CalendarConfigError, match="calendar 'x'"):
        load_specs(write_json(tmp_path, {"calendars": {"x": {"kind": "nope"}}}))


def test_build_registry_reads_environment(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(write_json(tmp_path, HARPTOS)))
    reg = build_registry()
    assert reg.list() == ["gregorian", "harptos", "long-day", "simple"]
    monkeypatch.delenv(CONFIG_ENV)
    assert build_registry().list() == ["gregorian", "simple"]


def test_errors_are_catchable_as_builtins():
    with pytest.raises(ValueError):
        calarith.GREGORIAN.to_scalar_strict(2023, 2, 29)
    with pytest.raises(TypeError):
        calarith.Instant(0, calarith.GREGORIAN) < calarith.Instant(0, calarith.get_calendar("simple"))
    assert issubclass(calarith.CrossCalendarError, calarith.CalarithError)


def test_load_calendars_is_all_or_nothing(fresh_registry, tmp_path):
    path = write_json(tmp_path, {"calendars": {
        "aaa": {"kind": "simple", "days_in_months": [10]},
        "bbb": {"kind": "simple", "days_in_months": [0]},
    }})
    with pytest.raises(CalendarConfigError):
        calarith.load_calendars(path)
    assert calarith.list_calendars() == ["gregorian", "simple"]


def test_load_calendars_id_clash_registers_nothing(fresh_registry, tmp_path):
    path = write_json(tmp_path, {"calendars": {
        "aaa": {"kind": "simple", "days_in_months": [10]},
        "simple": {"kind": "simple", "days_in_months": [5]},
    }})
    with pytest.raises(KeyError, match="already exist"):
        calarith.load_calendars(path)
    assert calarith.list_calendars() == ["gregorian", "simple"]
    assert calarith.get_calendar("simple").days_in_months == (30,) * 12


def test_missing_file_through_api(fresh_registry, tmp_path):
    with pytest.raises(CalendarConfigError, match="cannot read"):
        calarith.load_calendars(tmp_path / "missing.json")


def test_broken_environment_file_is_skipped(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "missing.json"))
    with caplog.at_level(logging.WARNING, logger="calarith"):
        reg = build_registry()
    assert reg.list() == ["gregorian", "simple"]
    assert CONFIG_ENV in caplog.text


def test_broken_explicit_file_raises(tmp_path):
    with pytest.raises(CalendarConfigError):
        build_registry(str(tmp_path / "missing.json"))
