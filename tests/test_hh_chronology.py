import threading
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from hh_calendar import chronology, conf, core

HOUR = 60 * 60 * 1000


@pytest.fixture(autouse=True)
def fresh_registry():
    chronology.clear_cache()
    yield
    chronology.clear_cache()


def test_registry_returns_same_instance():
    a = chronology.get_instance("Europe/Prague")
    b = chronology.get_instance(ZoneInfo("Europe/Prague"), 7)
    assert a is b
    assert chronology.get_instance("UTC") is chronology.get_instance_utc()
    assert chronology.get_instance("Europe/Prague", 4) is not a


def test_default_zone_comes_from_settings(monkeypatch):
    monkeypatch.setattr(conf, "DEFAULT_ZONE", "America/New_York")
    assert chronology.get_instance().zone.key == "America/New_York"


def test_invalid_parameters():
    with pytest.raises(ValueError, match="Invalid min days in first week: 8"):
        chronology.get_instance("UTC", 8)
    with pytest.raises(ZoneInfoNotFoundError):
        chronology.get_instance("Mars/Olympus_Mons")


def test_concurrent_lookups_share_instance():
    results = []

    def run():
        results.append(chronology.get_instance("Asia/Tokyo"))

    threads = [threading.Thread(target=run) for _ in range(8)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()
    assert len({id(c) for c in results}) == 1


def test_utc_fields_match_core():
    chrono = chronology.get_instance_utc()
    instant = core.instant_from_date(2015, 12, 37, 7 * HOUR)
    assert chrono.date_parts(instant) == (2015, 12, 37, 7 * HOUR)
    assert chrono.year(instant) == 2015
    assert chrono.month_of_year(instant) == 12
    assert chrono.day_of_month(instant) == 37
    assert chrono.day_of_year(instant) == 370
    assert chrono.week_of_year(instant) == 53
    assert chrono.days_in_month_of(instant) == 38
    assert chrono.is_leap_year(2015)


def test_zoned_year_start_is_local_midnight():
    prague = chronology.get_instance("Europe/Prague")
    utc = prague.with_utc()
    start = prague.instant(2016, 1, 1)
    assert start == core.first_instant_of_year(2016) - HOUR
    assert prague.year(start) == 2016
    assert prague.millis_of_day(start) == 0
    assert utc.year(start) == 2015
    assert utc.date_parts(start) == (2015, 12, 38, 23 * HOUR)


def test_zoned_summer_time():
    prague = chronology.get_instance("Europe/Prague")
    instant = prague.instant(2016, 7, 1, 12 * HOUR)
    assert instant == core.instant_from_date(2016, 7, 1, 10 * HOUR)
    assert prague.date_parts(instant) == (2016, 7, 1, 12 * HOUR)


def test_zoned_arithmetic_keeps_local_time():
    prague = chronology.get_instance("Europe/Prague")
    winter = prague.instant(2016, 1, 15, 9 * HOUR)
    summer = prague.add_months(winter, 6)
    assert prague.date_parts(summer) == (2016, 7, 15, 9 * HOUR)
    assert prague.months_between(summer, winter) == 6
    moved = prague.with_year(winter, 2020)
    assert prague.date_parts(moved) == (2020, 1, 15, 9 * HOUR)
    assert prague.years_between(moved, winter) == 4
    assert prague.date_parts(prague.add_years(winter, -1)) == (2015, 1, 15, 9 * HOUR)


def test_with_zone():
    utc = chronology.get_instance_utc()
    assert utc.with_zone(None) is utc
    tokyo = utc.with_zone("Asia/Tokyo")
    assert tokyo.zone.key == "Asia/Tokyo"
    assert tokyo.with_zone(ZoneInfo("Asia/Tokyo")) is tokyo
    assert str(tokyo) == "HankeHenryChronology[Asia/Tokyo]"


def test_lower_limit_rejects_early_instants():
    chrono = chronology.get_instance_utc()
    first = core.first_instant_of_year(1)
    assert chrono.lower_limit == first
    assert chrono.year(first) == 1
    with pytest.raises(core.IllegalFieldValueError):
        chrono.year(first - 1)
    with pytest.raises(core.IllegalFieldValueError):
        chrono.instant(0, 6, 1)


def test_lower_limit_can_be_disabled(monkeypatch):
    monkeypatch.setattr(conf, "LOWER_LIMIT_YEAR", None)
    chrono = chronology.get_instance_utc()
    assert chrono.lower_limit is None
    instant = chrono.instant(-10_000, 2, 3)
    assert chrono.date_parts(instant) == (-10_000, 2, 3, 0)


def test_lower_limit_uses_local_time():
    prague = chronology.get_instance("Europe/Prague")
    start = prague.instant(1, 1, 1)
    assert start < core.first_instant_of_year(1)
    assert prague.date_parts(start) == (1, 1, 1, 0)
    with pytest.raises(core.IllegalFieldValueError):
        prague.instant(0, 12, 31)
