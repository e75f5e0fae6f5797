from datetime import date

import pytest

from . import core

DAY = core.MILLIS_PER_DAY


def test_epoch_year_starts_monday_before_gregorian_epoch():
    assert core.first_instant_of_year(1970) == -3 * DAY
    assert core.day_of_week(core.first_instant_of_year(1970)) == 1


def test_known_leap_years():
    leaps = [y for y in range(1970, 2050) if core.is_leap_year(y)]
    assert leaps == [1970, 1976, 1981, 1987, 1992, 1998, 2004, 2009, 2015, 2020, 2026, 2032, 2037, 2043, 2048]


def test_leap_year_2015_has_xtr_week():
    assert core.is_leap_year(2015)
    assert core.days_in_year(2015) == 371
    assert core.days_in_month(2015, 12) == 38
    assert not core.is_leap_year(2016)
    gap = core.first_instant_of_year(2016) - core.first_instant_of_year(2015)
    assert gap == 371 * DAY


def test_month_lengths_sum_to_year_length():
    for y in list(range(-20, 20)) + list(range(2010, 2030)):
        assert sum(core.days_in_month(y, m) for m in range(1, 13)) == core.days_in_year(y)


def test_month_of_day_of_year_edges():
    assert core.month_of_day_of_year(0) == 1
    assert core.month_of_day_of_year(363) == 12
    assert core.month_of_day_of_year(364) == 12
    assert core.month_of_day_of_year(370) == 12


def test_date_parts_of_2024_new_year():
    # ISO week 1 of 2024 started on Monday 2024-01-01.
    instant = (date(2024, 1, 1) - date(1970, 1, 1)).days * DAY + 5000
    assert core.date_parts(instant) == (2024, 1, 1, 5000)


def test_invalid_month():
    with pytest.raises(core.IllegalFieldValueError):
        core.days_in_month(2020, 13)
    with pytest.raises(ValueError):
        core.max_days_in_month(0)
