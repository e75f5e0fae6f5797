import pytest

from hh_calendar import core

DAY = core.MILLIS_PER_DAY


@pytest.mark.parametrize(
    "doy,month",
    [
        (0, 1),
        (29, 1),
        (30, 2),
        (59, 2),
        (60, 3),
        (90, 3),
        (91, 4),
        (181, 6),
        (182, 7),
        (272, 9),
        (273, 10),
        (363, 12),
        (364, 12),
        (370, 12),
    ],
)
def test_month_of_day_of_year(doy, month):
    assert core.month_of_day_of_year(doy) == month


def test_month_mapping_agrees_with_month_lengths():
    for year in (2015, 2016):
        doy = 0
        for month in range(1, 13):
            for _ in range(core.days_in_month(year, month)):
                assert core.month_of_day_of_year(doy) == month
                doy += 1
        assert doy == core.days_in_year(year)


def test_month_lengths():
    assert [core.days_in_month(2016, m) for m in range(1, 13)] == [30, 30, 31] * 4
    assert [core.days_in_month(2015, m) for m in range(1, 13)] == [30, 30, 31] * 3 + [30, 30, 38]
    assert core.max_days_in_month(12) == 38
    assert core.max_days_in_month(3) == 31


@pytest.mark.parametrize("month", [0, 13, -1])
def test_month_out_of_range(month):
    with pytest.raises(core.IllegalFieldValueError):
        core.days_in_month(2020, month)
    with pytest.raises(core.IllegalFieldValueError):
        core.max_days_in_month(month)


def test_month_of_instant():
    start = core.first_instant_of_year(2015)
    assert core.month_of(start) == 1
    assert core.month_of(start + 60 * DAY, 2015) == 3
    assert core.month_of(start + 370 * DAY + DAY - 1) == 12
    assert core.month_of(core.first_instant_of_year(2016)) == 1


def test_millis_before_month():
    assert core.millis_before_month(2016, 1) == 0
    assert core.millis_before_month(2016, 4) == 91 * DAY
    assert core.millis_before_month(2015, 12) == 333 * DAY


def test_instant_from_date_and_back():
    instant = core.instant_from_date(2015, 12, 38, 12345)
    assert core.date_parts(instant) == (2015, 12, 38, 12345)
    assert core.day_of_year(instant) == 371
    assert core.day_of_month(instant) == 38
    assert core.days_in_month_of(instant) == 38
    assert core.instant_from_date(2016, 1, 1) == core.first_instant_of_year(2016)


def test_instant_from_date_rejects_invalid_parts():
    with pytest.raises(core.IllegalFieldValueError):
        core.instant_from_date(2016, 12, 32)
    with pytest.raises(core.IllegalFieldValueError):
        core.instant_from_date(2016, 2, 0)
    with pytest.raises(core.IllegalFieldValueError):
        core.instant_from_date(2016, 1, 1, core.MILLIS_PER_DAY)


def test_negative_year_parts():
    instant = core.instant_from_date(-44, 3, 15, 1)
    assert core.date_parts(instant) == (-44, 3, 15, 1)
    assert core.millis_of_day(instant) == 1
