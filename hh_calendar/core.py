"""Canonical Hanke-Henry Permanent Calendar arithmetic.

This module is the single source of truth for the calendar used across the
project.  Every common year has 364 days split into four identical quarters
of 30/30/31 days; a leap year appends a seven day "Xtr" week to month 12.
Leap years are exactly the years that carry 53 ISO weeks, so every year
starts on a Monday.

The calendar is proleptic.  Instants are integer milliseconds since
1970-01-01T00:00:00Z and nothing in here touches time zones.
"""

from __future__ import annotations

from typing import NamedTuple

MILLIS_PER_SECOND: int = 1000
MILLIS_PER_DAY: int = 24 * 60 * 60 * MILLIS_PER_SECOND

EPOCH_YEAR: int = 1970
# 1970-01-01 Gregorian is Thursday of week 1; the year began Monday 1969-12-29.
EPOCH_CORRECTION_DAYS: int = -3

MIN_YEAR: int = -292275054
MAX_YEAR: int = 292278993

MAX_MONTH: int = 12
DAYS_IN_YEAR: int = 364
DAYS_IN_LEAP_YEAR: int = 371
DAYS_IN_YEAR_MAX: int = DAYS_IN_LEAP_YEAR
DAYS_IN_WEEK: int = 7
DAYS_IN_QUARTER: int = 91

DAYS_PER_MONTH: tuple[int, ...] = (30, 30, 31) * 4
MAX_DAYS_PER_MONTH: tuple[int, ...] = DAYS_PER_MONTH[:-1] + (DAYS_PER_MONTH[-1] + DAYS_IN_WEEK,)

# 365.2425 days, the mean length of both this calendar and the Gregorian one.
AVERAGE_MILLIS_PER_YEAR: int = 31_556_952_000
AVERAGE_MILLIS_PER_MONTH: int = AVERAGE_MILLIS_PER_YEAR // MAX_MONTH
APPROX_MILLIS_AT_EPOCH: int = (
    EPOCH_YEAR * AVERAGE_MILLIS_PER_YEAR - EPOCH_CORRECTION_DAYS * MILLIS_PER_DAY
)

CYCLE_YEARS: int = 400


def _cumulative(lengths: tuple[int, ...]) -> tuple[int, ...]:
    total = 0
    out = [0]
    for length in lengths:
        total += length
        out.append(total)
    return tuple(out)


_DAYS_BEFORE_MONTH: tuple[int, ...] = _cumulative(DAYS_PER_MONTH)
_DAYS_BEFORE_MONTH_LEAP: tuple[int, ...] = _cumulative(MAX_DAYS_PER_MONTH)


class IllegalFieldValueError(ValueError):
    """A calendar field value lies outside its supported range."""

    def __init__(self, field_name: str, value: int, lower: int | None, upper: int | None):
        self.field_name = field_name
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Value {value} for {field_name} must be in the range "
            f"[{'-inf' if lower is None else lower},{'inf' if upper is None else upper}]"
        )


class DateParts(NamedTuple):
    year: int
    month: int
    day: int
    millis_of_day: int


def _check(field_name: str, value: int, lower: int, upper: int) -> int:
    if not lower <= value <= upper:
        raise IllegalFieldValueError(field_name, value, lower, upper)
    return value


def check_year(year: int) -> int:
    """Return ``year`` or raise :class:`IllegalFieldValueError`."""

    return _check("year", year, MIN_YEAR, MAX_YEAR)


def check_month(month: int) -> int:
    """Return ``month`` or raise :class:`IllegalFieldValueError`."""

    return _check("monthOfYear", month, 1, MAX_MONTH)


# ---------------------------------------------------------------------------
# Leap years
# ---------------------------------------------------------------------------


def _gregorian_days(i: int) -> int:
    return i * 365 + i // 4 - i // 100 + i // 400


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` carries the intercalary Xtr week.

    ``_gregorian_days(i) % 7`` is the weekday of 31 December of Gregorian
    year ``i`` (1 = Monday).  The year is leap when it ends on a Thursday or
    when the previous year ended on a Wednesday.
    """

    leap = False
    for i in (year - 1, year):
        remainder = _gregorian_days(i) % DAYS_IN_WEEK
        if (i == year and remainder == 4) or (i == year - 1 and remainder == 3):
            leap = True
    return leap


# Leap years within [0, k) for k = 0..400; the predicate repeats every 400
# years because 146097 days is a whole number of weeks.
_LEAP_PREFIX: tuple[int, ...] = _cumulative(
    tuple(int(is_leap_year(y)) for y in range(CYCLE_YEARS))
)
LEAP_YEARS_PER_CYCLE: int = _LEAP_PREFIX[-1]


def leap_years_before(year: int) -> int:
    """Return the signed count of leap years in ``[0, year)``.

    For negative years the result is minus the count in ``[year, 0)`` so that
    ``leap_years_before(b) - leap_years_before(a)`` counts ``[a, b)`` for any
    ``a <= b``.
    """

    cycles, rest = divmod(year, CYCLE_YEARS)
    return cycles * LEAP_YEARS_PER_CYCLE + _LEAP_PREFIX[rest]


def days_in_year(year: int) -> int:
    """Return 371 if ``year`` is leap, otherwise 364."""

    return DAYS_IN_LEAP_YEAR if is_leap_year(year) else DAYS_IN_YEAR


def weeks_in_year(year: int) -> int:
    return 53 if is_leap_year(year) else 52


# ---------------------------------------------------------------------------
# Year boundaries
# ---------------------------------------------------------------------------


def _year_start(year: int) -> int:
    relative_year = year - EPOCH_YEAR
    leap_years = leap_years_before(year) - leap_years_before(EPOCH_YEAR)
    days = relative_year * DAYS_IN_YEAR + leap_years * DAYS_IN_WEEK + EPOCH_CORRECTION_DAYS
    return days * MILLIS_PER_DAY


def first_instant_of_year(year: int) -> int:
    """Return the instant at 00:00 of the first day of ``year``."""

    return _year_start(check_year(year))


def year_of(instant: int) -> int:
    """Return the year containing ``instant``.

    The estimate works on halved operands so every intermediate value of an
    in-range instant stays within signed 64 bits.  It is never off by more
    than one year.
    """

    unit = AVERAGE_MILLIS_PER_YEAR // 2
    year = ((instant >> 1) + APPROX_MILLIS_AT_EPOCH // 2) // unit

    year_start = _year_start(year)
    diff = instant - year_start
    if diff < 0:
        year -= 1
    elif diff >= DAYS_IN_YEAR * MILLIS_PER_DAY:
        # One year may need to be added to fix the estimate.
        year_start += days_in_year(year) * MILLIS_PER_DAY
        if year_start <= instant:
            year += 1
    return year


def _resolve_year_start(instant: int, year: int | None) -> tuple[int, int]:
    if year is None:
        year = year_of(instant)
        return year, _year_start(year)
    return year, first_instant_of_year(year)


# ---------------------------------------------------------------------------
# Months and days
# ---------------------------------------------------------------------------


def month_of_day_of_year(day_of_year_zero_based: int) -> int:
    """Return the month (1..12) of a zero-based day-of-year.

    Each 91 day quarter holds months of 30, 30 and 31 days, so scaling by 3
    and dividing by 91 lands on the right month.  The +2 moves the split
    points to days 30 and 60 of the quarter; without it the quarter would
    read 31/30/30.  Days from 364 onwards are the Xtr week and belong to
    month 12.
    """

    if day_of_year_zero_based >= DAYS_IN_YEAR:
        return MAX_MONTH
    return (day_of_year_zero_based * 3 + 2) // DAYS_IN_QUARTER + 1


def month_of(instant: int, year: int | None = None) -> int:
    """Return the month of ``instant``; ``year`` may be passed if known."""

    year, start = _resolve_year_start(instant, year)
    return month_of_day_of_year((instant - start) // MILLIS_PER_DAY)


def days_in_month(year: int, month: int) -> int:
    """Return number of days in ``month`` for ``year``."""

    check_month(month)
    if is_leap_year(year):
        return MAX_DAYS_PER_MONTH[month - 1]
    return DAYS_PER_MONTH[month - 1]


def max_days_in_month(month: int) -> int:
    """Return the longest ``month`` can be in any year."""

    check_month(month)
    return MAX_DAYS_PER_MONTH[month - 1]


def millis_before_month(year: int, month: int) -> int:
    """Milliseconds from the start of ``year`` to the start of ``month``."""

    check_month(month)
    table = _DAYS_BEFORE_MONTH_LEAP if is_leap_year(year) else _DAYS_BEFORE_MONTH
    return table[month - 1] * MILLIS_PER_DAY


def day_of_year(instant: int, year: int | None = None) -> int:
    """Return the 1-based day-of-year of ``instant``."""

    year, start = _resolve_year_start(instant, year)
    return (instant - start) // MILLIS_PER_DAY + 1


def day_of_month(instant: int, year: int | None = None) -> int:
    year, start = _resolve_year_start(instant, year)
    doy = (instant - start) // MILLIS_PER_DAY
    month = month_of_day_of_year(doy)
    return doy - _DAYS_BEFORE_MONTH[month - 1] + 1


def millis_of_day(instant: int) -> int:
    return instant % MILLIS_PER_DAY


def day_of_week(instant: int) -> int:
    """Return the ISO weekday (1 = Monday .. 7 = Sunday) of ``instant``."""

    # 1970-01-01 was a Thursday.
    return (instant // MILLIS_PER_DAY + 3) % DAYS_IN_WEEK + 1


def days_in_month_of(instant: int) -> int:
    """Return the length of the month containing ``instant``."""

    year = year_of(instant)
    return days_in_month(year, month_of(instant, year))


def instant_from_date(year: int, month: int, day: int, millis: int = 0) -> int:
    """Return the instant for ``year``-``month``-``day`` plus ``millis``."""

    start = first_instant_of_year(year)
    _check("dayOfMonth", day, 1, days_in_month(year, month))
    _check("millisOfDay", millis, 0, MILLIS_PER_DAY - 1)
    return start + millis_before_month(year, month) + (day - 1) * MILLIS_PER_DAY + millis


def date_parts(instant: int) -> DateParts:
    """Split ``instant`` into year, month, day-of-month and millis-of-day."""

    year = year_of(instant)
    doy = (instant - _year_start(year)) // MILLIS_PER_DAY
    month = month_of_day_of_year(doy)
    return DateParts(
        year,
        month,
        doy - _DAYS_BEFORE_MONTH[month - 1] + 1,
        millis_of_day(instant),
    )


# ---------------------------------------------------------------------------
# Year and month arithmetic
# ---------------------------------------------------------------------------


def years_between(minuend_instant: int, subtrahend_instant: int) -> int:
    """Return whole years from ``subtrahend_instant`` to ``minuend_instant``."""

    minuend_year = year_of(minuend_instant)
    subtrahend_year = year_of(subtrahend_instant)

    minuend_rem = minuend_instant - _year_start(minuend_year)
    subtrahend_rem = subtrahend_instant - _year_start(subtrahend_year)

    # Balance Xtr week differences on remainders.
    xtr_start = DAYS_IN_YEAR * MILLIS_PER_DAY
    if subtrahend_rem >= xtr_start:
        if is_leap_year(subtrahend_year) and not is_leap_year(minuend_year):
            subtrahend_rem -= MILLIS_PER_DAY
    elif minuend_rem >= xtr_start and is_leap_year(minuend_year):
        minuend_rem -= MILLIS_PER_DAY

    difference = minuend_year - subtrahend_year
    if minuend_rem < subtrahend_rem:
        difference -= 1
    return difference


def with_year(instant: int, year: int) -> int:
    """Move ``instant`` into ``year`` keeping day-of-year and time of day.

    A day in the Xtr week moved into a common year becomes the last day of
    that year.
    """

    this_year = year_of(instant)
    doy = (instant - _year_start(this_year)) // MILLIS_PER_DAY + 1
    millis = millis_of_day(instant)

    if doy > DAYS_IN_YEAR and not is_leap_year(year):
        doy = DAYS_IN_YEAR

    return first_instant_of_year(year) + (doy - 1) * MILLIS_PER_DAY + millis


def add_years(instant: int, years: int) -> int:
    if years == 0:
        return instant
    return with_year(instant, year_of(instant) + years)


def add_months(instant: int, months: int) -> int:
    """Add ``months`` to ``instant``, clamping the day to the target month."""

    if months == 0:
        return instant
    year, month, day, millis = date_parts(instant)
    year_delta, month_index = divmod(month - 1 + months, MAX_MONTH)
    year += year_delta
    month = month_index + 1
    day = min(day, days_in_month(year, month))
    return instant_from_date(year, month, day, millis)


def months_between(minuend_instant: int, subtrahend_instant: int) -> int:
    """Return whole months from ``subtrahend_instant`` to ``minuend_instant``."""

    if minuend_instant < subtrahend_instant:
        return -months_between(subtrahend_instant, minuend_instant)

    minuend = date_parts(minuend_instant)
    subtrahend = date_parts(subtrahend_instant)
    difference = (minuend.year - subtrahend.year) * MAX_MONTH + minuend.month - subtrahend.month
    if difference and add_months(subtrahend_instant, difference) > minuend_instant:
        difference -= 1
    return difference
