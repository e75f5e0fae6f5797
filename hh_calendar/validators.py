"""Validators for Hanke-Henry calendar values."""

from django.core.exceptions import ValidationError

from . import core

INSTANT_MIN = -(2**63)
INSTANT_MAX = 2**63 - 1


def validate_year(year: int) -> None:
    if not core.MIN_YEAR <= year <= core.MAX_YEAR:
        raise ValidationError(
            f"Year must be between {core.MIN_YEAR} and {core.MAX_YEAR}",
            code="year_out_of_range",
        )


def validate_month(month: int) -> None:
    if not 1 <= month <= core.MAX_MONTH:
        raise ValidationError("Month must be 1–12", code="month_out_of_range")


def validate_date_parts(year: int, month: int, day: int) -> None:
    """Validate numeric parts of a Hanke-Henry date."""
    validate_year(year)
    validate_month(month)
    max_day = core.days_in_month(year, month)
    if not 1 <= day <= max_day:
        raise ValidationError(
            f"Month {month} has {max_day} days in year {year}", code="day_out_of_range"
        )


def validate_instant(value: int) -> None:
    """Validate a stored instant against 64-bit storage and the UTC lower limit."""
    from .chronology import get_instance_utc

    if not INSTANT_MIN <= value <= INSTANT_MAX:
        raise ValidationError("Instant does not fit in 64 bits", code="instant_overflow")
    try:
        get_instance_utc().to_local(value)
    except core.IllegalFieldValueError as exc:
        raise ValidationError(
            f"Instant {value} is before the supported calendar range", code="instant_too_early"
        ) from exc
