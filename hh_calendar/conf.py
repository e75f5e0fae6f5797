from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_ZONE = getattr(settings, "HH_CALENDAR_DEFAULT_ZONE", None) or getattr(
    settings, "TIME_ZONE", "UTC"
)
MIN_DAYS_IN_FIRST_WEEK = getattr(settings, "HH_CALENDAR_MIN_DAYS_IN_FIRST_WEEK", 7)
LOWER_LIMIT_YEAR = getattr(settings, "HH_CALENDAR_LOWER_LIMIT_YEAR", 1)


def validate_settings() -> None:
    """Raise ``ImproperlyConfigured`` when the calendar settings are unusable."""

    from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

    from . import core

    try:
        ZoneInfo(DEFAULT_ZONE)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
        raise ImproperlyConfigured(
            f"HH_CALENDAR_DEFAULT_ZONE {DEFAULT_ZONE!r} is not a known time zone"
        ) from exc
    if not isinstance(MIN_DAYS_IN_FIRST_WEEK, int) or not 1 <= MIN_DAYS_IN_FIRST_WEEK <= 7:
        raise ImproperlyConfigured("HH_CALENDAR_MIN_DAYS_IN_FIRST_WEEK must be 1..7")
    if LOWER_LIMIT_YEAR is not None and not (
        isinstance(LOWER_LIMIT_YEAR, int) and core.MIN_YEAR <= LOWER_LIMIT_YEAR <= core.MAX_YEAR
    ):
        raise ImproperlyConfigured(
            f"HH_CALENDAR_LOWER_LIMIT_YEAR must be None or within "
            f"[{core.MIN_YEAR}, {core.MAX_YEAR}]"
        )
