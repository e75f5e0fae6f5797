from datetime import date

from hh_calendar.core import MILLIS_PER_DAY

GREGORIAN_EPOCH = date(1970, 1, 1)


def iso_year_start(year: int) -> int:
    """Vrátí instant pondělí 1. ISO týdne roku ``year`` (roky 1..9999)."""
    return (date.fromisocalendar(year, 1, 1) - GREGORIAN_EPOCH).days * MILLIS_PER_DAY


def gregorian_instant(d: date, millis: int = 0) -> int:
    return (d - GREGORIAN_EPOCH).days * MILLIS_PER_DAY + millis
