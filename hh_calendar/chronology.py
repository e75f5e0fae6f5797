"""Zone-bound Hanke-Henry chronologies and their registry.

:mod:`hh_calendar.core` works on zone-naive instants.  A
:class:`HankeHenryChronology` shifts UTC instants into the local time of its
zone before computing fields and shifts results back afterwards.
Chronologies are immutable and shared through :func:`get_instance`.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from . import conf, core

logger = logging.getLogger(__name__)

UTC = ZoneInfo("UTC")

_EPOCH = datetime(1970, 1, 1)
_ONE_MILLI = timedelta(milliseconds=1)
# Offsets are looked up inside the range ``datetime`` can represent; beyond it
# the zone keeps the offset in force at the nearest edge.
_OFFSET_LOOKUP_MIN = int((datetime(1, 1, 2) - _EPOCH) / _ONE_MILLI)
_OFFSET_LOOKUP_MAX = int((datetime(9999, 12, 30) - _EPOCH) / _ONE_MILLI)


def _clamp_lookup(instant: int) -> datetime:
    instant = min(max(instant, _OFFSET_LOOKUP_MIN), _OFFSET_LOOKUP_MAX)
    return _EPOCH + timedelta(milliseconds=instant)


def _offset_millis(offset: timedelta | None) -> int:
    return 0 if offset is None else offset // _ONE_MILLI


def resolve_zone(zone: ZoneInfo | str | None) -> ZoneInfo:
    """Return a ``ZoneInfo`` for ``zone``; ``None`` means the configured default."""

    if zone is None:
        zone = conf.DEFAULT_ZONE
    if isinstance(zone, ZoneInfo):
        return zone
    return ZoneInfo(zone)


@dataclass(frozen=True)
class HankeHenryChronology:
    """Hanke-Henry calendar fields computed in the local time of ``zone``.

    Every year starts on a Monday and is made of whole weeks, so
    ``min_days_in_first_week`` never moves a week boundary.  It is kept only
    to key the registry.
    """

    zone: ZoneInfo = UTC
    min_days_in_first_week: int = 7
    lower_limit: int | None = None

    # Zone wrapping ------------------------------------------------------
    @property
    def is_utc(self) -> bool:
        return self.zone.key == "UTC"

    def offset(self, instant: int) -> int:
        """Return the zone offset in milliseconds at UTC ``instant``."""

        if self.is_utc:
            return 0
        moment = _clamp_lookup(instant).replace(tzinfo=timezone.utc)
        return _offset_millis(moment.astimezone(self.zone).utcoffset())

    def to_local(self, instant: int) -> int:
        local_instant = instant + self.offset(instant)
        self._check_limit(local_instant)
        return local_instant

    def to_utc(self, local_instant: int) -> int:
        self._check_limit(local_instant)
        if self.is_utc:
            return local_instant
        naive = _clamp_lookup(local_instant)
        return local_instant - _offset_millis(naive.replace(tzinfo=self.zone).utcoffset())

    def _check_limit(self, local_instant: int) -> None:
        # Compared against local time.
        if self.lower_limit is not None and local_instant < self.lower_limit:
            raise core.IllegalFieldValueError("instant", local_instant, self.lower_limit, None)

    def with_zone(self, zone: ZoneInfo | str | None) -> HankeHenryChronology:
        zone = resolve_zone(zone)
        if zone == self.zone:
            return self
        return get_instance(zone, self.min_days_in_first_week)

    def with_utc(self) -> HankeHenryChronology:
        return self.with_zone(UTC)

    # Fields -------------------------------------------------------------
    def year(self, instant: int) -> int:
        return core.year_of(self.to_local(instant))

    def month_of_year(self, instant: int) -> int:
        return core.month_of(self.to_local(instant))

    def day_of_month(self, instant: int) -> int:
        return core.day_of_month(self.to_local(instant))

    def day_of_year(self, instant: int) -> int:
        return core.day_of_year(self.to_local(instant))

    def day_of_week(self, instant: int) -> int:
        return core.day_of_week(self.to_local(instant))

    def week_of_year(self, instant: int) -> int:
        return (self.day_of_year(instant) - 1) // core.DAYS_IN_WEEK + 1

    def millis_of_day(self, instant: int) -> int:
        return core.millis_of_day(self.to_local(instant))

    def date_parts(self, instant: int) -> core.DateParts:
        return core.date_parts(self.to_local(instant))

    def days_in_month_of(self, instant: int) -> int:
        return core.days_in_month_of(self.to_local(instant))

    def instant(self, year: int, month: int, day: int, millis: int = 0) -> int:
        """Return the UTC instant of a local calendar date and time."""

        return self.to_utc(core.instant_from_date(year, month, day, millis))

    # Arithmetic ---------------------------------------------------------
    def with_year(self, instant: int, year: int) -> int:
        return self.to_utc(core.with_year(self.to_local(instant), year))

    def add_years(self, instant: int, years: int) -> int:
        return self.to_utc(core.add_years(self.to_local(instant), years))

    def add_months(self, instant: int, months: int) -> int:
        return self.to_utc(core.add_months(self.to_local(instant), months))

    def years_between(self, minuend_instant: int, subtrahend_instant: int) -> int:
        return core.years_between(self.to_local(minuend_instant), self.to_local(subtrahend_instant))

    def months_between(self, minuend_instant: int, subtrahend_instant: int) -> int:
        return core.months_between(
            self.to_local(minuend_instant), self.to_local(subtrahend_instant)
        )

    # Zone independent ---------------------------------------------------
    is_leap_year = staticmethod(core.is_leap_year)
    days_in_year = staticmethod(core.days_in_year)
    weeks_in_year = staticmethod(core.weeks_in_year)
    days_in_month = staticmethod(core.days_in_month)
    max_days_in_month = staticmethod(core.max_days_in_month)

    def __str__(self) -> str:
        return f"HankeHenryChronology[{self.zone.key}]"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_cache: dict[tuple[str, int], HankeHenryChronology] = {}
_cache_lock = threading.Lock()


def _lower_limit() -> int | None:
    if conf.LOWER_LIMIT_YEAR is None:
        return None
    return core.first_instant_of_year(conf.LOWER_LIMIT_YEAR)


def get_instance(
    zone: ZoneInfo | str | None = None, min_days_in_first_week: int | None = None
) -> HankeHenryChronology:
    """Return the shared chronology for ``zone`` and ``min_days_in_first_week``.

    Raises ``zoneinfo.ZoneInfoNotFoundError`` for unknown zones and
    ``ValueError`` for a first-week parameter outside 1..7.
    """

    zone = resolve_zone(zone)
    if min_days_in_first_week is None:
        min_days_in_first_week = conf.MIN_DAYS_IN_FIRST_WEEK
    if not 1 <= min_days_in_first_week <= 7:
        raise ValueError(f"Invalid min days in first week: {min_days_in_first_week}")

    key = (zone.key, min_days_in_first_week)
    with _cache_lock:
        chrono = _cache.get(key)
        if chrono is None:
            chrono = HankeHenryChronology(zone, min_days_in_first_week, _lower_limit())
            _cache[key] = chrono
            logger.debug("Created %s (min days in first week %s)", chrono, min_days_in_first_week)
    return chrono


def get_instance_utc() -> HankeHenryChronology:
    return get_instance(UTC)


def clear_cache() -> None:
    """Drop every cached chronology, e.g. after settings change."""

    with _cache_lock:
        _cache.clear()
