"""Django model fields for the Hanke-Henry calendar."""

from __future__ import annotations

from functools import partialmethod

from django.db import models

from .validators import validate_instant


class HankeHenryInstantField(models.BigIntegerField):
    """Store an instant as signed milliseconds since 1970-01-01T00:00:00Z.

    The model gains ``get_<name>_date_parts(zone=None)`` which splits the stored
    value into Hanke-Henry ``(year, month, day, millis_of_day)`` through
    :mod:`hh_calendar.chronology`.
    """

    description = "Hanke-Henry calendar instant"
    default_validators = [validate_instant]

    def contribute_to_class(self, cls, name, private_only=False):
        super().contribute_to_class(cls, name, private_only=private_only)
        method = f"get_{self.name}_date_parts"
        if method not in cls.__dict__:
            setattr(cls, method, partialmethod(_get_date_parts, field=self))


def _get_date_parts(obj, zone=None, *, field):
    from .chronology import get_instance

    value = getattr(obj, field.attname)
    if value is None:
        return None
    return get_instance(zone).date_parts(value)


__all__ = ["HankeHenryInstantField"]
