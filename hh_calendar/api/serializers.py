from __future__ import annotations

from rest_framework import serializers

from hh_calendar.chronology import HankeHenryChronology


class InstantBreakdownSerializer(serializers.Serializer):
    """Hanke-Henry fields of one instant as seen from a chronology's zone."""

    instant = serializers.IntegerField()
    zone = serializers.SerializerMethodField()
    year = serializers.SerializerMethodField()
    month = serializers.SerializerMethodField()
    day = serializers.SerializerMethodField()
    day_of_year = serializers.SerializerMethodField()
    day_of_week = serializers.SerializerMethodField()
    week_of_year = serializers.SerializerMethodField()
    millis_of_day = serializers.SerializerMethodField()
    leap_year = serializers.SerializerMethodField()

    @property
    def chronology(self) -> HankeHenryChronology:
        return self.context["chronology"]

    def get_zone(self, obj) -> str:
        return self.chronology.zone.key

    def get_year(self, obj) -> int:
        return self.chronology.year(obj["instant"])

    def get_month(self, obj) -> int:
        return self.chronology.month_of_year(obj["instant"])

    def get_day(self, obj) -> int:
        return self.chronology.day_of_month(obj["instant"])

    def get_day_of_year(self, obj) -> int:
        return self.chronology.day_of_year(obj["instant"])

    def get_day_of_week(self, obj) -> int:
        return self.chronology.day_of_week(obj["instant"])

    def get_week_of_year(self, obj) -> int:
        return self.chronology.week_of_year(obj["instant"])

    def get_millis_of_day(self, obj) -> int:
        return self.chronology.millis_of_day(obj["instant"])

    def get_leap_year(self, obj) -> bool:
        return self.chronology.is_leap_year(self.get_year(obj))
