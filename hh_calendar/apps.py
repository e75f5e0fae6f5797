from django.apps import AppConfig


class HhCalendarConfig(AppConfig):
    name = "hh_calendar"
    verbose_name = "Hanke-Henry calendar"

    def ready(self) -> None:
        from .conf import validate_settings

        validate_settings()
