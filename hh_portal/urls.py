from django.urls import include, path

from hh_calendar import converters  # noqa: F401
from hh_calendar import views as calendar_views

urlpatterns = [
    path("hh/", include("hh_calendar.urls")),
    path("api/hh_calendar/", include("hh_calendar.api.urls")),
    path(
        "api/hh_calendar/year/<signed_int:y>/meta",
        calendar_views.year_meta,
        name="hh-calendar-year-meta",
    ),
]
