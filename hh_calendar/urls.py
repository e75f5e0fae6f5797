from django.urls import path

from . import converters  # noqa: F401
from . import views

app_name = "hh_calendar"

urlpatterns = [
    path("year/<signed_int:y>/meta/", views.year_meta, name="year_meta"),
]
