from django.urls import path

from hh_calendar import converters  # noqa: F401

from . import views

urlpatterns = [
    path("instant/<signed_int:instant>", views.InstantDetail.as_view(), name="instant-detail"),
]
