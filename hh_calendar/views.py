"""Views for Hanke-Henry calendar utilities."""

from django.http import JsonResponse

from . import core


def year_meta(request, y: int) -> JsonResponse:
    """Return calendar metadata for year ``y``."""

    try:
        first_instant = core.first_instant_of_year(y)
    except core.IllegalFieldValueError as exc:
        return JsonResponse({"error": str(exc)}, status=400)
    data = {
        "year": y,
        "leap": core.is_leap_year(y),
        "days_in_year": core.days_in_year(y),
        "weeks_in_year": core.weeks_in_year(y),
        "month_lengths": [core.days_in_month(y, m) for m in range(1, core.MAX_MONTH + 1)],
        "first_instant": first_instant,
    }
    return JsonResponse(data)
