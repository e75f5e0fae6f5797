from __future__ import annotations

from zoneinfo import ZoneInfoNotFoundError

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from hh_calendar.chronology import get_instance
from hh_calendar.core import IllegalFieldValueError

from .serializers import InstantBreakdownSerializer


class InstantDetail(APIView):
    """Break an instant down into Hanke-Henry fields, optionally in ``?zone=``."""

    def get(self, request, instant: int):
        zone = request.query_params.get("zone") or None
        try:
            chrono = get_instance(zone)
        except (ZoneInfoNotFoundError, ValueError):
            return Response({"error": f"Unknown zone {zone!r}"}, status=status.HTTP_400_BAD_REQUEST)
        try:
            chrono.to_local(instant)
        except IllegalFieldValueError as exc:
            return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        serializer = InstantBreakdownSerializer({"instant": instant}, context={"chronology": chrono})
        return Response(serializer.data)
