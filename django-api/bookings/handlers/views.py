"""HTTP handlers (views) for bookings - handle HTTP concerns only."""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings.handlers.serializers import (
    BookingInputSerializer,
    BookingSerializer,
    BookingStatusQuerySerializer,
    BookingUpdateSerializer,
)
from bookings.services.booking_service import BookingService
from bookings.stores.django_store import DjangoBookingStore
from events.stores.django_store import DjangoEventStore


def get_booking_service() -> BookingService:
    return BookingService(DjangoBookingStore(), DjangoEventStore())


class BookingListView(APIView):
    """Handler for GET and POST /api/events/{event_id}/bookings"""

    def get(self, request: Request, event_id: str) -> Response:
        bookings = get_booking_service().list_bookings_for_event(event_id)
        return Response(BookingSerializer(list(bookings), many=True).data)

    def post(self, request: Request, event_id: str) -> Response:
        serializer = BookingInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = get_booking_service().create_booking(
            event_id, serializer.validated_data["email"]
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingStatusView(APIView):
    """Handler for GET /api/events/{event_id}/bookings/status?email="""

    def get(self, request: Request, event_id: str) -> Response:
        query = BookingStatusQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        booked = get_booking_service().has_booked(event_id, query.validated_data["email"])
        return Response({"booked": booked})


class BookingDetailView(APIView):
    """Handler for PATCH /api/bookings/{booking_id}"""

    def patch(self, request: Request, booking_id: str) -> Response:
        serializer = BookingUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = get_booking_service().update_booking(booking_id, serializer.validated_data)
        return Response(BookingSerializer(booking).data)
