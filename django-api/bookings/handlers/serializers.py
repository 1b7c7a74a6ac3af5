"""Serializers for booking requests and responses."""

from rest_framework import serializers


class BookingInputSerializer(serializers.Serializer):
    """Request body for POST /api/events/{event_id}/bookings"""

    email = serializers.CharField(allow_blank=True, trim_whitespace=False)


class BookingUpdateSerializer(serializers.Serializer):
    """Request body for PATCH /api/bookings/{booking_id}"""

    email = serializers.CharField(allow_blank=True, trim_whitespace=False, required=False)
    event_id = serializers.CharField(required=False)


class BookingStatusQuerySerializer(serializers.Serializer):
    email = serializers.CharField()


class EventSummarySerializer(serializers.Serializer):
    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    date = serializers.CharField()
    venue = serializers.CharField()


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.UUIDField(source="id.value")
    event_id = serializers.UUIDField(source="event_id.value")
    email = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()
    event = EventSummarySerializer(allow_null=True, required=False)
