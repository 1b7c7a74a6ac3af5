"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to core.handlers.exceptions for HTTP mapping
- Never contain business logic
"""

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.cache import EVENT_LIST_KEY, event_detail_key
from events.handlers.serializers import EventInputSerializer, EventSerializer
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


class EventListView(APIView):
    """Handler for GET and POST /api/events"""

    def get(self, request: Request) -> Response:
        data = cache.get(EVENT_LIST_KEY)
        if data is None:
            events = get_event_service().list_events()
            data = EventSerializer(events, many=True).data
            cache.set(EVENT_LIST_KEY, data, settings.EVENT_CACHE_TIMEOUT)
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().create_event(serializer.to_draft())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET /api/events/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        key = event_detail_key(slug)
        data = cache.get(key)
        if data is None:
            event = get_event_service().get_event_by_slug(slug)
            data = EventSerializer(event).data
            cache.set(key, data, settings.EVENT_CACHE_TIMEOUT)
        return Response(data)


class EventUpdateView(APIView):
    """Handler for PATCH /api/events/{event_id}/edit"""

    def patch(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = get_event_service().update_event(event_id, serializer.validated_data)
        return Response(EventSerializer(event).data)
