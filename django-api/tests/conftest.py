"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from bookings.services.booking_service import BookingService
from events.domain import EventDraft
from events.services.event_service import EventService
from tests.fakes import InMemoryBookingStore, InMemoryEventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def event_payload() -> dict:
    return {
        "title": "GitHub Universe 2025",
        "description": "The ultimate developer conference on AI-powered tooling.",
        "overview": "Two days of talks and workshops.",
        "image": "https://example.com/images/event1.png",
        "venue": "Fort Mason Center",
        "location": "San Francisco, CA",
        "date": "2025-10-28",
        "time": "12:25pm",
        "mode": "hybrid",
        "audience": "Developers",
        "agenda": ["Keynote", "Workshops"],
        "organizer": "GitHub",
        "tags": ["ai", "open-source"],
    }


@pytest.fixture
def make_draft(event_payload):
    def factory(**overrides) -> EventDraft:
        data = {**event_payload, **overrides}
        data["agenda"] = tuple(data["agenda"])
        data["tags"] = tuple(data["tags"])
        return EventDraft(**data)

    return factory


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def booking_store(event_store) -> InMemoryBookingStore:
    return InMemoryBookingStore(event_store)


@pytest.fixture
def event_service(event_store) -> EventService:
    return EventService(event_store)


@pytest.fixture
def booking_service(booking_store, event_store) -> BookingService:
    return BookingService(booking_store, event_store)
