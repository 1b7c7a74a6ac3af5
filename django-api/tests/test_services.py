"""Unit tests for EventService and BookingService.

These test error handling and domain error mapping against in-memory
stores that enforce the same unique constraints as the database.
Run with: pytest django-api/tests/test_services.py -v
"""

import uuid

import pytest

from bookings.domain import BookingDraft
from bookings.domain.errors import (
    BookingNotFoundError,
    DuplicateBookingError,
    InvalidBookingIdError,
    InvalidEmailFormatError,
)
from core.errors import InvalidFieldError
from events.domain.errors import (
    DuplicateSlugError,
    EmptyRequiredListError,
    EventNotFoundError,
    InvalidEventIdError,
)


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, event_service):
        with pytest.raises(InvalidEventIdError):
            event_service.get_event("not-a-uuid")

    def test_get_event_not_found_raises_error(self, event_service):
        with pytest.raises(EventNotFoundError):
            event_service.get_event(str(uuid.uuid4()))

    def test_get_event_by_slug_not_found_raises_error(self, event_service):
        with pytest.raises(EventNotFoundError):
            event_service.get_event_by_slug("missing")

    def test_create_event_persists_normalized_record(self, event_service, make_draft):
        event = event_service.create_event(make_draft(time="2:30pm"))
        assert event.slug == "github-universe-2025"
        assert event.time == "14:30"
        assert event_service.get_event(str(event.id)) == event
        assert event_service.get_event_by_slug("github-universe-2025") == event

    def test_create_event_with_empty_agenda_fails(self, event_service, event_store, make_draft):
        with pytest.raises(EmptyRequiredListError):
            event_service.create_event(make_draft(agenda=[]))
        assert event_store.events == {}

    def test_create_event_duplicate_title_fails(self, event_service, make_draft):
        event_service.create_event(make_draft())
        with pytest.raises(DuplicateSlugError):
            event_service.create_event(make_draft(title="GitHub  Universe 2025!"))

    def test_list_events_newest_first(self, event_service, make_draft):
        first = event_service.create_event(make_draft(title="First"))
        second = event_service.create_event(make_draft(title="Second"))
        assert [event.id for event in event_service.list_events()] == [second.id, first.id]

    def test_update_title_rederives_slug(self, event_service, make_draft):
        event = event_service.create_event(make_draft())
        updated = event_service.update_event(str(event.id), {"title": "GitHub Universe 2026"})
        assert updated.slug == "github-universe-2026"
        assert updated.date == event.date

    def test_update_date_is_normalized(self, event_service, make_draft):
        event = event_service.create_event(make_draft())
        updated = event_service.update_event(str(event.id), {"date": "November 3, 2025"})
        assert updated.date == "2025-11-03"
        assert updated.slug == event.slug

    def test_update_without_changes_returns_current(self, event_service, make_draft):
        event = event_service.create_event(make_draft())
        assert event_service.update_event(str(event.id), {"date": event.date}) == event

    def test_update_to_taken_title_fails(self, event_service, make_draft):
        event_service.create_event(make_draft(title="Taken"))
        event = event_service.create_event(make_draft(title="Free"))
        with pytest.raises(DuplicateSlugError):
            event_service.update_event(str(event.id), {"title": "taken"})

    def test_update_keeping_own_slug_succeeds(self, event_service, make_draft):
        event = event_service.create_event(make_draft(title="Same Title"))
        updated = event_service.update_event(str(event.id), {"title": "Same  Title"})
        assert updated.slug == event.slug

    def test_update_rejects_slug_field(self, event_service, make_draft):
        event = event_service.create_event(make_draft())
        with pytest.raises(InvalidFieldError):
            event_service.update_event(str(event.id), {"slug": "custom"})

    def test_update_missing_event_fails(self, event_service):
        with pytest.raises(EventNotFoundError):
            event_service.update_event(str(uuid.uuid4()), {"title": "x"})


class TestBookingService:
    """Tests for BookingService."""

    @pytest.fixture
    def event(self, event_service, make_draft):
        return event_service.create_event(make_draft())

    def test_create_booking_normalizes_email(self, booking_service, event):
        booking = booking_service.create_booking(str(event.id), " User@Example.com ")
        assert booking.email == "user@example.com"
        assert booking.event_id == event.id

    def test_create_booking_unknown_event_fails(self, booking_service):
        with pytest.raises(EventNotFoundError):
            booking_service.create_booking(str(uuid.uuid4()), "user@example.com")

    def test_create_booking_invalid_event_id_fails(self, booking_service):
        with pytest.raises(InvalidEventIdError):
            booking_service.create_booking("42", "user@example.com")

    def test_create_booking_invalid_email_fails(self, booking_service, event):
        with pytest.raises(InvalidEmailFormatError):
            booking_service.create_booking(str(event.id), "user@example")

    def test_duplicate_booking_is_case_insensitive(self, booking_service, event):
        booking_service.create_booking(str(event.id), "A@X.com")
        with pytest.raises(DuplicateBookingError):
            booking_service.create_booking(str(event.id), "a@x.com")

    def test_same_email_may_book_different_events(self, booking_service, event_service, event, make_draft):
        other = event_service.create_event(make_draft(title="Other Event"))
        booking_service.create_booking(str(event.id), "user@example.com")
        booking_service.create_booking(str(other.id), "user@example.com")
        assert booking_service.has_booked(str(other.id), "user@example.com")

    def test_store_rejects_duplicate_that_passed_precheck(self, booking_store, event):
        # Two writers that both passed the pre-check race at insert.
        draft = BookingDraft(event_id=event.id, email="user@example.com")
        booking_store.insert_booking(draft)
        with pytest.raises(DuplicateBookingError):
            booking_store.insert_booking(draft)

    def test_has_booked_before_and_after(self, booking_service, event):
        assert booking_service.has_booked(str(event.id), "user@example.com") is False
        booking_service.create_booking(str(event.id), "user@example.com")
        assert booking_service.has_booked(str(event.id), "USER@example.com ") is True

    def test_update_email_skips_event_check(self, booking_service, event_store, event):
        booking = booking_service.create_booking(str(event.id), "old@example.com")
        calls = event_store.exists_calls
        updated = booking_service.update_booking(str(booking.id), {"email": "New@Example.com"})
        assert updated.email == "new@example.com"
        assert event_store.exists_calls == calls

    def test_update_event_rechecks_event(self, booking_service, event):
        booking = booking_service.create_booking(str(event.id), "user@example.com")
        with pytest.raises(EventNotFoundError):
            booking_service.update_booking(str(booking.id), {"event_id": str(uuid.uuid4())})

    def test_update_email_to_taken_address_fails(self, booking_service, event):
        booking_service.create_booking(str(event.id), "taken@example.com")
        booking = booking_service.create_booking(str(event.id), "free@example.com")
        with pytest.raises(DuplicateBookingError):
            booking_service.update_booking(str(booking.id), {"email": "TAKEN@example.com"})

    def test_update_unknown_booking_fails(self, booking_service):
        with pytest.raises(BookingNotFoundError):
            booking_service.update_booking(str(uuid.uuid4()), {"email": "a@b.co"})

    def test_update_invalid_booking_id_fails(self, booking_service):
        with pytest.raises(InvalidBookingIdError):
            booking_service.update_booking("nope", {"email": "a@b.co"})

    def test_list_bookings_carries_event_summary(self, booking_service, event):
        booking_service.create_booking(str(event.id), "one@example.com")
        booking_service.create_booking(str(event.id), "two@example.com")
        bookings = list(booking_service.list_bookings_for_event(str(event.id)))
        assert [booking.email for booking in bookings] == ["one@example.com", "two@example.com"]
        assert bookings[0].event.title == event.title
        assert bookings[0].event.venue == event.venue
        assert bookings[0].event.date == event.date

    def test_list_bookings_is_restartable(self, booking_service, event):
        listing = booking_service.list_bookings_for_event(str(event.id))
        assert list(listing) == []
        booking_service.create_booking(str(event.id), "late@example.com")
        assert [booking.email for booking in listing] == ["late@example.com"]
