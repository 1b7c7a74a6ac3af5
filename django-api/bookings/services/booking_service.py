"""Booking service - all business logic lives here.

The has_booked pre-check in create_booking gives a fast, friendly error;
two concurrent requests can both pass it, and then the store's unique
constraint rejects the loser with DuplicateBookingError.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from bookings.domain import Booking, BookingDraft, BookingId
from bookings.domain.errors import BookingNotFoundError, DuplicateBookingError, InvalidBookingIdError
from bookings.domain.value_objects import normalize_email
from bookings.services.booking_preparation import prepare_booking
from bookings.stores.interfaces import BookingStore
from core.errors import InvalidFieldError
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"event_id", "email"})


def parse_booking_id(booking_id: str) -> BookingId:
    try:
        return BookingId.from_string(booking_id)
    except (ValueError, TypeError, AttributeError):
        raise InvalidBookingIdError()


class BookingService:
    """Service for booking operations."""

    def __init__(self, store: BookingStore, events: EventStore) -> None:
        self._store = store
        self._events = events

    def create_booking(self, event_id: str, email: str) -> Booking:
        """Book an event for an email address.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            InvalidEmailFormatError: If the email is not a plausible address.
            DuplicateBookingError: If the email has already booked the event.
        """
        draft = BookingDraft(event_id=parse_event_id(event_id), email=email)
        prepared = prepare_booking(draft, self._events, is_new=True)
        if self._store.find_booking(prepared.event_id, prepared.email) is not None:
            logger.info("Booking rejected: already booked", extra={"event_id": event_id})
            raise DuplicateBookingError(event_id)
        return self._store.insert_booking(prepared)

    def update_booking(self, booking_id: str, changes: Mapping[str, Any]) -> Booking:
        """Change the email and/or event of an existing booking.

        The event existence check runs only if the event actually changes.

        Raises:
            InvalidBookingIdError: If the booking_id is not a valid UUID.
            BookingNotFoundError: If the booking does not exist.
            InvalidFieldError: If changes names a field that cannot be written.
            DomainError: Any preparation failure, or DuplicateBookingError from the store.
        """
        parsed_id = parse_booking_id(booking_id)
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            field = sorted(unknown)[0]
            raise InvalidFieldError(field, f"Field {field} cannot be updated")

        current = self._store.get_booking(parsed_id)
        if current is None:
            raise BookingNotFoundError(booking_id)

        draft = current.to_draft()
        changed_fields = set()
        if "event_id" in changes:
            new_event_id = parse_event_id(changes["event_id"])
            if new_event_id != draft.event_id:
                draft = BookingDraft(event_id=new_event_id, email=draft.email)
                changed_fields.add("event_id")
        if "email" in changes and normalize_email(changes["email"]) != draft.email:
            draft = BookingDraft(event_id=draft.event_id, email=changes["email"])
            changed_fields.add("email")
        if not changed_fields:
            return current

        prepared = prepare_booking(
            draft,
            self._events,
            is_new=False,
            changed_fields=frozenset(changed_fields),
        )
        return self._store.update_booking(parsed_id, prepared)

    def list_bookings_for_event(self, event_id: str) -> Iterable[Booking]:
        """Return the event's bookings with their event summaries.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
        """
        return self._store.list_bookings_for_event(parse_event_id(event_id))

    def has_booked(self, event_id: str, email: str) -> bool:
        """Return True iff the email has booked the event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
        """
        parsed_id = parse_event_id(event_id)
        return self._store.find_booking(parsed_id, normalize_email(email)) is not None
