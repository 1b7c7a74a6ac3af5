"""Store interfaces (repository pattern).

The (event, email) pair is unique at the store. Services may pre-check with
find_booking, but only insert_booking/update_booking decide.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from bookings.domain import Booking, BookingDraft, BookingId
from events.domain import EventId


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def find_booking(self, event_id: EventId, email: str) -> Booking | None:
        """Return the booking for an (event, normalized email) pair, or None."""
        ...

    @abstractmethod
    def list_bookings_for_event(self, event_id: EventId) -> Iterable[Booking]:
        """Return the event's bookings, oldest first, each with its event summary.

        The result is lazy and can be iterated more than once; every pass
        reads from storage again.
        """
        ...

    @abstractmethod
    def insert_booking(self, draft: BookingDraft) -> Booking:
        """Persist a prepared draft as a new booking.

        Raises:
            DuplicateBookingError: If the (event, email) pair is already booked.
        """
        ...

    @abstractmethod
    def update_booking(self, booking_id: BookingId, draft: BookingDraft) -> Booking:
        """Overwrite an existing booking with a prepared draft.

        Raises:
            BookingNotFoundError: If the booking does not exist.
            DuplicateBookingError: If the (event, email) pair is already booked.
        """
        ...
