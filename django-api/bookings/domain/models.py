"""Domain models for bookings.

A booking holds a weak reference to its event: the event is looked up for
validation and display only.
"""

from dataclasses import dataclass
from datetime import datetime

from bookings.domain.value_objects import BookingId
from events.domain import EventId, EventSummary


@dataclass(frozen=True)
class BookingDraft:
    """Candidate Booking, before or after preparation for persistence."""

    event_id: EventId
    email: str


@dataclass(frozen=True)
class Booking:
    """Domain representation of a persisted Booking."""

    id: BookingId
    event_id: EventId
    email: str
    created_at: datetime
    updated_at: datetime
    event: EventSummary | None = None

    def to_draft(self) -> BookingDraft:
        return BookingDraft(event_id=self.event_id, email=self.email)
