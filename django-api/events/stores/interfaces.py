"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Unique constraints are
enforced by the store itself, atomically; services treat any application
level pre-check as best effort.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventDraft, EventId, EventSummary


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_by_slug(self, slug: str) -> Event | None:
        """Return an event by slug, or None if not found."""
        ...

    @abstractmethod
    def get_event_summary(self, event_id: EventId) -> EventSummary | None:
        """Return the display projection of an event, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def insert_event(self, draft: EventDraft) -> Event:
        """Persist a prepared draft as a new event.

        Raises:
            DuplicateSlugError: If another event already has the draft's slug.
        """
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, draft: EventDraft) -> Event:
        """Overwrite an existing event with a prepared draft.

        Raises:
            EventNotFoundError: If the event does not exist.
            DuplicateSlugError: If another event already has the draft's slug.
        """
        ...
