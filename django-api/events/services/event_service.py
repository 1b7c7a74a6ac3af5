"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from core.errors import InvalidFieldError
from events.domain import EventId
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.domain.models import Event, EventDraft
from events.services.event_preparation import prepare_event
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

LIST_FIELDS = ("agenda", "tags")


def parse_event_id(event_id: str) -> EventId:
    """Raises InvalidEventIdError if event_id is not a valid UUID."""
    try:
        return EventId.from_string(event_id)
    except (ValueError, TypeError, AttributeError):
        raise InvalidEventIdError()


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_event_by_slug(self, slug: str) -> Event:
        """Return an event by slug.

        Raises:
            EventNotFoundError: If no event has this slug.
        """
        event = self._store.get_event_by_slug(slug)
        if event is None:
            raise EventNotFoundError(slug)
        return event

    def create_event(self, draft: EventDraft) -> Event:
        """Prepare and persist a new event.

        Raises:
            DomainError: Any preparation failure, or DuplicateSlugError from the store.
        """
        prepared = prepare_event(draft, is_new=True)
        return self._store.insert_event(prepared)

    def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        """Apply a partial update, re-deriving only what the changes affect.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            InvalidFieldError: If changes names a field that cannot be written.
            EventNotFoundError: If the event does not exist.
            DomainError: Any preparation failure, or DuplicateSlugError from the store.
        """
        parsed_id = parse_event_id(event_id)
        unknown = set(changes) - (EventDraft.field_names() - {"slug"})
        if unknown:
            field = sorted(unknown)[0]
            raise InvalidFieldError(field, f"Field {field} cannot be updated")

        current = self._store.get_event(parsed_id)
        if current is None:
            raise EventNotFoundError(event_id)

        normalized = {
            name: tuple(value) if name in LIST_FIELDS else value
            for name, value in changes.items()
        }
        stored = current.to_draft()
        changed_fields = frozenset(
            name for name, value in normalized.items() if getattr(stored, name) != value
        )
        if not changed_fields:
            logger.debug("Update without changes", extra={"event_id": parsed_id})
            return current

        prepared = prepare_event(
            replace(stored, **normalized),
            is_new=False,
            changed_fields=changed_fields,
        )
        return self._store.update_event(parsed_id, prepared)
