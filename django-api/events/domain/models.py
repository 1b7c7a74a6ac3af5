"""Domain models representing candidate and persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, fields
from datetime import datetime

from events.domain.value_objects import EventId


@dataclass(frozen=True)
class EventDraft:
    """Candidate Event, before or after preparation for persistence."""

    title: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: tuple[str, ...]
    organizer: str
    tags: tuple[str, ...]
    slug: str = ""

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(field.name for field in fields(cls))


@dataclass(frozen=True)
class Event:
    """Domain representation of a persisted Event."""

    id: EventId
    slug: str
    title: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: tuple[str, ...]
    organizer: str
    tags: tuple[str, ...]
    created_at: datetime
    updated_at: datetime

    def to_draft(self) -> EventDraft:
        return EventDraft(
            title=self.title,
            description=self.description,
            overview=self.overview,
            image=self.image,
            venue=self.venue,
            location=self.location,
            date=self.date,
            time=self.time,
            mode=self.mode,
            audience=self.audience,
            agenda=self.agenda,
            organizer=self.organizer,
            tags=self.tags,
            slug=self.slug,
        )


@dataclass(frozen=True)
class EventSummary:
    """Display projection of an Event carried alongside its bookings."""

    id: EventId
    title: str
    date: str
    venue: str
