from events.domain.models import Event, EventDraft, EventSummary
from events.domain.value_objects import EventDate, EventId, EventMode, EventTime, Slug

__all__ = [
    "Event",
    "EventDraft",
    "EventSummary",
    "EventId",
    "EventMode",
    "EventDate",
    "EventTime",
    "Slug",
]
