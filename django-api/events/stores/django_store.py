"""Django ORM implementation of the EventStore."""

import logging

from django.db import DatabaseError, IntegrityError, transaction

from core.errors import StorageFailureError
from events import models
from events.domain import Event, EventDraft, EventId, EventSummary
from events.domain.errors import DuplicateSlugError, EventNotFoundError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

WRITABLE_FIELDS = (
    "title",
    "slug",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "agenda",
    "organizer",
    "tags",
)


def to_domain(record: models.Event) -> Event:
    return Event(
        id=EventId(value=record.id),
        slug=record.slug,
        title=record.title,
        description=record.description,
        overview=record.overview,
        image=record.image,
        venue=record.venue,
        location=record.location,
        date=record.date,
        time=record.time,
        mode=record.mode,
        audience=record.audience,
        agenda=tuple(record.agenda),
        organizer=record.organizer,
        tags=tuple(record.tags),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _apply_draft(record: models.Event, draft: EventDraft) -> None:
    for name in WRITABLE_FIELDS:
        value = getattr(draft, name)
        if name in ("agenda", "tags"):
            value = list(value)
        setattr(record, name, value)


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        try:
            return [to_domain(record) for record in models.Event.objects.all()]
        except DatabaseError as exc:
            logger.error("Listing events failed: %s", exc)
            raise StorageFailureError("list_events") from exc

    def get_event(self, event_id: EventId) -> Event | None:
        return self._get(id=event_id.value)

    def get_event_by_slug(self, slug: str) -> Event | None:
        return self._get(slug=slug)

    def get_event_summary(self, event_id: EventId) -> EventSummary | None:
        try:
            row = (
                models.Event.objects.filter(id=event_id.value)
                .values("title", "date", "venue")
                .first()
            )
        except DatabaseError as exc:
            logger.error("Loading event summary failed: %s", exc)
            raise StorageFailureError("get_event_summary") from exc
        if row is None:
            return None
        return EventSummary(id=event_id, **row)

    def event_exists(self, event_id: EventId) -> bool:
        try:
            return models.Event.objects.filter(id=event_id.value).exists()
        except DatabaseError as exc:
            logger.error("Event existence check failed: %s", exc)
            raise StorageFailureError("event_exists") from exc

    def insert_event(self, draft: EventDraft) -> Event:
        record = models.Event()
        _apply_draft(record, draft)
        self._save(record, draft.slug, "insert_event")
        logger.info("Event created", extra={"event_id": record.id, "slug": record.slug})
        return to_domain(record)

    def update_event(self, event_id: EventId, draft: EventDraft) -> Event:
        try:
            record = models.Event.objects.get(id=event_id.value)
        except models.Event.DoesNotExist:
            raise EventNotFoundError(str(event_id))
        except DatabaseError as exc:
            logger.error("Loading event for update failed: %s", exc)
            raise StorageFailureError("update_event") from exc
        _apply_draft(record, draft)
        self._save(record, draft.slug, "update_event")
        logger.info("Event updated", extra={"event_id": record.id, "slug": record.slug})
        return to_domain(record)

    def _get(self, **lookup) -> Event | None:
        try:
            record = models.Event.objects.filter(**lookup).first()
        except DatabaseError as exc:
            logger.error("Loading event failed: %s", exc)
            raise StorageFailureError("get_event") from exc
        return to_domain(record) if record is not None else None

    @staticmethod
    def _save(record: models.Event, slug: str, operation: str) -> None:
        try:
            with transaction.atomic():
                record.save()
        except IntegrityError as exc:
            logger.info("Slug conflict on %s", operation, extra={"slug": slug})
            raise DuplicateSlugError(slug) from exc
        except DatabaseError as exc:
            logger.error("Event write failed: %s", exc, extra={"operation": operation})
            raise StorageFailureError(operation) from exc
