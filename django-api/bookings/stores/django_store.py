"""Django ORM implementation of the BookingStore."""

import logging
from collections.abc import Iterator

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import OuterRef, QuerySet, Subquery

from bookings import models
from bookings.domain import Booking, BookingDraft, BookingId
from bookings.domain.errors import BookingNotFoundError, DuplicateBookingError
from bookings.stores.interfaces import BookingStore
from core.errors import StorageFailureError
from events.domain import EventId, EventSummary
from events.models import Event as EventRecord

logger = logging.getLogger(__name__)


def to_domain(record: models.Booking, with_event: bool = False) -> Booking:
    summary = None
    if with_event and record.event_title is not None:
        summary = EventSummary(
            id=EventId(value=record.event_id),
            title=record.event_title,
            date=record.event_date,
            venue=record.event_venue,
        )
    return Booking(
        id=BookingId(value=record.id),
        event_id=EventId(value=record.event_id),
        email=record.email,
        created_at=record.created_at,
        updated_at=record.updated_at,
        event=summary,
    )


class BookingListing:
    """Restartable view over one event's bookings."""

    def __init__(self, queryset: QuerySet) -> None:
        self._queryset = queryset

    def __iter__(self) -> Iterator[Booking]:
        try:
            for record in self._queryset.all().iterator():
                yield to_domain(record, with_event=True)
        except DatabaseError as exc:
            logger.error("Listing bookings failed: %s", exc)
            raise StorageFailureError("list_bookings_for_event") from exc


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM."""

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        return self._first(id=booking_id.value)

    def find_booking(self, event_id: EventId, email: str) -> Booking | None:
        return self._first(event_id=event_id.value, email=email)

    def list_bookings_for_event(self, event_id: EventId) -> BookingListing:
        # Subqueries rather than a join: a weakly referenced event may be gone.
        event = EventRecord.objects.filter(id=OuterRef("event_id"))
        queryset = models.Booking.objects.filter(event_id=event_id.value).annotate(
            event_title=Subquery(event.values("title")[:1]),
            event_date=Subquery(event.values("date")[:1]),
            event_venue=Subquery(event.values("venue")[:1]),
        )
        return BookingListing(queryset)

    def insert_booking(self, draft: BookingDraft) -> Booking:
        record = models.Booking(event_id=draft.event_id.value, email=draft.email)
        self._save(record, "insert_booking")
        logger.info("Booking created", extra={"booking_id": record.id, "event_id": record.event_id})
        return to_domain(record)

    def update_booking(self, booking_id: BookingId, draft: BookingDraft) -> Booking:
        try:
            record = models.Booking.objects.get(id=booking_id.value)
        except models.Booking.DoesNotExist:
            raise BookingNotFoundError(str(booking_id))
        except DatabaseError as exc:
            logger.error("Loading booking for update failed: %s", exc)
            raise StorageFailureError("update_booking") from exc
        record.event_id = draft.event_id.value
        record.email = draft.email
        self._save(record, "update_booking")
        logger.info("Booking updated", extra={"booking_id": record.id, "event_id": record.event_id})
        return to_domain(record)

    def _first(self, **lookup) -> Booking | None:
        try:
            record = models.Booking.objects.filter(**lookup).first()
        except DatabaseError as exc:
            logger.error("Loading booking failed: %s", exc)
            raise StorageFailureError("find_booking") from exc
        return to_domain(record) if record is not None else None

    @staticmethod
    def _save(record: models.Booking, operation: str) -> None:
        try:
            with transaction.atomic():
                record.save()
        except IntegrityError as exc:
            logger.info("Booking conflict on %s", operation, extra={"event_id": record.event_id})
            raise DuplicateBookingError(str(record.event_id)) from exc
        except DatabaseError as exc:
            logger.error("Booking write failed: %s", exc, extra={"operation": operation})
            raise StorageFailureError(operation) from exc
