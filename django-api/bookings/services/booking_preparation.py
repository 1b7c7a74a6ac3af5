"""Normalization and validation of bookings before they reach a store.

The only storage access is the event existence check, made through the
event store and only when the event reference is new or has changed.
"""

import logging
from collections.abc import Set
from dataclasses import replace

from bookings.domain import BookingDraft, Email
from bookings.domain.errors import InvalidEmailFormatError
from bookings.domain.value_objects import normalize_email
from events.domain.errors import EventNotFoundError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def prepare_booking(
    draft: BookingDraft,
    events: EventStore,
    *,
    is_new: bool,
    changed_fields: Set[str] = frozenset(),
) -> BookingDraft:
    """Return the draft as it must be stored.

    Raises:
        EventNotFoundError: The referenced event does not exist.
        InvalidEmailFormatError: The email is not a plausible address.
    """
    prepared = replace(draft, email=normalize_email(draft.email))

    if is_new or "event_id" in changed_fields:
        if not events.event_exists(prepared.event_id):
            logger.info("Booking rejected: unknown event", extra={"event_id": prepared.event_id})
            raise EventNotFoundError(str(prepared.event_id))

    if is_new or "email" in changed_fields:
        try:
            Email(value=prepared.email)
        except ValueError as exc:
            raise InvalidEmailFormatError() from exc

    return prepared
