"""Normalization and validation of events before they reach a store.

prepare_event is a pure function: it never touches storage, and either
returns a fully normalized draft or raises a DomainError. Slug uniqueness is
not checked here; the store's unique index is the guarantee.
"""

import logging
from collections.abc import Set
from dataclasses import replace

from core.errors import InvalidFieldError
from events.domain import EventDate, EventDraft, EventMode, EventTime, Slug
from events.domain.errors import (
    EmptyRequiredListError,
    InvalidDateFormatError,
    InvalidTimeFormatError,
)

logger = logging.getLogger(__name__)

MAX_LENGTHS = {
    "title": 200,
    "description": 2000,
    "overview": 500,
}

REQUIRED_TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "audience",
    "organizer",
)

REQUIRED_LIST_FIELDS = ("agenda", "tags")

_MODES = frozenset(mode.value for mode in EventMode)


def generate_slug(title: str) -> str:
    return Slug.from_title(title).value


def normalize_date(raw: str) -> str:
    try:
        return str(EventDate.parse(raw))
    except ValueError as exc:
        raise InvalidDateFormatError() from exc


def normalize_time(raw: str) -> str:
    try:
        return str(EventTime.parse(raw))
    except ValueError as exc:
        raise InvalidTimeFormatError() from exc


def _clean_text_fields(draft: EventDraft) -> EventDraft:
    cleaned = {name: getattr(draft, name).strip() for name in REQUIRED_TEXT_FIELDS}
    for name in REQUIRED_TEXT_FIELDS:
        if not cleaned[name]:
            raise InvalidFieldError(name, f"Event {name} is required")
    for name, limit in MAX_LENGTHS.items():
        if len(cleaned[name]) > limit:
            raise InvalidFieldError(name, f"{name.capitalize()} cannot exceed {limit} characters")

    mode = draft.mode.strip().lower()
    if mode not in _MODES:
        raise InvalidFieldError("mode", "Mode must be one of online, offline, hybrid")
    return replace(draft, mode=mode, **cleaned)


def prepare_event(
    draft: EventDraft,
    *,
    is_new: bool,
    changed_fields: Set[str] = frozenset(),
) -> EventDraft:
    """Return the draft as it must be stored.

    The slug, date and time are recomputed only for a new event or when the
    field they derive from is in ``changed_fields``; stored values are
    already canonical otherwise.

    Raises:
        InvalidFieldError: A required field is blank, too long, or mode is unknown.
        InvalidDateFormatError: The date cannot be parsed.
        InvalidTimeFormatError: The time cannot be parsed or is out of range.
        EmptyRequiredListError: Agenda or tags is empty.
    """
    prepared = _clean_text_fields(draft)

    if is_new or "title" in changed_fields:
        prepared = replace(prepared, slug=generate_slug(prepared.title))
        if not prepared.slug:
            # Accepted; the unique index still allows only one such event.
            logger.warning("Title %r yields an empty slug", prepared.title)

    if is_new or "date" in changed_fields:
        prepared = replace(prepared, date=normalize_date(prepared.date))

    if is_new or "time" in changed_fields:
        prepared = replace(prepared, time=normalize_time(prepared.time))

    for name in REQUIRED_LIST_FIELDS:
        if len(getattr(prepared, name)) == 0:
            raise EmptyRequiredListError(name)

    return prepared
