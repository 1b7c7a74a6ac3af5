"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Self
from uuid import UUID

from django.utils.dateparse import parse_date, parse_datetime

# Word characters are ASCII only; whitespace is any Unicode space.
_NON_SLUG_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_SLUG_SEPARATORS = re.compile(r"[\s_-]+")
_ORDINAL_SUFFIX = re.compile(r"(?<=\d)(st|nd|rd|th)\b", re.IGNORECASE)
_CLOCK_TIME = re.compile(r"(?P<hours>\d{1,2}):(?P<minutes>\d{1,2})\s*(?P<period>am|pm)?", re.ASCII)

# Tried in order after the ISO forms.
DATE_INPUT_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
)


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


class EventMode(Enum):
    """How an event is attended."""

    ONLINE = "online"
    OFFLINE = "offline"
    HYBRID = "hybrid"


@dataclass(frozen=True)
class Slug:
    """URL-safe lowercase identifier derived from a title."""

    value: str

    @classmethod
    def from_title(cls, title: str) -> Self:
        text = title.lower().strip()
        text = _NON_SLUG_CHARS.sub("", text)
        text = _SLUG_SEPARATORS.sub("-", text)
        return cls(value=text.strip("-"))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EventDate:
    """Calendar day of an event, rendered as YYYY-MM-DD."""

    value: date

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Parse ISO dates and datetimes plus a few common written forms.

        Timezone-aware datetimes are converted to UTC before the day is taken.

        Raises:
            ValueError: If the input is not a recognizable calendar date.
        """
        text = raw.strip()
        if not text:
            raise ValueError("Date is empty")

        moment = parse_datetime(text)
        if moment is not None:
            if moment.tzinfo is not None:
                moment = moment.astimezone(timezone.utc)
            return cls(value=moment.date())

        day = parse_date(text)
        if day is not None:
            return cls(value=day)

        text = _ORDINAL_SUFFIX.sub("", text)
        for fmt in DATE_INPUT_FORMATS:
            try:
                return cls(value=datetime.strptime(text, fmt).date())
            except ValueError:
                continue
        raise ValueError(f"Unrecognized date: {raw!r}")

    def __str__(self) -> str:
        return self.value.isoformat()


@dataclass(frozen=True)
class EventTime:
    """Wall-clock start time in 24-hour form."""

    hours: int
    minutes: int

    def __post_init__(self) -> None:
        if not 0 <= self.hours <= 23:
            raise ValueError("Hours must be between 0 and 23")
        if not 0 <= self.minutes <= 59:
            raise ValueError("Minutes must be between 0 and 59")

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Parse ``HH:MM`` or ``HH:MM am|pm``.

        The 12-hour form requires an hour from 1 to 12, so ``0:30am`` is
        rejected while ``0:30`` is accepted.

        Raises:
            ValueError: If the input is malformed or out of range.
        """
        match = _CLOCK_TIME.fullmatch(raw.strip().lower())
        if match is None:
            raise ValueError(f"Unrecognized time: {raw!r}")

        hours = int(match["hours"])
        minutes = int(match["minutes"])
        period = match["period"]
        if period is not None:
            if not 1 <= hours <= 12:
                raise ValueError("Hours must be between 1 and 12 with am/pm")
            if period == "pm" and hours != 12:
                hours += 12
            elif period == "am" and hours == 12:
                hours = 0
        return cls(hours=hours, minutes=minutes)

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"
