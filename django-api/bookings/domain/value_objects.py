"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from typing import Self
from uuid import UUID

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def normalize_email(raw: str) -> str:
    return raw.strip().lower()


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Email:
    """Trimmed, lowercased address with simplified syntax checking."""

    value: str

    def __post_init__(self) -> None:
        if EMAIL_PATTERN.fullmatch(self.value) is None:
            raise ValueError("Invalid email format")

    @classmethod
    def parse(cls, raw: str) -> Self:
        return cls(value=normalize_email(raw))

    def __str__(self) -> str:
        return self.value
