"""Domain errors for the events module."""

from core.errors import DomainError, ErrorCode


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidDateFormatError(DomainError):
    """Raised when an event date cannot be parsed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE_FORMAT,
            message="Invalid date format. Please use a valid date.",
        )
        self.field = "date"


class InvalidTimeFormatError(DomainError):
    """Raised when an event time cannot be parsed or is out of range."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME_FORMAT,
            message="Invalid time format. Please use HH:MM or HH:MM AM/PM format.",
        )
        self.field = "time"


class EmptyRequiredListError(DomainError):
    """Raised when agenda or tags is empty."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_REQUIRED_LIST,
            message=f"{field.capitalize()} must contain at least one item",
        )
        self.field = field


class DuplicateSlugError(DomainError):
    """Raised when storage rejects an event whose slug is already taken."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SLUG,
            message="An event with this title already exists",
        )
        self.slug = slug
