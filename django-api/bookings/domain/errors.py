"""Domain errors for the bookings module."""

from core.errors import DomainError, ErrorCode


class InvalidEmailFormatError(DomainError):
    """Raised when a booking email does not look like an address."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EMAIL_FORMAT,
            message="Please provide a valid email address",
        )
        self.field = "email"


class DuplicateBookingError(DomainError):
    """Raised when the event already has a booking for this email."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_BOOKING,
            message="This email has already booked the event",
        )
        self.event_id = event_id


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class InvalidBookingIdError(DomainError):
    """Raised when a booking ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_ID,
            message="Invalid booking ID format",
        )
