from bookings.domain.models import Booking, BookingDraft
from bookings.domain.value_objects import BookingId, Email

__all__ = [
    "Booking",
    "BookingDraft",
    "BookingId",
    "Email",
]
