"""Django ORM models (persistence layer)."""

import uuid

from django.db import models

from events.models import Event


class Booking(models.Model):
    """Persistence model for bookings.

    The event reference carries no database constraint and no cascade: it
    is checked on write by the booking preparation step and used for
    display joins only.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="bookings",
    )
    email = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "email"],
                name="unique_booking_per_event_email",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.email} - {self.event_id}"
