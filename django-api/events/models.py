"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/ and
services/event_preparation.py; rows are only written through the stores.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    class Mode(models.TextChoices):
        ONLINE = "online"
        OFFLINE = "offline"
        HYBRID = "hybrid"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    slug = models.CharField(max_length=255, unique=True)
    description = models.CharField(max_length=2000)
    overview = models.CharField(max_length=500)
    image = models.TextField()
    venue = models.TextField()
    location = models.TextField()
    date = models.CharField(max_length=10)
    time = models.CharField(max_length=5)
    mode = models.CharField(max_length=10, choices=Mode.choices)
    audience = models.TextField()
    agenda = models.JSONField(default=list)
    organizer = models.TextField()
    tags = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="events_created_at_idx"),
        ]

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        # Lets cache invalidation clear the key of a slug that is being replaced.
        instance._loaded_slug = instance.__dict__.get("slug")
        return instance

    def __str__(self) -> str:
        return self.title
