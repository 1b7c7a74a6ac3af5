"""Serializers for transforming requests into drafts and domain models into responses.

Input serializers check shape only. Trimming, length limits and the other
field rules belong to events/services/event_preparation.py.
"""

from rest_framework import serializers

from events.domain import EventDraft


def _text() -> serializers.CharField:
    return serializers.CharField(allow_blank=True, trim_whitespace=False)


class EventInputSerializer(serializers.Serializer):
    """Request body for creating or patching an Event."""

    title = _text()
    description = _text()
    overview = _text()
    image = _text()
    venue = _text()
    location = _text()
    date = _text()
    time = _text()
    mode = _text()
    audience = _text()
    agenda = serializers.ListField(child=serializers.CharField(), allow_empty=True)
    organizer = _text()
    tags = serializers.ListField(child=serializers.CharField(), allow_empty=True)

    def to_draft(self) -> EventDraft:
        data = dict(self.validated_data)
        data["agenda"] = tuple(data["agenda"])
        data["tags"] = tuple(data["tags"])
        return EventDraft(**data)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    slug = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    overview = serializers.CharField()
    image = serializers.CharField()
    venue = serializers.CharField()
    location = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    mode = serializers.CharField()
    audience = serializers.CharField()
    agenda = serializers.ListField(child=serializers.CharField())
    organizer = serializers.CharField()
    tags = serializers.ListField(child=serializers.CharField())
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()
