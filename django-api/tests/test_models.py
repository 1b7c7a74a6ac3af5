"""Tests for the ORM schema.

Run with: pytest django-api/tests/test_models.py -v
"""

import pytest
from django.apps import apps

from bookings.models import Booking as BookingRecord
from events.models import Event as EventRecord


class TestColumnLimits:
    """Free-text columns carry no database length limit."""

    @pytest.mark.parametrize("name", ["image", "venue", "location", "audience", "organizer"])
    def test_event_free_text_columns_unbounded(self, name):
        assert EventRecord._meta.get_field(name).max_length is None

    def test_booking_email_unbounded(self):
        assert BookingRecord._meta.get_field("email").max_length is None

    def test_bookings_have_total_order(self):
        assert BookingRecord._meta.ordering == ["created_at", "id"]


class TestAppConfigs:
    """Primary keys come from the models, not from app-level defaults."""

    @pytest.mark.parametrize("label", ["events", "bookings"])
    def test_no_app_level_auto_field(self, label):
        config = apps.get_app_config(label)
        assert "default_auto_field" not in type(config).__dict__
        assert config.get_model(label[:-1].capitalize())._meta.pk.get_internal_type() == "UUIDField"
