"""Django signals for cache invalidation."""

import logging

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache import EVENT_LIST_KEY, event_detail_key
from events.models import Event

logger = logging.getLogger(__name__)


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    keys = {EVENT_LIST_KEY, event_detail_key(instance.slug)}
    loaded_slug = getattr(instance, "_loaded_slug", None)
    if loaded_slug is not None:
        keys.add(event_detail_key(loaded_slug))
    cache.delete_many(list(keys))
    logger.debug("Invalidated %d event cache keys", len(keys), extra={"slug": instance.slug})
