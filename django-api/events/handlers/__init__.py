from events.handlers.views import EventDetailView, EventListView, EventUpdateView

__all__ = ["EventDetailView", "EventListView", "EventUpdateView"]
