from django.urls import path

from events.handlers import EventDetailView, EventListView, EventUpdateView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:slug>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/edit", EventUpdateView.as_view(), name="event-update"),
]
