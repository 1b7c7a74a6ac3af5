from django.urls import path

from bookings.handlers import BookingDetailView, BookingListView, BookingStatusView

urlpatterns = [
    path("events/<str:event_id>/bookings", BookingListView.as_view(), name="booking-list"),
    path(
        "events/<str:event_id>/bookings/status",
        BookingStatusView.as_view(),
        name="booking-status",
    ),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
]
