from bookings.handlers.views import BookingDetailView, BookingListView, BookingStatusView

__all__ = ["BookingDetailView", "BookingListView", "BookingStatusView"]
