from django.urls import path

from eventhub.handlers import (
    BookingCreateView,
    EventBookingListView,
    EventDetailView,
    EventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:slug>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:slug>/bookings",
        EventBookingListView.as_view(),
        name="event-booking-list",
    ),
    path("bookings", BookingCreateView.as_view(), name="booking-create"),
]
