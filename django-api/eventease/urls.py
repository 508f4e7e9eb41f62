from django.urls import path

from eventease.handlers import (
    AttendeeListView,
    AttendeeLookupView,
    CheckInView,
    EventDetailView,
    EventListView,
    PageViewView,
    RegistrationListView,
    SessionUserView,
    SessionView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/registrations",
        RegistrationListView.as_view(),
        name="registration-list",
    ),
    path(
        "events/<str:event_id>/attendees",
        AttendeeListView.as_view(),
        name="attendee-list",
    ),
    path(
        "events/<str:event_id>/attendees/lookup",
        AttendeeLookupView.as_view(),
        name="attendee-lookup",
    ),
    path(
        "attendees/<str:attendee_id>/check-in",
        CheckInView.as_view(),
        name="attendee-check-in",
    ),
    path("session", SessionView.as_view(), name="session"),
    path("session/user", SessionUserView.as_view(), name="session-user"),
    path("session/page-views", PageViewView.as_view(), name="session-page-views"),
]
