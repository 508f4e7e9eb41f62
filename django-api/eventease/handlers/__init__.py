from eventease.handlers.views import (
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

__all__ = [
    "AttendeeListView",
    "AttendeeLookupView",
    "CheckInView",
    "EventDetailView",
    "EventListView",
    "PageViewView",
    "RegistrationListView",
    "SessionUserView",
    "SessionView",
]
