from eventease.domain.models import (
    AttendeeInfo,
    Event,
    EventRegistration,
    UserSession,
    initials_for,
)
from eventease.domain.value_objects import AttendeeId, EventId, RegistrationId

__all__ = [
    "Event",
    "EventRegistration",
    "AttendeeInfo",
    "UserSession",
    "EventId",
    "RegistrationId",
    "AttendeeId",
    "initials_for",
]
