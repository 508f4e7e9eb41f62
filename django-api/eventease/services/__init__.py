from eventease.services.event_service import (
    AttendanceSummary,
    EventService,
    parse_attendee_id,
    parse_event_id,
)
from eventease.services.session_service import UserSessionService

__all__ = [
    "AttendanceSummary",
    "EventService",
    "UserSessionService",
    "parse_attendee_id",
    "parse_event_id",
]
