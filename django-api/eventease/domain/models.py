"""Domain models representing in-memory state.

These are pure domain objects with no API input rules.
Field shape validation lives in the handlers (presentation layer).
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from django.utils import timezone

from eventease.domain.value_objects import AttendeeId, EventId, RegistrationId


def initials_for(name: str | None) -> str:
    """Return avatar initials for a display name, or "?" when there is none."""
    parts = (name or "").split()
    if len(parts) >= 2:
        return f"{parts[0][0]}{parts[-1][0]}".upper()
    return parts[0][0].upper() if parts else "?"


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    date: datetime
    location: str
    description: str


@dataclass(frozen=True)
class EventRegistration:
    """Domain representation of a registration (an intent to attend).

    ``id`` and ``registration_date`` are assigned by the store on insert.
    """

    event_id: EventId
    full_name: str
    email: str
    phone: str
    number_of_attendees: int = 1
    special_requests: str | None = None
    id: RegistrationId | None = None
    registration_date: datetime | None = None


@dataclass(frozen=True)
class AttendeeInfo:
    """Domain representation of a check-in trackable attendee."""

    event_id: EventId
    full_name: str
    email: str
    phone: str
    number_of_attendees: int = 1
    session_id: str = ""
    checked_in: bool = False
    check_in_time: datetime | None = None
    id: AttendeeId | None = None
    registration_date: datetime | None = None

    @property
    def initials(self) -> str:
        return initials_for(self.full_name)


@dataclass
class UserSession:
    """One browser's interaction history.

    Owned and mutated by a single UserSessionService.
    """

    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    user_name: str | None = None
    email: str | None = None
    started_at: datetime = field(default_factory=timezone.now)
    last_activity_at: datetime = field(default_factory=timezone.now)
    viewed_events: list[int] = field(default_factory=list)
    registered_events: list[int] = field(default_factory=list)
    page_views: int = 0

    def update_activity(self) -> None:
        self.last_activity_at = timezone.now()
        self.page_views += 1

    @property
    def duration(self) -> timedelta:
        return timezone.now() - self.started_at

    @property
    def initials(self) -> str:
        return initials_for(self.user_name)

    def is_registered_for_event(self, event_id: int) -> bool:
        return event_id in self.registered_events

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-safe mapping for Django's session framework."""
        return {
            "session_id": self.session_id,
            "user_name": self.user_name,
            "email": self.email,
            "started_at": self.started_at.isoformat(),
            "last_activity_at": self.last_activity_at.isoformat(),
            "viewed_events": list(self.viewed_events),
            "registered_events": list(self.registered_events),
            "page_views": self.page_views,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserSession":
        return cls(
            session_id=data["session_id"],
            user_name=data.get("user_name"),
            email=data.get("email"),
            started_at=datetime.fromisoformat(data["started_at"]),
            last_activity_at=datetime.fromisoformat(data["last_activity_at"]),
            viewed_events=list(data.get("viewed_events", [])),
            registered_events=list(data.get("registered_events", [])),
            page_views=data.get("page_views", 0),
        )
