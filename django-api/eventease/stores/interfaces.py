"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
A store never raises for a missing id; it returns None instead.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from eventease.domain import (
    AttendeeId,
    AttendeeInfo,
    Event,
    EventId,
    EventRegistration,
)


class EventStore(ABC):
    """Interface for the event catalog and registration/attendance records."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by date ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def list_upcoming_events(self, now: datetime | None = None) -> list[Event]:
        """Return events dated at or after ``now``, ordered by date ascending."""
        ...

    @abstractmethod
    def register_for_event(
        self, registration: EventRegistration
    ) -> EventRegistration | None:
        """Store a registration and return it with id and date assigned.

        Returns None, storing nothing, if the referenced event is unknown.
        """
        ...

    @abstractmethod
    def list_registrations(self, event_id: EventId) -> list[EventRegistration]:
        """Return registrations for an event in insertion order."""
        ...

    @abstractmethod
    def total_registered_attendees(self, event_id: EventId) -> int:
        """Return the number of people registered for an event."""
        ...

    @abstractmethod
    def add_attendee(self, attendee: AttendeeInfo) -> AttendeeInfo | None:
        """Store an attendee and return it with id and date assigned.

        Returns None, storing nothing, if the referenced event is unknown.
        """
        ...

    @abstractmethod
    def get_attendee(self, attendee_id: AttendeeId) -> AttendeeInfo | None:
        """Return an attendee by ID, or None if not found."""
        ...

    @abstractmethod
    def list_attendees(self, event_id: EventId) -> list[AttendeeInfo]:
        """Return attendees for an event, most recently registered first."""
        ...

    @abstractmethod
    def total_attendees_count(self, event_id: EventId) -> int:
        """Return the number of people across all attendee records of an event."""
        ...

    @abstractmethod
    def checked_in_count(self, event_id: EventId) -> int:
        """Return the number of people across checked-in attendee records."""
        ...

    @abstractmethod
    def check_in(self, attendee_id: AttendeeId) -> AttendeeInfo | None:
        """Mark an attendee as checked in, or return None if not found."""
        ...

    @abstractmethod
    def find_attendee_by_email(
        self, event_id: EventId, email: str
    ) -> AttendeeInfo | None:
        """Return the first attendee of an event with a case-insensitive email match."""
        ...
