"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from dataclasses import dataclass

from eventease.domain import (
    AttendeeId,
    AttendeeInfo,
    Event,
    EventId,
    EventRegistration,
)
from eventease.domain.errors import (
    AttendeeNotFoundError,
    EventNotFoundError,
    EventReferenceNotFoundError,
    InvalidIdError,
)
from eventease.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceSummary:
    """Attendee records of one event with their head counts."""

    attendees: list[AttendeeInfo]
    total: int
    checked_in: int


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except ValueError as exc:
        raise InvalidIdError() from exc


def parse_attendee_id(attendee_id: str) -> AttendeeId:
    try:
        return AttendeeId.from_string(attendee_id)
    except ValueError as exc:
        raise InvalidIdError() from exc


class EventService:
    """Service for catalog, registration and attendance operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def list_upcoming_events(self) -> list[Event]:
        """Return events that have not started yet."""
        return self._store.list_upcoming_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        eid = parse_event_id(event_id)
        event = self._store.get_event(eid)
        if event is None:
            logger.warning("Event %s not found", eid.value)
            raise EventNotFoundError(eid.value)
        return event

    def register(self, registration: EventRegistration) -> EventRegistration:
        """Register for the event named by ``registration.event_id``.

        Raises:
            EventReferenceNotFoundError: If the event does not exist.
        """
        eid = registration.event_id
        stored = self._store.register_for_event(registration)
        if stored is None:
            logger.warning("Registration rejected: unknown event %s", eid.value)
            raise EventReferenceNotFoundError(eid.value)
        logger.info(
            "Registration %s stored for event %s (%d attendees)",
            stored.id.value,
            eid.value,
            stored.number_of_attendees,
        )
        return stored

    def get_registrations(
        self, event_id: str
    ) -> tuple[list[EventRegistration], int]:
        """Return registrations for an event and the people they cover.

        Raises:
            InvalidIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        event = self.get_event(event_id)
        return (
            self._store.list_registrations(event.id),
            self._store.total_registered_attendees(event.id),
        )

    def add_attendee(self, attendee: AttendeeInfo) -> AttendeeInfo:
        """Add an attendee record to the event named by ``attendee.event_id``.

        Raises:
            EventReferenceNotFoundError: If the event does not exist.
        """
        eid = attendee.event_id
        stored = self._store.add_attendee(attendee)
        if stored is None:
            logger.warning("Attendee rejected: unknown event %s", eid.value)
            raise EventReferenceNotFoundError(eid.value)
        logger.info("Attendee %s added to event %s", stored.id.value, eid.value)
        return stored

    def get_attendance(self, event_id: str) -> AttendanceSummary:
        """Return attendees of an event with total and checked-in counts.

        Raises:
            InvalidIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        event = self.get_event(event_id)
        return AttendanceSummary(
            attendees=self._store.list_attendees(event.id),
            total=self._store.total_attendees_count(event.id),
            checked_in=self._store.checked_in_count(event.id),
        )

    def check_in(self, attendee_id: str) -> AttendeeInfo:
        """Check an attendee in. Repeating the call re-stamps the time.

        Raises:
            InvalidIdError: If the attendee_id is not a positive integer.
            AttendeeNotFoundError: If the attendee does not exist.
        """
        aid = parse_attendee_id(attendee_id)
        attendee = self._store.check_in(aid)
        if attendee is None:
            logger.warning("Check-in failed: attendee %s not found", aid.value)
            raise AttendeeNotFoundError(aid.value)
        logger.info("Attendee %s checked in", aid.value)
        return attendee

    def find_attendee_by_email(self, event_id: str, email: str) -> AttendeeInfo:
        """Return the attendee of an event registered under ``email``.

        Raises:
            InvalidIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
            AttendeeNotFoundError: If no attendee matches.
        """
        event = self.get_event(event_id)
        attendee = self._store.find_attendee_by_email(event.id, email)
        if attendee is None:
            raise AttendeeNotFoundError()
        return attendee
