"""In-memory implementation of the EventStore.

Holds the event catalog plus registration and attendee records for the
lifetime of the process. Nothing survives a restart.
"""

import dataclasses
import logging
import threading
from collections.abc import Callable, Iterable
from datetime import datetime

from django.utils import timezone

from eventease.domain import (
    AttendeeId,
    AttendeeInfo,
    Event,
    EventId,
    EventRegistration,
    RegistrationId,
)
from eventease.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class InMemoryEventStore(EventStore):
    """List-backed event store shared by every caller in the process."""

    def __init__(
        self,
        events: Iterable[Event] = (),
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._seed = tuple(events)
        self._clock = clock
        self._lock = threading.Lock()
        self.reset()

    def reset(self) -> None:
        """Restore the seed catalog and drop all runtime records and counters."""
        with self._lock:
            self._events: list[Event] = list(self._seed)
            self._registrations: list[EventRegistration] = []
            self._attendees: list[AttendeeInfo] = []
            self._next_registration_id = 1
            self._next_attendee_id = 1
        logger.debug("Store reset with %d seed events", len(self._seed))

    # Events

    def list_events(self) -> list[Event]:
        return sorted(self._events, key=lambda e: e.date)

    def get_event(self, event_id: EventId) -> Event | None:
        return next((e for e in self._events if e.id == event_id), None)

    def event_exists(self, event_id: EventId) -> bool:
        return any(e.id == event_id for e in self._events)

    def list_upcoming_events(self, now: datetime | None = None) -> list[Event]:
        now = now or self._clock()
        return sorted((e for e in self._events if e.date >= now), key=lambda e: e.date)

    # Registrations

    def register_for_event(
        self, registration: EventRegistration
    ) -> EventRegistration | None:
        if not self.event_exists(registration.event_id):
            return None

        with self._lock:
            stored = dataclasses.replace(
                registration,
                id=RegistrationId(self._next_registration_id),
                registration_date=self._clock(),
            )
            self._next_registration_id += 1
            self._registrations.append(stored)
        return stored

    def list_registrations(self, event_id: EventId) -> list[EventRegistration]:
        return [r for r in self._registrations if r.event_id == event_id]

    def total_registered_attendees(self, event_id: EventId) -> int:
        return sum(r.number_of_attendees for r in self.list_registrations(event_id))

    # Attendance

    def add_attendee(self, attendee: AttendeeInfo) -> AttendeeInfo | None:
        if not self.event_exists(attendee.event_id):
            return None

        with self._lock:
            stored = dataclasses.replace(
                attendee,
                id=AttendeeId(self._next_attendee_id),
                registration_date=self._clock(),
            )
            self._next_attendee_id += 1
            self._attendees.append(stored)
        return stored

    def get_attendee(self, attendee_id: AttendeeId) -> AttendeeInfo | None:
        return next((a for a in self._attendees if a.id == attendee_id), None)

    def list_attendees(self, event_id: EventId) -> list[AttendeeInfo]:
        return sorted(
            (a for a in self._attendees if a.event_id == event_id),
            key=lambda a: (a.registration_date, a.id),
            reverse=True,
        )

    def total_attendees_count(self, event_id: EventId) -> int:
        return sum(
            a.number_of_attendees for a in self._attendees if a.event_id == event_id
        )

    def checked_in_count(self, event_id: EventId) -> int:
        return sum(
            a.number_of_attendees
            for a in self._attendees
            if a.event_id == event_id and a.checked_in
        )

    def check_in(self, attendee_id: AttendeeId) -> AttendeeInfo | None:
        with self._lock:
            for index, attendee in enumerate(self._attendees):
                if attendee.id == attendee_id:
                    updated = dataclasses.replace(
                        attendee, checked_in=True, check_in_time=self._clock()
                    )
                    self._attendees[index] = updated
                    return updated
        return None

    def find_attendee_by_email(
        self, event_id: EventId, email: str
    ) -> AttendeeInfo | None:
        wanted = email.casefold()
        return next(
            (
                a
                for a in self._attendees
                if a.event_id == event_id and a.email.casefold() == wanted
            ),
            None,
        )
