"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from eventease.domain import Event, EventId
from eventease.stores import InMemoryEventStore, get_event_store


class FakeClock:
    """Manually advanced clock for deterministic timestamps."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def reset_event_store():
    get_event_store().reset()
    yield
    get_event_store().reset()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 11, 1, 8, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock: FakeClock) -> InMemoryEventStore:
    """Store seeded with one event (id=1) and a second event (id=2)."""
    return InMemoryEventStore(
        events=[
            Event(
                id=EventId(1),
                name="Launch Party",
                date=datetime(2025, 12, 1, 18, 0, tzinfo=timezone.utc),
                location="Rooftop",
                description="Celebrate the launch.",
            ),
            Event(
                id=EventId(2),
                name="Retro",
                date=datetime(2025, 10, 1, 10, 0, tzinfo=timezone.utc),
                location="Room 4",
                description="Look back on the quarter.",
            ),
        ],
        clock=clock,
    )
