from functools import lru_cache

from django.conf import settings

from eventease.stores.interfaces import EventStore
from eventease.stores.memory_store import InMemoryEventStore
from eventease.stores.seed import SEED_EVENTS


@lru_cache(maxsize=1)
def get_event_store() -> InMemoryEventStore:
    """Return the process-wide store, seeded on first use."""
    seed = SEED_EVENTS if settings.EVENTEASE.get("SEED_EVENTS", True) else ()
    return InMemoryEventStore(events=seed)


__all__ = ["EventStore", "InMemoryEventStore", "SEED_EVENTS", "get_event_store"]
