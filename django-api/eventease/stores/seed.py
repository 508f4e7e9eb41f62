"""Mock catalog loaded into the in-memory store at startup."""

from datetime import datetime, timezone

from eventease.domain import Event, EventId

SEED_EVENTS: tuple[Event, ...] = (
    Event(
        id=EventId(1),
        name="Tech Conference 2025",
        date=datetime(2025, 12, 15, 9, 0, tzinfo=timezone.utc),
        location="Seattle Convention Center, WA",
        description=(
            "Join us for the biggest tech conference of the year featuring industry "
            "leaders and innovative technologies. Explore cutting-edge developments "
            "in AI, cloud computing, and software engineering."
        ),
    ),
    Event(
        id=EventId(2),
        name="Community Picnic",
        date=datetime(2025, 11, 25, 12, 0, tzinfo=timezone.utc),
        location="Central Park, New York",
        description=(
            "A fun family-friendly gathering with food, games, and entertainment "
            "for all ages. Live music and kids' activities included."
        ),
    ),
    Event(
        id=EventId(3),
        name="Charity Gala Evening",
        date=datetime(2025, 12, 1, 18, 30, tzinfo=timezone.utc),
        location="Grand Ballroom, Chicago",
        description=(
            "An elegant evening to support local charities with dinner, live music, "
            "and auctions. All proceeds go to education and healthcare initiatives."
        ),
    ),
    Event(
        id=EventId(4),
        name="Developer Workshop",
        date=datetime(2025, 11, 20, 14, 0, tzinfo=timezone.utc),
        location="Tech Hub, San Francisco",
        description=(
            "Hands-on workshop covering modern web development. Build real-world "
            "projects and enhance your skills. Suitable for intermediate to "
            "advanced developers."
        ),
    ),
    Event(
        id=EventId(5),
        name="Music Festival 2025",
        date=datetime(2025, 12, 10, 16, 0, tzinfo=timezone.utc),
        location="Austin Music Arena, TX",
        description=(
            "Experience live performances from top artists across multiple genres. "
            "Three stages, food trucks, and an unforgettable atmosphere."
        ),
    ),
)
