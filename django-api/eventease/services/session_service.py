"""Per-browser session tracking.

One UserSessionService owns one UserSession. Every tracked interaction
marks activity and then notifies subscribers synchronously, in the order
they subscribed.
"""

import itertools
import logging
from collections.abc import Callable

from eventease.domain import UserSession

logger = logging.getLogger(__name__)

SessionListener = Callable[[UserSession], None]


class UserSessionService:
    """Tracks one user's views, registrations and activity."""

    def __init__(self, session: UserSession | None = None) -> None:
        self._session = session or UserSession()
        self._listeners: dict[int, SessionListener] = {}
        self._handles = itertools.count(1)

    @property
    def current_session(self) -> UserSession:
        return self._session

    def subscribe(self, listener: SessionListener) -> int:
        """Register a change listener and return a handle for unsubscribe()."""
        handle = next(self._handles)
        self._listeners[handle] = listener
        return handle

    def unsubscribe(self, handle: int) -> None:
        self._listeners.pop(handle, None)

    def set_user_info(self, user_name: str, email: str) -> None:
        self._session.user_name = user_name
        self._session.email = email
        self._mark_activity()

    def track_event_view(self, event_id: int) -> None:
        if event_id not in self._session.viewed_events:
            self._session.viewed_events.append(event_id)
        self._mark_activity()

    def register_for_event(self, event_id: int) -> None:
        """Record a registration in the session (bookkeeping only)."""
        if event_id not in self._session.registered_events:
            self._session.registered_events.append(event_id)
        self._mark_activity()

    def track_page_view(self) -> None:
        self._mark_activity()

    def has_viewed_event(self, event_id: int) -> bool:
        return event_id in self._session.viewed_events

    def is_registered_for_event(self, event_id: int) -> bool:
        return self._session.is_registered_for_event(event_id)

    def session_stats(self) -> str:
        minutes, seconds = divmod(int(self._session.duration.total_seconds()), 60)
        return (
            f"Session: {minutes}m {seconds}s"
            f" | Views: {self._session.page_views}"
            f" | Events Viewed: {len(self._session.viewed_events)}"
            f" | Registered: {len(self._session.registered_events)}"
        )

    def _mark_activity(self) -> None:
        self._session.update_activity()
        self._notify()

    def _notify(self) -> None:
        # Copy so listeners may unsubscribe while being notified.
        for handle, listener in list(self._listeners.items()):
            try:
                listener(self._session)
            except Exception:
                logger.exception(
                    "Session listener %s failed for session %s",
                    handle,
                    self._session.session_id,
                )
