"""Binds a UserSessionService to the browser's Django session."""

from django.http import HttpRequest

from eventease.domain import UserSession
from eventease.services import UserSessionService

SESSION_KEY = "eventease.user_session"


def load_session_tracker(request: HttpRequest) -> UserSessionService:
    """Return the tracker for this browser, creating the session on first visit.

    The tracker writes its state back to ``request.session`` after every change.
    """
    data = request.session.get(SESSION_KEY)
    tracker = UserSessionService(UserSession.from_dict(data) if data else None)

    def persist(session: UserSession) -> None:
        request.session[SESSION_KEY] = session.to_dict()

    tracker.subscribe(persist)
    if data is None:
        persist(tracker.current_session)
    return tracker
