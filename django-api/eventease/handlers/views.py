"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from eventease.domain.errors import DomainError, ErrorCode
from eventease.handlers.serializers import (
    AttendeeInputSerializer,
    AttendeeSerializer,
    EventSerializer,
    RegistrationInputSerializer,
    RegistrationSerializer,
    UserInfoInputSerializer,
    UserSessionSerializer,
)
from eventease.handlers.session import load_session_tracker
from eventease.services import (
    EventService,
    UserSessionService,
    parse_event_id,
)
from eventease.stores import get_event_store

ERROR_STATUS = {
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ATTENDEE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.REFERENCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

TRUTHY = {"1", "true", "yes"}


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS[error.code],
    )


def validation_response(errors: dict) -> Response:
    return Response(
        {"code": "VALIDATION_ERROR", "message": "Invalid input", "errors": errors},
        status=status.HTTP_400_BAD_REQUEST,
    )


def session_payload(tracker: UserSessionService) -> dict:
    return {
        **UserSessionSerializer(tracker.current_session).data,
        "stats": tracker.session_stats(),
    }


class EventServiceMixin:
    @property
    def service(self) -> EventService:
        return EventService(get_event_store())


class EventListView(EventServiceMixin, APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        if request.query_params.get("upcoming", "").lower() in TRUTHY:
            events = self.service.list_upcoming_events()
        else:
            events = self.service.list_events()
        return Response({"results": EventSerializer(events, many=True).data})


class EventDetailView(EventServiceMixin, APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            event = self.service.get_event(event_id)
        except DomainError as exc:
            return error_response(exc)
        load_session_tracker(request).track_event_view(event.id.value)
        return Response(EventSerializer(event).data)


class RegistrationListView(EventServiceMixin, APIView):
    """Handler for GET/POST /api/events/{event_id}/registrations"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            registrations, total = self.service.get_registrations(event_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(
            {
                "results": RegistrationSerializer(registrations, many=True).data,
                "total_registered_attendees": total,
            }
        )

    def post(self, request: Request, event_id: str) -> Response:
        serializer = RegistrationInputSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_response(serializer.errors)
        try:
            eid = parse_event_id(event_id)
            registration = self.service.register(serializer.to_registration(eid))
        except DomainError as exc:
            return error_response(exc)
        load_session_tracker(request).register_for_event(eid.value)
        return Response(
            RegistrationSerializer(registration).data, status=status.HTTP_201_CREATED
        )


class AttendeeListView(EventServiceMixin, APIView):
    """Handler for GET/POST /api/events/{event_id}/attendees"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            summary = self.service.get_attendance(event_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(
            {
                "results": AttendeeSerializer(summary.attendees, many=True).data,
                "total_attendees": summary.total,
                "checked_in": summary.checked_in,
            }
        )

    def post(self, request: Request, event_id: str) -> Response:
        serializer = AttendeeInputSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_response(serializer.errors)
        tracker = load_session_tracker(request)
        try:
            eid = parse_event_id(event_id)
            attendee = self.service.add_attendee(
                serializer.to_attendee(eid, tracker.current_session.session_id)
            )
        except DomainError as exc:
            return error_response(exc)
        return Response(
            AttendeeSerializer(attendee).data, status=status.HTTP_201_CREATED
        )


class AttendeeLookupView(EventServiceMixin, APIView):
    """Handler for GET /api/events/{event_id}/attendees/lookup?email="""

    def get(self, request: Request, event_id: str) -> Response:
        email = request.query_params.get("email", "").strip()
        if not email:
            return validation_response({"email": ["Email is required"]})
        try:
            attendee = self.service.find_attendee_by_email(event_id, email)
        except DomainError as exc:
            return error_response(exc)
        return Response(AttendeeSerializer(attendee).data)


class CheckInView(EventServiceMixin, APIView):
    """Handler for POST /api/attendees/{attendee_id}/check-in"""

    def post(self, request: Request, attendee_id: str) -> Response:
        try:
            attendee = self.service.check_in(attendee_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(AttendeeSerializer(attendee).data)


class SessionView(APIView):
    """Handler for GET /api/session"""

    def get(self, request: Request) -> Response:
        return Response(session_payload(load_session_tracker(request)))


class SessionUserView(APIView):
    """Handler for PUT /api/session/user"""

    def put(self, request: Request) -> Response:
        serializer = UserInfoInputSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_response(serializer.errors)
        tracker = load_session_tracker(request)
        tracker.set_user_info(
            serializer.validated_data["user_name"], serializer.validated_data["email"]
        )
        return Response(session_payload(tracker))


class PageViewView(APIView):
    """Handler for POST /api/session/page-views"""

    def post(self, request: Request) -> Response:
        tracker = load_session_tracker(request)
        tracker.track_page_view()
        return Response(session_payload(tracker))
