"""Serializers for transforming domain models to API responses.

Input serializers carry the field rules the store relies on callers to
enforce: presence, email/phone shape, length and range bounds.
"""

from rest_framework import serializers

from eventease.domain import AttendeeInfo, EventId, EventRegistration

PHONE_PATTERN = r"^\+?[0-9 ()\-.]{7,20}$"


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    date = serializers.DateTimeField()
    location = serializers.CharField()
    description = serializers.CharField()


class RegistrationSerializer(serializers.Serializer):
    """Serializer for EventRegistration domain model."""

    id = serializers.IntegerField(source="id.value")
    event_id = serializers.IntegerField(source="event_id.value")
    full_name = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField()
    number_of_attendees = serializers.IntegerField()
    special_requests = serializers.CharField(allow_null=True)
    registration_date = serializers.DateTimeField()


class AttendeeSerializer(serializers.Serializer):
    """Serializer for AttendeeInfo domain model."""

    id = serializers.IntegerField(source="id.value")
    event_id = serializers.IntegerField(source="event_id.value")
    full_name = serializers.CharField()
    initials = serializers.CharField()
    email = serializers.EmailField()
    phone = serializers.CharField()
    number_of_attendees = serializers.IntegerField()
    session_id = serializers.CharField()
    checked_in = serializers.BooleanField()
    check_in_time = serializers.DateTimeField(allow_null=True)
    registration_date = serializers.DateTimeField()


class UserSessionSerializer(serializers.Serializer):
    """Serializer for UserSession domain model."""

    session_id = serializers.CharField()
    user_name = serializers.CharField(allow_null=True)
    email = serializers.CharField(allow_null=True)
    initials = serializers.CharField()
    started_at = serializers.DateTimeField()
    last_activity_at = serializers.DateTimeField()
    viewed_events = serializers.ListField(child=serializers.IntegerField())
    registered_events = serializers.ListField(child=serializers.IntegerField())
    page_views = serializers.IntegerField()


class ContactInputSerializer(serializers.Serializer):
    full_name = serializers.CharField(
        min_length=2,
        max_length=100,
        error_messages={
            "required": "Full name is required",
            "min_length": "Name must be between 2 and 100 characters",
            "max_length": "Name must be between 2 and 100 characters",
        },
    )
    email = serializers.EmailField(
        error_messages={
            "required": "Email is required",
            "invalid": "Invalid email address",
        }
    )
    phone = serializers.RegexField(
        PHONE_PATTERN,
        error_messages={
            "required": "Phone number is required",
            "invalid": "Invalid phone number",
        },
    )
    number_of_attendees = serializers.IntegerField(
        default=1,
        min_value=1,
        max_value=10,
        error_messages={
            "min_value": "Number of attendees must be between 1 and 10",
            "max_value": "Number of attendees must be between 1 and 10",
        },
    )


class RegistrationInputSerializer(ContactInputSerializer):
    """Validates a registration form submission."""

    special_requests = serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        max_length=500,
        error_messages={
            "max_length": "Special requests cannot exceed 500 characters",
        },
    )

    def to_registration(self, event_id: EventId) -> EventRegistration:
        data = self.validated_data
        return EventRegistration(
            event_id=event_id,
            full_name=data["full_name"],
            email=data["email"],
            phone=data["phone"],
            number_of_attendees=data["number_of_attendees"],
            special_requests=data.get("special_requests") or None,
        )


class AttendeeInputSerializer(ContactInputSerializer):
    """Validates an attendee sign-up."""

    def to_attendee(self, event_id: EventId, session_id: str) -> AttendeeInfo:
        data = self.validated_data
        return AttendeeInfo(
            event_id=event_id,
            full_name=data["full_name"],
            email=data["email"],
            phone=data["phone"],
            number_of_attendees=data["number_of_attendees"],
            session_id=session_id,
        )


class UserInfoInputSerializer(serializers.Serializer):
    user_name = serializers.CharField(max_length=100)
    email = serializers.EmailField()
