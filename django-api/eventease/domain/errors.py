"""Domain error codes for the eventease module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    REFERENCE_NOT_FOUND = "REFERENCE_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    ATTENDEE_NOT_FOUND = "ATTENDEE_NOT_FOUND"
    INVALID_ID = "INVALID_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventReferenceNotFoundError(DomainError):
    """Raised when a registration or attendee names an unknown event."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.REFERENCE_NOT_FOUND,
            message="Referenced event does not exist",
        )
        self.event_id = event_id


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class AttendeeNotFoundError(DomainError):
    """Raised when an attendee lookup or check-in misses."""

    def __init__(self, attendee_id: int | None = None) -> None:
        super().__init__(
            code=ErrorCode.ATTENDEE_NOT_FOUND,
            message="Attendee not found",
        )
        self.attendee_id = attendee_id


class InvalidIdError(DomainError):
    """Raised when a path identifier is malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message="Invalid identifier format",
        )
