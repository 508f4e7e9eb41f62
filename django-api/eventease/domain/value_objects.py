"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


def _parse_positive_int(value: str) -> int:
    parsed = int(value)
    if parsed < 1:
        raise ValueError("Identifiers must be positive integers")
    return parsed


@dataclass(frozen=True, order=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_positive_int(value))


@dataclass(frozen=True, order=True)
class RegistrationId:
    """Unique identifier for an EventRegistration."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_positive_int(value))


@dataclass(frozen=True, order=True)
class AttendeeId:
    """Unique identifier for an AttendeeInfo record."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_positive_int(value))
