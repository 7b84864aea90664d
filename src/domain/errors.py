"""Domain errors raised while reconstructing matches from game logs."""

from __future__ import annotations

from domain.events import EventKind


class LogParseError(ValueError):
    """One log line could not be parsed or applied to the current match state."""


class InvalidDateFormatError(LogParseError):
    def __init__(self) -> None:
        super().__init__("Invalid date format")


class UnknownEventTypeError(LogParseError):
    def __init__(self) -> None:
        super().__init__("Unknown event type")


class MatchNotStartedError(LogParseError):
    def __init__(self, event_kind: EventKind) -> None:
        self.event_kind = event_kind
        super().__init__(f"Match not started before processing event '{event_kind.value}'")


class MatchAlreadyStartedError(LogParseError):
    def __init__(self, event_kind: EventKind) -> None:
        self.event_kind = event_kind
        super().__init__(f"Match already started before processing event '{event_kind.value}'")


class MatchAlreadyEndedError(LogParseError):
    def __init__(self) -> None:
        super().__init__("Match has already ended")


class MatchIdMismatchError(LogParseError):
    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Match ID mismatch: {expected} !== {actual}")


class EntityNotFoundError(LookupError):
    """A requested entity does not exist in storage."""

    def __init__(self, entity_name: str, entity_id: str) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} with ID {entity_id} not found")


class EntityAlreadyExistsError(ValueError):
    """An entity with the same identity is already stored."""

    def __init__(self, entity_name: str, entity_id: str | None = None) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        if entity_id is None:
            super().__init__(f"{entity_name} already exists")
        else:
            super().__init__(f"{entity_name} with id {entity_id} already exists")


__all__ = [
    "EntityAlreadyExistsError",
    "EntityNotFoundError",
    "InvalidDateFormatError",
    "LogParseError",
    "MatchAlreadyEndedError",
    "MatchAlreadyStartedError",
    "MatchIdMismatchError",
    "MatchNotStartedError",
    "UnknownEventTypeError",
]
