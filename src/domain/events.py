"""Typed game events produced by the log line parser."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar


class EventKind(str, Enum):
    """Closed set of recognised log event kinds."""

    MATCH_START = "MATCH_START"
    MATCH_END = "MATCH_END"
    KILL = "KILL"
    WORLD_KILL = "WORLD_KILL"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class MatchStartEvent:
    kind: ClassVar[EventKind] = EventKind.MATCH_START

    match_id: str
    time: datetime


@dataclass(frozen=True)
class MatchEndEvent:
    kind: ClassVar[EventKind] = EventKind.MATCH_END

    match_id: str
    time: datetime


@dataclass(frozen=True)
class KillEvent:
    kind: ClassVar[EventKind] = EventKind.KILL

    killer: str
    victim: str
    weapon: str
    time: datetime


@dataclass(frozen=True)
class WorldKillEvent:
    kind: ClassVar[EventKind] = EventKind.WORLD_KILL

    victim: str
    cause: str
    time: datetime


@dataclass(frozen=True)
class UnknownEvent:
    """Line with a valid date prefix whose message matched no known pattern."""

    kind: ClassVar[EventKind] = EventKind.UNKNOWN

    time: datetime


GameEvent = MatchStartEvent | MatchEndEvent | KillEvent | WorldKillEvent | UnknownEvent


__all__ = [
    "EventKind",
    "GameEvent",
    "KillEvent",
    "MatchEndEvent",
    "MatchStartEvent",
    "UnknownEvent",
    "WorldKillEvent",
]
