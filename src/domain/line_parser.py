"""Parse one raw log line into a typed game event."""

from __future__ import annotations

import re
from datetime import datetime

from domain.errors import InvalidDateFormatError
from domain.events import (
    GameEvent,
    KillEvent,
    MatchEndEvent,
    MatchStartEvent,
    UnknownEvent,
    WorldKillEvent,
)

WORLD_ACTOR = "<WORLD>"

_DATE_PATTERN = re.compile(r"^(\d{2})/(\d{2})/(\d{4}) (\d{2}):(\d{2}):(\d{2}) - (.+)$", re.ASCII)
_MATCH_START_PATTERN = re.compile(r"^New match (.+?) has started$")
_MATCH_END_PATTERN = re.compile(r"^Match (.+?) has ended$")
_KILL_PATTERN = re.compile(r"^(.+?) killed (.+?) using (.+)$")
_WORLD_KILL_PATTERN = re.compile(r"^<WORLD> killed (.+?) by (.+)$")


def parse_log_line(line: str) -> GameEvent:
    """Classify one trimmed, non-empty log line.

    Raises ``InvalidDateFormatError`` when the ``DD/MM/YYYY HH:MM:SS - `` prefix
    is missing or names an impossible calendar date. A valid prefix followed by
    an unrecognised message yields an ``UnknownEvent``.
    """
    date_match = _DATE_PATTERN.match(line)
    if date_match is None:
        raise InvalidDateFormatError()

    day, month, year, hour, minute, second, message = date_match.groups()
    try:
        time = datetime(int(year), int(month), int(day), int(hour), int(minute), int(second))
    except ValueError as exc:
        raise InvalidDateFormatError() from exc

    return _parse_message(message, time)


def _parse_message(message: str, time: datetime) -> GameEvent:
    match = _MATCH_START_PATTERN.match(message)
    if match is not None:
        return MatchStartEvent(match_id=match.group(1), time=time)

    match = _MATCH_END_PATTERN.match(message)
    if match is not None:
        return MatchEndEvent(match_id=match.group(1), time=time)

    # World kills share the "killed" verb; only the subject tells them apart.
    match = _KILL_PATTERN.match(message)
    if match is not None and match.group(1) != WORLD_ACTOR:
        killer, victim, weapon = match.groups()
        return KillEvent(killer=killer, victim=victim, weapon=weapon, time=time)

    match = _WORLD_KILL_PATTERN.match(message)
    if match is not None:
        victim, cause = match.groups()
        return WorldKillEvent(victim=victim, cause=cause, time=time)

    return UnknownEvent(time=time)


__all__ = ["WORLD_ACTOR", "parse_log_line"]
