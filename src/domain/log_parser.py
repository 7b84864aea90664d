"""Rebuild completed matches from a full game log text blob."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from domain.errors import (
    LogParseError,
    MatchAlreadyStartedError,
    MatchNotStartedError,
    UnknownEventTypeError,
)
from domain.events import (
    EventKind,
    GameEvent,
    KillEvent,
    MatchEndEvent,
    MatchStartEvent,
    WorldKillEvent,
)
from domain.line_parser import parse_log_line
from domain.match import Match

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchLogParseResult:
    """Completed matches in end order plus formatted per-line errors in line order."""

    matches: list[Match] = field(default_factory=list)
    parse_errors: list[str] = field(default_factory=list)


class MatchLogParser:
    """Stateful single-pass parser; use one instance per log blob.

    At most one match is active at a time. Events are applied to it as they
    arrive; a failing line is recorded as ``Line <n>: <message>`` and never
    rolls back state changed by earlier lines. A match still active when the
    input ends is dropped.
    """

    def __init__(self) -> None:
        self._matches: list[Match] = []
        self._current_match: Match | None = None
        self._parse_errors: list[str] = []
        self._handlers: dict[EventKind, Callable[[Any], None]] = {
            EventKind.MATCH_START: self._handle_match_start,
            EventKind.MATCH_END: self._handle_match_end,
            EventKind.KILL: self._handle_kill,
            EventKind.WORLD_KILL: self._handle_world_kill,
            EventKind.UNKNOWN: self._handle_unknown,
        }

    def execute(self, log_content: str) -> MatchLogParseResult:
        for line_number, raw_line in enumerate(log_content.split("\n"), start=1):
            line = raw_line.strip()
            if not line:
                continue

            try:
                self.process_event(parse_log_line(line))
            except LogParseError as exc:
                message = f"Line {line_number}: {exc}"
                logger.debug("Rejected log line: %s", message)
                self._parse_errors.append(message)

        if self._current_match is not None:
            logger.debug("Dropping unterminated match id=%s", self._current_match.id)

        logger.info(
            "Parsed game log: completed_matches=%d parse_errors=%d",
            len(self._matches),
            len(self._parse_errors),
        )
        return MatchLogParseResult(matches=self._matches, parse_errors=self._parse_errors)

    def process_event(self, event: GameEvent) -> None:
        """Apply one event to the parser state; raises ``LogParseError`` on rejection."""
        self._handlers[event.kind](event)

    def _require_current_match(self, event: GameEvent) -> Match:
        if self._current_match is None:
            raise MatchNotStartedError(event.kind)
        return self._current_match

    def _handle_match_start(self, event: MatchStartEvent) -> None:
        if self._current_match is not None:
            raise MatchAlreadyStartedError(event.kind)
        self._current_match = Match.create_new_match(event)

    def _handle_match_end(self, event: MatchEndEvent) -> None:
        match = self._require_current_match(event)
        match.end_match(event)
        self._matches.append(match)
        self._current_match = None

    def _handle_kill(self, event: KillEvent) -> None:
        self._require_current_match(event).add_kill_event(event)

    def _handle_world_kill(self, event: WorldKillEvent) -> None:
        self._require_current_match(event).add_world_kill_event(event)

    def _handle_unknown(self, event: GameEvent) -> None:
        raise UnknownEventTypeError()


def parse_match_logs(log_content: str) -> MatchLogParseResult:
    """Parse ``log_content`` with a fresh parser instance."""
    return MatchLogParser().execute(log_content)


__all__ = ["MatchLogParseResult", "MatchLogParser", "parse_match_logs"]
