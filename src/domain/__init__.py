"""Game log parsing and match statistics domain."""

from domain.events import EventKind, GameEvent
from domain.log_parser import MatchLogParser, MatchLogParseResult, parse_match_logs
from domain.match import Match
from domain.player_stats import PlayerStats

__all__ = [
    "EventKind",
    "GameEvent",
    "Match",
    "MatchLogParseResult",
    "MatchLogParser",
    "PlayerStats",
    "parse_match_logs",
]
