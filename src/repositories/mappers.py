"""Conversions between domain aggregates and table rows."""

from __future__ import annotations

from typing import Any

from domain.match import Match
from domain.player_stats import PlayerStats
from models import MatchRecord, PlayerStatsRecord


def match_to_row(match: Match) -> dict[str, Any]:
    return {
        "id": match.id,
        "start_time": match.start_time,
        "end_time": match.end_time,
    }


def player_stats_to_row(stats: PlayerStats, match_id: str) -> dict[str, Any]:
    return {
        "match_id": match_id,
        "player_name": stats.player_name,
        "kills": stats.kills,
        "deaths": stats.deaths,
        "best_streak": stats.best_streak,
        "weapon_stats": dict(stats.weapons_used),
    }


def record_to_player_stats(record: PlayerStatsRecord) -> PlayerStats:
    weapon_stats = record.weapon_stats or {}
    return PlayerStats(
        player_name=record.player_name,
        kills=record.kills,
        deaths=record.deaths,
        weapons_used={str(weapon): int(count) for weapon, count in weapon_stats.items()},
        best_streak=record.best_streak,
    )


def record_to_match(record: MatchRecord) -> Match:
    return Match(
        id=record.id,
        start_time=record.start_time,
        end_time=record.end_time,
        player_stats=[record_to_player_stats(stats) for stats in record.player_stats],
    )


__all__ = ["match_to_row", "player_stats_to_row", "record_to_match", "record_to_player_stats"]
