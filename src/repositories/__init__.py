"""Database repository helpers."""

from repositories.match_repository import SqlAlchemyMatchRepository, ensure_schema
from repositories.player_stats_repository import SqlAlchemyPlayerStatsRepository
from repositories.protocol import MatchRepository, PlayerStatsRepository

__all__ = [
    "MatchRepository",
    "PlayerStatsRepository",
    "SqlAlchemyMatchRepository",
    "SqlAlchemyPlayerStatsRepository",
    "ensure_schema",
]
