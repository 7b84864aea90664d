"""ORM models."""

from models.base import Base
from models.match import MatchRecord
from models.player_stats import PlayerStatsRecord

__all__ = [
    "Base",
    "MatchRecord",
    "PlayerStatsRecord",
]
