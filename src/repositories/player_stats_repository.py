"""SQLAlchemy read model for cross-match player statistics."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from domain.rankings import GlobalPlayerStat
from models import PlayerStatsRecord


class SqlAlchemyPlayerStatsRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get_global_ranking(self) -> list[GlobalPlayerStat]:
        """Aggregate stored player stats by player name, most total kills first."""
        total_kills = func.coalesce(func.sum(PlayerStatsRecord.kills), 0).label("total_kills")
        statement = (
            select(
                PlayerStatsRecord.player_name,
                total_kills,
                func.coalesce(func.sum(PlayerStatsRecord.deaths), 0).label("total_deaths"),
                func.coalesce(func.max(PlayerStatsRecord.best_streak), 0).label("best_streak"),
                func.count(PlayerStatsRecord.id).label("matches_played"),
            )
            .group_by(PlayerStatsRecord.player_name)
            .order_by(total_kills.desc(), PlayerStatsRecord.player_name)
        )

        return [
            GlobalPlayerStat(
                player_name=row.player_name,
                total_kills=int(row.total_kills),
                total_deaths=int(row.total_deaths),
                best_streak=int(row.best_streak),
                matches_played=int(row.matches_played),
            )
            for row in self.session.execute(statement)
        ]


__all__ = ["SqlAlchemyPlayerStatsRepository"]
