"""Cross-match player ranking service."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.orm import Session, sessionmaker

from domain.rankings import GlobalPlayerRanking, build_global_ranking
from repositories.player_stats_repository import SqlAlchemyPlayerStatsRepository
from repositories.protocol import PlayerStatsRepository


def get_global_ranking(
    session_factory: sessionmaker[Session],
    repository_factory: Callable[[Session], PlayerStatsRepository] = SqlAlchemyPlayerStatsRepository,
) -> list[GlobalPlayerRanking]:
    with session_factory() as session:
        stats = repository_factory(session).get_global_ranking()
    return build_global_ranking(stats)


__all__ = ["get_global_ranking"]
