"""Read and reset services over stored matches."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session, sessionmaker

from domain.errors import EntityNotFoundError
from domain.rankings import MatchRanking, build_match_ranking
from repositories.match_repository import SqlAlchemyMatchRepository
from services.game_logs import MatchRepositoryFactory


@dataclass(frozen=True)
class MatchSummary:
    id: str
    start_time: datetime
    end_time: datetime | None
    players: list[str]


def list_matches(
    session_factory: sessionmaker[Session],
    repository_factory: MatchRepositoryFactory = SqlAlchemyMatchRepository,
) -> list[MatchSummary]:
    """Return every stored match with the names of its players."""
    with session_factory() as session:
        matches = repository_factory(session).find_all()

    return [
        MatchSummary(
            id=match.id,
            start_time=match.start_time,
            end_time=match.end_time,
            players=[stats.player_name for stats in match.player_stats],
        )
        for match in matches
    ]


def get_match_ranking(
    session_factory: sessionmaker[Session],
    match_id: str,
    repository_factory: MatchRepositoryFactory = SqlAlchemyMatchRepository,
) -> MatchRanking:
    with session_factory() as session:
        match = repository_factory(session).find_by_id(match_id)

    if match is None:
        raise EntityNotFoundError("Match", match_id)
    return build_match_ranking(match)


def delete_all_matches(
    session_factory: sessionmaker[Session],
    repository_factory: MatchRepositoryFactory = SqlAlchemyMatchRepository,
) -> None:
    """Remove every stored match and its player stats."""
    with session_factory() as session:
        try:
            repository_factory(session).delete_all()
            session.commit()
        except Exception:
            session.rollback()
            raise


__all__ = ["MatchSummary", "delete_all_matches", "get_match_ranking", "list_matches"]
