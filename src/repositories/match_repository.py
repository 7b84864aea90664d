"""SQLAlchemy persistence for completed matches."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from domain.errors import EntityAlreadyExistsError
from domain.match import Match
from models import Base, MatchRecord, PlayerStatsRecord
from repositories.mappers import match_to_row, player_stats_to_row, record_to_match


def ensure_schema(engine: Engine) -> None:
    """Create match tables and indexes if they do not exist."""
    Base.metadata.create_all(bind=engine, checkfirst=True)


class SqlAlchemyMatchRepository:
    """Match storage bound to one session; callers own commit/rollback."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, match_id: str) -> Match | None:
        statement = (
            select(MatchRecord)
            .where(MatchRecord.id == match_id)
            .options(selectinload(MatchRecord.player_stats))
        )
        record = self.session.execute(statement).scalar_one_or_none()
        if record is None:
            return None
        return record_to_match(record)

    def find_all(self) -> list[Match]:
        statement = (
            select(MatchRecord)
            .options(selectinload(MatchRecord.player_stats))
            .order_by(MatchRecord.start_time, MatchRecord.id)
        )
        return [record_to_match(record) for record in self.session.execute(statement).scalars()]

    def create_batch(self, matches: Sequence[Match]) -> None:
        """Insert matches and their player stats; any known id fails the whole batch."""
        if not matches:
            return

        self._ensure_ids_are_new(matches)

        match_rows = [match_to_row(match) for match in matches]
        stats_rows = [
            player_stats_to_row(stats, match.id) for match in matches for stats in match.player_stats
        ]
        try:
            self.session.execute(insert(MatchRecord), match_rows)
            if stats_rows:
                self.session.execute(insert(PlayerStatsRecord), stats_rows)
        except IntegrityError as exc:
            # Another writer inserted after the precheck; the driver does not report which id.
            raise EntityAlreadyExistsError("Match") from exc

    def delete_all(self) -> None:
        self.session.execute(delete(PlayerStatsRecord))
        self.session.execute(delete(MatchRecord))

    def _ensure_ids_are_new(self, matches: Sequence[Match]) -> None:
        seen: set[str] = set()
        for match in matches:
            if match.id in seen:
                raise EntityAlreadyExistsError("Match", match.id)
            seen.add(match.id)

        existing_ids = set(
            self.session.execute(select(MatchRecord.id).where(MatchRecord.id.in_(seen))).scalars()
        )
        for match in matches:
            if match.id in existing_ids:
                raise EntityAlreadyExistsError("Match", match.id)


__all__ = ["SqlAlchemyMatchRepository", "ensure_schema"]
