"""player_stats table model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    JSON,
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.match import MatchRecord


class PlayerStatsRecord(Base):
    """Per-player combat counters for one stored match."""

    __tablename__ = "player_stats"
    __table_args__ = (
        UniqueConstraint("match_id", "player_name", name="uq_player_stats_match_player"),
        CheckConstraint("kills >= 0", name="ck_player_stats_kills"),
        CheckConstraint("deaths >= 0", name="ck_player_stats_deaths"),
        CheckConstraint("best_streak >= 0", name="ck_player_stats_best_streak"),
        Index("idx_player_stats_player_name", "player_name"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    match_id: Mapped[str] = mapped_column(
        ForeignKey("matches.id", ondelete="CASCADE"),
        nullable=False,
    )
    player_name: Mapped[str] = mapped_column(String(128), nullable=False)
    kills: Mapped[int] = mapped_column(Integer, nullable=False)
    deaths: Mapped[int] = mapped_column(Integer, nullable=False)
    best_streak: Mapped[int] = mapped_column(Integer, nullable=False)
    weapon_stats: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    match: Mapped[MatchRecord] = relationship(back_populates="player_stats")
