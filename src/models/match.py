"""matches table model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base

if TYPE_CHECKING:
    from models.player_stats import PlayerStatsRecord


class MatchRecord(Base):
    """One completed match reconstructed from a game log."""

    __tablename__ = "matches"
    __table_args__ = (Index("idx_matches_start_time", "start_time"),)

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=False), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )

    player_stats: Mapped[list[PlayerStatsRecord]] = relationship(
        back_populates="match",
        cascade="all, delete-orphan",
        order_by="PlayerStatsRecord.id",
    )
