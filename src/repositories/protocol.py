"""Storage contracts consumed by the match statistics services."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from domain.match import Match
from domain.rankings import GlobalPlayerStat


@runtime_checkable
class MatchRepository(Protocol):
    """Persistence for completed matches and their player statistics."""

    def find_by_id(self, match_id: str) -> Match | None: ...

    def find_all(self) -> list[Match]: ...

    def create_batch(self, matches: Sequence[Match]) -> None: ...

    def delete_all(self) -> None: ...


@runtime_checkable
class PlayerStatsRepository(Protocol):
    """Read model aggregating player statistics across stored matches."""

    def get_global_ranking(self) -> list[GlobalPlayerStat]: ...


__all__ = ["MatchRepository", "PlayerStatsRepository"]
