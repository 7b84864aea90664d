"""Sorted ranking projections for one match and across all stored matches."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from domain.kda import calculate_kda
from domain.match import Match


@dataclass(frozen=True)
class PlayerRanking:
    position: int
    player_name: str
    kills: int
    deaths: int
    kda: float


@dataclass(frozen=True)
class MatchRanking:
    match_id: str
    ranking: list[PlayerRanking]


@dataclass(frozen=True)
class GlobalPlayerStat:
    """Totals for one player name aggregated over every stored match."""

    player_name: str
    total_kills: int
    total_deaths: int
    best_streak: int
    matches_played: int

    @property
    def overall_kda(self) -> float:
        return calculate_kda(self.total_kills, self.total_deaths)


@dataclass(frozen=True)
class GlobalPlayerRanking:
    position: int
    player_name: str
    total_kills: int
    total_deaths: int
    overall_kda: float
    best_streak: int
    matches_played: int


def build_match_ranking(match: Match) -> MatchRanking:
    """Rank match players by kills (desc), breaking ties by deaths (asc)."""
    ordered = sorted(match.player_stats, key=lambda stats: (-stats.kills, stats.deaths))
    ranking = [
        PlayerRanking(
            position=position,
            player_name=stats.player_name,
            kills=stats.kills,
            deaths=stats.deaths,
            kda=stats.kda,
        )
        for position, stats in enumerate(ordered, start=1)
    ]
    return MatchRanking(match_id=match.id, ranking=ranking)


def build_global_ranking(stats: Iterable[GlobalPlayerStat]) -> list[GlobalPlayerRanking]:
    """Rank players by overall KDA (desc), breaking ties by total kills (desc)."""
    ordered = sorted(stats, key=lambda item: (-item.overall_kda, -item.total_kills))
    return [
        GlobalPlayerRanking(
            position=position,
            player_name=item.player_name,
            total_kills=item.total_kills,
            total_deaths=item.total_deaths,
            overall_kda=item.overall_kda,
            best_streak=item.best_streak,
            matches_played=item.matches_played,
        )
        for position, item in enumerate(ordered, start=1)
    ]


__all__ = [
    "GlobalPlayerRanking",
    "GlobalPlayerStat",
    "MatchRanking",
    "PlayerRanking",
    "build_global_ranking",
    "build_match_ranking",
]
