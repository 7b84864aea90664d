"""Per-player combat counters within a single match."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from domain.kda import calculate_kda


@dataclass
class PlayerStats:
    """Kills, deaths, weapon usage and best kill streak of one player in one match."""

    player_name: str
    kills: int = 0
    deaths: int = 0
    weapons_used: dict[str, int] = field(default_factory=dict)
    best_streak: int = 0
    _current_streak: int = field(default=0, init=False, repr=False, compare=False)

    @classmethod
    def create_new(cls, player_name: str) -> PlayerStats:
        return cls(player_name=player_name)

    @property
    def kda(self) -> float:
        return calculate_kda(self.kills, self.deaths)

    def add_kill(self, weapon: str) -> None:
        self.kills += 1
        self.weapons_used[weapon] = self.weapons_used.get(weapon, 0) + 1
        self._current_streak += 1
        self.best_streak = max(self.best_streak, self._current_streak)

    def add_death(self) -> None:
        self.deaths += 1
        self._current_streak = 0

    def as_dict(self) -> dict[str, Any]:
        return {
            "player_name": self.player_name,
            "kills": self.kills,
            "deaths": self.deaths,
            "weapons_used": dict(self.weapons_used),
            "best_streak": self.best_streak,
            "kda": self.kda,
        }


__all__ = ["PlayerStats"]
