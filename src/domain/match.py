"""Match aggregate rebuilt from an ordered stream of log events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from domain.errors import MatchAlreadyEndedError, MatchIdMismatchError
from domain.events import KillEvent, MatchEndEvent, MatchStartEvent, WorldKillEvent
from domain.player_stats import PlayerStats


@dataclass
class Match:
    """One bounded game session keyed by its log-assigned id.

    A match is ended once ``end_time`` is set; ended matches reject further
    kill and world-kill events.
    """

    id: str
    start_time: datetime
    end_time: datetime | None = None
    player_stats: list[PlayerStats] = field(default_factory=list)

    @classmethod
    def create_new_match(cls, event: MatchStartEvent) -> Match:
        return cls(id=event.match_id, start_time=event.time)

    @property
    def has_ended(self) -> bool:
        return self.end_time is not None

    def get_player_stats(self, player_name: str) -> PlayerStats | None:
        """Return stats for ``player_name`` (exact, case-sensitive) or ``None``."""
        for stats in self.player_stats:
            if stats.player_name == player_name:
                return stats
        return None

    def end_match(self, event: MatchEndEvent) -> None:
        # No already-ended guard: a second end with the same id re-sets end_time.
        if self.id != event.match_id:
            raise MatchIdMismatchError(self.id, event.match_id)
        self.end_time = event.time

    def add_kill_event(self, event: KillEvent) -> None:
        self._ensure_not_ended()
        killer = self._get_or_create_player_stats(event.killer)
        victim = self._get_or_create_player_stats(event.victim)
        killer.add_kill(event.weapon)
        victim.add_death()

    def add_world_kill_event(self, event: WorldKillEvent) -> None:
        self._ensure_not_ended()
        self._get_or_create_player_stats(event.victim).add_death()

    def _ensure_not_ended(self) -> None:
        if self.has_ended:
            raise MatchAlreadyEndedError()

    def _get_or_create_player_stats(self, player_name: str) -> PlayerStats:
        stats = self.get_player_stats(player_name)
        if stats is None:
            stats = PlayerStats.create_new(player_name)
            self.player_stats.append(stats)
        return stats


__all__ = ["Match"]
