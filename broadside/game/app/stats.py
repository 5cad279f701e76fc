"""Per-session shot statistics."""

from __future__ import annotations

from dataclasses import dataclass

from broadside.game.core.models import ShotResult, Turn


@dataclass(slots=True)
class SideStats:
    """Accumulators for one side; only ever incremented."""

    shots: int = 0
    hits: int = 0
    misses: int = 0
    ships_sunk: int = 0

    @property
    def accuracy(self) -> float:
        """Hit percentage, 0.0 before the first shot."""
        if self.shots == 0:
            return 0.0
        return round(self.hits / self.shots * 100.0, 1)

    def record(self, result: ShotResult) -> None:
        if result is ShotResult.MISS:
            self.shots += 1
            self.misses += 1
        elif result in (ShotResult.HIT, ShotResult.SUNK):
            self.shots += 1
            self.hits += 1
            if result is ShotResult.SUNK:
                self.ships_sunk += 1


@dataclass(slots=True)
class GameStats:
    """Statistics for both sides plus the player turn count."""

    player: SideStats
    ai: SideStats
    turns: int = 0

    def record_shot(self, shooter: Turn, result: ShotResult) -> None:
        """Count an accepted shot; rejected shots are ignored."""
        if result in (ShotResult.INVALID, ShotResult.REPEAT):
            return
        if shooter is Turn.PLAYER:
            self.player.record(result)
            self.turns += 1
        else:
            self.ai.record(result)


def create_game_stats() -> GameStats:
    return GameStats(player=SideStats(), ai=SideStats())
