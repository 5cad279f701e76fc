"""Mutable controller state container."""

from __future__ import annotations

from dataclasses import dataclass, field

from broadside.game.ai.strategy import AIStrategy
from broadside.game.app.state_machine import GamePhase
from broadside.game.app.stats import GameStats, create_game_stats
from broadside.game.core.board import Board, create_empty_board
from broadside.game.core.models import Difficulty, Orientation, Ship
from broadside.game.core.rules import GameSession


@dataclass(slots=True)
class ControllerState:
    """Aggregates all mutable state owned by GameController."""

    difficulty: Difficulty = Difficulty.NORMAL
    phase: GamePhase = GamePhase.PLACEMENT
    status: str = ""
    orientation: Orientation = Orientation.HORIZONTAL

    # Placement-phase fleet; moved into ``session`` when battle starts.
    player_board: Board = field(default_factory=create_empty_board)
    player_ships: tuple[Ship, ...] = ()

    session: GameSession | None = None
    ai_strategy: AIStrategy | None = None
    stats: GameStats = field(default_factory=create_game_stats)
    pending_reply_task: int | None = None
