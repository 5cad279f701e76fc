"""AI strategy interface."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod

from broadside.game.ai.targeting import AIState, create_ai_state, record_outcome
from broadside.game.core.board import Board
from broadside.game.core.models import Coord, Difficulty, Ship, ShotResult

logger = logging.getLogger(__name__)


class AIStrategy(ABC):
    """Opponent contract: pick a shot, then learn from its result."""

    difficulty: Difficulty

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self._state = create_ai_state()

    @property
    def state(self) -> AIState:
        return self._state

    @abstractmethod
    def choose_shot(self, board: Board) -> Coord:
        """Return next coordinate to fire at on the opponent board."""

    def notify_result(
        self, coord: Coord, result: ShotResult, sunk_ship: Ship | None, size: int
    ) -> None:
        """Update strategy state with shot result."""
        previous = self._state.mode
        self._state = record_outcome(self._state, coord, result, sunk_ship, size)
        if self._state.mode is not previous:
            logger.debug(
                "ai_mode_changed from=%s to=%s coord=%s", previous, self._state.mode, coord.label
            )
