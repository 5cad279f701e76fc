"""Uniformly random AI strategy for easy difficulty."""

from __future__ import annotations

from broadside.game.ai.strategy import AIStrategy
from broadside.game.ai.targeting import pick_random_cell
from broadside.game.core.board import Board
from broadside.game.core.models import Coord, Difficulty


class RandomShotAI(AIStrategy):
    """Ignores the targeting mode and fires at random unfired cells."""

    difficulty = Difficulty.EASY

    def choose_shot(self, board: Board) -> Coord:
        return pick_random_cell(board, self._rng)
