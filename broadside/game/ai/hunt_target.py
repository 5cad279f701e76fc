"""Hunt/Target AI strategy for normal difficulty."""

from __future__ import annotations

from broadside.game.ai.strategy import AIStrategy
from broadside.game.ai.targeting import choose_target
from broadside.game.core.board import Board
from broadside.game.core.models import Coord, Difficulty


class HuntTargetAI(AIStrategy):
    """Follows up hits through a LIFO stack of neighbour candidates."""

    difficulty = Difficulty.NORMAL

    def choose_shot(self, board: Board) -> Coord:
        choice = choose_target(board, self._state, self.difficulty, self._rng)
        self._state = choice.state
        return choice.coord
