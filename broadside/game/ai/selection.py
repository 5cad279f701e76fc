"""AI strategy selection by difficulty."""

from __future__ import annotations

import random

from broadside.game.ai.hunt_target import HuntTargetAI
from broadside.game.ai.random_shot import RandomShotAI
from broadside.game.ai.strategy import AIStrategy
from broadside.game.core.models import Difficulty


def build_ai_strategy(difficulty: Difficulty, rng: random.Random) -> AIStrategy:
    """Construct AI strategy from selected difficulty."""
    if difficulty is Difficulty.EASY:
        return RandomShotAI(rng)
    return HuntTargetAI(rng)
