"""Opponent targeting strategies."""

from broadside.game.ai.hunt_target import HuntTargetAI
from broadside.game.ai.random_shot import RandomShotAI
from broadside.game.ai.selection import build_ai_strategy
from broadside.game.ai.strategy import AIStrategy
from broadside.game.ai.targeting import AIMode, AIState, choose_target, record_outcome

__all__ = [
    "AIMode",
    "AIState",
    "AIStrategy",
    "HuntTargetAI",
    "RandomShotAI",
    "build_ai_strategy",
    "choose_target",
    "record_outcome",
]
