"""Game phase transitions for placement, battle, and game over."""

from enum import Enum, auto


class GamePhase(Enum):
    """Top-level session phases; only a full reset moves backwards."""

    PLACEMENT = auto()
    BATTLE = auto()
    GAMEOVER = auto()


_FORWARD: dict[GamePhase, GamePhase] = {
    GamePhase.PLACEMENT: GamePhase.BATTLE,
    GamePhase.BATTLE: GamePhase.GAMEOVER,
}


def next_phase(phase: GamePhase) -> GamePhase:
    """Return the phase that follows ``phase``."""
    try:
        return _FORWARD[phase]
    except KeyError:
        raise ValueError(f"No phase follows {phase.name}.") from None
