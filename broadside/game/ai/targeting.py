"""Hunt/target targeting state machine.

The opponent alternates between two modes:

* ``hunt``: no unresolved hit is known, so it fires at a random unfired cell.
* ``target``: after a hit, the orthogonal neighbours of each hit are pushed
  onto a last-in-first-out ``targets`` stack and consumed before hunting again.

Both functions are pure: they take an :class:`AIState` and return a new one.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import StrEnum

from broadside.game.core.board import Board
from broadside.game.core.models import Coord, Difficulty, Ship, ShotResult

# Push order; the last entry is popped first.
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class AIMode(StrEnum):
    """Targeting mode."""

    HUNT = "hunt"
    TARGET = "target"


@dataclass(frozen=True, slots=True)
class AIState:
    """Opponent targeting memory."""

    mode: AIMode = AIMode.HUNT
    targets: tuple[Coord, ...] = field(default_factory=tuple)
    hit_stack: tuple[Coord, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class TargetChoice:
    """Chosen cell and the state left after choosing it."""

    coord: Coord
    state: AIState


def create_ai_state() -> AIState:
    return AIState()


def adjacent_cells(coord: Coord, size: int) -> list[Coord]:
    """In-bounds orthogonal neighbours in up, down, left, right order."""
    result: list[Coord] = []
    for dr, dc in NEIGHBOUR_OFFSETS:
        row, col = coord.row + dr, coord.col + dc
        if 0 <= row < size and 0 <= col < size:
            result.append(Coord(row, col))
    return result


def pick_random_cell(board: Board, rng: random.Random) -> Coord:
    """Uniformly random unfired cell."""
    available = board.unfired_cells()
    if not available:
        raise ValueError("No unfired cells left on the board.")
    return rng.choice(available)


def choose_target(
    board: Board, state: AIState, difficulty: Difficulty, rng: random.Random
) -> TargetChoice:
    """Select the next cell to fire at on ``board``."""
    if difficulty is Difficulty.EASY:
        return TargetChoice(pick_random_cell(board, rng), state)

    targets = list(state.targets)
    while targets:
        candidate = targets.pop()
        if board.is_unfired(candidate):
            return TargetChoice(candidate, replace(state, targets=tuple(targets)))

    exhausted = replace(state, mode=AIMode.HUNT, targets=())
    return TargetChoice(pick_random_cell(board, rng), exhausted)


def record_outcome(
    state: AIState,
    coord: Coord,
    result: ShotResult,
    sunk_ship: Ship | None,
    size: int,
) -> AIState:
    """Fold the outcome of a shot at ``coord`` into the targeting state."""
    if result is ShotResult.HIT:
        return AIState(
            mode=AIMode.TARGET,
            targets=(*state.targets, *adjacent_cells(coord, size)),
            hit_stack=(*state.hit_stack, coord),
        )

    if result is ShotResult.SUNK:
        sunk_cells = set(sunk_ship.cells) if sunk_ship is not None else set()
        remaining = tuple(hit for hit in state.hit_stack if hit not in sunk_cells)
        if not remaining:
            return AIState()
        # Candidates next to the sunk ship stay queued while other hits are open.
        return replace(state, hit_stack=remaining)

    return state
