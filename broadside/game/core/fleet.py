"""Fleet validation and random fleet construction."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from broadside.game.core.board import Board, create_empty_board
from broadside.game.core.models import BOARD_SIZE, FLEET_ROSTER, Ship, ShipSpec
from broadside.game.core.placement import can_place_ship, place_ship

logger = logging.getLogger(__name__)

MAX_ATTEMPTS_PER_SHIP = 10_000


class FleetPlacementError(RuntimeError):
    """Raised when a roster cannot be fitted onto the board."""


def validate_fleet(
    ships: Sequence[Ship],
    size: int = BOARD_SIZE,
    roster: Sequence[ShipSpec] = FLEET_ROSTER,
) -> tuple[bool, str]:
    """Validate whether a fleet exactly matches the roster rules."""
    if len(ships) != len(roster):
        return False, f"Fleet must contain exactly {len(roster)} ships."

    expected = sorted((spec.name, spec.length) for spec in roster)
    actual = sorted((ship.name, ship.length) for ship in ships)
    if actual != expected:
        return False, "Fleet does not match the roster."

    seen: set[tuple[int, int]] = set()
    for ship in ships:
        if len(ship.cells) != ship.length:
            return False, f"{ship.name} must occupy {ship.length} cells."
        for cell in ship.cells:
            if not (0 <= cell.row < size and 0 <= cell.col < size):
                return False, f"{ship.name} is out of bounds at {cell.label}."
            key = (cell.row, cell.col)
            if key in seen:
                return False, f"{ship.name} overlaps another ship at {cell.label}."
            seen.add(key)
    return True, ""


def random_fleet(
    rng: random.Random,
    size: int = BOARD_SIZE,
    roster: Sequence[ShipSpec] = FLEET_ROSTER,
) -> tuple[Board, tuple[Ship, ...]]:
    """Generate a random valid fleet, placing roster ships in order."""
    board = create_empty_board(size)
    ships: tuple[Ship, ...] = ()

    for spec in roster:
        for _ in range(MAX_ATTEMPTS_PER_SHIP):
            horizontal = rng.random() < 0.5
            row = rng.randrange(size)
            col = rng.randrange(size)
            if can_place_ship(board, row, col, spec.length, horizontal):
                board, ships = place_ship(board, ships, spec, row, col, horizontal)
                break
        else:
            raise FleetPlacementError(
                f"Failed to place {spec.name} (length {spec.length}) on a {size}x{size} board."
            )

    logger.debug("random_fleet_generated size=%d ships=%d", size, len(ships))
    return board, ships
