"""Shot outcome evaluation (miss/hit/sunk)."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from broadside.game.core.board import Board
from broadside.game.core.models import CellState, Coord, Ship, ShotResult


@dataclass(frozen=True, slots=True, eq=False)
class ShotOutcome:
    """New board and fleet after a shot, plus what the shot did."""

    board: Board
    ships: tuple[Ship, ...]
    result: ShotResult
    sunk_ship_name: str | None = None

    @property
    def sunk_ship(self) -> Ship | None:
        if self.sunk_ship_name is None:
            return None
        return next((ship for ship in self.ships if ship.name == self.sunk_ship_name), None)


def check_ship_sunk(ship: Ship, board: Board) -> bool:
    """Return whether every cell of ``ship`` is marked hit on ``board``."""
    return all(board.cell(cell) is CellState.HIT for cell in ship.cells)


def all_ships_sunk(ships: Sequence[Ship]) -> bool:
    """Return whether a non-empty fleet has every ship sunk."""
    return bool(ships) and all(ship.sunk for ship in ships)


def process_shot(board: Board, ships: Sequence[Ship], row: int, col: int) -> ShotOutcome:
    """Resolve a shot at (row, col) without mutating ``board`` or ``ships``.

    Firing at an already resolved cell is not re-validated here; callers filter
    those shots out first.
    """
    coord = Coord(row, col)
    new_ships = tuple(ships)

    if board.cell(coord) is not CellState.SHIP:
        return ShotOutcome(board.with_cells((coord,), CellState.MISS), new_ships, ShotResult.MISS)

    new_board = board.with_cells((coord,), CellState.HIT)
    index = next((i for i, ship in enumerate(new_ships) if ship.occupies(coord)), None)
    if index is None:
        return ShotOutcome(new_board, new_ships, ShotResult.HIT)

    hit_ship = new_ships[index]
    if not all(new_board.cell(cell) in (CellState.HIT, CellState.SUNK) for cell in hit_ship.cells):
        return ShotOutcome(new_board, new_ships, ShotResult.HIT)

    sunk_ship = hit_ship.as_sunk()
    updated = new_ships[:index] + (sunk_ship,) + new_ships[index + 1 :]
    return ShotOutcome(
        new_board.with_cells(sunk_ship.cells, CellState.SUNK),
        updated,
        ShotResult.SUNK,
        sunk_ship_name=sunk_ship.name,
    )
