"""Ship placement validation and application."""

from __future__ import annotations

from collections.abc import Sequence

from broadside.game.core.board import Board
from broadside.game.core.models import CellState, Coord, Ship, ShipSpec, cells_for_placement


def ship_cells(row: int, col: int, length: int, horizontal: bool) -> list[Coord]:
    """Cells a ship would occupy from (row, col), extending right or down."""
    return cells_for_placement(row, col, length, horizontal)


def can_place_ship(board: Board, row: int, col: int, length: int, horizontal: bool) -> bool:
    """Return whether every cell of the placement is in bounds and empty."""
    for cell in ship_cells(row, col, length, horizontal):
        if not board.in_bounds(cell):
            return False
        if board.cell(cell) is not CellState.EMPTY:
            return False
    return True


def place_ship(
    board: Board,
    ships: Sequence[Ship],
    spec: ShipSpec,
    row: int,
    col: int,
    horizontal: bool,
) -> tuple[Board, tuple[Ship, ...]]:
    """Place ``spec`` and return the new board and fleet."""
    if not can_place_ship(board, row, col, spec.length, horizontal):
        raise ValueError(f"Invalid placement for {spec.name} at {Coord(row, col).label}.")
    cells = tuple(ship_cells(row, col, spec.length, horizontal))
    ship = Ship(name=spec.name, length=spec.length, cells=cells)
    return board.with_cells(cells, CellState.SHIP), (*ships, ship)
