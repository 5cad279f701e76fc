"""Board state representation and copy-on-write update helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from broadside.game.core.models import BOARD_SIZE, UNFIRED_STATES, CellState, Coord


@dataclass(frozen=True, slots=True, eq=False)
class Board:
    """Numpy-backed square grid of cell states.

    The backing array is read-only; every update returns a new ``Board`` so a
    caller holding an earlier board never sees it change.
    """

    cells: np.ndarray

    def __post_init__(self) -> None:
        grid = np.array(self.cells, dtype=np.int8, copy=True)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Board grid must be square, got shape {grid.shape}.")
        grid.setflags(write=False)
        object.__setattr__(self, "cells", grid)

    @property
    def size(self) -> int:
        return int(self.cells.shape[0])

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def cell(self, coord: Coord) -> CellState:
        return CellState(int(self.cells[coord.row, coord.col]))

    def is_unfired(self, coord: Coord) -> bool:
        """Return whether the cell has not been targeted yet (empty or ship)."""
        return self.cell(coord) in UNFIRED_STATES

    def unfired_cells(self) -> list[Coord]:
        """Unfired cells in row-major order."""
        rows, cols = np.nonzero(np.isin(self.cells, [int(state) for state in UNFIRED_STATES]))
        return [Coord(int(r), int(c)) for r, c in zip(rows, cols)]

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.cells == int(state)))

    def with_cells(self, coords: Iterable[Coord], state: CellState) -> Board:
        """Return a copy of this board with ``coords`` set to ``state``."""
        grid = self.cells.copy()
        for coord in coords:
            grid[coord.row, coord.col] = int(state)
        return Board(grid)

    def rows(self) -> list[list[CellState]]:
        """Return the grid as nested lists of ``CellState`` for display."""
        return [[CellState(int(value)) for value in row] for row in self.cells]


def create_empty_board(size: int = BOARD_SIZE) -> Board:
    """Create an N×N board with every cell empty."""
    return Board(np.full((size, size), int(CellState.EMPTY), dtype=np.int8))
