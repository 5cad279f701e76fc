import numpy as np
import pytest

from broadside.game.core.board import Board, create_empty_board
from broadside.game.core.models import BOARD_SIZE, CellState, Coord


def test_create_empty_board_is_all_empty() -> None:
    board = create_empty_board()
    assert board.size == BOARD_SIZE
    rows = board.rows()
    assert len(rows) == BOARD_SIZE
    assert all(len(row) == BOARD_SIZE for row in rows)
    assert all(cell is CellState.EMPTY for row in rows for cell in row)


def test_board_array_is_read_only() -> None:
    board = create_empty_board()
    with pytest.raises(ValueError):
        board.cells[0, 0] = int(CellState.SHIP)


def test_with_cells_returns_new_board_and_keeps_original() -> None:
    board = create_empty_board()
    updated = board.with_cells([Coord(1, 1), Coord(1, 2)], CellState.SHIP)
    assert board.cell(Coord(1, 1)) is CellState.EMPTY
    assert updated.cell(Coord(1, 1)) is CellState.SHIP
    assert updated.count(CellState.SHIP) == 2


def test_board_copies_source_array() -> None:
    grid = np.zeros((3, 3), dtype=np.int8)
    board = Board(grid)
    grid[0, 0] = int(CellState.SHIP)
    assert board.cell(Coord(0, 0)) is CellState.EMPTY


def test_board_rejects_non_square_grid() -> None:
    with pytest.raises(ValueError):
        Board(np.zeros((2, 3), dtype=np.int8))


def test_unfired_cells_excludes_resolved_states() -> None:
    board = create_empty_board(3)
    board = board.with_cells([Coord(0, 0)], CellState.HIT)
    board = board.with_cells([Coord(0, 1)], CellState.MISS)
    board = board.with_cells([Coord(0, 2)], CellState.SUNK)
    board = board.with_cells([Coord(1, 0)], CellState.SHIP)
    unfired = board.unfired_cells()
    assert len(unfired) == 6
    assert Coord(1, 0) in unfired
    assert not board.is_unfired(Coord(0, 0))
    assert board.is_unfired(Coord(1, 0))


def test_in_bounds() -> None:
    board = create_empty_board()
    assert board.in_bounds(Coord(0, 0))
    assert board.in_bounds(Coord(9, 9))
    assert not board.in_bounds(Coord(-1, 0))
    assert not board.in_bounds(Coord(0, 10))
