import pytest

from broadside.game.core.board import create_empty_board
from broadside.game.core.models import FLEET_ROSTER, CellState, Coord
from broadside.game.core.placement import can_place_ship, place_ship, ship_cells


def test_can_place_on_empty_board_both_orientations() -> None:
    board = create_empty_board()
    assert can_place_ship(board, 0, 0, 5, True)
    assert can_place_ship(board, 0, 0, 5, False)


def test_rejects_ship_running_off_the_edges() -> None:
    board = create_empty_board()
    assert not can_place_ship(board, 0, 8, 5, True)
    assert not can_place_ship(board, 8, 0, 5, False)
    assert not can_place_ship(board, -1, 0, 2, True)


def test_allows_ship_ending_exactly_at_the_edge() -> None:
    board = create_empty_board()
    assert can_place_ship(board, 0, 5, 5, True)
    assert can_place_ship(board, 5, 0, 5, False)


def test_rejects_overlap_but_allows_adjacent_ship() -> None:
    board = create_empty_board().with_cells(ship_cells(0, 0, 3, True), CellState.SHIP)
    assert not can_place_ship(board, 0, 0, 3, True)
    assert not can_place_ship(board, 0, 2, 2, False)
    assert can_place_ship(board, 1, 0, 3, True)


def test_rejects_cells_that_were_fired_at() -> None:
    board = create_empty_board().with_cells([Coord(4, 4)], CellState.MISS)
    assert not can_place_ship(board, 4, 3, 2, True)


def test_can_place_ship_does_not_mutate_board() -> None:
    board = create_empty_board()
    can_place_ship(board, 0, 0, 5, True)
    assert board.count(CellState.EMPTY) == 100


def test_place_ship_marks_cells_and_records_ship() -> None:
    board = create_empty_board()
    destroyer = FLEET_ROSTER[-1]
    new_board, ships = place_ship(board, (), destroyer, 0, 0, True)
    assert new_board.cell(Coord(0, 0)) is CellState.SHIP
    assert new_board.cell(Coord(0, 1)) is CellState.SHIP
    assert board.cell(Coord(0, 0)) is CellState.EMPTY
    assert ships[0].name == "Destroyer"
    assert ships[0].cells == (Coord(0, 0), Coord(0, 1))
    assert ships[0].sunk is False


def test_place_ship_raises_for_invalid_position() -> None:
    with pytest.raises(ValueError):
        place_ship(create_empty_board(), (), FLEET_ROSTER[0], 9, 9, True)
