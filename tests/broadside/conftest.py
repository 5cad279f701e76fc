from __future__ import annotations

import random

import pytest

from broadside.game.core.board import Board, create_empty_board
from broadside.game.core.models import FLEET_ROSTER, Ship
from broadside.game.core.placement import place_ship


def make_valid_fleet() -> tuple[Board, tuple[Ship, ...]]:
    """Roster ships laid horizontally on even rows from column 0."""
    board = create_empty_board()
    ships: tuple[Ship, ...] = ()
    for index, spec in enumerate(FLEET_ROSTER):
        board, ships = place_ship(board, ships, spec, index * 2, 0, True)
    return board, ships


@pytest.fixture
def valid_fleet() -> tuple[Board, tuple[Ship, ...]]:
    return make_valid_fleet()


@pytest.fixture
def destroyer_board() -> tuple[Board, tuple[Ship, ...]]:
    """A lone destroyer at A1-B1."""
    return place_ship(create_empty_board(), (), FLEET_ROSTER[-1], 0, 0, True)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)
