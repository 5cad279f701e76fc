"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum, StrEnum

BOARD_SIZE = 10


class CellState(IntEnum):
    """State of a single grid cell; values are stored in the board array."""

    EMPTY = 0
    SHIP = 1
    HIT = 2
    MISS = 3
    SUNK = 4


UNFIRED_STATES: frozenset[CellState] = frozenset({CellState.EMPTY, CellState.SHIP})


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    @property
    def is_horizontal(self) -> bool:
        return self is Orientation.HORIZONTAL

    def toggled(self) -> Orientation:
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class ShotResult(StrEnum):
    """Result of a single shot."""

    MISS = "miss"
    HIT = "hit"
    SUNK = "sunk"
    REPEAT = "repeat"
    INVALID = "invalid"


class Difficulty(StrEnum):
    """Opponent difficulty, fixed before placement begins."""

    EASY = "easy"
    NORMAL = "normal"


class Turn(StrEnum):
    """Current turn owner."""

    PLAYER = "PLAYER"
    AI = "AI"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``Coord(6, 1)`` is ``B7``."""
        return f"{chr(ord('A') + self.col)}{self.row + 1}"


def parse_coord(text: str, size: int = BOARD_SIZE) -> Coord:
    """Parse a label such as ``B7`` into a coordinate."""
    cleaned = text.strip().upper()
    if len(cleaned) < 2 or not cleaned[0].isalpha() or not cleaned[1:].isdigit():
        raise ValueError(f"Invalid coordinate: {text!r}.")
    coord = Coord(row=int(cleaned[1:]) - 1, col=ord(cleaned[0]) - ord("A"))
    if not (0 <= coord.row < size and 0 <= coord.col < size):
        raise ValueError(f"Coordinate out of range: {text!r}.")
    return coord


def column_labels(size: int = BOARD_SIZE) -> list[str]:
    return [chr(ord("A") + i) for i in range(size)]


def row_labels(size: int = BOARD_SIZE) -> list[str]:
    return [str(i + 1) for i in range(size)]


@dataclass(frozen=True, slots=True)
class ShipSpec:
    """Roster entry: ship name and length."""

    name: str
    length: int


FLEET_ROSTER: tuple[ShipSpec, ...] = (
    ShipSpec("Carrier", 5),
    ShipSpec("Battleship", 4),
    ShipSpec("Cruiser", 3),
    ShipSpec("Submarine", 3),
    ShipSpec("Destroyer", 2),
)


@dataclass(frozen=True, slots=True)
class Ship:
    """A placed ship. ``cells`` keep their placement order."""

    name: str
    length: int
    cells: tuple[Coord, ...]
    sunk: bool = False

    def occupies(self, coord: Coord) -> bool:
        return coord in self.cells

    def as_sunk(self) -> Ship:
        return replace(self, sunk=True)


def cells_for_placement(row: int, col: int, length: int, horizontal: bool) -> list[Coord]:
    """Compute occupied cells for a ship placement, without bounds checks."""
    result: list[Coord] = []
    for i in range(length):
        if horizontal:
            result.append(Coord(row, col + i))
        else:
            result.append(Coord(row + i, col))
    return result
