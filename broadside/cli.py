"""Terminal frontend: renders boards and forwards commands to the controller."""

from __future__ import annotations

import time
from collections.abc import Callable

from broadside.game.app.controller import GameController, SessionSnapshot
from broadside.game.app.state_machine import GamePhase
from broadside.game.core.board import Board
from broadside.game.core.models import (
    CellState,
    Difficulty,
    ShotResult,
    Turn,
    column_labels,
    parse_coord,
    row_labels,
)

HELP_TEXT = """Commands:
  place <cell>     place the current ship with its bow at <cell> (e.g. place A1)
  rotate           toggle horizontal/vertical placement
  random           place your whole fleet randomly and start the battle
  difficulty <d>   easy or normal (before the first ship is placed)
  fire <cell>      fire at the enemy board; a bare cell like B7 also fires
  stats            show the game recap
  reset            start a new game
  quit             leave"""

_OWN_SYMBOLS = {
    CellState.EMPTY: ".",
    CellState.SHIP: "S",
    CellState.HIT: "X",
    CellState.MISS: "o",
    CellState.SUNK: "#",
}

LEGEND = "Legend: . water  S ship  X hit  o miss  # sunk"


def render_board(board: Board, *, reveal_ships: bool) -> list[str]:
    """Render a board with column letters and 1-based row numbers."""
    width = len(str(board.size))
    lines = [" " * (width + 1) + " ".join(column_labels(board.size))]
    for label, row in zip(row_labels(board.size), board.rows()):
        symbols = []
        for cell in row:
            if cell is CellState.SHIP and not reveal_ships:
                cell = CellState.EMPTY
            symbols.append(_OWN_SYMBOLS[cell])
        lines.append(f"{label:>{width}} " + " ".join(symbols))
    return lines


def render_snapshot(snapshot: SessionSnapshot) -> str:
    """Render both boards side by side plus the status line."""
    own = render_board(snapshot.player_board, reveal_ships=True)
    enemy = render_board(snapshot.ai_board, reveal_ships=snapshot.phase is GamePhase.GAMEOVER)
    gap = " " * 6
    header = f"{'Your Fleet':<{len(own[0])}}{gap}Enemy Waters"
    rows = [f"{left}{gap}{right}" for left, right in zip(own, enemy)]
    ships = "Your ships: " + _ship_summary(snapshot, own_side=True)
    if snapshot.ai_ships:
        ships += "\nEnemy ships: " + _ship_summary(snapshot, own_side=False)
    return "\n".join([header, *rows, LEGEND, ships, snapshot.status])


def render_stats(snapshot: SessionSnapshot) -> str:
    """Render the end-of-game recap table."""
    player, ai = snapshot.stats.player, snapshot.stats.ai
    rows = [
        ("Total Shots", player.shots, ai.shots),
        ("Hits", player.hits, ai.hits),
        ("Misses", player.misses, ai.misses),
        ("Accuracy", f"{player.accuracy:.1f}%", f"{ai.accuracy:.1f}%"),
        ("Ships Sunk", player.ships_sunk, ai.ships_sunk),
        ("Turns", snapshot.stats.turns, snapshot.stats.turns),
    ]
    lines = [f"{'':<12}{'You':>8}{'AI':>8}"]
    lines.extend(f"{label:<12}{str(mine):>8}{str(theirs):>8}" for label, mine, theirs in rows)
    if snapshot.winner is not None:
        lines.append("Victory!" if snapshot.winner is Turn.PLAYER else "Defeat")
    return "\n".join(lines)


def _ship_summary(snapshot: SessionSnapshot, *, own_side: bool) -> str:
    ships = snapshot.player_ships if own_side else snapshot.ai_ships
    if not ships:
        return "-"
    return ", ".join(f"{ship.name}{' (sunk)' if ship.sunk else ''}" for ship in ships)


class ConsoleSession:
    """Read-eval-print loop over a :class:`GameController`."""

    def __init__(
        self,
        controller: GameController,
        *,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._controller = controller
        self._read = read
        self._write = write
        self._sleep = sleep

    def run(self) -> int:
        self._write(HELP_TEXT)
        self._write(render_snapshot(self._controller.snapshot()))
        while True:
            try:
                line = self._read("> ")
            except EOFError:
                return 0
            if not self.handle(line):
                return 0

    def handle(self, line: str) -> bool:
        """Apply one command line; return False when the user quits."""
        parts = line.strip().split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]

        if command in {"quit", "exit", "q"}:
            return False
        if command in {"help", "?"}:
            self._write(HELP_TEXT)
            return True
        if command == "stats":
            self._write(render_stats(self._controller.snapshot()))
            return True
        if command == "rotate":
            orientation = self._controller.toggle_orientation()
            self._write(f"Orientation: {orientation.value.lower()}")
            return True
        if command == "random":
            if not self._controller.randomize_placement():
                self._write("Random placement is only available before the battle.")
        elif command == "reset":
            self._controller.reset()
        elif command == "difficulty" and len(args) == 1:
            self._select_difficulty(args[0])
        elif command == "place" and len(args) == 1:
            self._place(args[0])
        elif command == "fire" and len(args) == 1:
            self._fire(args[0])
        elif not args and self._controller.phase is GamePhase.BATTLE:
            self._fire(command)
        else:
            self._write("Unknown command. Type 'help' for the list of commands.")
            return True

        self._write(render_snapshot(self._controller.snapshot()))
        if self._controller.phase is GamePhase.GAMEOVER:
            self._write(render_stats(self._controller.snapshot()))
        return True

    def _select_difficulty(self, raw: str) -> None:
        try:
            difficulty = Difficulty(raw.lower())
        except ValueError:
            self._write("Difficulty must be 'easy' or 'normal'.")
            return
        if not self._controller.set_difficulty(difficulty):
            self._write("Difficulty can only change before the first ship is placed.")

    def _place(self, raw: str) -> None:
        try:
            coord = parse_coord(raw)
        except ValueError as exc:
            self._write(str(exc))
            return
        self._controller.place_next_ship(coord)

    def _fire(self, raw: str) -> None:
        try:
            coord = parse_coord(raw)
        except ValueError as exc:
            self._write(str(exc))
            return
        result = self._controller.fire(coord)
        if result is ShotResult.INVALID:
            self._write("You cannot fire right now.")
            return
        if self._controller.ai_turn_pending:
            self._write(self._controller.status)
            delay = self._controller.ai_reply_delay_seconds
            self._sleep(delay)
            self._controller.advance(delay)
