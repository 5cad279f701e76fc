from __future__ import annotations

import random

from broadside.cli import LEGEND, ConsoleSession, render_board, render_snapshot, render_stats
from broadside.game.app.controller import GameController
from broadside.game.app.scheduler import Scheduler
from broadside.game.app.state_machine import GamePhase
from broadside.game.core.board import create_empty_board
from broadside.game.core.models import CellState, Coord, Difficulty
from broadside.game.infra.config import GameSettings
from broadside.main import build_parser


def _console(delay: float = 0.5) -> tuple[ConsoleSession, GameController, list[str], list[float]]:
    output: list[str] = []
    sleeps: list[float] = []
    controller = GameController(
        rng=random.Random(4),
        settings=GameSettings(ai_reply_delay_seconds=delay),
        scheduler=Scheduler(),
    )
    console = ConsoleSession(
        controller, read=lambda _: "quit", write=output.append, sleep=sleeps.append
    )
    return console, controller, output, sleeps


def test_render_board_uses_letter_columns_and_numbered_rows() -> None:
    board = create_empty_board().with_cells([Coord(0, 0)], CellState.SHIP)
    board = board.with_cells([Coord(6, 1)], CellState.HIT)
    lines = render_board(board, reveal_ships=True)
    assert lines[0].split() == list("ABCDEFGHIJ")
    assert lines[1].split()[:2] == ["1", "S"]
    assert lines[7].split()[:3] == ["7", ".", "X"]
    assert lines[10].split()[0] == "10"
    hidden = render_board(board, reveal_ships=False)
    assert hidden[1].split()[:2] == ["1", "."]


def test_snapshot_render_explains_every_cell_symbol() -> None:
    controller = GameController(rng=random.Random(3))
    text = render_snapshot(controller.snapshot())
    assert LEGEND in text.splitlines()
    legend = [(".", "water"), ("S", "ship"), ("X", "hit"), ("o", "miss"), ("#", "sunk")]
    for symbol, meaning in legend:
        assert f"{symbol} {meaning}" in LEGEND


def test_place_rotate_and_fire_commands() -> None:
    console, controller, output, sleeps = _console()
    assert console.handle("rotate")
    assert console.handle("place A1")
    assert controller.snapshot().player_ships[0].cells[-1] == Coord(4, 0)
    for cell in ("B1", "C1", "D1", "E1"):
        console.handle(f"place {cell}")
    assert controller.phase is GamePhase.BATTLE

    console.handle("J10")
    assert sleeps == [0.5]
    assert controller.stats.player.shots == 1
    assert controller.stats.ai.shots == 1
    assert not controller.ai_turn_pending


def test_bad_input_reports_errors() -> None:
    console, controller, output, _ = _console()
    console.handle("place Z99")
    assert any("out of range" in line for line in output)
    console.handle("launch")
    assert output[-1].startswith("Unknown command")
    console.handle("difficulty hard")
    assert "Difficulty must be 'easy' or 'normal'." in output
    console.handle("difficulty easy")
    assert controller.difficulty is Difficulty.EASY
    assert console.handle("quit") is False


def test_random_then_stats_and_reset() -> None:
    console, controller, output, _ = _console(delay=0.0)
    console.handle("random")
    assert controller.phase is GamePhase.BATTLE
    console.handle("fire A1")
    console.handle("stats")
    assert "Total Shots" in output[-1]
    console.handle("reset")
    assert controller.phase is GamePhase.PLACEMENT


def test_run_stops_on_end_of_input() -> None:
    controller = GameController(rng=random.Random(1))

    def _eof(_: str) -> str:
        raise EOFError

    assert ConsoleSession(controller, read=_eof, write=lambda _: None).run() == 0


def test_render_stats_shows_winner_banner() -> None:
    controller = GameController(
        rng=random.Random(2), settings=GameSettings(ai_reply_delay_seconds=0.0)
    )
    controller.randomize_placement()
    for ship in controller.session.ai_ships:
        for cell in ship.cells:
            controller.fire(cell)
    text = render_stats(controller.snapshot())
    assert "Victory!" in text
    assert "100.0%" in text


def test_parser_accepts_game_options() -> None:
    args = build_parser().parse_args(["--difficulty", "easy", "--seed", "3", "--delay", "0"])
    assert args.difficulty == "easy"
    assert args.seed == 3
    assert args.delay == 0.0
